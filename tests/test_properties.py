# tests/test_properties.py
"""Properties that hold for any input, checked over a seeded random corpus."""

import random

import pytest

from hanmorph.core.processor import KoreanProcessor


FRAGMENTS = [
    "착한", "강아지", "상을", "받은", "루루", "야", "오리가", "사진기", "하기로", "했다",
    "힘들겟씀다", "먹었어염", "그래욬", "갔슴니다", "받았습니따", "좋아아아", "하하하하하",
    "춍춍", "챵챵챵", "평창올림픽에", "백여마리",
    "ㅋ", "ㅋㅋㅋㅋㅋ", "ㅠㅠ", "아아아", "갘",
    " ", " ", " ", "  ", "\n", "\t",
    ".", "!", "?", "...", "!!!", "…", ",",
    "\"", "“", "”", "(", ")", "[", "]",
    "#태그", "@lulu", "$AAPL", "www.naver.com", "lulu@example.com",
    "123", "3.5%", "abc", "平和", "😀",
]


def random_text(seed: int) -> str:
    rng = random.Random(seed)
    return "".join(rng.choice(FRAGMENTS) for _ in range(rng.randint(0, 40)))


CORPUS = [random_text(seed) for seed in range(30)]


@pytest.fixture(scope="module")
def processor():
    return KoreanProcessor()


@pytest.mark.parametrize("text", CORPUS)
def test_tokens_cover_text(processor, text):
    position = 0
    for t in processor.tokenize(text):
        assert t.offset == position
        assert t.length > 0
        assert text[t.offset:t.end] == t.text
        position = t.end
    assert position == len(text)


@pytest.mark.parametrize("text", CORPUS)
def test_normalize_is_idempotent(processor, text):
    once = processor.normalize(text)
    assert processor.normalize(once) == once


@pytest.mark.parametrize("text", CORPUS)
def test_normalized_text_tokenizes_with_cover(processor, text):
    normalized = processor.normalize(text)
    tokens = processor.tokenize(normalized)
    assert "".join(t.text for t in tokens) == normalized


@pytest.mark.parametrize("text", CORPUS)
def test_sentence_gaps_are_whitespace(processor, text):
    rest = list(text)
    for s in processor.split_sentences(text):
        assert s.text
        assert not s.text[0].isspace() and not s.text[-1].isspace()
        assert text[s.offset:s.end] == s.text
        rest[s.offset:s.end] = [" "] * s.length
    assert "".join(rest).strip() == ""
