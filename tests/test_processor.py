# tests/test_processor.py
"""End-to-end tests through the engine facade."""

import threading

import pytest

from hanmorph.core.config import Settings
from hanmorph.core.pos import Pos
from hanmorph.core.processor import KoreanProcessor


@pytest.fixture
def processor():
    return KoreanProcessor()


# === Dictionary ===

def test_add_and_remove_words(processor):
    processor.add_words(Pos.Noun, {"평창올림픽"})
    tokens = processor.tokenize("평창올림픽에")
    assert [(t.text, t.pos) for t in tokens] == [("평창올림픽", Pos.Noun), ("에", Pos.Josa)]

    processor.remove_words("Noun", {"평창올림픽"})
    tokens = processor.tokenize("평창올림픽에")
    assert processor.tokens_to_strings(tokens) == ["평창", "올림픽", "에"]
    assert processor.lookup(Pos.Noun, "평창")
    assert processor.lookup(Pos.Noun, "올림픽")


def test_add_nouns(processor):
    assert not processor.lookup(Pos.Noun, "춍춍")

    processor.add_nouns({"춍춍", "챵챵챵"})

    assert processor.lookup(Pos.Noun, "춍춍")
    tokens = processor.tokenize("춍춍춍춍챵챵챵")
    assert processor.tokens_to_strings(tokens) == ["춍춍", "춍춍", "챵챵챵"]


def test_invalid_category(processor):
    with pytest.raises(ValueError):
        processor.add_words("Hashtag", {"#태그"})


def test_processors_are_independent():
    first, second = KoreanProcessor(), KoreanProcessor()
    first.add_nouns({"챵챵챵"})
    assert not second.lookup(Pos.Noun, "챵챵챵")


def test_settings_limit_word_length():
    processor = KoreanProcessor(settings=Settings(max_word_length=2))
    processor.add_nouns({"버버리코트"})

    tokens = processor.tokenize("버버리코트")

    assert "버버리코트" not in processor.tokens_to_strings(tokens)


# === Pipelines ===

def test_normalize_then_tokenize(processor):
    text = processor.normalize("힘들겟씀다")
    tokens = processor.tokenize(text)

    assert text == "힘들겠습니다"
    assert [(t.text, t.pos, t.stem) for t in tokens] == [("힘들겠습니다", Pos.Adjective, "힘들다")]


def test_round_trip(processor):
    tokens = processor.tokenize("착한강아지상을 받은 루루")
    morphemes = processor.tokens_to_strings(tokens)

    assert morphemes == ["착한", "강아지", "상", "을", "받은", "루루"]
    assert processor.detokenize(morphemes) == "착한 강아지상을 받은 루루"


def test_split_then_tokenize(processor):
    text = "가을이다! 루루야!"
    for sentence in processor.split_sentences(text):
        tokens = processor.tokenize(sentence.text)
        assert "".join(t.text for t in tokens) == sentence.text


def test_phrases(processor):
    tokens = processor.tokenize("아름다운 트위터를 만들어 보자. 시발 #욕하지_말자")

    spam_free = [p.text for p in processor.extract_phrases(tokens, True, True)]
    everything = [p.text for p in processor.extract_phrases(tokens, False, True)]

    assert "시발" not in spam_free
    assert "시발" in everything
    assert "아름다운 트위터" in spam_free


# === Concurrency ===

def test_concurrent_edits_and_reads(processor):
    errors = []

    def writer(i):
        try:
            processor.add_nouns({f"춍{i}챵"})
        except Exception as e:
            errors.append(e)

    def reader():
        try:
            for _ in range(20):
                tokens = processor.tokenize("착한강아지상을 받은 루루")
                assert tokens[1].text == "강아지"
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=writer, args=(i,)) for i in range(20)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert all(processor.lookup(Pos.Noun, f"춍{i}챵") for i in range(20))
