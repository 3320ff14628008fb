# tests/test_phrases.py
"""Tests for noun phrase extraction."""

import pytest

from hanmorph.core.phrases import Phrase, extract_phrases
from hanmorph.core.pos import Pos
from hanmorph.core.processor import KoreanProcessor
from hanmorph.core.tokenize import Token


TEXT = "아름다운 트위터를 만들어 보자. 시발 #욕하지_말자"


@pytest.fixture
def tokens():
    return KoreanProcessor().tokenize(TEXT)


# === Filters ===

def test_extract_with_spam_filter(tokens):
    phrases = extract_phrases(tokens, filter_spam=True, include_hashtags=True)

    assert phrases == [
        Phrase("아름다운 트위터", 0, 8),
        Phrase("트위터", 5, 3),
        Phrase("#욕하지_말자", 21, 7, Pos.Hashtag),
    ]


def test_extract_without_spam_filter(tokens):
    phrases = extract_phrases(tokens, filter_spam=False, include_hashtags=True)

    assert [p.text for p in phrases] == ["아름다운 트위터", "시발", "트위터", "#욕하지_말자"]
    assert Phrase("시발", 18, 2) in phrases


def test_extract_without_hashtags(tokens):
    phrases = extract_phrases(tokens, filter_spam=True, include_hashtags=False)

    assert all(p.pos is Pos.Noun for p in phrases)


def test_phrase_str(tokens):
    phrases = extract_phrases(tokens)
    assert str(phrases[0]) == "아름다운 트위터(Noun: 0, 8)"


# === Chunking ===

def test_compound_nouns():
    tokens = [
        Token("평창", Pos.Noun, 0, 2),
        Token("올림픽", Pos.Noun, 2, 3),
        Token("에", Pos.Josa, 5, 1),
    ]

    assert extract_phrases(tokens) == [
        Phrase("평창올림픽", 0, 5),
        Phrase("평창", 0, 2),
        Phrase("올림픽", 2, 3),
    ]


def test_single_char_phrases_dropped():
    tokens = [Token("책", Pos.Noun, 0, 1), Token("을", Pos.Josa, 1, 1)]
    assert extract_phrases(tokens) == []


def test_trailing_modifier_dropped():
    tokens = [
        Token("강아지", Pos.Noun, 0, 3),
        Token(" ", Pos.Space, 3, 1),
        Token("착한", Pos.Adjective, 4, 2, stem="착하다"),
    ]

    assert extract_phrases(tokens) == [Phrase("강아지", 0, 3)]


def test_double_space_breaks_chunk():
    tokens = [
        Token("강아지", Pos.Noun, 0, 3),
        Token("  ", Pos.Space, 3, 2),
        Token("고양이", Pos.Noun, 5, 3),
    ]

    assert extract_phrases(tokens) == [Phrase("강아지", 0, 3), Phrase("고양이", 5, 3)]


def test_empty_and_none():
    assert extract_phrases([]) == []
    with pytest.raises(ValueError):
        extract_phrases(None)
