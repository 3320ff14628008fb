# src/hanmorph/core/phrases.py
"""
Noun phrase extraction from a token sequence.

A chunk is a run of nouns, optionally led by adnominal modifiers
(아름다운 트위터), joined by single spaces. Each chunk yields its full span
and every noun inside it; hashtags come last.
"""

from dataclasses import dataclass

from hanmorph.core import hangul
from hanmorph.core.pos import Pos
from hanmorph.core.tokenize import Token


MIN_PHRASE_CHARS = 2

PHRASE_NOUN_POS = frozenset({Pos.Noun, Pos.ProperNoun, Pos.Alpha, Pos.Number})
MODIFIER_POS = frozenset({Pos.Determiner, Pos.Modifier, Pos.NounPrefix})

# Slang and profanity dropped when spam filtering is on.
SPAM_NOUNS = frozenset({
    "시발", "씨발", "씨팔", "시팔", "병신", "븅신", "개새끼", "새끼", "좆", "존나", "졸라",
    "미친놈", "미친년", "지랄", "엿", "섹스", "야동", "대출", "광고", "홍보", "무료",
})


@dataclass(frozen=True)
class Phrase:
    text: str
    offset: int
    length: int
    pos: Pos = Pos.Noun

    @property
    def end(self) -> int:
        return self.offset + self.length

    def __str__(self) -> str:
        return f"{self.text}({self.pos.value}: {self.offset}, {self.length})"

    def to_dict(self) -> dict:
        return {"text": self.text, "pos": self.pos.value, "offset": self.offset, "length": self.length}


def _is_adnominal(token: Token) -> bool:
    """Verb/Adjective forms that modify a following noun (아름다운, 먹을, 먹는)."""
    if token.pos in MODIFIER_POS:
        return True
    if token.pos not in (Pos.Verb, Pos.Adjective):
        return False
    last = token.text[-1]
    return last == "는" or hangul.final_of(last) in ("ㄴ", "ㄹ")


def _is_single_space(token: Token) -> bool:
    return token.pos is Pos.Space and token.text == " "


def _chunks(tokens: list[Token]) -> list[list[Token]]:
    """Maximal [modifier* noun+] runs, spaces allowed between members."""
    chunks = []
    current: list[Token] = []

    def close():
        # Drop trailing spaces and modifiers that never reached a noun.
        while current and current[-1].pos not in PHRASE_NOUN_POS:
            current.pop()
        if current:
            chunks.append(list(current))
        current.clear()

    for token in tokens:
        if token.pos in PHRASE_NOUN_POS:
            current.append(token)
        elif _is_adnominal(token):
            # A modifier after a noun starts a new phrase.
            if any(t.pos in PHRASE_NOUN_POS for t in current):
                close()
            current.append(token)
        elif _is_single_space(token) and current and current[-1].pos is not Pos.Space:
            current.append(token)
        else:
            close()
    close()
    return chunks


def _span(tokens: list[Token], pos: Pos = Pos.Noun) -> Phrase:
    first, last = tokens[0], tokens[-1]
    return Phrase("".join(t.text for t in tokens), first.offset, last.end - first.offset, pos)


def _long_enough(phrase: Phrase) -> bool:
    return len(phrase.text.replace(" ", "")) >= MIN_PHRASE_CHARS


def _is_spam(tokens: list[Token]) -> bool:
    return any(t.text in SPAM_NOUNS for t in tokens)


def extract_phrases(
    tokens: list[Token],
    filter_spam: bool = False,
    include_hashtags: bool = True,
) -> list[Phrase]:
    if tokens is None:
        raise ValueError("tokens must not be None")

    full: list[Phrase] = []
    parts: list[Phrase] = []
    for chunk in _chunks(tokens):
        if filter_spam and _is_spam(chunk):
            continue
        whole = _span(chunk)
        full.append(whole)
        for token in chunk:
            if token.pos not in PHRASE_NOUN_POS:
                continue
            part = _span([token])
            if (part.offset, part.length) != (whole.offset, whole.length):
                parts.append(part)

    hashtags = []
    if include_hashtags:
        hashtags = [_span([t], Pos.Hashtag) for t in tokens if t.pos is Pos.Hashtag]

    seen = set()
    phrases = []
    for phrase in full + parts + hashtags:
        key = (phrase.offset, phrase.length)
        if key in seen or not _long_enough(phrase):
            continue
        seen.add(key)
        phrases.append(phrase)
    return phrases
