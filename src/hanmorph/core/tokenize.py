# src/hanmorph/core/tokenize.py
"""
Tokenization: raw text -> POS-tagged morpheme tokens.

Stage 1: Lattice. Closed-class recognizers cut the text into chunks
         (spaces, numbers, URLs, hashtags, ...). Every Hangul chunk gets
         candidate edges from the dictionary, the conjugation expander and
         an unknown-noun fallback.
Stage 2: Path selection. Viterbi over (position, previous tag) picks the
         cheapest gap-free path from 0 to len(text).
"""

import logging
import re
from dataclasses import dataclass

from hanmorph.core.conjugation import ConjugationExpander
from hanmorph.core.dictionary import DictionarySnapshot, DictionaryStore
from hanmorph.core.pos import (
    CONJUGATED_POS, DICTIONARY_POS, NOMINAL_POS, NOUN_POS, OPEN_CLASS_POS, Pos,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    text: str
    pos: Pos
    offset: int  # code-point offset in the input
    length: int
    stem: str | None = None
    unknown: bool = False

    @property
    def end(self) -> int:
        return self.offset + self.length

    def __str__(self) -> str:
        stem = f"({self.stem})" if self.stem else ""
        mark = "*" if self.unknown else ""
        return f"{self.text}{mark}({self.pos.value}{stem}: {self.offset}, {self.length})"

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "pos": self.pos.value,
            "offset": self.offset,
            "length": self.length,
            "stem": self.stem,
            "unknown": self.unknown,
        }


# === Stage 1: lattice ===

KOREAN = None  # recognizer slot analyzed with the dictionary

RECOGNIZERS: tuple[tuple[Pos | None, re.Pattern], ...] = (
    (Pos.URL, re.compile(r"(?:https?://|www\.)[^\s가-힣]+", re.IGNORECASE)),
    (Pos.Email, re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")),
    (Pos.ScreenName, re.compile(r"@\w+")),
    (Pos.Hashtag, re.compile(r"#\w+")),
    (Pos.CashTag, re.compile(r"\$[A-Za-z]+")),
    (Pos.Space, re.compile(r"\s+")),
    (Pos.Number, re.compile(r"\d+(?:[.,]\d+)*%?")),
    (Pos.KoreanParticle, re.compile(r"[ㄱ-ㆎ]+")),
    (KOREAN, re.compile(r"[가-힣]+")),
    (Pos.Alpha, re.compile(r"[A-Za-z]+")),
    (Pos.Foreign, re.compile(r"[^\W\d_ㄱ-ㆎ가-힣A-Za-z]+")),
    (Pos.Punctuation, re.compile(r"[^\w\s]+")),
    (Pos.Others, re.compile(r".", re.DOTALL)),
)

# Partitions matched literally inside Hangul chunks, in tie-break order.
LITERAL_POS = tuple(
    pos for pos in DICTIONARY_POS
    if pos not in CONJUGATED_POS and pos is not Pos.KoreanParticle
)


@dataclass(frozen=True)
class Candidate:
    start: int
    end: int
    pos: Pos
    stem: str | None = None
    unknown: bool = False
    closed: bool = False  # produced by a closed-class recognizer

    @property
    def length(self) -> int:
        return self.end - self.start

    def to_token(self, text: str) -> Token:
        return Token(
            text=text[self.start:self.end],
            pos=self.pos,
            offset=self.start,
            length=self.length,
            stem=self.stem,
            unknown=self.unknown,
        )


def chunk(text: str) -> list[tuple[int, int, Pos | None]]:
    """Maximal-munch chunks; the first recognizer that matches wins."""
    chunks = []
    i = 0
    while i < len(text):
        for pos, pattern in RECOGNIZERS:
            m = pattern.match(text, i)
            if m and m.end() > i:
                chunks.append((i, m.end(), pos))
                i = m.end()
                break
    return chunks


def _korean_candidates(
    text: str,
    start: int,
    end: int,
    snapshot: DictionarySnapshot,
    expander: ConjugationExpander,
    max_word_length: int,
) -> list[Candidate]:
    limit = min(end, start + max_word_length)
    found = []

    for stop in range(start + 1, limit + 1):
        word = text[start:stop]
        for pos in LITERAL_POS:
            if snapshot.lookup(pos, word):
                found.append(Candidate(start, stop, pos))

    for conj in expander.match(text, start, limit, snapshot):
        found.append(Candidate(start, start + conj.length, conj.pos, stem=conj.stem))

    for stop in range(start + 1, limit + 1):
        found.append(Candidate(start, stop, Pos.Noun, unknown=True))

    # Longest first; sort is stable so declaration order breaks the rest.
    found.sort(key=lambda c: -c.length)
    return found


def build_lattice(
    text: str,
    snapshot: DictionarySnapshot,
    expander: ConjugationExpander,
    max_word_length: int = 16,
) -> list[list[Candidate]]:
    """Outgoing edges for every start position 0..len(text)-1."""
    lattice: list[list[Candidate]] = [[] for _ in range(len(text))]
    for start, end, pos in chunk(text):
        if pos is KOREAN:
            for i in range(start, end):
                lattice[i] = _korean_candidates(text, i, end, snapshot, expander, max_word_length)
        else:
            lattice[start] = [Candidate(start, end, pos, closed=True)]
    return lattice


# === Stage 2: path selection ===

# Weights are exact binary fractions so that equal paths tie exactly.
TOKEN_COST = 1.0
UNKNOWN_COST = 1.0
UNKNOWN_CHAR_COST = 1.0
SINGLE_CHAR_COST = 1.0
NOUN_SPLIT_COST = 0.5
ORPHAN_COST = 2.0

POS_COST = {
    Pos.Adverb: 0.125,
    Pos.Conjunction: 0.125,
    Pos.Determiner: 0.25,
    Pos.Modifier: 0.25,
    Pos.Suffix: 0.25,
    Pos.NounPrefix: 0.25,
    Pos.VerbPrefix: 0.25,
    Pos.Exclamation: 0.5,
    Pos.Eomi: 0.5,
    Pos.PreEomi: 0.5,
}

BOUNDARY = (None, False)


def _bigram_cost(prev: Pos | None, pos: Pos) -> float:
    if pos is Pos.Josa:
        if prev in NOMINAL_POS:
            return -0.5
        return 0.25 if prev is Pos.Josa else ORPHAN_COST
    if pos is Pos.Suffix:
        return -0.5 if prev in NOUN_POS else ORPHAN_COST
    if pos in (Pos.Eomi, Pos.PreEomi):
        return -0.25 if prev in CONJUGATED_POS or prev is Pos.PreEomi else ORPHAN_COST
    if prev in (Pos.Modifier, Pos.NounPrefix, Pos.Determiner):
        if pos in NOUN_POS:
            return -0.25
        return 0.0 if prev is Pos.Determiner else 1.0
    if prev is Pos.VerbPrefix:
        return -0.25 if pos in CONJUGATED_POS else 1.0
    return 0.0


def edge_cost(cand: Candidate, prev: tuple[Pos | None, bool]) -> float:
    if cand.closed:
        return TOKEN_COST

    prev_pos, prev_single_noun = prev
    cost = TOKEN_COST + POS_COST.get(cand.pos, 0.0)
    if cand.unknown:
        cost += UNKNOWN_COST + UNKNOWN_CHAR_COST * cand.length
    if cand.length == 1 and cand.pos in OPEN_CLASS_POS:
        cost += SINGLE_CHAR_COST
        if prev_single_noun and cand.pos in NOUN_POS:
            cost += NOUN_SPLIT_COST
    return cost + _bigram_cost(prev_pos, cand.pos)


def _tag(cand: Candidate) -> tuple[Pos, bool]:
    return cand.pos, cand.length == 1 and cand.pos in NOUN_POS


def select_path(lattice: list[list[Candidate]], length: int) -> list[Candidate]:
    """
    Lowest-cost gap-free path from 0 to length.

    best[j][tag] holds (score, backpointer). A relaxation replaces a held
    entry only when strictly cheaper, so ties keep the first path found.
    """
    if length == 0:
        return []

    best: list[dict] = [{} for _ in range(length + 1)]
    best[0][BOUNDARY] = (0.0, None)

    for i in range(length):
        for tag, (score, _) in list(best[i].items()):
            for cand in lattice[i]:
                total = score + edge_cost(cand, tag)
                slot = best[cand.end]
                next_tag = _tag(cand)
                held = slot.get(next_tag)
                if held is None or total < held[0]:
                    slot[next_tag] = (total, (i, tag, cand))

    final = best[length]
    tag = min(final, key=lambda t: final[t][0])
    path = []
    position = length
    while position > 0:
        _, (start, prev_tag, cand) = best[position][tag]
        path.append(cand)
        position, tag = start, prev_tag
    path.reverse()
    return path


class Tokenizer:
    def __init__(
        self,
        store: DictionaryStore,
        expander: ConjugationExpander,
        max_word_length: int = 16,
    ):
        self.store = store
        self.expander = expander
        self.max_word_length = max_word_length

    def tokenize(self, text: str) -> list[Token]:
        if text is None:
            raise ValueError("text must not be None")
        if not text:
            return []

        snapshot = self.store.snapshot()
        lattice = build_lattice(text, snapshot, self.expander, self.max_word_length)
        path = select_path(lattice, len(text))
        tokens = [cand.to_token(text) for cand in path]
        logger.debug("Tokenized %d chars into %d tokens", len(text), len(tokens))
        return tokens


def tokens_to_strings(tokens: list[Token], keep_space: bool = False) -> list[str]:
    """Token texts, optionally dropping Space tokens."""
    return [t.text for t in tokens if keep_space or t.pos is not Pos.Space]
