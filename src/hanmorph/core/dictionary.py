# src/hanmorph/core/dictionary.py
"""
Dictionary store: per-category sets of word forms.

Partitions are frozensets swapped on write (copy-on-write), so readers
never lock and always see either the old or the new set.
Verb and Adjective partitions hold dictionary forms ("받다").
"""

import logging
import threading
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Mapping

from hanmorph.core.pos import DICTIONARY_POS, Pos, dictionary_pos


logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def _file_name(pos: Pos) -> str:
    return f"{pos.value.lower()}.txt"


def read_word_list(path: Path) -> frozenset[str]:
    """One word per line; blank lines and # comments are skipped."""
    words = set()
    for line in path.read_text(encoding="utf-8").splitlines():
        word = line.split("#", 1)[0].strip()
        if word:
            words.add(word)
    return frozenset(words)


@lru_cache(maxsize=8)
def load_base_dictionary(directory: str | None = None) -> dict[Pos, frozenset[str]]:
    """Read every <category>.txt in the directory. Missing files mean an empty partition."""
    root = Path(directory) if directory else DATA_DIR
    base = {}
    for pos in DICTIONARY_POS:
        path = root / _file_name(pos)
        base[pos] = read_word_list(path) if path.exists() else frozenset()
    logger.debug(
        "Loaded base dictionary from %s: %d words",
        root, sum(len(words) for words in base.values()),
    )
    return base


@dataclass(frozen=True)
class DictionarySnapshot:
    """Consistent view of all partitions, taken once per analysis call."""
    partitions: Mapping[Pos, frozenset[str]]

    def lookup(self, pos: Pos, word: str) -> bool:
        return word in self.partitions.get(pos, frozenset())

    def categories_of(self, word: str) -> list[Pos]:
        return [pos for pos in DICTIONARY_POS if word in self.partitions[pos]]

    def __getitem__(self, pos: Pos) -> frozenset[str]:
        return self.partitions[pos]


class DictionaryStore:
    def __init__(self, base: Mapping[Pos, Iterable[str]] | None = None):
        self._lock = threading.Lock()
        self._partitions: dict[Pos, frozenset[str]] = {
            pos: frozenset() for pos in DICTIONARY_POS
        }
        if base:
            for pos, words in base.items():
                self._partitions[dictionary_pos(pos)] = frozenset(words)

    @classmethod
    def from_directory(cls, directory: str | None = None) -> "DictionaryStore":
        return cls(load_base_dictionary(directory))

    def lookup(self, category: str | Pos, word: str) -> bool:
        pos = dictionary_pos(category)
        return word in self._partitions[pos]

    def words(self, category: str | Pos) -> frozenset[str]:
        return self._partitions[dictionary_pos(category)]

    def snapshot(self) -> DictionarySnapshot:
        # dict() copies references only; the frozensets themselves never change.
        return DictionarySnapshot(dict(self._partitions))

    def add(self, category: str | Pos, words: Iterable[str]) -> None:
        pos = dictionary_pos(category)
        new_words = _clean(words)
        with self._lock:
            current = self._partitions[pos]
            if new_words <= current:
                return
            self._partitions[pos] = current | new_words
        logger.debug("Added %d word(s) to %s", len(new_words - current), pos)

    def remove(self, category: str | Pos, words: Iterable[str]) -> None:
        pos = dictionary_pos(category)
        old_words = _clean(words)
        with self._lock:
            current = self._partitions[pos]
            if not (old_words & current):
                return
            self._partitions[pos] = current - old_words
        logger.debug("Removed %d word(s) from %s", len(old_words & current), pos)

    def __len__(self) -> int:
        return sum(len(words) for words in self._partitions.values())


def _clean(words: Iterable[str]) -> frozenset[str]:
    if words is None or isinstance(words, str):
        raise ValueError("words must be a collection of strings")
    cleaned = set()
    for word in words:
        if not isinstance(word, str):
            raise ValueError(f"Dictionary words must be strings, got {word!r}")
        word = word.strip()
        if word:
            cleaned.add(word)
    return frozenset(cleaned)
