# src/hanmorph/core/processor.py
"""
The analysis engine.

Owns one dictionary store and one conjugation index, and exposes every
operation on top of them. Instances are safe to share between threads.
"""

import logging
from typing import Iterable

from hanmorph.core.config import Settings, get_settings
from hanmorph.core.conjugation import ConjugationExpander
from hanmorph.core.detokenize import Detokenizer
from hanmorph.core.dictionary import DictionaryStore
from hanmorph.core.normalize import Normalizer
from hanmorph.core.phrases import Phrase, extract_phrases
from hanmorph.core.pos import Pos
from hanmorph.core.sentence import Sentence, split_sentences
from hanmorph.core.tokenize import Token, Tokenizer, tokens_to_strings


logger = logging.getLogger(__name__)


class KoreanProcessor:
    def __init__(self, store: DictionaryStore | None = None, settings: Settings | None = None):
        settings = settings or get_settings()
        self.store = store or DictionaryStore.from_directory(settings.dictionary_dir)
        self.expander = ConjugationExpander()
        self.tokenizer = Tokenizer(self.store, self.expander, settings.max_word_length)
        self.normalizer = Normalizer(self.store, self.expander)
        self.detokenizer = Detokenizer(self.store, self.expander)
        logger.info("Korean processor ready with %d dictionary words", len(self.store))

    # === Text operations ===

    def normalize(self, text: str) -> str:
        return self.normalizer.normalize(text)

    def tokenize(self, text: str) -> list[Token]:
        return self.tokenizer.tokenize(text)

    def split_sentences(self, text: str) -> list[Sentence]:
        return split_sentences(text)

    def extract_phrases(
        self,
        tokens: list[Token],
        filter_spam: bool = False,
        include_hashtags: bool = True,
    ) -> list[Phrase]:
        return extract_phrases(tokens, filter_spam, include_hashtags)

    def detokenize(self, morphemes: list[str]) -> str:
        return self.detokenizer.detokenize(morphemes)

    @staticmethod
    def tokens_to_strings(tokens: list[Token], keep_space: bool = False) -> list[str]:
        return tokens_to_strings(tokens, keep_space)

    # === Dictionary ===

    def add_words(self, category: str | Pos, words: Iterable[str]) -> None:
        self.store.add(category, words)

    def remove_words(self, category: str | Pos, words: Iterable[str]) -> None:
        self.store.remove(category, words)

    def add_nouns(self, words: Iterable[str]) -> None:
        self.store.add(Pos.Noun, words)

    def lookup(self, category: str | Pos, word: str) -> bool:
        return self.store.lookup(category, word)
