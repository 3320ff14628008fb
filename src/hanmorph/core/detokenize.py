"""
Detokenization: morphemes -> naturally spaced text.

Each morpheme is classified with a dictionary lookup (no lattice) and
either starts a new space-separated segment or glues onto the last one.
"""

import logging
import re

from hanmorph.core import hangul
from hanmorph.core.conjugation import ConjugationExpander
from hanmorph.core.dictionary import DictionarySnapshot, DictionaryStore
from hanmorph.core.pos import CONJUGATED_POS, DEPENDENT_POS, NOUN_POS, PREFIX_POS, Pos


logger = logging.getLogger(__name__)

# Light verbs that turn a preceding noun into a predicate (평온 + 하게).
LIGHT_VERBS = ("하다", "되다", "시키다", "당하다")

# Auxiliary predicates written after a connective 아/어 or 고 form (누워 + 있는).
AUXILIARY_VERBS = ("있다", "없다", "계시다", "주다", "보다", "버리다", "두다", "놓다", "내다", "싶다")

CONNECTIVE_VOWELS = frozenset("ㅏㅓㅘㅝㅐㅕㅙ")

_PUNCTUATION = re.compile(r"^[^\w\s]+$")

ATTACH = "attach"
PREFIX = "prefix"
WORD = "word"

# previous_role values besides the three above
NOUN = "noun"
JOSA = "josa"


class Detokenizer:
    def __init__(self, store: DictionaryStore, expander: ConjugationExpander):
        self.store = store
        self.expander = expander

    def _stems(self, morpheme: str, snapshot: DictionarySnapshot) -> set[str]:
        stems = {stem for stem, _ in self.expander.stems_of(morpheme, snapshot)}
        # A bare stem ("있") is written without its ending.
        for pos in CONJUGATED_POS:
            if snapshot.lookup(pos, morpheme + "다"):
                stems.add(morpheme + "다")
        return stems

    def _follows_connective(self, previous: str | None) -> bool:
        if not previous:
            return False
        last = previous[-1]
        if last == "고":
            return True
        return hangul.is_syllable(last) and not hangul.has_final(last) \
            and hangul.vowel_of(last) in CONNECTIVE_VOWELS

    def classify(self, morpheme: str, previous: str | None, previous_role: str | None,
                 snapshot: DictionarySnapshot) -> str:
        if _PUNCTUATION.match(morpheme):
            return ATTACH
        # Split-off endings such as ㅆ다 or ㄴ glue onto their syllable.
        if hangul.is_jamo(morpheme[0]):
            return ATTACH

        categories = set(snapshot.categories_of(morpheme))
        if categories & PREFIX_POS:
            return PREFIX
        stems = self._stems(morpheme, snapshot)
        if categories & (DEPENDENT_POS - {Pos.Punctuation}) and not categories & NOUN_POS:
            # 학교에 + 가: after a josa, a josa that is also a predicate starts a word.
            if not (previous_role == JOSA and stems):
                return ATTACH

        if stems & set(LIGHT_VERBS) and previous_role == NOUN:
            return ATTACH
        if stems & set(AUXILIARY_VERBS) and self._follows_connective(previous):
            return ATTACH
        return WORD

    def detokenize(self, morphemes: list[str]) -> str:
        if morphemes is None:
            raise ValueError("morphemes must not be None")

        snapshot = self.store.snapshot()
        segments: list[str] = []
        previous: str | None = None
        previous_role: str | None = None
        glue_next = False

        for morpheme in morphemes:
            if morpheme is None:
                raise ValueError("morphemes must not contain None")
            if not morpheme or morpheme.isspace():
                continue

            role = self.classify(morpheme, previous, previous_role, snapshot)
            if segments and (glue_next or role == ATTACH):
                segments[-1] += morpheme
            else:
                segments.append(morpheme)

            glue_next = role == PREFIX
            previous = morpheme
            previous_role = role
            if role == WORD and any(snapshot.lookup(pos, morpheme) for pos in NOUN_POS):
                previous_role = NOUN
            elif role == ATTACH and snapshot.lookup(Pos.Josa, morpheme):
                previous_role = JOSA

        text = " ".join(segments)
        logger.debug("Detokenized %d morphemes into %d segments", len(morphemes), len(segments))
        return text
