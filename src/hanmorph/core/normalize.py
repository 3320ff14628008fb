# src/hanmorph/core/normalize.py
"""
Normalization of informal Korean text.

An ordered list of text -> text rules. Each rule leaves its own output
unchanged, so the whole pipeline is idempotent. Only Hangul is rewritten.
"""

import logging
import re

from hanmorph.core import hangul
from hanmorph.core.conjugation import ConjugationExpander
from hanmorph.core.dictionary import DictionarySnapshot, DictionaryStore
from hanmorph.core.pos import DICTIONARY_POS, NOUN_POS, Pos


logger = logging.getLogger(__name__)

MAX_REPEAT = 3
MAX_EDITS = 1

# Codas that are really the first character of a following laughter run.
EMOTION_CODAS = frozenset("ㅋ")

LAUGHTER_SYLLABLES = "하히호헤후흐크키캬쿄"

_REPEATED_JAMO = re.compile(r"([ㄱ-ㆎ])\1{%d,}" % MAX_REPEAT)
_REPEATED_LAUGHTER = re.compile(r"([%s])\1{%d,}" % (LAUGHTER_SYLLABLES, MAX_REPEAT))
_HANGUL_WORD = re.compile(r"[가-힣]+")

# Colloquial or misspelled endings, applied in order.
COLLOQUIAL_ENDINGS = (
    (re.compile(r"겟"), "겠"),
    (re.compile(r"됬"), "됐"),
    (re.compile(r"(?<=[가-힣])[씀슴]니다$"), "습니다"),
    (re.compile(r"(?<=[가-힣])[씀슴]다$"), "습니다"),
    (re.compile(r"(?<=[가-힣])[씀슴]까$"), "습니까"),
    (re.compile(r"(?<=[가-힣])읍니다$"), "습니다"),
    (re.compile(r"(?<=[가-힣])(?:염|욤|용)$"), "요"),
    (re.compile(r"(?<=[가-힣])께요$"), "게요"),
)


# === Pure rules ===

def collapse_emotion_codas(text: str) -> str:
    """그래욬ㅋㅋ -> 그래요ㅋㅋ"""
    chars = list(text)
    for i in range(len(chars) - 1):
        final = hangul.final_of(chars[i])
        if final in EMOTION_CODAS and chars[i + 1] == final:
            chars[i] = hangul.with_final(chars[i], "")
    return "".join(chars)


def _is_open_vowel_syllable(char: str) -> bool:
    if not hangul.is_syllable(char):
        return False
    initial, _, final = hangul.decompose(char)
    return initial == "ㅇ" and not final


def collapse_elongation(text: str) -> str:
    """좋아아아 -> 좋아: two or more echoes of the previous vowel are dropped."""
    out = []
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        out.append(char)
        i += 1
        if not hangul.is_syllable(char):
            continue
        vowel = hangul.vowel_of(char)
        j = i
        while j < n and _is_open_vowel_syllable(text[j]) and hangul.vowel_of(text[j]) == vowel:
            j += 1
        if j - i >= 2:
            i = j
    return "".join(out)


def collapse_repeats(text: str) -> str:
    """ㅋㅋㅋㅋㅋ -> ㅋㅋㅋ, 하하하하 -> 하하하"""
    text = _REPEATED_JAMO.sub(lambda m: m.group(1) * MAX_REPEAT, text)
    return _REPEATED_LAUGHTER.sub(lambda m: m.group(1) * MAX_REPEAT, text)


def apply_colloquial_endings(word: str) -> str:
    for pattern, replacement in COLLOQUIAL_ENDINGS:
        word = pattern.sub(replacement, word)
    return word


def edit_distance(a: str, b: str) -> int:
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        cur = [i]
        for j, cb in enumerate(b, 1):
            cur.append(min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + (ca != cb)))
        prev = cur
    return prev[-1]


RULES = (collapse_emotion_codas, collapse_elongation, collapse_repeats)


def apply_rules(text: str) -> str:
    """Run RULES until nothing changes. Every rule only shortens or drops codas."""
    while True:
        previous = text
        for rule in RULES:
            text = rule(text)
        if text == previous:
            return text


class Normalizer:
    def __init__(self, store: DictionaryStore, expander: ConjugationExpander):
        self.store = store
        self.expander = expander

    def normalize(self, text: str) -> str:
        if text is None:
            raise ValueError("text must not be None")
        return self.correct_endings(apply_rules(text), self.store.snapshot())

    def correct_endings(self, text: str, snapshot: DictionarySnapshot) -> str:
        return _HANGUL_WORD.sub(lambda m: self._correct_word(m.group(), snapshot), text)

    def is_known(self, word: str, snapshot: DictionarySnapshot) -> bool:
        if self.expander.is_form(word, snapshot):
            return True
        if any(snapshot.lookup(pos, word) for pos in DICTIONARY_POS):
            return True
        for k in range(1, len(word)):
            head, tail = word[:k], word[k:]
            # noun + josa (오리가), inflected form + josa/eomi (하기로, 보기를)
            if snapshot.lookup(Pos.Josa, tail) and any(
                snapshot.lookup(pos, head) for pos in NOUN_POS
            ):
                return True
            if self._is_particle(tail, snapshot) and self.expander.is_form(head, snapshot):
                return True
        return False

    @staticmethod
    def _is_particle(text: str, snapshot: DictionarySnapshot) -> bool:
        return snapshot.lookup(Pos.Josa, text) or snapshot.lookup(Pos.Eomi, text)

    def _correct_word(self, word: str, snapshot: DictionarySnapshot) -> str:
        if self.is_known(word, snapshot):
            return word

        rewritten = apply_colloquial_endings(word)
        if rewritten != word and self.expander.is_form(rewritten, snapshot):
            logger.debug("Normalized %s -> %s", word, rewritten)
            return rewritten

        for candidate in dict.fromkeys((rewritten, word)):
            fixed = self._nearest_form(candidate, snapshot)
            if fixed:
                logger.debug("Corrected %s -> %s", word, fixed)
                return fixed
        return word

    def _nearest_form(self, word: str, snapshot: DictionarySnapshot) -> str | None:
        """
        The unique inflected form one syllable edit away.

        The stem body and the first syllable of the ending must already be
        right (받았습니따 -> 받았습니다), so unknown nouns such as 오리가 or
        사진기 never match. A form that only drops a josa/eomi is rejected.
        """
        best_distance = MAX_EDITS + 1
        nearest: set[str] = set()
        for k in range(1, len(word) - 1):
            body, ending = word[:k], word[k:]
            anchor = word[:k + 1]
            for pos in (Pos.Verb, Pos.Adjective):
                stem = body + "다"
                if not snapshot.lookup(pos, stem):
                    continue
                for form in self.expander.expand(stem, pos):
                    if not form.startswith(anchor):
                        continue
                    if word.startswith(form) and self._is_particle(word[len(form):], snapshot):
                        continue
                    distance = edit_distance(ending, form[k:])
                    if distance < best_distance:
                        best_distance, nearest = distance, {form}
                    elif distance == best_distance:
                        nearest.add(form)
        if best_distance <= MAX_EDITS and len(nearest) == 1:
            return nearest.pop()
        return None
