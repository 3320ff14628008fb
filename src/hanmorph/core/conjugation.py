# src/hanmorph/core/conjugation.py
"""
Conjugation of Verb and Adjective stems.

Surface forms are generated from dictionary forms ("받다") by attaching
ending tails of four kinds:

  vowel tails      attach to the 아/어 form       받아, 받았다, 해서
  consonant tails  attach to the bare stem        받고, 받지, 받는
  으 tails         insert 으 after a final        받은, 받으면, 간, 가면
  formal tails     ㅂ니다 / 습니다                 갑니다, 받습니다

A tail that starts with a jamo ("ㄴ", "ㄹ", "ㅆ") merges into the preceding
syllable as its final consonant. Irregular stems are listed explicitly.
"""

import logging
import threading
from dataclasses import dataclass
from functools import lru_cache

from hanmorph.core import hangul
from hanmorph.core.dictionary import DictionarySnapshot
from hanmorph.core.pos import Pos


logger = logging.getLogger(__name__)

BOTH = frozenset({Pos.Verb, Pos.Adjective})
VERB = frozenset({Pos.Verb})
ADJ = frozenset({Pos.Adjective})

VOWEL_TAILS = (
    ("", BOTH), ("서", BOTH), ("도", BOTH), ("요", BOTH), ("야", BOTH), ("야지", BOTH),
    ("라", VERB), ("ㅆ다", BOTH), ("ㅆ어", BOTH), ("ㅆ어요", BOTH), ("ㅆ고", BOTH),
    ("ㅆ지", BOTH), ("ㅆ지만", BOTH), ("ㅆ습니다", BOTH), ("ㅆ는데", BOTH),
    ("ㅆ던", BOTH), ("ㅆ을", BOTH), ("ㅆ으면", BOTH), ("ㅆ네", BOTH), ("ㅆ니", BOTH),
    ("ㅆ겠다", BOTH), ("ㅆ구나", BOTH),
)

CONSONANT_TAILS = (
    ("다", BOTH), ("고", BOTH), ("지", BOTH), ("지만", BOTH), ("지요", BOTH), ("죠", BOTH),
    ("게", BOTH), ("기", BOTH), ("네", BOTH), ("네요", BOTH), ("던", BOTH), ("거나", BOTH),
    ("겠다", BOTH), ("겠어", BOTH), ("겠어요", BOTH), ("겠습니다", BOTH), ("겠지", BOTH),
    ("겠네", BOTH), ("더라", BOTH), ("구나", ADJ), ("도록", VERB), ("다가", VERB),
    ("는", VERB), ("는데", VERB), ("는구나", VERB), ("자", VERB), ("니", VERB),
)

EU_TAILS = (
    ("ㄴ", BOTH), ("ㄹ", BOTH), ("ㅁ", BOTH), ("면", BOTH), ("니까", BOTH), ("며", BOTH),
    ("세요", BOTH), ("십니다", BOTH), ("ㄹ까", BOTH), ("ㄹ수록", BOTH), ("ㄹ지", BOTH),
    ("ㄴ지", BOTH), ("ㄴ데", ADJ), ("셨다", VERB), ("셨어요", VERB), ("시고", VERB),
    ("ㄹ게", VERB), ("ㄹ게요", VERB), ("ㄹ래", VERB), ("ㄹ래요", VERB), ("러", VERB),
    ("려고", VERB), ("ㄴ다", VERB),
)

FORMAL_TAILS = (
    ("니다", BOTH), ("니까", BOTH), ("시다", VERB),
)

# ㅂ drops and becomes 우 / 워 (와 for the two listed).
B_IRREGULAR = frozenset({
    "아름답다", "춥다", "덥다", "쉽다", "어렵다", "눕다", "돕다", "곱다", "가깝다",
    "무겁다", "가볍다", "귀엽다", "반갑다", "고맙다", "즐겁다", "맵다", "밉다",
    "부끄럽다", "사랑스럽다", "자연스럽다", "새롭다", "외롭다", "괴롭다", "아깝다",
    "더럽다", "시끄럽다", "무섭다", "두렵다", "굽다",
})
B_IRREGULAR_WA = frozenset({"돕다", "곱다"})

# ㄷ becomes ㄹ before vowels.
D_IRREGULAR = frozenset({"듣다", "걷다", "묻다", "싣다", "깨닫다", "붇다"})

# ㅅ drops before vowels.
S_IRREGULAR = frozenset({"낫다", "짓다", "붓다", "잇다", "젓다"})

# ㅎ drops; the vowel form fronts to ㅐ.
H_IRREGULAR = frozenset({
    "그렇다", "이렇다", "저렇다", "어떻다", "빨갛다", "파랗다", "노랗다", "하얗다",
    "까맣다", "동그랗다",
})

# 르 stems that only drop ㅡ.
REU_REGULAR = frozenset({"따르다", "치르다", "들르다", "우러르다"})

BRIGHT_VOWELS = frozenset("ㅏㅗㅑ")

EXISTENTIAL = ("있다", "없다")


@dataclass(frozen=True)
class Conjugation:
    stem: str
    pos: Pos
    length: int


def _harmony(vowel: str) -> str:
    return "아" if vowel in BRIGHT_VOWELS else "어"


def _attach(prefix: str, tail: str) -> str | None:
    if not tail:
        return prefix
    head = tail[0]
    if hangul.is_jamo(head):
        last = prefix[-1]
        if hangul.has_final(last):
            return None
        return prefix[:-1] + hangul.with_final(last, head) + tail[1:]
    return prefix + tail


def _vowel_bases(stem: str, body: str) -> list[str]:
    """Stem forms ending in the 아/어 syllable."""
    head, last = body[:-1], body[-1]
    initial, vowel, final = hangul.decompose(last)

    if last == "하":
        return [head + "해", head + "하여"]
    if stem in H_IRREGULAR:
        fronted = {"ㅓ": "ㅐ", "ㅏ": "ㅐ", "ㅑ": "ㅒ"}.get(vowel, vowel)
        return [head + hangul.compose(initial, fronted)]
    if stem in B_IRREGULAR:
        glide = "와" if stem in B_IRREGULAR_WA else "워"
        return [head + hangul.with_final(last, "") + glide]
    if stem in D_IRREGULAR:
        return [head + hangul.with_final(last, "ㄹ") + _harmony(vowel)]
    if stem in S_IRREGULAR:
        return [head + hangul.with_final(last, "") + _harmony(vowel)]
    if last == "르" and stem not in REU_REGULAR and head and not hangul.has_final(head[-1]):
        prev = head[-1]
        ending = "라" if hangul.vowel_of(prev) in BRIGHT_VOWELS else "러"
        return [head[:-1] + hangul.with_final(prev, "ㄹ") + ending]
    if final:
        return [body + _harmony(vowel)]

    # Open final syllable: contraction.
    if vowel in "ㅏㅓㅕㅒㅖ":
        return [body]
    if vowel in "ㅐㅔ":
        return [body, body + "어"]
    if vowel == "ㅗ":
        return [head + hangul.compose(initial, "ㅘ"), body + "아"]
    if vowel == "ㅜ":
        return [head + hangul.compose(initial, "ㅝ"), body + "어"]
    if vowel == "ㅣ":
        return [head + hangul.compose(initial, "ㅕ"), body + "어"]
    if vowel == "ㅚ":
        return [head + hangul.compose(initial, "ㅙ"), body + "어"]
    if vowel == "ㅡ":
        bright = bool(head) and hangul.vowel_of(head[-1]) in BRIGHT_VOWELS
        return [head + hangul.compose(initial, "ㅏ" if bright else "ㅓ")]
    return [body + "어"]


def _eu_form(stem: str, body: str, tail: str) -> str | None:
    head, last = body[:-1], body[-1]
    final = hangul.final_of(last)

    # Present declarative: 간다, 만든다, but 먹는다.
    if tail == "ㄴ다" and final:
        if final == "ㄹ":
            return _attach(head + hangul.with_final(last, ""), tail)
        return body + "는다"
    if stem in B_IRREGULAR:
        return _attach(head + hangul.with_final(last, "") + "우", tail)
    if stem in H_IRREGULAR:
        return _attach(head + hangul.with_final(last, ""), tail)
    if stem in D_IRREGULAR:
        return _attach(head + hangul.with_final(last, "ㄹ") + "으", tail)
    if stem in S_IRREGULAR:
        return _attach(head + hangul.with_final(last, "") + "으", tail)
    if final == "ㄹ":
        first = tail[0]
        if first == "ㄹ":
            return body + tail[1:]
        if first == "ㅁ":
            return head + hangul.with_final(last, "ㄻ") + tail[1:]
        if first == "ㄴ" or (hangul.is_syllable(first) and hangul.decompose(first)[0] in "ㄴㅅ"):
            return _attach(head + hangul.with_final(last, ""), tail)
        return body + tail
    if final:
        return _attach(body + "으", tail)
    return _attach(body, tail)


def _consonant_form(body: str, tail: str) -> str:
    head, last = body[:-1], body[-1]
    if hangul.final_of(last) == "ㄹ" and hangul.decompose(tail[0])[0] == "ㄴ":
        return head + hangul.with_final(last, "") + tail
    return body + tail


def _formal_form(body: str, tail: str) -> str:
    head, last = body[:-1], body[-1]
    final = hangul.final_of(last)
    if final == "ㄹ" or not final:
        return head + hangul.with_final(last, "ㅂ") + tail
    if tail == "시다":
        return body + "읍" + tail
    return body + "습" + tail


@lru_cache(maxsize=8192)
def conjugate(stem: str, pos: Pos) -> frozenset[str]:
    """All surface forms of a dictionary form. Empty for malformed stems."""
    if len(stem) < 2 or not stem.endswith("다") or not hangul.is_hangul(stem):
        return frozenset()
    body = stem[:-1]
    # 있다/없다 take verb endings (있는, 없는) although listed as adjectives.
    if stem.endswith(EXISTENTIAL):
        pos = Pos.Verb
    forms = set()

    for base in _vowel_bases(stem, body):
        for tail, allowed in VOWEL_TAILS:
            if pos in allowed:
                form = _attach(base, tail)
                if form:
                    forms.add(form)

    for tail, allowed in CONSONANT_TAILS:
        if pos in allowed:
            forms.add(_consonant_form(body, tail))

    for tail, allowed in EU_TAILS:
        if pos in allowed:
            form = _eu_form(stem, body, tail)
            if form:
                forms.add(form)

    for tail, allowed in FORMAL_TAILS:
        if pos in allowed:
            forms.add(_formal_form(body, tail))

    return frozenset(forms)


class ConjugationExpander:
    """
    Matches inflected spans against the Verb/Adjective partitions.

    The surface -> stems index is rebuilt when the partitions of the
    snapshot are not the ones it was built from.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._built: tuple | None = None  # (verbs, adjectives, index, longest)

    def expand(self, stem: str, pos: Pos | str) -> frozenset[str]:
        pos = Pos.parse(pos)
        if pos not in BOTH:
            raise ValueError(f"{pos} does not conjugate")
        return conjugate(stem, pos)

    def _index(self, snapshot: DictionarySnapshot) -> tuple[dict, int]:
        verbs, adjectives = snapshot[Pos.Verb], snapshot[Pos.Adjective]
        built = self._built
        if built is not None and built[0] is verbs and built[1] is adjectives:
            return built[2], built[3]

        with self._lock:
            built = self._built
            if built is not None and built[0] is verbs and built[1] is adjectives:
                return built[2], built[3]

            index: dict[str, list[tuple[str, Pos]]] = {}
            for pos, stems in ((Pos.Verb, verbs), (Pos.Adjective, adjectives)):
                for stem in sorted(stems):
                    for form in conjugate(stem, pos):
                        index.setdefault(form, []).append((stem, pos))
            frozen = {form: tuple(stems) for form, stems in index.items()}
            longest = max((len(form) for form in frozen), default=0)
            self._built = (verbs, adjectives, frozen, longest)
            logger.debug("Rebuilt conjugation index: %d surface forms", len(frozen))
            return frozen, longest

    def stems_of(self, surface: str, snapshot: DictionarySnapshot) -> tuple[tuple[str, Pos], ...]:
        index, _ = self._index(snapshot)
        return index.get(surface, ())

    def is_form(self, surface: str, snapshot: DictionarySnapshot) -> bool:
        return bool(self.stems_of(surface, snapshot))

    def match(self, text: str, start: int, end: int, snapshot: DictionarySnapshot) -> list[Conjugation]:
        """Every prefix of text[start:end] that is an inflected dictionary stem."""
        index, longest = self._index(snapshot)
        matches = []
        for stop in range(start + 1, min(end, start + longest) + 1):
            for stem, pos in index.get(text[start:stop], ()):
                matches.append(Conjugation(stem, pos, stop - start))
        return matches
