"""
Hangul syllable arithmetic.

A precomposed syllable is 0xAC00 + (initial * 21 + vowel) * 28 + final.
Jamo are exchanged as compatibility jamo ("ㄱ", "ㅏ") throughout.
"""

SYLLABLE_BASE = 0xAC00
SYLLABLE_LAST = 0xD7A3

INITIALS = "ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ"
VOWELS = "ㅏㅐㅑㅒㅓㅔㅕㅖㅗㅘㅙㅚㅛㅜㅝㅞㅟㅠㅡㅢㅣ"
FINALS = (
    "", "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ",
    "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

_FINAL_INDEX = {jamo: i for i, jamo in enumerate(FINALS) if jamo}


def is_syllable(char: str) -> bool:
    return len(char) == 1 and SYLLABLE_BASE <= ord(char) <= SYLLABLE_LAST


def is_jamo(char: str) -> bool:
    return len(char) == 1 and 0x3131 <= ord(char) <= 0x318E


def is_hangul(text: str) -> bool:
    return bool(text) and all(is_syllable(c) for c in text)


def decompose(char: str) -> tuple[str, str, str]:
    """Split a syllable into (initial, vowel, final); final is "" when open."""
    if not is_syllable(char):
        raise ValueError(f"Not a Hangul syllable: {char!r}")
    code = ord(char) - SYLLABLE_BASE
    initial, rest = divmod(code, 21 * 28)
    vowel, final = divmod(rest, 28)
    return INITIALS[initial], VOWELS[vowel], FINALS[final]


def compose(initial: str, vowel: str, final: str = "") -> str:
    code = (INITIALS.index(initial) * 21 + VOWELS.index(vowel)) * 28
    if final:
        code += _FINAL_INDEX[final]
    return chr(SYLLABLE_BASE + code)


def final_of(char: str) -> str:
    return decompose(char)[2] if is_syllable(char) else ""


def vowel_of(char: str) -> str:
    return decompose(char)[1] if is_syllable(char) else ""


def has_final(char: str) -> bool:
    return bool(final_of(char))


def with_final(char: str, final: str) -> str:
    """Replace the final consonant of a syllable ("" removes it)."""
    initial, vowel, _ = decompose(char)
    return compose(initial, vowel, final)

