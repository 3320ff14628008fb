# src/hanmorph/core/pos.py
"""
Part-of-speech categories.

A closed enumeration; category-dependent behaviour (conjugation, attachment,
phrase membership) hangs off the lookup sets below rather than subclasses.
"""

from enum import Enum


class Pos(str, Enum):
    # Word-level classes
    Noun = "Noun"
    ProperNoun = "ProperNoun"
    Verb = "Verb"
    Adjective = "Adjective"
    Adverb = "Adverb"
    Determiner = "Determiner"
    Exclamation = "Exclamation"
    Josa = "Josa"
    Eomi = "Eomi"
    PreEomi = "PreEomi"
    Conjunction = "Conjunction"
    Modifier = "Modifier"
    VerbPrefix = "VerbPrefix"
    NounPrefix = "NounPrefix"
    Suffix = "Suffix"

    # Closed-class chunks
    Space = "Space"
    Punctuation = "Punctuation"
    Hashtag = "Hashtag"
    ScreenName = "ScreenName"
    CashTag = "CashTag"
    URL = "URL"
    Email = "Email"
    Number = "Number"
    Alpha = "Alpha"
    Foreign = "Foreign"
    KoreanParticle = "KoreanParticle"
    Unknown = "Unknown"
    Others = "Others"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: "str | Pos") -> "Pos":
        """Resolve a category by name, case-insensitively."""
        if isinstance(name, Pos):
            return name
        if name is None:
            raise ValueError("POS category must not be None")
        key = str(name).strip().lower()
        for pos in cls:
            if pos.value.lower() == key:
                return pos
        raise ValueError(f"Unknown POS category: {name}")


# Categories backed by a dictionary partition.
DICTIONARY_POS: tuple[Pos, ...] = (
    Pos.Noun,
    Pos.ProperNoun,
    Pos.Verb,
    Pos.Adjective,
    Pos.Adverb,
    Pos.Determiner,
    Pos.Exclamation,
    Pos.Josa,
    Pos.Eomi,
    Pos.PreEomi,
    Pos.Conjunction,
    Pos.Modifier,
    Pos.VerbPrefix,
    Pos.NounPrefix,
    Pos.Suffix,
    Pos.KoreanParticle,
)

# Stored as dictionary forms (받다) and matched through conjugation.
CONJUGATED_POS = frozenset({Pos.Verb, Pos.Adjective})

NOUN_POS = frozenset({Pos.Noun, Pos.ProperNoun})

# A Josa or Suffix may follow these without penalty.
NOMINAL_POS = frozenset({Pos.Noun, Pos.ProperNoun, Pos.Suffix, Pos.Alpha, Pos.Number, Pos.Foreign})

# Single-syllable tokens of these classes are suspicious.
OPEN_CLASS_POS = frozenset({
    Pos.Noun, Pos.ProperNoun, Pos.Verb, Pos.Adjective,
    Pos.Adverb, Pos.Determiner, Pos.Exclamation,
})

# Morphemes that glue onto the preceding word.
DEPENDENT_POS = frozenset({Pos.Josa, Pos.Eomi, Pos.PreEomi, Pos.Suffix, Pos.Punctuation})

PREFIX_POS = frozenset({Pos.NounPrefix, Pos.VerbPrefix})


def dictionary_pos(category: "str | Pos") -> Pos:
    """Parse a category and check that it has a dictionary partition."""
    pos = Pos.parse(category)
    if pos not in DICTIONARY_POS:
        raise ValueError(f"{pos} has no dictionary partition")
    return pos
