# src/hanmorph/core/sentence.py
"""
Split text into sentences.

A run of terminal punctuation closes a sentence when it is followed by
whitespace or the end of text and no bracket or quote is open. Spans are
trimmed: whitespace between sentences belongs to no sentence.
"""

from dataclasses import dataclass


TERMINALS = frozenset(".!?…")
CLOSING_QUOTES = frozenset("\"'”’」』")
BRACKETS = {"(": ")", "[": "]", "{": "}", "「": "」", "『": "』", "“": "”", "‘": "’"}
CLOSERS = {close: open_ for open_, close in BRACKETS.items()}
TOGGLE_QUOTES = frozenset('"')


@dataclass(frozen=True)
class Sentence:
    text: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    def __str__(self) -> str:
        return f"{self.text}({self.offset},{self.end})"

    def to_dict(self) -> dict:
        return {"text": self.text, "offset": self.offset, "length": self.length}


def _boundaries(text: str) -> list[int]:
    """End offsets (exclusive) of every closing punctuation run."""
    ends = []
    stack: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        if char in TOGGLE_QUOTES:
            if stack and stack[-1] == char:
                stack.pop()
            else:
                stack.append(char)
        elif char in BRACKETS:
            stack.append(char)
        elif char in CLOSERS:
            if stack and stack[-1] == CLOSERS[char]:
                stack.pop()
        if char in TERMINALS:
            j = i
            while j < n and text[j] in TERMINALS:
                j += 1
            k = j
            while k < n and text[k] in CLOSING_QUOTES:
                if text[k] in TOGGLE_QUOTES and stack and stack[-1] == text[k]:
                    stack.pop()
                elif text[k] in CLOSERS and stack and stack[-1] == CLOSERS[text[k]]:
                    stack.pop()
                k += 1
            if not stack and (k == n or text[k].isspace()):
                ends.append(k)
            i = k
            continue
        i += 1
    return ends


def split_sentences(text: str) -> list[Sentence]:
    if text is None:
        raise ValueError("text must not be None")

    sentences = []
    start = 0
    for end in _boundaries(text) + [len(text)]:
        while start < end and text[start].isspace():
            start += 1
        stop = end
        while stop > start and text[stop - 1].isspace():
            stop -= 1
        if stop > start:
            sentences.append(Sentence(text[start:stop], start, stop - start))
        start = end
    return sentences
