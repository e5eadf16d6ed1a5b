"""Split text into characters and words for staggered animation."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["SplitChar", "SplitWord", "SplitText"]

_WORD = re.compile(r"\S+")


@dataclass(frozen=True)
class SplitChar:
    """One character of the text and the word it belongs to."""

    ch: str
    index: int
    word_index: int


@dataclass(frozen=True)
class SplitWord:
    """One whitespace-separated word; ``char_end`` is exclusive."""

    text: str
    index: int
    char_start: int
    char_end: int


class SplitText:
    """Characters and words of a string, with index metadata.

    Whitespace between words is attributed to the preceding word; leading
    whitespace belongs to word 0.
    """

    def __init__(self, text: str) -> None:
        self._original = text
        chars: list[SplitChar] = []
        words: list[SplitWord] = []
        position = 0

        for word_index, match in enumerate(_WORD.finditer(text)):
            gap_owner = max(word_index - 1, 0)
            chars.extend(
                SplitChar(text[i], i, gap_owner) for i in range(position, match.start())
            )
            chars.extend(
                SplitChar(text[i], i, word_index) for i in range(match.start(), match.end())
            )
            words.append(SplitWord(match.group(), word_index, match.start(), match.end()))
            position = match.end()

        trailing_owner = max(len(words) - 1, 0)
        chars.extend(SplitChar(text[i], i, trailing_owner) for i in range(position, len(text)))

        self._chars = tuple(chars)
        self._words = tuple(words)

    def chars(self) -> tuple[SplitChar, ...]:
        """Every character, spaces included."""
        return self._chars

    def words(self) -> tuple[SplitWord, ...]:
        """Every word."""
        return self._words

    def char_count(self) -> int:
        """Number of characters, spaces included."""
        return len(self._chars)

    def word_count(self) -> int:
        return len(self._words)

    def original(self) -> str:
        """The text that was split."""
        return self._original