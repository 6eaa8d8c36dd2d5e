from __future__ import annotations

import math
from dataclasses import dataclass


# Average adult reading speed.
WORDS_PER_MINUTE = 200


@dataclass(frozen=True)
class TextMetrics:
    words: int
    characters: int
    reading_minutes: int

    def as_dict(self) -> dict[str, int]:
        return {
            "word_count": self.words,
            "char_count": self.characters,
            "reading_time": self.reading_minutes,
        }


def word_count(text: str | None) -> int:
    """Number of maximal runs of non-whitespace characters in ``text``.

    ``None``, empty and whitespace-only input count as zero words. Tokens are
    not inspected, so a lone punctuation mark is still a word.
    """
    if not text:
        return 0
    # str.split() with no separator trims and collapses whitespace runs.
    return len(text.split())


def char_count(text: str | None) -> int:
    """Number of characters in ``text`` that are not whitespace."""
    if not text:
        return 0
    return sum(1 for ch in text if not ch.isspace())


def _minutes_for(words: int) -> int:
    return math.ceil(words / WORDS_PER_MINUTE)


def reading_time(text: str | None) -> int:
    """Estimated reading time in whole minutes, always rounded up."""
    return _minutes_for(word_count(text))


def analyze(text: str | None) -> TextMetrics:
    words = word_count(text)
    return TextMetrics(
        words=words,
        characters=char_count(text),
        reading_minutes=_minutes_for(words),
    )
