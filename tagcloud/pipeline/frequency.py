"""Occurrence counting for tag labels."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable

_WORD_RE = re.compile(r"\w+", re.UNICODE)


def tokenize(text: str, lowercase: bool = True) -> list[str]:
    """Split *text* into word tokens. No stop-word filtering or stemming."""
    words = _WORD_RE.findall(text)
    return [w.lower() for w in words] if lowercase else words


class FrequencyTags:
    """Label → occurrence count, remembering the order labels first appeared."""

    def __init__(self, words: Iterable[str]) -> None:
        if words is None:
            raise TypeError("words must be an iterable of labels, not None")
        self._counts = Counter(words)

    @property
    def count(self) -> int:
        """Number of distinct labels."""
        return len(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __getitem__(self, label: str) -> int:
        return self._counts[label]

    def __contains__(self, label: str) -> bool:
        return label in self._counts

    def as_dict(self) -> dict[str, int]:
        return dict(self._counts)

    def most_common(self, n: int | None = None) -> list[tuple[str, int]]:
        """(label, count) pairs, most frequent first; ties keep first-seen order."""
        return self._counts.most_common(n)
