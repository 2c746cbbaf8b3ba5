"""Weighted counts of fixed-size character n-grams."""

from __future__ import annotations

from typing import Iterator

from entropic.utils import sliding


class NGramCounter:
    """Accumulated weights for n-grams of a single size.

    Parameters
    ----------
    size:
        Character length of every n-gram this counter holds.

    Notes
    -----
    ``total`` is maintained incrementally rather than recomputed from
    ``counts``. Keys read from serialized data are not checked against
    ``size``.
    """

    def __init__(self, size: int) -> None:
        self.size: int = size
        self.counts: dict[str, float] = {}
        self.total: float = 0

    def update_with_multiplier(self, string: str, multiplier: float) -> None:
        """Add ``multiplier`` to the weight of every n-gram in ``string``."""

        for ngram in sliding(string, self.size):
            self.counts[ngram] = self.counts.get(ngram, 0) + multiplier
            self.total += multiplier

    def update(self, string: str) -> None:
        self.update_with_multiplier(string, 1)

    def count(self, ngram: str, default: float) -> float:
        """Return the stored weight for ``ngram`` or ``default`` if absent."""

        return self.counts.get(ngram, default)

    def set_count(self, ngram: str, weight: float) -> None:
        """Overwrite the weight of ``ngram`` and add ``weight`` to the total."""

        self.counts[ngram] = weight
        self.total += weight

    def items(self) -> Iterator[tuple[str, float]]:
        return iter(self.counts.items())

    def __len__(self) -> int:
        return len(self.counts)
