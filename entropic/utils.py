"""Shared helpers: character n-gram windows and filesystem operations."""

from __future__ import annotations

from pathlib import Path

from nltk.util import ngrams


def sliding(string: str, n: int) -> list[str]:
    """Return every contiguous substring of ``string`` of length ``n``.

    Windows overlap with stride 1 and keep left-to-right order. A string
    shorter than ``n`` yields an empty list.

    Examples
    --------
    >>> sliding("01234", 2)
    ['01', '12', '23', '34']
    """

    return ["".join(gram) for gram in ngrams(string, n)]


def ensure_dir(path: Path) -> None:
    """Create directory ``path`` and parents if they don't exist."""

    path.mkdir(parents=True, exist_ok=True)
