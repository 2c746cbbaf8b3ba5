"""Centralized configuration for n-gram entropy models.

Defines immutable defaults for the n-gram size, the smoothing weight given to
unseen n-grams, and the flat serialization format so that every caller (core,
CLI, tests) agrees on the same values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Model hyperparameters
    DEFAULT_NGRAM_SIZE: int = 2
    # Weight assumed for an n-gram never seen in training
    UNSEEN_NGRAM_WEIGHT: float = 0.5

    # Serialization
    FIELD_SEPARATOR: str = "\t"
    ENCODING: str = "utf-8"


# Convenience re-exports
DEFAULT_NGRAM_SIZE: int = Config.DEFAULT_NGRAM_SIZE
UNSEEN_NGRAM_WEIGHT: float = Config.UNSEEN_NGRAM_WEIGHT
FIELD_SEPARATOR: str = Config.FIELD_SEPARATOR


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
