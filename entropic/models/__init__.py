"""Character n-gram counting and entropy models."""

from __future__ import annotations

from entropic.models.counter import NGramCounter
from entropic.models.model import Model, Prediction

__all__ = [
    "NGramCounter",
    "Model",
    "Prediction",
]
