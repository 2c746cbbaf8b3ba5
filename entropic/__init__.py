"""
entropic: Estimate how surprising a string is under a character n-gram model.

Counts fixed-size character n-grams from training text, scores new strings by
their base-2 log-probability, and reads/writes a flat tab-separated table of
n-gram weights.
"""

__all__ = [
    "Config",
    "DEFAULT_NGRAM_SIZE",
    "UNSEEN_NGRAM_WEIGHT",
    "NGramCounter",
    "Model",
    "Prediction",
    "sliding",
    "__version__",
]

__version__ = "1.0.0"

from entropic.config import Config, DEFAULT_NGRAM_SIZE, UNSEEN_NGRAM_WEIGHT
from entropic.models import Model, NGramCounter, Prediction
from entropic.utils import sliding
