"""Fixed-size character n-gram model for estimating string entropy.

A `Model` owns a single `NGramCounter` and scores strings by the base-2
log-probability of their n-grams. There is no back-off across sizes: every
query n-gram is looked up in the one counter, and n-grams never seen in
training receive a flat smoothing weight (``UNSEEN_NGRAM_WEIGHT``, 0.5 by
default).

Example
-------
```python
import io

model = Model(2)
model.train(io.StringIO("test\nbest\n"))
model.predict("tester")
# Prediction(log_prob_total=-11.92..., log_prob_average=-2.38..., size=5)
model.entropy("tester")
# 2.38...
```

The flat serialization written by `dump` and read by `read` is one
``<size>\\t<ngram>\\t<weight>`` record per line. Training text containing
tabs or newlines cannot be represented in this format.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import IO, Any, Iterable, Optional
import logging

import numpy as np

from entropic.config import Config, FIELD_SEPARATOR, UNSEEN_NGRAM_WEIGHT
from entropic.models.counter import NGramCounter
from entropic.utils import ensure_dir, sliding


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Prediction:
    """Aggregate log-probability of a string under a model.

    ``log_prob_average`` is NaN when the string produced no n-grams.
    """

    log_prob_total: float
    log_prob_average: float
    size: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class Model:
    """Character n-gram model of a single fixed size.

    Parameters
    ----------
    size:
        N-gram length. Must be >= 1.
    unseen_weight:
        Weight assumed for n-grams absent from the counter when computing
        log-probabilities.
    """

    def __init__(self, size: int, *, unseen_weight: float = UNSEEN_NGRAM_WEIGHT) -> None:
        if size < 1:
            raise ValueError(f"Model size must be >= 1, got {size}.")
        self.size: int = size
        self.unseen_weight: float = unseen_weight
        self.counter: NGramCounter = NGramCounter(size)

    # Training -----------------------------------------------------------------
    def update_with_multiplier(self, string: str, multiplier: float) -> None:
        self.counter.update_with_multiplier(string, multiplier)

    def update(self, string: str) -> None:
        self.counter.update(string)

    def train(self, io: Iterable[str]) -> None:
        """Train on ``io`` line by line, one string per line."""

        lines = 0
        for line in io:
            self.update(line.strip())
            lines += 1
        _LOGGER.debug("Trained on %d lines (total weight %s)", lines, self.counter.total)

    def train_with_multiplier(self, io: Iterable[str]) -> None:
        """Train on ``io`` lines of the form ``<text>\\t<multiplier>``.

        The multiplier must be an integer. A malformed line raises
        ``ValueError``; lines before it remain counted.
        """

        lines = 0
        for line in io:
            text, multiplier = line.strip().split(FIELD_SEPARATOR)
            self.update_with_multiplier(text, int(multiplier))
            lines += 1
        _LOGGER.debug("Trained on %d weighted lines (total weight %s)", lines, self.counter.total)

    # Inference ----------------------------------------------------------------
    def log_prob(self, key: Optional[str]) -> float:
        """Return the base-2 log-probability of the n-gram ``key``.

        Returns ``-inf`` for an untrained model or an empty key. Unseen
        n-grams are scored with ``unseen_weight`` in place of a count.
        """

        if self.counter.total == 0 or not key:
            return float("-inf")
        weight = self.counter.count(key, self.unseen_weight)
        # Zero weights give -inf and negative weights NaN instead of raising
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.log2(weight) - np.log2(self.counter.total))

    def predict(self, string: str) -> Prediction:
        """Return total and average log-probability over the n-grams of ``string``."""

        ngrams = sliding(string, self.size)
        log_prob_total = sum((self.log_prob(ngram) for ngram in ngrams), 0.0)
        with np.errstate(divide="ignore", invalid="ignore"):
            log_prob_average = float(np.divide(log_prob_total, len(ngrams)))
        return Prediction(
            log_prob_total=log_prob_total,
            log_prob_average=log_prob_average,
            size=len(ngrams),
        )

    def entropy(self, string: str) -> float:
        """Negative average log-probability per n-gram (bits)."""

        return -self.predict(string).log_prob_average

    # Serialization ------------------------------------------------------------
    def dump(self, io: IO[str]) -> None:
        """Write one ``<size>\\t<ngram>\\t<weight>`` line per stored n-gram."""

        sep = FIELD_SEPARATOR
        for ngram, weight in self.counter.items():
            io.write(f"{self.size}{sep}{ngram}{sep}{weight}\n")

    @classmethod
    def read(cls, io: Iterable[str]) -> Optional["Model"]:
        """Reconstruct a model from records written by `dump`.

        The model size is taken from the first record. Each record overwrites
        the stored weight of its n-gram and adds to the total. Blank lines are
        skipped. Returns ``None`` when ``io`` holds no records.
        """

        model: Optional[Model] = None
        records = 0
        for line in io:
            line = line.strip()
            if not line:
                continue
            ngram_size, ngram, weight = line.split(FIELD_SEPARATOR)
            size = int(ngram_size)
            if model is None:
                model = cls(size)
            elif size != model.size:
                _LOGGER.warning(
                    "Record %d has n-gram size %d but model size is %d; loading anyway",
                    records + 1,
                    size,
                    model.size,
                )
            model.counter.set_count(ngram, float(weight))
            records += 1
        _LOGGER.debug("Read %d n-gram records", records)
        return model

    def save(self, path: Path) -> None:
        """Dump the model to the text file at ``path``."""

        ensure_dir(path.parent)
        with path.open("w", encoding=Config.ENCODING) as f:
            self.dump(f)
        return None

    @classmethod
    def load(cls, path: Path) -> "Model":
        """Read a model previously written by `save` or `dump`."""

        with path.open("r", encoding=Config.ENCODING) as f:
            model = cls.read(f)
        if model is None:
            raise ValueError(f"No n-gram records found in {path}")
        return model

    # Metadata -----------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        return {
            "model_type": "ngram",
            "size": self.size,
            "total": self.counter.total,
            "unique_ngrams": len(self.counter),
            "unseen_weight": self.unseen_weight,
        }
