from __future__ import annotations

from pathlib import Path
from typing import Any
import json
import math

import click

from entropic.commands import load_model, model_option


def _finite_or_none(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


@click.command(name="predict")
@model_option
@click.argument("strings", nargs=-1, required=True)
def predict(model_path: Path, strings: tuple[str, ...]) -> None:
    """Print total and average log2-probability for each STRING as JSON.

    Non-finite results (-inf for an untrained table, NaN for a string shorter
    than the n-gram size) are written as null.

    Examples:
      entropic predict --model model.tsv "hello world" "xqzj vvkp"
    """

    model = load_model(model_path)
    for text in strings:
        scores = {key: _finite_or_none(value) for key, value in model.predict(text).to_dict().items()}
        click.echo(json.dumps({"text": text, **scores}, allow_nan=False))
