from __future__ import annotations

from pathlib import Path
import json

import click

from entropic.commands import load_model, model_option


@click.command(name="info")
@model_option
def info(model_path: Path) -> None:
    """Print size, total weight and n-gram count of a dumped model."""

    model = load_model(model_path)
    click.echo(json.dumps(model.to_dict(), indent=2))
