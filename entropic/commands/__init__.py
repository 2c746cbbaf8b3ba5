"""Click subcommands for the entropic CLI."""

from __future__ import annotations

from pathlib import Path

import click

from entropic.models import Model


def load_model(path: Path) -> Model:
    """Load a dumped model, converting read failures into Click errors."""

    try:
        return Model.load(path)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Could not load model from {path}: {e}")


model_option = click.option(
    "model_path",
    "--model",
    "-m",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    required=True,
    help="Dumped n-gram table to score against",
)
