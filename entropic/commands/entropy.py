from __future__ import annotations

from pathlib import Path
from typing import IO

import click

from entropic.commands import load_model, model_option
from entropic.config import Config


@click.command(name="entropy")
@model_option
@click.option(
    "queries",
    "--input",
    "-i",
    type=click.File("r", encoding=Config.ENCODING),
    default="-",
    show_default=True,
    help="Query lines to score when no STRING arguments are given",
)
@click.argument("strings", nargs=-1)
def entropy(model_path: Path, queries: IO[str], strings: tuple[str, ...]) -> None:
    """Print the entropy of each STRING, or of each input line if none given.

    Output lines are <entropy><TAB><string>. Higher values mean the string is
    less probable under the model.

    Examples:
      entropic entropy --model model.tsv "hello world"
      entropic entropy --model model.tsv < queries.txt
    """

    model = load_model(model_path)
    texts = list(strings) if strings else [line.strip() for line in queries]
    for text in texts:
        click.echo(f"{model.entropy(text):.6f}\t{text}")
