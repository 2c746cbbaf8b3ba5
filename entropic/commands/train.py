"""Train an n-gram model on line-oriented text and dump its counts.

Examples
--------
  entropic train corpus.txt --size 3 --output model.tsv
  entropic train weighted.tsv --with-multiplier --output model.tsv
  cat more.txt | entropic train - --model model.tsv --output model.tsv
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Optional
import io

import click
from click.core import ParameterSource

from entropic.commands import load_model
from entropic.config import Config
from entropic.models import Model


@click.command(name="train")
@click.argument("source", type=click.File("r", encoding=Config.ENCODING))
@click.option(
    "size",
    "--size",
    "-n",
    type=click.IntRange(min=1),
    default=Config.DEFAULT_NGRAM_SIZE,
    show_default=True,
    help="N-gram size for a new model (ignored with --model)",
)
@click.option(
    "with_multiplier",
    "--with-multiplier",
    is_flag=True,
    help="Input lines are <text><TAB><integer multiplier>",
)
@click.option(
    "model_path",
    "--model",
    "-m",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    required=False,
    help="Continue training an existing dumped model",
)
@click.option(
    "output",
    "--output",
    "-o",
    type=click.Path(path_type=Path, dir_okay=False, allow_dash=True),
    default="-",
    show_default=True,
    help="Where to dump the trained counts",
)
def train(
    source: IO[str],
    size: int,
    with_multiplier: bool,
    model_path: Optional[Path],
    output: Path,
) -> None:
    """Train a character n-gram model from SOURCE (use - for stdin)."""

    model = load_model(model_path) if model_path is not None else Model(size)
    size_source = click.get_current_context().get_parameter_source("size")
    if model_path is not None and size_source != ParameterSource.DEFAULT and size != model.size:
        click.secho(
            f"Warning: --size {size} ignored; existing model has size {model.size}.",
            fg="yellow",
            err=True,
        )

    try:
        if with_multiplier:
            model.train_with_multiplier(source)
        else:
            model.train(source)
    except ValueError as e:
        raise click.ClickException(f"Malformed training input: {e}")

    if str(output) == "-":
        buffer = io.StringIO()
        model.dump(buffer)
        click.echo(buffer.getvalue(), nl=False)
        return
    model.save(output)
    click.echo(
        f"Wrote {len(model.counter)} n-grams (size={model.size}, total={model.counter.total}) to {output}",
        err=True,
    )
