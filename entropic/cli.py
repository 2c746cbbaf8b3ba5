"""Command-line interface for entropic using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click
from entropic import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("verbose", "--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """entropic: character n-gram entropy estimation for strings."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from entropic.commands.train import train  # noqa: E402
from entropic.commands.predict import predict  # noqa: E402
from entropic.commands.entropy import entropy  # noqa: E402
from entropic.commands.info import info  # noqa: E402

cli.add_command(train)
cli.add_command(predict)
cli.add_command(entropy)
cli.add_command(info)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
