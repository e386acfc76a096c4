"""KSS CLI entry point: Click group with subcommands."""

import logging

import click

from kss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="kss")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """KSS - selector parsing and matching for spatial scene graphs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from kss.cli.validate import validate  # noqa: E402
from kss.cli.inspect import inspect  # noqa: E402
from kss.cli.match import match  # noqa: E402

cli.add_command(validate)
cli.add_command(inspect)
cli.add_command(match)
