"""Tablescope CLI entry point: Click group with subcommands."""

import logging

import click

from tablescope import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tablescope")
@click.option("--verbose", "-v", is_flag=True, help="Log rewriting details to stderr")
def cli(verbose: bool) -> None:
    """Tablescope - scope rendered table styles for embedding in documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from tablescope.cli.scope import scope  # noqa: E402
from tablescope.cli.inspect import inspect  # noqa: E402

cli.add_command(scope)
cli.add_command(inspect)
