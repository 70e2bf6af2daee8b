"""jsx-stylesheet CLI entry point: Click group with subcommands."""

import logging

import click

from jsx_stylesheet import __version__


@click.group()
@click.version_option(version=__version__, prog_name="jsx-stylesheet")
@click.option("-v", "--verbose", is_flag=True, help="Log what the transform does.")
def cli(verbose: bool) -> None:
    """jsx-stylesheet - resolve JSX class names against imported stylesheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from jsx_stylesheet.cli.inspect import inspect  # noqa: E402
from jsx_stylesheet.cli.resolve import resolve  # noqa: E402
from jsx_stylesheet.cli.transform import transform  # noqa: E402

cli.add_command(transform)
cli.add_command(inspect)
cli.add_command(resolve)
