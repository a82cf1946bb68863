"""
Entry point for the ``fish-di`` command.

This module is part of FISH_DI - Dependency Injection.
"""

import logging

import click

from .. import __version__
from .commands import check, tree


@click.group()
@click.version_option(__version__, prog_name="fish-di")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """Inspect and check dependency wiring."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)


cli.add_command(tree)
cli.add_command(check)


if __name__ == "__main__":
    cli()
