"""
Tree command for CLI.

Prints the recorded dependency tree of a class.

This module is part of FISH_DI - Dependency Injection.
"""

import inspect
import sys

import click

from ...di.graph import build_dependency_tree, render_tree
from ..utils import load_target


@click.command()
@click.argument("target")
def tree(target: str) -> None:
    """
    Show the dependency tree of an injectable class.

    TARGET: The class, as MODULE:CLASS

    Examples:
        fish-di tree myapp.services:UserService
    """
    cls = load_target(target)
    if not inspect.isclass(cls):
        raise click.ClickException(f"'{target}' is not a class")

    root = build_dependency_tree(cls)
    click.echo(render_tree(root))

    if root.has_cycle():
        click.echo(click.style("Dependency cycle detected", fg="red"), err=True)
        sys.exit(1)
