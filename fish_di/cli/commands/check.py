"""
Check command for CLI.

Resolves a class in a container and reports whether wiring succeeds.

This module is part of FISH_DI - Dependency Injection.
"""

import sys

import click

from ...config import ContainerConfig
from ...di.container import Container
from ...di.tokens import token_name
from ...exceptions import DiError
from ..utils import load_target


@click.command()
@click.argument("target")
@click.option(
    "--container",
    "container_spec",
    default=None,
    help="Container to resolve from, as MODULE:ATTRIBUTE (defaults to a fresh one)",
)
def check(target: str, container_spec: str | None) -> None:
    """
    Resolve a token and report the outcome.

    TARGET: The token to resolve, as MODULE:ATTRIBUTE

    Examples:
        fish-di check myapp.services:UserService
        fish-di check myapp.services:UserService --container myapp.wiring:container
    """
    token = load_target(target)

    if container_spec:
        container = load_target(container_spec)
        if not isinstance(container, Container):
            raise click.ClickException(f"'{container_spec}' is not a Container")
    else:
        container = Container(config=ContainerConfig(name="cli", metrics_enabled=False))

    try:
        instance = container.resolve(token)
    except DiError as e:
        click.echo(click.style(f"❌ {token_name(token)} cannot be resolved", fg="red"))
        click.echo(click.style(f"Error: {e.message}", fg="red"))
        sys.exit(1)

    click.echo(
        click.style(
            f"✅ {token_name(token)} resolved to {type(instance).__qualname__}", fg="green"
        )
    )
