"""
Utility functions for CLI commands.

This module provides shared utilities for CLI operations.

This module is part of FISH_DI - Dependency Injection.
"""

import importlib
from typing import Any

import click


def load_target(spec: str) -> Any:
    """
    Import an object given as ``package.module:attribute``.

    The attribute part may be dotted to reach nested attributes.

    Args:
        spec: Import specification

    Returns:
        The imported object

    Raises:
        click.ClickException: If the spec is malformed or cannot be imported
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.ClickException(f"Expected MODULE:ATTRIBUTE, got '{spec}'")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise click.ClickException(f"Cannot import module '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise click.ClickException(f"'{module_name}' has no attribute '{attr_path}'") from e

    return target
