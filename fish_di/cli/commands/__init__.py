"""CLI commands for FISH_DI."""

from .check import check
from .tree import tree

__all__ = ["check", "tree"]
