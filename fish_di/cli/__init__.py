"""
Command line interface for FISH_DI.

This module is part of FISH_DI - Dependency Injection.
"""

from .main import cli

__all__ = ["cli"]
