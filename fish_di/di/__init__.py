"""
FISH_DI Dependency Injection Module

Token-based DI container with two instance scopes:
- SINGLETON: One instance per container
- TRANSIENT: New instance on every resolution

Usage:
    from fish_di.di import ClassProvider, Container, Scope, injectable

    @injectable(Logger)
    class Service:
        def __init__(self, logger):
            self.logger = logger

    container = Container()
    container.register(Logger, ClassProvider(Logger, Scope.SINGLETON))
    service = container.resolve(Service)
"""

from .container import Container, Inject, inject
from .graph import DependencyNode, build_dependency_tree, render_tree
from .metadata import (
    DependencyMetadataStore,
    default_metadata_store,
    get_dependencies,
    injectable,
)
from .providers import ClassProvider, FactoryProvider, Provider, ValueProvider
from .scopes import Scope
from .tokens import Symbol, Token, token_name

__all__ = [
    "Container",
    "inject",
    "Inject",
    "Scope",
    "Provider",
    "ValueProvider",
    "FactoryProvider",
    "ClassProvider",
    "DependencyMetadataStore",
    "default_metadata_store",
    "get_dependencies",
    "injectable",
    "Symbol",
    "Token",
    "token_name",
    "DependencyNode",
    "build_dependency_tree",
    "render_tree",
]
