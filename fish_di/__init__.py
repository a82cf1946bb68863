"""
FISH_DI - Dependency Injection

Token-based dependency injection container with declarative registration,
singleton and transient scopes, and recursive constructor injection.
"""

# Configuration
from .config import ContainerConfig
# Core container
from .di import (ClassProvider, Container, DependencyMetadataStore,
                 FactoryProvider, Provider, Scope, Symbol, Token,
                 ValueProvider, default_metadata_store, get_dependencies,
                 inject, injectable)
# Errors
from .exceptions import (CircularDependencyError, DiError,
                         InjectableUsageError, InvalidProviderError,
                         NoProviderError)

__version__ = "0.2.0"

__all__ = [
    # Core
    "Container",
    "Scope",
    "Token",
    "Symbol",
    # Providers
    "Provider",
    "ValueProvider",
    "FactoryProvider",
    "ClassProvider",
    # Metadata
    "DependencyMetadataStore",
    "default_metadata_store",
    "get_dependencies",
    "injectable",
    # Integration
    "inject",
    # Configuration
    "ContainerConfig",
    # Errors
    "DiError",
    "NoProviderError",
    "InjectableUsageError",
    "CircularDependencyError",
    "InvalidProviderError",
]
