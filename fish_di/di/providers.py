"""
Service Providers for Dependency Injection

A provider describes how to produce the value for a token. There are exactly
three kinds, each its own class, so the container dispatches on the type of
the provider rather than probing which fields are set:

- ValueProvider: a precomputed value, returned as-is
- FactoryProvider: a callable taking the container, invoked on every resolve
- ClassProvider: a class built through the dependency graph, optionally cached
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

from .scopes import Scope

if TYPE_CHECKING:
    from .container import Container

T = TypeVar("T")


@dataclass(frozen=True)
class ValueProvider(Generic[T]):
    """
    Provider that returns a stored value verbatim.

    Any value is accepted, including None.
    """

    value: T

    @property
    def kind(self) -> str:
        return "value"


@dataclass(frozen=True)
class FactoryProvider(Generic[T]):
    """
    Provider that uses a custom factory function.

    The factory is called with the container as its only argument on every
    resolution, allowing manual dependency resolution and scope control.

    Usage:
        def create_api(container: Container) -> Api:
            return Api(container.resolve("cfg")["api_key"])

        container.register(API, FactoryProvider(create_api))
    """

    factory: Callable[["Container"], T]

    @property
    def kind(self) -> str:
        return "factory"


@dataclass(frozen=True)
class ClassProvider(Generic[T]):
    """
    Provider that constructs a class, injecting its declared dependencies.

    Attributes:
        cls: The class to instantiate
        scope: SINGLETON caches the instance per token, TRANSIENT (default)
               builds a new one on every resolve
    """

    cls: type[T]
    scope: Scope = Scope.TRANSIENT

    @property
    def kind(self) -> str:
        return "class"

    @property
    def is_singleton(self) -> bool:
        return self.scope is Scope.SINGLETON


Provider = Union[ValueProvider[Any], FactoryProvider[Any], ClassProvider[Any]]


__all__ = [
    "Provider",
    "ValueProvider",
    "FactoryProvider",
    "ClassProvider",
]
