"""
Dependency metadata for injectable classes.

Records, per class, the ordered tokens its constructor needs. Entries are held
weakly, so recording a class never keeps it alive.

Usage:
    @injectable(Logger, "cfg")
    class Service:
        def __init__(self, logger: Logger, cfg: dict):
            ...

    get_dependencies(Service)  # (Logger, "cfg")
"""

import inspect
import logging
import weakref
from collections.abc import Callable, Iterable
from typing import Any, Optional, TypeVar

from ..exceptions import InjectableUsageError
from .tokens import Token, token_name

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type)


class DependencyMetadataStore:
    """
    Maps class identities to the ordered tokens of their constructor.

    One process-wide instance (``default_metadata_store``) backs the
    ``injectable`` decorator; containers accept another one for isolation.
    """

    def __init__(self) -> None:
        self._dependencies: "weakref.WeakKeyDictionary[type, tuple[Token, ...]]" = (
            weakref.WeakKeyDictionary()
        )

    def record(self, cls: type, tokens: Iterable[Token]) -> None:
        """
        Associate tokens with a class, replacing any previous association.

        Args:
            cls: The class whose constructor takes the dependencies
            tokens: Dependency tokens in constructor parameter order

        Raises:
            InjectableUsageError: If cls is not a class
        """
        if not inspect.isclass(cls):
            raise InjectableUsageError(
                "Dependencies can only be recorded for classes", target=cls
            )
        self._dependencies[cls] = tuple(tokens)
        logger.debug(
            f"Recorded dependencies for {cls.__qualname__}: "
            f"[{', '.join(token_name(t) for t in self._dependencies[cls])}]"
        )

    def lookup(self, cls: Any) -> tuple[Token, ...]:
        """Return the recorded tokens for cls, or an empty tuple."""
        try:
            return self._dependencies.get(cls, ())
        except TypeError:
            # Not weak-referenceable, so it can't have been recorded
            return ()

    def discard(self, cls: type) -> None:
        """Forget the dependencies recorded for cls, if any."""
        try:
            self._dependencies.pop(cls, None)
        except TypeError:
            pass

    def clear(self) -> None:
        """Forget every recorded class."""
        self._dependencies.clear()

    def __contains__(self, cls: Any) -> bool:
        try:
            return cls in self._dependencies
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._dependencies)


default_metadata_store = DependencyMetadataStore()


def get_dependencies(target: Any) -> tuple[Token, ...]:
    """
    Get the dependencies of a class from the process-wide store.

    Args:
        target: The class to get the dependencies of

    Returns:
        The recorded tokens, or an empty tuple if none were recorded
    """
    return default_metadata_store.lookup(target)


def injectable(
    *dependencies: Token, store: Optional[DependencyMetadataStore] = None
) -> Callable[[C], C]:
    """
    Class decorator that marks a class as injectable.

    The tokens are resolved in order and passed positionally to the
    constructor when the class is built by a container.

    Args:
        *dependencies: Tokens matching the constructor's parameters
        store: Metadata store to record into (defaults to the process-wide one)

    Raises:
        InjectableUsageError: If the decorator is applied to anything but a class
    """
    target_store = store if store is not None else default_metadata_store

    def decorator(target: C) -> C:
        if not inspect.isclass(target):
            raise InjectableUsageError(
                "@injectable can only be used on classes", target=target
            )
        target_store.record(target, dependencies)
        return target

    return decorator


__all__ = [
    "DependencyMetadataStore",
    "default_metadata_store",
    "get_dependencies",
    "injectable",
]
