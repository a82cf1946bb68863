"""
Dependency Injection Container

A lightweight DI container mapping tokens to providers and resolving them into
fully constructed object graphs.
"""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any, Optional, TypeVar

from ..config import ContainerConfig
from ..constants import RESOLVE_OPERATION
from ..exceptions import CircularDependencyError, InvalidProviderError, NoProviderError
from ..observability.logging import get_logger, log_operation
from ..observability.metrics import MetricsCollector, get_metrics_collector
from .metadata import DependencyMetadataStore, default_metadata_store
from .providers import ClassProvider, FactoryProvider, Provider, ValueProvider
from .scopes import Scope
from .tokens import Token, is_class_token, token_name

T = TypeVar("T")


class Container:
    """
    Dependency Injection Container.

    Each container owns its registrations and singleton cache; containers are
    isolated from each other. Class dependencies are read from a metadata
    store, by default the process-wide one filled by ``@injectable``.

    Usage:
        container = Container()

        container.register("cfg", ValueProvider({"api_key": "X"}))
        container.register(Logger, ClassProvider(Logger, Scope.SINGLETON))
        container.register(API, FactoryProvider(lambda c: Api(c.resolve("cfg"))))

        service = container.resolve(Service)
    """

    _global_instance: Optional["Container"] = None

    def __init__(
        self,
        config: ContainerConfig | None = None,
        metadata: DependencyMetadataStore | None = None,
        metrics: MetricsCollector | None = None,
    ):
        self.config = config or ContainerConfig()
        self._metadata = metadata if metadata is not None else default_metadata_store
        self._metrics: MetricsCollector | None = None
        if self.config.metrics_enabled:
            self._metrics = metrics if metrics is not None else get_metrics_collector()

        self._providers: dict[Any, Provider] = {}
        self._singletons: dict[Any, Any] = {}
        # Per-thread stack of tokens being resolved, outermost first
        self._local = threading.local()
        self._logger = get_logger(__name__, container=self.config.name)

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def metadata(self) -> DependencyMetadataStore:
        return self._metadata

    @property
    def _resolving(self) -> list[Any]:
        stack = getattr(self._local, "stack", None)
        if stack is None:
            stack = self._local.stack = []
        return stack

    @classmethod
    def get_global(cls) -> "Container":
        """Get the global container instance."""
        if cls._global_instance is None:
            cls._global_instance = Container()
        return cls._global_instance

    @classmethod
    def set_global(cls, container: "Container") -> None:
        """Set the global container instance."""
        cls._global_instance = container

    @classmethod
    def reset_global(cls) -> None:
        """Reset the global container (useful for testing)."""
        cls._global_instance = None

    def register(self, token: Token, provider: Provider) -> None:
        """
        Register a provider for a token, replacing any existing one.

        The provider is not validated here; an object that is not a provider
        fails when the token is resolved.

        Args:
            token: The token to register the provider for
            provider: ValueProvider, FactoryProvider or ClassProvider
        """
        self._providers[token] = provider
        self._logger.debug(
            f"Registered {getattr(provider, 'kind', type(provider).__name__)} "
            f"provider for {token_name(token)}"
        )

    def register_value(self, token: Token, value: Any) -> None:
        """Register a precomputed value for a token."""
        self.register(token, ValueProvider(value))

    def register_factory(self, token: Token, factory: Callable[["Container"], Any]) -> None:
        """
        Register a factory for a token.

        The factory receives the container and runs on every resolve.

        Example:
            container.register_factory(
                Database,
                lambda c: Database(c.resolve("cfg")["db_url"]),
            )
        """
        self.register(token, FactoryProvider(factory))

    def register_class(
        self,
        token: Token,
        cls: type | None = None,
        scope: Scope = Scope.TRANSIENT,
    ) -> None:
        """
        Register a class for a token.

        Args:
            token: The token to register
            cls: Class to construct (defaults to the token itself)
            scope: Service lifetime scope

        Raises:
            TypeError: If no class is given and the token is not a class
        """
        target = cls if cls is not None else token
        if not is_class_token(target):
            raise TypeError(f"register_class needs a class, got {target!r}")
        self.register(token, ClassProvider(target, scope))

    def resolve(self, token: Token) -> Any:
        """
        Resolve a token to a value.

        Registered providers are used first. An unregistered class is built
        and cached as a singleton. Class dependencies are resolved left to
        right against this container before the constructor is called.

        Args:
            token: The token of the dependency to resolve

        Returns:
            The resolved value

        Raises:
            NoProviderError: If no provider is registered and the token is not a class
            CircularDependencyError: If the token depends on itself
            InvalidProviderError: If the registered object is not a provider
        """
        # Nested resolves (from constructors or factories) are timed as part
        # of the outermost call
        if self._resolving or self._metrics is None:
            return self._resolve(token)

        start_time = time.time()
        success = True
        try:
            return self._resolve(token)
        except Exception:
            success = False
            raise
        finally:
            duration_ms = (time.time() - start_time) * 1000
            self._metrics.record_operation(
                RESOLVE_OPERATION, duration_ms, success, container=self.name
            )
            log_operation(
                self._logger,
                RESOLVE_OPERATION,
                level=logging.DEBUG,
                success=success,
                duration_ms=duration_ms,
                token=token_name(token),
            )

    def try_resolve(self, token: Token, default: Any = None) -> Any:
        """
        Resolve a token, returning ``default`` if it has no provider.

        Only a missing provider for ``token`` itself is absorbed; a missing
        nested dependency still raises.
        """
        try:
            return self.resolve(token)
        except NoProviderError as e:
            if e.token == token:
                return default
            raise

    def _resolve(self, token: Any) -> Any:
        if token in self._resolving:
            cycle_start = self._resolving.index(token)
            path = (*self._resolving[cycle_start:], token)
            raise CircularDependencyError(
                "Circular dependency detected: " + " -> ".join(token_name(t) for t in path),
                path=path,
            )

        self._resolving.append(token)
        try:
            return self._resolve_provider(token)
        finally:
            self._resolving.pop()

    def _resolve_provider(self, token: Any) -> Any:
        if token in self._providers:
            provider = self._providers[token]

            if isinstance(provider, ValueProvider):
                return provider.value

            if isinstance(provider, FactoryProvider):
                return provider.factory(self)

            if isinstance(provider, ClassProvider):
                if provider.is_singleton:
                    return self._get_or_create_singleton(token, provider.cls)
                return self._create_instance(provider.cls)

            raise InvalidProviderError(
                f"Registered object for token {token_name(token)} is not a provider",
                provider=provider,
            )

        if is_class_token(token) and self.config.implicit_class_resolution:
            return self._get_or_create_singleton(token, token)

        raise NoProviderError(f"No provider found for token: {token_name(token)}", token=token)

    def _get_or_create_singleton(self, token: Any, cls: type) -> Any:
        if token in self._singletons:
            return self._singletons[token]
        instance = self._create_instance(cls)
        self._singletons[token] = instance
        self._logger.debug(f"Created singleton: {token_name(token)}")
        return instance

    def _create_instance(self, cls: type[T]) -> T:
        """
        Create an instance of a class, resolving its recorded dependencies.

        Args:
            cls: The class to create an instance of

        Returns:
            The instance of the class
        """
        dependencies = self._metadata.lookup(cls)
        resolved = [self._resolve(dependency) for dependency in dependencies]
        instance = cls(*resolved)
        self._logger.debug(f"Constructed {cls.__qualname__} with {len(resolved)} dependencies")
        return instance

    def is_registered(self, token: Token) -> bool:
        """Check if a provider is registered for a token."""
        return token in self._providers

    def clear(self) -> None:
        """
        Drop all providers and cached singletons.

        Recorded class dependencies are not affected.
        """
        self._providers.clear()
        self._singletons.clear()
        self._logger.debug("Container cleared")

    def __contains__(self, token: Token) -> bool:
        """Support 'in' operator for checking registration."""
        return self.is_registered(token)


# FastAPI integration helpers
def inject(token: Token) -> Callable[..., Any]:
    """
    FastAPI dependency that resolves a token from the request's container.

    The container is read from ``request.app.state.container``, falling back
    to the global container.

    Usage:
        @app.get("/users")
        async def get_users(user_svc: UserService = Depends(inject(UserService))):
            return await user_svc.list_all()
    """
    from fastapi import Request

    async def _dependency(request: Request) -> Any:
        container = getattr(request.app.state, "container", None)
        if container is None:
            container = Container.get_global()
        return container.resolve(token)

    return _dependency


# Alias for cleaner syntax
Inject = inject
