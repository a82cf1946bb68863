"""
Custom exceptions for FISH_DI.

Every error raised by the container derives from DiError, so callers can
treat resolution as fallible with a single ``except DiError`` clause while
still being able to tell the specific conditions apart.
"""

from typing import Any, Dict, Optional, Sequence


class DiError(RuntimeError):
    """
    Base exception for dependency injection errors.

    Attributes:
        message: Error message
        context: Optional dictionary with additional context (token,
                 target, resolution path, etc.)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            context: Optional dictionary with additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class NoProviderError(DiError):
    """
    Raised when a token has no registered provider and is not a class.

    Attributes:
        message: Error message
        token: The token that could not be resolved
    """

    def __init__(
        self,
        message: str,
        token: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, context=context)
        self.token = token


class InjectableUsageError(DiError):
    """
    Raised when the injectable marking mechanism is applied to a non-class.

    Attributes:
        message: Error message
        target: The object the decorator was applied to
    """

    def __init__(
        self,
        message: str,
        target: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if target is not None:
            context["target"] = repr(target)
        super().__init__(message, context=context)
        self.target = target


class CircularDependencyError(DiError):
    """
    Raised when resolving a token re-enters a token already being resolved.

    Attributes:
        message: Error message
        path: The tokens forming the cycle, starting and ending with the
              token that was re-entered
    """

    def __init__(
        self,
        message: str,
        path: Sequence[Any] = (),
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, context=context)
        self.path = tuple(path)


class InvalidProviderError(DiError):
    """
    Raised when the object registered for a token is not a provider.

    Registration performs no validation, so this surfaces on resolve.
    """

    def __init__(
        self,
        message: str,
        provider: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = context or {}
        if provider is not None:
            context["provider_type"] = type(provider).__name__
        super().__init__(message, context=context)
        self.provider = provider
