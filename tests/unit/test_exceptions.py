"""
Unit tests for custom exceptions.

Tests exception hierarchy and error messages.
"""

import pytest

from fish_di.exceptions import (CircularDependencyError, DiError,
                                InjectableUsageError, InvalidProviderError,
                                NoProviderError)


class TestExceptionHierarchy:
    """Test exception inheritance hierarchy."""

    def test_di_error_is_runtime_error(self):
        """Test that DiError is a RuntimeError."""
        error = DiError("test error")
        assert isinstance(error, RuntimeError)

    @pytest.mark.parametrize(
        "error_class",
        [NoProviderError, InjectableUsageError, CircularDependencyError, InvalidProviderError],
    )
    def test_specific_errors_are_di_errors(self, error_class):
        """Test that every specific error can be caught as DiError."""
        error = error_class("failed")
        assert isinstance(error, DiError)
        assert isinstance(error, RuntimeError)


class TestExceptionMessages:
    """Test exception message formatting."""

    def test_di_error_message(self):
        """Test DiError message."""
        message = "Something went wrong"
        error = DiError(message)
        assert str(error) == message
        assert error.message == message
        assert error.context == {}

    def test_di_error_with_context(self):
        """Test DiError message with context."""
        error = DiError("Something went wrong", context={"token": "cfg"})
        assert "context:" in str(error)
        assert "token=cfg" in str(error)

    def test_no_provider_error_token(self):
        """Test that NoProviderError keeps the token."""
        error = NoProviderError("No provider found for token: cfg", token="cfg")
        assert error.token == "cfg"
        assert str(error) == "No provider found for token: cfg"

    def test_injectable_usage_error_target(self):
        """Test that InjectableUsageError records the target."""

        def target():
            pass

        error = InjectableUsageError("misused", target=target)
        assert error.target is target
        assert "target" in error.context

    def test_circular_dependency_error_path(self):
        """Test that the cycle path is stored as a tuple."""
        error = CircularDependencyError("cycle", path=["a", "b", "a"])
        assert error.path == ("a", "b", "a")

    def test_invalid_provider_error_type(self):
        """Test that InvalidProviderError names the provider type."""
        error = InvalidProviderError("bad", provider=[1])
        assert error.context["provider_type"] == "list"


class TestExceptionChaining:
    """Test exception chaining."""

    def test_exception_chaining(self):
        """Test that exceptions can be chained."""
        original_error = ValueError("Original error")
        try:
            raise NoProviderError("Wrapped error", token="cfg") from original_error
        except NoProviderError as e:
            assert e.__cause__ is original_error
