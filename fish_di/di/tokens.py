"""
Tokens used as registry keys.

A token is a class, a string, or a Symbol. Classes and symbols compare by
identity, strings by value.
"""

import inspect
from typing import Any, Union


class Symbol:
    """
    An opaque, unique token.

    Two symbols are never equal unless they are the same object, even when
    their descriptions match. The description only serves diagnostics.

    Usage:
        API = Symbol("Api")
        container.register(API, FactoryProvider(make_api))
    """

    __slots__ = ("description",)

    def __init__(self, description: str = "") -> None:
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description})"


Token = Union[type, str, Symbol]


def is_class_token(token: Any) -> bool:
    """Whether the token is a constructible class identity."""
    return inspect.isclass(token)


def token_name(token: Any) -> str:
    """Human readable name for a token, used in errors and logs."""
    if inspect.isclass(token):
        return token.__qualname__
    if isinstance(token, str):
        return token
    return repr(token)


__all__ = ["Symbol", "Token", "is_class_token", "token_name"]
