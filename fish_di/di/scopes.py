"""
Service Scopes for Dependency Injection

Defines how instances produced by class providers are reused:
- SINGLETON: Created once per container, shared until the container is cleared
- TRANSIENT: Created fresh on every resolution
"""

from enum import Enum


class Scope(Enum):
    """
    Service lifetime scopes.

    SINGLETON: One instance per container, cached under the token.
               Use for: configuration, loggers, connection pools.

    TRANSIENT: New instance created every time it's resolved.
               Use for: stateless services, per-call helpers.
    """

    SINGLETON = "singleton"
    TRANSIENT = "transient"
