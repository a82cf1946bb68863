"""
Configuration management for FISH_DI.

Containers read their settings from a pydantic-settings model, so every
option can come from a direct argument or from a ``FISH_DI_*`` environment
variable.

Example:
    # Using environment variables (FISH_DI_NAME=api, ...)
    container = Container()

    # Or explicitly
    container = Container(config=ContainerConfig(name="api", metrics_enabled=False))
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_CONTAINER_NAME, ENV_PREFIX


class ContainerConfig(BaseSettings):
    """
    Container configuration with automatic validation.

    Attributes:
        name: Container name, used in log context and metric tags
        implicit_class_resolution: Whether unregistered classes resolve as
            implicit singletons
        metrics_enabled: Whether resolve timings are recorded
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        frozen=True,
    )

    name: str = Field(
        DEFAULT_CONTAINER_NAME,
        min_length=1,
        description="Container name used in logs and metrics",
    )
    implicit_class_resolution: bool = Field(
        True,
        description="Resolve unregistered classes as implicit singletons",
    )
    metrics_enabled: bool = Field(
        True,
        description="Record timing metrics for top-level resolutions",
    )
