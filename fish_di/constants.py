"""
Shared constants for FISH_DI.

This module is part of FISH_DI - Dependency Injection.
"""

# ============================================================================
# ENVIRONMENT
# ============================================================================

ENV_PREFIX: str = "FISH_DI_"
"""Prefix of every environment variable read by ContainerConfig."""

DEFAULT_CONTAINER_NAME: str = "default"
"""Name given to containers created without an explicit name."""

# ============================================================================
# METRICS
# ============================================================================

RESOLVE_OPERATION: str = "container.resolve"
"""Operation name recorded for every top-level resolve."""

MAX_METRICS: int = 10000
"""Maximum number of distinct metric keys kept before LRU eviction."""

# ============================================================================
# CLI
# ============================================================================

TREE_INDENT: str = "  "
"""Indentation used per level when rendering dependency trees."""
