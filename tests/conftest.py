"""
Pytest configuration and shared fixtures for FISH_DI tests.

This module provides:
- Isolated metadata stores and metrics collectors
- Container fixtures wired to them
- Global container cleanup
"""

import pytest

from fish_di.config import ContainerConfig
from fish_di.di import Container, DependencyMetadataStore
from fish_di.observability.metrics import MetricsCollector

# ============================================================================
# ISOLATION FIXTURES
# ============================================================================


@pytest.fixture
def metadata_store() -> DependencyMetadataStore:
    """Create a metadata store private to one test."""
    return DependencyMetadataStore()


@pytest.fixture
def metrics_collector() -> MetricsCollector:
    """Create a metrics collector private to one test."""
    return MetricsCollector()


@pytest.fixture
def container(
    metadata_store: DependencyMetadataStore, metrics_collector: MetricsCollector
) -> Container:
    """Create a container backed by the private store and collector."""
    return Container(
        config=ContainerConfig(name="test"),
        metadata=metadata_store,
        metrics=metrics_collector,
    )


@pytest.fixture(autouse=True)
def reset_global_container():
    """Make sure no test leaks a global container into the next."""
    Container.reset_global()
    yield
    Container.reset_global()
