"""
Unit tests for MetricsCollector.

Tests metrics collection functionality including:
- Thread-safety under concurrent access
- Bounded storage with LRU eviction
- Global collector helpers
"""

import threading

from fish_di.config import ContainerConfig
from fish_di.di import Container, ValueProvider
from fish_di.observability.metrics import (MetricsCollector, OperationMetrics,
                                           get_metrics_collector)


class TestOperationMetrics:
    """Test single operation aggregation."""

    def test_record(self):
        """Test count, duration bounds and errors."""
        metrics = OperationMetrics("container.resolve")
        metrics.record(10.0)
        metrics.record(30.0, success=False)

        assert metrics.count == 2
        assert metrics.avg_duration_ms == 20.0
        assert metrics.min_duration_ms == 10.0
        assert metrics.max_duration_ms == 30.0
        assert metrics.error_rate == 50.0

    def test_empty_to_dict(self):
        """Test serialising metrics with no executions."""
        data = OperationMetrics("container.resolve").to_dict()

        assert data["count"] == 0
        assert data["min_duration_ms"] == 0.0
        assert data["last_execution"] is None


class TestMetricsCollector:
    """Test the collector."""

    def test_tags_create_separate_keys(self):
        """Test that tags distinguish metric entries."""
        collector = MetricsCollector()
        collector.record_operation("container.resolve", 1.0, container="a")
        collector.record_operation("container.resolve", 1.0, container="b")

        metrics = collector.get_metrics("container.resolve")["metrics"]

        assert set(metrics) == {
            "container.resolve[container=a]",
            "container.resolve[container=b]",
        }
        assert collector.get_operation_count("container.resolve") == 2

    def test_lru_eviction(self):
        """Test that the oldest key is evicted at capacity."""
        collector = MetricsCollector(max_metrics=2)
        collector.record_operation("op.a", 1.0)
        collector.record_operation("op.b", 1.0)
        collector.record_operation("op.c", 1.0)

        metrics = collector.get_metrics()

        assert metrics["total_operations"] == 2
        assert "op.a" not in metrics["metrics"]

    def test_error_count(self):
        """Test counting failures."""
        collector = MetricsCollector()
        collector.record_operation("op", 1.0, success=False)
        collector.record_operation("op", 1.0)

        assert collector.get_error_count("op") == 1

    def test_reset(self):
        """Test clearing all metrics."""
        collector = MetricsCollector()
        collector.record_operation("op", 1.0)

        collector.reset()

        assert collector.get_metrics()["total_operations"] == 0

    def test_concurrent_record_operation(self):
        """Test that concurrent record_operation calls are thread-safe."""
        collector = MetricsCollector()
        num_threads = 8
        operations_per_thread = 50
        barrier = threading.Barrier(num_threads)

        def record_operations(thread_id: int):
            barrier.wait()
            for i in range(operations_per_thread):
                collector.record_operation("op", duration_ms=float(i), thread_id=thread_id)

        threads = [
            threading.Thread(target=record_operations, args=(i,)) for i in range(num_threads)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert collector.get_operation_count("op") == num_threads * operations_per_thread


class TestGlobalCollector:
    """Test module-level helpers."""

    def test_global_collector_is_shared(self):
        """Test that the global collector is created once and reused."""
        collector = get_metrics_collector()

        assert get_metrics_collector() is collector

    def test_default_container_records_globally(self):
        """Test that a container without a collector feeds the global one."""
        collector = get_metrics_collector()
        before = collector.get_operation_count("container.resolve")

        container = Container(config=ContainerConfig(name="global-metrics"))
        container.register("cfg", ValueProvider(1))
        container.resolve("cfg")

        assert collector.get_operation_count("container.resolve") == before + 1
