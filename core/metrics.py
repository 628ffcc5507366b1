"""Prometheus metric catalog for Pingdom checks.

The five gauges below are advertised to a ``prometheus_client`` registry so
that their names are reserved and documented.  Values are not populated
yet: :meth:`PingdomCollector.collect` yields no samples.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from prometheus_client.core import GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

CHECK_LABELS = ("name", "hostname")


@dataclass(frozen=True)
class MetricDescriptor:
    name: str
    documentation: str
    labels: tuple[str, ...] = CHECK_LABELS

    def family(self) -> GaugeMetricFamily:
        return GaugeMetricFamily(self.name, self.documentation, labels=list(self.labels))


RESPONSE_THRESHOLD = MetricDescriptor(
    "pingdom_check_response_threshold_seconds",
    "The alert threshold for this check",
)
STATUS = MetricDescriptor(
    "pingdom_check_status_bool",
    "Current status of the check",
    labels=CHECK_LABELS + ("status",),
)
LAST_ERROR_TIMESTAMP = MetricDescriptor(
    "pingdom_check_last_error_timestamp",
    "Timestamp of the last error from a check",
)
LAST_TEST_TIMESTAMP = MetricDescriptor(
    "pingdom_check_last_test_timestamp",
    "Timestamp of the last test",
)
RESPONSE_DURATION = MetricDescriptor(
    "pingdom_check_response_duration_seconds",
    "Time taken for the last check.",
)

METRIC_DESCRIPTORS: tuple[MetricDescriptor, ...] = (
    RESPONSE_THRESHOLD,
    STATUS,
    LAST_ERROR_TIMESTAMP,
    LAST_TEST_TIMESTAMP,
    RESPONSE_DURATION,
)


class PingdomCollector(Collector):
    """Custom collector exposing the Pingdom check gauges."""

    def describe(self) -> list[Metric]:
        return [desc.family() for desc in METRIC_DESCRIPTORS]

    def collect(self) -> Iterator[Metric]:
        # TODO: populate from CheckProvider.results() once check polling exists.
        return iter(())
