from __future__ import annotations

from prometheus_client import CollectorRegistry, generate_latest

from core.metrics import METRIC_DESCRIPTORS, PingdomCollector


def test_describe_advertises_five_gauges() -> None:
    families = PingdomCollector().describe()

    assert [f.name for f in families] == [
        "pingdom_check_response_threshold_seconds",
        "pingdom_check_status_bool",
        "pingdom_check_last_error_timestamp",
        "pingdom_check_last_test_timestamp",
        "pingdom_check_response_duration_seconds",
    ]
    assert all(f.type == "gauge" for f in families)
    assert all(f.samples == [] for f in families)


def test_describe_is_idempotent() -> None:
    collector = PingdomCollector()
    first = collector.describe()
    first[0].add_metric(["x", "y"], 1.0)

    assert collector.describe() == collector.describe()
    assert collector.describe()[0].samples == []


def test_labels() -> None:
    labels = {d.name: d.labels for d in METRIC_DESCRIPTORS}
    assert labels["pingdom_check_status_bool"] == ("name", "hostname", "status")
    assert all(
        labels[name] == ("name", "hostname")
        for name in labels
        if name != "pingdom_check_status_bool"
    )


def test_collect_yields_no_samples() -> None:
    assert list(PingdomCollector().collect()) == []


def test_registers_and_exposes_nothing_yet() -> None:
    registry = CollectorRegistry()
    registry.register(PingdomCollector())

    assert generate_latest(registry) == b""
    assert registry.get_sample_value("pingdom_check_last_test_timestamp", {}) is None
