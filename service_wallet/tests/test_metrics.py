"""
Unit tests for the shared MetricsCollector as used by the Wallet service.
"""

from prometheus_client import CollectorRegistry

from shared.metrics import MetricsCollector, get_metrics_collector


class TestMetricsCollector:
    """Test cases for MetricsCollector."""

    def test_each_collector_has_its_own_registry(self):
        """Test two wallet collectors can coexist in one process."""
        first = get_metrics_collector("wallet")
        second = get_metrics_collector("wallet")

        first.increment_counter("save_links_total", outcome="success")

        assert first.registry is not second.registry
        assert first.registry.get_sample_value("save_links_total", {"outcome": "success"}) == 1.0
        assert second.registry.get_sample_value("save_links_total", {"outcome": "success"}) is None

    def test_wallet_metrics_are_recorded(self):
        """Test wallet counters and histograms accept observations."""
        collector = MetricsCollector("wallet", CollectorRegistry())

        collector.increment_counter("wallet_api_calls_total", operation="patch_object", outcome="success")
        collector.observe_histogram("wallet_api_call_duration_seconds", 0.25, operation="patch_object")

        registry = collector.registry
        assert registry.get_sample_value(
            "wallet_api_calls_total", {"operation": "patch_object", "outcome": "success"}
        ) == 1.0
        assert registry.get_sample_value(
            "wallet_api_call_duration_seconds_sum", {"operation": "patch_object"}
        ) == 0.25

    def test_unknown_metric_is_ignored(self):
        """Test names without a registered metric are skipped."""
        collector = MetricsCollector("other", CollectorRegistry())

        collector.increment_counter("wallet_api_calls_total", operation="x", outcome="y")

        assert collector.registry.get_sample_value(
            "wallet_api_calls_total", {"operation": "x", "outcome": "y"}
        ) is None

    def test_http_request_is_recorded(self):
        collector = MetricsCollector("wallet")

        collector.record_http_request("GET", "/create-card", 200, 0.1)

        assert collector.registry.get_sample_value(
            "http_requests_total", {"method": "GET", "endpoint": "/create-card", "status_code": "200"}
        ) == 1.0
