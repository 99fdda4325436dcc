"""Prometheus metrics for outbound provider calls and degraded lookups."""

from prometheus_client import Counter, Histogram

provider_latency_ms = Histogram(
    "provider_latency_ms",
    "Outbound provider call latency in milliseconds",
    ["provider", "outcome"],
    buckets=[10, 50, 100, 200, 500, 1000, 2000, 4000, 8000],
)

provider_errors_total = Counter(
    "provider_errors_total",
    "Total failed outbound provider calls",
    ["provider", "reason"],
)

degraded_lookups_total = Counter(
    "degraded_lookups_total",
    "Lookups replaced by fallback values",
    ["stage"],
)


class PrometheusCallMetrics:
    """Prometheus-based call metrics implementation."""

    def record_latency(self, provider: str, outcome: str, latency_ms: float) -> None:
        provider_latency_ms.labels(provider=provider, outcome=outcome).observe(latency_ms)

    def inc_error(self, provider: str, reason: str) -> None:
        provider_errors_total.labels(provider=provider, reason=reason).inc()

    def inc_degraded(self, stage: str) -> None:
        degraded_lookups_total.labels(stage=stage).inc()
