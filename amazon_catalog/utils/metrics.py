"""
Metrics collection using Prometheus

Tracks:
- Catalog API calls by operation and outcome
- Call latencies
- Failures by error type
"""

from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest
)
import logging

from amazon_catalog.config.settings import settings

logger = logging.getLogger(__name__)

# Create metrics registry
registry = CollectorRegistry()

# API Call Metrics
api_calls_total = Counter(
    'amazon_catalog_calls_total',
    'Total number of Product Advertising API calls',
    ['operation', 'status'],
    registry=registry
)

api_call_duration = Histogram(
    'amazon_catalog_call_duration_seconds',
    'Duration of Product Advertising API calls',
    ['operation'],
    registry=registry,
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

# Error Metrics
errors_total = Counter(
    'amazon_catalog_errors_total',
    'Failures recorded in client error logs',
    ['operation', 'error_type'],
    registry=registry
)

class MetricsCollector:
    """Central metrics collection and reporting"""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def record_api_call(self, operation: str, status: str):
        """Record a call outcome ('success' or 'error')"""
        if not self.enabled:
            return
        api_calls_total.labels(operation=operation, status=status).inc()

    def record_api_duration(self, operation: str, duration: float):
        """Record API call duration in seconds"""
        if not self.enabled:
            return
        api_call_duration.labels(operation=operation).observe(duration)

    def record_error(self, operation: str, error: Exception):
        """Record a failure by exception class name"""
        if not self.enabled:
            return
        errors_total.labels(operation=operation, error_type=type(error).__name__).inc()

    def get_sample(self, name: str, labels: dict) -> float:
        """Current value of a sample, 0.0 if it has not been recorded"""
        value = registry.get_sample_value(name, labels)
        return value if value is not None else 0.0

    def get_metrics_report(self) -> str:
        """Get current metrics as Prometheus text format"""
        return generate_latest(registry).decode('utf-8')

# Singleton instance
metrics = MetricsCollector(enabled=settings.enable_metrics)
