from prometheus_client import Counter, Histogram, Gauge, Info, generate_latest
from prometheus_client.core import CollectorRegistry
import logging

from core.environment import is_production

logger = logging.getLogger(__name__)

# Prometheus Registry
REGISTRY = CollectorRegistry()

# Service Metrics
service_requests_total = Counter(
    'vehicle_service_requests_total',
    'Total vehicle service calls',
    ['status', 'service', 'method'],
    registry=REGISTRY
)

service_duration_seconds = Histogram(
    'vehicle_service_duration_seconds',
    'Vehicle service call duration in seconds',
    ['service', 'method'],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
    registry=REGISTRY
)

catalog_size_gauge = Gauge(
    'vehicle_catalog_size',
    'Vehicles currently held in the catalog',
    registry=REGISTRY
)

system_info = Info(
    'vehicle_catalog_info',
    'System information',
    registry=REGISTRY
)


class PrometheusMetricsCollector:
    """Metrics collector backed by a private Prometheus registry"""

    def __init__(self, environment: str = 'development'):
        system_info.info({
            'version': '1.0.0',
            'environment': environment,
            'service': 'vehicle-catalog'
        })

    def record_service_call(
        self,
        service_name: str,
        method_name: str,
        duration_seconds: float,
        status: str
    ):
        """Record one service call; status is 'success', 'rejected' or 'error'"""
        service_requests_total.labels(
            status=status,
            service=service_name,
            method=method_name
        ).inc()

        service_duration_seconds.labels(
            service=service_name,
            method=method_name
        ).observe(duration_seconds)

    def update_catalog_size(self, count: int):
        catalog_size_gauge.set(count)

    def get_prometheus_metrics(self) -> bytes:
        """Get Prometheus metrics in text format"""
        return generate_latest(REGISTRY)


# Global instance
prometheus_collector = PrometheusMetricsCollector(
    environment='production' if is_production() else 'development'
)
