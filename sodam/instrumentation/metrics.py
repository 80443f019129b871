from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# histograms
operation_duration_seconds = Histogram(
    "sodam_operation_duration_seconds",
    "duration of performance-tracked operations in seconds",
    ["operation"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

# counters
service_calls_total = Counter(
    "sodam_service_calls_total",
    "total number of intercepted service calls",
    ["service", "method", "outcome"],
)


def metrics_endpoint() -> Response:
    """prometheus metrics endpoint"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def record_duration(operation: str, duration: float) -> None:
    """record duration of a tracked operation"""
    operation_duration_seconds.labels(operation=operation).observe(duration)


def record_service_call(service: str, method: str, outcome: str) -> None:
    """record an intercepted service call outcome"""
    service_calls_total.labels(service=service, method=method, outcome=outcome).inc()
