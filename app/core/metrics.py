# app/core/metrics.py
import time

import psutil
from fastapi import Request
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    disable_created_metrics,
    generate_latest,
)

# Only the plain counter samples are exposed, no *_created series.
disable_created_metrics()

_PROCESS = psutil.Process()


def process_memory_bytes() -> float:
    return float(_PROCESS.memory_info().rss)


class MetricsCollector:
    """Per-application request/error counters on a private registry.

    prometheus_client counters are lock protected, so the sync handlers
    running in the thread pool can share one collector.
    """

    def __init__(self) -> None:
        self.registry = CollectorRegistry()
        self.start_time = time.time()

        self._requests = Counter(
            "http_requests",
            "Total HTTP requests",
            registry=self.registry,
        )
        self._errors = Counter(
            "http_errors",
            "Total HTTP errors",
            registry=self.registry,
        )
        uptime = Gauge("app_uptime_seconds", "Application uptime", registry=self.registry)
        uptime.set_function(self.uptime_seconds)
        memory = Gauge("process_memory_bytes", "Process memory usage", registry=self.registry)
        memory.set_function(process_memory_bytes)

    def record_request(self) -> None:
        self._requests.inc()

    def record_error(self) -> None:
        self._errors.inc()

    def uptime_seconds(self) -> float:
        return time.time() - self.start_time

    @property
    def request_count(self) -> int:
        return int(self.registry.get_sample_value("http_requests_total") or 0)

    @property
    def error_count(self) -> int:
        return int(self.registry.get_sample_value("http_errors_total") or 0)

    def render(self) -> bytes:
        return generate_latest(self.registry)


def get_metrics(request: Request) -> MetricsCollector:
    return request.app.state.metrics
