"""In-process request and error counters."""

import threading
import time

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MetricsSnapshot(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_requests: int = Field(description="Requests seen since process start")
    total_errors: int = Field(description="Requests that raised or returned 5xx")
    uptime_seconds: int = Field(description="Whole seconds since process start")


class MetricsService:
    """Process-wide counters; lost on restart.

    Increments are serialised by a lock because they arrive both from the
    event loop and from threadpool workers. Snapshots read without the lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total_requests = 0
        self._total_errors = 0
        self._started = time.monotonic()

    def increment_requests(self) -> None:
        with self._lock:
            self._total_requests += 1

    def increment_errors(self) -> None:
        with self._lock:
            self._total_errors += 1

    def current_snapshot(self) -> MetricsSnapshot:
        return MetricsSnapshot(
            total_requests=self._total_requests,
            total_errors=self._total_errors,
            uptime_seconds=int(time.monotonic() - self._started),
        )
