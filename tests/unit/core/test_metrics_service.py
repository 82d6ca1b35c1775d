"""Tests for the in-process metrics counters."""

from concurrent.futures import ThreadPoolExecutor

from src.phonebook.core.services import MetricsService


def test_new_service_starts_at_zero():
    snapshot = MetricsService().current_snapshot()

    assert snapshot.total_requests == 0
    assert snapshot.total_errors == 0
    assert snapshot.uptime_seconds >= 0


def test_increments_are_reflected_in_snapshot():
    metrics = MetricsService()
    metrics.increment_requests()
    metrics.increment_requests()
    metrics.increment_errors()

    snapshot = metrics.current_snapshot()

    assert snapshot.total_requests == 2
    assert snapshot.total_errors == 1


def test_concurrent_increments_are_not_lost():
    metrics = MetricsService()

    def _hit(_: int) -> None:
        metrics.increment_requests()
        metrics.increment_errors()

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(_hit, range(2000)))

    snapshot = metrics.current_snapshot()
    assert snapshot.total_requests == 2000
    assert snapshot.total_errors == 2000


def test_snapshot_serializes_camel_case():
    payload = MetricsService().current_snapshot().model_dump(by_alias=True)

    assert set(payload) == {"totalRequests", "totalErrors", "uptimeSeconds"}
