"""Metrics API router."""

from fastapi import APIRouter, Depends

from src.phonebook.api.http.deps import get_metrics_service
from src.phonebook.core.services import MetricsService, MetricsSnapshot

router = APIRouter(prefix="/api/metrics", tags=["metrics"])


@router.get("", response_model=MetricsSnapshot)
def get_metrics(
    metrics_service: MetricsService = Depends(get_metrics_service),
) -> MetricsSnapshot:
    """Current request/error totals and uptime."""
    return metrics_service.current_snapshot()
