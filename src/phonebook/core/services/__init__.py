"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Metrics
from .metrics_service import MetricsService, MetricsSnapshot

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # Metrics
    "MetricsService",
    "MetricsSnapshot",
]
