"""FastAPI dependency implementations."""

from fastapi import Request

from src.phonebook.api.http.app_data import ApplicationDependencies
from src.phonebook.core.services import DbSessionService, MetricsService
from src.phonebook.core.services.contacts import ContactsService


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_service(request: Request) -> DbSessionService:
    """Get the database session service."""
    return get_app_dependencies(request).database_service


def get_contacts_service(request: Request) -> ContactsService:
    """Get the shared contacts service."""
    return get_app_dependencies(request).contacts_service


def get_metrics_service(request: Request) -> MetricsService:
    """Get the process-wide metrics service."""
    return get_app_dependencies(request).metrics_service
