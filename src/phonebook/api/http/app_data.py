from dataclasses import dataclass

from src.phonebook.core.services import DbSessionService, MetricsService
from src.phonebook.core.services.contacts import (
    ContactsService,
    LibPhoneNumberValidator,
    PhoneNumberValidator,
)
from src.phonebook.entities.contact import ContactRepository
from src.phonebook.runtime.context import get_config


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    metrics_service: MetricsService
    contacts_service: ContactsService


def build_application_dependencies(
    database_service: DbSessionService | None = None,
    phone_validator: PhoneNumberValidator | None = None,
    metrics_service: MetricsService | None = None,
) -> ApplicationDependencies:
    """Wire the application-wide collaborators, filling gaps from config."""
    config = get_config()
    database_service = database_service or DbSessionService()
    phone_validator = phone_validator or LibPhoneNumberValidator(
        config.contacts.phone_default_region
    )
    return ApplicationDependencies(
        database_service=database_service,
        metrics_service=metrics_service or MetricsService(),
        contacts_service=ContactsService(
            ContactRepository(database_service), phone_validator
        ),
    )
