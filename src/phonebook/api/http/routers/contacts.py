"""Contact directory API router."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from loguru import logger

from src.phonebook.api.http.deps import get_contacts_service
from src.phonebook.api.http.schemas.contacts import ContactDto, ContactUpdateDto
from src.phonebook.core.services.contacts import ContactsService
from src.phonebook.entities.contact import ContactAlreadyExistsError, ContactNotFoundError
from src.phonebook.runtime.context import get_config

router = APIRouter(prefix="/api/contacts", tags=["contacts"])

DUPLICATE_PHONE_DETAIL = "A contact with the same phone number already exists."
NOT_FOUND_DETAIL = "Contact not found."

# Largest row offset the store accepts (signed 64-bit)
MAX_OFFSET = 2**63 - 1


@router.get("", response_model=list[ContactDto])
def list_contacts(
    page: int = Query(default=1),
    page_size: int | None = Query(default=None, alias="pageSize"),
    service: ContactsService = Depends(get_contacts_service),
) -> list[ContactDto]:
    """List one page of contacts ordered by first name."""
    contacts_config = get_config().contacts
    if page_size is None:
        page_size = contacts_config.default_page_size

    if (
        page < 1
        or page_size < 1
        or page_size > contacts_config.max_page_size
        or (page - 1) * page_size > MAX_OFFSET
    ):
        logger.warning("Invalid paging parameters: page={}, page_size={}", page, page_size)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=(
                "Page must be >= 1 and PageSize must be between 1 and "
                f"{contacts_config.max_page_size}."
            ),
        )

    contacts = service.list_contacts(page, page_size)
    return [ContactDto.from_entity(contact) for contact in contacts]


@router.get("/search", response_model=ContactDto)
def search_contact(
    phone_number: str | None = Query(default=None, alias="phoneNumber"),
    service: ContactsService = Depends(get_contacts_service),
) -> ContactDto:
    """Find the contact with an exact phone number."""
    if phone_number is None or not phone_number.strip():
        logger.warning("Phone number search attempted with empty phoneNumber.")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Phone number must be provided.",
        )

    contact = service.find_by_phone_number(phone_number.strip())
    if contact is None:
        logger.info("No contact found for phone number: {}", phone_number)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No contact found with the provided phone number.",
        )
    return ContactDto.from_entity(contact)


@router.post("", response_model=ContactDto, status_code=status.HTTP_201_CREATED)
def create_contact(
    contact_dto: ContactDto,
    service: ContactsService = Depends(get_contacts_service),
) -> ContactDto:
    """Create a contact with a new, valid phone number."""
    contact = contact_dto.to_entity()

    if service.exists(contact.phone_number):
        logger.warning(
            "Attempt to create duplicate contact with phone number: {}", contact.phone_number
        )
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_PHONE_DETAIL)

    if not service.is_valid_phone_number(contact.phone_number):
        logger.warning("Invalid phone number format: {}", contact.phone_number)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid phone number format."
        )

    try:
        service.create(contact)
    except ContactAlreadyExistsError:
        # Lost a race with a concurrent create of the same number
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_PHONE_DETAIL
        ) from None

    return ContactDto.from_entity(contact)


@router.put(
    "/{phone_number}",
    status_code=status.HTTP_202_ACCEPTED,
    response_class=Response,
)
def update_contact(
    phone_number: str,
    contact_dto: ContactUpdateDto,
    service: ContactsService = Depends(get_contacts_service),
) -> Response:
    """Merge the supplied fields into an existing contact."""
    if not service.exists(phone_number):
        logger.info(
            "Attempt to update non-existent contact with phone number: {}", phone_number
        )
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)

    new_phone_number = contact_dto.phone_number
    if new_phone_number and new_phone_number != phone_number:
        if service.exists(new_phone_number):
            logger.warning(
                "Attempt to update contact with duplicate phone number: {}", new_phone_number
            )
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_PHONE_DETAIL
            )

        if not service.is_valid_phone_number(new_phone_number):
            logger.warning("Invalid new phone number format: {}", new_phone_number)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid new phone number format.",
            )

    try:
        service.update(contact_dto.to_entity(), phone_number)
    except ContactNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL
        ) from None
    except ContactAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_PHONE_DETAIL
        ) from None

    return Response(status_code=status.HTTP_202_ACCEPTED)


@router.delete(
    "/{phone_number}",
    status_code=status.HTTP_202_ACCEPTED,
    response_class=Response,
)
def delete_contact(
    phone_number: str,
    service: ContactsService = Depends(get_contacts_service),
) -> Response:
    """Hard delete a contact."""
    if not service.exists(phone_number):
        logger.info(
            "Attempt to delete non-existent contact with phone number: {}", phone_number
        )
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)

    try:
        service.delete(phone_number)
    except ContactNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL
        ) from None

    return Response(status_code=status.HTTP_202_ACCEPTED)
