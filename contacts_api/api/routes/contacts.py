from fastapi import APIRouter, Path, Query, status
from fastapi.responses import Response

from contacts_api.schemas.contact import ContactCreate, ContactList, ContactRead, ContactUpdate
from contacts_api.services.contact import ContactService

# `contacts.id` is a 32-bit INTEGER column.
MAX_CONTACT_ID = 2**31 - 1


def build_router(service: ContactService) -> APIRouter:
    router = APIRouter(prefix="/contacts", tags=["contacts"])

    @router.post("/", response_model=ContactRead, summary="Create new contact")
    def create_contact(payload: ContactCreate) -> ContactRead:
        contact = service.create_contact(payload)
        return ContactRead.model_validate(contact, from_attributes=True)

    @router.get("/", response_model=ContactList, summary="List contacts page by page")
    def list_contacts(
        page: str | None = Query(None, description="Page number, starting at 1"),
        limit: str | None = Query(None, description="Contacts per page"),
    ) -> ContactList:
        contacts = service.list_contacts(page, limit)
        return ContactList(
            size=len(contacts),
            contacts=[ContactRead.model_validate(contact, from_attributes=True) for contact in contacts],
        )

    @router.patch("/{contact_id}", response_model=ContactRead, summary="Update contact fields")
    def update_contact(
        payload: ContactUpdate,
        contact_id: int = Path(gt=0, le=MAX_CONTACT_ID),
    ) -> ContactRead:
        contact = service.update_contact(contact_id, payload)
        return ContactRead.model_validate(contact, from_attributes=True)

    @router.get("/{contact_id}", response_model=ContactRead, summary="Get a contact by id")
    def get_contact(contact_id: int = Path(gt=0, le=MAX_CONTACT_ID)) -> ContactRead:
        contact = service.get_contact(contact_id)
        return ContactRead.model_validate(contact, from_attributes=True)

    @router.delete(
        "/{contact_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary="Delete a contact",
    )
    def delete_contact(contact_id: int = Path(gt=0, le=MAX_CONTACT_ID)) -> Response:
        service.delete_contact(contact_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
