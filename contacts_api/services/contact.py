from __future__ import annotations

from contacts_api.core.config import Settings
from contacts_api.core.errors import ContactNotFoundError
from contacts_api.core.logging_setup import logger
from contacts_api.db.repository import ContactRepository
from contacts_api.models.base import utcnow
from contacts_api.models.contact import Contact
from contacts_api.schemas.contact import ContactCreate, ContactUpdate

# Largest OFFSET the SQL drivers accept (signed 64-bit).
MAX_SQL_OFFSET = 2**63 - 1


def parse_page_param(raw: str | None, default: int) -> int:
    """Best-effort integer parsing for pagination; bad or non-positive input falls back to `default`."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value >= 1 else default


class ContactService:
    def __init__(self, repository: ContactRepository, settings: Settings) -> None:
        self.repository = repository
        self.default_page_size = settings.default_page_size
        self.max_page_size = settings.max_page_size

    def create_contact(self, payload: ContactCreate) -> Contact:
        now = utcnow()
        contact = Contact(**payload.model_dump(), created_at=now, updated_at=now)
        created = self.repository.create(contact)
        logger.info("Contato criado id=%s", created.id)
        return created

    def get_contact(self, contact_id: int) -> Contact:
        contact = self.repository.get(contact_id)
        if contact is None:
            raise ContactNotFoundError(contact_id)
        return contact

    def list_contacts(self, page: str | None = None, limit: str | None = None) -> list[Contact]:
        page_number = parse_page_param(page, 1)
        page_size = min(parse_page_param(limit, self.default_page_size), self.max_page_size)
        offset = (page_number - 1) * page_size
        if offset > MAX_SQL_OFFSET:
            return []
        return self.repository.list_contacts(limit=page_size, offset=offset)

    def update_contact(self, contact_id: int, payload: ContactUpdate) -> Contact:
        changes = payload.changes()
        contact = self.repository.update(contact_id, changes, updated_at=utcnow())
        if contact is None:
            raise ContactNotFoundError(contact_id)
        logger.info("Contato atualizado id=%s campos=%s", contact_id, sorted(changes))
        return contact

    def delete_contact(self, contact_id: int) -> None:
        # Existence check first so deleting nothing is reported as not found.
        self.get_contact(contact_id)
        self.repository.delete(contact_id)
        logger.info("Contato removido id=%s", contact_id)
