"""
Contact persistence.

Every query for the `contacts` table lives here. A missing row is reported as
`None`; database failures are re-raised as `StoreError` so callers never have
to inspect driver exceptions.
"""

from __future__ import annotations

from datetime import datetime
from typing import NoReturn

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from contacts_api.core.errors import StoreError
from contacts_api.core.logging_setup import logger
from contacts_api.db.session import session_scope
from contacts_api.models.contact import Contact


class ContactRepository:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def create(self, contact: Contact) -> Contact:
        with session_scope(self.engine) as session:
            try:
                session.add(contact)
                session.commit()
                session.refresh(contact)
            except SQLAlchemyError as exc:
                self._fail(session, exc, "Failed creating contact")
            return contact

    def get(self, contact_id: int) -> Contact | None:
        with session_scope(self.engine) as session:
            try:
                return session.get(Contact, contact_id)
            except SQLAlchemyError as exc:
                self._fail(session, exc, "Failed retrieving contact")

    def list_contacts(self, *, limit: int, offset: int) -> list[Contact]:
        statement = select(Contact).order_by(Contact.id).limit(limit).offset(offset)
        with session_scope(self.engine) as session:
            try:
                return list(session.exec(statement).all())
            except SQLAlchemyError as exc:
                self._fail(session, exc, "Failed to retrieve contacts")

    def update(self, contact_id: int, changes: dict[str, str], *, updated_at: datetime) -> Contact | None:
        """
        Overwrite only the keys present in `changes` and refresh `updated_at`.
        Returns the updated row, or None when no contact has this id.
        """
        with session_scope(self.engine) as session:
            try:
                contact = session.get(Contact, contact_id, with_for_update=True)
                if contact is None:
                    return None
                for field, value in changes.items():
                    setattr(contact, field, value)
                contact.updated_at = updated_at
                session.add(contact)
                session.commit()
                session.refresh(contact)
                return contact
            except SQLAlchemyError as exc:
                self._fail(session, exc, "Failed updating contact")

    def delete(self, contact_id: int) -> None:
        with session_scope(self.engine) as session:
            try:
                contact = session.get(Contact, contact_id)
                if contact is not None:
                    session.delete(contact)
                    session.commit()
            except SQLAlchemyError as exc:
                self._fail(session, exc, "failed")

    def ping(self) -> None:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error("Database unavailable: %s", exc)
            raise StoreError(_driver_message(exc), operation="Database unavailable") from exc

    @staticmethod
    def _fail(session: Session, exc: SQLAlchemyError, operation: str) -> NoReturn:
        session.rollback()
        logger.error("%s: %s", operation, exc)
        raise StoreError(_driver_message(exc), operation=operation) from exc


def _driver_message(exc: SQLAlchemyError) -> str:
    original = getattr(exc, "orig", None)
    return str(original) if original is not None else str(exc)
