from __future__ import annotations

from sqlmodel import Field

from contacts_api.models.base import IntIDModel, TimestampedModel


class Contact(IntIDModel, TimestampedModel, table=True):
    __tablename__ = "contacts"

    first_name: str = Field(max_length=255, nullable=False)
    last_name: str = Field(max_length=255, nullable=False)
    phone_number: str = Field(max_length=32, nullable=False)
    street: str = Field(max_length=255, nullable=False)
