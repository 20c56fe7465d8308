from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONTACT_FIELDS = ("first_name", "last_name", "phone_number", "street")


class ContactBase(BaseModel):
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    phone_number: str = Field(min_length=1, max_length=32)
    street: str = Field(min_length=1, max_length=255)

    @field_validator(*CONTACT_FIELDS, mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class ContactCreate(ContactBase):
    pass


class ContactUpdate(BaseModel):
    """Partial update: empty or missing fields keep their stored value."""

    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    phone_number: str | None = Field(default=None, max_length=32)
    street: str | None = Field(default=None, max_length=255)

    @field_validator(*CONTACT_FIELDS, mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    def changes(self) -> dict[str, str]:
        update_data = self.model_dump(exclude_unset=True)
        return {key: value for key, value in update_data.items() if value}


class ContactRead(ContactBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class ContactList(BaseModel):
    status: str = "Successfully retrieved all contacts"
    size: int
    contacts: list[ContactRead] = Field(default_factory=list)


class StatusMessage(BaseModel):
    status: str
    message: str
