"""Pydantic schemas for mail records as served by the API."""

from pydantic import BaseModel, ConfigDict, Field


class Avatar(BaseModel):
    model_config = ConfigDict(frozen=True)

    src: str


class Sender(BaseModel):
    """Mail sender (the `from` user)."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str
    email: str
    avatar: Avatar | None = None


class Mail(BaseModel):
    """Single mail record. Immutable; `sender` is `from` on the wire."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int | None = None
    sender: Sender = Field(alias="from")
    subject: str
    body: str
    date: str = Field(description="ISO-8601 UTC timestamp")
    unread: bool | None = None


class MailsPage(BaseModel):
    """Response of GET /mails: one slice of mails plus the size of the full collection."""

    model_config = ConfigDict(populate_by_name=True)

    mails: list[Mail]
    total_count: int = Field(alias="totalCount", ge=0)
