"""Pagination schemas for the mails list endpoint."""

from pydantic import BaseModel, Field


class PaginationParams(BaseModel):
    """Raw query params; both stay strings until the validator and parser have run."""

    take: str | None = Field(default=None, description="Max mails to return (numeric string)")
    skip: str | None = Field(default=None, description="Number of mails to skip (numeric string)")


class PageRequest(BaseModel):
    """Parsed, range-checked pagination."""

    take: int = Field(ge=1)
    skip: int = Field(ge=0)
