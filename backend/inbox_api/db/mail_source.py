"""
Read-only mail sources. The list endpoint depends on MailSource only, so the built-in
fixture, a JSON export or a test fake are interchangeable.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from inbox_api.config import Settings, settings
from inbox_api.core.errors import SourceUnavailableError
from inbox_api.db.fixtures import DEFAULT_MAILS
from inbox_api.schemas.mail import Mail

logger = logging.getLogger(__name__)

_mail_list_adapter = TypeAdapter(list[Mail])


class MailSource(Protocol):
    def fetch_all(self) -> Sequence[Mail]:
        """Full collection in display order."""
        ...

    def count(self) -> int:
        ...


class StaticMailSource:
    """In-memory source over a fixed, immutable collection."""

    def __init__(self, mails: Sequence[Mail]):
        self._mails = tuple(mails)

    def fetch_all(self) -> Sequence[Mail]:
        return self._mails

    def count(self) -> int:
        return len(self._mails)


class JsonFileMailSource:
    """
    Source backed by a JSON array of mails (same shape as the API output).
    The file is read on first access and cached; read or schema failures raise SourceUnavailableError.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._mails: tuple[Mail, ...] | None = None

    def _load(self) -> tuple[Mail, ...]:
        if self._mails is not None:
            return self._mails
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.error("Mail source: cannot read %s: %s", self.path, e)
            raise SourceUnavailableError() from e
        try:
            mails = _mail_list_adapter.validate_json(raw)
        except PydanticValidationError as e:
            logger.error("Mail source: invalid mail data in %s: %s", self.path, e)
            raise SourceUnavailableError() from e
        logger.info("Mail source: loaded %d mails from %s", len(mails), self.path)
        self._mails = tuple(mails)
        return self._mails

    def fetch_all(self) -> Sequence[Mail]:
        return self._load()

    def count(self) -> int:
        return len(self._load())


def load_mail_source(config: Settings) -> MailSource:
    if config.mails_source_path:
        return JsonFileMailSource(config.mails_source_path)
    return StaticMailSource(DEFAULT_MAILS)


@lru_cache(maxsize=1)
def get_mail_source() -> MailSource:
    """FastAPI dependency: process-wide mail source (override in tests via dependency_overrides)."""
    return load_mail_source(settings)
