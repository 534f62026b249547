"""
Mail pagination: parse take/skip, range-check them, slice the mail source.
Both entry points return either a value or a MailsError instead of raising,
so the router decides how each outcome maps to HTTP.
"""

from __future__ import annotations

import logging
import re
import sys

from pydantic import ValidationError as PydanticValidationError

from inbox_api.core.errors import (
    InvalidParameterError,
    InvalidRangeError,
    MailsError,
    ResponseConstructionError,
    SourceUnavailableError,
)
from inbox_api.db.mail_source import MailSource
from inbox_api.schemas.mail import MailsPage
from inbox_api.schemas.pagination import PageRequest, PaginationParams

logger = logging.getLogger(__name__)

DEFAULT_TAKE = 10
DEFAULT_SKIP = 0

# Leading integer prefix: "5.5" -> 5, " 12abc" -> 12, ".5" -> no match
_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")

# Longer digit runs are clamped; int() refuses strings past sys.int_info limits
MAX_INT_DIGITS = 18


def parse_leading_int(value: str) -> int | None:
    """
    Parse the leading integer of `value` (parseInt semantics); None when there is none.
    Magnitudes beyond 18 digits clamp to sys.maxsize, keeping the sign.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    magnitude = sys.maxsize if len(digits) > MAX_INT_DIGITS else int(digits)
    return -magnitude if sign == "-" else magnitude


def parse_page_request(params: PaginationParams) -> PageRequest | MailsError:
    take = DEFAULT_TAKE if params.take is None else parse_leading_int(params.take)
    skip = DEFAULT_SKIP if params.skip is None else parse_leading_int(params.skip)

    if take is None:
        return InvalidParameterError("take")
    if skip is None:
        return InvalidParameterError("skip")
    if take <= 0:
        return InvalidRangeError("take must be a positive number (minimum 1)")
    if skip < 0:
        return InvalidRangeError("skip must be a positive number or zero")
    return PageRequest(take=take, skip=skip)


def paginate_mails(source: MailSource, params: PaginationParams) -> MailsPage | MailsError:
    """
    Return mails[skip:skip + take] and the size of the full collection.
    Defaults: take=10, skip=0. An offset past the end yields an empty page, not an error.
    """
    page = parse_page_request(params)
    if isinstance(page, MailsError):
        logger.warning("Error parsing take, skip (take=%r, skip=%r): %s", params.take, params.skip, _describe(page))
        return page

    try:
        mails = source.fetch_all()
        total_count = source.count()
    except SourceUnavailableError as e:
        logger.error("Error getting mails from source: %s", e)
        return e

    requested = list(mails[page.skip : page.skip + page.take])
    try:
        return MailsPage(mails=requested, total_count=total_count)
    except PydanticValidationError as e:
        logger.error("Error building response: %s", e)
        return ResponseConstructionError()


def _describe(err: MailsError) -> str:
    if isinstance(err, InvalidRangeError):
        return err.reason
    if isinstance(err, InvalidParameterError):
        return f"{err.field} is not a number"
    return str(err)
