"""Mails API: paginated, read-only listing of the inbox."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from inbox_api.core.errors import MailsError, error_response
from inbox_api.core.metrics import record_mail_page_outcome
from inbox_api.db.mail_source import MailSource, get_mail_source
from inbox_api.schemas.mail import MailsPage
from inbox_api.schemas.pagination import PaginationParams
from inbox_api.services.pagination import paginate_mails
from inbox_api.services.validation import check_pagination_params

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mails", tags=["mails"])


@router.api_route(
    "",
    methods=["GET", "HEAD"],
    response_model=MailsPage,
    response_model_exclude_none=True,
    summary="List mails",
    responses={
        400: {"description": "take/skip is not a number or out of range"},
        500: {"description": "Mail source unavailable"},
    },
)
def list_mails(
    source: Annotated[MailSource, Depends(get_mail_source)],
    take: str | None = Query(default=None, description="Max mails to return (default 10)"),
    skip: str | None = Query(default=None, description="Number of mails to skip (default 0)"),
) -> MailsPage | JSONResponse:
    """List mails in inbox order, sliced by take/skip; totalCount is the full inbox size."""
    params = PaginationParams(take=take, skip=skip)
    invalid = check_pagination_params(params)
    if invalid is not None:
        logger.warning("Rejected mails query (take=%r, skip=%r): %s", take, skip, invalid)
    result = invalid if invalid is not None else paginate_mails(source, params)
    if isinstance(result, MailsError):
        record_mail_page_outcome(result.status_code)
        return error_response(result)
    record_mail_page_outcome(200)
    return result
