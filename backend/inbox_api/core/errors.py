"""
Error taxonomy for the mails API.
Client errors map to 400, source and envelope failures to 500; the payload keeps the
{statusCode, message, error} shape existing frontends already parse.
"""

from __future__ import annotations

from fastapi.responses import JSONResponse

INVALID_PAGINATION_MESSAGE = "Invalid take, skip"


class MailsError(Exception):
    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, message: str | list[str]):
        self.message = message
        super().__init__(message if isinstance(message, str) else "; ".join(message))

    def to_payload(self) -> dict:
        return {"statusCode": self.status_code, "message": self.message, "error": self.error}


class ClientError(MailsError):
    status_code = 400
    error = "Bad Request"


class ValidationError(ClientError):
    """One or more query params are not numeric strings; message lists every field."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__(self.messages)


class InvalidParameterError(ClientError):
    """A param passed validation but has no leading integer (e.g. ".5")."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(INVALID_PAGINATION_MESSAGE)


class InvalidRangeError(ClientError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(INVALID_PAGINATION_MESSAGE)


class SourceUnavailableError(MailsError):
    def __init__(self, message: str = "Error getting mails from database"):
        super().__init__(message)


class ResponseConstructionError(MailsError):
    def __init__(self, message: str = "Error building response"):
        super().__init__(message)


def error_response(err: MailsError) -> JSONResponse:
    return JSONResponse(status_code=err.status_code, content=err.to_payload())
