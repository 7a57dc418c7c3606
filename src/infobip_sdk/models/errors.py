"""Structured error body returned by the service on non-2xx responses.

    {"requestError": {"serviceException": {
        "messageId": "BAD_REQUEST",
        "text": "Bad request",
        "validationErrors": {"content.text": ["size must be between 1 and 4096"]}
    }}}
"""

from infobip_sdk.models.base import ResponseModel


class ServiceException(ResponseModel):
    message_id: str | None = None
    text: str | None = None
    validation_errors: dict[str, list[str]] | None = None


class RequestError(ResponseModel):
    service_exception: ServiceException | None = None


class ApiErrorDetails(ResponseModel):
    request_error: RequestError | None = None
