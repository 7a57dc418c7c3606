"""Exceptions raised by the SDK.

Every failure a caller can see falls into one of these buckets:

  - RequestValidationError: the request body broke one or more field rules.
    Raised before anything touches the network.
  - ApiRequestError: the service answered with a non-2xx status and a
    structured error body.
  - DecodeError: the service answered but the body could not be parsed into
    the expected shape (on either the success or the error path).
  - AttachmentError: an Email attachment or inline image could not be read.

Transport failures (connection refused, timeouts, TLS) are not wrapped:
``httpx.TransportError`` propagates unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from infobip_sdk.models.errors import ApiErrorDetails, ServiceException
    from infobip_sdk.validation import Violation


class SdkError(Exception):
    """Base class for all SDK errors."""


class RequestValidationError(SdkError):
    """A request body failed local validation."""

    def __init__(self, violations: Iterable[Violation]) -> None:
        self.violations = list(violations)
        summary = "; ".join(str(v) for v in self.violations)
        super().__init__(f"Request validation failed: {summary}")

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.violations]


class ApiRequestError(SdkError):
    """The service rejected a request and described why."""

    def __init__(self, status_code: int, details: ApiErrorDetails) -> None:
        self.status_code = status_code
        self.details = details
        exception = self.service_exception
        if exception is not None and exception.message_id:
            message = f"API request failed with status {status_code}: {exception.message_id}"
            if exception.text:
                message = f"{message} ({exception.text})"
        else:
            message = f"API request failed with status {status_code}"
        super().__init__(message)

    @property
    def service_exception(self) -> ServiceException | None:
        if self.details.request_error is None:
            return None
        return self.details.request_error.service_exception


class DecodeError(SdkError):
    """A response body could not be decoded."""

    def __init__(self, status_code: int, content: bytes, reason: str = "") -> None:
        self.status_code = status_code
        self.content = content
        message = f"Could not decode response with status {status_code}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AttachmentError(SdkError):
    """A local file referenced by a request could not be read."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Could not read file '{path}'")
