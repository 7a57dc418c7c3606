"""Base client — shared request dispatch for every channel client.

Channel clients only name the endpoint, the request models and the expected
response type. The base class handles the rest:

  - HTTP client lifecycle (injected or lazily owned)
  - Authentication headers on every request
  - Validation of every request model before any network I/O
  - Decoding 2xx bodies into typed responses, and non-2xx bodies into
    ApiRequestError with the service's structured error details

A new channel = a new subclass + one line in the factory dict.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Generic, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from infobip_sdk.configuration import Configuration
from infobip_sdk.errors import ApiRequestError, DecodeError, RequestValidationError
from infobip_sdk.models.base import QueryParameters, RequestModel
from infobip_sdk.models.errors import ApiErrorDetails

logger = logging.getLogger(__name__)

USER_AGENT = "infobip-sdk-python/0.1.0"

T = TypeVar("T")


class SdkResponse(BaseModel, Generic[T]):
    """Successful response: HTTP status plus the decoded body."""

    status_code: int
    body: T


@functools.lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def path_param(value: str) -> str:
    """Percent-encode a value substituted into a URL path segment."""
    return quote(str(value), safe="")


class BaseClient:
    """Shared behavior for the SMS, Email and WhatsApp clients.

    Pass ``http_client`` to share one ``httpx.AsyncClient`` (and its
    connection pool) between clients; the SDK will not close it. Otherwise
    a client is created on first use and closed by ``close()`` or by leaving
    an ``async with`` block.
    """

    channel = ""

    def __init__(
        self,
        configuration: Configuration,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.configuration = configuration
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.configuration.timeout_seconds)
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _url(self, path: str) -> str:
        return self.configuration.base_url.rstrip("/") + path

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json", "User-Agent": USER_AGENT}
        headers.update(self.configuration.auth_headers())
        return headers

    @staticmethod
    def _validate(*models: RequestModel | None) -> None:
        """Check every given model's field rules, raising once with all violations."""
        violations = []
        for model in models:
            if model is not None:
                violations.extend(model.violations())
        if violations:
            raise RequestValidationError(violations)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        body: RequestModel | None = None,
        params: QueryParameters | None = None,
        files: list[tuple[str, tuple[str | None, Any]]] | None = None,
    ) -> httpx.Response:
        client = await self._get_client()
        kwargs: dict[str, Any] = {"headers": self._headers()}
        if body is not None:
            kwargs["json"] = body.to_wire()
        if params is not None:
            kwargs["params"] = params.to_params()
        if files is not None:
            kwargs["files"] = files
        auth = self.configuration.httpx_auth()
        if auth is not None:
            kwargs["auth"] = auth

        logger.debug(f"{self.channel}: {method} {path}")
        response = await client.request(method, self._url(path), **kwargs)
        logger.debug(f"{self.channel}: {method} {path} -> {response.status_code}")
        return response

    def _raise_for_error(self, response: httpx.Response) -> None:
        """Raise ApiRequestError (or DecodeError) for a non-2xx response."""
        if response.is_success:
            return
        try:
            details = ApiErrorDetails.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(
                f"{self.channel}: undecodable error body with status {response.status_code}"
            )
            raise DecodeError(response.status_code, response.content, str(e)) from e

        error = ApiRequestError(response.status_code, details)
        exception = error.service_exception
        message_id = exception.message_id if exception is not None else None
        logger.warning(
            f"{self.channel}: request failed with status {response.status_code} ({message_id})"
        )
        raise error

    def _decode(self, response: httpx.Response, response_type: Any) -> SdkResponse:
        self._raise_for_error(response)
        try:
            body = _adapter(response_type).validate_json(response.content)
        except ValidationError as e:
            logger.error(
                f"{self.channel}: could not decode {response_type} "
                f"from status {response.status_code} response"
            )
            raise DecodeError(response.status_code, response.content, str(e)) from e
        return SdkResponse(status_code=response.status_code, body=body)

    async def _request(
        self,
        method: str,
        path: str,
        response_type: Any,
        *,
        body: RequestModel | None = None,
        params: QueryParameters | None = None,
    ) -> SdkResponse:
        """Validate, send a JSON request and decode the typed response."""
        self._validate(body, params)
        response = await self._send(method, path, body=body, params=params)
        return self._decode(response, response_type)

    async def _request_status(
        self,
        method: str,
        path: str,
        *,
        body: RequestModel | None = None,
    ) -> int:
        """Send a request whose success carries no body; return the status code."""
        self._validate(body)
        response = await self._send(method, path, body=body)
        self._raise_for_error(response)
        return response.status_code
