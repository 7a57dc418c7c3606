"""Email channel client — sending, scheduled bulks, reports, validation and domains.

Sending is multipart/form-data. Attachment and inline image paths on the
request are read from disk before anything is sent; an unreadable file
raises AttachmentError and no request goes out.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from infobip_sdk.clients.base import BaseClient, SdkResponse, path_param
from infobip_sdk.errors import AttachmentError
from infobip_sdk.models.email import (
    AddDomainRequestBody,
    BulksQueryParameters,
    BulksResponseBody,
    DeliveryReportsQueryParameters,
    DeliveryReportsResponseBody,
    Domain,
    DomainsQueryParameters,
    DomainsResponseBody,
    LogsQueryParameters,
    LogsResponseBody,
    RescheduleRequestBody,
    RescheduleResponseBody,
    ScheduledStatusResponseBody,
    SendRequestBody,
    SendResponseBody,
    UpdateScheduledStatusRequestBody,
    UpdateScheduledStatusResponseBody,
    UpdateTrackingRequestBody,
    ValidateAddressRequestBody,
    ValidateAddressResponseBody,
)

logger = logging.getLogger(__name__)

PATH_SEND = "/email/3/send"
PATH_BULKS = "/email/1/bulks"
PATH_BULKS_STATUS = "/email/1/bulks/status"
PATH_DELIVERY_REPORTS = "/email/1/reports"
PATH_LOGS = "/email/1/logs"
PATH_VALIDATE = "/email/2/validation"
PATH_DOMAINS = "/email/1/domains"
PATH_DOMAIN = "/email/1/domains/{domain_name}"
PATH_DOMAIN_TRACKING = "/email/1/domains/{domain_name}/tracking"
PATH_DOMAIN_VERIFY = "/email/1/domains/{domain_name}/verify"


async def _read_file_part(path: str) -> tuple[str, bytes]:
    try:
        content = await asyncio.to_thread(Path(path).read_bytes)
    except OSError as e:
        raise AttachmentError(path) from e
    return Path(path).name, content


async def build_form(request_body: SendRequestBody) -> list[tuple[str, tuple[str | None, Any]]]:
    """Multipart parts for an email send: text fields first, then files."""
    parts: list[tuple[str, tuple[str | None, Any]]] = [
        (key, (None, value)) for key, value in request_body.text_parts()
    ]
    for key, path in request_body.file_parts():
        parts.append((key, await _read_file_part(path)))
    return parts


class EmailClient(BaseClient):
    """Async client for the Email channel."""

    channel = "email"

    async def send(self, request_body: SendRequestBody) -> SdkResponse[SendResponseBody]:
        """Send an email, with optional attachment and inline image."""
        self._validate(request_body)
        files = await build_form(request_body)
        logger.debug(f"email: sending form with {len(files)} parts")
        response = await self._send("POST", PATH_SEND, files=files)
        return self._decode(response, SendResponseBody)

    # -- Scheduled bulks ----------------------------------------------------

    async def bulks(
        self, query_parameters: BulksQueryParameters
    ) -> SdkResponse[BulksResponseBody]:
        """Scheduled sending time for each email bulk of a request."""
        return await self._request("GET", PATH_BULKS, BulksResponseBody, params=query_parameters)

    async def reschedule(
        self,
        query_parameters: BulksQueryParameters,
        request_body: RescheduleRequestBody,
    ) -> SdkResponse[RescheduleResponseBody]:
        return await self._request(
            "PUT",
            PATH_BULKS,
            RescheduleResponseBody,
            body=request_body,
            params=query_parameters,
        )

    async def scheduled_status(
        self, query_parameters: BulksQueryParameters
    ) -> SdkResponse[ScheduledStatusResponseBody]:
        return await self._request(
            "GET", PATH_BULKS_STATUS, ScheduledStatusResponseBody, params=query_parameters
        )

    async def update_scheduled_status(
        self,
        query_parameters: BulksQueryParameters,
        request_body: UpdateScheduledStatusRequestBody,
    ) -> SdkResponse[UpdateScheduledStatusResponseBody]:
        return await self._request(
            "PUT",
            PATH_BULKS_STATUS,
            UpdateScheduledStatusResponseBody,
            body=request_body,
            params=query_parameters,
        )

    # -- Reports ------------------------------------------------------------

    async def delivery_reports(
        self, query_parameters: DeliveryReportsQueryParameters | None = None
    ) -> SdkResponse[DeliveryReportsResponseBody]:
        return await self._request(
            "GET",
            PATH_DELIVERY_REPORTS,
            DeliveryReportsResponseBody,
            params=query_parameters or DeliveryReportsQueryParameters(),
        )

    async def logs(
        self, query_parameters: LogsQueryParameters | None = None
    ) -> SdkResponse[LogsResponseBody]:
        return await self._request(
            "GET", PATH_LOGS, LogsResponseBody, params=query_parameters or LogsQueryParameters()
        )

    async def validate_address(
        self, request_body: ValidateAddressRequestBody
    ) -> SdkResponse[ValidateAddressResponseBody]:
        """Check the syntax and deliverability of one email address."""
        return await self._request(
            "POST", PATH_VALIDATE, ValidateAddressResponseBody, body=request_body
        )

    # -- Domains ------------------------------------------------------------

    async def domains(
        self, query_parameters: DomainsQueryParameters | None = None
    ) -> SdkResponse[DomainsResponseBody]:
        return await self._request(
            "GET",
            PATH_DOMAINS,
            DomainsResponseBody,
            params=query_parameters or DomainsQueryParameters(),
        )

    async def add_domain(self, request_body: AddDomainRequestBody) -> SdkResponse[Domain]:
        return await self._request("POST", PATH_DOMAINS, Domain, body=request_body)

    async def domain(self, domain_name: str) -> SdkResponse[Domain]:
        path = PATH_DOMAIN.format(domain_name=path_param(domain_name))
        return await self._request("GET", path, Domain)

    async def delete_domain(self, domain_name: str) -> int:
        """Delete a domain. Returns the status code (204 on success)."""
        path = PATH_DOMAIN.format(domain_name=path_param(domain_name))
        return await self._request_status("DELETE", path)

    async def update_tracking(
        self, domain_name: str, request_body: UpdateTrackingRequestBody
    ) -> SdkResponse[Domain]:
        path = PATH_DOMAIN_TRACKING.format(domain_name=path_param(domain_name))
        return await self._request("PUT", path, Domain, body=request_body)

    async def verify_domain(self, domain_name: str) -> int:
        """Start DNS verification of a domain. Returns the status code (202 on success)."""
        path = PATH_DOMAIN_VERIFY.format(domain_name=path_param(domain_name))
        return await self._request_status("POST", path)
