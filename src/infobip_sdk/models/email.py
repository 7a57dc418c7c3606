"""Request and response models for the Email channel.

Sending is a multipart/form-data request rather than JSON: every present
field of ``SendRequestBody`` becomes one form part named by its wire key.
``attachment`` and ``inline_image`` hold local file paths; the client reads
those files and streams them as binary parts.
"""

from enum import Enum, IntEnum
from typing import Annotated

from pydantic import Field

from infobip_sdk.models.base import QueryParameters, RequestModel, ResponseModel
from infobip_sdk.models.sms import CONTENT_TYPES, Price, Status
from infobip_sdk.models.sms import Error as ReportError
from infobip_sdk.validation import Length, Pattern, Range, Url

FILE_PARTS = ("attachment", "inlineImage")


# ---------------------------------------------------------------------------
# Sending
# ---------------------------------------------------------------------------


class SendRequestBody(RequestModel):
    """A single email send. ``to`` is the only required field."""

    to: Annotated[str, Length(min=1)]
    from_: str | None = Field(default=None, alias="from")
    cc: str | None = None
    bcc: str | None = None
    subject: Annotated[str | None, Length(max=150)] = None
    text: str | None = None
    html: str | None = None
    amp_html: str | None = None
    template_id: int | None = None
    attachment: str | None = None
    inline_image: str | None = None
    intermediate_report: bool | None = None
    notify_url: Annotated[str | None, Url()] = None
    notify_content_type: Annotated[str | None, Pattern(CONTENT_TYPES)] = None
    callback_data: Annotated[str | None, Length(max=4000)] = None
    track: bool | None = None
    track_clicks: bool | None = None
    track_opens: bool | None = None
    tracking_url: Annotated[str | None, Url()] = None
    bulk_id: str | None = None
    message_id: str | None = None
    reply_to: str | None = None
    default_placeholders: str | None = None
    preserve_recipients: bool | None = None
    send_at: str | None = None
    landing_page_placeholders: str | None = None
    landing_page_id: str | None = None

    def text_parts(self) -> list[tuple[str, str]]:
        """Form parts for every present non-file field, in declaration order."""
        parts: list[tuple[str, str]] = []
        for key, value in self.to_wire().items():
            if key in FILE_PARTS:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            parts.append((key, str(value)))
        return parts

    def file_parts(self) -> list[tuple[str, str]]:
        """(part name, local path) for each file the request references."""
        wire = self.to_wire()
        return [(key, wire[key]) for key in FILE_PARTS if key in wire]


class SentEmailDetails(ResponseModel):
    to: str | None = None
    message_count: int | None = None
    message_id: str | None = None
    status: Status | None = None


class SendResponseBody(ResponseModel):
    bulk_id: str | None = None
    messages: list[SentEmailDetails] | None = None


# ---------------------------------------------------------------------------
# Scheduled bulks
# ---------------------------------------------------------------------------


class BulkStatus(str, Enum):
    PENDING = "PENDING"
    PAUSED = "PAUSED"
    PROCESSING = "PROCESSING"
    CANCELED = "CANCELED"
    FINISHED = "FINISHED"
    FAILED = "FAILED"


class BulksQueryParameters(QueryParameters):
    bulk_id: Annotated[str, Length(min=1)]


class BulkInfo(ResponseModel):
    bulk_id: str | None = None
    send_at: int | None = None


class BulksResponseBody(ResponseModel):
    external_bulk_id: str | None = None
    bulks: list[BulkInfo] | None = None


class RescheduleRequestBody(RequestModel):
    send_at: Annotated[str, Length(min=1)]


class RescheduleResponseBody(ResponseModel):
    """``send_at`` is epoch milliseconds."""

    bulk_id: str | None = None
    send_at: int | None = None


class BulkStatusInfo(ResponseModel):
    bulk_id: str | None = None
    status: BulkStatus | None = None


class ScheduledStatusResponseBody(ResponseModel):
    external_bulk_id: str | None = None
    bulks: list[BulkStatusInfo] | None = None


class UpdateScheduledStatusRequestBody(RequestModel):
    status: BulkStatus


class UpdateScheduledStatusResponseBody(ResponseModel):
    bulk_id: str | None = None
    status: BulkStatus | None = None


# ---------------------------------------------------------------------------
# Reports and logs
# ---------------------------------------------------------------------------


class DeliveryReportsQueryParameters(QueryParameters):
    bulk_id: str | None = None
    message_id: str | None = None
    limit: Annotated[int | None, Range(max=1000)] = None


class Report(ResponseModel):
    bulk_id: str | None = None
    message_id: str | None = None
    to: str | None = None
    sent_at: str | None = None
    done_at: str | None = None
    message_count: int | None = None
    price: Price | None = None
    status: Status | None = None
    error: ReportError | None = None
    channel: str | None = None


class DeliveryReportsResponseBody(ResponseModel):
    results: list[Report] | None = None


class LogsQueryParameters(QueryParameters):
    message_id: str | None = None
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    bulk_id: str | None = None
    general_status: str | None = None
    sent_since: str | None = None
    sent_until: str | None = None
    limit: Annotated[int | None, Range(max=1000)] = None


class Log(ResponseModel):
    message_id: str | None = None
    to: str | None = None
    from_: str | None = Field(default=None, alias="from")
    text: str | None = None
    sent_at: str | None = None
    done_at: str | None = None
    message_count: int | None = None
    price: Price | None = None
    status: Status | None = None
    bulk_id: str | None = None


class LogsResponseBody(ResponseModel):
    results: list[Log] | None = None


# ---------------------------------------------------------------------------
# Address validation
# ---------------------------------------------------------------------------


class ValidateAddressRequestBody(RequestModel):
    to: Annotated[str, Length(min=1)]


class ValidateAddressResponseBody(ResponseModel):
    to: str | None = None
    valid_mailbox: str | None = None
    valid_syntax: bool | None = None
    catch_all: bool | None = None
    did_you_mean: str | None = None
    disposable: bool | None = None
    role_based: bool | None = None
    reason: str | None = None


# ---------------------------------------------------------------------------
# Domains
# ---------------------------------------------------------------------------


class DkimKeyLength(IntEnum):
    L1024 = 1024
    L2048 = 2048


class DomainsQueryParameters(QueryParameters):
    size: Annotated[int | None, Range(min=1, max=20)] = None
    page: Annotated[int | None, Range(min=1)] = None


class TrackingDetails(ResponseModel):
    clicks: bool | None = None
    opens: bool | None = None
    unsubscribe: bool | None = None


class DnsRecord(ResponseModel):
    record_type: str | None = None
    name: str | None = None
    expected_value: str | None = None
    verified: bool | None = None


class Domain(ResponseModel):
    domain_id: int | None = None
    domain_name: str | None = None
    active: bool | None = None
    tracking: TrackingDetails | None = None
    dns_records: list[DnsRecord] | None = None
    blocked: bool | None = None
    created_at: str | None = None


class Paging(ResponseModel):
    page: int | None = None
    size: int | None = None
    total_pages: int | None = None
    total_results: int | None = None


class DomainsResponseBody(ResponseModel):
    paging: Paging | None = None
    results: list[Domain] | None = None


class AddDomainRequestBody(RequestModel):
    domain_name: Annotated[str, Length(min=1)]
    dkim_key_length: DkimKeyLength | None = None


class UpdateTrackingRequestBody(RequestModel):
    opens: bool | None = None
    clicks: bool | None = None
    unsubscribe: bool | None = None
