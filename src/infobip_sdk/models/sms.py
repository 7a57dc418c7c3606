"""Request and response models for the SMS channel and 2FA (PIN) endpoints.

Requests are validated against their field rules before dispatch; responses
are decoded leniently (every field optional).
"""

from enum import Enum
from typing import Annotated

from pydantic import Field

from infobip_sdk.models.base import QueryParameters, RequestModel, ResponseModel
from infobip_sdk.validation import Length, NonEmpty, Pattern, Range, Size, Url

LANGUAGE_CODES = r"^(TR|ES|PT|AUTODETECT)$"
TRANSLITERATIONS = (
    r"^(TURKISH|GREEK|CYRILLIC|SERBIAN_CYRILLIC|CENTRAL_EUROPEAN|BALTIC|NON_UNICODE)$"
)
CONTENT_TYPES = r"^(application/json|application/xml)$"
TURKEY_RECIPIENT_TYPES = r"^(TACIR|BIREYSEL)$"

REPORTS_LIMIT = Range(max=1000)


# ---------------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------------


class PreviewRequestBody(RequestModel):
    """Text to preview against the available language configurations."""

    text: str
    language_code: Annotated[str | None, Pattern(LANGUAGE_CODES)] = None
    transliteration: Annotated[str | None, Pattern(TRANSLITERATIONS)] = None


class Language(RequestModel):
    language_code: Annotated[str | None, Pattern(LANGUAGE_CODES)] = None


class PreviewLanguageConfiguration(ResponseModel):
    language: Language | None = None
    transliteration: str | None = None


class Preview(ResponseModel):
    characters_remaining: int | None = None
    configuration: PreviewLanguageConfiguration | None = None
    message_count: int | None = None
    text_preview: str | None = None


class PreviewResponseBody(ResponseModel):
    original_text: str | None = None
    previews: list[Preview] | None = None


# ---------------------------------------------------------------------------
# Shared report pieces
# ---------------------------------------------------------------------------


class Status(ResponseModel):
    """Message status as reported by the platform."""

    action: str | None = None
    description: str | None = None
    group_id: int | None = None
    group_name: str | None = None
    id: int | None = None
    name: str | None = None


class Price(ResponseModel):
    currency: str | None = None
    price_per_message: float | None = None


class Error(ResponseModel):
    description: str | None = None
    group_id: int | None = None
    group_name: str | None = None
    id: int | None = None
    name: str | None = None
    permanent: bool | None = None


class DeliveryReportsQueryParameters(QueryParameters):
    bulk_id: str | None = None
    message_id: str | None = None
    limit: Annotated[int | None, REPORTS_LIMIT] = None


class Report(ResponseModel):
    bulk_id: str | None = None
    callback_data: str | None = None
    done_at: str | None = None
    error: Error | None = None
    from_: str | None = Field(default=None, alias="from")
    mcc_mnc: str | None = None
    message_id: str | None = None
    price: Price | None = None
    sent_at: str | None = None
    sms_count: int | None = None
    status: Status | None = None
    to: str | None = None


class DeliveryReportsResponseBody(ResponseModel):
    results: list[Report] | None = None


# ---------------------------------------------------------------------------
# Sending
# ---------------------------------------------------------------------------


class TimeUnit(str, Enum):
    MINUTE = "MINUTE"
    HOUR = "HOUR"
    DAY = "DAY"


class DeliveryDay(str, Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class Tracking(RequestModel):
    """Conversion tracking options for a bulk of messages."""

    base_url: str | None = None
    process_key: str | None = None
    track: str | None = None
    tracking_type: str | None = None


class DeliveryTime(RequestModel):
    hour: Annotated[int, Range(min=0, max=23)]
    minute: Annotated[int, Range(min=0, max=59)]


class SpeedLimit(RequestModel):
    """Limits how many messages of a bulk are sent per time unit."""

    amount: int
    time_unit: TimeUnit | None = None


class UrlOptions(RequestModel):
    shorten_url: bool | None = None
    track_clicks: bool | None = None
    tracking_url: str | None = None
    remove_protocol: bool | None = None
    custom_domain: str | None = None


class DeliveryTimeWindow(RequestModel):
    """Days and hours between which messages may be delivered."""

    days: Annotated[list[DeliveryDay], Size(min=1, max=7)]
    from_: DeliveryTime | None = Field(default=None, alias="from")
    to: DeliveryTime | None = None


class Destination(RequestModel):
    to: Annotated[str, Length(min=1, max=50)]
    message_id: str | None = None


class IndiaDlt(RequestModel):
    """Distributed Ledger Technology identifiers required for Indian traffic."""

    principal_entity_id: Annotated[str, Length(min=1)]
    content_template_id: Annotated[str | None, Length(max=30)] = None


class TurkeyIys(RequestModel):
    """Message Management System (IYS) options required for Turkish traffic."""

    recipient_type: Annotated[str, Pattern(TURKEY_RECIPIENT_TYPES)]
    brand_code: int | None = None


class RegionalOptions(RequestModel):
    india_dlt: IndiaDlt | None = None
    turkey_iys: TurkeyIys | None = None


class Message(RequestModel):
    """One text message, possibly addressed to several destinations."""

    destinations: Annotated[list[Destination], NonEmpty()]
    text: str | None = None
    from_: Annotated[str | None, Field(alias="from"), Length(min=3, max=15)] = None
    callback_data: Annotated[str | None, Length(max=4000)] = None
    delivery_time_window: DeliveryTimeWindow | None = None
    flash: bool | None = None
    intermediate_report: bool | None = None
    language: Language | None = None
    notify_content_type: Annotated[str | None, Pattern(CONTENT_TYPES)] = None
    notify_url: Annotated[str | None, Url()] = None
    regional: RegionalOptions | None = None
    send_at: str | None = None
    transliteration: Annotated[str | None, Pattern(TRANSLITERATIONS)] = None
    validity_period: int | None = None


class BinaryData(RequestModel):
    hex: Annotated[str, Length(min=1)]
    data_coding: int | None = None
    esm_class: int | None = None


class BinaryMessage(RequestModel):
    """A binary message. Same delivery options as Message minus text handling."""

    destinations: Annotated[list[Destination], NonEmpty()]
    binary: BinaryData | None = None
    from_: Annotated[str | None, Field(alias="from"), Length(min=3, max=15)] = None
    callback_data: Annotated[str | None, Length(max=4000)] = None
    delivery_time_window: DeliveryTimeWindow | None = None
    flash: bool | None = None
    intermediate_report: bool | None = None
    notify_content_type: Annotated[str | None, Pattern(CONTENT_TYPES)] = None
    notify_url: Annotated[str | None, Url()] = None
    regional: RegionalOptions | None = None
    send_at: str | None = None
    validity_period: int | None = None


class SendRequestBody(RequestModel):
    messages: Annotated[list[Message], NonEmpty()]
    bulk_id: str | None = None
    sending_speed_limit: SpeedLimit | None = None
    url_options: UrlOptions | None = None
    tracking: Tracking | None = None


class SendBinaryRequestBody(RequestModel):
    messages: Annotated[list[BinaryMessage], NonEmpty()]
    bulk_id: str | None = None
    sending_speed_limit: SpeedLimit | None = None


class SentMessageDetails(ResponseModel):
    message_id: str | None = None
    status: Status | None = None
    to: str | None = None


class SendResponseBody(ResponseModel):
    bulk_id: str | None = None
    messages: list[SentMessageDetails] | None = None


class SendOverQueryParametersQueryParameters(QueryParameters):
    """Send a text message with everything in the query string (legacy method)."""

    username: str
    password: str
    to: list[str]
    bulk_id: str | None = None
    from_: str | None = Field(default=None, alias="from")
    text: str | None = None
    flash: bool | None = None
    transliteration: str | None = None
    language_code: str | None = None
    intermediate_report: bool | None = None
    notify_url: Annotated[str | None, Url()] = None
    notify_content_type: Annotated[str | None, Pattern(CONTENT_TYPES)] = None
    callback_data: str | None = None
    validity_period: int | None = None
    send_at: str | None = None
    track: str | None = None
    process_key: str | None = None
    tracking_type: str | None = None
    india_dlt_content_template_id: str | None = None
    india_dlt_principal_entity_id: str | None = None


# ---------------------------------------------------------------------------
# Scheduled messages
# ---------------------------------------------------------------------------


class ScheduledStatus(str, Enum):
    PENDING = "PENDING"
    PAUSED = "PAUSED"
    PROCESSING = "PROCESSING"
    CANCELED = "CANCELED"
    FINISHED = "FINISHED"
    FAILED = "FAILED"


class ScheduledQueryParameters(QueryParameters):
    """Identifies a scheduled bulk by its ID."""

    bulk_id: Annotated[str, Length(min=1)]


class ScheduledResponseBody(ResponseModel):
    bulk_id: str | None = None
    send_at: str | None = None


class RescheduleRequestBody(RequestModel):
    send_at: Annotated[str, Length(min=1)]


class ScheduledStatusResponseBody(ResponseModel):
    bulk_id: str | None = None
    status: ScheduledStatus | None = None


class UpdateScheduledStatusRequestBody(RequestModel):
    status: ScheduledStatus


# ---------------------------------------------------------------------------
# Logs and inbound messages
# ---------------------------------------------------------------------------


class LogsQueryParameters(QueryParameters):
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    bulk_id: list[str] | None = None
    message_id: list[str] | None = None
    general_status: str | None = None
    sent_since: str | None = None
    sent_until: str | None = None
    limit: Annotated[int | None, REPORTS_LIMIT] = None
    mcc: str | None = None
    mnc: str | None = None


class Log(ResponseModel):
    bulk_id: str | None = None
    done_at: str | None = None
    error: Error | None = None
    from_: str | None = Field(default=None, alias="from")
    mcc_mnc: str | None = None
    message_id: str | None = None
    price: Price | None = None
    sent_at: str | None = None
    sms_count: int | None = None
    status: Status | None = None
    text: str | None = None
    to: str | None = None


class LogsResponseBody(ResponseModel):
    results: list[Log] | None = None


class InboundReportsQueryParameters(QueryParameters):
    limit: Annotated[int | None, REPORTS_LIMIT] = None


class InboundSmsReport(ResponseModel):
    callback_data: str | None = None
    clean_text: str | None = None
    from_: str | None = Field(default=None, alias="from")
    keyword: str | None = None
    message_id: str | None = None
    price: Price | None = None
    received_at: str | None = None
    sms_count: int | None = None
    text: str | None = None
    to: str | None = None


class InboundReportsResponseBody(ResponseModel):
    message_count: int | None = None
    pending_message_count: int | None = None
    results: list[InboundSmsReport] | None = None


# ---------------------------------------------------------------------------
# 2FA applications and message templates
# ---------------------------------------------------------------------------


class TfaApplicationConfiguration(RequestModel):
    allow_multiple_pin_verifications: bool | None = None
    pin_attempts: int | None = None
    pin_time_to_live: str | None = None
    send_pin_per_application_limit: str | None = None
    send_pin_per_phone_number_limit: str | None = None
    verify_pin_limit: str | None = None


class TfaApplication(RequestModel):
    """A 2FA application. Used both to create/update and as the decoded result."""

    name: Annotated[str, Length(min=1)]
    application_id: str | None = None
    configuration: TfaApplicationConfiguration | None = None
    enabled: bool | None = None


class TfaLanguage(str, Enum):
    EN = "en"
    ES = "es"
    CA = "ca"
    DA = "da"
    NL = "nl"
    FR = "fr"
    DE = "de"
    IT = "it"
    JA = "ja"
    KO = "ko"
    NO = "no"
    PL = "pl"
    RU = "ru"
    SV = "sv"
    FI = "fi"
    HR = "hr"
    SL = "sl"
    RO = "ro"
    PT_PT = "pt-pt"
    PT_BR = "pt-br"
    ZH_CN = "zh-cn"
    ZH_TW = "zh-tw"


class PinType(str, Enum):
    NUMERIC = "NUMERIC"
    ALPHA = "ALPHA"
    HEX = "HEX"
    ALPHANUMERIC = "ALPHANUMERIC"


class TfaRegional(RequestModel):
    india_dlt: IndiaDlt | None = None


class TfaMessageTemplate(RequestModel):
    """Message template used to deliver a PIN by SMS or voice."""

    message_text: Annotated[str, Length(min=1)]
    pin_length: Annotated[int, Range(min=1)]
    pin_type: PinType
    application_id: str | None = None
    language: TfaLanguage | None = None
    message_id: str | None = None
    pin_placeholder: str | None = None
    regional: TfaRegional | None = None
    repeat_dtmf: str | None = Field(default=None, alias="repeatDTMF")
    sender_id: str | None = None
    speech_rate: float | None = None


# ---------------------------------------------------------------------------
# 2FA PIN delivery and verification
# ---------------------------------------------------------------------------


class SendPinQueryParameters(QueryParameters):
    nc_needed: bool | None = None


class SendPinRequestBody(RequestModel):
    application_id: Annotated[str, Length(min=1)]
    message_id: Annotated[str, Length(min=1)]
    to: Annotated[str, Length(min=1)]
    from_: str | None = Field(default=None, alias="from")
    placeholders: dict[str, str] | None = None


class SendPinResponseBody(ResponseModel):
    call_status: str | None = None
    nc_status: str | None = None
    pin_id: str | None = None
    sms_status: str | None = None
    to: str | None = None


class ResendPinRequestBody(RequestModel):
    placeholders: dict[str, str] | None = None


class VerifyPhoneNumberRequestBody(RequestModel):
    pin: Annotated[str, Length(min=1)]


class VerifyPhoneNumberResponseBody(ResponseModel):
    attempts_remaining: int | None = None
    msisdn: str | None = None
    pin_error: str | None = None
    pin_id: str | None = None
    verified: bool | None = None


class TfaVerificationStatusQueryParameters(QueryParameters):
    msisdn: Annotated[str, Length(min=1)]
    verified: bool | None = None
    sent: bool | None = None


class TfaVerification(ResponseModel):
    msisdn: str | None = None
    sent_at: int | None = None
    verified: bool | None = None
    verified_at: int | None = None


class TfaVerificationStatusResponseBody(ResponseModel):
    verifications: list[TfaVerification] | None = None
