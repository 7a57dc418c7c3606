"""Request and response models for the WhatsApp channel.

Each send endpoint has its own request class: the shared addressing fields
live on ``SendContentRequestBody`` and every subclass declares the ``content``
shape its endpoint accepts.

Slots that hold one of several shapes (interactive headers, template headers,
template buttons) are discriminated unions keyed on a literal ``type`` or
``format`` field, so decoding always lands on the right class and an unknown
tag is rejected.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from infobip_sdk.models.base import RequestModel, ResponseModel
from infobip_sdk.models.sms import Status
from infobip_sdk.validation import Length, NonEmpty, Range, Size, Url

Latitude = Annotated[float, Range(min=-90.0, max=90.0)]
Longitude = Annotated[float, Range(min=-180.0, max=180.0)]
MediaUrl = Annotated[str, Url()]


# ---------------------------------------------------------------------------
# Media, text and location content
# ---------------------------------------------------------------------------


class TextContent(RequestModel):
    text: Annotated[str, Length(min=1, max=4096)]
    preview_url: bool | None = None


class DocumentContent(RequestModel):
    media_url: MediaUrl
    caption: Annotated[str | None, Length(max=3000)] = None
    filename: Annotated[str | None, Length(max=240)] = None


class ImageContent(RequestModel):
    media_url: MediaUrl
    caption: Annotated[str | None, Length(max=3000)] = None


class AudioContent(RequestModel):
    media_url: MediaUrl


class VideoContent(RequestModel):
    media_url: MediaUrl
    caption: Annotated[str | None, Length(max=3000)] = None


class StickerContent(RequestModel):
    media_url: MediaUrl


class LocationContent(RequestModel):
    latitude: Latitude
    longitude: Longitude
    name: Annotated[str | None, Length(max=1000)] = None
    address: Annotated[str | None, Length(max=1000)] = None


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


class AddressType(str, Enum):
    HOME = "HOME"
    WORK = "WORK"


class PhoneType(str, Enum):
    CELL = "CELL"
    MAIN = "MAIN"
    IPHONE = "IPHONE"
    HOME = "HOME"
    WORK = "WORK"


class ContactAddress(RequestModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    country_code: str | None = None
    type: AddressType | None = None


class ContactName(RequestModel):
    first_name: Annotated[str, Length(min=1)]
    formatted_name: Annotated[str, Length(min=1)]
    last_name: str | None = None
    middle_name: str | None = None
    name_suffix: str | None = None
    name_prefix: str | None = None


class ContactOrganization(RequestModel):
    company: str | None = None
    department: str | None = None
    title: str | None = None


class ContactPhone(RequestModel):
    phone: str | None = None
    type: PhoneType | None = None
    wa_id: str | None = None


class ContactUrl(RequestModel):
    url: Annotated[str | None, Url()] = None
    type: AddressType | None = None


class ContactEmail(RequestModel):
    email: str | None = None
    type: AddressType | None = None


class Contact(RequestModel):
    name: ContactName
    addresses: list[ContactAddress] | None = None
    birthday: str | None = None
    emails: list[ContactEmail] | None = None
    org: ContactOrganization | None = None
    phones: list[ContactPhone] | None = None
    urls: list[ContactUrl] | None = None


class ContactContent(RequestModel):
    contacts: Annotated[list[Contact], NonEmpty()]


# ---------------------------------------------------------------------------
# Interactive messages
# ---------------------------------------------------------------------------


class InteractiveBody(RequestModel):
    text: Annotated[str, Length(min=1, max=1024)]


class InteractiveFooter(RequestModel):
    text: Annotated[str, Length(min=1, max=60)]


class InteractiveReplyButton(RequestModel):
    """Quick reply button. ``id`` must not have leading or trailing whitespace."""

    type: Literal["REPLY"] = "REPLY"
    id: str
    title: str


class InteractiveButtonsAction(RequestModel):
    buttons: Annotated[list[InteractiveReplyButton], Size(min=1, max=3)]


class InteractiveDocumentHeader(RequestModel):
    type: Literal["DOCUMENT"] = "DOCUMENT"
    media_url: MediaUrl
    filename: str | None = None


class InteractiveImageHeader(RequestModel):
    type: Literal["IMAGE"] = "IMAGE"
    media_url: MediaUrl


class InteractiveTextHeader(RequestModel):
    type: Literal["TEXT"] = "TEXT"
    text: str


class InteractiveVideoHeader(RequestModel):
    type: Literal["VIDEO"] = "VIDEO"
    media_url: MediaUrl


InteractiveButtonsHeader = Annotated[
    Union[
        InteractiveDocumentHeader,
        InteractiveImageHeader,
        InteractiveTextHeader,
        InteractiveVideoHeader,
    ],
    Field(discriminator="type"),
]


class InteractiveButtonsContent(RequestModel):
    body: InteractiveBody
    action: InteractiveButtonsAction
    header: InteractiveButtonsHeader | None = None
    footer: InteractiveFooter | None = None


class InteractiveRow(RequestModel):
    id: Annotated[str, Length(min=1, max=200)]
    title: Annotated[str, Length(min=1, max=24)]
    description: Annotated[str | None, Length(max=72)] = None


class InteractiveListSection(RequestModel):
    rows: Annotated[list[InteractiveRow], NonEmpty()]
    title: Annotated[str | None, Length(max=24)] = None


class InteractiveListAction(RequestModel):
    title: Annotated[str, Length(min=1, max=20)]
    sections: Annotated[list[InteractiveListSection], Size(min=1, max=10)]


class InteractiveListContent(RequestModel):
    body: InteractiveBody
    action: InteractiveListAction
    header: InteractiveTextHeader | None = None
    footer: InteractiveFooter | None = None


class InteractiveProductAction(RequestModel):
    catalog_id: Annotated[str, Length(min=1)]
    product_retailer_id: Annotated[str, Length(min=1)]


class InteractiveProductContent(RequestModel):
    action: InteractiveProductAction
    body: InteractiveBody | None = None
    footer: InteractiveFooter | None = None


class InteractiveMultiproductSection(RequestModel):
    product_retailer_ids: list[str]
    title: Annotated[str | None, Length(max=24)] = None


class InteractiveMultiproductAction(RequestModel):
    catalog_id: Annotated[str, Length(min=1)]
    sections: Annotated[list[InteractiveMultiproductSection], Size(min=1, max=10)]


class InteractiveMultiproductContent(RequestModel):
    header: InteractiveTextHeader
    body: InteractiveBody
    action: InteractiveMultiproductAction
    footer: InteractiveFooter | None = None


# ---------------------------------------------------------------------------
# Single-message send requests
# ---------------------------------------------------------------------------


class SendContentRequestBody(RequestModel):
    """Addressing and callback fields shared by every single-message send."""

    from_: Annotated[str, Field(alias="from"), Length(min=1, max=24)]
    to: Annotated[str, Length(min=1, max=24)]
    message_id: Annotated[str | None, Length(max=50)] = None
    callback_data: Annotated[str | None, Length(max=4000)] = None
    notify_url: Annotated[str | None, Url()] = None


class SendTextRequestBody(SendContentRequestBody):
    content: TextContent


class SendDocumentRequestBody(SendContentRequestBody):
    content: DocumentContent


class SendImageRequestBody(SendContentRequestBody):
    content: ImageContent


class SendAudioRequestBody(SendContentRequestBody):
    content: AudioContent


class SendVideoRequestBody(SendContentRequestBody):
    content: VideoContent


class SendStickerRequestBody(SendContentRequestBody):
    content: StickerContent


class SendLocationRequestBody(SendContentRequestBody):
    content: LocationContent


class SendContactRequestBody(SendContentRequestBody):
    content: ContactContent


class SendInteractiveButtonsRequestBody(SendContentRequestBody):
    content: InteractiveButtonsContent


class SendInteractiveListRequestBody(SendContentRequestBody):
    content: InteractiveListContent


class SendInteractiveProductRequestBody(SendContentRequestBody):
    content: InteractiveProductContent


class SendInteractiveMultiproductRequestBody(SendContentRequestBody):
    content: InteractiveMultiproductContent


class SendContentResponseBody(ResponseModel):
    to: str | None = None
    message_count: int | None = None
    message_id: str | None = None
    status: Status | None = None


# ---------------------------------------------------------------------------
# Template registration
# ---------------------------------------------------------------------------


class TemplateCategory(str, Enum):
    ACCOUNT_UPDATE = "ACCOUNT_UPDATE"
    PAYMENT_UPDATE = "PAYMENT_UPDATE"
    PERSONAL_FINANCE_UPDATE = "PERSONAL_FINANCE_UPDATE"
    SHIPPING_UPDATE = "SHIPPING_UPDATE"
    RESERVATION_UPDATE = "RESERVATION_UPDATE"
    ISSUE_RESOLUTION = "ISSUE_RESOLUTION"
    APPOINTMENT_UPDATE = "APPOINTMENT_UPDATE"
    TRANSPORTATION_UPDATE = "TRANSPORTATION_UPDATE"
    TICKET_UPDATE = "TICKET_UPDATE"
    ALERT_UPDATE = "ALERT_UPDATE"
    AUTO_REPLY = "AUTO_REPLY"
    MARKETING = "MARKETING"
    TRANSACTIONAL = "TRANSACTIONAL"
    OTP = "OTP"


class TemplateLanguage(str, Enum):
    AF = "af"
    SQ = "sq"
    AR = "ar"
    AZ = "az"
    BN = "bn"
    BG = "bg"
    CA = "ca"
    ZH_CN = "zh_CN"
    ZH_HK = "zh_HK"
    ZH_TW = "zh_TW"
    HR = "hr"
    CS = "cs"
    DA = "da"
    NL = "nl"
    EN = "en"
    EN_GB = "en_GB"
    EN_US = "en_US"
    ET = "et"
    FIL = "fil"
    FI = "fi"
    FR = "fr"
    KA = "ka"
    DE = "de"
    EL = "el"
    GU = "gu"
    HA = "ha"
    HE = "he"
    HI = "hi"
    HU = "hu"
    ID = "id"
    GA = "ga"
    IT = "it"
    JA = "ja"
    KN = "kn"
    KK = "kk"
    RW_RW = "rw_RW"
    KO = "ko"
    KY_KG = "ky_KG"
    LO = "lo"
    LV = "lv"
    LT = "lt"
    MK = "mk"
    MS = "ms"
    ML = "ml"
    MR = "mr"
    NB = "nb"
    FA = "fa"
    PL = "pl"
    PT_BR = "pt_BR"
    PT_PT = "pt_PT"
    PA = "pa"
    RO = "ro"
    RU = "ru"
    SR = "sr"
    SK = "sk"
    SL = "sl"
    ES = "es"
    ES_AR = "es_AR"
    ES_ES = "es_ES"
    ES_MX = "es_MX"
    SW = "sw"
    SV = "sv"
    TA = "ta"
    TE = "te"
    TH = "th"
    TR = "tr"
    UK = "uk"
    UR = "ur"
    UZ = "uz"
    VI = "vi"
    ZU = "zu"
    UNKNOWN = "unknown"


class TemplateType(str, Enum):
    TEXT = "TEXT"
    MEDIA = "MEDIA"
    UNSUPPORTED = "UNSUPPORTED"


class TemplateStatus(str, Enum):
    APPROVED = "APPROVED"
    IN_APPEAL = "IN_APPEAL"
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    PENDING_DELETION = "PENDING_DELETION"
    DELETED = "DELETED"
    DISABLED = "DISABLED"


class TemplateDocumentHeader(RequestModel):
    format: Literal["DOCUMENT"] = "DOCUMENT"
    example: str | None = None


class TemplateImageHeader(RequestModel):
    format: Literal["IMAGE"] = "IMAGE"
    example: str | None = None


class TemplateLocationHeader(RequestModel):
    format: Literal["LOCATION"] = "LOCATION"


class TemplateTextHeader(RequestModel):
    """Header text, up to 60 characters with one ``{{1}}`` placeholder."""

    format: Literal["TEXT"] = "TEXT"
    text: str
    example: str | None = None


class TemplateVideoHeader(RequestModel):
    format: Literal["VIDEO"] = "VIDEO"
    example: str | None = None


TemplateHeader = Annotated[
    Union[
        TemplateDocumentHeader,
        TemplateImageHeader,
        TemplateLocationHeader,
        TemplateTextHeader,
        TemplateVideoHeader,
    ],
    Field(discriminator="format"),
]


class TemplateBody(RequestModel):
    text: Annotated[str, Length(min=1)]
    examples: list[str] | None = None


class TemplateFooter(RequestModel):
    text: Annotated[str, Length(max=60)]


class TemplatePhoneNumberButton(RequestModel):
    type: Literal["PHONE_NUMBER"] = "PHONE_NUMBER"
    text: str
    phone_number: str


class TemplateQuickReplyButton(RequestModel):
    type: Literal["QUICK_REPLY"] = "QUICK_REPLY"
    text: str


class TemplateUrlButton(RequestModel):
    """``url`` may end in a ``{{1}}`` placeholder for dynamic links."""

    type: Literal["URL"] = "URL"
    text: str
    url: str
    example: str | None = None


TemplateButton = Annotated[
    Union[TemplatePhoneNumberButton, TemplateQuickReplyButton, TemplateUrlButton],
    Field(discriminator="type"),
]


class TemplateStructure(RequestModel):
    body: TemplateBody
    header: TemplateHeader | None = None
    footer: TemplateFooter | None = None
    buttons: Annotated[list[TemplateButton] | None, Size(max=3)] = None
    type: TemplateType | None = None


class CreateTemplateRequestBody(RequestModel):
    name: Annotated[str, Length(min=1)]
    language: TemplateLanguage
    category: TemplateCategory
    structure: TemplateStructure


class Template(ResponseModel):
    id: str | None = None
    business_account_id: int | None = None
    name: str | None = None
    language: TemplateLanguage | None = None
    status: TemplateStatus | None = None
    category: TemplateCategory | None = None
    structure: TemplateStructure | None = None


class TemplatesResponseBody(ResponseModel):
    templates: list[Template] | None = None


# ---------------------------------------------------------------------------
# Template messages
# ---------------------------------------------------------------------------


class TemplateDocumentHeaderContent(RequestModel):
    type: Literal["DOCUMENT"] = "DOCUMENT"
    media_url: MediaUrl
    filename: str


class TemplateImageHeaderContent(RequestModel):
    type: Literal["IMAGE"] = "IMAGE"
    media_url: MediaUrl


class TemplateLocationHeaderContent(RequestModel):
    type: Literal["LOCATION"] = "LOCATION"
    latitude: Latitude
    longitude: Longitude


class TemplateTextHeaderContent(RequestModel):
    type: Literal["TEXT"] = "TEXT"
    placeholder: str


class TemplateVideoHeaderContent(RequestModel):
    type: Literal["VIDEO"] = "VIDEO"
    media_url: MediaUrl


TemplateHeaderContent = Annotated[
    Union[
        TemplateDocumentHeaderContent,
        TemplateImageHeaderContent,
        TemplateLocationHeaderContent,
        TemplateTextHeaderContent,
        TemplateVideoHeaderContent,
    ],
    Field(discriminator="type"),
]


class TemplateQuickReplyButtonContent(RequestModel):
    type: Literal["QUICK_REPLY"] = "QUICK_REPLY"
    parameter: str


class TemplateUrlButtonContent(RequestModel):
    type: Literal["URL"] = "URL"
    parameter: str


TemplateButtonContent = Annotated[
    Union[TemplateQuickReplyButtonContent, TemplateUrlButtonContent],
    Field(discriminator="type"),
]


class TemplateBodyContent(RequestModel):
    placeholders: list[str]


class TemplateData(RequestModel):
    body: TemplateBodyContent
    header: TemplateHeaderContent | None = None
    buttons: list[TemplateButtonContent] | None = None


class TemplateContent(RequestModel):
    template_name: Annotated[str, Length(min=1, max=512)]
    template_data: TemplateData
    language: str


class SmsFailover(RequestModel):
    """Plain SMS sent if the template message cannot be delivered."""

    from_: Annotated[str, Field(alias="from"), Length(min=1, max=24)]
    text: Annotated[str, Length(min=1, max=4096)]


class FailoverMessage(RequestModel):
    from_: Annotated[str, Field(alias="from"), Length(min=1, max=24)]
    to: Annotated[str, Length(min=1, max=24)]
    content: TemplateContent
    message_id: Annotated[str | None, Length(max=50)] = None
    callback_data: Annotated[str | None, Length(max=4000)] = None
    notify_url: Annotated[str | None, Url()] = None
    sms_failover: SmsFailover | None = None


class SendTemplateRequestBody(RequestModel):
    messages: Annotated[list[FailoverMessage], NonEmpty()]
    bulk_id: str | None = None


class SendTemplateResponseBody(ResponseModel):
    messages: list[SendContentResponseBody] | None = None
    bulk_id: str | None = None
