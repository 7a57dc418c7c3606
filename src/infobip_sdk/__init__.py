"""Typed async client for the Infobip SMS, Email and WhatsApp APIs.

    from infobip_sdk import Configuration, WhatsAppClient
    from infobip_sdk.models.whatsapp import SendTextRequestBody, TextContent

    config = Configuration.with_api_key("https://xyz.api.infobip.com", "secret")
    async with WhatsAppClient(config) as client:
        response = await client.send_text(
            SendTextRequestBody(
                from_="441134960000",
                to="441134960001",
                content=TextContent(text="Hello"),
            )
        )
        print(response.body.message_id)
"""

from infobip_sdk.configuration import ApiKey, BasicAuth, Configuration
from infobip_sdk.errors import (
    ApiRequestError,
    AttachmentError,
    DecodeError,
    RequestValidationError,
    SdkError,
)
from infobip_sdk.validation import Violation
from infobip_sdk.clients import (
    BaseClient,
    EmailClient,
    SdkResponse,
    SmsClient,
    WhatsAppClient,
    get_client,
)

__version__ = "0.1.0"

__all__ = [
    "ApiKey",
    "ApiRequestError",
    "AttachmentError",
    "BaseClient",
    "BasicAuth",
    "Configuration",
    "DecodeError",
    "EmailClient",
    "RequestValidationError",
    "SdkError",
    "SdkResponse",
    "SmsClient",
    "Violation",
    "WhatsAppClient",
    "get_client",
]
