"""WhatsApp channel client — free-form messages, templates and template messages.

Every single-message send (text, media, location, contact, interactive)
returns SendContentResponseBody. Template messages go through
``send_template`` and may carry an SMS failover.
"""

from __future__ import annotations

from infobip_sdk.clients.base import BaseClient, SdkResponse, path_param
from infobip_sdk.models.whatsapp import (
    CreateTemplateRequestBody,
    SendAudioRequestBody,
    SendContactRequestBody,
    SendContentRequestBody,
    SendContentResponseBody,
    SendDocumentRequestBody,
    SendImageRequestBody,
    SendInteractiveButtonsRequestBody,
    SendInteractiveListRequestBody,
    SendInteractiveMultiproductRequestBody,
    SendInteractiveProductRequestBody,
    SendLocationRequestBody,
    SendStickerRequestBody,
    SendTemplateRequestBody,
    SendTemplateResponseBody,
    SendTextRequestBody,
    SendVideoRequestBody,
    Template,
    TemplatesResponseBody,
)

PATH_SEND_TEXT = "/whatsapp/1/message/text"
PATH_SEND_DOCUMENT = "/whatsapp/1/message/document"
PATH_SEND_IMAGE = "/whatsapp/1/message/image"
PATH_SEND_AUDIO = "/whatsapp/1/message/audio"
PATH_SEND_VIDEO = "/whatsapp/1/message/video"
PATH_SEND_STICKER = "/whatsapp/1/message/sticker"
PATH_SEND_LOCATION = "/whatsapp/1/message/location"
PATH_SEND_CONTACT = "/whatsapp/1/message/contact"
PATH_SEND_INTERACTIVE_BUTTONS = "/whatsapp/1/message/interactive/buttons"
PATH_SEND_INTERACTIVE_LIST = "/whatsapp/1/message/interactive/list"
PATH_SEND_INTERACTIVE_PRODUCT = "/whatsapp/1/message/interactive/product"
PATH_SEND_INTERACTIVE_MULTIPRODUCT = "/whatsapp/1/message/interactive/multi-product"
PATH_SEND_TEMPLATE = "/whatsapp/1/message/template"
PATH_TEMPLATES = "/whatsapp/2/senders/{sender}/templates"
PATH_TEMPLATE = "/whatsapp/2/senders/{sender}/templates/{template_name}"


class WhatsAppClient(BaseClient):
    """Async client for the WhatsApp channel."""

    channel = "whatsapp"

    async def _send_content(
        self, path: str, request_body: SendContentRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._request("POST", path, SendContentResponseBody, body=request_body)

    async def send_text(
        self, request_body: SendTextRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        """Send a text message. Only allowed inside a 24h customer service window."""
        return await self._send_content(PATH_SEND_TEXT, request_body)

    async def send_document(
        self, request_body: SendDocumentRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_DOCUMENT, request_body)

    async def send_image(
        self, request_body: SendImageRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_IMAGE, request_body)

    async def send_audio(
        self, request_body: SendAudioRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_AUDIO, request_body)

    async def send_video(
        self, request_body: SendVideoRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_VIDEO, request_body)

    async def send_sticker(
        self, request_body: SendStickerRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_STICKER, request_body)

    async def send_location(
        self, request_body: SendLocationRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_LOCATION, request_body)

    async def send_contact(
        self, request_body: SendContactRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_CONTACT, request_body)

    async def send_interactive_buttons(
        self, request_body: SendInteractiveButtonsRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_INTERACTIVE_BUTTONS, request_body)

    async def send_interactive_list(
        self, request_body: SendInteractiveListRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_INTERACTIVE_LIST, request_body)

    async def send_interactive_product(
        self, request_body: SendInteractiveProductRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_INTERACTIVE_PRODUCT, request_body)

    async def send_interactive_multiproduct(
        self, request_body: SendInteractiveMultiproductRequestBody
    ) -> SdkResponse[SendContentResponseBody]:
        return await self._send_content(PATH_SEND_INTERACTIVE_MULTIPRODUCT, request_body)

    # -- Templates ----------------------------------------------------------

    async def send_template(
        self, request_body: SendTemplateRequestBody
    ) -> SdkResponse[SendTemplateResponseBody]:
        """Send one or more registered template messages."""
        return await self._request(
            "POST", PATH_SEND_TEMPLATE, SendTemplateResponseBody, body=request_body
        )

    async def create_template(
        self, sender: str, request_body: CreateTemplateRequestBody
    ) -> SdkResponse[Template]:
        """Register a template. It is submitted to WhatsApp for review."""
        path = PATH_TEMPLATES.format(sender=path_param(sender))
        return await self._request("POST", path, Template, body=request_body)

    async def templates(self, sender: str) -> SdkResponse[TemplatesResponseBody]:
        path = PATH_TEMPLATES.format(sender=path_param(sender))
        return await self._request("GET", path, TemplatesResponseBody)

    async def delete_template(self, sender: str, template_name: str) -> int:
        """Delete a template for every sender under the same business account."""
        path = PATH_TEMPLATE.format(
            sender=path_param(sender), template_name=path_param(template_name)
        )
        return await self._request_status("DELETE", path)
