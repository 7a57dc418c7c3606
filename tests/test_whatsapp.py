"""WhatsApp tests — content rules, every send endpoint, templates.

Verifies:
  - Text message scenario: valid request, decoded response, API errors
  - Length, size and coordinate bounds accept N and reject N+1
  - Every single-message send posts to its own endpoint
  - Template registration, listing, deletion and template messages
"""

import httpx
import pytest
from infobip_sdk.clients.whatsapp import WhatsAppClient
from infobip_sdk.errors import ApiRequestError, RequestValidationError
from infobip_sdk.models import whatsapp

from .conftest import MockTransport, load_fixture, make_client, sent_json

SENDER = "441134960000"
RECIPIENT = "441134960001"


def _text_body(**overrides) -> whatsapp.SendTextRequestBody:
    fields = dict(
        from_=SENDER,
        to=RECIPIENT,
        content=whatsapp.TextContent(text="Some text with url: http://example.com"),
    )
    fields.update(overrides)
    return whatsapp.SendTextRequestBody(**fields)


def _fields(model) -> list[str]:
    return [v.field for v in model.violations()]


def _list_content(section_count: int) -> whatsapp.InteractiveListContent:
    section = whatsapp.InteractiveListSection(
        rows=[whatsapp.InteractiveRow(id="1", title="Row")], title="Section"
    )
    return whatsapp.InteractiveListContent(
        body=whatsapp.InteractiveBody(text="Pick one"),
        action=whatsapp.InteractiveListAction(title="Choose", sections=[section] * section_count),
    )


def _structure(button_count: int) -> whatsapp.TemplateStructure:
    return whatsapp.TemplateStructure(
        body=whatsapp.TemplateBody(text="Hello {{1}}"),
        buttons=[whatsapp.TemplateQuickReplyButton(text=f"Reply {i}") for i in range(button_count)],
    )


# ---------------------------------------------------------------------------
# Text message scenario
# ---------------------------------------------------------------------------


class TestSendText:
    async def test_send_text(self, api_key_config):
        transport = MockTransport(
            [httpx.Response(200, json=load_fixture("whatsapp_send_content.json"))]
        )
        client = make_client(WhatsAppClient, transport, api_key_config)
        body = _text_body()

        assert body.violations() == []
        response = await client.send_text(body)

        assert response.status_code == 200
        assert response.body.message_id == "a28dd97c-1ffb-4fcf-99f1-0b557ed381da"
        assert response.body.to == RECIPIENT
        assert response.body.status.group_name == "PENDING"
        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.example.com/whatsapp/1/message/text"
        assert request.headers["Authorization"] == "App test-api-key"
        assert request.headers["Content-Type"] == "application/json"
        assert sent_json(request) == {
            "from": SENDER,
            "to": RECIPIENT,
            "content": {"text": "Some text with url: http://example.com"},
        }

    async def test_empty_from_rejected_without_request(self, api_key_config):
        transport = MockTransport()
        client = make_client(WhatsAppClient, transport, api_key_config)

        with pytest.raises(RequestValidationError) as exc_info:
            await client.send_text(_text_body(from_=""))

        assert exc_info.value.fields == ["from"]
        assert transport.requests == []

    @pytest.mark.parametrize(
        ("status_code", "fixture", "message_id"),
        [
            (400, "error_bad_request.json", "BAD_REQUEST"),
            (401, "error_unauthorized.json", "UNAUTHORIZED"),
            (429, "error_too_many_requests.json", "TOO_MANY_REQUESTS"),
        ],
    )
    async def test_api_errors(self, api_key_config, status_code, fixture, message_id):
        transport = MockTransport([httpx.Response(status_code, json=load_fixture(fixture))])
        client = make_client(WhatsAppClient, transport, api_key_config)

        with pytest.raises(ApiRequestError) as exc_info:
            await client.send_text(_text_body())

        error = exc_info.value
        assert error.status_code == status_code
        assert error.service_exception.message_id == message_id
        assert message_id in str(error)

    async def test_bad_request_validation_errors(self, api_key_config):
        transport = MockTransport(
            [httpx.Response(400, json=load_fixture("error_bad_request.json"))]
        )
        client = make_client(WhatsAppClient, transport, api_key_config)

        with pytest.raises(ApiRequestError) as exc_info:
            await client.send_text(_text_body())

        assert "content.text" in exc_info.value.service_exception.validation_errors


# ---------------------------------------------------------------------------
# Content rules
# ---------------------------------------------------------------------------


class TestContentRules:
    def test_text_length(self):
        assert whatsapp.TextContent(text="T" * 4096).violations() == []
        assert _fields(whatsapp.TextContent(text="T" * 4097)) == ["text"]
        assert _fields(whatsapp.TextContent(text="")) == ["text"]

    def test_addressing_lengths(self):
        assert _text_body(from_="1" * 24, to="2" * 24).violations() == []
        assert sorted(_fields(_text_body(from_="1" * 25, to="2" * 25))) == ["from", "to"]
        assert _fields(_text_body(message_id="m" * 51)) == ["messageId"]
        assert _fields(_text_body(callback_data="c" * 4001)) == ["callbackData"]
        assert _fields(_text_body(notify_url="not a url")) == ["notifyUrl"]

    def test_nested_path(self):
        body = _text_body(content=whatsapp.TextContent(text=""))
        assert _fields(body) == ["content.text"]

    def test_caption_and_filename(self):
        document = whatsapp.DocumentContent(
            media_url="https://example.com/a.pdf", caption="c" * 3000, filename="f" * 240
        )
        assert document.violations() == []
        document = whatsapp.DocumentContent(
            media_url="https://example.com/a.pdf", caption="c" * 3001, filename="f" * 241
        )
        assert sorted(_fields(document)) == ["caption", "filename"]

    def test_media_url(self):
        assert _fields(whatsapp.ImageContent(media_url="image.png")) == ["mediaUrl"]

    @pytest.mark.parametrize(
        ("latitude", "longitude", "expected"),
        [
            (90.0, 180.0, []),
            (-90.0, -180.0, []),
            (90.1, 0.0, ["latitude"]),
            (0.0, -180.1, ["longitude"]),
            (float("nan"), float("nan"), ["latitude", "longitude"]),
            (0.0, float("inf"), ["longitude"]),
        ],
    )
    def test_coordinates(self, latitude, longitude, expected):
        location = whatsapp.LocationContent(latitude=latitude, longitude=longitude)
        assert _fields(location) == expected

    def test_location_texts(self):
        location = whatsapp.LocationContent(latitude=0.0, longitude=0.0, name="n" * 1001)
        assert _fields(location) == ["name"]

    def test_contact_requires_names(self):
        contact = whatsapp.Contact(
            name=whatsapp.ContactName(first_name="", formatted_name="John Smith")
        )
        assert _fields(whatsapp.ContactContent(contacts=[contact])) == [
            "contacts[0].name.firstName"
        ]
        assert _fields(whatsapp.ContactContent(contacts=[])) == ["contacts"]

    def test_list_sections(self):
        assert _list_content(10).violations() == []
        assert _fields(_list_content(11)) == ["action.sections"]
        assert _fields(_list_content(0)) == ["action.sections"]

    def test_list_row_lengths(self):
        row = whatsapp.InteractiveRow(id="i" * 201, title="t" * 25, description="d" * 73)
        assert sorted(_fields(row)) == ["description", "id", "title"]

    def test_buttons_count(self):
        button = whatsapp.InteractiveReplyButton(id="1", title="Yes")
        assert whatsapp.InteractiveButtonsAction(buttons=[button] * 3).violations() == []
        assert _fields(whatsapp.InteractiveButtonsAction(buttons=[button] * 4)) == ["buttons"]

    def test_footer_length(self):
        assert whatsapp.InteractiveFooter(text="f" * 60).violations() == []
        assert _fields(whatsapp.InteractiveFooter(text="f" * 61)) == ["text"]

    def test_template_buttons(self):
        assert _structure(3).violations() == []
        assert _fields(_structure(4)) == ["buttons"]

    def test_template_footer(self):
        assert _fields(whatsapp.TemplateFooter(text="f" * 61)) == ["text"]

    def test_template_message_paths(self):
        body = whatsapp.SendTemplateRequestBody(
            messages=[
                whatsapp.FailoverMessage(
                    from_=SENDER,
                    to=RECIPIENT,
                    content=whatsapp.TemplateContent(
                        template_name="",
                        language="en",
                        template_data=whatsapp.TemplateData(
                            body=whatsapp.TemplateBodyContent(placeholders=[])
                        ),
                    ),
                    sms_failover=whatsapp.SmsFailover(from_="InfoSMS", text=""),
                )
            ]
        )
        assert sorted(_fields(body)) == [
            "messages[0].content.templateName",
            "messages[0].smsFailover.text",
        ]
        assert _fields(whatsapp.SendTemplateRequestBody(messages=[])) == ["messages"]


# ---------------------------------------------------------------------------
# Send endpoints
# ---------------------------------------------------------------------------


_SEND_CASES = [
    (
        "send_document",
        whatsapp.SendDocumentRequestBody,
        whatsapp.DocumentContent(media_url="https://example.com/a.pdf", filename="a.pdf"),
        "/whatsapp/1/message/document",
    ),
    (
        "send_image",
        whatsapp.SendImageRequestBody,
        whatsapp.ImageContent(media_url="https://example.com/a.png", caption="Look"),
        "/whatsapp/1/message/image",
    ),
    (
        "send_audio",
        whatsapp.SendAudioRequestBody,
        whatsapp.AudioContent(media_url="https://example.com/a.mp3"),
        "/whatsapp/1/message/audio",
    ),
    (
        "send_video",
        whatsapp.SendVideoRequestBody,
        whatsapp.VideoContent(media_url="https://example.com/a.mp4"),
        "/whatsapp/1/message/video",
    ),
    (
        "send_sticker",
        whatsapp.SendStickerRequestBody,
        whatsapp.StickerContent(media_url="https://example.com/a.webp"),
        "/whatsapp/1/message/sticker",
    ),
    (
        "send_location",
        whatsapp.SendLocationRequestBody,
        whatsapp.LocationContent(latitude=44.8, longitude=20.4, name="Belgrade"),
        "/whatsapp/1/message/location",
    ),
    (
        "send_contact",
        whatsapp.SendContactRequestBody,
        whatsapp.ContactContent(
            contacts=[
                whatsapp.Contact(
                    name=whatsapp.ContactName(first_name="John", formatted_name="John Smith"),
                    emails=[whatsapp.ContactEmail(email="john@example.com", type="WORK")],
                    phones=[whatsapp.ContactPhone(phone="41793026727", type="CELL")],
                )
            ]
        ),
        "/whatsapp/1/message/contact",
    ),
    (
        "send_interactive_buttons",
        whatsapp.SendInteractiveButtonsRequestBody,
        whatsapp.InteractiveButtonsContent(
            body=whatsapp.InteractiveBody(text="Pick one"),
            action=whatsapp.InteractiveButtonsAction(
                buttons=[whatsapp.InteractiveReplyButton(id="1", title="Yes")]
            ),
            header=whatsapp.InteractiveTextHeader(text="Question"),
        ),
        "/whatsapp/1/message/interactive/buttons",
    ),
    (
        "send_interactive_list",
        whatsapp.SendInteractiveListRequestBody,
        _list_content(1),
        "/whatsapp/1/message/interactive/list",
    ),
    (
        "send_interactive_product",
        whatsapp.SendInteractiveProductRequestBody,
        whatsapp.InteractiveProductContent(
            action=whatsapp.InteractiveProductAction(catalog_id="1", product_retailer_id="2")
        ),
        "/whatsapp/1/message/interactive/product",
    ),
    (
        "send_interactive_multiproduct",
        whatsapp.SendInteractiveMultiproductRequestBody,
        whatsapp.InteractiveMultiproductContent(
            header=whatsapp.InteractiveTextHeader(text="Catalog"),
            body=whatsapp.InteractiveBody(text="Our products"),
            action=whatsapp.InteractiveMultiproductAction(
                catalog_id="1",
                sections=[whatsapp.InteractiveMultiproductSection(product_retailer_ids=["2"])],
            ),
        ),
        "/whatsapp/1/message/interactive/multi-product",
    ),
]


class TestSendEndpoints:
    @pytest.mark.parametrize(
        ("method", "body_cls", "content", "path"),
        _SEND_CASES,
        ids=[case[0] for case in _SEND_CASES],
    )
    async def test_send(self, api_key_config, method, body_cls, content, path):
        transport = MockTransport(
            [httpx.Response(200, json=load_fixture("whatsapp_send_content.json"))]
        )
        client = make_client(WhatsAppClient, transport, api_key_config)
        body = body_cls(from_=SENDER, to=RECIPIENT, content=content)

        response = await getattr(client, method)(body)

        assert response.body.message_count == 1
        request = transport.requests[0]
        assert request.url.path == path
        assert sent_json(request) == body.to_wire()

    async def test_interactive_header_tag_sent(self, api_key_config):
        transport = MockTransport(
            [httpx.Response(200, json=load_fixture("whatsapp_send_content.json"))]
        )
        client = make_client(WhatsAppClient, transport, api_key_config)
        _, body_cls, content, _ = _SEND_CASES[7]

        await client.send_interactive_buttons(body_cls(from_=SENDER, to=RECIPIENT, content=content))

        sent = sent_json(transport.requests[0])
        assert sent["content"]["header"] == {"type": "TEXT", "text": "Question"}
        assert sent["content"]["action"]["buttons"] == [{"type": "REPLY", "id": "1", "title": "Yes"}]

    async def test_nan_location_rejected_without_request(self, api_key_config):
        transport = MockTransport()
        client = make_client(WhatsAppClient, transport, api_key_config)
        body = whatsapp.SendLocationRequestBody(
            from_=SENDER,
            to=RECIPIENT,
            content=whatsapp.LocationContent(latitude=float("nan"), longitude=float("nan")),
        )

        with pytest.raises(RequestValidationError) as exc_info:
            await client.send_location(body)

        assert sorted(exc_info.value.fields) == ["content.latitude", "content.longitude"]
        assert transport.requests == []


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TestTemplates:
    async def test_templates(self, api_key_config):
        transport = MockTransport(
            [httpx.Response(200, json=load_fixture("whatsapp_templates.json"))]
        )
        client = make_client(WhatsAppClient, transport, api_key_config)

        response = await client.templates(SENDER)

        template = response.body.templates[0]
        assert template.name == "exampleName"
        assert template.category == whatsapp.TemplateCategory.ACCOUNT_UPDATE
        assert template.structure.type == whatsapp.TemplateType.MEDIA
        assert transport.requests[0].url.path == f"/whatsapp/2/senders/{SENDER}/templates"

    async def test_create_template(self, api_key_config):
        created = load_fixture("whatsapp_templates.json")["templates"][0]
        transport = MockTransport([httpx.Response(201, json=created)])
        client = make_client(WhatsAppClient, transport, api_key_config)
        body = whatsapp.CreateTemplateRequestBody(
            name="exampleName",
            language=whatsapp.TemplateLanguage.EN,
            category=whatsapp.TemplateCategory.ACCOUNT_UPDATE,
            structure=_structure(1),
        )

        response = await client.create_template(SENDER, body)

        assert response.status_code == 201
        assert response.body.status == whatsapp.TemplateStatus.APPROVED
        assert sent_json(transport.requests[0]) == {
            "name": "exampleName",
            "language": "en",
            "category": "ACCOUNT_UPDATE",
            "structure": {
                "body": {"text": "Hello {{1}}"},
                "buttons": [{"type": "QUICK_REPLY", "text": "Reply 0"}],
            },
        }

    async def test_create_template_invalid(self, api_key_config):
        transport = MockTransport()
        client = make_client(WhatsAppClient, transport, api_key_config)
        body = whatsapp.CreateTemplateRequestBody(
            name="",
            language=whatsapp.TemplateLanguage.EN,
            category=whatsapp.TemplateCategory.MARKETING,
            structure=_structure(4),
        )

        with pytest.raises(RequestValidationError) as exc_info:
            await client.create_template(SENDER, body)

        assert sorted(exc_info.value.fields) == ["name", "structure.buttons"]
        assert transport.requests == []

    async def test_delete_template(self, api_key_config):
        transport = MockTransport([httpx.Response(204)])
        client = make_client(WhatsAppClient, transport, api_key_config)

        status = await client.delete_template(SENDER, "order update")

        assert status == 204
        request = transport.requests[0]
        assert request.method == "DELETE"
        assert request.url.raw_path == f"/whatsapp/2/senders/{SENDER}/templates/order%20update".encode()

    async def test_send_template(self, api_key_config):
        transport = MockTransport(
            [httpx.Response(200, json=load_fixture("whatsapp_send_template.json"))]
        )
        client = make_client(WhatsAppClient, transport, api_key_config)
        body = whatsapp.SendTemplateRequestBody(
            messages=[
                whatsapp.FailoverMessage(
                    from_=SENDER,
                    to=RECIPIENT,
                    content=whatsapp.TemplateContent(
                        template_name="exampleName",
                        language="en",
                        template_data=whatsapp.TemplateData(
                            body=whatsapp.TemplateBodyContent(placeholders=["John"]),
                            header=whatsapp.TemplateImageHeaderContent(
                                media_url="https://example.com/a.png"
                            ),
                        ),
                    ),
                    sms_failover=whatsapp.SmsFailover(from_="InfoSMS", text="Hello John"),
                )
            ],
        )

        response = await client.send_template(body)

        assert response.body.bulk_id == "2034072219640523073"
        assert response.body.messages[0].to == RECIPIENT
        request = transport.requests[0]
        assert request.url.path == "/whatsapp/1/message/template"
        sent = sent_json(request)
        assert sent["messages"][0]["content"]["templateData"]["header"]["type"] == "IMAGE"
        assert sent["messages"][0]["smsFailover"] == {"from": "InfoSMS", "text": "Hello John"}
