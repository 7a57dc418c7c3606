"""Client factory — maps channel names to client classes.

Adding a new channel:
  1. Create a new subclass of BaseClient in this package
  2. Add one entry to _CLIENT_CLASSES below
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from infobip_sdk.clients.base import BaseClient, SdkResponse
from infobip_sdk.clients.email import EmailClient
from infobip_sdk.clients.sms import SmsClient
from infobip_sdk.clients.whatsapp import WhatsAppClient

if TYPE_CHECKING:
    import httpx

    from infobip_sdk.configuration import Configuration

_CLIENT_CLASSES: dict[str, type[BaseClient]] = {
    "sms": SmsClient,
    "email": EmailClient,
    "whatsapp": WhatsAppClient,
}


def get_client(
    channel: str,
    configuration: Configuration,
    http_client: httpx.AsyncClient | None = None,
) -> BaseClient:
    """Instantiate the client for the given channel."""
    cls = _CLIENT_CLASSES.get(channel)
    if cls is None:
        supported = ", ".join(sorted(_CLIENT_CLASSES.keys()))
        raise ValueError(f"Unknown channel '{channel}'. Supported: {supported}")
    return cls(configuration, http_client=http_client)


__all__ = [
    "BaseClient",
    "EmailClient",
    "SdkResponse",
    "SmsClient",
    "WhatsAppClient",
    "get_client",
]
