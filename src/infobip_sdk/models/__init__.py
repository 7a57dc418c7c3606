"""Typed Pydantic models for every request and response the SDK exchanges.

Channel models live in their own submodules (``sms``, ``email``,
``whatsapp``) because several names repeat across channels
(``SendRequestBody``, ``LogsQueryParameters``). Import them from there:

    from infobip_sdk.models.whatsapp import SendTextRequestBody, TextContent
"""

from infobip_sdk.models import email, sms, whatsapp
from infobip_sdk.models.base import QueryParameters, RequestModel, ResponseModel, WireModel
from infobip_sdk.models.errors import ApiErrorDetails, RequestError, ServiceException

__all__ = [
    "ApiErrorDetails",
    "QueryParameters",
    "RequestError",
    "RequestModel",
    "ResponseModel",
    "ServiceException",
    "WireModel",
    "email",
    "sms",
    "whatsapp",
]
