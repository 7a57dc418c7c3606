"""SMS channel client — text and binary messaging, scheduling, reports and 2FA.

Endpoints:
  - /sms/1/preview, /sms/2/text/advanced, /sms/2/binary/advanced,
    /sms/1/text/query for sending and previewing
  - /sms/1/bulks (+ /status) for scheduled bulks
  - /sms/1/reports, /sms/1/logs, /sms/1/inbox/reports for reporting
  - /2fa/2/... for 2FA applications, message templates and PINs
"""

from __future__ import annotations

from infobip_sdk.clients.base import BaseClient, SdkResponse, path_param
from infobip_sdk.models.sms import (
    DeliveryReportsQueryParameters,
    DeliveryReportsResponseBody,
    InboundReportsQueryParameters,
    InboundReportsResponseBody,
    LogsQueryParameters,
    LogsResponseBody,
    PreviewRequestBody,
    PreviewResponseBody,
    RescheduleRequestBody,
    ResendPinRequestBody,
    ScheduledQueryParameters,
    ScheduledResponseBody,
    ScheduledStatusResponseBody,
    SendBinaryRequestBody,
    SendOverQueryParametersQueryParameters,
    SendPinQueryParameters,
    SendPinRequestBody,
    SendPinResponseBody,
    SendRequestBody,
    SendResponseBody,
    TfaApplication,
    TfaMessageTemplate,
    TfaVerificationStatusQueryParameters,
    TfaVerificationStatusResponseBody,
    UpdateScheduledStatusRequestBody,
    VerifyPhoneNumberRequestBody,
    VerifyPhoneNumberResponseBody,
)

PATH_PREVIEW = "/sms/1/preview"
PATH_DELIVERY_REPORTS = "/sms/1/reports"
PATH_SEND = "/sms/2/text/advanced"
PATH_SEND_BINARY = "/sms/2/binary/advanced"
PATH_SEND_OVER_QUERY_PARAMETERS = "/sms/1/text/query"
PATH_SCHEDULED = "/sms/1/bulks"
PATH_SCHEDULED_STATUS = "/sms/1/bulks/status"
PATH_LOGS = "/sms/1/logs"
PATH_INBOUND_REPORTS = "/sms/1/inbox/reports"
PATH_TFA_APPLICATIONS = "/2fa/2/applications"
PATH_TFA_APPLICATION = "/2fa/2/applications/{app_id}"
PATH_TFA_MESSAGE_TEMPLATES = "/2fa/2/applications/{app_id}/messages"
PATH_TFA_MESSAGE_TEMPLATE = "/2fa/2/applications/{app_id}/messages/{msg_id}"
PATH_SEND_PIN_OVER_SMS = "/2fa/2/pin"
PATH_RESEND_PIN_OVER_SMS = "/2fa/2/pin/{pin_id}/resend"
PATH_SEND_PIN_OVER_VOICE = "/2fa/2/pin/voice"
PATH_RESEND_PIN_OVER_VOICE = "/2fa/2/pin/{pin_id}/resend/voice"
PATH_VERIFY_PHONE_NUMBER = "/2fa/2/pin/{pin_id}/verify"
PATH_TFA_VERIFICATION_STATUS = "/2fa/2/applications/{app_id}/verifications"


class SmsClient(BaseClient):
    """Async client for the SMS channel."""

    channel = "sms"

    # -- Sending ------------------------------------------------------------

    async def preview(
        self, request_body: PreviewRequestBody
    ) -> SdkResponse[PreviewResponseBody]:
        """Check how language and transliteration settings affect a text's
        length and the number of message parts it needs."""
        return await self._request(
            "POST", PATH_PREVIEW, PreviewResponseBody, body=request_body
        )

    async def send(self, request_body: SendRequestBody) -> SdkResponse[SendResponseBody]:
        """Send one or more text messages."""
        return await self._request("POST", PATH_SEND, SendResponseBody, body=request_body)

    async def send_binary(
        self, request_body: SendBinaryRequestBody
    ) -> SdkResponse[SendResponseBody]:
        return await self._request(
            "POST", PATH_SEND_BINARY, SendResponseBody, body=request_body
        )

    async def send_over_query_parameters(
        self, query_parameters: SendOverQueryParametersQueryParameters
    ) -> SdkResponse[SendResponseBody]:
        """Send a message with every option in the query string, including
        the account credentials. Prefer ``send`` where possible."""
        return await self._request(
            "GET", PATH_SEND_OVER_QUERY_PARAMETERS, SendResponseBody, params=query_parameters
        )

    # -- Scheduled bulks ----------------------------------------------------

    async def scheduled(
        self, query_parameters: ScheduledQueryParameters
    ) -> SdkResponse[ScheduledResponseBody]:
        return await self._request(
            "GET", PATH_SCHEDULED, ScheduledResponseBody, params=query_parameters
        )

    async def reschedule(
        self,
        query_parameters: ScheduledQueryParameters,
        request_body: RescheduleRequestBody,
    ) -> SdkResponse[ScheduledResponseBody]:
        return await self._request(
            "PUT",
            PATH_SCHEDULED,
            ScheduledResponseBody,
            body=request_body,
            params=query_parameters,
        )

    async def scheduled_status(
        self, query_parameters: ScheduledQueryParameters
    ) -> SdkResponse[ScheduledStatusResponseBody]:
        return await self._request(
            "GET", PATH_SCHEDULED_STATUS, ScheduledStatusResponseBody, params=query_parameters
        )

    async def update_scheduled_status(
        self,
        query_parameters: ScheduledQueryParameters,
        request_body: UpdateScheduledStatusRequestBody,
    ) -> SdkResponse[ScheduledStatusResponseBody]:
        """Pause, resume or cancel a scheduled bulk."""
        return await self._request(
            "PUT",
            PATH_SCHEDULED_STATUS,
            ScheduledStatusResponseBody,
            body=request_body,
            params=query_parameters,
        )

    # -- Reports ------------------------------------------------------------

    async def delivery_reports(
        self, query_parameters: DeliveryReportsQueryParameters | None = None
    ) -> SdkResponse[DeliveryReportsResponseBody]:
        """Fetch delivery reports not yet returned. Each report is returned once."""
        return await self._request(
            "GET",
            PATH_DELIVERY_REPORTS,
            DeliveryReportsResponseBody,
            params=query_parameters or DeliveryReportsQueryParameters(),
        )

    async def logs(
        self, query_parameters: LogsQueryParameters | None = None
    ) -> SdkResponse[LogsResponseBody]:
        """Logs for messages sent in the last 48 hours."""
        return await self._request(
            "GET", PATH_LOGS, LogsResponseBody, params=query_parameters or LogsQueryParameters()
        )

    async def inbound_reports(
        self, query_parameters: InboundReportsQueryParameters | None = None
    ) -> SdkResponse[InboundReportsResponseBody]:
        return await self._request(
            "GET",
            PATH_INBOUND_REPORTS,
            InboundReportsResponseBody,
            params=query_parameters or InboundReportsQueryParameters(),
        )

    # -- 2FA applications and templates -------------------------------------

    async def tfa_applications(self) -> SdkResponse[list[TfaApplication]]:
        return await self._request("GET", PATH_TFA_APPLICATIONS, list[TfaApplication])

    async def create_tfa_application(
        self, request_body: TfaApplication
    ) -> SdkResponse[TfaApplication]:
        return await self._request(
            "POST", PATH_TFA_APPLICATIONS, TfaApplication, body=request_body
        )

    async def tfa_application(self, app_id: str) -> SdkResponse[TfaApplication]:
        path = PATH_TFA_APPLICATION.format(app_id=path_param(app_id))
        return await self._request("GET", path, TfaApplication)

    async def update_tfa_application(
        self, app_id: str, request_body: TfaApplication
    ) -> SdkResponse[TfaApplication]:
        path = PATH_TFA_APPLICATION.format(app_id=path_param(app_id))
        return await self._request("PUT", path, TfaApplication, body=request_body)

    async def tfa_message_templates(
        self, app_id: str
    ) -> SdkResponse[list[TfaMessageTemplate]]:
        path = PATH_TFA_MESSAGE_TEMPLATES.format(app_id=path_param(app_id))
        return await self._request("GET", path, list[TfaMessageTemplate])

    async def create_tfa_message_template(
        self, app_id: str, request_body: TfaMessageTemplate
    ) -> SdkResponse[TfaMessageTemplate]:
        path = PATH_TFA_MESSAGE_TEMPLATES.format(app_id=path_param(app_id))
        return await self._request("POST", path, TfaMessageTemplate, body=request_body)

    async def tfa_message_template(
        self, app_id: str, msg_id: str
    ) -> SdkResponse[TfaMessageTemplate]:
        path = PATH_TFA_MESSAGE_TEMPLATE.format(
            app_id=path_param(app_id), msg_id=path_param(msg_id)
        )
        return await self._request("GET", path, TfaMessageTemplate)

    async def update_tfa_message_template(
        self, app_id: str, msg_id: str, request_body: TfaMessageTemplate
    ) -> SdkResponse[TfaMessageTemplate]:
        path = PATH_TFA_MESSAGE_TEMPLATE.format(
            app_id=path_param(app_id), msg_id=path_param(msg_id)
        )
        return await self._request("PUT", path, TfaMessageTemplate, body=request_body)

    # -- 2FA PINs -----------------------------------------------------------

    async def send_pin_over_sms(
        self,
        request_body: SendPinRequestBody,
        query_parameters: SendPinQueryParameters | None = None,
    ) -> SdkResponse[SendPinResponseBody]:
        """Send a PIN code by SMS. Set ``nc_needed`` to run a number lookup first."""
        return await self._request(
            "POST",
            PATH_SEND_PIN_OVER_SMS,
            SendPinResponseBody,
            body=request_body,
            params=query_parameters or SendPinQueryParameters(),
        )

    async def resend_pin_over_sms(
        self, pin_id: str, request_body: ResendPinRequestBody
    ) -> SdkResponse[SendPinResponseBody]:
        path = PATH_RESEND_PIN_OVER_SMS.format(pin_id=path_param(pin_id))
        return await self._request("POST", path, SendPinResponseBody, body=request_body)

    async def send_pin_over_voice(
        self, request_body: SendPinRequestBody
    ) -> SdkResponse[SendPinResponseBody]:
        return await self._request(
            "POST", PATH_SEND_PIN_OVER_VOICE, SendPinResponseBody, body=request_body
        )

    async def resend_pin_over_voice(
        self, pin_id: str, request_body: ResendPinRequestBody
    ) -> SdkResponse[SendPinResponseBody]:
        path = PATH_RESEND_PIN_OVER_VOICE.format(pin_id=path_param(pin_id))
        return await self._request("POST", path, SendPinResponseBody, body=request_body)

    async def verify_phone_number(
        self, pin_id: str, request_body: VerifyPhoneNumberRequestBody
    ) -> SdkResponse[VerifyPhoneNumberResponseBody]:
        path = PATH_VERIFY_PHONE_NUMBER.format(pin_id=path_param(pin_id))
        return await self._request(
            "POST", path, VerifyPhoneNumberResponseBody, body=request_body
        )

    async def tfa_verification_status(
        self, app_id: str, query_parameters: TfaVerificationStatusQueryParameters
    ) -> SdkResponse[TfaVerificationStatusResponseBody]:
        path = PATH_TFA_VERIFICATION_STATUS.format(app_id=path_param(app_id))
        return await self._request(
            "GET", path, TfaVerificationStatusResponseBody, params=query_parameters
        )
