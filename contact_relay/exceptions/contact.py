from fastapi import status

from .api_exception import APIException
from ..settings import settings


class CouldNotSendMessageError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Could not send message"
    description = "The message could not be sent."


class RelayNotConfiguredError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Contact form is not configured"
    description = "The email provider credentials are missing on the server."


class ProviderError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Failed to send email"
    description = "The email provider rejected the message or could not be reached."

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail)
        self.status_code = settings.upstream_error_status
