"""Endpoints for the storefront contact form"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from ..exceptions.api_exception import APIException
from ..exceptions.contact import CouldNotSendMessageError, ProviderError, RelayNotConfiguredError
from ..logger import get_logger
from ..schemas.contact import RelayResult, TemplateParams
from ..services.emailjs import EmailJSConfig, get_emailjs_config, send_email
from ..utils.docs import responses


logger = get_logger(__name__)

router = APIRouter(tags=["contact"])


async def read_template_params(request: Request) -> TemplateParams:
    form = await request.form()
    values: dict[str, str] = {}
    for key in TemplateParams.model_fields:
        # first occurrence wins, file uploads are ignored
        if items := [item for item in form.getlist(key) if isinstance(item, str)]:
            values[key] = items[0]
    return TemplateParams(**values)


@router.post(
    "/contact", responses=responses(RelayResult, RelayNotConfiguredError, ProviderError, CouldNotSendMessageError)
)
async def send_message(request: Request, config: EmailJSConfig = Depends(get_emailjs_config)) -> Any:
    """
    Relay a contact form submission to the email provider.

    Expects a form-encoded (or multipart) body with the fields `user_name`, `user_email` and `message`.
    The fields are not validated again, missing fields are simply left out of the email.
    """

    try:
        params = await read_template_params(request)
        response = await send_email(config, params)
    except APIException:
        raise
    except Exception:
        logger.exception("Unexpected error while relaying contact message")
        raise CouldNotSendMessageError

    return RelayResult(success=True, response=response).model_dump(exclude_none=True)
