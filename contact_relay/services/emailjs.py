import asyncio
import json
from dataclasses import dataclass
from typing import Any

import aiohttp

from ..exceptions.contact import ProviderError, RelayNotConfiguredError
from ..logger import get_logger
from ..schemas.contact import RelayPayload, TemplateParams
from ..settings import settings


logger = get_logger(__name__)


@dataclass(frozen=True)
class EmailJSConfig:
    service_id: str
    template_id: str
    public_key: str
    api_url: str = "https://api.emailjs.com/api/v1.0/email/send"

    def payload(self, params: TemplateParams) -> RelayPayload:
        return RelayPayload(
            service_id=self.service_id, template_id=self.template_id, user_id=self.public_key, template_params=params
        )


def get_emailjs_config() -> EmailJSConfig:
    """Resolve the provider credentials for the current request."""

    missing = [
        name
        for name in ["emailjs_service_id", "emailjs_template_id", "emailjs_public_key"]
        if not getattr(settings, name)
    ]
    if missing:
        logger.error(f"EmailJS is not configured, missing: {', '.join(missing)}")
        raise RelayNotConfiguredError

    return EmailJSConfig(
        service_id=settings.emailjs_service_id,  # type: ignore[arg-type]
        template_id=settings.emailjs_template_id,  # type: ignore[arg-type]
        public_key=settings.emailjs_public_key,  # type: ignore[arg-type]
        api_url=settings.emailjs_api_url,
    )


async def read_body(resp: aiohttp.ClientResponse) -> Any:
    content_type = resp.headers.get("Content-Type")
    if content_type is not None and "application/json" in content_type.lower():
        return await resp.json(content_type=None)
    return await resp.text()


def error_message(body: Any) -> str | None:
    if body is None:
        return None
    if isinstance(body, str):
        return body.strip() or None
    return json.dumps(body) if body else None


async def send_email(config: EmailJSConfig, params: TemplateParams) -> Any:
    """
    Hand a message over to EmailJS.

    Returns the parsed response body (JSON if the provider says so, text otherwise).
    Raises `ProviderError` if the provider rejects the message or cannot be reached.
    """

    payload = config.payload(params)
    logger.debug(f"Sending email via EmailJS ({config.service_id}/{config.template_id})")

    try:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                config.api_url,
                data=payload.model_dump_json(exclude_none=True),
                headers={"Content-Type": "application/json"},
            ) as resp:
                body = await read_body(resp)
                if not 200 <= resp.status < 300:
                    logger.warning(f"EmailJS rejected message ({resp.status}): {body!r}")
                    raise ProviderError(error_message(body))
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        logger.warning(f"Could not reach EmailJS: {e!r}")
        raise ProviderError(str(e) or None) from e

    logger.debug(f"EmailJS response: {body!r}")
    return body
