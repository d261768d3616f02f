from typing import Any

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import Response

from . import __version__
from .endpoints import ROUTERS
from .exceptions.api_exception import api_exception_handler
from .exceptions.contact import CouldNotSendMessageError
from .logger import get_logger, setup_sentry
from .settings import settings


NAME = "contact-relay"

logger = get_logger(__name__)

app = FastAPI(
    title="Storefront Contact Relay",
    description="Relays storefront contact form submissions to EmailJS.",
    version=__version__,
    root_path=settings.root_path,
    root_path_in_servers=False,
    openapi_tags=[{"name": name, "description": doc} for name, (_, doc) in ROUTERS.items()],
)

for router, _ in ROUTERS.values():
    app.include_router(router)

if settings.sentry_dsn:
    logger.debug("initializing sentry")
    setup_sentry(settings.sentry_dsn, NAME, __version__)


app.add_exception_handler(HTTPException, api_exception_handler)  # type: ignore[arg-type]


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> Response:
    logger.exception(f"Unhandled error while processing {request.method} {request.url.path}")
    return await api_exception_handler(request, CouldNotSendMessageError())


@app.get("/", include_in_schema=False)
async def status() -> Any:
    return {"name": NAME, "version": __version__, "debug": settings.debug}


def main() -> None:
    logger.info(f"Starting {NAME} v{__version__} on {settings.host}:{settings.port}")
    uvicorn.run(
        "contact_relay.main:app",
        host=settings.host,
        port=settings.port,
        root_path=settings.root_path,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
