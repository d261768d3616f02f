import json
from typing import Any, AsyncIterator, Callable

import httpx
import pytest
from _pytest.monkeypatch import MonkeyPatch
from pytest_mock import MockerFixture

from contact_relay.main import app
from contact_relay.services.emailjs import EmailJSConfig
from contact_relay.settings import settings


CONFIG = EmailJSConfig(
    service_id="service_test", template_id="template_test", public_key="public_test", api_url="https://emailjs.test/send"
)


class FakeResponse:
    def __init__(self, status: int, body: str, content_type: str | None) -> None:
        self.status = status
        self.headers = {"Content-Type": content_type} if content_type is not None else {}
        self._body = body

    async def json(self, content_type: str | None = None) -> Any:
        return json.loads(self._body)

    async def text(self) -> str:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *_: Any) -> None:
        pass


class FakeSession:
    def __init__(self, response: FakeResponse, error: Exception | None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response

    @property
    def payloads(self) -> list[Any]:
        return [json.loads(kwargs["data"]) for _, kwargs in self.calls]

    async def __aenter__(self) -> "FakeSession":
        return self

    async def __aexit__(self, *_: Any) -> None:
        pass


@pytest.fixture
def provider(mocker: MockerFixture) -> Callable[..., FakeSession]:
    def install(
        status: int = 200,
        body: str = "OK",
        content_type: str | None = "text/html; charset=utf-8",
        error: Exception | None = None,
    ) -> FakeSession:
        session = FakeSession(FakeResponse(status, body, content_type), error)
        mocker.patch("aiohttp.ClientSession", return_value=session)
        return session

    return install


@pytest.fixture
def configured(monkeypatch: MonkeyPatch) -> EmailJSConfig:
    monkeypatch.setattr(settings, "emailjs_service_id", CONFIG.service_id)
    monkeypatch.setattr(settings, "emailjs_template_id", CONFIG.template_id)
    monkeypatch.setattr(settings, "emailjs_public_key", CONFIG.public_key)
    monkeypatch.setattr(settings, "emailjs_api_url", CONFIG.api_url)
    return CONFIG


@pytest.fixture
async def api(configured: EmailJSConfig) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
