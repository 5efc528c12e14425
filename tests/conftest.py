"""Shared fixtures: a recording fake of the EnergyAtIt API."""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from energy_api import EnergyApiClient, Settings
from energy_mcp import create_server

BASE_URL = "https://energyatit.test"


class FakePlatform:
    """httpx.MockTransport handler that records requests and replays a reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {"success": True, "data": {}}
        self.raw_body: Optional[str] = None
        self.error: Optional[Exception] = None

    def reply(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.raw_body = None
        self.status_code = status_code

    def reply_text(self, body: str, status_code: int = 200) -> None:
        self.raw_body = body
        self.status_code = status_code

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, text=self.raw_body)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def make_api(platform: FakePlatform) -> Callable[[Settings], EnergyApiClient]:
    def factory(settings: Settings) -> EnergyApiClient:
        http = httpx.AsyncClient(
            base_url=settings.base_url,
            transport=httpx.MockTransport(platform),
        )
        return EnergyApiClient(settings, http=http)

    return factory


@pytest.fixture
def key_settings() -> Settings:
    return Settings(base_url=BASE_URL, api_key="test-key")


@pytest.fixture
def demo_settings() -> Settings:
    return Settings(base_url=BASE_URL)


@pytest.fixture
def make_server(make_api):
    def factory(settings: Settings):
        return create_server(settings, api=make_api(settings))

    return factory
