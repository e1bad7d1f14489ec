"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Environment-backed settings with a test API key
- Fake ViaCEP / WeatherAPI upstreams built on httpx.MockTransport
"""

import json
from collections.abc import Callable, Iterator

import httpx
import pytest

from weather_by_cep.config.settings import get_settings

TEST_API_KEY = "test-api-key"
VIACEP_BASE_URL = "https://viacep.test/ws"
WEATHER_API_BASE_URL = "https://weatherapi.test/v1"

SAO_PAULO_PAYLOAD = {
    "cep": "01310-100",
    "logradouro": "Avenida Paulista",
    "complemento": "até 610 - lado par",
    "bairro": "Bela Vista",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
}


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment pointing both upstreams at fake hosts."""
    monkeypatch.setenv("WEATHER_API_KEY", TEST_API_KEY)
    monkeypatch.setenv("VIACEP_BASE_URL", VIACEP_BASE_URL)
    monkeypatch.setenv("WEATHER_API_BASE_URL", WEATHER_API_BASE_URL)


class FakeUpstreams:
    """
    Scriptable ViaCEP + WeatherAPI pair behind a single MockTransport.

    Records every request so tests can assert on call counts and query
    parameters.
    """

    def __init__(self) -> None:
        self.viacep_status = 200
        self.viacep_body: object = SAO_PAULO_PAYLOAD
        self.weather_status = 200
        self.weather_body: object = {"current": {"temp_c": 28.5}}
        self.viacep_error: Exception | None = None
        self.weather_error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "viacep.test":
            if self.viacep_error is not None:
                raise self.viacep_error
            return _response(self.viacep_status, self.viacep_body)
        if self.weather_error is not None:
            raise self.weather_error
        return _response(self.weather_status, self.weather_body)

    def requests_to(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


def _response(status_code: int, body: object) -> httpx.Response:
    if isinstance(body, (bytes, str)):
        return httpx.Response(status_code, content=body)
    return httpx.Response(
        status_code,
        content=json.dumps(body).encode(),
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def upstreams() -> FakeUpstreams:
    """Fresh fake upstream pair."""
    return FakeUpstreams()


@pytest.fixture
def make_client(upstreams: FakeUpstreams) -> Callable[[], httpx.AsyncClient]:
    """Factory for AsyncClients routed to the fake upstreams."""
    return upstreams.client
