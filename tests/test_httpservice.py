from __future__ import annotations

import asyncio
from json import dumps as json_dumps
from json import loads as json_loads
from typing import Any

import aiohttp
import pytest
from pytest_mock import MockerFixture
from yarl import URL

from hubspace import (
    Characteristic,
    CharacteristicTranslator,
    DeviceCommunicationError,
    DeviceUnavailableError,
    HttpDeviceService,
    ServiceConfig,
    TimeoutError,
)

HOST = "http://bridge.local:8080"


class _MockResponse:
    def __init__(self, status: int, body: bytes) -> None:
        self.status = status
        self._body = body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> _MockResponse:
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None


class _MockBridge:
    """Minimal device service answering function reads and writes."""

    def __init__(self) -> None:
        self.functions = [
            {"id": "p", "functionClass": "power"},
            {"id": "c", "functionClass": "color-rgb"},
        ]
        self.values: dict[str, Any] = {"p": "on", "c": "FF0000"}
        self.status = 200
        self.raw_body: bytes | None = None

    async def request(self, method: str, url: URL, **kwargs) -> _MockResponse:
        if self.raw_body is not None:
            return _MockResponse(self.status, self.raw_body)

        parts = url.path.strip("/").split("/")
        if parts[-1] == "functions":
            return _MockResponse(self.status, json_dumps(self.functions).encode())

        function_id = parts[-1]
        if method == "PUT":
            self.values[function_id] = json_loads(kwargs["data"])["value"]
            return _MockResponse(self.status, b"")
        body = {"value": self.values.get(function_id)}
        return _MockResponse(self.status, json_dumps(body).encode())


@pytest.fixture()
def bridge() -> _MockBridge:
    return _MockBridge()


@pytest.fixture()
async def http_service(mocker: MockerFixture, bridge: _MockBridge):
    mocker.patch.object(aiohttp.ClientSession, "request", side_effect=bridge.request)
    service = HttpDeviceService(ServiceConfig(host=HOST, token="secret"))
    yield service
    await service.close()


async def test_get_value(http_service: HttpDeviceService):
    assert await http_service.get_value("light-1", "c") == "FF0000"
    assert await http_service.get_value_as_boolean("light-1", "p") is True

    request = aiohttp.ClientSession.request
    method, url = request.call_args.args
    assert method == "GET"
    assert url == URL(f"{HOST}/devices/light-1/functions/p")
    assert request.call_args.kwargs["headers"]["Authorization"] == "Bearer secret"


async def test_get_missing_value(http_service: HttpDeviceService, bridge: _MockBridge):
    bridge.values["p"] = None
    assert await http_service.get_value_as_boolean("light-1", "p") is None

    bridge.raw_body = b""
    assert await http_service.get_value("light-1", "p") is None


async def test_set_value(http_service: HttpDeviceService, bridge: _MockBridge):
    await http_service.set_value("light-1", "c", "3333FF")
    assert bridge.values["c"] == "3333FF"

    method, url = aiohttp.ClientSession.request.call_args.args
    assert method == "PUT"
    assert url == URL(f"{HOST}/devices/light-1/functions/c")


async def test_get_capabilities(http_service: HttpDeviceService):
    capabilities = await http_service.get_capabilities("light-1")
    assert capabilities.supports(Characteristic.On)
    assert capabilities.supports(Characteristic.Hue)
    assert not capabilities.supports(Characteristic.Brightness)
    assert capabilities.resolve_function_id(Characteristic.Saturation) == "c"


@pytest.mark.parametrize(
    ("status", "body", "match"),
    [
        pytest.param(500, b'{"error": "boom"}', "status 500", id="server error"),
        pytest.param(200, b"not json", "Invalid json", id="invalid json"),
        pytest.param(200, b'["value"]', "Unexpected response", id="unexpected body"),
    ],
)
async def test_get_value_errors(
    http_service: HttpDeviceService, bridge: _MockBridge, status, body, match
):
    bridge.status = status
    bridge.raw_body = body
    with pytest.raises(DeviceCommunicationError, match=match):
        await http_service.get_value("light-1", "c")


@pytest.mark.parametrize(
    "body",
    [
        pytest.param(b'{"id": "p"}', id="not a list"),
        pytest.param(b'[{"functionClass": "power"}]', id="missing id"),
    ],
)
async def test_get_functions_errors(
    http_service: HttpDeviceService, bridge: _MockBridge, body
):
    bridge.raw_body = body
    with pytest.raises(DeviceCommunicationError):
        await http_service.get_functions("light-1")


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        pytest.param(
            aiohttp.ClientConnectionError("boom"),
            DeviceCommunicationError,
            id="connection",
        ),
        pytest.param(asyncio.TimeoutError(), TimeoutError, id="timeout"),
    ],
)
async def test_transport_errors(
    http_service: HttpDeviceService, mocker: MockerFixture, error, expected
):
    mocker.patch.object(aiohttp.ClientSession, "request", side_effect=error)
    with pytest.raises(expected):
        await http_service.set_value("light-1", "p", True)


async def test_translator_over_http(
    http_service: HttpDeviceService, bridge: _MockBridge
):
    capabilities = await http_service.get_capabilities("light-1")
    translator = CharacteristicTranslator("light-1", capabilities, http_service)

    assert await translator.get_hue() == 0
    await translator.set_hue(240)
    await translator.set_saturation(80)
    assert bridge.values["c"] == "3333FF"

    bridge.values["c"] = ""
    with pytest.raises(DeviceUnavailableError):
        await translator.get_saturation()
