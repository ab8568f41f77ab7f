"""Device service backed by a REST endpoint.

Function values are read and written as ``{"value": ...}`` documents at
``/devices/<device id>/functions/<function id>``, the function list of a
device lives at ``/devices/<device id>/functions``.
"""

from __future__ import annotations

import logging
from typing import Any

from yarl import URL

from .capabilities import CapabilityMap, DeviceFunction
from .deviceservice import DeviceService, DeviceValue
from .exceptions import DeviceCommunicationError
from .httpclient import HttpClient
from .serviceconfig import ServiceConfig

_LOGGER = logging.getLogger(__name__)


class HttpDeviceService(DeviceService):
    """Read and write device functions over http."""

    def __init__(
        self, config: ServiceConfig, *, http_client: HttpClient | None = None
    ) -> None:
        self._config = config
        self._http_client = http_client or HttpClient(config)

    @property
    def config(self) -> ServiceConfig:
        """Return the service config."""
        return self._config

    def _functions_url(self, device_id: str) -> URL:
        return self._config.base_url / "devices" / device_id / "functions"

    def _function_url(self, device_id: str, function_id: str) -> URL:
        return self._functions_url(device_id) / function_id

    async def _request(self, method: str, url: URL, *, json: Any = None) -> Any:
        status, body = await self._http_client.request(method, url, json=json)
        if status != 200:
            raise DeviceCommunicationError(
                f"Device service returned status {status} for {method} {url}"
            )
        return body

    async def get_functions(self, device_id: str) -> list[DeviceFunction]:
        """Return the functions reported by a device."""
        body = await self._request("GET", self._functions_url(device_id))
        if not isinstance(body, list):
            raise DeviceCommunicationError(
                f"Unexpected function list for {device_id}: {body!r}"
            )
        try:
            return [DeviceFunction.from_dict(function) for function in body]
        except Exception as ex:
            raise DeviceCommunicationError(
                f"Unable to parse function list for {device_id}: {ex}"
            ) from ex

    async def get_capabilities(self, device_id: str) -> CapabilityMap:
        """Return the capability map of a device."""
        return CapabilityMap(await self.get_functions(device_id))

    async def get_value(self, device_id: str, function_id: str) -> Any:
        """Return the raw value of a device function."""
        body = await self._request("GET", self._function_url(device_id, function_id))
        if body is None:
            return None
        if not isinstance(body, dict):
            raise DeviceCommunicationError(
                f"Unexpected response for {device_id}/{function_id}: {body!r}"
            )
        value = body.get("value")
        _LOGGER.debug("Read %s/%s: %r", device_id, function_id, value)
        return value

    async def set_value(
        self, device_id: str, function_id: str, value: DeviceValue
    ) -> None:
        """Write a value to a device function."""
        await self._request(
            "PUT", self._function_url(device_id, function_id), json={"value": value}
        )

    async def close(self) -> None:
        """Close the underlying http client."""
        await self._http_client.close()
