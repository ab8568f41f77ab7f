"""Module for HttpClient class."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from yarl import URL

from .exceptions import DeviceCommunicationError, TimeoutError
from .json import dumps as json_dumps
from .json import loads as json_loads
from .serviceconfig import ServiceConfig

_LOGGER = logging.getLogger(__name__)


class HttpClient:
    """HttpClient Class."""

    def __init__(self, config: ServiceConfig) -> None:
        self._config = config
        self._client_session: aiohttp.ClientSession | None = None

    @property
    def client(self) -> aiohttp.ClientSession:
        """Return the underlying http client."""
        if self._config.http_client and isinstance(
            self._config.http_client, aiohttp.ClientSession
        ):
            return self._config.http_client

        if not self._client_session:
            self._client_session = aiohttp.ClientSession()
        return self._client_session

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        return headers

    async def request(
        self, method: str, url: URL, *, json: Any | None = None
    ) -> tuple[int, Any]:
        """Send a request and return the status and decoded json body."""
        _LOGGER.debug("%s %s", method, url)
        if self._config.timeout is None:
            _LOGGER.warning("Request timeout is set to None.")
        client_timeout = aiohttp.ClientTimeout(total=self._config.timeout)

        headers = self._headers()
        data = None
        if json is not None:
            headers["Content-Type"] = "application/json"
            data = json_dumps(json)

        try:
            resp = await self.client.request(
                method, url, data=data, headers=headers, timeout=client_timeout
            )
            async with resp:
                body = await resp.read()
        except (aiohttp.ServerTimeoutError, asyncio.TimeoutError) as ex:
            raise TimeoutError(
                f"Unable to reach the device service, timed out: {url}: {ex}", ex
            ) from ex
        except aiohttp.ClientError as ex:
            raise DeviceCommunicationError(
                f"Device service connection error: {url}: {ex}", ex
            ) from ex

        if not body:
            return resp.status, None
        try:
            return resp.status, json_loads(body)
        except ValueError as ex:
            _LOGGER.debug("Response from %s could not be parsed as json: %r", url, body)
            raise DeviceCommunicationError(
                f"Invalid json from device service: {url}", ex
            ) from ex

    async def close(self) -> None:
        """Close the ClientSession."""
        client = self._client_session
        self._client_session = None
        if client:
            await client.close()
