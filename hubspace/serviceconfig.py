"""Configuration for reaching the device service.

>>> from hubspace.serviceconfig import ServiceConfig
>>> config = ServiceConfig(host="http://bridge.local:8080", token="secret")
>>> config.to_dict()
{'host': 'http://bridge.local:8080', 'timeout': 5, 'token': 'secret'}

A shared :class:`aiohttp.ClientSession` can be passed as ``http_client``, it is
never serialized.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Self

from aiohttp import ClientSession
from mashumaro import field_options
from mashumaro.config import BaseConfig
from mashumaro.types import SerializationStrategy
from yarl import URL

from .exceptions import HubspaceException
from .json import DataClassJSONMixin

_LOGGER = logging.getLogger(__name__)


class _DoNotSerialize(SerializationStrategy):
    def serialize(self, value: Any) -> None:
        return None

    def deserialize(self, value: Any) -> None:
        return None


@dataclass
class ServiceConfig(DataClassJSONMixin):
    """Parameters that determine how to reach the device service."""

    class Config(BaseConfig):
        """Serialization config."""

        omit_none = True

    DEFAULT_TIMEOUT = 5
    #: Base URL of the device service
    host: str
    #: Timeout in seconds for a single request
    timeout: int | None = DEFAULT_TIMEOUT
    #: Bearer token sent with every request
    token: str | None = field(default=None, repr=False)

    # compare=False will be excluded from object comparison.
    #: Set a custom http_client for the service to use.
    http_client: ClientSession | None = field(
        default=None,
        compare=False,
        metadata=field_options(serialization_strategy=_DoNotSerialize()),
    )

    def __post_init__(self) -> None:
        if "://" not in self.host:
            _LOGGER.debug("No scheme given for %s, assuming http", self.host)
            self.host = f"http://{self.host}"
        try:
            valid = bool(URL(self.host).host)
        except ValueError:
            valid = False
        if not valid:
            raise HubspaceException(f"Invalid device service host: {self.host}")

    def __pre_serialize__(self) -> Self:
        return replace(self, http_client=None)

    @property
    def base_url(self) -> URL:
        """Return the base URL of the service."""
        return URL(self.host)
