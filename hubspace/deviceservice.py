"""Base class for services reading and writing device function values.

Implementations only need :meth:`DeviceService.get_value` and
:meth:`DeviceService.set_value`, the typed getters coerce the raw value and
return ``None`` if the device reported no value. Any failure of the call
itself is raised as :class:`~hubspace.exceptions.DeviceCommunicationError`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from .exceptions import DeviceCommunicationError

_LOGGER = logging.getLogger(__name__)

#: Values accepted by :meth:`DeviceService.set_value`
DeviceValue = bool | int | str

_TRUE_VALUES = {"on", "true", "1"}
_FALSE_VALUES = {"off", "false", "0"}


class DeviceService(ABC):
    """Base class for device services."""

    @abstractmethod
    async def get_value(self, device_id: str, function_id: str) -> Any:
        """Return the raw value of a device function, None if not reported."""

    @abstractmethod
    async def set_value(
        self, device_id: str, function_id: str, value: DeviceValue
    ) -> None:
        """Write a value to a device function."""

    async def close(self) -> None:
        """Release resources held by the service."""

    async def get_value_as_boolean(
        self, device_id: str, function_id: str
    ) -> bool | None:
        """Return the function value as a boolean."""
        value = await self.get_value(device_id, function_id)
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            if value.lower() in _TRUE_VALUES:
                return True
            if value.lower() in _FALSE_VALUES:
                return False
        raise _malformed(device_id, function_id, value, "boolean")

    async def get_value_as_integer(
        self, device_id: str, function_id: str
    ) -> int | None:
        """Return the function value as an integer."""
        value = await self.get_value(device_id, function_id)
        if value is None:
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        raise _malformed(device_id, function_id, value, "integer")

    async def get_value_as_string(
        self, device_id: str, function_id: str
    ) -> str | None:
        """Return the function value as a string."""
        value = await self.get_value(device_id, function_id)
        if value is None or isinstance(value, str):
            return value
        raise _malformed(device_id, function_id, value, "string")


def _malformed(
    device_id: str, function_id: str, value: Any, expected: str
) -> DeviceCommunicationError:
    _LOGGER.debug(
        "Device %s function %s returned %r, expected %s",
        device_id,
        function_id,
        value,
        expected,
    )
    return DeviceCommunicationError(
        f"Malformed response from {device_id} for function {function_id}: "
        f"expected {expected}, got {value!r}"
    )
