"""python-hubspace exceptions."""

from __future__ import annotations

from asyncio import TimeoutError as _asyncioTimeoutError
from typing import Any


class HubspaceException(Exception):
    """Base exception for library errors."""


class DeviceUnavailableError(HubspaceException):
    """The device reported no usable value for a characteristic."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.device_id: str | None = kwargs.get("device_id")
        self.function_id: str | None = kwargs.get("function_id")
        super().__init__(*args)


class InvalidColorFormatError(HubspaceException, ValueError):
    """Color value could not be decoded or is outside its valid range."""


class DeviceCommunicationError(HubspaceException):
    """The call to the device service itself failed."""


class TimeoutError(DeviceCommunicationError, _asyncioTimeoutError):
    """Timeout exception for device service calls."""

    def __repr__(self) -> str:
        return HubspaceException.__repr__(self)

    def __str__(self) -> str:
        return HubspaceException.__str__(self)


class UnsupportedCharacteristicError(HubspaceException):
    """The accessory has no device function for the characteristic."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.characteristic = kwargs.get("characteristic")
        super().__init__(*args)
