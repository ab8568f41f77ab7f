from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from asyncclick.testing import CliRunner

from hubspace import CapabilityMap, CharacteristicTranslator, DeviceFunction
from hubspace.deviceservice import DeviceService, DeviceValue

DEVICE_ID = "light-1"
POWER_FN = "power-fn"
BRIGHTNESS_FN = "brightness-fn"
COLOR_FN = "color-fn"

ALL_FUNCTIONS = [
    DeviceFunction(id=POWER_FN, function_class="power"),
    DeviceFunction(id=BRIGHTNESS_FN, function_class="brightness"),
    DeviceFunction(
        id=COLOR_FN, function_class="color-rgb", function_instance="color-rgb"
    ),
]


class FakeDeviceService(DeviceService):
    """In memory device service recording every write."""

    def __init__(self, values: dict[tuple[str, str], Any] | None = None) -> None:
        self.values: dict[tuple[str, str], Any] = dict(values or {})
        self.writes: list[tuple[str, str, DeviceValue]] = []

    async def get_value(self, device_id: str, function_id: str) -> Any:
        return self.values.get((device_id, function_id))

    async def set_value(
        self, device_id: str, function_id: str, value: DeviceValue
    ) -> None:
        self.writes.append((device_id, function_id, value))
        self.values[(device_id, function_id)] = value


@pytest.fixture()
def service() -> FakeDeviceService:
    """Return a device service with a light that is on, dimmed and blue."""
    return FakeDeviceService(
        {
            (DEVICE_ID, POWER_FN): "on",
            (DEVICE_ID, BRIGHTNESS_FN): 42,
            (DEVICE_ID, COLOR_FN): "1E90FF",
        }
    )


@pytest.fixture()
def capabilities() -> CapabilityMap:
    return CapabilityMap(ALL_FUNCTIONS)


@pytest.fixture()
def not_responding() -> MagicMock:
    return MagicMock()


@pytest.fixture()
def translator(
    service: FakeDeviceService, capabilities: CapabilityMap, not_responding
) -> CharacteristicTranslator:
    return CharacteristicTranslator(
        DEVICE_ID, capabilities, service, on_not_responding=not_responding
    )


@pytest.fixture()
def runner():
    """Runner fixture that unsets the HUBSPACE_ environment variables for tests."""
    return CliRunner(
        env={
            "HUBSPACE_HOST": None,
            "HUBSPACE_DEVICE_ID": None,
            "HUBSPACE_TOKEN": None,
            "HUBSPACE_TIMEOUT": None,
            "HUBSPACE_DEBUG": None,
            "HUBSPACE_JSON": None,
        }
    )
