"""Host characteristics and the device functions backing them.

The host controls a light through independent characteristics while the
device exposes a smaller set of functions. Hue and saturation share the
single RGB color function.
"""

from __future__ import annotations

from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from enum import Enum
from typing import Any

#: Value types exchanged with the host for a characteristic
CharacteristicValue = bool | int | float


class FunctionClass(Enum):
    """Device function classes understood by this library."""

    Power = "power"
    Brightness = "brightness"
    ColorRgb = "color-rgb"

    @staticmethod
    def from_value(value: str) -> FunctionClass | None:
        """Return the function class for a device value, if known."""
        try:
            return FunctionClass(value)
        except ValueError:
            return None


class Characteristic(Enum):
    """Characteristics exposed to the host."""

    On = "on"
    Brightness = "brightness"
    Hue = "hue"
    Saturation = "saturation"

    @property
    def function_class(self) -> FunctionClass:
        """Return the device function class backing this characteristic."""
        return _FUNCTION_CLASSES[self]


_FUNCTION_CLASSES = {
    Characteristic.On: FunctionClass.Power,
    Characteristic.Brightness: FunctionClass.Brightness,
    Characteristic.Hue: FunctionClass.ColorRgb,
    Characteristic.Saturation: FunctionClass.ColorRgb,
}


@dataclass(frozen=True)
class CharacteristicHandler:
    """Get and set callbacks registered for one characteristic."""

    #: Characteristic served by this handler
    characteristic: Characteristic
    #: Coroutine function returning the current value
    getter: Callable[[], Coroutine[Any, Any, CharacteristicValue]]
    #: Coroutine function applying a new value
    setter: Callable[[Any], Coroutine[Any, Any, None]]

    async def get_value(self) -> CharacteristicValue:
        """Read the value through the getter."""
        return await self.getter()

    async def set_value(self, value: CharacteristicValue) -> None:
        """Write the value through the setter."""
        await self.setter(value)

    def __repr__(self) -> str:
        return f"<CharacteristicHandler {self.characteristic.value}>"
