"""Translate host characteristic requests into device function calls.

The host drives a light through power, brightness, hue and saturation
characteristics. The device has a boolean power function, an integer
brightness function and a single RGB color function:

>>> from hubspace import CapabilityMap, CharacteristicTranslator, DeviceFunction
>>> capabilities = CapabilityMap(
>>>     [
>>>         DeviceFunction(id="power", function_class="power"),
>>>         DeviceFunction(id="brightness", function_class="brightness"),
>>>         DeviceFunction(id="color", function_class="color-rgb"),
>>>     ]
>>> )
>>> light = CharacteristicTranslator("device-1", capabilities, service)
>>> await light.get_on()
True

Hue and saturation arrive as separate writes. The first one is only
remembered, the device is written once both are known:

>>> await light.set_hue(240)
>>> await light.set_saturation(80)  # writes '3333FF' to the color function

Failed reads mark the accessory as not responding before the error is
raised, so the host never shows a stale value.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from .capabilities import CapabilityMap
from .characteristic import Characteristic, CharacteristicHandler, CharacteristicValue
from .color import (
    hex_to_hue_saturation,
    hue_saturation_to_hex,
    raise_for_invalid_hue,
    raise_for_invalid_saturation,
)
from .deviceservice import DeviceService
from .exceptions import DeviceUnavailableError, UnsupportedCharacteristicError
from .pending import PendingColorState

_LOGGER = logging.getLogger(__name__)

BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX = 100

#: Integer reported by devices that have no brightness reading
BRIGHTNESS_UNAVAILABLE = -1


class CharacteristicTranslator:
    """Characteristic get/set handlers for one light accessory."""

    def __init__(
        self,
        device_id: str,
        capabilities: CapabilityMap,
        service: DeviceService,
        *,
        on_not_responding: Callable[[], None] | None = None,
    ) -> None:
        self._device_id = device_id
        self._capabilities = capabilities
        self._service = service
        self._on_not_responding = on_not_responding
        self._pending_color = PendingColorState()
        self._reachable = True
        self._handlers: dict[Characteristic, CharacteristicHandler] = {}

        self._configure_power()
        self._configure_brightness()
        self._configure_color_rgb()

    @property
    def device_id(self) -> str:
        """Return the device id."""
        return self._device_id

    @property
    def reachable(self) -> bool:
        """Return False if the last read failed."""
        return self._reachable

    @property
    def pending_color(self) -> PendingColorState:
        """Return the color state waiting for its other component."""
        return self._pending_color

    @property
    def characteristics(self) -> Mapping[Characteristic, CharacteristicHandler]:
        """Return the handlers configured for this accessory."""
        return MappingProxyType(self._handlers)

    def _add_handler(self, handler: CharacteristicHandler) -> None:
        if handler.characteristic in self._handlers:
            raise ValueError(f"Duplicate characteristic {handler.characteristic}")
        self._handlers[handler.characteristic] = handler

    def _configure_power(self) -> None:
        self._add_handler(
            CharacteristicHandler(Characteristic.On, self.get_on, self.set_on)
        )

    def _configure_brightness(self) -> None:
        if not self._capabilities.supports(Characteristic.Brightness):
            return
        self._add_handler(
            CharacteristicHandler(
                Characteristic.Brightness, self.get_brightness, self.set_brightness
            )
        )

    def _configure_color_rgb(self) -> None:
        if not self._capabilities.supports(Characteristic.Hue):
            return
        self._add_handler(
            CharacteristicHandler(Characteristic.Hue, self.get_hue, self.set_hue)
        )
        self._add_handler(
            CharacteristicHandler(
                Characteristic.Saturation, self.get_saturation, self.set_saturation
            )
        )

    def _handler(self, characteristic: Characteristic) -> CharacteristicHandler:
        if (handler := self._handlers.get(characteristic)) is None:
            raise UnsupportedCharacteristicError(
                f"{characteristic.value} is not configured for {self._device_id}",
                characteristic=characteristic,
            )
        return handler

    async def get(self, characteristic: Characteristic) -> CharacteristicValue:
        """Return the current value of a configured characteristic."""
        return await self._handler(characteristic).get_value()

    async def set(
        self, characteristic: Characteristic, value: CharacteristicValue
    ) -> None:
        """Apply a value to a configured characteristic."""
        await self._handler(characteristic).set_value(value)

    def _set_not_responding(self) -> None:
        _LOGGER.warning("Device %s is not responding", self._device_id)
        self._reachable = False
        if self._on_not_responding is not None:
            self._on_not_responding()

    def _unavailable(self, characteristic: Characteristic) -> DeviceUnavailableError:
        return DeviceUnavailableError(
            f"Value not available for {characteristic.value} on {self._device_id}",
            device_id=self._device_id,
            function_id=self._capabilities.resolve_function_id(characteristic),
        )

    async def _read(self, characteristic: Characteristic) -> CharacteristicValue:
        try:
            value = await self._read_value(characteristic)
        except Exception:
            self._set_not_responding()
            raise

        self._reachable = True
        _LOGGER.debug(
            "Device %s %s is %s", self._device_id, characteristic.value, value
        )
        return value

    async def _read_value(self, characteristic: Characteristic) -> CharacteristicValue:
        function_id = self._capabilities.resolve_function_id(characteristic)

        if characteristic is Characteristic.On:
            power = await self._service.get_value_as_boolean(
                self._device_id, function_id
            )
            if power is None:
                raise self._unavailable(characteristic)
            return power

        if characteristic is Characteristic.Brightness:
            brightness = await self._service.get_value_as_integer(
                self._device_id, function_id
            )
            if brightness is None or brightness == BRIGHTNESS_UNAVAILABLE:
                raise self._unavailable(characteristic)
            return brightness

        color = await self._service.get_value_as_string(self._device_id, function_id)
        if not color:
            raise self._unavailable(characteristic)
        hue, saturation = hex_to_hue_saturation(color)
        return hue if characteristic is Characteristic.Hue else saturation

    async def _write(
        self, characteristic: Characteristic, value: bool | int | str
    ) -> None:
        function_id = self._capabilities.resolve_function_id(characteristic)
        _LOGGER.debug(
            "Setting device %s function %s to %s", self._device_id, function_id, value
        )
        await self._service.set_value(self._device_id, function_id, value)
        self._reachable = True

    async def get_on(self) -> bool:
        """Return True if the light is on."""
        return bool(await self._read(Characteristic.On))

    async def set_on(self, on: bool) -> None:
        """Turn the light on or off."""
        await self._write(Characteristic.On, bool(on))

    async def get_brightness(self) -> int:
        """Return the brightness in percent."""
        return int(await self._read(Characteristic.Brightness))

    async def set_brightness(self, brightness: int) -> None:
        """Set the brightness in percent."""
        if isinstance(brightness, bool) or not isinstance(brightness, int):
            raise ValueError(f"Brightness must be an integer, got {brightness!r}")
        if not (BRIGHTNESS_MIN <= brightness <= BRIGHTNESS_MAX):
            raise ValueError(
                f"Invalid brightness value: {brightness} "
                f"(valid range: {BRIGHTNESS_MIN}-{BRIGHTNESS_MAX}%)"
            )
        await self._write(Characteristic.Brightness, brightness)

    async def get_hue(self) -> int:
        """Return the hue of the current color in degrees."""
        return int(await self._read(Characteristic.Hue))

    async def set_hue(self, hue: float) -> None:
        """Set the hue, written to the device once saturation is known."""
        raise_for_invalid_hue(hue)
        self._pending_color.set_hue(hue)
        await self._commit_color()

    async def get_saturation(self) -> int:
        """Return the saturation of the current color in percent."""
        return int(await self._read(Characteristic.Saturation))

    async def set_saturation(self, saturation: float) -> None:
        """Set the saturation, written to the device once hue is known."""
        raise_for_invalid_saturation(saturation)
        self._pending_color.set_saturation(saturation)
        await self._commit_color()

    async def _commit_color(self) -> None:
        pending = self._pending_color
        if not pending.is_complete():
            _LOGGER.debug("Device %s waiting for color: %s", self._device_id, pending)
            return

        # Cleared before the write, a new pair may collect while it is in flight
        hue, saturation = pending.consume()
        try:
            color = hue_saturation_to_hex(hue, saturation)
            await self._write(Characteristic.Hue, color)
        except Exception:
            # Components that arrived during the failed write belong to it
            pending.reset()
            raise

    def __repr__(self) -> str:
        characteristics = ", ".join(c.value for c in self._handlers)
        return f"<CharacteristicTranslator {self._device_id} [{characteristics}]>"
