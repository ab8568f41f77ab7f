"""Lookup of the device functions an accessory supports.

A device describes its controllable channels as a list of functions. The
map is built once for an accessory and answers which characteristics can
be configured and which function identifier to use for them:

>>> from hubspace.capabilities import CapabilityMap, DeviceFunction
>>> from hubspace.characteristic import Characteristic
>>> capabilities = CapabilityMap(
>>>     [
>>>         DeviceFunction(id="1", function_class="power"),
>>>         DeviceFunction(id="2", function_class="color-rgb"),
>>>     ]
>>> )
>>> capabilities.supports(Characteristic.Brightness)
False
>>> capabilities.resolve_function_id(Characteristic.Hue)
'2'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from mashumaro import field_options
from mashumaro.config import BaseConfig

from .characteristic import Characteristic, FunctionClass
from .exceptions import UnsupportedCharacteristicError
from .json import DataClassJSONMixin

_LOGGER = logging.getLogger(__name__)


@dataclass
class DeviceFunction(DataClassJSONMixin):
    """Single function reported by a device."""

    class Config(BaseConfig):
        """Serialization config."""

        omit_none = True
        serialize_by_alias = True

    #: Opaque identifier used when reading or writing the function
    id: str
    #: Class of the function, e.g. ``power`` or ``color-rgb``
    function_class: str = field(metadata=field_options(alias="functionClass"))
    #: Instance name for devices with several functions of one class
    function_instance: str | None = field(
        default=None, metadata=field_options(alias="functionInstance")
    )


class CapabilityMap:
    """Characteristic to function identifier lookup for one accessory."""

    def __init__(self, functions: Iterable[DeviceFunction]) -> None:
        self._functions: dict[FunctionClass, DeviceFunction] = {}
        for function in functions:
            function_class = FunctionClass.from_value(function.function_class)
            if function_class is None:
                _LOGGER.debug("Ignoring unknown function class %s", function)
                continue
            # The first function of a class wins
            self._functions.setdefault(function_class, function)

    @property
    def function_classes(self) -> set[FunctionClass]:
        """Return the supported function classes."""
        return set(self._functions)

    def supports(self, characteristic: Characteristic) -> bool:
        """Return True if the device has a function for the characteristic."""
        return characteristic.function_class in self._functions

    def resolve_function_id(self, characteristic: Characteristic) -> str:
        """Return the function identifier backing the characteristic."""
        if (function := self._functions.get(characteristic.function_class)) is None:
            raise UnsupportedCharacteristicError(
                f"Characteristic {characteristic.value} is not supported "
                f"(missing {characteristic.function_class.value} function)",
                characteristic=characteristic,
            )
        return function.id

    def __repr__(self) -> str:
        classes = ", ".join(sorted(fc.value for fc in self._functions))
        return f"<CapabilityMap [{classes}]>"
