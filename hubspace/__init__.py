"""Python interface for exposing Hubspace lights through host characteristics.

All characteristic handling is available through the
:class:`CharacteristicTranslator` class::

>>> from hubspace import HttpDeviceService, ServiceConfig, CharacteristicTranslator
>>> service = HttpDeviceService(ServiceConfig("192.168.1.10:8080"))
>>> capabilities = await service.get_capabilities("device-1")
>>> light = CharacteristicTranslator("device-1", capabilities, service)
>>> print(await light.get_brightness())

Errors are raised as `HubspaceException` and are expected
to be handled by the user of the library.
"""

from hubspace.capabilities import CapabilityMap, DeviceFunction
from hubspace.characteristic import Characteristic, CharacteristicHandler, FunctionClass
from hubspace.color import HSL, HSV, hex_to_hue_saturation, hue_saturation_to_hex
from hubspace.deviceservice import DeviceService
from hubspace.exceptions import (
    DeviceCommunicationError,
    DeviceUnavailableError,
    HubspaceException,
    InvalidColorFormatError,
    TimeoutError,
    UnsupportedCharacteristicError,
)
from hubspace.httpservice import HttpDeviceService
from hubspace.pending import PendingColorState
from hubspace.serviceconfig import ServiceConfig
from hubspace.translator import CharacteristicTranslator
from hubspace.version import __version__

__all__ = [
    "CapabilityMap",
    "DeviceFunction",
    "Characteristic",
    "CharacteristicHandler",
    "FunctionClass",
    "HSL",
    "HSV",
    "hex_to_hue_saturation",
    "hue_saturation_to_hex",
    "DeviceService",
    "HttpDeviceService",
    "PendingColorState",
    "ServiceConfig",
    "CharacteristicTranslator",
    "HubspaceException",
    "DeviceUnavailableError",
    "InvalidColorFormatError",
    "DeviceCommunicationError",
    "TimeoutError",
    "UnsupportedCharacteristicError",
    "__version__",
]
