"""Color space conversions between device hex RGB and host hue/saturation.

Devices report and accept color as a single hex encoded RGB value, while the
host controls hue and saturation as separate characteristics:

>>> from hubspace.color import hex_to_hue_saturation, hue_saturation_to_hex
>>> hex_to_hue_saturation("#1E90FF")
(210, 100)
>>> hue_saturation_to_hex(240, 80)
'3333FF'

Reading goes through HSL and discards the lightness, writing goes through HSV
with the value fixed at 100%, as brightness is a separate characteristic.
The round trip is therefore lossy for saturation, only the hue is preserved.
"""

from __future__ import annotations

import colorsys
import re
from typing import NamedTuple

from .exceptions import InvalidColorFormatError

HUE_MAX = 360
SATURATION_MAX = 100
#: Value used for every color written to the device
COLOR_VALUE = 100

_HEX_COLOR = re.compile(r"^#?(?P<rgb>[0-9a-fA-F]{6})$")


class HSL(NamedTuple):
    """Hue-saturation-lightness."""

    hue: int
    saturation: int
    lightness: int


class HSV(NamedTuple):
    """Hue-saturation-value."""

    hue: int
    saturation: int
    value: int


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Decode ``RRGGBB`` or ``#RRGGBB`` into an RGB triplet."""
    if not isinstance(value, str) or not (match := _HEX_COLOR.match(value.strip())):
        raise InvalidColorFormatError(f"Invalid hex color: {value!r}")

    rgb = bytes.fromhex(match.group("rgb"))
    return rgb[0], rgb[1], rgb[2]


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    """Encode an RGB triplet as the upper case ``RRGGBB`` the device expects."""
    return f"{red:02X}{green:02X}{blue:02X}"


def hex_to_hsl(value: str) -> HSL:
    """Convert a hex color to HSL (degrees, %, %)."""
    red, green, blue = hex_to_rgb(value)
    hue, lightness, saturation = colorsys.rgb_to_hls(
        red / 255, green / 255, blue / 255
    )
    return HSL(
        round(hue * HUE_MAX) % HUE_MAX,
        round(saturation * SATURATION_MAX),
        round(lightness * 100),
    )


def hsv_to_hex(hsv: HSV) -> str:
    """Convert HSV (degrees, %, %) to a hex color."""
    red, green, blue = colorsys.hsv_to_rgb(
        (hsv.hue % HUE_MAX) / HUE_MAX,
        hsv.saturation / SATURATION_MAX,
        hsv.value / 100,
    )
    return rgb_to_hex(round(red * 255), round(green * 255), round(blue * 255))


def _raise_for_invalid_component(name: str, value: float, maximum: int) -> None:
    # bool is an int subclass but never a meaningful color component
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidColorFormatError(f"{name} must be a number, got {value!r}")
    if not (0 <= value <= maximum):
        raise InvalidColorFormatError(
            f"Invalid {name.lower()} value: {value} (valid range: 0-{maximum})"
        )


def raise_for_invalid_hue(hue: float) -> None:
    """Raise error on invalid hue value."""
    _raise_for_invalid_component("Hue", hue, HUE_MAX)


def raise_for_invalid_saturation(saturation: float) -> None:
    """Raise error on invalid saturation value."""
    _raise_for_invalid_component("Saturation", saturation, SATURATION_MAX)


def hex_to_hue_saturation(value: str) -> tuple[int, int]:
    """Return the hue [0, 360) and HSL saturation [0, 100] of a hex color."""
    hsl = hex_to_hsl(value)
    return hsl.hue, hsl.saturation


def hue_saturation_to_hex(hue: float, saturation: float) -> str:
    """Return the hex color for hue and saturation at full value.

    Out of range input is rejected rather than clamped. A hue of 360 is the
    same color as 0.
    """
    raise_for_invalid_hue(hue)
    raise_for_invalid_saturation(saturation)
    return hsv_to_hex(HSV(round(hue), round(saturation), COLOR_VALUE))
