"""Module for cli light control commands."""

from __future__ import annotations

import asyncclick as click

from hubspace import Characteristic, CharacteristicTranslator

from .common import echo, error, pass_translator


@click.command()
@pass_translator
async def state(translator: CharacteristicTranslator):
    """Print out the light state."""
    echo(f"[bold]== {translator.device_id} ==[/bold]")
    result = {}
    for characteristic in translator.characteristics:
        value = await translator.get(characteristic)
        echo(f"{characteristic.name}: {value}")
        result[characteristic.value] = value
    return result


@click.command()
@pass_translator
async def on(translator: CharacteristicTranslator):
    """Turn the light on."""
    echo(f"Turning on {translator.device_id}")
    await translator.set_on(True)


@click.command()
@pass_translator
async def off(translator: CharacteristicTranslator):
    """Turn the light off."""
    echo(f"Turning off {translator.device_id}")
    await translator.set_on(False)


@click.command()
@click.argument("brightness", type=click.IntRange(0, 100), default=None, required=False)
@pass_translator
async def brightness(translator: CharacteristicTranslator, brightness: int | None):
    """Get or set brightness."""
    if Characteristic.Brightness not in translator.characteristics:
        error("This device does not support brightness.")

    if brightness is None:
        current = await translator.get_brightness()
        echo(f"Brightness: {current}")
        return current

    echo(f"Setting brightness to {brightness}")
    await translator.set_brightness(brightness)


def _require_color(translator: CharacteristicTranslator) -> None:
    if Characteristic.Hue not in translator.characteristics:
        error("This device does not support colors.")


@click.command()
@pass_translator
async def hue(translator: CharacteristicTranslator):
    """Get the hue of the current color."""
    _require_color(translator)
    current = await translator.get_hue()
    echo(f"Hue: {current}")
    return current


@click.command()
@pass_translator
async def saturation(translator: CharacteristicTranslator):
    """Get the saturation of the current color."""
    _require_color(translator)
    current = await translator.get_saturation()
    echo(f"Saturation: {current}")
    return current


@click.command()
@click.argument("hue", type=click.FloatRange(0, 360))
@click.argument("saturation", type=click.FloatRange(0, 100))
@pass_translator
async def color(translator: CharacteristicTranslator, hue: float, saturation: float):
    """Set hue and saturation with a single color write."""
    _require_color(translator)
    echo(f"Setting color to hue {hue}, saturation {saturation}")
    await translator.set_hue(hue)
    await translator.set_saturation(saturation)
