"""Main module for cli tool."""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any

import asyncclick as click

from hubspace import CharacteristicTranslator, HttpDeviceService, ServiceConfig

from .common import CatchAllExceptions, echo, error, json_formatter_cb
from .light import brightness, color, hue, off, on, saturation, state

_LOGGER = logging.getLogger(__name__)


@click.group(
    invoke_without_command=True,
    cls=CatchAllExceptions(click.Group),
    result_callback=json_formatter_cb,
)
@click.option(
    "--host",
    envvar="HUBSPACE_HOST",
    required=False,
    help="Base URL of the device service.",
)
@click.option(
    "--device-id",
    envvar="HUBSPACE_DEVICE_ID",
    required=False,
    help="Id of the light to control.",
)
@click.option(
    "--token",
    envvar="HUBSPACE_TOKEN",
    required=False,
    help="Bearer token for the device service.",
)
@click.option(
    "--timeout",
    envvar="HUBSPACE_TIMEOUT",
    default=ServiceConfig.DEFAULT_TIMEOUT,
    required=False,
    show_default=True,
    help="Timeout for device service requests.",
)
@click.option("-d", "--debug", envvar="HUBSPACE_DEBUG", default=False, is_flag=True)
@click.option(
    "--json/--no-json",
    envvar="HUBSPACE_JSON",
    default=False,
    is_flag=True,
    help="Output raw device response as JSON.",
)
@click.version_option(package_name="python-hubspace")
@click.pass_context
async def cli(ctx, host, device_id, token, timeout, debug, json):
    """A tool for controlling Hubspace lights."""  # noqa
    # no need to perform any checks if we are just displaying the help
    if "--help" in sys.argv:
        # Context object is required to avoid crashing on sub-groups
        ctx.obj = object()
        return

    logging_config: dict[str, Any] = {
        "level": logging.DEBUG if debug else logging.INFO
    }
    try:
        from rich.logging import RichHandler

        rich_config = {
            "show_time": False,
        }
        logging_config["handlers"] = [RichHandler(**rich_config)]
        logging_config["format"] = "%(message)s"
    except ImportError:
        pass

    logging.basicConfig(**logging_config)  # type: ignore

    if host is None or device_id is None:
        error("Both --host and --device-id are required")

    config = ServiceConfig(host=host, timeout=timeout, token=token)

    @asynccontextmanager
    async def async_wrapped_service(service: HttpDeviceService):
        try:
            yield service
        finally:
            await service.close()

    service = await ctx.with_async_resource(
        async_wrapped_service(HttpDeviceService(config))
    )
    capabilities = await service.get_capabilities(device_id)
    _LOGGER.debug("Capabilities of %s: %r", device_id, capabilities)

    def _not_responding() -> None:
        echo(f"[bold red]{device_id} is not responding[/bold red]")

    ctx.obj = CharacteristicTranslator(
        device_id, capabilities, service, on_not_responding=_not_responding
    )

    if ctx.invoked_subcommand is None:
        return await ctx.invoke(state)


for command in (state, on, off, brightness, hue, saturation, color):
    cli.add_command(command)


if __name__ == "__main__":
    cli()
