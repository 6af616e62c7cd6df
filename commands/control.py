"""
Control commands that change lights on the bridge.

Includes scanning for new lights, blinking, renaming, and switching every
light on or off.
"""

import time

import click

from commands.setup import AppContext
from models.utils import format_table, sort_by_id

# The bridge searches for new lights for about 40 seconds
SCAN_SLEEP_SECONDS = 40
BLINK_INTERVAL_SECONDS = 1


@click.command(name='scan')
@click.pass_obj
def scan_command(obj: AppContext):
    """Scan for new lights."""
    bridge = obj.get_bridge()

    bridge.search_new_lights()
    click.echo(f"Initiated scan. Sleeping for {SCAN_SLEEP_SECONDS}s.")
    time.sleep(SCAN_SLEEP_SECONDS)

    new_lights = bridge.get_new_lights()
    if new_lights.last_scan == 'active':
        click.secho("Bridge is still scanning; run 'list' later to see any lights found since.",
                    fg='yellow', err=True)
    if not new_lights.lights:
        click.echo("No new lights found.")
        return

    click.secho(f"Found {len(new_lights.lights)} new light(s):", fg='green')
    rows = [(light.id, light.name) for light in sort_by_id(new_lights.lights)]
    for line in format_table(('id', 'name'), rows):
        click.echo(line)


@click.command(name='blink')
@click.argument('light_id', metavar='ID')
@click.option('--count', '-n', type=click.IntRange(min=1),
              help='Stop after this many toggles (default: blink until interrupted)')
@click.pass_obj
def blink_command(obj: AppContext, light_id: str, count: int | None):
    """Blink a specific light.

    Toggles the light on and off every second. Stop with Ctrl-C; the light
    is left in whatever state it was last set to.
    """
    bridge = obj.get_bridge()

    click.echo(f"Blinking light {light_id}...")

    on = True
    toggles = 0
    while count is None or toggles < count:
        bridge.set_light_state(light_id, on=on)
        on = not on
        toggles += 1
        time.sleep(BLINK_INTERVAL_SECONDS)


@click.command(name='name')
@click.argument('light_id', metavar='ID')
@click.argument('name')
@click.pass_obj
def name_command(obj: AppContext, light_id: str, name: str):
    """Name a specific light."""
    bridge = obj.get_bridge()

    bridge.set_light_attribute(light_id, name=name)
    click.echo(f"Set light {light_id} name to \"{name}\"")


def set_all_lights(obj: AppContext, on: bool):
    """Switch every light on or off, in ID order.

    Stops at the first light that fails; lights already switched stay switched.
    """
    bridge = obj.get_bridge()

    for light in sort_by_id(bridge.get_all_lights()):
        bridge.set_light_state(light.id, on=on)


@click.command(name='all-on')
@click.pass_obj
def all_on_command(obj: AppContext):
    """Turn all lights on."""
    set_all_lights(obj, on=True)


@click.command(name='all-off')
@click.pass_obj
def all_off_command(obj: AppContext):
    """Turn all lights off."""
    set_all_lights(obj, on=False)
