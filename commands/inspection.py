"""
Inspection commands for listing lights and groups.

Everything is fetched fresh from the bridge on each run.
"""

import click

from commands.setup import AppContext
from models.utils import format_table, sort_by_id, yes_no


@click.command(name='list')
@click.pass_obj
def list_lights_command(obj: AppContext):
    """List all known lights."""
    bridge = obj.get_bridge()

    lights = sort_by_id(bridge.get_all_lights())
    if not lights:
        click.echo("No lights found.")
        return

    rows = [
        (light.id, light.name, yes_no(light.reachable), yes_no(light.on))
        for light in lights
    ]
    for line in format_table(('id', 'name', 'reachable', 'on'), rows):
        click.echo(line)


@click.command(name='list-groups')
@click.pass_obj
def list_groups_command(obj: AppContext):
    """List all known groups."""
    bridge = obj.get_bridge()

    groups = sort_by_id(bridge.get_all_groups())
    if not groups:
        click.echo("No groups found.")
        return

    rows = [(group.id, group.name, ','.join(group.lights)) for group in groups]
    for line in format_table(('id', 'name', 'lights'), rows):
        click.echo(line)
