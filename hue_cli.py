#!/usr/bin/env python3
"""
Hue CLI
Helper for Philips Hue lights: register, scan, list, blink, rename, and
switch all lights on or off.
"""

import click

# Import commands from command modules
from commands.setup import HueGroup, AppContext, IP_ADDRESS, help_command, register_command
from commands.inspection import list_lights_command, list_groups_command
from commands.control import (
    scan_command,
    blink_command,
    name_command,
    all_on_command,
    all_off_command
)

__version__ = '0.1.0'


@click.group(
    cls=HueGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 120
    }
)
@click.option('--ip-address', type=IP_ADDRESS, metavar='IP_ADDRESS',
              help='IP address of a specific bridge. Searches the network if not given. '
                   'May also be given as the first argument.')
@click.option('--verbose', '-v', is_flag=True, help='Show bridge requests on stderr')
@click.version_option(version=__version__, prog_name='hue')
@click.pass_context
def cli(ctx, ip_address, verbose):
    """Helper for Philips Hue lights.

Run 'register' after pressing the bridge link button, then put the printed
username in config.toml (see 'help' for the location).

Use 'help' for a quick reference of all commands.
Use 'COMMAND -h' or 'COMMAND --help' for detailed help on a specific command."""
    ctx.obj = AppContext(ip_address=ip_address, verbose=verbose)


# Register setup and help commands
cli.add_command(help_command)
cli.add_command(register_command)

# Register inspection commands
cli.add_command(list_lights_command)
cli.add_command(list_groups_command)

# Register control commands
cli.add_command(scan_command)
cli.add_command(blink_command)
cli.add_command(name_command)
cli.add_command(all_on_command)
cli.add_command(all_off_command)


if __name__ == '__main__':
    cli()
