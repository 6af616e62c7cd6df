"""
Setup and help commands for the Hue CLI.

Contains the custom Click group class (coloured help output, typo
suggestions, optional leading bridge IP address), the per-invocation
context object, and the 'register' and 'help' commands.
"""

from dataclasses import dataclass
from ipaddress import ip_address

import click

from core.auth import IpAddress, locate_bridge, register_user
from core.bridge import HueBridge
from core.config import get_config_path, load_config
from models.utils import similarity_score


class IpAddressType(click.ParamType):
    """Click parameter type for an IPv4 or IPv6 address."""

    name = 'ip-address'

    def convert(self, value, param, ctx):
        if not isinstance(value, str):
            return value
        try:
            return ip_address(value)
        except ValueError:
            self.fail(f"{value!r} is not a valid IP address", param, ctx)


IP_ADDRESS = IpAddressType()


@dataclass
class AppContext:
    """Values parsed by the top-level group, passed to every command."""
    ip_address: IpAddress | None = None
    verbose: bool = False

    def get_bridge(self) -> HueBridge:
        """Load the config, find the bridge, and open a session with it."""
        config = load_config()
        address = locate_bridge(self.ip_address)
        if self.verbose:
            click.echo(f"Using bridge at {address}", err=True)
        return HueBridge(address, config.username, verbose=self.verbose)


@dataclass(frozen=True)
class CommandSection:
    """Represents a section in the help command."""
    name: str
    icon: str
    commands: list[tuple[str, str]]


class HueGroup(click.Group):
    """Top-level command group.

    Accepts an optional bridge IP address before the command name
    ('hue 192.168.1.2 list'), which is treated like --ip-address, and
    suggests close matches for mistyped command names.
    """

    ip_option = '--ip-address'

    def parse_args(self, ctx, args):
        return super().parse_args(ctx, self._rewrite_ip_argument(ctx, args))

    def _rewrite_ip_argument(self, ctx, args):
        """Turn a leading positional IP address into an --ip-address option."""
        value_opts = {
            opt
            for param in self.get_params(ctx)
            if isinstance(param, click.Option) and not param.is_flag
            for opt in param.opts
        }

        # Skip over group options to the first positional argument
        i = 0
        while i < len(args) and args[i].startswith('-') and args[i] != '--':
            i += 2 if args[i] in value_opts else 1

        after_separator = i < len(args) and args[i] == '--'
        if after_separator:
            i += 1

        if i >= len(args) or args[i] in self.commands:
            return args

        try:
            ip_address(args[i])
        except ValueError:
            return args

        # 'hue -- 10.0.0.1 list' becomes 'hue --ip-address 10.0.0.1 -- list'
        head = args[:i - 1] if after_separator else args[:i]
        tail = ['--', *args[i + 1:]] if after_separator else args[i + 1:]
        return [*head, self.ip_option, args[i], *tail]

    def resolve_command(self, ctx, args):
        """Resolve the command name, listing close matches when there is none."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            cmd_name = args[0] if args else ''
            if 'No such command' not in str(e) or not cmd_name:
                raise
            matches = self.similar_commands(ctx, cmd_name)
            if not matches:
                raise
            hint = ', '.join(click.style(name, fg='green') for name in matches)
            raise click.UsageError(
                f"No such command '{cmd_name}'. Did you mean: {hint}?", ctx) from e

    def similar_commands(self, ctx, cmd_name, limit=3):
        """Visible commands that look like cmd_name, best match first."""
        scored = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            score = similarity_score(cmd_name, name) if cmd and not cmd.hidden else 0
            if score:
                scored.append((score, name))
        return [name for _, name in sorted(scored, reverse=True)[:limit]]

    def format_usage(self, ctx, formatter):
        formatter.write_paragraph()
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            f'{ctx.command_path} [OPTIONS] [IP_ADDRESS] COMMAND [ARGS]...'
        )

    def format_options(self, ctx, formatter):
        """Write the Options and Commands sections."""
        options = [rv for rv in (p.get_help_record(ctx) for p in self.get_params(ctx)) if rv]
        self._write_section(formatter, 'Options:', options)

        commands = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is not None and not cmd.hidden:
                commands.append((name, cmd.get_short_help_str(limit=80)))
        self._write_section(formatter, 'Commands:', commands)

    @staticmethod
    def _write_section(formatter, title, rows):
        if not rows:
            return
        width = max(len(name) for name, _ in rows)
        formatter.write_paragraph()
        formatter.write_text(click.style(title, fg='yellow', bold=True))
        with formatter.indentation():
            for name, text in rows:
                formatter.write_text(click.style(name.ljust(width), fg='green') + '  ' + text)


@click.command(name='help')
def help_command():
    """Display help and common commands."""
    click.echo()
    click.secho("Hue - Quick Reference", fg='cyan', bold=True)
    click.echo()

    sections = [
        CommandSection(
            name="SETUP",
            icon="🔑",
            commands=[
                ("register", "Register a new username (press the link button first)"),
                ("scan", "Search for new lights (takes 40 seconds)"),
            ]
        ),
        CommandSection(
            name="INSPECTION",
            icon="📋",
            commands=[
                ("list", "List all lights with reachable/on state"),
                ("list-groups", "List all groups and their lights"),
            ]
        ),
        CommandSection(
            name="CONTROL",
            icon="💡",
            commands=[
                ("blink <id>", "Toggle a light every second until interrupted"),
                ("name <id> <name>", "Rename a light"),
                ("all-on", "Turn every light on"),
                ("all-off", "Turn every light off"),
            ]
        ),
    ]

    for section in sections:
        click.secho(f"{section.icon} {section.name}", fg='yellow', bold=True)
        for cmd, desc in section.commands:
            click.echo("  ", nl=False)
            click.secho(cmd, fg='green', nl=False)
            click.echo(" " * (24 - len(cmd)) + "  " + desc)
        click.echo()

    click.secho("Bridge address", fg='yellow', bold=True)
    click.echo("  The bridge is found with N-UPnP discovery unless an IP address is given")
    click.echo("  before the command, e.g. 'hue 192.168.1.2 list'.")
    click.echo()
    click.secho("Configuration", fg='yellow', bold=True)
    click.echo(f"  {get_config_path()}")
    click.echo('  username = "<username printed by register>"')
    click.echo()


@click.command(name='register')
@click.pass_obj
def register_command(obj: AppContext):
    """Register a new username with the bridge.

    Press the link button on the bridge, then run this command within 30
    seconds. Copy the printed username into the config file.
    """
    address = locate_bridge(obj.ip_address)
    if obj.verbose:
        click.echo(f"Using bridge at {address}", err=True)

    username = register_user(address)

    click.echo(f"Username: {username}")
    click.echo(f"Add it to {get_config_path()} as: username = \"{username}\"", err=True)
