"""CLI command modules.

This package contains:
- setup: Command group, register and help commands
- inspection: Listing commands (list, list-groups)
- control: Commands that change lights (scan, blink, name, all-on, all-off)
"""
