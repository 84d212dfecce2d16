"""CLI command implementations for the platecut application.

This package contains subcommands for the platecut CLI:
- validate: Validate a calculation file
- export: Write a calculation result in several formats
"""

from platecut.cli.commands.export import export_command
from platecut.cli.commands.validate import validate_command

__all__ = ["export_command", "validate_command"]
