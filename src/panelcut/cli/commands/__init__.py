"""CLI command implementations for the panelcut application.

This package contains subcommands for the panelcut CLI, including:
- validate: Validate a project configuration file
"""

from panelcut.cli.commands.validate import validate_command

__all__ = ["validate_command"]
