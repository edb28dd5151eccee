"""CLI command implementations for the sitecabins application.

This package contains subcommands for the sitecabins CLI:
- check: Report footprints and overlaps for a layout file
- order: Build a checkout payload for a layout file
"""

from sitecabins.cli.commands.check import check_command
from sitecabins.cli.commands.order import order_command

__all__ = ["check_command", "order_command"]
