"""Application layer: layout configuration and commands."""

from sitecabins.application.commands import (
    CheckLayoutCommand,
    ItemFootprint,
    LayoutReport,
)

__all__ = [
    "CheckLayoutCommand",
    "ItemFootprint",
    "LayoutReport",
]
