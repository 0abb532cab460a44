"""
Weather group commands.

One command per group shape, plus the CommandSupplier that picks the
command for a group in priority order.
"""

from metar_groups.commands.base import Command, make_wind
from metar_groups.commands.wind import WindShearCommand, WindCommand, WindVariationCommand
from metar_groups.commands.visibility import (
    MainVisibilityCommand,
    MainVisibilityNauticalMilesCommand,
    MinimalVisibilityCommand,
    VerticalVisibilityCommand,
)
from metar_groups.commands.cloud import CloudCommand
from metar_groups.commands.supplier import CommandSupplier

__all__ = [
    'Command',
    'make_wind',
    'WindShearCommand',
    'WindCommand',
    'WindVariationCommand',
    'MainVisibilityCommand',
    'MainVisibilityNauticalMilesCommand',
    'MinimalVisibilityCommand',
    'VerticalVisibilityCommand',
    'CloudCommand',
    'CommandSupplier',
]
