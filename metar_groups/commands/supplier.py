"""Selection of the command matching a weather group."""

import logging
from typing import Callable, List, Optional

from metar_taf_parser.commons import converter

from metar_groups.commands.base import Command
from metar_groups.commands.cloud import CloudCommand
from metar_groups.commands.visibility import (
    MainVisibilityCommand,
    MainVisibilityNauticalMilesCommand,
    MinimalVisibilityCommand,
    VerticalVisibilityCommand,
)
from metar_groups.commands.wind import WindShearCommand, WindCommand, WindVariationCommand
logger = logging.getLogger(__name__)


class CommandSupplier:
    """
    Find the command for a weather group.

    Commands are tried in a fixed order and the first one whose
    can_parse() accepts the group wins. The order settles groups that
    more than one grammar would accept, so it never changes after
    construction.

    Example:
        supplier = CommandSupplier()
        container = WeatherContainer()

        command = supplier.get("24015G25KT")
        if command:
            command.execute(container, "24015G25KT")
    """

    def __init__(
        self,
        cardinal: Callable[[str], str] = converter.degrees_to_cardinal,
        visibility_converter: Callable[[str], str] = converter.convert_visibility,
    ):
        """
        Initialize the supplier.

        Args:
            cardinal: Degrees to compass label converter for wind groups
            visibility_converter: Metric visibility converter
        """
        self._commands: List[Command] = [
            WindShearCommand(cardinal),
            WindCommand(cardinal),
            WindVariationCommand(),
            MainVisibilityCommand(visibility_converter),
            MainVisibilityNauticalMilesCommand(),
            MinimalVisibilityCommand(),
            VerticalVisibilityCommand(),
            CloudCommand(),
        ]

    @property
    def commands(self) -> List[Command]:
        """Commands in priority order (a copy)."""
        return list(self._commands)

    def get(self, group: str) -> Optional[Command]:
        """
        Get the first command able to parse a group.

        Args:
            group: Single report group, without surrounding whitespace

        Returns:
            Matching command, or None if no command recognizes the group
        """
        for command in self._commands:
            if command.can_parse(group):
                logger.debug("Group %s handled by %s", group, command.name)
                return command
        return None

    def get_command_names(self) -> List[str]:
        """Get list of command names in priority order."""
        return [c.name for c in self._commands]
