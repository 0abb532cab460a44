"""Apply a sequence of report groups to one WeatherContainer."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from metar_groups.commands.supplier import CommandSupplier
from metar_groups.models import WeatherContainer

logger = logging.getLogger(__name__)


@dataclass
class DecodeResult:
    """
    Outcome of decoding the groups of one report.

    Attributes:
        container: Container holding every decoded group
        unrecognized: Groups no command claimed, in input order
    """

    container: WeatherContainer
    unrecognized: List[str] = field(default_factory=list)


class GroupDecoder:
    """
    Feed report groups through a CommandSupplier.

    Errors raised by a command propagate unchanged and abandon the
    container. Groups that no command recognizes are not errors.

    Example:
        result = GroupDecoder().decode("24008KT 200V280 9999 FEW040".split())
        print(result.container.wind.min_variation)  # 200
    """

    def __init__(self, supplier: Optional[CommandSupplier] = None):
        self.supplier = supplier or CommandSupplier()

    def apply(self, container: WeatherContainer, group: str) -> bool:
        """
        Decode a single group into the container.

        Returns:
            True if a command handled the group, False if none recognized it
        """
        command = self.supplier.get(group)
        if command is None:
            logger.debug("No command for group %s", group)
            return False
        return command.execute(container, group)

    def decode(
        self,
        groups: Iterable[str],
        container: Optional[WeatherContainer] = None,
    ) -> DecodeResult:
        """
        Decode groups in order into one container.

        Args:
            groups: Report groups, already split on whitespace
            container: Container to fill (a new one if None)

        Returns:
            DecodeResult with the container and unrecognized groups
        """
        result = DecodeResult(container if container is not None else WeatherContainer())
        for group in groups:
            if not self.apply(result.container, group):
                result.unrecognized.append(group)
        return result
