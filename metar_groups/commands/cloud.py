"""Cloud layer group command."""

import logging
import re
from typing import Optional

from metar_taf_parser.model.enum import CloudQuantity, CloudType

from metar_groups.commands.base import Command
from metar_groups.config import HEIGHT_FACTOR
from metar_groups.errors import CommandExecutionError
from metar_groups.models import WeatherContainer, Cloud

logger = logging.getLogger(__name__)

_QUANTITIES = {q.value: q for q in CloudQuantity}
_TYPES = {t.value: t for t in CloudType}


class CloudCommand(Command):
    """
    Cloud layer, e.g. ``BKN020CB``, ``FEW040`` or ``NSC``.

    Coverage and type codes are the metar_taf_parser enums.

    Only known coverage codes are claimed, so tokens such as ``CAVOK``
    fall through. Each layer is appended; a height code of 000 or none
    leaves the height unset.
    """

    regex = re.compile(r'^([A-Z]{3})(\d{3})?([A-Z]{2,3})?$')

    @property
    def name(self) -> str:
        return "cloud"

    def can_parse(self, group: str) -> bool:
        match = self.regex.search(group)
        return match is not None and match.group(1) in _QUANTITIES

    def parse(self, group: str) -> Optional[Cloud]:
        """Decode a cloud group, None when the coverage code is unknown."""
        match = self._match(group)

        quantity = _QUANTITIES.get(match.group(1))
        if quantity is None:
            return None

        height = HEIGHT_FACTOR * int(match.group(2)) if match.group(2) else None
        cloud_type = None
        if match.group(3):
            cloud_type = _TYPES.get(match.group(3))
            if cloud_type is None:
                logger.debug("Ignoring unknown cloud type %s in %s", match.group(3), group)

        return Cloud(quantity=quantity, height=height or None, type=cloud_type)

    def execute(self, container: WeatherContainer, group: str) -> bool:
        cloud = self.parse(group)
        if cloud is None:
            raise CommandExecutionError(f"Unknown cloud quantity in {group}")

        container.clouds.append(cloud)
        return True
