"""Wind, wind variation and wind shear group commands."""

import re
from typing import Callable

from metar_taf_parser.commons import converter

from metar_groups.commands.base import Command, make_wind
from metar_groups.config import HEIGHT_FACTOR, MAX_DEGREES
from metar_groups.errors import InvalidWeatherStatementError
from metar_groups.models import WeatherContainer, Wind, WindShear

# Direction (or VRB), speed, optional gust, optional unit
_WIND = r'(VRB|\d{3})(\d{2})G?(\d{2})?(KT|MPS|KM/H)?'


class WindShearCommand(Command):
    """Wind shear group, e.g. ``WS020/05065KT``."""

    regex = re.compile(r'^WS(\d{3})/' + _WIND)

    def __init__(self, cardinal: Callable[[str], str] = converter.degrees_to_cardinal):
        self._cardinal = cardinal

    @property
    def name(self) -> str:
        return "wind_shear"

    def parse_wind_shear(self, group: str) -> WindShear:
        match = self._match(group)
        wind = make_wind(match.group(2), match.group(3), match.group(4), match.group(5), self._cardinal)
        return WindShear(height=HEIGHT_FACTOR * int(match.group(1)), **vars(wind))

    def execute(self, container: WeatherContainer, group: str) -> bool:
        container.wind_shear = self.parse_wind_shear(group)
        return True


class WindCommand(Command):
    """
    Surface wind group, e.g. ``24015G25KT`` or ``VRB02KT``.

    The unit is optional and defaults to knots. A new wind group replaces
    any wind already in the container.
    """

    regex = re.compile(r'^' + _WIND)

    def __init__(self, cardinal: Callable[[str], str] = converter.degrees_to_cardinal):
        self._cardinal = cardinal

    @property
    def name(self) -> str:
        return "wind"

    def parse_wind(self, group: str) -> Wind:
        match = self._match(group)
        return make_wind(match.group(1), match.group(2), match.group(3), match.group(4), self._cardinal)

    def execute(self, container: WeatherContainer, group: str) -> bool:
        container.wind = self.parse_wind(group)
        return True


class WindVariationCommand(Command):
    """Variable wind sector, e.g. ``350V050``. Needs a wind group first."""

    regex = re.compile(r'^(\d{3})V(\d{3})')

    @property
    def name(self) -> str:
        return "wind_variation"

    def execute(self, container: WeatherContainer, group: str) -> bool:
        match = self._match(group)
        if container.wind is None:
            raise InvalidWeatherStatementError(f"wind variation {group} without a wind group")

        min_variation, max_variation = int(match.group(1)), int(match.group(2))
        if min_variation > MAX_DEGREES or max_variation > MAX_DEGREES:
            raise InvalidWeatherStatementError(f"wind variation {group} out of range")

        container.wind.min_variation = min_variation
        container.wind.max_variation = max_variation
        return True
