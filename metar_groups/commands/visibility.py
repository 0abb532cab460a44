"""Visibility group commands: main, minimal and vertical."""

import re
from typing import Callable

from metar_taf_parser.commons import converter

from metar_groups.commands.base import Command
from metar_groups.config import HEIGHT_FACTOR
from metar_groups.errors import InvalidWeatherStatementError
from metar_groups.models import WeatherContainer, Visibility


class MainVisibilityCommand(Command):
    """
    Metric prevailing visibility, e.g. ``9999`` or ``0800NDV``.

    The digits go through the visibility converter (">10000" for 9999,
    otherwise the meters as text). A directional minimum already decoded
    is kept.
    """

    regex = re.compile(r'^(\d{4})(|NDV)$')

    def __init__(self, visibility_converter: Callable[[str], str] = converter.convert_visibility):
        self._convert = visibility_converter

    @property
    def name(self) -> str:
        return "main_visibility"

    def execute(self, container: WeatherContainer, group: str) -> bool:
        match = self._match(group)
        distance = self._convert(match.group(1))

        if container.visibility is None:
            container.visibility = Visibility(distance=distance)
        else:
            container.visibility.distance = distance
        return True


class MainVisibilityNauticalMilesCommand(Command):
    """
    Prevailing visibility in statute miles, e.g. ``10SM``, ``1/2SM`` or
    ``1 1/2SM``. The group text is stored as-is.
    """

    regex = re.compile(r'^(\d)*(\s)?((\d/\d)?SM)$')

    @property
    def name(self) -> str:
        return "main_visibility_sm"

    def execute(self, container: WeatherContainer, group: str) -> bool:
        self._match(group)

        if container.visibility is None:
            container.visibility = Visibility(distance=group)
        else:
            container.visibility.distance = group
        return True


class MinimalVisibilityCommand(Command):
    """
    Directional minimum visibility, e.g. ``1200e``. Needs a main visibility.

    Any single lowercase letter is accepted as the direction and stored
    as-is; it is not checked against the compass points.
    """

    regex = re.compile(r'^(\d{4})([a-z])$')

    @property
    def name(self) -> str:
        return "minimal_visibility"

    def execute(self, container: WeatherContainer, group: str) -> bool:
        match = self._match(group)
        if container.visibility is None:
            raise InvalidWeatherStatementError(f"minimal visibility {group} without a main visibility")

        container.visibility.min_distance = int(match.group(1))
        container.visibility.min_direction = match.group(2)
        return True


class VerticalVisibilityCommand(Command):
    """Vertical visibility, e.g. ``VV003`` (300 ft)."""

    regex = re.compile(r'^VV(\d{3})$')

    @property
    def name(self) -> str:
        return "vertical_visibility"

    def execute(self, container: WeatherContainer, group: str) -> bool:
        match = self._match(group)
        container.vertical_visibility = HEIGHT_FACTOR * int(match.group(1))
        return True
