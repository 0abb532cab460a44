"""Base interface for weather group commands."""

import re
from abc import ABC, abstractmethod
from typing import Callable, Optional

from metar_groups.config import VARIABLE_DIRECTION, DEFAULT_SPEED_UNIT, MAX_DEGREES
from metar_groups.errors import InvalidWeatherStatementError, UnexpectedParseError
from metar_groups.models import WeatherContainer, Wind, SpeedUnit


class Command(ABC):
    """
    Base interface for weather group commands.

    A command owns the grammar of one group shape. can_parse() tells
    whether a token has that shape; execute() extracts the fields into a
    WeatherContainer.

    Example:
        class MyGroupCommand(Command):
            regex = re.compile(r'^FOO(\\d{2})$')

            @property
            def name(self) -> str:
                return "foo"

            def execute(self, container, group):
                match = self._match(group)
                ...
                return True
    """

    regex: re.Pattern

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Command name for tracking.

        Returns:
            String identifier for this command
        """
        pass

    def can_parse(self, group: str) -> bool:
        """
        Check whether a group has this command's shape.

        Pure test: never touches any container.
        """
        return self.regex.search(group) is not None

    @abstractmethod
    def execute(self, container: WeatherContainer, group: str) -> bool:
        """
        Decode a group into the container.

        Args:
            container: Container being filled for the current report
            group: Group accepted by can_parse()

        Returns:
            True once the container has been updated

        Raises:
            InvalidWeatherStatementError: The group needs a base group
                that the container does not hold yet
            CommandExecutionError: The group matched but could not be
                extracted
            UnexpectedParseError: The group does not match this command
        """
        pass

    def _match(self, group: str) -> re.Match:
        match = self.regex.search(group)
        if match is None:
            raise UnexpectedParseError(f"{self.name} should be defined: {group!r}")
        return match

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def make_wind(
    direction: str,
    speed: str,
    gust: Optional[str],
    unit: Optional[str],
    cardinal: Callable[[str], str],
) -> Wind:
    """
    Build a Wind from the matched pieces of a wind group.

    Args:
        direction: Three digits or "VRB"
        speed: Two digits
        gust: Two digits, or None/empty when no gust is coded
        unit: Unit code, or None/empty for knots
        cardinal: Degrees to compass label converter

    Raises:
        InvalidWeatherStatementError: Direction above 360 or gust below
            the mean speed
    """
    degrees = int(direction) if direction != VARIABLE_DIRECTION else None
    if degrees is not None and degrees > MAX_DEGREES:
        raise InvalidWeatherStatementError(f"wind direction {degrees} out of range")

    wind_speed = int(speed)
    wind_gust = int(gust) if gust else None
    if wind_gust is not None and wind_gust < wind_speed:
        raise InvalidWeatherStatementError(f"gust {wind_gust} below mean speed {wind_speed}")

    return Wind(
        speed=wind_speed,
        direction=cardinal(direction),
        degrees=degrees,
        gust=wind_gust,
        unit=SpeedUnit(unit or DEFAULT_SPEED_UNIT),
    )
