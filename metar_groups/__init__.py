"""
Decoder for individual METAR/TAF report groups.

Provides:
- WeatherContainer: Groups decoded so far for one report
- Wind, WindShear, Visibility, Cloud: Decoded group values
- CommandSupplier: Picks the command for a group
- GroupDecoder: Applies a sequence of groups to a container
- ParseError and subclasses: Decoding failures

Example:
    from metar_groups import CommandSupplier, WeatherContainer

    supplier = CommandSupplier()
    container = WeatherContainer()
    for group in "24015G25KT 9999 BKN020CB".split():
        command = supplier.get(group)
        if command:
            command.execute(container, group)

    print(container.wind.degrees)  # 240
"""

from metar_groups.models import (
    WeatherContainer,
    Wind,
    WindShear,
    Visibility,
    Cloud,
    SpeedUnit,
    CloudQuantity,
    CloudType,
)
from metar_groups.errors import (
    ParseError,
    InvalidWeatherStatementError,
    UnsupportedWeatherStatementError,
    CommandExecutionError,
    UnexpectedParseError,
)
from metar_groups.commands import Command, CommandSupplier
from metar_groups.decoder import GroupDecoder, DecodeResult

__all__ = [
    'WeatherContainer',
    'Wind',
    'WindShear',
    'Visibility',
    'Cloud',
    'SpeedUnit',
    'CloudQuantity',
    'CloudType',
    'ParseError',
    'InvalidWeatherStatementError',
    'UnsupportedWeatherStatementError',
    'CommandExecutionError',
    'UnexpectedParseError',
    'Command',
    'CommandSupplier',
    'GroupDecoder',
    'DecodeResult',
]
