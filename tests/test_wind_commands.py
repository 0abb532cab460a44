"""Tests for wind, wind variation and wind shear commands."""

import pytest

from metar_groups.commands.base import make_wind
from metar_groups.commands.wind import WindCommand, WindVariationCommand, WindShearCommand
from metar_taf_parser.commons.converter import degrees_to_cardinal

from metar_groups.errors import InvalidWeatherStatementError, UnexpectedParseError
from metar_groups.models import SpeedUnit, WindShear


class TestWindCommand:

    def test_wind_with_gust(self, container):
        command = WindCommand()
        assert command.can_parse("24015G25KT")
        assert command.execute(container, "24015G25KT") is True

        wind = container.wind
        assert wind.degrees == 240
        assert wind.direction == "WSW"
        assert wind.speed == 15
        assert wind.gust == 25
        assert wind.unit == SpeedUnit.KT

    def test_variable_wind(self, container):
        WindCommand().execute(container, "VRB02KT")

        wind = container.wind
        assert wind.degrees is None
        assert wind.direction == "VRB"
        assert wind.is_variable
        assert wind.speed == 2
        assert wind.gust is None
        assert wind.unit == SpeedUnit.KT

    def test_unit_defaults_to_knots(self, container):
        WindCommand().execute(container, "18010")
        assert container.wind.unit == SpeedUnit.KT
        assert container.wind.speed == 10

    @pytest.mark.parametrize("group,unit", [
        ("27005MPS", SpeedUnit.MPS),
        ("27005KM/H", SpeedUnit.KM_H),
        ("27005KT", SpeedUnit.KT),
    ])
    def test_units(self, container, group, unit):
        WindCommand().execute(container, group)
        assert container.wind.unit == unit

    def test_gust_without_unit(self, container):
        WindCommand().execute(container, "24015G25")
        assert container.wind.gust == 25
        assert container.wind.unit == SpeedUnit.KT

    def test_calm(self, container):
        WindCommand().execute(container, "00000KT")
        assert container.wind.degrees == 0
        assert container.wind.speed == 0

    def test_new_wind_replaces_previous(self, container):
        command = WindCommand()
        command.execute(container, "24015KT")
        command.execute(container, "09005KT")
        assert container.wind.degrees == 90

    def test_gust_below_speed_is_invalid(self, container):
        with pytest.raises(InvalidWeatherStatementError):
            WindCommand().execute(container, "24025G15KT")
        assert container.wind is None

    def test_direction_above_360_is_invalid(self, container):
        with pytest.raises(InvalidWeatherStatementError):
            WindCommand().execute(container, "40010KT")

    def test_execute_on_other_group_is_unexpected(self, container):
        with pytest.raises(UnexpectedParseError):
            WindCommand().execute(container, "9999")

    @pytest.mark.parametrize("group", ["9999", "BKN020", "350V050", "VV003", "WS020/24045KT"])
    def test_does_not_parse_other_groups(self, group):
        assert not WindCommand().can_parse(group)

    def test_custom_cardinal_converter(self, container):
        WindCommand(cardinal=lambda direction: f"<{direction}>").execute(container, "24015KT")
        assert container.wind.direction == "<240>"
        assert container.wind.degrees == 240


class TestWindVariationCommand:

    def test_without_wind_is_invalid(self, container):
        command = WindVariationCommand()
        assert command.can_parse("350V050")
        with pytest.raises(InvalidWeatherStatementError):
            command.execute(container, "350V050")
        assert container.wind is None

    def test_sets_variation_on_wind(self, container):
        WindCommand().execute(container, "36008KT")
        WindVariationCommand().execute(container, "350V050")

        assert container.wind.min_variation == 350
        assert container.wind.max_variation == 50
        assert container.wind.degrees == 360

    @pytest.mark.parametrize("group", ["400V050", "350V999", "400V999"])
    def test_variation_above_360_is_invalid(self, container, group):
        WindCommand().execute(container, "24010KT")
        with pytest.raises(InvalidWeatherStatementError):
            WindVariationCommand().execute(container, group)
        assert container.wind.min_variation is None
        assert container.wind.max_variation is None

    def test_variation_up_to_360(self, container):
        WindCommand().execute(container, "36010KT")
        WindVariationCommand().execute(container, "000V360")
        assert (container.wind.min_variation, container.wind.max_variation) == (0, 360)

    def test_execute_on_other_group_is_unexpected(self, container):
        WindCommand().execute(container, "36008KT")
        with pytest.raises(UnexpectedParseError):
            WindVariationCommand().execute(container, "36008KT")


class TestWindShearCommand:

    def test_wind_shear(self, container):
        command = WindShearCommand()
        assert command.can_parse("WS020/05065KT")
        command.execute(container, "WS020/05065KT")

        shear = container.wind_shear
        assert isinstance(shear, WindShear)
        assert shear.height == 2000
        assert shear.degrees == 50
        assert shear.direction == "NE"
        assert shear.speed == 65
        assert shear.gust is None
        assert shear.unit == SpeedUnit.KT
        assert container.wind is None

    def test_wind_shear_with_gust_and_unit(self, container):
        WindShearCommand().execute(container, "WS015/24030G45MPS")

        shear = container.wind_shear
        assert shear.height == 1500
        assert shear.gust == 45
        assert shear.unit == SpeedUnit.MPS

    def test_variable_wind_shear_without_unit(self, container):
        WindShearCommand().execute(container, "WS010/VRB20")

        shear = container.wind_shear
        assert shear.degrees is None
        assert shear.direction == "VRB"
        assert shear.unit == SpeedUnit.KT

    def test_does_not_parse_plain_wind(self):
        assert not WindShearCommand().can_parse("24015KT")


class TestMakeWind:

    def test_all_fields(self):
        wind = make_wind("240", "15", "25", "KT", degrees_to_cardinal)
        assert (wind.degrees, wind.speed, wind.gust, wind.unit) == (240, 15, 25, SpeedUnit.KT)

    def test_empty_gust_and_unit(self):
        wind = make_wind("VRB", "02", "", "", degrees_to_cardinal)
        assert wind.degrees is None
        assert wind.gust is None
        assert wind.unit == SpeedUnit.KT
        assert wind.min_variation is None
        assert wind.max_variation is None
