import pytest

from metar_groups.commands.supplier import CommandSupplier
from metar_groups.models import WeatherContainer


@pytest.fixture
def container() -> WeatherContainer:
    """Return an empty container for one report."""
    return WeatherContainer()


@pytest.fixture
def supplier() -> CommandSupplier:
    """Return a supplier with the default converters."""
    return CommandSupplier()
