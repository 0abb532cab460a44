"""Weather group data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any

from metar_taf_parser.model.enum import CloudQuantity, CloudType


class SpeedUnit(Enum):
    """Wind speed unit as coded in the report."""

    KT = "KT"
    MPS = "MPS"
    KM_H = "KM/H"


@dataclass
class Wind:
    """
    Surface wind.

    Attributes:
        speed: Mean speed in ``unit``
        direction: 16-point compass label, "VRB" when variable
        degrees: Direction in degrees (None when variable)
        gust: Gust speed in ``unit``
        unit: Speed unit (knots unless coded otherwise)
        min_variation: Start of the variable sector in degrees
        max_variation: End of the variable sector in degrees
    """

    speed: int
    direction: str
    degrees: Optional[int] = None
    gust: Optional[int] = None
    unit: SpeedUnit = SpeedUnit.KT
    min_variation: Optional[int] = None
    max_variation: Optional[int] = None

    @property
    def is_variable(self) -> bool:
        return self.degrees is None

    def to_dict(self) -> dict:
        return {
            'speed': self.speed,
            'direction': self.direction,
            'degrees': self.degrees,
            'gust': self.gust,
            'unit': self.unit.value,
            'min_variation': self.min_variation,
            'max_variation': self.max_variation,
        }

    @classmethod
    def _kwargs_from_dict(cls, data: dict) -> Dict[str, Any]:
        return dict(
            speed=data['speed'],
            direction=data['direction'],
            degrees=data.get('degrees'),
            gust=data.get('gust'),
            unit=SpeedUnit(data.get('unit', SpeedUnit.KT.value)),
            min_variation=data.get('min_variation'),
            max_variation=data.get('max_variation'),
        )

    @classmethod
    def from_dict(cls, data: dict) -> 'Wind':
        return cls(**cls._kwargs_from_dict(data))


@dataclass
class WindShear(Wind):
    """Wind at a given height, from a ``WSnnn/`` group."""

    height: int = 0

    def to_dict(self) -> dict:
        result = super().to_dict()
        result['height'] = self.height
        return result

    @classmethod
    def from_dict(cls, data: dict) -> 'WindShear':
        return cls(height=data.get('height', 0), **cls._kwargs_from_dict(data))


@dataclass
class Visibility:
    """
    Prevailing visibility with an optional directional minimum.

    ``distance`` is text: the converted metric value (e.g. ">10000",
    "800") or the raw statute-mile group (e.g. "1 1/2SM").
    """

    distance: str
    min_distance: Optional[int] = None
    min_direction: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'distance': self.distance,
            'min_distance': self.min_distance,
            'min_direction': self.min_direction,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Visibility':
        return cls(
            distance=data['distance'],
            min_distance=data.get('min_distance'),
            min_direction=data.get('min_direction'),
        )


@dataclass
class Cloud:
    """A single cloud layer. Height is in feet."""

    quantity: CloudQuantity
    height: Optional[int] = None
    type: Optional[CloudType] = None

    def to_dict(self) -> dict:
        return {
            'quantity': self.quantity.value,
            'height': self.height,
            'type': self.type.value if self.type else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Cloud':
        cloud_type = data.get('type')
        return cls(
            quantity=CloudQuantity(data['quantity']),
            height=data.get('height'),
            type=CloudType(cloud_type) if cloud_type else None,
        )


@dataclass
class WeatherContainer:
    """
    Groups decoded so far for one report.

    Commands mutate the container in place. One container belongs to one
    report decode and is not meant to be shared.

    Attributes:
        wind: Surface wind, replaced by each wind group
        wind_shear: Wind shear group
        visibility: Prevailing visibility
        clouds: Cloud layers in report order
        vertical_visibility: Vertical visibility in feet
    """

    wind: Optional[Wind] = None
    wind_shear: Optional[WindShear] = None
    visibility: Optional[Visibility] = None
    clouds: List[Cloud] = field(default_factory=list)
    vertical_visibility: Optional[int] = None

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON export."""
        return {
            'wind': self.wind.to_dict() if self.wind else None,
            'wind_shear': self.wind_shear.to_dict() if self.wind_shear else None,
            'visibility': self.visibility.to_dict() if self.visibility else None,
            'clouds': [c.to_dict() for c in self.clouds],
            'vertical_visibility': self.vertical_visibility,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'WeatherContainer':
        """Create WeatherContainer from dictionary."""
        wind = Wind.from_dict(data['wind']) if data.get('wind') else None
        wind_shear = WindShear.from_dict(data['wind_shear']) if data.get('wind_shear') else None
        visibility = Visibility.from_dict(data['visibility']) if data.get('visibility') else None

        return cls(
            wind=wind,
            wind_shear=wind_shear,
            visibility=visibility,
            clouds=[Cloud.from_dict(c) for c in data.get('clouds', [])],
            vertical_visibility=data.get('vertical_visibility'),
        )
