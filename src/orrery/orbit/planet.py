"""Circular-orbit model of a planet's heliocentric longitude.

Each planet moves at a constant angular speed of 360 / period degrees per day,
starting from its mean longitude at the reference epoch. This is good to about
a degree for some 25 years either side of 2000-01-01 and drifts without bound
outside that window.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Union

from ..constants import DEGREES_PER_CIRCLE, REFERENCE_EPOCH, YRS
from ..logging import get_logger
from ..space_time.pythonic_datetimes import days_since_epoch, to_utc_datetime
from .util import au_to_km, normalize_degrees

logger = get_logger(__name__)


class InvalidParameter(ValueError):
    """Raised when a planet is built from unusable orbital parameters."""

    pass


class LongitudeFormula(Enum):
    """How the mean longitude and the traversed angle are combined."""

    ADDITIVE = "additive"
    # Historical variant, kept so old outputs can be reproduced
    MULTIPLICATIVE = "multiplicative"


def _check_real(label: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(f"{label} must be a real number, got {value!r}")
    try:
        as_float = float(value)
    except OverflowError:
        raise InvalidParameter(f"{label} is out of floating point range, got {value!r}")
    if not math.isfinite(as_float):
        raise InvalidParameter(f"{label} must be finite, got {value!r}")


@dataclass(frozen=True)
class PlanetPosition:
    """A planet's derived quantities at one instant."""

    name: str
    distance_au: float
    distance_km: float
    orbital_period_years: float
    longitude: float
    date: datetime
    formula: LongitudeFormula = LongitudeFormula.ADDITIVE

    def to_dict(self) -> Dict[str, Any]:
        """Convert the position to a dictionary for JSON serialization."""
        return {
            "planet": self.name,
            "date": self.date.isoformat(),
            "distance_au": self.distance_au,
            "distance_km": self.distance_km,
            "orbital_period_years": self.orbital_period_years,
            "longitude": self.longitude,
            "formula": self.formula.value,
        }


@dataclass(frozen=True)
class Planet:
    """A solar-system body on a simplified circular orbit.

    Attributes:
        name: The planet's name
        mean_longitude: Location around the sun in degrees at the reference epoch
        period: Orbital period in mean solar days
        reference_epoch: Instant that mean_longitude refers to
    """

    name: str
    mean_longitude: float
    period: float
    reference_epoch: datetime = field(default=REFERENCE_EPOCH, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidParameter(f"name must be a non-empty string, got {self.name!r}")
        _check_real("mean_longitude", self.mean_longitude)
        _check_real("period", self.period)
        if self.period <= 0:
            raise InvalidParameter(f"period must be positive, got {self.period!r}")
        if not math.isfinite(self.angular_speed):
            raise InvalidParameter(
                f"period {self.period!r} is too small for a finite angular speed"
            )

    @property
    def angular_speed(self) -> float:
        """Mean angular speed in degrees per day."""
        return DEGREES_PER_CIRCLE / self.period

    @property
    def orbital_period_years(self) -> float:
        """How many Earth years the planet takes to orbit the sun."""
        return self.period / YRS

    @property
    def distance_au(self) -> float:
        """Distance from the sun in astronomical units.

        Kepler's third law with Earth's period and distance as units:
        a**3 == T**2.
        """
        # T**(2/3) equals (T**2)**(1/3) for T > 0 without overflowing the square
        return self.orbital_period_years ** (2.0 / 3.0)

    @property
    def distance_km(self) -> float:
        """Distance from the sun in kilometres."""
        return au_to_km(self.distance_au)

    def position_at_date(
        self,
        when: Union[datetime, date],
        formula: LongitudeFormula = LongitudeFormula.ADDITIVE,
    ) -> float:
        """Determine the planet's heliocentric longitude at a given date.

        Args:
            when: Aware datetime, or a calendar date meaning midnight UTC
            formula: How mean longitude and traversed angle are combined

        Returns:
            float: Longitude in degrees, in [0, 360)

        Raises:
            NaiveDateTimeError: If when is a datetime without timezone info
            InvalidParameter: If the combined longitude overflows the float range
        """
        day_diff = days_since_epoch(when, self.reference_epoch)
        angle_traversed = self.angular_speed * day_diff

        if formula is LongitudeFormula.MULTIPLICATIVE:
            longitude = self.mean_longitude * angle_traversed
        else:
            longitude = self.mean_longitude + angle_traversed

        if not math.isfinite(longitude):
            raise InvalidParameter(
                f"{self.name}: longitude at {day_diff} days from epoch is not finite "
                f"with the {formula.value} formula"
            )

        position = normalize_degrees(longitude)
        logger.debug(
            f"{self.name}: {day_diff} days since epoch, "
            f"{angle_traversed:.6f}° traversed, {formula.value} -> {position:.6f}°"
        )
        return position

    def position_report(
        self,
        when: Union[datetime, date],
        formula: LongitudeFormula = LongitudeFormula.ADDITIVE,
    ) -> PlanetPosition:
        """Bundle the derived quantities shown for this planet at a date."""
        return PlanetPosition(
            name=self.name,
            distance_au=self.distance_au,
            distance_km=self.distance_km,
            orbital_period_years=self.orbital_period_years,
            longitude=self.position_at_date(when, formula),
            date=to_utc_datetime(when),
            formula=formula,
        )
