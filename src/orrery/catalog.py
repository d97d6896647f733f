"""The catalog of bodies the orbital model is evaluated for.

The reference values for Mercury to Saturn come from Singal & Singal (2009).
A catalog can also be loaded from a CSV file with a ``name,mean_longitude,period`` header.
"""

import csv
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union
from pathlib import Path

from .logging import get_logger
from .orbit.planet import InvalidParameter, Planet

logger = get_logger(__name__)

# Selector meaning every planet in the catalog
ALL_PLANETS = "all"

CATALOG_COLUMNS = ("name", "mean_longitude", "period")

REFERENCE_TRIPLES: Tuple[Tuple[str, float, float], ...] = (
    ("Mercury", 250.2, 87.969),
    ("Venus", 181.2, 224.701),
    ("Earth", 100.0, 365.256),
    ("Mars", 355.2, 686.98),
    ("Jupiter", 34.3, 4332.59),
    ("Saturn", 50.1, 10759.2),
    ("Uranus", 313.23218, 30687.15),
    ("Neptune", 304.88003, 60190.03),
)


class PlanetNotFound(LookupError):
    """Raised when no catalog entry has the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Planet {name!r} does not exist in the catalog")


def _warn_duplicates(planets: Sequence[Planet]) -> None:
    seen = set()
    for planet in planets:
        if planet.name in seen:
            logger.warning(
                f"Duplicate planet name {planet.name!r} in catalog; "
                "lookups return the first entry"
            )
        seen.add(planet.name)


def build_catalog(triples: Iterable[Tuple[str, float, float]]) -> Tuple[Planet, ...]:
    """Build an ordered catalog from (name, mean_longitude, period) triples.

    Raises:
        InvalidParameter: If any triple is not a valid planet
    """
    planets = tuple(
        Planet(name, mean_longitude, period)
        for name, mean_longitude, period in triples
    )
    _warn_duplicates(planets)
    return planets


REFERENCE_CATALOG = build_catalog(REFERENCE_TRIPLES)


def _parse_number(value: Optional[str], column: str, line: int) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidParameter(
            f"Line {line}: {column} must be a number, got {value!r}"
        )


def _parse_row(row: Dict[str, Optional[str]], line: int) -> Planet:
    name = (row["name"] or "").strip()
    mean_longitude = _parse_number(row["mean_longitude"], "mean_longitude", line)
    period = _parse_number(row["period"], "period", line)
    try:
        return Planet(name, mean_longitude, period)
    except InvalidParameter as e:
        raise InvalidParameter(f"Line {line}: {e}") from e


def load_catalog(path: Union[str, Path]) -> Tuple[Planet, ...]:
    """Load a catalog from a UTF-8 CSV file.

    Args:
        path: CSV file with name, mean_longitude and period columns

    Returns:
        Planets in file order

    Raises:
        InvalidParameter: If the file is not UTF-8 text, a column is missing
            or a row holds bad values
    """
    logger.info(f"Loading planet catalog from {path}")
    planets: List[Planet] = []
    try:
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = [c for c in CATALOG_COLUMNS if c not in (reader.fieldnames or [])]
            if missing:
                raise InvalidParameter(
                    f"Catalog {path} is missing column(s): {', '.join(missing)}"
                )
            # Header is line 1
            for line, row in enumerate(reader, start=2):
                planets.append(_parse_row(row, line))
    except (UnicodeDecodeError, csv.Error) as e:
        raise InvalidParameter(f"Catalog {path} is not a readable CSV file: {e}") from e

    _warn_duplicates(planets)
    logger.debug(f"Loaded {len(planets)} planet(s) from {path}")
    return tuple(planets)


def find_planet(name: str, catalog: Sequence[Planet] = REFERENCE_CATALOG) -> Planet:
    """Find a planet by exact, case-sensitive name.

    Raises:
        PlanetNotFound: If no planet in the catalog has that name
    """
    for planet in catalog:
        if planet.name == name:
            return planet
    raise PlanetNotFound(name)


def select_planets(
    selector: str, catalog: Sequence[Planet] = REFERENCE_CATALOG
) -> List[Planet]:
    """Resolve a planet selector: a planet name, or "all" for the whole catalog."""
    if selector == ALL_PLANETS:
        return list(catalog)
    return [find_planet(selector, catalog)]
