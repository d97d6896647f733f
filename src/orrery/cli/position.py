"""CLI command for computing planet longitudes at a date."""

import json
import sys
from typing import List, Optional

import click

from ..catalog import ALL_PLANETS, PlanetNotFound, select_planets
from ..logging import get_logger
from ..orbit.planet import InvalidParameter, LongitudeFormula, PlanetPosition
from ..orbit.util import get_zodiac_sign
from ..space_time.date_input import NOW, DateParseError, parse_date_input
from .common import CATALOG_ENV_VAR, resolve_catalog

logger = get_logger(__name__)

FORMULA_CHOICES = [f.value for f in LongitudeFormula]

SEPARATOR = "================"


def format_position_text(position: PlanetPosition) -> List[str]:
    """Render one planet's position as lines of text."""
    return [
        f"Planet: {position.name}",
        f"Astronomical Units: {position.distance_au}",
        f"Kilometres from the sun: {position.distance_km:.0f}",
        f"Years to orbit the sun: {position.orbital_period_years}",
        f"Planet {position.name} is at {position.longitude:.4f}° "
        f"({get_zodiac_sign(position.longitude)})",
        SEPARATOR,
    ]


@click.command()
@click.argument("planet", default=ALL_PLANETS)
@click.option(
    "--date",
    "-d",
    default=NOW,
    help="Date to compute positions for, as YYYY-MM-DD (midnight UTC) or 'now'. Defaults to 'now'.",
)
@click.option(
    "--formula",
    type=click.Choice(FORMULA_CHOICES),
    default=LongitudeFormula.ADDITIVE.value,
    help="How mean longitude and traversed angle combine. 'multiplicative' reproduces the historical output.",
)
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False),
    envvar=CATALOG_ENV_VAR,
    help=f"CSV catalog with name,mean_longitude,period columns. Defaults to ${CATALOG_ENV_VAR}, then the built-in catalog.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: 'json' for machine-readable data, 'text' for a human-readable summary. Defaults to 'text'.",
)
def position(
    planet: str,
    date: str,
    formula: str,
    catalog_path: Optional[str],
    output_format: str,
) -> None:
    """Show distance, orbital period and longitude of planets at a date.

    PLANET is a name from the catalog (case-sensitive) or 'all'.

    Examples:

    Every planet right now:
       orrery position

    Mars on a given day:
       orrery position Mars --date 2024-03-15

    Machine-readable output:
       orrery position all --date 2000-01-01 --format json
    """
    longitude_formula = LongitudeFormula(formula)
    try:
        when = parse_date_input(date)
        catalog = resolve_catalog(catalog_path)
        planets = select_planets(planet, catalog)
        logger.info(
            f"Computing {len(planets)} position(s) for {when.isoformat()} "
            f"with {longitude_formula.value} formula"
        )
        # All positions are computed before anything is printed
        positions = [p.position_report(when, longitude_formula) for p in planets]
    except (DateParseError, PlanetNotFound, InvalidParameter) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps([p.to_dict() for p in positions], indent=2))
    else:
        for p in positions:
            for line in format_position_text(p):
                click.echo(line)
