"""CLI command for listing the planet catalog."""

import json
import sys
from typing import Optional

import click

from ..orbit.planet import InvalidParameter
from ..orbit.util import format_distance
from .common import CATALOG_ENV_VAR, resolve_catalog


@click.command()
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
    help="Output format. Defaults to 'text'.",
)
def catalog(catalog_path: Optional[str], output_format: str) -> None:
    """List the planets positions can be computed for."""
    try:
        planets = resolve_catalog(catalog_path)
    except InvalidParameter as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_format == "json":
        rows = [
            {
                "name": p.name,
                "mean_longitude": p.mean_longitude,
                "period": p.period,
                "distance_au": p.distance_au,
            }
            for p in planets
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    for p in planets:
        click.echo(
            f"{p.name:<10} mean longitude {p.mean_longitude:>10.5f}°  "
            f"period {p.period:>10.3f} d  {format_distance(p.distance_au)}"
        )
