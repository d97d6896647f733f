from .planet import Planet, PlanetPosition, LongitudeFormula, InvalidParameter
from .util import normalize_degrees, get_zodiac_sign, au_to_km, format_distance

__all__ = [
    "Planet",
    "PlanetPosition",
    "LongitudeFormula",
    "InvalidParameter",
    "normalize_degrees",
    "get_zodiac_sign",
    "au_to_km",
    "format_distance",
]
