"""Angle normalization and formatting helpers."""

from ..constants import DEGREES_PER_CIRCLE, KM_PER_AU

ZODIAC_SIGNS = [
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
]

DEGREES_PER_SIGN = DEGREES_PER_CIRCLE / len(ZODIAC_SIGNS)


def normalize_degrees(angle: float) -> float:
    """Normalize an angle to the range [0, 360).

    Python's float modulo takes the sign of the divisor, so negative angles
    wrap to positive ones.

    Args:
        angle: Angle in degrees

    Returns:
        float: Equivalent angle in [0, 360)
    """
    result = angle % DEGREES_PER_CIRCLE
    # -1e-20 % 360 rounds to exactly 360.0
    if result >= DEGREES_PER_CIRCLE:
        return 0.0
    return result


def get_zodiac_sign(longitude: float) -> str:
    """Get the zodiac sign for a given ecliptic longitude.

    Args:
        longitude: Ecliptic longitude in degrees

    Returns:
        String with whole degrees within the sign and the sign name,
        e.g. "10° Capricorn"
    """
    longitude = normalize_degrees(longitude)
    index = int(longitude // DEGREES_PER_SIGN)
    degrees_in_sign = longitude - index * DEGREES_PER_SIGN
    return f"{int(degrees_in_sign)}° {ZODIAC_SIGNS[index]}"


def au_to_km(au: float) -> float:
    """Convert astronomical units to kilometres."""
    return au * KM_PER_AU


def format_distance(distance: float) -> str:
    """Format distance in astronomical units (AU).

    Args:
        distance: Distance in astronomical units

    Returns:
        String representing the formatted distance
    """
    return f"{distance:.2f} AU"
