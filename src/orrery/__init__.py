"""Approximate heliocentric planet longitudes from mean circular orbits."""

__version__ = "0.1.0"
