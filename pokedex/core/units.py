"""Conversions from PokeAPI's metric units to display strings."""
import math

INCHES_PER_METER = 39.3701
POUNDS_PER_KILOGRAM = 2.20462


def format_height(decimeters: int) -> str:
    """
    Formats a height in decimeters as feet/inches plus meters.

    >>> format_height(7)
    '2\\'3.6" (0.70 m)'
    """
    meters = decimeters / 10.0
    inches_total = meters * INCHES_PER_METER

    feet = int(inches_total / 12)
    inches = math.fmod(inches_total, 12)

    return f"{feet}'{inches:.1f}\" ({meters:.2f} m)"


def format_weight(hectograms: int) -> str:
    """Formats a weight in hectograms as pounds plus kilograms."""
    kilograms = hectograms / 10.0
    pounds = kilograms * POUNDS_PER_KILOGRAM

    return f"{pounds:.1f} lbs ({kilograms:.1f} kg)"
