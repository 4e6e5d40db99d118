"""Pure helpers shared by the data and presentation layers."""
from .units import format_height, format_weight

__all__ = [
    'format_height',
    'format_weight',
]
