"""
Models package for uddf2py.

- measurement: measurement categories, their conversion formulas, and the
  field-name index used to dispatch conversions
"""

from .measurement import (
    ASCENT_RATE,
    CATEGORIES,
    DENSITY,
    DURATION,
    FIELD_CATEGORIES,
    ILLUMINANCE,
    LENGTH,
    MASS,
    PRESSURE,
    TEMPERATURE,
    VOLUME,
    MeasurementCategory,
    category_for,
    round_half_up,
)

__all__ = [
    "MeasurementCategory",
    "CATEGORIES",
    "FIELD_CATEGORIES",
    "category_for",
    "round_half_up",
    # Categories
    "TEMPERATURE",
    "VOLUME",
    "LENGTH",
    "PRESSURE",
    "DURATION",
    "MASS",
    "DENSITY",
    "ILLUMINANCE",
    "ASCENT_RATE",
]
