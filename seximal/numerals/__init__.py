"""
Seximal numeral types.

Base models (Numeral, IntegerNumeral, FloatNumeral) and the concrete
family of fixed-width types built on them.
"""

from seximal.numerals.base import FloatNumeral, IntegerNumeral, Numeral
from seximal.numerals.types import (
    NUMERAL_TYPES,
    ConversionMethods,
    Sf52,
    Sf144,
    Si12,
    Si24,
    Si52,
    Si144,
    Si332,
    Sisize,
    Su12,
    Su24,
    Su52,
    Su144,
    Su332,
    Susize,
    numeral_type,
)

__all__ = [
    # Base models
    "Numeral",
    "IntegerNumeral",
    "FloatNumeral",
    "ConversionMethods",
    # Unsigned
    "Su12",
    "Su24",
    "Su52",
    "Su144",
    "Su332",
    "Susize",
    # Signed
    "Si12",
    "Si24",
    "Si52",
    "Si144",
    "Si332",
    "Sisize",
    # Float
    "Sf52",
    "Sf144",
    # Registry
    "NUMERAL_TYPES",
    "numeral_type",
]
