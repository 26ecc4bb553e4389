"""
seximal — base-6 (seximal) equivalents of native fixed-width number types.

Every numeral stores its value as the ordinary native number and renders
its text form in base 6:

    >>> from seximal import Su12, Sf144
    >>> str(Su12(37))
    '101'
    >>> Sf144.parse("0.3").value
    0.5
"""

from seximal.core.errors import DivideByZero, InvalidDigit, Overflow, SeximalError
from seximal.core.domain import ALL_SPECS, NumeralKind, NumeralSpec, spec_by_name
from seximal.core.math import (
    MAX_FRACTION_DIGITS,
    ConversionRule,
    TextFormatConfig,
    conversion_rule,
    decode_float,
    decode_integer,
    encode_float,
    encode_integer,
    is_lossless,
)
from seximal.numerals import (
    NUMERAL_TYPES,
    FloatNumeral,
    IntegerNumeral,
    Numeral,
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

__version__ = "0.3.0"

__all__ = [
    # Errors
    "SeximalError",
    "InvalidDigit",
    "Overflow",
    "DivideByZero",
    # Type descriptors
    "ALL_SPECS",
    "NumeralKind",
    "NumeralSpec",
    "spec_by_name",
    # Codec
    "MAX_FRACTION_DIGITS",
    "TextFormatConfig",
    "decode_float",
    "decode_integer",
    "encode_float",
    "encode_integer",
    # Conversion matrix
    "ConversionRule",
    "conversion_rule",
    "is_lossless",
    # Numerals
    "Numeral",
    "IntegerNumeral",
    "FloatNumeral",
    "Su12",
    "Su24",
    "Su52",
    "Su144",
    "Su332",
    "Susize",
    "Si12",
    "Si24",
    "Si52",
    "Si144",
    "Si332",
    "Sisize",
    "Sf52",
    "Sf144",
    "NUMERAL_TYPES",
    "numeral_type",
]
