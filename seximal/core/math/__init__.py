"""
Core math modules для seximal

Семантика нативных типов, base-6 кодек и матрица конверсий.
"""

# Numerical Safeguards
from seximal.core.math.numerical_safeguards import (
    ARITHMETIC_OPERATIONS,
    check_int_range,
    checked_int_arithmetic,
    float_to_int,
    ieee_arithmetic,
    int_to_float,
    is_valid_float,
    ratio_to_float,
    round_to_precision,
    trunc_divmod,
)

# Base-6 Codec
from seximal.core.math.base6_codec import (
    FRACTION_SEPARATOR,
    INFINITY_TEXT,
    MAX_FRACTION_DIGITS,
    NAN_TEXT,
    NEGATIVE_SIGN,
    SEXIMAL_BASE,
    SEXIMAL_DIGITS,
    TextFormatConfig,
    decode_float,
    decode_integer,
    encode_float,
    encode_integer,
)

# Conversion Matrix
from seximal.core.math.conversion import (
    LOSSLESS_RULES,
    ConversionRule,
    conversion_rule,
    convert_value,
    is_lossless,
    reinterpret_bits,
)

__all__ = [
    # Safeguard constants
    "ARITHMETIC_OPERATIONS",
    # Integer semantics
    "check_int_range",
    "checked_int_arithmetic",
    "trunc_divmod",
    # Float semantics
    "ieee_arithmetic",
    "is_valid_float",
    "round_to_precision",
    # Native conversions
    "float_to_int",
    "int_to_float",
    "ratio_to_float",
    # Codec constants
    "FRACTION_SEPARATOR",
    "INFINITY_TEXT",
    "MAX_FRACTION_DIGITS",
    "NAN_TEXT",
    "NEGATIVE_SIGN",
    "SEXIMAL_BASE",
    "SEXIMAL_DIGITS",
    # Codec config
    "TextFormatConfig",
    # Decode / encode
    "decode_float",
    "decode_integer",
    "encode_float",
    "encode_integer",
    # Conversion rules
    "ConversionRule",
    "LOSSLESS_RULES",
    # Conversion functions
    "conversion_rule",
    "convert_value",
    "is_lossless",
    "reinterpret_bits",
]
