"""
Domain descriptors.

Contains NumeralSpec — the descriptor of one native numeric type — and the
fixed family of descriptors the numeral classes are built on.
"""

from seximal.core.domain.numeral_spec import (
    ALL_SPECS,
    FLOAT_BIT_WIDTHS,
    INTEGER_BIT_WIDTHS,
    POINTER_WIDTH_BITS,
    SF52,
    SF144,
    SI12,
    SI24,
    SI52,
    SI144,
    SI332,
    SISIZE,
    SU12,
    SU24,
    SU52,
    SU144,
    SU332,
    SUSIZE,
    NumeralKind,
    NumeralSpec,
    spec_by_name,
)

__all__ = [
    # Model
    "NumeralKind",
    "NumeralSpec",
    # Widths
    "FLOAT_BIT_WIDTHS",
    "INTEGER_BIT_WIDTHS",
    "POINTER_WIDTH_BITS",
    # Family
    "SU12",
    "SU24",
    "SU52",
    "SU144",
    "SU332",
    "SUSIZE",
    "SI12",
    "SI24",
    "SI52",
    "SI144",
    "SI332",
    "SISIZE",
    "SF52",
    "SF144",
    "ALL_SPECS",
    "spec_by_name",
]
