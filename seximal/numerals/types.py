"""
Numeral Types — Конкретные seximal типы

Один класс на нативный тип. Имена — seximal-запись ширины в битах:

    Su12 / Si12    u8  / i8
    Su24 / Si24    u16 / i16
    Su52 / Si52    u32 / i32
    Su144 / Si144  u64 / i64
    Su332 / Si332  u128 / i128
    Susize / Sisize  usize / isize (64 бита)
    Sf52 / Sf144   f32 / f64

Вся логика — в IntegerNumeral / FloatNumeral; классы задают только
дескриптор и границы. Каждый тип имеет именованный метод конверсии
в каждый тип семейства (as_su12(), ..., as_sf144()).
"""

from typing import Final

from seximal.core.domain.numeral_spec import (
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
)
from seximal.numerals.base import FloatNumeral, IntegerNumeral, Numeral


# =============================================================================
# ИМЕНОВАННЫЕ КОНВЕРСИИ
# =============================================================================


class ConversionMethods:
    """
    Именованные конверсии: по одному методу на целевой тип.

    Все методы делегируют в Numeral.convert, правило выбирается
    матрицей конверсий по паре (тип источника, тип цели).
    """

    # Беззнаковые

    def as_su12(self) -> "Su12":
        """Конверсия в Su12 (u8). Overflow, если значение не помещается."""
        return self.convert(Su12)

    def as_su24(self) -> "Su24":
        """Конверсия в Su24 (u16). Overflow, если значение не помещается."""
        return self.convert(Su24)

    def as_su52(self) -> "Su52":
        """Конверсия в Su52 (u32). Overflow, если значение не помещается."""
        return self.convert(Su52)

    def as_su144(self) -> "Su144":
        """Конверсия в Su144 (u64). Overflow, если значение не помещается."""
        return self.convert(Su144)

    def as_su332(self) -> "Su332":
        """Конверсия в Su332 (u128). Overflow, если значение не помещается."""
        return self.convert(Su332)

    def as_susize(self) -> "Susize":
        """Конверсия в Susize (usize). Overflow, если значение не помещается."""
        return self.convert(Susize)

    # Знаковые

    def as_si12(self) -> "Si12":
        """Конверсия в Si12 (i8). Overflow, если значение не помещается."""
        return self.convert(Si12)

    def as_si24(self) -> "Si24":
        """Конверсия в Si24 (i16). Overflow, если значение не помещается."""
        return self.convert(Si24)

    def as_si52(self) -> "Si52":
        """Конверсия в Si52 (i32). Overflow, если значение не помещается."""
        return self.convert(Si52)

    def as_si144(self) -> "Si144":
        """Конверсия в Si144 (i64). Overflow, если значение не помещается."""
        return self.convert(Si144)

    def as_si332(self) -> "Si332":
        """Конверсия в Si332 (i128). Overflow, если значение не помещается."""
        return self.convert(Si332)

    def as_sisize(self) -> "Sisize":
        """Конверсия в Sisize (isize). Overflow, если значение не помещается."""
        return self.convert(Sisize)

    # Float

    def as_sf52(self) -> "Sf52":
        """Конверсия в Sf52 (f32). Округление к ближайшему, без ошибок для целых."""
        return self.convert(Sf52)

    def as_sf144(self) -> "Sf144":
        """Конверсия в Sf144 (f64). Округление к ближайшему, без ошибок для целых."""
        return self.convert(Sf144)


# =============================================================================
# БЕЗЗНАКОВЫЕ ЦЕЛЫЕ
# =============================================================================


class Su12(ConversionMethods, IntegerNumeral):
    """`Su12` — seximal-эквивалент u8."""

    SPEC = SU12
    MIN = SU12.min_value
    MAX = SU12.max_value


class Su24(ConversionMethods, IntegerNumeral):
    """`Su24` — seximal-эквивалент u16."""

    SPEC = SU24
    MIN = SU24.min_value
    MAX = SU24.max_value


class Su52(ConversionMethods, IntegerNumeral):
    """`Su52` — seximal-эквивалент u32."""

    SPEC = SU52
    MIN = SU52.min_value
    MAX = SU52.max_value


class Su144(ConversionMethods, IntegerNumeral):
    """`Su144` — seximal-эквивалент u64."""

    SPEC = SU144
    MIN = SU144.min_value
    MAX = SU144.max_value


class Su332(ConversionMethods, IntegerNumeral):
    """`Su332` — seximal-эквивалент u128."""

    SPEC = SU332
    MIN = SU332.min_value
    MAX = SU332.max_value


class Susize(ConversionMethods, IntegerNumeral):
    """`Susize` — seximal-эквивалент usize (64 бита)."""

    SPEC = SUSIZE
    MIN = SUSIZE.min_value
    MAX = SUSIZE.max_value


# =============================================================================
# ЗНАКОВЫЕ ЦЕЛЫЕ
# =============================================================================


class Si12(ConversionMethods, IntegerNumeral):
    """`Si12` — seximal-эквивалент i8."""

    SPEC = SI12
    MIN = SI12.min_value
    MAX = SI12.max_value


class Si24(ConversionMethods, IntegerNumeral):
    """`Si24` — seximal-эквивалент i16."""

    SPEC = SI24
    MIN = SI24.min_value
    MAX = SI24.max_value


class Si52(ConversionMethods, IntegerNumeral):
    """`Si52` — seximal-эквивалент i32."""

    SPEC = SI52
    MIN = SI52.min_value
    MAX = SI52.max_value


class Si144(ConversionMethods, IntegerNumeral):
    """`Si144` — seximal-эквивалент i64."""

    SPEC = SI144
    MIN = SI144.min_value
    MAX = SI144.max_value


class Si332(ConversionMethods, IntegerNumeral):
    """`Si332` — seximal-эквивалент i128."""

    SPEC = SI332
    MIN = SI332.min_value
    MAX = SI332.max_value


class Sisize(ConversionMethods, IntegerNumeral):
    """`Sisize` — seximal-эквивалент isize (64 бита)."""

    SPEC = SISIZE
    MIN = SISIZE.min_value
    MAX = SISIZE.max_value


# =============================================================================
# FLOAT
# =============================================================================


class Sf52(ConversionMethods, FloatNumeral):
    """`Sf52` — seximal-эквивалент f32 (single)."""

    SPEC = SF52
    MIN = SF52.min_value
    MAX = SF52.max_value


class Sf144(ConversionMethods, FloatNumeral):
    """`Sf144` — seximal-эквивалент f64 (double)."""

    SPEC = SF144
    MIN = SF144.min_value
    MAX = SF144.max_value


# =============================================================================
# РЕЕСТР
# =============================================================================

NUMERAL_TYPES: Final[dict[str, type[Numeral]]] = {
    cls.SPEC.name.lower(): cls
    for cls in (
        Su12,
        Su24,
        Su52,
        Su144,
        Su332,
        Susize,
        Si12,
        Si24,
        Si52,
        Si144,
        Si332,
        Sisize,
        Sf52,
        Sf144,
    )
}


def numeral_type(name: str) -> type[Numeral]:
    """
    Класс seximal типа по имени (регистронезависимо).

    Raises:
        KeyError: Если тип не входит в семейство
    """
    try:
        return NUMERAL_TYPES[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown numeral type: {name!r}") from None
