"""
Conversion Matrix — Явные конверсии между числовыми типами

Матрица конверсий — тотальная функция от пары дескрипторов
(source, target) к правилу ConversionRule. Правило определяет,
сохраняет ли конверсия значение и может ли она завершиться Overflow.

ПРАВИЛА:
- IDENTITY            тот же тип
- WIDEN               целое → не уже, та же знаковость (всегда точно)
- NARROW              целое → уже, та же знаковость (Overflow вне диапазона)
- REINTERPRET         знаковое ↔ беззнаковое одной ширины (битовая
                      реинтерпретация two's complement, без проверки)
- RESIZE_REINTERPRET  меняются и ширина, и знаковость: сначала WIDEN/NARROW
                      в знаковости источника, затем REINTERPRET
- INT_TO_FLOAT        округление к ближайшему (±inf за диапазоном)
- FLOAT_TO_INT        усечение к нулю (Overflow для NaN/±inf/вне диапазона)
- FLOAT_WIDEN         f32 → f64, точно
- FLOAT_NARROW        f64 → f32, округление к ближайшему, без ошибки

ВАЖНО: сужающие конверсии проверяются (Overflow), а не усекаются —
каждое значение трактуется как checked quantity. Реинтерпретация
одной ширины намеренно НЕ проверяется: Su12(200) → Si12(-56).
"""

import logging
import math
from enum import Enum
from typing import Final

from seximal.core.domain.numeral_spec import NumeralSpec
from seximal.core.errors import Overflow
from seximal.core.math.numerical_safeguards import (
    check_int_range,
    float_to_int,
    int_to_float,
    round_to_precision,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class ConversionRule(str, Enum):
    """Категория конверсии в матрице"""

    IDENTITY = "identity"
    WIDEN = "widen"
    NARROW = "narrow"
    REINTERPRET = "reinterpret"
    RESIZE_REINTERPRET = "resize_reinterpret"
    INT_TO_FLOAT = "int_to_float"
    FLOAT_TO_INT = "float_to_int"
    FLOAT_WIDEN = "float_widen"
    FLOAT_NARROW = "float_narrow"


# Правила, которые всегда сохраняют значение и никогда не падают
LOSSLESS_RULES: Final[frozenset[ConversionRule]] = frozenset(
    {ConversionRule.IDENTITY, ConversionRule.WIDEN, ConversionRule.FLOAT_WIDEN}
)


# =============================================================================
# МАТРИЦА
# =============================================================================


def conversion_rule(source: NumeralSpec, target: NumeralSpec) -> ConversionRule:
    """
    Правило конверсии для пары типов.

    Тотальна на всех парах семейства.

    Examples:
        >>> conversion_rule(SU24, SU12)
        <ConversionRule.NARROW: 'narrow'>
        >>> conversion_rule(SU12, SI12)
        <ConversionRule.REINTERPRET: 'reinterpret'>
    """
    if source == target:
        return ConversionRule.IDENTITY

    if source.is_float and target.is_float:
        return ConversionRule.FLOAT_WIDEN if target.bits >= source.bits else ConversionRule.FLOAT_NARROW

    if source.is_float:
        return ConversionRule.FLOAT_TO_INT

    if target.is_float:
        return ConversionRule.INT_TO_FLOAT

    if source.signed == target.signed:
        return ConversionRule.WIDEN if target.bits >= source.bits else ConversionRule.NARROW

    if source.bits == target.bits:
        return ConversionRule.REINTERPRET

    return ConversionRule.RESIZE_REINTERPRET


def is_lossless(source: NumeralSpec, target: NumeralSpec) -> bool:
    """True если конверсия всегда сохраняет значение и не может упасть."""
    return conversion_rule(source, target) in LOSSLESS_RULES


# =============================================================================
# ПРИМЕНЕНИЕ ПРАВИЛ
# =============================================================================


def reinterpret_bits(value: int, bits: int, signed: bool) -> int:
    """
    Реинтерпретация битового паттерна ширины bits.

    Args:
        value: Значение (знаковое или беззнаковое) ширины bits
        bits: Ширина в битах
        signed: Трактовать результат как знаковый (two's complement)

    Examples:
        >>> reinterpret_bits(200, 8, signed=True)
        -56
        >>> reinterpret_bits(-1, 8, signed=False)
        255
    """
    pattern = value & ((1 << bits) - 1)
    if signed and pattern >> (bits - 1):
        return pattern - (1 << bits)
    return pattern


def _resize_then_reinterpret(value: int, source: NumeralSpec, target: NumeralSpec) -> int:
    # Промежуточный диапазон: ширина target, знаковость source
    intermediate_max = (1 << (target.bits - 1)) - 1 if source.signed else (1 << target.bits) - 1
    intermediate_min = -(1 << (target.bits - 1)) if source.signed else 0
    if not intermediate_min <= value <= intermediate_max:
        raise Overflow(target.name, value, f"(resize from {source.name})")

    result = reinterpret_bits(value, target.bits, target.signed)
    if (result < 0) != (value < 0):
        logger.debug("%s -> %s reinterpreted %d as %d", source.name, target.name, value, result)
    return result


def convert_value(value: int | float, source: NumeralSpec, target: NumeralSpec) -> int | float:
    """
    Конверсия нативного значения типа source в нативное значение типа target.

    Args:
        value: Значение в диапазоне source
        source: Исходный тип
        target: Целевой тип

    Returns:
        Значение в диапазоне target

    Raises:
        Overflow: NARROW / RESIZE_REINTERPRET вне диапазона,
            FLOAT_TO_INT для NaN, ±inf или вне диапазона
    """
    rule = conversion_rule(source, target)

    if rule is ConversionRule.IDENTITY or rule is ConversionRule.WIDEN:
        return value

    if rule is ConversionRule.NARROW:
        return check_int_range(value, target)

    if rule is ConversionRule.REINTERPRET:
        result = reinterpret_bits(value, target.bits, target.signed)
        if (result < 0) != (value < 0):
            logger.debug("%s -> %s reinterpreted %d as %d", source.name, target.name, value, result)
        return result

    if rule is ConversionRule.RESIZE_REINTERPRET:
        return _resize_then_reinterpret(value, source, target)

    if rule is ConversionRule.INT_TO_FLOAT:
        return int_to_float(value, target)

    if rule is ConversionRule.FLOAT_TO_INT:
        return float_to_int(value, target)

    if rule is ConversionRule.FLOAT_NARROW:
        result = round_to_precision(value, target)
        if math.isinf(result) and not math.isinf(value):
            logger.debug("%s -> %s rounded %r to %r", source.name, target.name, value, result)
        return result

    # FLOAT_WIDEN: значения single точно представимы в double
    return float(value)
