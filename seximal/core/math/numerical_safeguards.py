"""
Numerical Safeguards — Native Fixed-Width Semantics

Модуль воспроизводит семантику нативных типов фиксированной ширины
поверх Python int / float:
- Проверка диапазона целых (checked arithmetic вместо wraparound)
- Целочисленное деление с усечением к нулю (как у нативных типов)
- IEEE-754 арифметика float с заданной точностью (single/double)
- Корректно округлённые конверсии int → float и rational → float
- Усечение float → int с проверкой диапазона

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целый результат вне диапазона типа → Overflow (никогда не wraparound)
2. Целочисленное деление/остаток на ноль → DivideByZero
3. Float арифметика никогда не поднимает исключений (inf/NaN по IEEE)
4. Округление к ближайшему (ties-to-even), без двойного округления
"""

import math
import operator
from typing import Callable, Final

import numpy as np

from seximal.core.domain.numeral_spec import NumeralSpec
from seximal.core.errors import DivideByZero, Overflow

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ширина мантиссы double (включая скрытый бит)
DOUBLE_MANTISSA_BITS: Final[int] = 53

# Допустимые имена арифметических операций
ARITHMETIC_OPERATIONS: Final[tuple[str, ...]] = ("add", "sub", "mul", "div", "rem")

_INT_OPERATIONS: Final[dict[str, Callable[[int, int], int]]] = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
}

_FLOAT_UFUNCS: Final[dict[str, np.ufunc]] = {
    "add": np.add,
    "sub": np.subtract,
    "mul": np.multiply,
    "div": np.divide,
    "rem": np.fmod,
}


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def check_int_range(value: int, spec: NumeralSpec) -> int:
    """
    Проверка, что целое значение помещается в диапазон типа.

    Args:
        value: Проверяемое значение
        spec: Дескриптор целочисленного типа

    Returns:
        value без изменений

    Raises:
        Overflow: Если value вне [spec.min_value, spec.max_value]

    Examples:
        >>> check_int_range(255, SU12)
        255
        >>> check_int_range(256, SU12)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        Overflow: ...
    """
    if not spec.contains(value):
        raise Overflow(spec.name, value, f"[{spec.min_value}, {spec.max_value}]")
    return value


# =============================================================================
# ЦЕЛОЧИСЛЕННАЯ АРИФМЕТИКА
# =============================================================================


def trunc_divmod(numerator: int, denominator: int, type_name: str = "int", operation: str = "division") -> tuple[int, int]:
    """
    Деление с усечением к нулю и остаток со знаком делимого.

    Семантика нативных целых (не floor division Python):
        -7 / 2 = -3, -7 % 2 = -1
         7 / -2 = -3, 7 % -2 = 1

    Инвариант: numerator == quotient * denominator + remainder

    Raises:
        DivideByZero: Если denominator == 0
    """
    if denominator == 0:
        raise DivideByZero(type_name, operation)

    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient

    remainder = numerator - quotient * denominator
    return quotient, remainder


def checked_int_arithmetic(operation: str, left: int, right: int, spec: NumeralSpec) -> int:
    """
    Целочисленная операция с проверкой переполнения.

    Результат вычисляется точно (Python int) и затем проверяется
    против диапазона типа — переполнение не маскируется wraparound.

    Для div/rem переполнение частного (MIN / -1) тоже является Overflow,
    в том числе для остатка.

    Args:
        operation: Одна из ARITHMETIC_OPERATIONS
        left: Левый операнд (в диапазоне spec)
        right: Правый операнд (в диапазоне spec)
        spec: Дескриптор целочисленного типа

    Raises:
        Overflow: Результат вне диапазона
        DivideByZero: Деление или остаток на ноль
    """
    if operation in _INT_OPERATIONS:
        return check_int_range(_INT_OPERATIONS[operation](left, right), spec)

    if operation not in ("div", "rem"):
        raise ValueError(f"Unknown arithmetic operation: {operation!r}")

    quotient, remainder = trunc_divmod(
        left, right, spec.name, "division" if operation == "div" else "remainder"
    )
    check_int_range(quotient, spec)
    return quotient if operation == "div" else remainder


# =============================================================================
# FLOAT АРИФМЕТИКА (IEEE-754)
# =============================================================================


def round_to_precision(value: float, spec: NumeralSpec) -> float:
    """
    Округление double к множеству значений float-типа.

    Single: ближайший float32 (ties-to-even), за пределами диапазона → ±inf
    без исключения. Double: без изменений.
    """
    with np.errstate(over="ignore"):
        return float(spec.numpy_type(value))


def ieee_arithmetic(operation: str, left: float, right: float, spec: NumeralSpec) -> float:
    """
    Float операция с семантикой IEEE-754 в точности типа.

    Никогда не поднимает исключений:
        x / 0.0 → ±inf (или NaN для 0 / 0)
        x % 0.0 → NaN
        переполнение → ±inf

    Остаток — C fmod (знак делимого), как у нативных float.
    """
    ufunc = _FLOAT_UFUNCS.get(operation)
    if ufunc is None:
        raise ValueError(f"Unknown arithmetic operation: {operation!r}")

    float_type = spec.numpy_type
    with np.errstate(all="ignore"):
        return float(ufunc(float_type(left), float_type(right)))


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def _round_to_odd_double(magnitude: int, exponent: int = 0) -> float:
    """
    magnitude * 2^exponent как double с округлением round-to-odd.

    Отброшенные биты схлопываются в младший бит (sticky), поэтому
    последующее округление к single даёт корректный результат
    (53 >= 24 + 2, без ошибки двойного округления).
    """
    excess = magnitude.bit_length() - DOUBLE_MANTISSA_BITS
    if excess > 0:
        kept = magnitude >> excess
        if magnitude & ((1 << excess) - 1):
            kept |= 1
        magnitude = kept
        exponent += excess
    return math.ldexp(float(magnitude), exponent)


def int_to_float(value: int, spec: NumeralSpec) -> float:
    """
    Конверсия int → float заданной точности.

    Точная для значений, представимых в точности типа; иначе
    округление к ближайшему. Значения за пределами диапазона → ±inf.
    Никогда не поднимает исключений.
    """
    if spec.bits == 64:
        try:
            return float(value)
        except OverflowError:
            return math.copysign(math.inf, value)

    try:
        approx = _round_to_odd_double(abs(value))
    except OverflowError:
        approx = math.inf
    result = round_to_precision(approx, spec)
    return -result if value < 0 else result


def ratio_to_float(numerator: int, denominator: int, spec: NumeralSpec) -> float:
    """
    Корректно округлённое значение numerator / denominator.

    Args:
        numerator: Числитель (знак результата)
        denominator: Знаменатель (> 0)
        spec: Дескриптор float-типа

    Returns:
        Ближайший float типа spec (-0.0 для отрицательного нуля не
        возникает: знак нуля задаёт вызывающий код)

    Raises:
        Overflow: Если значение превышает диапазон типа
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    magnitude = abs(numerator)

    if spec.bits == 64:
        try:
            result = magnitude / denominator
        except OverflowError:
            raise Overflow(spec.name, f"{numerator}/{denominator}") from None
    else:
        try:
            result = round_to_precision(_ratio_round_to_odd(magnitude, denominator), spec)
        except OverflowError:
            result = math.inf
        if math.isinf(result):
            raise Overflow(spec.name, f"{numerator}/{denominator}")

    return -result if numerator < 0 else result


def _ratio_round_to_odd(numerator: int, denominator: int) -> float:
    """numerator / denominator как double с округлением round-to-odd."""
    if numerator == 0:
        return 0.0

    # Частное с 53-54 значащими битами
    shift = numerator.bit_length() - denominator.bit_length() - DOUBLE_MANTISSA_BITS
    if shift >= 0:
        quotient, remainder = divmod(numerator, denominator << shift)
    else:
        quotient, remainder = divmod(numerator << -shift, denominator)

    if remainder:
        quotient |= 1
    return _round_to_odd_double(quotient, shift)


def float_to_int(value: float, spec: NumeralSpec) -> int:
    """
    Конверсия float → int с усечением к нулю.

    Raises:
        Overflow: Для NaN, ±inf или усечённого значения вне диапазона
    """
    if not is_valid_float(value):
        raise Overflow(spec.name, value, "(not a finite number)")
    return check_int_range(math.trunc(value), spec)
