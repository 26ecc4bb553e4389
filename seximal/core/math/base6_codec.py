"""
Base-6 Codec — Кодирование и декодирование seximal текста

Грамматика текста (единственный "wire format" библиотеки):
    ['-'] digit+ [ '.' digit+ ]      digit ∈ {0, 1, 2, 3, 4, 5}

Модуль обеспечивает:
- Декодирование целых с проверкой переполнения ДО каждого шага накопления
- Декодирование float с корректным округлением к точности типа
- Кодирование целых (повторное mod 6 / div 6 по модулю значения)
- Кодирование float: целая часть + ограниченное число дробных цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любой символ вне алфавита → InvalidDigit (с позицией)
2. '-' для беззнакового типа → InvalidDigit
3. Величина вне диапазона типа → Overflow (проверка до commit)
4. Кодирование float всегда завершается: не более max_fraction_digits цифр
5. decode(encode(v)) == v для всех целых v
"""

import math
from dataclasses import dataclass
from typing import Final, Optional

from seximal.core.domain.numeral_spec import NumeralSpec
from seximal.core.errors import InvalidDigit, Overflow
from seximal.core.math.numerical_safeguards import ratio_to_float

# =============================================================================
# АЛФАВИТ И ПАРАМЕТРЫ ФОРМАТА
# =============================================================================

SEXIMAL_BASE: Final[int] = 6

# Цифры по возрастанию значения
SEXIMAL_DIGITS: Final[str] = "012345"

NEGATIVE_SIGN: Final[str] = "-"

FRACTION_SEPARATOR: Final[str] = "."

# Бюджет дробных цифр при кодировании float.
# 6^-24 ≈ 2.1e-19: для |x| >= 1 погрешность усечения меньше половины ulp double,
# поэтому decode(encode(x)) == x.
MAX_FRACTION_DIGITS: Final[int] = 24

# Представление неконечных значений (только вывод, decode их отвергает)
NAN_TEXT: Final[str] = "NaN"
INFINITY_TEXT: Final[str] = "inf"

_DIGIT_VALUES: Final[dict[str, int]] = {char: index for index, char in enumerate(SEXIMAL_DIGITS)}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class TextFormatConfig:
    """Конфигурация форматирования seximal текста.

    max_fraction_digits — максимум дробных цифр для float (>= 1).
    """

    max_fraction_digits: int = MAX_FRACTION_DIGITS

    def __post_init__(self) -> None:
        if self.max_fraction_digits < 1:
            raise ValueError(
                f"max_fraction_digits must be >= 1, got {self.max_fraction_digits}"
            )


DEFAULT_FORMAT_CONFIG: Final[TextFormatConfig] = TextFormatConfig()


# =============================================================================
# РАЗБОР ТЕКСТА
# =============================================================================


def _digit_value(text: str, position: int) -> int:
    """Значение цифры в позиции position или InvalidDigit."""
    char = text[position]
    value = _DIGIT_VALUES.get(char)
    if value is None:
        raise InvalidDigit(text, position, char)
    return value


def _split_sign(text: str, spec: NumeralSpec) -> tuple[bool, int]:
    """
    Отделение знака.

    Returns:
        (negative, start) — флаг знака и позиция первой цифры
    """
    if not isinstance(text, str):
        raise TypeError(f"seximal text must be str, got {type(text).__name__}")

    if not text.startswith(NEGATIVE_SIGN):
        return False, 0

    if not spec.signed:
        raise InvalidDigit(text, 0, NEGATIVE_SIGN, f"negative sign not allowed for {spec.name}")
    return True, 1


def _require_digits(text: str, start: int, end: int, what: str) -> None:
    if start >= end:
        raise InvalidDigit(text, reason=f"missing {what} digits")


# =============================================================================
# ДЕКОДИРОВАНИЕ
# =============================================================================


def decode_integer(text: str, spec: NumeralSpec) -> int:
    """
    Декодирование seximal текста в целое значение типа spec.

    Алгоритм (старшая цифра первой):
        acc = acc * 6 + digit

    Перед каждым шагом проверяется acc * 6 + digit <= limit, где limit —
    максимальная величина для знака текста (max_value или -min_value).

    Args:
        text: Seximal текст, грамматика ['-'] digit+
        spec: Дескриптор целочисленного типа

    Returns:
        Декодированное значение (в диапазоне spec)

    Raises:
        InvalidDigit: Недопустимый символ / знак / пустая группа цифр
        Overflow: Величина вне диапазона типа

    Examples:
        >>> decode_integer("101", SU12)
        37
        >>> decode_integer("-100", SI12)
        -36
    """
    negative, start = _split_sign(text, spec)
    _require_digits(text, start, len(text), "integer")

    limit = -spec.min_value if negative else spec.max_value

    acc = 0
    for position in range(start, len(text)):
        digit = _digit_value(text, position)
        # Проверка до commit: acc * 6 + digit > limit
        if acc > (limit - digit) // SEXIMAL_BASE:
            raise Overflow(spec.name, text)
        acc = acc * SEXIMAL_BASE + digit

    return -acc if negative else acc


def decode_float(text: str, spec: NumeralSpec) -> float:
    """
    Декодирование seximal текста в float типа spec.

    Целая часть накапливается слева направо (acc * 6 + digit), дробная —
    слева направо с убывающим весом: frac += digit * 6^-position,
    position = 1 для первой дробной цифры.

    Накопление точное (числитель над 6^n), затем одно корректное
    округление к точности типа.

    Args:
        text: Seximal текст, грамматика ['-'] digit+ ['.' digit+]
        spec: Дескриптор float-типа

    Returns:
        Ближайшее значение типа (-0.0 для "-0")

    Raises:
        InvalidDigit: Недопустимый символ, повторный '.', пустая группа цифр
        Overflow: Величина превышает диапазон типа

    Examples:
        >>> decode_float("0.3", SF144)
        0.5
        >>> decode_float("2.3", SF52)
        2.5
    """
    negative, start = _split_sign(text, spec)

    separator_at = text.find(FRACTION_SEPARATOR, start)
    integer_end = len(text) if separator_at < 0 else separator_at
    _require_digits(text, start, integer_end, "integer")

    integer_part = 0
    for position in range(start, integer_end):
        integer_part = integer_part * SEXIMAL_BASE + _digit_value(text, position)

    numerator = integer_part
    denominator = 1
    if separator_at >= 0:
        _require_digits(text, separator_at + 1, len(text), "fraction")
        for position in range(separator_at + 1, len(text)):
            # Повторный '.' отвергается здесь как недопустимая цифра
            numerator = numerator * SEXIMAL_BASE + _digit_value(text, position)
            denominator *= SEXIMAL_BASE

    if numerator == 0:
        return -0.0 if negative else 0.0

    return ratio_to_float(-numerator if negative else numerator, denominator, spec)


# =============================================================================
# КОДИРОВАНИЕ
# =============================================================================


def _encode_magnitude(magnitude: int) -> str:
    """Цифры неотрицательного целого, старшая первой."""
    if magnitude == 0:
        return SEXIMAL_DIGITS[0]

    digits: list[str] = []
    while magnitude > 0:
        magnitude, digit = divmod(magnitude, SEXIMAL_BASE)
        digits.append(SEXIMAL_DIGITS[digit])
    return "".join(reversed(digits))


def encode_integer(value: int) -> str:
    """
    Кодирование целого в seximal текст.

    Повторное value mod 6 / value div 6 по модулю значения; "0" для нуля;
    префикс '-' для отрицательных.

    Examples:
        >>> encode_integer(37)
        '101'
        >>> encode_integer(-36)
        '-100'
        >>> encode_integer(0)
        '0'
    """
    text = _encode_magnitude(abs(value))
    return NEGATIVE_SIGN + text if value < 0 else text


def encode_float(value: float, config: Optional[TextFormatConfig] = None) -> str:
    """
    Кодирование float в seximal текст.

    Целая часть (усечённая) кодируется как целое; дробный остаток
    многократно умножается на 6, целая часть произведения становится
    следующей цифрой. Остановка при нулевом остатке или по достижении
    config.max_fraction_digits цифр (лишние цифры отбрасываются).
    Завершающие нули дробной части не выводятся; значение, у которого
    не осталось ни одной значащей цифры, выводится как "0".

    Вычисления точные (float.as_integer_ratio), поэтому каждая выданная
    цифра — истинная цифра seximal разложения значения.

    Неконечные значения: "NaN", "inf", "-inf".

    Examples:
        >>> encode_float(0.5)
        '0.3'
        >>> encode_float(-2.5)
        '-2.3'
        >>> encode_float(3.0)
        '3'
    """
    config = config or DEFAULT_FORMAT_CONFIG

    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return NEGATIVE_SIGN + INFINITY_TEXT if value < 0 else INFINITY_TEXT
    if value == 0.0:
        return SEXIMAL_DIGITS[0]

    numerator, denominator = abs(value).as_integer_ratio()
    integer_part, remainder = divmod(numerator, denominator)

    fraction_digits: list[str] = []
    while remainder and len(fraction_digits) < config.max_fraction_digits:
        digit, remainder = divmod(remainder * SEXIMAL_BASE, denominator)
        fraction_digits.append(SEXIMAL_DIGITS[digit])

    # Усечение по бюджету может оставить хвост из нулей
    fraction = "".join(fraction_digits).rstrip(SEXIMAL_DIGITS[0])

    text = _encode_magnitude(integer_part)
    if fraction:
        text = text + FRACTION_SEPARATOR + fraction
    elif integer_part == 0:
        # |value| < 6^-max_fraction_digits: как и для нуля, без знака
        return SEXIMAL_DIGITS[0]
    return NEGATIVE_SIGN + text if value < 0 else text
