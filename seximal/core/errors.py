"""
Errors — Иерархия исключений seximal

Все сбои библиотеки наследуются от SeximalError и одновременно от
соответствующего встроенного исключения, чтобы вызывающий код мог
ловить их как ValueError / OverflowError / ZeroDivisionError.

Политика распространения:
- Исключение поднимается операцией, которая обнаружила сбой
  (parse, convert, арифметика)
- Никаких clamp / retry / подавления внутри библиотеки
"""

from typing import Any, Optional


# =============================================================================
# BASE
# =============================================================================


class SeximalError(Exception):
    """Базовое исключение для всех ошибок seximal."""


# =============================================================================
# PARSE ERRORS
# =============================================================================


class InvalidDigit(SeximalError, ValueError):
    """
    Недопустимый символ или структура base-6 текста.

    Поднимается при:
    - символе вне {0-5, '-', '.'}
    - '-' не в начале строки или '-' для беззнакового типа
    - '.' для целочисленного типа или более одного '.'
    - пустой строке / пустой группе цифр
    """

    def __init__(
        self,
        text: str,
        position: Optional[int] = None,
        char: Optional[str] = None,
        reason: str = "invalid seximal digit",
    ):
        self.text = text
        self.position = position
        self.char = char
        self.reason = reason
        if position is not None:
            message = f"{reason}: {char!r} at position {position} in {text!r}"
        else:
            message = f"{reason}: {text!r}"
        super().__init__(message)


# =============================================================================
# ARITHMETIC ERRORS
# =============================================================================


class Overflow(SeximalError, OverflowError):
    """
    Значение вне представимого диапазона целевого типа.

    Поднимается при parse, сужающей конверсии, конверсии float → int
    и переполнении целочисленной арифметики.
    """

    def __init__(self, type_name: str, value: Any = None, detail: str = ""):
        self.type_name = type_name
        self.value = value
        message = f"Overflow: value {value!r} out of range for {type_name}"
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class DivideByZero(SeximalError, ZeroDivisionError):
    """Целочисленное деление или остаток от деления на ноль."""

    def __init__(self, type_name: str, operation: str = "division"):
        self.type_name = type_name
        self.operation = operation
        super().__init__(f"{type_name} {operation} by zero")
