"""
Numeral — Базовые модели seximal чисел

Immutable Pydantic модели, оборачивающие одно нативное значение.
Хранение — обычное (base-10) нативное число; текстовая форма — base-6.

Контракт (общий для всех ширин):
- Конструирование из нативного значения: Cls(value) / Cls.new(value)
- Разбор base-6 текста: Cls.parse(text)
- Форматирование: n.to_text() / str(n)
- Арифметика + - * / % только между числами ОДНОГО типа (или с нативным
  значением того же вида); смешанные типы → TypeError
- Сравнение == < <= > >= по хранимому значению
- Явная конверсия: n.convert(TargetCls)

Числа immutable (frozen=True): арифметика и конверсия всегда создают
новый экземпляр.
"""

import math
import numbers
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, field_validator

from seximal.core.domain.numeral_spec import NumeralSpec
from seximal.core.errors import DivideByZero, Overflow
from seximal.core.math.base6_codec import (
    TextFormatConfig,
    decode_float,
    decode_integer,
    encode_float,
    encode_integer,
)
from seximal.core.math.conversion import convert_value
from seximal.core.math.numerical_safeguards import (
    check_int_range,
    checked_int_arithmetic,
    ieee_arithmetic,
    int_to_float,
    is_valid_float,
    round_to_precision,
)


# =============================================================================
# NUMERAL BASE
# =============================================================================


class Numeral(BaseModel):
    """
    Базовая модель seximal числа.

    Не инстанцируется напрямую: конкретные классы (Su12, Si52, Sf144, ...)
    задают дескриптор SPEC и границы MIN / MAX.
    """

    SPEC: ClassVar[NumeralSpec]
    MIN: ClassVar[Any]
    MAX: ClassVar[Any]

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: Any = 0) -> None:
        type(self)._require_concrete()
        super().__init__(value=value)

    # -------------------------------------------------------------------------
    # Конструирование и доступ
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, value: Any) -> "Numeral":
        """Новое число из нативного значения (быстрый путь)."""
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> "Numeral":
        """
        Новое число из base-6 текста (медленный путь).

        Raises:
            InvalidDigit: Символ вне алфавита, недопустимый знак или структура
            Overflow: Величина вне диапазона типа
        """
        cls._require_concrete()
        return cls._wrap(cls._decode(text))

    @classmethod
    def from_text(cls, text: str) -> "Numeral":
        """Синоним parse."""
        return cls.parse(text)

    @classmethod
    def _wrap(cls, value: Any) -> "Numeral":
        # Значение уже проверено / округлено вызывающим кодом
        return cls.model_construct(value=value)

    def model_copy(self, *, update: Optional[dict[str, Any]] = None, deep: bool = False) -> "Numeral":
        """
        Копия числа; новое значение из update проходит ту же проверку,
        что и конструктор.

        Raises:
            Overflow: update["value"] вне диапазона типа
            TypeError: update содержит поля кроме value или не-нативное значение
        """
        if not update:
            return super().model_copy(deep=deep)

        unknown = set(update) - {"value"}
        if unknown:
            raise TypeError(f"{type(self).__name__} has no fields {sorted(unknown)!r}")
        return type(self)(update["value"])

    @classmethod
    def _require_concrete(cls) -> None:
        if "SPEC" not in cls.__dict__:
            raise TypeError(f"{cls.__name__} is abstract; use a concrete numeral type")

    @classmethod
    def _decode(cls, text: str) -> Any:
        raise NotImplementedError

    @classmethod
    def _is_native(cls, other: Any) -> bool:
        raise NotImplementedError

    def to_text(self, config: Optional[TextFormatConfig] = None) -> str:
        """Base-6 текст значения (вычисляется при каждом вызове)."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_text()

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def convert(self, target: type["Numeral"]) -> "Numeral":
        """
        Явная конверсия в другой тип семейства.

        Правило выбирается матрицей конверсий (core.math.conversion).

        Raises:
            Overflow: Сужение вне диапазона, float → int для NaN / ±inf /
                значения вне диапазона
            TypeError: target не является конкретным типом семейства
        """
        if not (isinstance(target, type) and issubclass(target, Numeral)):
            raise TypeError(f"conversion target must be a numeral type, got {target!r}")
        target._require_concrete()
        return target._wrap(convert_value(self.value, self.SPEC, target.SPEC))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _operand(self, other: Any) -> Optional["Numeral"]:
        """Второй операнд того же типа или None для недопустимой комбинации."""
        if type(other) is type(self):
            return other
        if isinstance(other, Numeral):
            return None
        if self._is_native(other):
            return type(self)(other)
        return None

    def _compute(self, operation: str, left: Any, right: Any) -> Any:
        raise NotImplementedError

    def _binary(self, operation: str, other: Any, reflected: bool = False) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        left, right = (operand, self) if reflected else (self, operand)
        return type(self)._wrap(self._compute(operation, left.value, right.value))

    def _checked(self, operation: str, other: Any) -> Optional["Numeral"]:
        result = self._binary(operation, other)
        if result is NotImplemented:
            raise TypeError(
                f"unsupported operand types for {operation}: "
                f"{type(self).__name__!r} and {type(other).__name__!r}"
            )
        return result

    def checked_add(self, other: Any) -> Optional["Numeral"]:
        """Сумма или None, если операция завершилась бы ошибкой."""
        return self._checked("add", other)

    def checked_sub(self, other: Any) -> Optional["Numeral"]:
        """Разность или None, если операция завершилась бы ошибкой."""
        return self._checked("sub", other)

    def checked_mul(self, other: Any) -> Optional["Numeral"]:
        """Произведение или None, если операция завершилась бы ошибкой."""
        return self._checked("mul", other)

    def checked_div(self, other: Any) -> Optional["Numeral"]:
        """Частное или None, если операция завершилась бы ошибкой."""
        return self._checked("div", other)

    def checked_rem(self, other: Any) -> Optional["Numeral"]:
        """Остаток или None, если операция завершилась бы ошибкой."""
        return self._checked("rem", other)

    def __add__(self, other: Any) -> "Numeral":
        return self._binary("add", other)

    def __radd__(self, other: Any) -> "Numeral":
        return self._binary("add", other, reflected=True)

    def __sub__(self, other: Any) -> "Numeral":
        return self._binary("sub", other)

    def __rsub__(self, other: Any) -> "Numeral":
        return self._binary("sub", other, reflected=True)

    def __mul__(self, other: Any) -> "Numeral":
        return self._binary("mul", other)

    def __rmul__(self, other: Any) -> "Numeral":
        return self._binary("mul", other, reflected=True)

    def __truediv__(self, other: Any) -> "Numeral":
        return self._binary("div", other)

    def __rtruediv__(self, other: Any) -> "Numeral":
        return self._binary("div", other, reflected=True)

    def __mod__(self, other: Any) -> "Numeral":
        return self._binary("rem", other)

    def __rmod__(self, other: Any) -> "Numeral":
        return self._binary("rem", other, reflected=True)

    def __pos__(self) -> "Numeral":
        return self

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __ne__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value != other.value

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value >= other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __bool__(self) -> bool:
        return bool(self.value)

    def __float__(self) -> float:
        return float(self.value)


# =============================================================================
# INTEGER NUMERAL
# =============================================================================


class IntegerNumeral(Numeral):
    """
    Целое seximal число фиксированной ширины.

    Переполнение — ошибка (Overflow), не wraparound.
    Деление / остаток усекаются к нулю; деление на ноль → DivideByZero.
    """

    value: int = 0

    @field_validator("value", mode="before")
    @classmethod
    def validate_native(cls, v: Any) -> int:
        """Только нативные целые (bool и строки отвергаются)."""
        if isinstance(v, bool) or not isinstance(v, numbers.Integral):
            raise TypeError(f"{cls.__name__} requires an int, got {type(v).__name__}")
        return int(v)

    @field_validator("value")
    @classmethod
    def validate_range(cls, v: int) -> int:
        """
        Проверка диапазона нативного типа.

        Raises:
            Overflow: Значение вне [MIN, MAX]
        """
        return check_int_range(v, cls.SPEC)

    @classmethod
    def _decode(cls, text: str) -> int:
        return decode_integer(text, cls.SPEC)

    @classmethod
    def _is_native(cls, other: Any) -> bool:
        return isinstance(other, numbers.Integral) and not isinstance(other, bool)

    def to_text(self, config: Optional[TextFormatConfig] = None) -> str:
        """Base-6 текст значения. config влияет только на float; здесь не используется."""
        return encode_integer(self.value)

    def _compute(self, operation: str, left: int, right: int) -> int:
        return checked_int_arithmetic(operation, left, right, self.SPEC)

    def __floordiv__(self, other: Any) -> "IntegerNumeral":
        return self._binary("div", other)

    def __rfloordiv__(self, other: Any) -> "IntegerNumeral":
        return self._binary("div", other, reflected=True)

    def __divmod__(self, other: Any) -> tuple["IntegerNumeral", "IntegerNumeral"]:
        quotient = self._binary("div", other)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient, self._binary("rem", other)

    def __rdivmod__(self, other: Any) -> tuple["IntegerNumeral", "IntegerNumeral"]:
        quotient = self._binary("div", other, reflected=True)
        if quotient is NotImplemented:
            return NotImplemented
        return quotient, self._binary("rem", other, reflected=True)

    def __neg__(self) -> "IntegerNumeral":
        return type(self)._wrap(checked_int_arithmetic("sub", 0, self.value, self.SPEC))

    def __abs__(self) -> "IntegerNumeral":
        return type(self)._wrap(check_int_range(abs(self.value), self.SPEC))

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    # -------------------------------------------------------------------------
    # Checked arithmetic: None вместо Overflow / DivideByZero
    # -------------------------------------------------------------------------

    def _checked(self, operation: str, other: Any) -> Optional["IntegerNumeral"]:
        try:
            return super()._checked(operation, other)
        except (Overflow, DivideByZero):
            return None


# =============================================================================
# FLOAT NUMERAL
# =============================================================================


class FloatNumeral(Numeral):
    """
    Seximal число с плавающей точкой (single / double).

    Арифметика по IEEE-754 в точности типа: бесконечности и NaN
    распространяются, исключения не поднимаются. Сравнение сохраняет
    частичный порядок IEEE: NaN не равен ничему, включая себя.
    """

    value: float = 0.0

    @field_validator("value", mode="before")
    @classmethod
    def validate_native(cls, v: Any) -> float:
        """
        Только нативные числа; значение округляется к точности типа.

        Целые округляются корректно (без двойного округления).
        """
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise TypeError(f"{cls.__name__} requires a float, got {type(v).__name__}")
        if isinstance(v, numbers.Integral):
            return int_to_float(int(v), cls.SPEC)
        return round_to_precision(float(v), cls.SPEC)

    @classmethod
    def _decode(cls, text: str) -> float:
        return decode_float(text, cls.SPEC)

    @classmethod
    def _is_native(cls, other: Any) -> bool:
        return isinstance(other, numbers.Real) and not isinstance(other, bool)

    def to_text(self, config: Optional[TextFormatConfig] = None) -> str:
        return encode_float(self.value, config)

    def _compute(self, operation: str, left: float, right: float) -> float:
        return ieee_arithmetic(operation, left, right, self.SPEC)

    def __neg__(self) -> "FloatNumeral":
        return type(self)._wrap(-self.value)

    def __abs__(self) -> "FloatNumeral":
        return type(self)._wrap(abs(self.value))

    def __int__(self) -> int:
        return int(self.value)

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def is_finite(self) -> bool:
        return is_valid_float(self.value)
