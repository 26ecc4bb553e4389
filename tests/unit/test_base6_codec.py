"""
Тесты для модуля Base-6 Codec

Проверяет:
1. Декодирование целых (алфавит, знак, переполнение до commit)
2. Декодирование float (целая и дробная части, корректное округление)
3. Кодирование целых и float
4. Бюджет дробных цифр и TextFormatConfig
5. Обратимость decode(encode(v))
"""

import math
import random

import pytest

from seximal.core.domain.numeral_spec import (
    ALL_SPECS,
    SF52,
    SF144,
    SI12,
    SI24,
    SI332,
    SU12,
    SU24,
    SU332,
)
from seximal.core.errors import InvalidDigit, Overflow
from seximal.core.math.base6_codec import (
    MAX_FRACTION_DIGITS,
    SEXIMAL_BASE,
    SEXIMAL_DIGITS,
    TextFormatConfig,
    decode_float,
    decode_integer,
    encode_float,
    encode_integer,
)

INTEGER_SPECS = [spec for spec in ALL_SPECS if spec.is_integer]


# =============================================================================
# КОНСТАНТЫ
# =============================================================================


class TestConstants:
    """Тесты параметров формата"""

    def test_alphabet(self) -> None:
        """Алфавит — цифры 0-5 по возрастанию"""
        assert SEXIMAL_BASE == 6
        assert SEXIMAL_DIGITS == "012345"

    def test_fraction_budget_is_positive(self) -> None:
        """Бюджет дробных цифр фиксирован и положителен"""
        assert MAX_FRACTION_DIGITS == 24
        assert TextFormatConfig().max_fraction_digits == MAX_FRACTION_DIGITS

    def test_invalid_config_raises(self) -> None:
        """Нулевой бюджет запрещён"""
        with pytest.raises(ValueError, match="max_fraction_digits must be >= 1"):
            TextFormatConfig(max_fraction_digits=0)


# =============================================================================
# ДЕКОДИРОВАНИЕ ЦЕЛЫХ
# =============================================================================


class TestDecodeInteger:
    """Тесты для decode_integer"""

    def test_basic_values(self) -> None:
        """Базовые значения"""
        assert decode_integer("101", SU12) == 37
        assert decode_integer("21", SI332) == 13
        assert decode_integer("0", SU12) == 0
        assert decode_integer("5", SU12) == 5
        assert decode_integer("10", SU12) == 6

    def test_negative_values(self) -> None:
        """Знак '-' отрицает результат"""
        assert decode_integer("-100", SI332) == -36
        assert decode_integer("-1", SI12) == -1
        assert decode_integer("-0", SI12) == 0

    def test_leading_zeros_allowed(self) -> None:
        """Ведущие нули не меняют значение"""
        assert decode_integer("000101", SU12) == 37

    @pytest.mark.parametrize("text", ["9", "6", "12a", "1 2", " 1", "+1", "1.0", "١"])
    def test_invalid_characters(self, text: str) -> None:
        """Символ вне алфавита → InvalidDigit"""
        with pytest.raises(InvalidDigit):
            decode_integer(text, SI24)

    def test_invalid_digit_position(self) -> None:
        """InvalidDigit сообщает позицию и символ"""
        with pytest.raises(InvalidDigit) as exc_info:
            decode_integer("12a", SU24)

        assert exc_info.value.position == 2
        assert exc_info.value.char == "a"
        assert exc_info.value.text == "12a"

    def test_sign_not_at_start(self) -> None:
        """'-' не в начале строки → InvalidDigit"""
        with pytest.raises(InvalidDigit) as exc_info:
            decode_integer("1-2", SI12)
        assert exc_info.value.position == 1

        with pytest.raises(InvalidDigit):
            decode_integer("--1", SI12)

    def test_negative_sign_on_unsigned(self) -> None:
        """'-' для беззнакового типа → InvalidDigit (включая -0)"""
        with pytest.raises(InvalidDigit, match="negative sign not allowed"):
            decode_integer("-1", SU12)

        with pytest.raises(InvalidDigit):
            decode_integer("-0", SU332)

    @pytest.mark.parametrize("text", ["", "-"])
    def test_missing_digits(self, text: str) -> None:
        """Пустая группа цифр → InvalidDigit"""
        with pytest.raises(InvalidDigit, match="missing integer digits"):
            decode_integer(text, SI12)

    def test_non_string_rejected(self) -> None:
        """Не-строка → TypeError"""
        with pytest.raises(TypeError):
            decode_integer(b"101", SU12)

    def test_u8_boundary(self) -> None:
        """MAX(u8) = 255 = "1103", 256 = "1104" → Overflow"""
        assert decode_integer("1103", SU12) == 255

        with pytest.raises(Overflow):
            decode_integer("1104", SU12)

    def test_i8_boundaries(self) -> None:
        """i8: MAX = "331", MIN = "-332" """
        assert decode_integer("331", SI12) == 127
        assert decode_integer("-332", SI12) == -128

        with pytest.raises(Overflow):
            decode_integer("332", SI12)

        with pytest.raises(Overflow):
            decode_integer("-333", SI12)

    def test_u16_boundary(self) -> None:
        """MAX(u16) = 65535 = "1223223" """
        assert decode_integer("1223223", SU24) == 65535

        with pytest.raises(Overflow):
            decode_integer("1223224", SU24)

    def test_overflow_detected_with_long_input(self) -> None:
        """Очень длинный текст → Overflow, без wraparound"""
        with pytest.raises(Overflow):
            decode_integer("5" * 200, SU332)

    def test_overflow_carries_type_name(self) -> None:
        """Overflow содержит имя типа"""
        with pytest.raises(Overflow) as exc_info:
            decode_integer("1104", SU12)

        assert exc_info.value.type_name == "Su12"

    @pytest.mark.parametrize("spec", INTEGER_SPECS, ids=lambda s: s.name)
    def test_max_and_max_plus_one(self, spec) -> None:
        """parse(MAX) == MAX; parse(MAX + 1) → Overflow"""
        assert decode_integer(encode_integer(spec.max_value), spec) == spec.max_value

        with pytest.raises(Overflow):
            decode_integer(encode_integer(spec.max_value + 1), spec)

    @pytest.mark.parametrize("spec", [s for s in INTEGER_SPECS if s.signed], ids=lambda s: s.name)
    def test_min_and_min_minus_one(self, spec) -> None:
        """parse(MIN) == MIN; parse(MIN - 1) → Overflow"""
        assert decode_integer(encode_integer(spec.min_value), spec) == spec.min_value

        with pytest.raises(Overflow):
            decode_integer(encode_integer(spec.min_value - 1), spec)


# =============================================================================
# КОДИРОВАНИЕ ЦЕЛЫХ
# =============================================================================


class TestEncodeInteger:
    """Тесты для encode_integer"""

    def test_basic_values(self) -> None:
        """37 → "101", 13 → "21" """
        assert encode_integer(37) == "101"
        assert encode_integer(13) == "21"
        assert encode_integer(6) == "10"
        assert encode_integer(5) == "5"

    def test_zero(self) -> None:
        """Ноль → одна цифра "0" """
        assert encode_integer(0) == "0"

    def test_negative(self) -> None:
        """Отрицательные → префикс '-'"""
        assert encode_integer(-36) == "-100"
        assert encode_integer(-128) == "-332"

    def test_only_alphabet_characters(self) -> None:
        """Вывод содержит только цифры 0-5 и знак"""
        text = encode_integer(-(2**127))
        assert text[0] == "-"
        assert set(text[1:]) <= set(SEXIMAL_DIGITS)

    @pytest.mark.parametrize("spec", INTEGER_SPECS, ids=lambda s: s.name)
    def test_roundtrip_random_values(self, spec) -> None:
        """Инвариант: decode(encode(v)) == v"""
        rng = random.Random(spec.bits * 2 + spec.signed)
        values = [spec.min_value, spec.max_value, 0]
        values += [rng.randint(spec.min_value, spec.max_value) for _ in range(200)]

        for value in values:
            assert decode_integer(encode_integer(value), spec) == value


# =============================================================================
# ДЕКОДИРОВАНИЕ FLOAT
# =============================================================================


class TestDecodeFloat:
    """Тесты для decode_float"""

    def test_half(self) -> None:
        """"0.3" → 0.5 точно"""
        assert decode_float("0.3", SF144) == 0.5
        assert decode_float("0.3", SF52) == 0.5

    def test_integer_and_fraction(self) -> None:
        """Целая и дробная части"""
        assert decode_float("2.3", SF52) == 2.5
        assert decode_float("12.3", SF144) == 8.5
        assert decode_float("1.43", SF144) == 1.75
        assert decode_float("0.13", SF144) == 0.25

    def test_integer_only(self) -> None:
        """Без разделителя — целое значение"""
        assert decode_float("101", SF144) == 37.0

    def test_negative(self) -> None:
        """'-' отрицает результат"""
        assert decode_float("-1.43", SF144) == -1.75
        assert decode_float("-2.3", SF52) == -2.5

    def test_negative_zero(self) -> None:
        """"-0" → -0.0"""
        result = decode_float("-0", SF144)
        assert result == 0.0
        assert math.copysign(1.0, result) == -1.0

    def test_non_terminating_fraction_rounded(self) -> None:
        """"0.2" = 1/3 → ближайшее значение типа"""
        assert decode_float("0.2", SF144) == 1 / 3
        assert decode_float("0.2", SF52) == pytest.approx(1 / 3, rel=1e-7)

    @pytest.mark.parametrize("text", ["1.2.3", "1..2", ".5", "5.", "-.5", "", "-", "1.6", "0.3a"])
    def test_malformed_text(self, text: str) -> None:
        """Нарушение грамматики → InvalidDigit"""
        with pytest.raises(InvalidDigit):
            decode_float(text, SF144)

    @pytest.mark.parametrize("text", ["inf", "-inf", "NaN", "nan", "1e5"])
    def test_non_finite_tokens_rejected(self, text: str) -> None:
        """Текстовые inf / NaN не входят в грамматику"""
        with pytest.raises(InvalidDigit):
            decode_float(text, SF144)

    def test_single_overflow(self) -> None:
        """2^128 превышает диапазон f32 → Overflow"""
        with pytest.raises(Overflow):
            decode_float(encode_integer(2**128), SF52)

    def test_single_max_accepted(self) -> None:
        """MAX(f32) декодируется точно"""
        text = encode_integer(int(SF52.max_value))
        assert decode_float(text, SF52) == SF52.max_value

    def test_double_overflow(self) -> None:
        """2^1024 превышает диапазон f64 → Overflow"""
        with pytest.raises(Overflow):
            decode_float(encode_integer(2**1024), SF144)

        with pytest.raises(Overflow):
            decode_float("-" + encode_integer(2**1024), SF144)


# =============================================================================
# КОДИРОВАНИЕ FLOAT
# =============================================================================


class TestEncodeFloat:
    """Тесты для encode_float"""

    def test_half(self) -> None:
        """0.5 → "0.3" (0.5 * 6 = 3 ровно)"""
        assert encode_float(0.5) == "0.3"

    def test_basic_values(self) -> None:
        """Базовые значения"""
        assert encode_float(2.5) == "2.3"
        assert encode_float(1.75) == "1.43"
        assert encode_float(0.25) == "0.13"
        assert encode_float(8.5) == "12.3"

    def test_whole_number_has_no_separator(self) -> None:
        """Целые значения без '.'"""
        assert encode_float(3.0) == "3"
        assert encode_float(37.0) == "101"

    def test_zero(self) -> None:
        """0.0 и -0.0 → "0" """
        assert encode_float(0.0) == "0"
        assert encode_float(-0.0) == "0"

    def test_negative(self) -> None:
        """Отрицательные → префикс '-'"""
        assert encode_float(-2.5) == "-2.3"
        assert encode_float(-0.5) == "-0.3"

    def test_non_finite(self) -> None:
        """NaN / ±inf"""
        assert encode_float(math.nan) == "NaN"
        assert encode_float(math.inf) == "inf"
        assert encode_float(-math.inf) == "-inf"

    def test_fraction_budget_respected(self) -> None:
        """1/3 (не конечна в base-6 как double) → ровно MAX_FRACTION_DIGITS цифр"""
        text = encode_float(1 / 3)
        integer_part, fraction_part = text.split(".")

        assert integer_part == "0"
        assert len(fraction_part) == MAX_FRACTION_DIGITS
        # double(1/3) чуть меньше 1/3: 0.1555...
        assert fraction_part.startswith("15555")

    def test_custom_fraction_budget(self) -> None:
        """TextFormatConfig ограничивает число цифр; лишние отбрасываются"""
        assert encode_float(1 / 3, TextFormatConfig(max_fraction_digits=3)) == "0.155"
        assert encode_float(1.75, TextFormatConfig(max_fraction_digits=1)) == "1.4"

    def test_terminating_expansion_stops_early(self) -> None:
        """Конечное разложение не дополняется нулями"""
        assert encode_float(0.5, TextFormatConfig(max_fraction_digits=10)) == "0.3"

    def test_truncated_trailing_zeros_dropped(self) -> None:
        """Нули, оставшиеся после усечения по бюджету, отбрасываются"""
        assert encode_float(0.5 + 2**-40, TextFormatConfig(max_fraction_digits=5)) == "0.3"
        assert encode_float(-(2.0 + 2**-40), TextFormatConfig(max_fraction_digits=5)) == "-2"

    @pytest.mark.parametrize("value", [5e-324, -5e-324, 1e-30, 6.0**-25])
    def test_below_budget_renders_zero(self, value: float) -> None:
        """|x| < 6^-24 → "0", а не 24 нулевые цифры"""
        assert encode_float(value) == "0"

    def test_small_value_roundtrip_within_budget(self) -> None:
        """Для |x| < 0.1 decode(encode(x)) отличается от x не более чем на 6^-24"""
        value = 0.001
        decoded = decode_float(encode_float(value), SF144)

        assert abs(decoded - value) <= 6.0**-MAX_FRACTION_DIGITS
        # Усечение идёт к нулю
        assert decoded <= value

    def test_large_value_integer_part_exact(self) -> None:
        """Целая часть больших значений кодируется точно"""
        assert encode_float(2.0**100) == encode_integer(2**100)

    @pytest.mark.parametrize(
        "value",
        [0.1, 0.2, 0.5, 2.5, -1.75, math.pi, 1234.5678, -98765.4321, 1e10 + 0.25, 1e300],
    )
    def test_double_roundtrip(self, value: float) -> None:
        """Инвариант: decode(encode(v)) == v для |v| >= 0.1"""
        assert decode_float(encode_float(value), SF144) == value
