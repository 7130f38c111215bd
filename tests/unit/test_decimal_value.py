"""
Тесты для DecimalValue — операторы, сравнения, конверсии

Проверяемые инварианты:
1. Конкретные сценарии арифметики (сложение с переносом, floor/mod, степень)
2. Обратимость: (a + b) - b == a, (a * b) / b == a
3. Полнота порядка и равенство нулей с разными знаками
4. a == b * (a // b) + a % b, остаток со знаком делителя
5. Разбор литералов и текстовый round trip
6. In-place формы изменяют объект, копирующие — нет
"""

import pytest

from src.mnum import (
    DecimalValue,
    DivisionByZero,
    InvalidLiteral,
    MNumError,
    UnsupportedOperation,
    ValueOutOfRange,
)
from src.mnum.domain import parse_literal


D = DecimalValue

SAMPLES = ["0", "1", "-1", "7", "-7", "2.5", "-2.5", "123.45", "-0.001", "1000000000000000000000.75"]
NON_ZERO_SAMPLES = [s for s in SAMPLES if s != "0"]


# =============================================================================
# ТЕСТЫ: Конкретные сценарии
# =============================================================================


class TestScenarios:
    """Сценарии арифметики на строковых литералах."""

    def test_addition_with_fraction_carry(self) -> None:
        assert str(D("123.45") + D("1.6")) == "125.05"

    def test_subtraction_to_zero(self) -> None:
        result = D("5") - D("5.0")
        assert str(result) == "0"
        assert result.sign is False
        assert result.fraction == [0]

    def test_multiplication_strips_fraction(self) -> None:
        assert str(D("2") * D("0.5")) == "1"

    def test_division_family(self) -> None:
        assert str(D("7") / D("2")) == "3.5"
        assert str(D("7") // D("2")) == "3"
        assert str(D("7") % D("2")) == "1"

    def test_floor_toward_negative_infinity(self) -> None:
        assert str(D("-7") // D("2")) == "-4"
        assert str(D("-7") % D("2")) == "1"

    def test_power_and_zero_division(self) -> None:
        assert str(D("3") ** D("0")) == "1"
        assert str(D("0") ** D("5")) == "0"
        with pytest.raises(DivisionByZero):
            D("12.5") / D("0")


# =============================================================================
# ТЕСТЫ: Арифметические свойства
# =============================================================================


class TestArithmeticProperties:
    """Обратимость операций и тождество floor division."""

    def test_add_subtract_inverse(self) -> None:
        for a in map(D, SAMPLES):
            for b in map(D, SAMPLES):
                assert (a + b) - b == a
                assert (a - b) + b == a

    def test_multiply_divide_inverse(self) -> None:
        for a in map(D, SAMPLES):
            for b in map(D, NON_ZERO_SAMPLES):
                assert (a * b) / b == a

    def test_exact_division_round_trip(self) -> None:
        assert (D("10") / D("4")) * D("4") == D("10")
        assert (D("-1") / D("8")) * D("8") == D("-1")

    def test_inexact_division_within_precision(self) -> None:
        """(1 / 3) * 3 отличается от 1 не более чем на 1e-19."""
        difference = abs((D(1) / D(3)) * D(3) - D(1))
        assert difference <= D("0.0000000000000000001")

    def test_floor_mod_identity(self) -> None:
        for a in map(D, SAMPLES):
            for b in map(D, NON_ZERO_SAMPLES):
                assert b * (a // b) + a % b == a

    def test_modulo_sign_follows_divisor(self) -> None:
        for a in map(D, SAMPLES):
            for b in map(D, NON_ZERO_SAMPLES):
                remainder = a % b
                assert not remainder or remainder.sign == b.sign
                assert abs(remainder) < abs(b)

    def test_results_are_normalized(self) -> None:
        for a in map(D, SAMPLES):
            for b in map(D, NON_ZERO_SAMPLES):
                for result in (a + b, a - b, a * b, a / b, a // b, a % b):
                    assert result.integer and result.fraction
                    assert len(result.integer) == 1 or result.integer[0] != 0
                    assert len(result.fraction) == 1 or result.fraction[-1] != 0


# =============================================================================
# ТЕСТЫ: Сравнения
# =============================================================================


class TestComparison:
    """Тесты сравнений."""

    def test_totality(self) -> None:
        """Ровно одно из a < b, a == b, a > b."""
        for a in map(D, SAMPLES):
            for b in map(D, SAMPLES):
                assert [a < b, a == b, a > b].count(True) == 1

    def test_signed_zero_equal(self) -> None:
        negative_zero = D.from_digits(True, [0], [0])
        assert D(0) == negative_zero
        assert D(0) == D("-0")
        assert not D(0) < negative_zero
        assert not D(0) > negative_zero
        assert D(0) <= negative_zero
        assert D(0) >= negative_zero

    def test_ordering(self) -> None:
        assert D("-1.5") < D("-1.25")
        assert D("-1") < D(0)
        assert D("0.1") > D(0)
        assert D("10") > D("9.99")
        assert D("1.5") >= D("1.50")
        assert D("1.5") != D("1.05")

    def test_native_operands(self) -> None:
        assert D(5) == 5
        assert D("2.5") == 2.5
        assert D("2.5") == "2.50"
        assert D(-3) < 0

    def test_unsupported_type_not_equal(self) -> None:
        assert (D(1) == None) is False  # noqa: E711
        assert D(1) != [1]
        with pytest.raises(TypeError):
            D(1) < [1]

    def test_bool(self) -> None:
        assert not D("0.0")
        assert not D("-0")
        assert D("0.01")

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(D(1))


# =============================================================================
# ТЕСТЫ: Операторы
# =============================================================================


class TestOperators:
    """Тесты копирующих, изменяющих и отражённых операторов."""

    def test_copy_does_not_mutate(self) -> None:
        a, b = D("1.5"), D("2")
        _ = a + b
        _ = a * b
        assert str(a) == "1.5"
        assert str(b) == "2"

    def test_inplace_mutates_same_object(self) -> None:
        a = D(5)
        alias = a
        a += 2
        assert a is alias
        assert str(alias) == "7"

        a -= D("0.5")
        a *= 2
        assert str(alias) == "13"

        a //= 2
        assert str(alias) == "6"

        a %= 4
        assert str(alias) == "2"

        a /= 8
        assert str(alias) == "0.25"

        a **= 2
        assert str(alias) == "0.0625"

    def test_reflected_operands(self) -> None:
        assert 1 + D(2) == 3
        assert 10 - D(3) == 7
        assert 3 * D("0.5") == D("1.5")
        assert 7 / D(2) == D("3.5")
        assert 7 // D(2) == 3
        assert -7 % D(2) == 1
        assert 2 ** D(3) == 8
        assert "1.5" + D(1) == D("2.5")

    def test_divmod(self) -> None:
        quotient, remainder = divmod(D(-7), 2)
        assert quotient == -4
        assert remainder == 1
        assert divmod(7, D(2)) == (3, 1)

    def test_unsupported_operand_type(self) -> None:
        with pytest.raises(TypeError):
            D(1) + [1]
        with pytest.raises(TypeError):
            D(1) * None

    def test_unary(self) -> None:
        a = D("-2.5")
        assert str(-a) == "2.5"
        assert str(+a) == "-2.5"
        assert +a is not a
        assert str(abs(a)) == "2.5"

    def test_negated_zero_is_non_negative(self) -> None:
        assert (-D(0)).sign is False
        assert (-D("0.0")).sign is False
        assert (-D(0)).to_snapshot().sign is False
        assert str(D(5).add(-D(0))) == "50"

    def test_truncating_division(self) -> None:
        assert str(D("-7.5").div(2)) == "-3"
        assert str(D("7").div(D("-2"))) == "-3"
        a = D(17)
        a.idiv(5)
        assert str(a) == "3"

    def test_divide_with_precision(self) -> None:
        assert str(D(1).divide(3, precision=5)) == "0.33334"
        assert str(D(1).divide(8, precision=5)) == "0.125"

    def test_division_by_zero_family(self) -> None:
        for operation in (
            lambda: D(1) / 0,
            lambda: D(1) // 0,
            lambda: D(1) % D("0.0"),
            lambda: divmod(D(1), 0),
            lambda: D(1).div(0),
            lambda: D(0) ** -1,
        ):
            with pytest.raises(DivisionByZero):
                operation()

    def test_division_by_zero_inplace_keeps_value(self) -> None:
        a = D("4.5")
        with pytest.raises(ZeroDivisionError):
            a /= 0
        assert str(a) == "4.5"

    def test_fractional_exponent(self) -> None:
        with pytest.raises(UnsupportedOperation, match="fractional exponent"):
            D(2) ** D("0.5")
        with pytest.raises(ValueError):
            D(2).pow("1.5")

    def test_power(self) -> None:
        assert str(D("1.1") ** 2) == "1.21"
        assert str(D(2) ** -2) == "0.25"
        assert str(D(-2) ** 2) == "-4"
        assert str(D(10) ** 25) == "1" + "0" * 25

    def test_big_numbers(self) -> None:
        a = D("9" * 32 + ".999")
        assert str(a + D("0.001")) == "1" + "0" * 32
        big = 123456789012345678901234567890
        assert int(D(big) * D(big)) == big * big


# =============================================================================
# ТЕСТЫ: Разбор и конверсии
# =============================================================================


class TestParsing:
    """Тесты parse_literal и конструктора."""

    def test_normalized(self) -> None:
        parts = parse_literal("-012.340")
        assert parts.sign is True
        assert parts.integer == [1, 2]
        assert parts.fraction == [3, 4]

    def test_negative_zero_literal_is_non_negative(self) -> None:
        assert parse_literal("-0").sign is False
        assert parse_literal("-0.000").sign is False
        assert D("-0").sign is False
        assert D.from_digits(True, [0, 0], [0]).sign is False

    def test_optional_parts(self) -> None:
        assert str(D("+3")) == "3"
        assert str(D("1.")) == "1"
        assert str(D(".5")) == "0.5"
        assert str(D("-0.0")) == "0"

    def test_invalid_literals(self) -> None:
        for text in ("", "+", "-", ".", "1.2.3", " 1", "1e5", "abc", "1,5", "--1", "１"):
            with pytest.raises(InvalidLiteral):
                D(text)

    def test_invalid_literal_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid number"):
            D("12x")
        with pytest.raises(MNumError):
            D("")

    def test_string_round_trip(self) -> None:
        cases = {
            "0": "0",
            "-5": "-5",
            "007.50": "7.5",
            "+0.000100": "0.0001",
            "-123456789.987654321": "-123456789.987654321",
        }
        for literal, expected in cases.items():
            assert str(D(literal)) == expected

    def test_from_int(self) -> None:
        assert str(D(0)) == "0"
        assert str(D(-1200)) == "-1200"
        assert str(D(10**30)) == "1" + "0" * 30

    def test_from_float(self) -> None:
        assert str(D(0.5)) == "0.5"
        assert str(D(-2.0)) == "-2"
        assert str(D(123.25)) == "123.25"

    def test_float_scientific_rejected(self) -> None:
        with pytest.raises(InvalidLiteral, match="scientific notation"):
            D(1e-7)
        with pytest.raises(InvalidLiteral):
            D(float("nan"))
        with pytest.raises(InvalidLiteral):
            D(float("inf"))

    def test_copy_constructor(self) -> None:
        a = D("-1.5")
        b = D(a)
        b += 1
        assert str(a) == "-1.5"
        assert str(b) == "-0.5"

    def test_unsupported_constructor_type(self) -> None:
        with pytest.raises(TypeError, match="unsupported type"):
            D([1, 2])

    def test_from_digits(self) -> None:
        assert str(D.from_digits(False, [0, 0, 1], [2, 0])) == "1.2"
        assert str(D.from_digits(True, [4, 2])) == "-42"

    def test_from_digits_invalid(self) -> None:
        with pytest.raises(ValueOutOfRange):
            D.from_digits(False, [1, 10], [0])
        with pytest.raises(ValueOutOfRange):
            D.from_digits(False, [1], [-1])

    def test_from_digits_copies_input(self) -> None:
        integer = [1, 2]
        value = D.from_digits(False, integer)
        value += 1
        assert integer == [1, 2]


class TestConversions:
    """Тесты конверсий в нативные типы и строки."""

    def test_int_truncates(self) -> None:
        assert int(D("-12.9")) == -12
        assert int(D("12.9")) == 12
        assert int(D("0.5")) == 0

    def test_float(self) -> None:
        assert float(D("-1.25")) == -1.25
        assert float(D(3)) == 3.0

    def test_str_and_float_str(self) -> None:
        assert str(D(5)) == "5"
        assert D(5).float_str() == "5.0"
        assert D("-1.5").float_str() == "-1.5"
        assert D(0).float_str() == "0.0"

    def test_repr(self) -> None:
        assert repr(D("1.5")) == "DecimalValue('1.5')"

    def test_parts(self) -> None:
        a = D("-12.034")
        assert str(a.as_int()) == "-12"
        assert str(a.int_part()) == "-12"
        assert str(a.as_float()) == "-0.034"
        assert str(a.frac_part()) == "-34"

    def test_parts_of_integer(self) -> None:
        a = D(7)
        assert str(a.as_float()) == "0"
        assert str(a.frac_part()) == "0"
