"""Tests for field parsing primitives and combinators."""

import pytest

from gpsnmea.nmea.primitives import (
    SKIPPED,
    apply,
    check,
    first_of,
    fixed_uint,
    literal,
    optional,
    parse_complete,
    preceded,
    real,
    repeat,
    sequence,
    symbol_table,
    uint,
)


class TestFixedUint:
    def test_consumes_exactly_width_digits(self):
        assert fixed_uint(10, 2)("12345", 0) == (12, 2)

    def test_starts_at_position(self):
        assert fixed_uint(10, 3)("xx011,", 2) == (11, 5)

    def test_too_few_characters(self):
        assert fixed_uint(10, 2)("1", 0) is None

    def test_separator_inside_window(self):
        assert fixed_uint(10, 2)("1,", 0) is None

    def test_non_digit_inside_window(self):
        assert fixed_uint(10, 2)("1a", 0) is None

    def test_sign_is_not_a_digit(self):
        assert fixed_uint(10, 2)("+1", 0) is None

    def test_hexadecimal_upper_and_lower_case(self):
        assert fixed_uint(16, 2)("7F", 0) == (0x7F, 2)
        assert fixed_uint(16, 2)("7f", 0) == (0x7F, 2)

    def test_hexadecimal_rejects_non_hex(self):
        assert fixed_uint(16, 2)("4G", 0) is None

    def test_decimal_rejects_hex_letters(self):
        assert fixed_uint(10, 2)("0A", 0) is None


class TestUint:
    def test_unbounded_width(self):
        assert uint()("0000*51", 0) == (0, 4)

    def test_requires_a_digit(self):
        assert uint()(",", 0) is None


class TestReal:
    @pytest.mark.parametrize(
        ("text", "expected", "end"),
        [
            ("545.4,M", 545.4, 5),
            ("-30.0,", -30.0, 5),
            ("19", 19.0, 2),
            ("07.038,N", 7.038, 6),
            (".5*", 0.5, 2),
            ("5.,", 5.0, 2),
        ],
    )
    def test_accepted_forms(self, text, expected, end):
        assert real()(text, 0) == (expected, end)

    def test_rejects_empty_field(self):
        assert real()(",", 0) is None

    def test_rejects_letters(self):
        assert real()("bad", 0) is None

    def test_exponent_is_not_consumed(self):
        assert real()("1e5", 0) == (1.0, 1)


class TestLiteral:
    def test_match_is_skipped(self):
        assert literal("GGA")("GGA,", 0) == (SKIPPED, 3)

    def test_mismatch(self):
        assert literal("GGA")("GLL,", 0) is None


class TestSymbolTable:
    def test_known_code(self):
        table = symbol_table({"A": "active", "V": "void"})
        assert table("V*", 0) == ("void", 1)

    def test_unknown_code(self):
        assert symbol_table({"A": 1})("X", 0) is None

    def test_longest_code_wins(self):
        table = symbol_table({"G": 1, "GN": 2})
        assert table("GNGGA", 0) == (2, 2)


class TestOptional:
    def test_empty_before_comma(self):
        assert optional(real())(",M", 0) == (None, 0)

    def test_empty_before_checksum(self):
        assert optional(uint())("*47", 0) == (None, 0)

    def test_empty_at_end_of_input(self):
        assert optional(uint())("", 0) == (None, 0)

    def test_present_value(self):
        assert optional(real())("1.0,", 0) == (1.0, 3)

    def test_garbage_is_failure_not_absence(self):
        assert optional(real())("x,", 0) is None


class TestSequence:
    def test_literals_are_dropped(self):
        parser = sequence(fixed_uint(10, 2), literal(","), real())
        assert parser("12,3.5", 0) == ((12, 3.5), 6)

    def test_partial_match_fails_as_a_whole(self):
        parser = sequence(fixed_uint(10, 2), literal(","), real())
        assert parser("12,x", 0) is None


class TestCombinators:
    def test_preceded_keeps_second_value(self):
        assert preceded(literal("*"), fixed_uint(16, 2))("*39", 0) == (0x39, 3)

    def test_repeat_within_bounds(self):
        parser = repeat(preceded(literal(","), uint()), 1, 4)
        assert parser(",1,2,3*", 0) == ((1, 2, 3), 6)

    def test_repeat_below_minimum(self):
        parser = repeat(preceded(literal(","), uint()), 1, 4)
        assert parser("*", 0) is None

    def test_repeat_stops_at_maximum(self):
        parser = repeat(preceded(literal(","), uint()), 1, 2)
        assert parser(",1,2,3", 0) == ((1, 2), 4)

    def test_check_rejects_value(self):
        parser = check(uint(), lambda value: value <= 12)
        assert parser("13", 0) is None
        assert parser("12", 0) == (12, 2)

    def test_apply_transforms_value(self):
        assert apply(uint(), str)("42", 0) == ("42", 2)

    def test_first_of_is_ordered(self):
        parser = first_of(apply(literal("A"), lambda _: 1), apply(literal("A"), lambda _: 2))
        assert parser("A", 0) == (1, 1)

    def test_first_of_all_fail(self):
        assert first_of(literal("A"), literal("B"))("C", 0) is None


class TestParseComplete:
    def test_full_consumption(self):
        assert parse_complete(uint(), "123") == 123

    def test_trailing_characters_fail(self):
        assert parse_complete(uint(), "123 ") is None

    def test_parser_failure(self):
        assert parse_complete(uint(), "x") is None
