"""
Tests for shifting a single literal inside a buffer.
"""

import pytest

from fly_numbers.driver import TextBuffer
from fly_numbers.literal import Case
from fly_numbers.settings import PaddingPolicy, RecognitionRules
from fly_numbers.shift import Shifted, ShiftRequest, shift


def run(text: str, delta: int, **kwargs) -> str:
    buf = TextBuffer(text)
    shift(buf, ShiftRequest(delta, (0, len(text)), **kwargs))
    return buf.text


class TestShift:
    def test_hex_in_text(self) -> None:
        buf = TextBuffer("abc 0x1F def")
        result = shift(buf, ShiftRequest(1, (0, 12)))
        assert buf.text == "abc 0x20 def"
        assert result == Shifted(4, 8, 0)

    def test_growth_is_reported(self) -> None:
        buf = TextBuffer("x 9 y")
        result = shift(buf, ShiftRequest(1, (0, 5)))
        assert buf.text == "x 10 y"
        assert result == Shifted(2, 4, 1)
        assert result.end == 4

    def test_not_found_leaves_buffer_alone(self) -> None:
        buf = TextBuffer("no numbers here")
        assert shift(buf, ShiftRequest(1, (0, 15))) is None
        assert buf.text == "no numbers here"

    def test_empty_span(self) -> None:
        buf = TextBuffer("12")
        assert shift(buf, ShiftRequest(1, (1, 1))) is None
        assert buf.text == "12"

    def test_span_is_clamped_to_buffer(self) -> None:
        buf = TextBuffer("5")
        assert shift(buf, ShiftRequest(1, (-3, 100))) == Shifted(0, 1, 0)
        assert buf.text == "6"

    def test_only_the_search_span_is_considered(self) -> None:
        buf = TextBuffer("1 2 3")
        shift(buf, ShiftRequest(10, (1, 5)))
        assert buf.text == "1 12 3"

    def test_arbitrary_precision(self) -> None:
        assert run("18446744073709551615", 1) == "18446744073709551616"
        assert run("0xffffffffffffffff", 1) == "0x10000000000000000"

    def test_binary_and_octal(self) -> None:
        assert run("0b0111", 1) == "0b1000"
        assert run("0o7", 1) == "0o10"

    def test_hex_case_policy(self) -> None:
        lower = RecognitionRules(hex_case=Case.LOWER)
        upper = RecognitionRules(hex_case=Case.UPPER)
        assert run("0xAB", 1, rules=lower) == "0xac"
        assert run("0xab", 1, rules=upper) == "0xAC"


class TestNegative:
    def test_negative_decrement(self) -> None:
        assert run("-5", -1) == "-6"

    def test_negative_recognition_disabled(self) -> None:
        """The minus sign is left in place as ordinary text"""
        rules = RecognitionRules(recognize_negative=False)
        assert run("-5", -1, rules=rules) == "-4"

    def test_crossing_zero(self) -> None:
        assert run("x = 2;", -5) == "x = -3;"
        assert run("x = -3;", 5) == "x = 2;"
        assert run("-1", 1) == "0"

    def test_crossing_zero_with_negatives_off(self) -> None:
        """Without negative recognition no minus sign is written"""
        rules = RecognitionRules(recognize_negative=False)
        assert run("x 0", -1, rules=rules) == "x 1"
        assert run("x 2", -5, rules=rules) == "x 3"

    def test_minus_in_identifier(self) -> None:
        assert run("foo-1", 1) == "foo-2"


class TestPadding:
    def test_decrement_to_padded(self) -> None:
        assert run("10", -1, padding=PaddingPolicy.PADDED) == "09"

    def test_leading_zero_is_always_padded(self) -> None:
        assert run("09", -1) == "08"
        assert run("09", -1, padding=PaddingPolicy.UNPADDED) == "08"
        assert run("09", 1) == "10"

    @pytest.mark.parametrize(
        "padding,pad_default,expected",
        [
            (PaddingPolicy.DEFAULT, False, "9"),
            (PaddingPolicy.DEFAULT, True, "09"),
            (PaddingPolicy.INVERT, False, "09"),
            (PaddingPolicy.INVERT, True, "9"),
            (PaddingPolicy.PADDED, False, "09"),
            (PaddingPolicy.UNPADDED, True, "9"),
        ],
    )
    def test_policy(
        self, padding: PaddingPolicy, pad_default: bool, expected: str
    ) -> None:
        assert run("10", -1, padding=padding, pad_default=pad_default) == expected

    def test_padding_grows_past_original_width(self) -> None:
        assert run("099", 1) == "100"
        assert run("099", 901) == "1000"

    def test_padded_hex(self) -> None:
        assert run("0x0F", 1) == "0x10"
        assert run("0x10", -1, padding=PaddingPolicy.PADDED) == "0x0f"


class TestSeparators:
    def test_separator_kept_from_the_right(self) -> None:
        rules = RecognitionRules(separator_chars="_")
        assert run("1_000", 1, rules=rules) == "1_001"

    def test_without_separator_chars(self) -> None:
        assert run("1_000", 1) == "2_000"

    def test_grouping_extends(self) -> None:
        rules = RecognitionRules(separator_chars=",")
        assert run("total: 999,999", 1, rules=rules) == "total: 1,000,000"
