import pytest

from catenakit.framformat import format_field
from catenakit.framparse import parse_field

SAMPLES = [
    b"\x00",
    b"\x7f",
    b"\x01\x02",
    b"\xde\xad\xbe\xef",
    b"\x10\x20\x30\x40\x50",
    bytes(range(8)),
    bytes(range(0xF0, 0x100)),
]


def test_empty_data_formats_to_empty_string():
    assert format_field(b"", True) == ""
    assert format_field(b"", False) == ""


def test_small_number_is_reversed_without_separators():
    assert format_field(b"\x01\x02\x03\x04", True) == "04030201"


def test_large_number_is_reversed_with_separators():
    assert format_field(bytes(range(8)), True) == "07-06-05-04-03-02-01-00"


def test_non_number_keeps_order_with_separators():
    assert format_field(b"\x0a\xbc\x0d", False) == "0a-bc-0d"


@pytest.mark.parametrize("data", SAMPLES)
def test_digits_are_lower_case_hex(data):
    text = format_field(data, False)
    assert text == text.lower()
    assert all(ch in "0123456789abcdef-" for ch in text)


@pytest.mark.parametrize("data", SAMPLES)
def test_non_number_length(data):
    assert len(format_field(data, False)) == 3 * len(data) - 1


@pytest.mark.parametrize("data", SAMPLES)
def test_number_length(data):
    expected = 2 * len(data) if len(data) <= 4 else 3 * len(data) - 1
    assert len(format_field(data, True)) == expected


@pytest.mark.parametrize("data", SAMPLES)
@pytest.mark.parametrize("is_number", [True, False])
def test_round_trip_through_parse(data, is_number):
    text = format_field(data, is_number)
    assert parse_field(text, len(data), is_number) == data


@pytest.mark.parametrize("data", SAMPLES)
def test_number_and_plain_relate_by_reversal(data):
    plain = format_field(data[::-1], False)
    number = format_field(data, True)
    assert number.replace("-", "") == plain.replace("-", "")


def test_accepts_bytearray():
    assert format_field(bytearray(b"\x01\x02"), False) == format_field(b"\x01\x02", False)