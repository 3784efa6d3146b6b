"""Parsing of hexadecimal field values typed by a user for FRAM storage.

A value is a string of hex digits, optionally split into runs by '-'.
Each run is read as bytes from the left; a run with an odd number of
digits gives its first byte from a single digit, so "abc" reads as
0x0a, 0xbc. If fewer bytes are given than the field holds, the bytes
are right-justified with leading zeros. Number fields are stored
little-endian, so their bytes are reversed at the end.
"""

from __future__ import annotations

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _nibble(text: str, pos: int) -> tuple[int, int]:
    """Read one hex digit at pos; return (value, new position) or (-1, pos)."""
    if pos < len(text) and text[pos] in _HEX_DIGITS:
        return int(text[pos], 16), pos + 1
    return -1, pos


def parse_field(text: str, size: int, is_number: bool) -> bytes:
    """Parse a hex field value into exactly size bytes.

    Raises ValueError if the text holds anything other than hex digits
    separated by single dashes, or if size is negative. Text beyond
    the first size bytes is ignored.
    """
    if size < 0:
        raise ValueError(f"field size must not be negative, got {size}")

    # Only the part before an embedded NUL counts.
    text = text.split("\0", 1)[0]
    end = len(text)

    parsed = bytearray()
    pos = 0
    term: int | None = None

    while len(parsed) < size:
        if term is None or term == pos:
            dash = text.find("-", pos)
            term = dash if dash >= 0 else end

        have_pair = (term - pos) % 2 == 0
        value, pos = _nibble(text, pos)
        if have_pair and value >= 0:
            low, next_pos = _nibble(text, pos)
            if low >= 0:
                value = value * 16 + low
                pos = next_pos

        if value < 0:
            if pos >= end:
                break
            raise ValueError(
                f"invalid character {text[pos]!r} at position {pos} in {text!r}"
            )

        parsed.append(value)

        if pos < end and text[pos] == "-" and pos + 1 < end:
            pos += 1
            term = None

    result = bytes(size - len(parsed)) + bytes(parsed)
    if is_number:
        result = result[::-1]
    return result