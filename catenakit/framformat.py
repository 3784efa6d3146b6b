"""Formatting of FRAM field values as hexadecimal text.

Bytes are written as two lower-case hex digits each. Number fields are
stored little-endian, so they are printed most significant byte first;
numbers of four bytes or fewer are printed as one run of digits, larger
ones with a '-' between bytes. Other fields are printed in storage
order with a '-' between bytes.
"""

from __future__ import annotations


def format_field(data: bytes, is_number: bool) -> str:
    """Return the hex text for a stored field value."""
    values = bytes(data)
    if is_number:
        ordered = values[::-1]
        separator = "" if len(values) <= 4 else "-"
    else:
        ordered = values
        separator = "-"
    return separator.join(f"{b:02x}" for b in ordered)