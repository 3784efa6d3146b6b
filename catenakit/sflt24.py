"""Encoding of floats into the 24-bit signed floating-point wire format.

Bit 23 is the sign, bits 22..16 hold the binary exponent biased by 63,
and bits 15..0 hold the most significant 16 bits of the fraction below
the implied leading one. An exponent field of 0x7F means infinity (zero
mantissa) or NaN; an exponent field of 0 with a non-zero mantissa is a
denormal.
"""

from __future__ import annotations

import math
import struct

NAN_VALUE = 0x7F8000
INFINITY_VALUE = 0x7F0000
SIGN_BIT = 1 << 23


def _to_float32(value: float) -> float:
    """Round a Python float to single precision, saturating to infinity."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def f2sflt24(value: float) -> int:
    """Convert a float to its 24-bit representation, an int in 0..0xFFFFFF."""
    f = _to_float32(float(value))

    if math.isnan(f):
        return NAN_VALUE

    sign = SIGN_BIT if math.copysign(1.0, f) < 0 else 0

    if math.isinf(f):
        return INFINITY_VALUE | sign

    normal, exponent = math.frexp(f)
    normal = abs(normal)

    if normal == 0.0:
        return sign

    fraction_limit = 0x1FFFF
    out_exp = exponent - 1
    if out_exp > 63:
        return sign | INFINITY_VALUE
    if out_exp < -62:
        normal = _to_float32(math.ldexp(normal, out_exp + 62))
        out_exp = -63
        fraction_limit = 0xFFFF

    fraction = int(math.ldexp(normal, 17) + 0.5)

    if fraction > fraction_limit:
        if out_exp != -63:
            fraction = (fraction + 1) >> 1
        out_exp += 1

    if out_exp > 63:
        return sign | INFINITY_VALUE

    return sign | ((out_exp + 63) << 16) | (fraction & 0xFFFF)