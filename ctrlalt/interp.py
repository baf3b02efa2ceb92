"""Fixed-point interpolation and clamping helpers."""

from __future__ import annotations

from collections.abc import Sequence

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


def clamp_10_bit(val: int) -> int:
    """Clamp a value to the 10-bit range 0..1023."""
    return 1023 if val > 1023 else val


def lerp_8_bit_buffer(
    buffer: Sequence[int],
    alpha: int,
    index: int,
    next_index: int,
    fraction_bits: int,
) -> int:
    """Interpolate between two buffer entries using a fixed-point fraction."""
    v1 = buffer[index] & _U8
    v2 = buffer[next_index] & _U8
    step = ((alpha * (v2 - v1)) & _U32) >> fraction_bits
    return (v1 + step) & _U8


def lerp_8_bit(a: int, b: int, weight: int) -> int:
    """Blend two 8-bit values by a 10-bit weight (0 selects ``a``)."""
    complement = (1023 - weight) & _U16
    contrib1 = (complement * a) & _U32
    contrib2 = (weight * b) & _U32
    return (((contrib1 + contrib2) & _U32) >> 10) & _U8


def interpolate_three_points(a: int, b: int, c: int, weight: int) -> int:
    """Interpolate across a, b and c with a 10-bit weight split in three."""
    if weight < 341:
        local = weight & _U16
        lo, hi = a, b
    elif weight < 682:
        local = (weight - 341) & _U16
        lo, hi = b, c
    else:
        local = (weight - 682) & _U16
        lo, hi = c, c
    total = ((((341 - local) & _U32) * lo) + local * hi) & _U32
    return (total // 341) & _U8


def linear_interpolate(x: int, x0: int, y0: int, x1: int, y1: int) -> int:
    """Interpolate y at x on the line through (x0, y0) and (x1, y1)."""
    if x1 == x0:
        return y0
    numerator = (((x - x0) & _U32) * (y1 - y0)) & _U32
    return (y0 + numerator // ((x1 - x0) & _U32)) & _U16


def interpolate_lut(i_index: int, lut: Sequence[int], max_index: int) -> int:
    """Look up ``i_index`` (0..max_index) in a table spread over that range."""
    if not lut:
        raise ValueError("lut must not be empty")
    if i_index == 0:
        return lut[0]
    if i_index > max_index:
        return lut[-1]
    last = len(lut) - 1
    if last == 0:
        raise ValueError("lut needs at least two entries to interpolate")
    index = (i_index * last // (max_index + 1)) & _U16
    next_index = last if index == last else index + 1
    x0 = (index * max_index // last) & _U16
    x1 = (next_index * max_index // last) & _U16
    return linear_interpolate(i_index, x0, lut[index], x1, lut[next_index])