"""Waveform shapes evaluated on a normalised phase, and sine lookup tables."""

from __future__ import annotations

import math
import struct

_PI = math.pi
_SQUARE_SCALE = 1.999999


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def uint_sine(phase: float, max_val: int) -> int:
    """Sine wave starting at its minimum; phase 0.0-1.0 maps to 0..max_val."""
    p = _f32(phase)
    arg = _f32(_f32(p * 2.0) * _PI - _PI / 2.0)
    s = _f32(math.sin(arg))
    level = _f32(_f32(s / 2.0) + 0.5)
    return int(_f32(level * _f32(max_val)))


def uint_sawtooth(phase: float, max_val: int) -> int:
    """Rising ramp; phase 0.0-1.0 maps to 0..max_val."""
    return int(_f32(_f32(phase) * _f32(max_val)))


def uint_triangle(phase: float, max_val: int) -> int:
    """Triangle wave peaking at phase 0.5."""
    p = _f32(phase)
    level = _f32(1.0 - abs(_f32(_f32(2.0 * p) - 1.0)))
    return int(_f32(level * _f32(max_val)))


def uint_square(phase: float, max_val: int) -> int:
    """Square wave: low for the first half of the cycle, high for the second."""
    p = _f32(phase)
    level = math.floor(_f32(_f32(_SQUARE_SCALE) * p))
    return int(_f32(level * _f32(max_val)))


def uint_steps(phase: float, n_steps: int, max_val: int) -> int:
    """Staircase of ``n_steps`` levels spread between 0 and max_val."""
    if n_steps < 2:
        raise ValueError("n_steps must be at least 2")
    p = _f32(phase)
    step = math.floor(_f32(p * n_steps))
    level = _f32(step / _f32(n_steps - 1))
    return int(_f32(level * _f32(max_val)))


def lut_8_bit_sine(lut_size: int) -> bytes:
    """Build an 8-bit sine lookup table covering one full cycle."""
    if lut_size < 2:
        raise ValueError("lut_size must be at least 2")
    inc = _f32(1.0 / (lut_size - 1))
    return bytes(uint_sine(_f32(i * inc), 0xFF) & 0xFF for i in range(lut_size))