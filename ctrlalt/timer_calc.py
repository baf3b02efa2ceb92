"""Prescaler and counter selection for a timer running at a target rate."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_U16 = 0xFFFF


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class TimerConfig:
    """Timer setting: prescaler as a power-of-two shift and counter reload value."""

    prescaler: int
    counter: int


def timer_config(
    cpu_frequency: int,
    desired_frequency: float,
    max_prescaler_bit_shift: int,
    max_counter_val: int,
) -> TimerConfig:
    """Pick the smallest prescaler whose counter value fits for the desired rate.

    Rates that are zero, negative, not below the CPU frequency or too slow to
    reach fall back to the slowest setting.
    """
    desired = _f32(desired_frequency)
    cpu = _f32(cpu_frequency)
    limit = _f32(max_counter_val)
    if 0.0 < desired < cpu:
        for presc in range(max_prescaler_bit_shift + 1):
            base = _f32(cpu / _f32(1 << presc))
            cnt = _f32(base / desired)
            if 1 < cnt <= limit:
                return TimerConfig(presc, int(cnt) & _U16)
    return TimerConfig(max_prescaler_bit_shift & _U16, max_counter_val & _U16)