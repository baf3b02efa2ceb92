"""Fixed-point phase accumulator stepping through a lookup table."""

from __future__ import annotations

from collections.abc import Sequence

from ctrlalt.interp import lerp_8_bit_buffer

_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


class PhaseAccumulator:
    """Phase accumulator whose integer part indexes a lookup table."""

    def __init__(self, lut_size: int, fractional_bits: int) -> None:
        if lut_size < 1:
            raise ValueError("lut_size must be positive")
        self.lut_size = lut_size
        self.fractional_bits = fractional_bits
        self.accumulator = 0
        self.phase_increment = 0
        self.divisor = 0
        self.index = 0
        self.next_index = 1
        self.fraction = 0

    def set_freq_divisor(self, divisor: int) -> None:
        """Set the right shift applied to the phase increment."""
        self.divisor = divisor

    def set_freq(self, freq: int, sample_rate: int) -> None:
        """Set the output frequency in Hz for a given sample rate."""
        if sample_rate <= 0:
            raise ValueError("sample_rate must be positive")
        one = (1 << self.fractional_bits) & _U32
        scaled = (freq * self.lut_size * one) & _U32
        self.phase_increment = (scaled // sample_rate) >> self.divisor

    def set_phase(self, phase: int) -> None:
        """Set the raw accumulator value."""
        self.accumulator = phase & _U32

    def advance(self) -> None:
        """Step the accumulator by one sample and update the table index."""
        bits = self.fractional_bits
        period = (self.lut_size << bits) & _U32
        self.accumulator = ((self.accumulator + self.phase_increment) & _U32) % period
        self.index = (self.accumulator >> bits) & _U16
        self.next_index = self.index % self.lut_size
        self.fraction = self.accumulator & ((1 << bits) - 1) & _U16

    def sample(self, lut: Sequence[int]) -> int:
        """Read the current 8-bit sample from ``lut``."""
        return lerp_8_bit_buffer(
            lut, self.fraction, self.index, self.next_index, self.fractional_bits
        )