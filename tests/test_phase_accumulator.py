import pytest

from ctrlalt.phase_accumulator import PhaseAccumulator


def test_initial_state():
    acc = PhaseAccumulator(421, 16)
    assert acc.lut_size == 421
    assert acc.fractional_bits == 16
    assert (acc.accumulator, acc.phase_increment, acc.divisor) == (0, 0, 0)
    assert (acc.index, acc.next_index, acc.fraction) == (0, 1, 0)


def test_one_step_per_sample_walks_the_table():
    acc = PhaseAccumulator(4, 16)
    acc.set_freq(1, 4)
    assert acc.phase_increment == 1 << 16
    indices = []
    for _ in range(5):
        acc.advance()
        indices.append(acc.index)
    assert indices == [1, 2, 3, 0, 1]


def test_divisor_shifts_increment():
    acc = PhaseAccumulator(4, 16)
    acc.set_freq_divisor(3)
    acc.set_freq(1, 4)
    assert acc.phase_increment == (1 << 16) >> 3


def test_fraction_holds_sub_index_phase():
    acc = PhaseAccumulator(4, 16)
    acc.set_freq(1, 8)
    acc.advance()
    assert acc.index == 0
    assert acc.fraction == 1 << 15


def test_sample_reads_current_index():
    lut = [10, 20, 30, 40]
    acc = PhaseAccumulator(4, 16)
    acc.set_freq(1, 8)
    for _ in range(7):
        acc.advance()
        assert acc.next_index == acc.index
        assert acc.sample(lut) == lut[acc.index]


def test_set_phase_resets_accumulator():
    acc = PhaseAccumulator(4, 16)
    acc.set_freq(1, 4)
    acc.advance()
    acc.advance()
    acc.set_phase(0)
    assert acc.accumulator == 0
    acc.advance()
    assert acc.index == 1


def test_accumulator_stays_within_period():
    acc = PhaseAccumulator(421, 16)
    acc.set_freq(133, 3000)
    for _ in range(2000):
        acc.advance()
        assert acc.accumulator < 421 << 16
        assert acc.index < 421


def test_zero_sample_rate_rejected():
    acc = PhaseAccumulator(4, 16)
    with pytest.raises(ValueError):
        acc.set_freq(1, 0)


def test_zero_lut_size_rejected():
    with pytest.raises(ValueError):
        PhaseAccumulator(0, 16)