import pytest

from ctrlalt.timer_calc import TimerConfig, timer_config

CPU = 16_000_000


def test_systick_rate_needs_no_prescaler():
    assert timer_config(CPU, 10_000.0, 15, 65535) == TimerConfig(0, 1600)


def test_very_slow_rate():
    assert timer_config(CPU, 0.1, 15, 65535) == TimerConfig(12, 39062)


@pytest.mark.parametrize("rate", [0.0, -5.0, float(CPU), 2.0 * CPU])
def test_out_of_range_falls_back_to_slowest(rate):
    assert timer_config(CPU, rate, 15, 65535) == TimerConfig(15, 65535)


def test_unreachable_rate_falls_back_to_slowest():
    assert timer_config(CPU, 0.0001, 15, 65535) == TimerConfig(15, 65535)


@pytest.mark.parametrize("rate", [0.5, 3.0, 100.0, 500.0, 3000.0, 38000.0])
def test_counter_and_prescaler_reproduce_rate(rate):
    conf = timer_config(CPU, rate, 15, 65535)
    assert 1 < conf.counter <= 65535
    period = conf.counter * (1 << conf.prescaler)
    assert abs(period - CPU / rate) <= (1 << conf.prescaler)


@pytest.mark.parametrize("rate", [0.5, 3.0, 100.0])
def test_prescaler_is_smallest_that_fits(rate):
    conf = timer_config(CPU, rate, 15, 65535)
    if conf.prescaler > 0:
        assert CPU / (1 << (conf.prescaler - 1)) / rate > 65535
    assert conf.prescaler <= 15