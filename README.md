# ctrlalt

`ctrlalt` holds the building blocks of a small modular-synthesizer utility
module in pure Python. The module has three pots, three CV inputs, three pulse
inputs, three outputs and three LEDs. The package gives you two things:

- the fixed-point DSP helpers used to generate control signals;
- a simulated board with GPIO pins, a six-channel ADC and an interrupt vector
  table.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## DSP helpers

### `ctrlalt.waveforms`

These functions compute integer waveforms from a phase in `[0, 1]`, scaled to
`0..max_val`. The arithmetic is done in single precision.

- `uint_sine`
- `uint_sawtooth`
- `uint_triangle`
- `uint_square`
- `uint_steps`

`uint_steps` raises `ValueError` when `n_steps` is below 2.

`lut_8_bit_sine(lut_size)` returns a `bytes` sine table covering one cycle.

### `ctrlalt.interp`

Fixed-point interpolation helpers:

- `clamp_10_bit`: caps a value at 1023.
- `lerp_8_bit`: blends two bytes by a 10-bit weight.
- `lerp_8_bit_buffer`: interpolates between two buffer entries using a
  fixed-point fraction.
- `interpolate_three_points`: splits the 10-bit weight into three intervals.
- `linear_interpolate`: interpolates along the line through two points.
- `interpolate_lut`: maps an input in `0..max_index` onto a table and
  interpolates between neighbouring entries.

### `ctrlalt.phase_accumulator.PhaseAccumulator`

A lookup-table oscillator with a fractional phase accumulator.

- `set_freq(freq, sample_rate)` and `set_freq_divisor(divisor)` set the step.
- `set_phase` sets the raw accumulator value.
- `advance()` moves one sample forward.
- `sample(lut)` reads the interpolated 8-bit value.

```python
from ctrlalt.phase_accumulator import PhaseAccumulator
from ctrlalt.waveforms import lut_8_bit_sine

lut = lut_8_bit_sine(421)
osc = PhaseAccumulator(421, 16)
osc.set_freq(2, 3000)
osc.advance()
print(osc.sample(lut))
```

### `ctrlalt.ring_buffer.RingBuffer`

A fixed-size byte FIFO.

- `put` overwrites the oldest byte when the buffer is full.
- `get` never fails: on an empty buffer it returns the byte at the read
  position.
- `is_empty`, `is_full`, `reset`, `len()` and `capacity` report and control
  its state.

### `ctrlalt.timer_calc`

`timer_config(cpu_frequency, desired_frequency, max_prescaler_bit_shift,
max_counter_val)` returns a `TimerConfig(prescaler, counter)`. It picks the
smallest power-of-two prescaler whose counter value fits. Rates that are zero,
too slow, or not below the CPU frequency fall back to the slowest setting.

```python
from ctrlalt.timer_calc import timer_config

print(timer_config(16_000_000, 500.0, 15, 0xFFFF))  # TimerConfig(prescaler=0, counter=32000)
```

## Simulated board: `ctrlalt.hardware`

### `Board(outputs)`

`Board` takes three `OutputMode` values, `DIGITAL` or `ANALOG`. It lays out the
pins as follows:

- the mode and trigger switches;
- pulse inputs `in0`–`in2`;
- LEDs `led0`–`led2`;
- `out0`–`out2`, which are set only for outputs in `DIGITAL` mode.

Each `Pin` honours the board's polarity in `set` and `read`. `Port` objects
hold the `odr` and `idr` registers, so you simulate an input level by writing
`idr`. `setup_input_pins` and `setup_output_pins` configure the pins, and
`setup_output_pins` drives every output low.

### `Adc(cpu_freq, sample_rate)`

`Adc` models six 10-bit channels, named by `AdcChannel` (`POT0`–`POT2`,
`CV0`–`CV2`).

- `set_input` sets the level present at a channel. It must be within `0..1023`,
  otherwise `ValueError` is raised.
- `convert()` latches all inputs.
- `get` returns the last converted value.
- `timer` holds the timer setting that paces the conversions.

### `InterruptTable`

`InterruptTable` holds handlers for the vectors listed in `Interrupt`.

- `attach` works only for EXTI port D, the TIM1/TIM2/TIM3 update vectors and
  ADC1. Any other vector raises `ValueError`.
- `fire` on one of those vectors calls its handler, and raises `RuntimeError`
  if none is attached. Other vectors are ignored.

```python
from ctrlalt.hardware import Adc, AdcChannel, Interrupt, InterruptTable

adc = Adc(16_000_000, 500.0)
table = InterruptTable()
table.attach(Interrupt.ADC1, adc.convert)

adc.set_input(AdcChannel.CV0, 512)
table.fire(Interrupt.ADC1)
print(adc.get(AdcChannel.CV0))  # 512
```

## What the package does not do

The package provides the pieces above but nothing that puts them to work:

- There is no model of the PWM analog outputs or their latency buffers.
- There is no kernel that boots and runs a program on the board.
- No ready-made programs are included: no LFO, sample-and-hold, clock or LED
  chaser. The `ctrlalt.programs` package is empty.
- There is no command-line tool.