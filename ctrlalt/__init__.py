"""Fixed-point DSP helpers and a simulated board (GPIO, ADC, interrupts) for a modular-synth utility module."""

__version__ = "0.1.0"