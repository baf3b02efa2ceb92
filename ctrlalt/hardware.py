"""Simulated board: GPIO pins, ADC channels and the interrupt vector table."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum

from ctrlalt.timer_calc import TimerConfig, timer_config

CPU_FREQ = 16_000_000
MAX_PRESCALER_DIVISOR = 15
MAX_COUNTER_VALUE = 0xFFFF

HIGH = True
LOW = False

NON_INVERSED = False
INVERSED = True

ADC_MAX = 1023
N_ADC_CHANNELS = 6

MODE_IN_PULL_UP = "in_pu_no_it"
MODE_IN_PULL_UP_IT = "in_pu_it"
MODE_OUT_PUSH_PULL_LOW = "out_pp_low_fast"


def _gpio_pin(n: int) -> int:
    return 1 << n


class OutputMode(Enum):
    """How one of the three jack outputs is driven."""

    DIGITAL = 0
    ANALOG = 1


class Port:
    """An 8-bit GPIO port with output and input data registers."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.odr = 0
        self.idr = 0
        self.modes: dict[int, str] = {}

    def init_pin(self, mask: int, mode: str) -> None:
        """Configure the pins in ``mask``; push-pull outputs start low."""
        self.modes[mask] = mode
        if mode == MODE_OUT_PUSH_PULL_LOW:
            self.odr &= ~mask & 0xFF

    def __repr__(self) -> str:
        return f"Port({self.name!r})"


@dataclass(frozen=True)
class Pin:
    """A pin on a port, with the board's electrical inversion."""

    polarity: bool
    port: Port
    pin_index: int

    def set(self, state: bool) -> None:
        """Drive the pin to ``state``, honouring polarity."""
        if bool(state) ^ self.polarity:
            self.port.odr |= self.pin_index & 0xFF
        else:
            self.port.odr &= ~self.pin_index & 0xFF

    def read(self) -> bool:
        """Read the pin's logical level, honouring polarity."""
        return bool(self.port.idr & self.pin_index) ^ self.polarity


class Board:
    """Front-panel pins of the module: switches, pulse inputs, LEDs and outputs."""

    def __init__(self, outputs: Sequence[OutputMode]) -> None:
        outputs = tuple(outputs)
        if len(outputs) != 3:
            raise ValueError("exactly three output modes are required")
        self.outputs = outputs
        self.ports = {name: Port(f"GPIO{name}") for name in "ABCDEF"}
        a, c, d, e, f = (self.ports[n] for n in "ACDEF")

        self.mode_switch = Pin(INVERSED, a, _gpio_pin(1))
        self.trigger_switch = Pin(INVERSED, d, _gpio_pin(6))
        self.in0 = Pin(INVERSED, d, _gpio_pin(3))
        self.in1 = Pin(INVERSED, d, _gpio_pin(4))
        self.in2 = Pin(INVERSED, d, _gpio_pin(5))

        self.led0 = Pin(NON_INVERSED, f, _gpio_pin(4))
        self.led1 = Pin(NON_INVERSED, e, _gpio_pin(5))
        self.led2 = Pin(NON_INVERSED, d, _gpio_pin(7))

        out_pins = [
            Pin(NON_INVERSED, c, _gpio_pin(n)) if mode is OutputMode.DIGITAL else None
            for n, mode in zip((1, 2, 3), outputs)
        ]
        self.out0, self.out1, self.out2 = out_pins
        self.exti_port_d_both_edges = False

    @property
    def leds(self) -> tuple[Pin, Pin, Pin]:
        return (self.led0, self.led1, self.led2)

    @property
    def digital_outputs(self) -> list[Pin]:
        return [p for p in (self.out0, self.out1, self.out2) if p is not None]

    def setup_input_pins(self) -> None:
        """Configure the switches and pulse inputs; port D interrupts on both edges."""
        self.mode_switch.port.init_pin(self.mode_switch.pin_index, MODE_IN_PULL_UP)
        for pin in (self.trigger_switch, self.in0, self.in1, self.in2):
            pin.port.init_pin(pin.pin_index, MODE_IN_PULL_UP_IT)
        self.exti_port_d_both_edges = True

    def setup_output_pins(self) -> None:
        """Configure LEDs and digital outputs as push-pull and drive them low."""
        for pin in (*self.leds, *self.digital_outputs):
            pin.port.init_pin(pin.pin_index, MODE_OUT_PUSH_PULL_LOW)
            pin.set(LOW)


class AdcChannel(IntEnum):
    """ADC inputs: three potentiometers and three control-voltage jacks."""

    POT0 = 0
    POT1 = 1
    POT2 = 2
    CV0 = 3
    CV1 = 4
    CV2 = 5


class Adc:
    """Six-channel 10-bit ADC whose conversions are paced by a timer."""

    def __init__(self, cpu_freq: int, sample_rate: float) -> None:
        self.timer: TimerConfig = timer_config(
            cpu_freq, sample_rate, MAX_PRESCALER_DIVISOR, MAX_COUNTER_VALUE
        )
        self._inputs = [0] * N_ADC_CHANNELS
        self._values = [0] * N_ADC_CHANNELS

    def get(self, ch: AdcChannel) -> int:
        """Return the last converted value of ``ch`` (0..1023)."""
        return self._values[AdcChannel(ch)]

    def set_input(self, ch: AdcChannel, value: int) -> None:
        """Set the analog level present at ``ch``, as a 10-bit reading."""
        if not 0 <= value <= ADC_MAX:
            raise ValueError(f"ADC input must be within 0..{ADC_MAX}")
        self._inputs[AdcChannel(ch)] = value

    def convert(self) -> None:
        """Complete a scan conversion, latching every channel's input."""
        self._values = list(self._inputs)


class Interrupt(IntEnum):
    """Interrupt vector numbers."""

    TLI = 0
    AWU = 1
    CLK = 2
    EXTI_PORTA = 3
    EXTI_PORTB = 4
    EXTI_PORTC = 5
    EXTI_PORTD = 6
    EXTI_PORTE = 7
    SPI = 10
    TIM1_UPD_OVF_TRG_BRK = 11
    TIM1_CAP_COM = 12
    TIM2_UPD_OVF_BRK = 13
    TIM2_CAP_COM = 14
    TIM3_UPD_OVF_BRK = 15
    TIM3_CAP_COM = 16
    I2C = 19
    UART2_TX = 20
    UART2_RX = 21
    ADC1 = 22
    TIM4_UPD_OVF = 23
    EEPROM_EEC = 24


_DISPATCHED = frozenset(
    {
        Interrupt.EXTI_PORTD,
        Interrupt.TIM1_UPD_OVF_TRG_BRK,
        Interrupt.TIM2_UPD_OVF_BRK,
        Interrupt.TIM3_UPD_OVF_BRK,
        Interrupt.ADC1,
    }
)


class InterruptTable:
    """Vector table; only some vectors forward to an attachable handler."""

    def __init__(self) -> None:
        self._handlers: dict[Interrupt, Callable[[], object]] = {}

    def attach(self, vector: Interrupt, handler: Callable[[], object]) -> None:
        """Route ``vector`` to ``handler``, replacing any earlier one."""
        vector = Interrupt(vector)
        if vector not in _DISPATCHED:
            raise ValueError(f"vector {vector.name} has no attachable handler")
        self._handlers[vector] = handler

    def fire(self, vector: Interrupt) -> None:
        """Raise ``vector``; vectors without a dispatch slot are ignored."""
        vector = Interrupt(vector)
        if vector not in _DISPATCHED:
            return
        handler = self._handlers.get(vector)
        if handler is None:
            raise RuntimeError(f"no handler attached to {vector.name}")
        handler()