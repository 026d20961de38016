"""
Button Events Package

Debounced press, release, long press and accelerating auto-repeat events
from polled digital inputs.
"""

from .config import ButtonEventConfig
from .events import ButtonEvents
from .event_machine import InputEventMachine, ButtonPhase
from .interfaces import IButtonSampler
from .gpio_sampler import GPIOSampler, InputWiring
from .keyboard_sampler import KeyboardSampler
from .scripted_sampler import ScriptedSampler
from .polled_button import PolledButton

__all__ = [
    "ButtonEventConfig",
    "ButtonEvents",
    "InputEventMachine",
    "ButtonPhase",
    "IButtonSampler",
    "GPIOSampler",
    "InputWiring",
    "KeyboardSampler",
    "ScriptedSampler",
    "PolledButton"
]
