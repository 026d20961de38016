"""
In-memory sampler driven by code
"""

from typing import List

from .interfaces import IButtonSampler


class ScriptedSampler(IButtonSampler):
    """
    Sampler whose levels are set programmatically.

    Stands in for hardware in tests and simulations:

        sampler = ScriptedSampler(2)
        button = PolledButton(sampler, 0, clock=clock)
        sampler.press(0)
        button.update()
    """

    def __init__(self, num_buttons: int):
        self._levels: List[bool] = [False] * num_buttons
        self.setup_calls = 0
        self.is_setup = False

    def get_button_count(self) -> int:
        return len(self._levels)

    def setup(self) -> None:
        self.setup_calls += 1
        self.is_setup = True

    def set_level(self, button_index: int, level: bool) -> None:
        self._levels[button_index] = bool(level)

    def press(self, button_index: int) -> None:
        self.set_level(button_index, True)

    def release(self, button_index: int) -> None:
        self.set_level(button_index, False)

    def read_button(self, button_index: int) -> bool:
        return self._levels[button_index]

    def cleanup(self) -> None:
        self._levels = [False] * len(self._levels)
        self.is_setup = False
