"""
PolledButton - one sampler channel wired to its own event machine
"""

from typing import Callable, Optional

from utils.once_in_ms import monotonic_ms

from .config import ButtonEventConfig
from .event_machine import InputEventMachine
from .events import ButtonEvents
from .interfaces import IButtonSampler


class PolledButton:
    """
    Reads one channel of a sampler each pass and feeds the event machine.

    Uses IButtonSampler for hardware abstraction and an injectable clock, so
    the same button runs on GPIO, on the keyboard, or under test with a
    scripted sampler and a fake clock.

    Example:
        main_logger = HybridLogger("buttons")
        logger = main_logger.get_class_logger("PolledButton", logging.INFO)
        sampler = GPIOSampler([17], InputWiring.ACTIVE_LOW, logger)
        ok = PolledButton(sampler, 0, ButtonEventConfig(label="OK"), logger)
        ok.init()

        while True:
            ok.update()
            if ok.is_long_pressed():
                enter_settings()
    """

    def __init__(self,
                 sampler: IButtonSampler,
                 channel: int,
                 config: Optional[ButtonEventConfig] = None,
                 logger=None,
                 clock: Optional[Callable[[], int]] = None):
        """
        Args:
            sampler: IButtonSampler the channel belongs to
            channel: Button index within the sampler
            config: Timing configuration for this button
            logger: ClassLogger instance (optional)
            clock: Zero-argument callable returning milliseconds (default monotonic_ms)
        """
        if not 0 <= channel < sampler.get_button_count():
            raise ValueError(
                f"channel {channel} out of range for sampler with {sampler.get_button_count()} buttons"
            )
        self._sampler = sampler
        self._channel = channel
        self._logger = logger
        self._clock = clock if clock is not None else monotonic_ms
        self._machine = InputEventMachine(config, logger)

    def init(self) -> None:
        """Prepare the sampler; required before the first update()"""
        self._sampler.setup()
        if self._logger:
            self._logger.debug(f"{self.label} ready on channel {self._channel}")

    def update(self) -> ButtonEvents:
        """Sample, tick, and return this pass's events"""
        self._machine.tick(self._clock(), self._sampler.read_button(self._channel))
        return self._machine.events

    def is_short_pressed(self) -> bool:
        return self._machine.is_short_pressed()

    def is_released(self) -> bool:
        return self._machine.is_released()

    def is_long_pressed(self) -> bool:
        return self._machine.is_long_pressed()

    def is_long_released(self) -> bool:
        return self._machine.is_long_released()

    def is_repeating(self) -> bool:
        return self._machine.is_repeating()

    @property
    def label(self) -> str:
        return self._machine.label

    @property
    def channel(self) -> int:
        return self._channel

    @property
    def machine(self) -> InputEventMachine:
        return self._machine

    def cleanup(self) -> None:
        self._sampler.cleanup()
