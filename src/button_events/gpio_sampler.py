"""
GPIO-based button sampler implementation using RPi.GPIO
"""

from enum import Enum
from typing import List

try:
    import RPi.GPIO as GPIO
except (ImportError, RuntimeError):
    # Not a Raspberry Pi; GPIOSampler refuses to construct
    GPIO = None

from .interfaces import IButtonSampler


class InputWiring(Enum):
    """How a switch is wired to its pin"""
    ACTIVE_LOW = "active_low"    # switch to GND, internal pull-up, LOW = pressed
    ACTIVE_HIGH = "active_high"  # switch to supply, external pull-down, HIGH = pressed


class GPIOSampler(IButtonSampler):
    """
    GPIO button sampling for production.

    Reads raw GPIO levels from configured pins (BCM numbering) and reports
    them as pressed/not pressed according to the wiring.
    """

    def __init__(self,
                 button_pins: List[int],
                 wiring: InputWiring,
                 logger):
        """
        Args:
            button_pins: List of GPIO pin numbers (BCM mode)
            wiring: InputWiring shared by all pins
            logger: ClassLogger instance for logging
        """
        if GPIO is None:
            raise ImportError("RPi.GPIO is required but not available")

        self._button_pins = list(button_pins)
        self._wiring = wiring
        self._logger = logger
        self._initialized = False

    def get_button_count(self) -> int:
        return len(self._button_pins)

    @property
    def wiring(self) -> InputWiring:
        return self._wiring

    def _pull_mode(self) -> int:
        if self._wiring is InputWiring.ACTIVE_LOW:
            return GPIO.PUD_UP
        return GPIO.PUD_OFF

    def setup(self) -> None:
        """Initialize GPIO pins for input (no-op once initialized)"""
        if self._initialized:
            return
        try:
            GPIO.setmode(GPIO.BCM)

            pull_mode = self._pull_mode()
            for pin in self._button_pins:
                GPIO.setup(pin, GPIO.IN, pull_up_down=pull_mode)

            self._initialized = True

            pin_mapping = ", ".join(f"Btn{i}=GPIO{pin}" for i, pin in enumerate(self._button_pins))
            self._logger.info(
                f"GPIO sampler initialized: {len(self._button_pins)} pins ({self._wiring.value})"
            )
            self._logger.info(f"Pin mapping: {pin_mapping}")

        except Exception as e:
            self._logger.error("GPIO sampler setup failed", e)
            raise

    def read_button(self, button_index: int) -> bool:
        """
        Read GPIO level of a single button.

        Returns:
            True if the pin is at its pressed level for this wiring
        """
        level = GPIO.input(self._button_pins[button_index])
        if self._wiring is InputWiring.ACTIVE_LOW:
            return level == GPIO.LOW
        return level == GPIO.HIGH

    def cleanup(self) -> None:
        """Release only the pins this sampler configured"""
        try:
            if self._initialized:
                GPIO.cleanup(self._button_pins)
                self._initialized = False
                if self._logger:
                    self._logger.info("GPIO sampler cleaned up")
        except Exception as e:
            if self._logger:
                self._logger.warning(f"GPIO cleanup failed: {e}")

    def __del__(self):
        """Automatic cleanup when object is destroyed"""
        if hasattr(self, "_initialized"):
            self.cleanup()
