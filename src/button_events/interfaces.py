"""
Abstract interface for button sampling
"""

from abc import ABC, abstractmethod


class IButtonSampler(ABC):
    """
    Abstract interface for sampling raw button levels.

    Separates reading hardware from the temporal logic in InputEventMachine.
    Implementations: GPIO, keyboard, scripted (tests), ...
    """

    @abstractmethod
    def read_button(self, button_index: int) -> bool:
        """
        Read current raw level of a single button.

        Args:
            button_index: Button number (0-based)

        Returns:
            True if the button currently reads as pressed
        """
        pass

    @abstractmethod
    def get_button_count(self) -> int:
        """Number of buttons this sampler handles"""
        pass

    @abstractmethod
    def setup(self) -> None:
        """
        Initialize the sampler hardware/resources.

        Must be safe to call more than once: every PolledButton sharing a
        sampler calls it from init().
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Cleanup sampler resources"""
        pass
