"""
Keyboard sampler for trying the event machine without GPIO hardware
"""

import select
import sys
import termios
import tty
from typing import List

from .interfaces import IButtonSampler


class KeyboardSampler(IButtonSampler):
    """
    Keyboard toggle sampler.

    Digit keys 0-9 toggle virtual buttons: press once to "hold" a button,
    press again to release it. Holding a toggle past the long press threshold
    shows the long press and the accelerating repeat in the log.
    Works over SSH using stdin in cbreak mode (non-blocking select).

    Other keys:
    - SPACE shows the current toggles
    - 'r' releases every button
    - 'q' sets quit_requested for the polling loop

    Example:
        sampler = KeyboardSampler(num_buttons=3, logger=logger)
        sampler.setup()
    """

    def __init__(self,
                 num_buttons: int,
                 logger):
        """
        Args:
            num_buttons: Number of virtual buttons (max 10 for digit keys 0-9)
            logger: ClassLogger instance for logging
        """
        if not 0 < num_buttons <= 10:
            raise ValueError("KeyboardSampler supports 1-10 buttons (digit keys 0-9)")

        self._button_count = num_buttons
        self._logger = logger
        self._keyboard_toggles: List[bool] = [False] * num_buttons
        self._stdin_available = False
        self._original_terminal_settings = None
        self._cbreak_enabled = False
        self.quit_requested = False

    def _check_stdin_available(self) -> bool:
        try:
            if not sys.stdin.isatty():
                return False
            select.select([sys.stdin], [], [], 0)
            return True
        except (OSError, ValueError):
            return False

    def _enable_cbreak_mode(self) -> bool:
        """Unbuffered, no-echo input that still lets Ctrl+C through"""
        try:
            self._original_terminal_settings = termios.tcgetattr(sys.stdin)
            tty.setcbreak(sys.stdin.fileno())
            self._cbreak_enabled = True
            return True
        except (OSError, termios.error) as e:
            self._logger.warning(f"Could not enable cbreak terminal mode: {e}")
            return False

    def _restore_terminal(self) -> None:
        if self._cbreak_enabled and self._original_terminal_settings:
            try:
                termios.tcsetattr(
                    sys.stdin.fileno(),
                    termios.TCSADRAIN,
                    self._original_terminal_settings
                )
            except (OSError, termios.error) as e:
                self._logger.warning(f"Could not restore terminal: {e}")
            self._cbreak_enabled = False

    def get_button_count(self) -> int:
        return self._button_count

    def setup(self) -> None:
        """Initialize keyboard input (no-op once initialized)"""
        if self._stdin_available:
            return

        self._stdin_available = self._check_stdin_available()
        if not self._stdin_available:
            self._logger.error("Keyboard input not available (stdin not accessible or not a TTY)")
            raise RuntimeError("Keyboard input not available")

        if not self._enable_cbreak_mode():
            self._stdin_available = False
            raise RuntimeError("Failed to enable cbreak terminal mode")

        self._logger.info("🎮 Keyboard sampler initialized (NO GPIO)")
        self._logger.info(f"   {self._button_count} virtual buttons on digit keys 0-{self._button_count - 1}")
        self._logger.info("   Digit toggles a button, SPACE shows state, 'r' releases all, 'q' quits")

    def _check_keyboard_input(self) -> None:
        """Drain pending keys without blocking"""
        if not self._stdin_available:
            return

        try:
            while select.select([sys.stdin], [], [], 0) == ([sys.stdin], [], []):
                key = sys.stdin.read(1)

                if key in ('q', 'Q'):
                    self.quit_requested = True
                elif key == ' ':
                    self._show_current_state()
                elif key in ('r', 'R'):
                    self.release_all()
                elif key.isdigit():
                    button_index = int(key)
                    if button_index < self._button_count:
                        self.toggle_button(button_index)
                    else:
                        self._logger.warning(
                            f"Invalid button {button_index} (only 0-{self._button_count - 1} available)"
                        )
        except (OSError, ValueError) as e:
            self._logger.warning(f"Keyboard input error: {e}")

    def _show_current_state(self) -> None:
        state_str = " ".join(
            f"{i}:{'ON' if on else 'OFF'}" for i, on in enumerate(self._keyboard_toggles)
        )
        self._logger.info(f"Current state: {state_str}")

    def toggle_button(self, button_index: int) -> None:
        """Flip one virtual button"""
        self._keyboard_toggles[button_index] = not self._keyboard_toggles[button_index]
        state_name = "ON" if self._keyboard_toggles[button_index] else "OFF"
        self._logger.debug(f"🎮 Button {button_index} → {state_name}")

    def release_all(self) -> None:
        self._keyboard_toggles = [False] * self._button_count
        self._logger.info("All buttons released")

    def read_button(self, button_index: int) -> bool:
        """Read toggle state, picking up any pending keys first"""
        self._check_keyboard_input()
        return self._keyboard_toggles[button_index]

    def cleanup(self) -> None:
        """Restore terminal and release toggles"""
        self._restore_terminal()
        self._stdin_available = False
        self._keyboard_toggles = [False] * self._button_count
        if self._logger:
            self._logger.info("Keyboard sampler cleaned up")
