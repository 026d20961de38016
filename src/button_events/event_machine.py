"""
Per-input event state machine: debounce, long press and accelerating repeat
"""

from enum import Enum
from typing import Optional

from utils.once_in_ms import OnceInMs

from .config import ButtonEventConfig
from .events import ButtonEvents, NO_EVENTS

ACCEL_STEP_MS = 1000  # acceleration is applied once per second of hold


class ButtonPhase(Enum):
    """Debounced state of one input"""
    IDLE = "idle"              # released and settled
    DEBOUNCING = "debouncing"  # edge accepted, further edges ignored
    PRESSED = "pressed"        # down, hold threshold not reached yet
    HELD = "held"              # long press reported, repeating


class InputEventMachine:
    """
    Turns a raw sampled level into debounced one-shot events.

    The caller owns the clock and the sampling and calls tick() once per
    polling pass; afterwards the is_*() queries report what happened in that
    pass. Instances share nothing, one per physical input.

    Example:
        machine = InputEventMachine(ButtonEventConfig(label="UP"), logger)
        while True:
            machine.tick(monotonic_ms(), sampler.read_button(0))
            if machine.is_short_pressed() or machine.is_repeating():
                menu.next_item()
    """

    def __init__(self,
                 config: Optional[ButtonEventConfig] = None,
                 logger=None):
        """
        Args:
            config: Timing configuration; defaults when omitted
            logger: Optional ClassLogger from HybridLogger.get_class_logger()
        """
        self._config = config if config is not None else ButtonEventConfig()
        self._config.validate()
        self._logger = logger
        self._tick_gate = OnceInMs(self._config.min_tick_interval_ms)

        self._phase = ButtonPhase.IDLE
        self._level = False     # last accepted effective level
        self._edge_ms = 0
        self._repeat_interval_ms = self._config.repeat_start_ms
        self._last_repeat_ms = 0
        self._last_accel_ms = 0
        self._events = NO_EVENTS

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------

    def tick(self, now_ms: int, raw_sample: bool) -> None:
        """
        Advance the machine to now_ms with this pass's raw level.

        Args:
            now_ms: Monotonic, non-decreasing milliseconds
            raw_sample: Level read from the input, before inversion
        """
        self._events = NO_EVENTS
        if not self._tick_gate.should_execute(now_ms):
            return

        cfg = self._config
        level = (not raw_sample) if cfg.inverted else bool(raw_sample)

        short_pressed = released = long_pressed = long_released = repeating = False

        if level != self._level and self._phase is not ButtonPhase.DEBOUNCING:
            was_held = self._phase is ButtonPhase.HELD
            self._level = level
            self._edge_ms = now_ms
            self._phase = ButtonPhase.DEBOUNCING

            if level:
                short_pressed = True
                self._repeat_interval_ms = cfg.repeat_start_ms
                self._last_repeat_ms = now_ms
                self._last_accel_ms = now_ms
                self._log_debug(f"{cfg.label} pressed")
            else:
                released = True
                long_released = was_held
                self._log_debug(f"{cfg.label} released{' after hold' if was_held else ''}")

        if self._phase is ButtonPhase.DEBOUNCING and now_ms - self._edge_ms >= cfg.debounce_ms:
            self._phase = ButtonPhase.PRESSED if self._level else ButtonPhase.IDLE

        if self._phase is ButtonPhase.PRESSED and now_ms - self._edge_ms >= cfg.long_press_ms:
            long_pressed = True
            self._phase = ButtonPhase.HELD
            # first repeat waits a full interval from here
            self._last_repeat_ms = now_ms
            self._last_accel_ms = now_ms
            self._log_debug(f"{cfg.label} long press ({now_ms - self._edge_ms}ms)")

        if self._phase is ButtonPhase.HELD:
            if now_ms - self._last_repeat_ms >= self._repeat_interval_ms:
                repeating = True
                # advance by the interval, not to now, so late ticks don't drift
                self._last_repeat_ms += self._repeat_interval_ms

            if (now_ms - self._last_accel_ms >= ACCEL_STEP_MS
                    and self._repeat_interval_ms > cfg.repeat_min_ms):
                self._repeat_interval_ms = max(
                    self._repeat_interval_ms - cfg.accel_ms_per_s,
                    cfg.repeat_min_ms
                )
                self._last_accel_ms = now_ms
                self._log_debug(f"{cfg.label} repeat interval -> {self._repeat_interval_ms}ms")

        if short_pressed or released or long_pressed or repeating:
            self._events = ButtonEvents(
                short_pressed=short_pressed,
                released=released,
                long_pressed=long_pressed,
                long_released=long_released,
                repeating=repeating
            )

    # ------------------------------------------------------------------
    # One-shot queries (valid until the next tick)
    # ------------------------------------------------------------------

    def is_short_pressed(self) -> bool:
        return self._events.short_pressed

    def is_released(self) -> bool:
        return self._events.released

    def is_long_pressed(self) -> bool:
        return self._events.long_pressed

    def is_long_released(self) -> bool:
        return self._events.long_released

    def is_repeating(self) -> bool:
        return self._events.repeating

    @property
    def events(self) -> ButtonEvents:
        """All of this tick's events as one snapshot"""
        return self._events

    @property
    def label(self) -> str:
        return self._config.label

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    @property
    def config(self) -> ButtonEventConfig:
        return self._config

    @property
    def phase(self) -> ButtonPhase:
        return self._phase

    @property
    def is_pressed(self) -> bool:
        """Debounced logical state"""
        return self._level

    @property
    def is_holding(self) -> bool:
        return self._phase is ButtonPhase.HELD

    @property
    def repeat_interval_ms(self) -> int:
        return self._repeat_interval_ms

    def __repr__(self) -> str:
        return (
            f"InputEventMachine(label={self.label!r}, phase={self._phase.value}, "
            f"repeat_interval_ms={self._repeat_interval_ms})"
        )

    def _log_debug(self, message: str) -> None:
        if self._logger:
            self._logger.debug(message)
