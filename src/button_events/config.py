"""
Button event timing configuration
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ButtonEventConfig:
    """Timing and identity of one input, fixed for the life of its machine"""

    label: str = "button"
    debounce_ms: int = 20           # edges ignored this long after an accepted edge
    long_press_ms: int = 800        # hold time before the long press fires
    repeat_start_ms: int = 100      # first interval between repeats
    repeat_min_ms: int = 8          # floor for the accelerating interval
    accel_ms_per_s: int = 100       # interval shaved off per second of hold
    inverted: bool = False          # flip the sampled level before edge detection
    min_tick_interval_ms: int = 1   # ticks closer together than this are skipped

    def validate(self) -> None:
        """Raise ValueError for settings the event machine can't honour"""
        durations = {
            "debounce_ms": self.debounce_ms,
            "long_press_ms": self.long_press_ms,
            "repeat_start_ms": self.repeat_start_ms,
            "repeat_min_ms": self.repeat_min_ms,
            "accel_ms_per_s": self.accel_ms_per_s,
            "min_tick_interval_ms": self.min_tick_interval_ms,
        }
        for name, value in durations.items():
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        if self.repeat_min_ms > self.repeat_start_ms:
            raise ValueError(
                f"repeat_min_ms ({self.repeat_min_ms}) must not exceed "
                f"repeat_start_ms ({self.repeat_start_ms})"
            )

    def with_label(self, label: str) -> "ButtonEventConfig":
        """Copy of this config for another input"""
        return replace(self, label=label)
