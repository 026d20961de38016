"""
ButtonEvents - one tick's worth of one-shot button events
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ButtonEvents:
    """
    Snapshot of the events produced by a single tick.

    Each flag is true for exactly the tick in which the event happened; the
    machine replaces the snapshot on every tick, so reading it any number of
    times between ticks returns the same values. Snapshots are frozen so one
    can be handed to any number of callers and machines.

    Usage:
        events = machine.events
        if events.long_released:
            print("hold ended")
    """
    short_pressed: bool = False   # debounced press edge
    released: bool = False        # debounced release edge
    long_pressed: bool = False    # hold threshold crossed
    long_released: bool = False   # released while held
    repeating: bool = False       # auto-repeat tick while held

    any_event: bool = field(init=False)

    def __post_init__(self):
        for name in self.names():
            if not isinstance(getattr(self, name), bool):
                raise TypeError(f"{name} must be bool")
        object.__setattr__(self, "any_event", any(getattr(self, name) for name in self.names()))

    @staticmethod
    def names():
        return ("short_pressed", "released", "long_pressed", "long_released", "repeating")

    def active(self):
        """Names of the events set in this snapshot"""
        return [name for name in self.names() if getattr(self, name)]

    def __str__(self) -> str:
        return f"ButtonEvents({', '.join(self.active()) or 'none'})"


NO_EVENTS = ButtonEvents()
