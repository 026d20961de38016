"""
Millisecond clock and throttling helper for polling loops
"""

import time
from typing import Callable, Optional


def monotonic_ms() -> int:
    """Monotonic clock in whole milliseconds"""
    return time.monotonic_ns() // 1_000_000


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    Works against an injectable millisecond clock, or against an explicit
    timestamp passed by the caller, so polling code that already read the
    clock for this pass doesn't read it twice.

    Example:
        # In __init__:
        self.heartbeat = OnceInMs(5000)

        # In the polling loop (runs every 1ms):
        if self.heartbeat.should_execute():
            self.log_status()
    """

    def __init__(self, interval_ms: int, clock: Optional[Callable[[], int]] = None):
        """
        Initialize timer with interval.

        Args:
            interval_ms: Minimum milliseconds between executions
            clock: Zero-argument callable returning milliseconds (default monotonic_ms)
        """
        self.interval_ms = interval_ms
        self._clock = clock if clock is not None else monotonic_ms
        self.last_execution: Optional[int] = None

    def should_execute(self, now_ms: Optional[int] = None) -> bool:
        """
        Check if enough time has passed and update timer if so.

        The first call always executes.

        Args:
            now_ms: Current time; read from the clock when omitted

        Returns:
            True if interval has passed (and timer is updated), False otherwise
        """
        current = self._clock() if now_ms is None else now_ms
        if self.last_execution is None or current - self.last_execution >= self.interval_ms:
            self.last_execution = current
            return True
        return False
