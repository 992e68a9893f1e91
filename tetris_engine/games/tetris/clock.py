"""
Logic clock - fixed-rate cycle counter decoupled from the render frame rate.
"""

import time
from typing import Callable, Optional


def monotonic_millis() -> float:
    """Current time in milliseconds from a monotonic, high-resolution clock."""
    return time.perf_counter() * 1000.0


class LogicClock:
    """
    Counts gravity cycles at a configurable rate.

    update() is called once per rendered frame. Elapsed time is converted
    into whole cycles, and the fractional remainder is carried over so that
    frame jitter never loses or double-counts progress toward the next cycle.
    Cycles are consumed one at a time with has_elapsed_cycle().
    """

    def __init__(
        self,
        cycles_per_second: float,
        time_source: Callable[[], float] = monotonic_millis
    ):
        """
        Create a clock running at the given rate.

        Args:
            cycles_per_second: Number of cycles per second
            time_source: Callable returning monotonic time in milliseconds
        """
        self._time_source = time_source
        self._rate = 0.0
        self._millis_per_cycle = 0.0
        self._last_update = 0.0
        self._elapsed_cycles = 0
        self._excess = 0.0
        self._paused = False

        self.set_rate(cycles_per_second)
        self.reset()

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def millis_per_cycle(self) -> float:
        return self._millis_per_cycle

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def pending_cycles(self) -> int:
        return self._elapsed_cycles

    @property
    def excess(self) -> float:
        """Milliseconds accumulated toward the next cycle."""
        return self._excess

    def set_rate(self, cycles_per_second: float) -> None:
        """Set the number of cycles per second. Accumulated excess is kept."""
        if cycles_per_second <= 0:
            raise ValueError(f"Cycle rate must be positive: {cycles_per_second}")
        self._rate = cycles_per_second
        self._millis_per_cycle = 1000.0 / cycles_per_second

    def reset(self) -> None:
        """Drop pending cycles and excess, restart timing from now, unpause."""
        self._elapsed_cycles = 0
        self._excess = 0.0
        self._last_update = self._time_source()
        self._paused = False

    def set_paused(self, paused: bool) -> None:
        """Pause or unpause. A paused clock accumulates no cycles."""
        if self._paused and not paused:
            self._last_update = self._time_source()
        self._paused = paused

    def update(self, now: Optional[float] = None) -> None:
        """
        Advance the clock to the current time.

        Args:
            now: Current monotonic time in milliseconds (defaults to the
                clock's time source)
        """
        if now is None:
            now = self._time_source()

        if not self._paused:
            # A timestamp older than the last restamp counts as no time
            delta = max(0.0, now - self._last_update) + self._excess
            whole = int(delta // self._millis_per_cycle)
            self._elapsed_cycles += whole
            self._excess = delta - whole * self._millis_per_cycle

        # Time spent paused is never credited once the clock resumes
        self._last_update = now

    def has_elapsed_cycle(self) -> bool:
        """Consume one pending cycle if there is one."""
        if self._elapsed_cycles > 0:
            self._elapsed_cycles -= 1
            return True
        return False

    def peek_elapsed_cycle(self) -> bool:
        """Check for a pending cycle without consuming it."""
        return self._elapsed_cycles > 0
