"""A periodic millisecond timer that counts elapsed intervals."""

from __future__ import annotations

from typing import Callable

from catenakit.polling import Pollable, PollingEngine

_UINT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


class Timer(Pollable):
    """Counts interval expirations against a wrapping 32-bit millisecond clock."""

    def __init__(
        self,
        clock: Callable[[], int],
        engine: PollingEngine | None = None,
    ) -> None:
        self._clock = clock
        self._engine = engine
        self._registered = False
        self._running = False
        self._interval = 0
        self._time = 0
        self._events = 0
        self.overrun = 0

    @property
    def interval(self) -> int:
        return self._interval

    @property
    def running(self) -> bool:
        return self._running

    def _now(self) -> int:
        return self._clock() & _UINT32_MASK

    @staticmethod
    def _check_interval(interval_ms: int) -> None:
        if not 0 < interval_ms <= _UINT32_MASK:
            raise ValueError(f"interval must be in 1..{_UINT32_MASK} ms")

    def begin(self, interval_ms: int) -> bool:
        """Start the timer; registers with the engine on first use."""
        self._check_interval(interval_ms)
        self._interval = interval_ms
        self._time = self._now()
        self._events = 0
        if not self._registered and self._engine is not None:
            self._engine.register(self)
            self._registered = True
        self._running = True
        return True

    def end(self) -> None:
        self._running = False

    def set_interval(self, interval_ms: int) -> int:
        """Change the interval and poll at once; return the old interval."""
        self._check_interval(interval_ms)
        old = self._interval
        self._interval = interval_ms
        self.poll()
        return old

    def retrigger(self) -> None:
        """Restart the current interval from now."""
        if self._running:
            self._time = self._now()

    def poll(self) -> None:
        if not self._running:
            return
        now = self._now()
        if (now - self._time) & _UINT32_MASK < self._interval:
            return

        self._time = (self._time + self._interval) & _UINT32_MASK
        self._events += 1

        diff = (now - self._time) & _UINT32_MASK
        if _to_int32(diff) < _to_int32(self._interval):
            return

        ticks = diff // self._interval
        self._events += ticks
        self._time = (self._time + ticks * self._interval) & _UINT32_MASK
        self.overrun += ticks

    def is_ready(self) -> bool:
        """True if any ticks were pending; consumes them."""
        return self.read_ticks() != 0

    def read_ticks(self) -> int:
        """Return and clear the pending tick count."""
        result = self._events
        self._events = 0
        return result

    def peek_ticks(self) -> int:
        return self._events

    def remaining(self) -> int:
        """Milliseconds until the next tick, or 0 if overdue."""
        elapsed = (self._now() - self._time) & _UINT32_MASK
        if elapsed > self._interval:
            return 0
        return self._interval - elapsed