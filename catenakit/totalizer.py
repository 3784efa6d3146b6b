"""A debounced pulse counter for a digital input."""

from __future__ import annotations

from typing import Callable

from catenakit.polling import Pollable, PollingEngine

_UINT32_MASK = 0xFFFFFFFF

DEFAULT_DEBOUNCE_MS = 50


class Totalizer(Pollable):
    """Counts falling edges on an input once it has been stable for the debounce time."""

    def __init__(
        self,
        read_input: Callable[[], object],
        clock: Callable[[], int],
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
    ) -> None:
        self._read_input = read_input
        self._clock = clock
        self.debounce_ms = debounce_ms
        self._initialized = False
        self._last = False
        self._last_stable = False
        self._is_stable = True
        self._total = 0
        self._t_edge = 0
        self._t_last_measured = 0
        self._n_last_measured = 0
        self._have_delta = False

    @property
    def total(self) -> int:
        """Number of debounced falling edges seen since begin()."""
        return self._total

    @property
    def initialized(self) -> bool:
        return self._initialized

    def _now(self) -> int:
        return self._clock() & _UINT32_MASK

    def begin(self, engine: PollingEngine | None = None) -> bool:
        """Sample the input, clear the counts and register for polling."""
        if self._initialized:
            return True

        self._last = bool(self._read_input())
        self._last_stable = self._last
        self._initialized = True
        self._is_stable = True
        self._total = 0
        self._t_edge = 0
        self._t_last_measured = 0
        self._n_last_measured = 0
        self._have_delta = False

        if engine is not None:
            engine.register(self)
        return True

    def poll(self) -> None:
        current = bool(self._read_input())
        now = self._now()

        if current != self._last:
            self._is_stable = False
            self._t_edge = now
            self._last = current
        elif not self._is_stable:
            if (now - self._t_edge) & _UINT32_MASK > self.debounce_ms:
                self._is_stable = True
                if current != self._last_stable:
                    if not current:
                        self._total = (self._total + 1) & _UINT32_MASK
                    self._last_stable = current

    def delta_count_and_time(self) -> tuple[int, int] | None:
        """Counts and milliseconds since the last reference, or None if no reference."""
        if not self._have_delta:
            return None
        count = (self._total - self._n_last_measured) & _UINT32_MASK
        delta = (self._t_edge - self._t_last_measured) & _UINT32_MASK
        return count, delta

    def set_reference(self) -> None:
        """Mark the current count and last edge time as the reference point."""
        self._t_last_measured = self._t_edge
        self._n_last_measured = self._total
        self._have_delta = True