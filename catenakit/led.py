"""A status LED driven by repeating blink patterns."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from catenakit.polling import Pollable

_UINT32_MASK = 0xFFFFFFFF


class LedPattern(IntEnum):
    """Blink patterns; each bit lasts 128 ms and the top set bit marks the end."""

    OFF = 0
    ON = 1

    ONE_EIGHTH = 0b100000001
    ONE_SIXTEENTH = 0b10000000000000001
    FAST_FLASH = 0b1010101
    TWO_SHORT = 0b10000000000000001001
    THREE_SHORT = 0b10000000000001001001
    FIFTY_FIFTY_SLOW = 0b100000000000000001111111111111111
    ONE_THIRTY_SECOND = 0b100000000000000000000000000000001

    JOINING = TWO_SHORT
    MEASURING = FAST_FLASH
    SENDING = FIFTY_FIFTY_SLOW
    WARMING_UP = ONE_EIGHTH
    SETTLING = ONE_SIXTEENTH
    NOT_PROVISIONED = THREE_SHORT
    SLEEPING = ONE_THIRTY_SECOND


class StatusLed(Pollable):
    """Steps an LED through a pattern, one bit about every 128 ms."""

    def __init__(
        self,
        write_pin: Callable[[int], None],
        clock: Callable[[], int],
    ) -> None:
        self._write_pin = write_pin
        self._clock = clock
        self.pattern = LedPattern.OFF
        self._current = 0
        self._start_time = 0

    def begin(self) -> None:
        """Turn the LED off and start timing."""
        self._write_pin(0)
        self._start_time = self._clock() & _UINT32_MASK
        self.pattern = LedPattern.OFF

    def poll(self) -> None:
        now = self._clock() & _UINT32_MASK
        if (now ^ self._start_time) & (1 << 7):
            self._start_time = now
            self._update()

    def set(self, pattern: LedPattern) -> LedPattern:
        """Start a new pattern with the LED off; return the previous pattern."""
        old = self.pattern
        self.pattern = LedPattern(pattern)
        self._current = 0
        self._write_pin(0)
        return old

    def _update(self) -> None:
        if self.pattern == LedPattern.OFF:
            self._write_pin(0)
            return
        if self._current <= 1:
            self._current = int(self.pattern)
        self._write_pin(self._current & 1)
        self._current >>= 1