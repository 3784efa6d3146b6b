"""Flag-filtered diagnostic logging."""

from __future__ import annotations

import sys
from enum import IntFlag
from typing import Any, Callable, TextIO


class DebugFlags(IntFlag):
    """Categories of log messages."""

    ALWAYS = 0x00000000
    BUG = 0x00000001
    ERROR = 0x00000002
    WARNING = 0x00000004
    INFO = 0x00000008
    VERBOSE = 0x00000010
    RFU5 = 0x00000020
    RFU6 = 0x00000040
    RFU7 = 0x00000080
    USER8 = 0x00000100
    USER9 = 0x00000200
    USER10 = 0x00000400
    USER11 = 0x00000800
    USER12 = 0x00001000
    USER13 = 0x00002000
    USER14 = 0x00004000
    USER15 = 0x00008000
    TRACE0 = 0x00010000
    TRACE = 0x00010000
    TRACE1 = 0x00020000
    TRACE2 = 0x00040000
    TRACE3 = 0x00080000
    TRACE4 = 0x00100000
    TRACE5 = 0x00200000
    TRACE6 = 0x00400000
    TRACE7 = 0x00800000
    USER_TRACE8 = 0x01000000
    USER_TRACE9 = 0x02000000
    USER_TRACE10 = 0x04000000
    USER_TRACE11 = 0x08000000
    USER_TRACE12 = 0x10000000
    USER_TRACE13 = 0x20000000
    USER_TRACE14 = 0x40000000
    USER_TRACE15 = 0x80000000
    FATAL = 0xFFFFFFFF


DEFAULT_FLAGS = DebugFlags.INFO | DebugFlags.WARNING | DebugFlags.ERROR | DebugFlags.BUG

# Messages are formatted into a 128-byte buffer limited to 127 bytes with NUL.
MAX_MESSAGE_LENGTH = 126

_FATAL_VALUE = 0xFFFFFFFF


class Log:
    """A logger that prints messages whose category is enabled."""

    def __init__(self, flags: int = DEFAULT_FLAGS, stream: TextIO | None = None) -> None:
        self.flags = DebugFlags(flags)
        self.stream = stream

    def is_enabled(self, flags: int) -> bool:
        """True if messages with these flags would be printed."""
        value = int(flags)
        return (value & int(self.flags)) != 0 or value == 0 or value == _FATAL_VALUE

    def printf(self, flags: int, fmt: str, *args: Any) -> None:
        """Format a printf-style message and write it if enabled."""
        if not self.is_enabled(flags):
            return
        text = (fmt % args)[:MAX_MESSAGE_LENGTH]
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text)

    def cond(self, flags: int, func: Callable[[], Any]) -> Any:
        """Call func only if the flags are enabled; return its result."""
        if self.is_enabled(flags):
            return func()
        return None

    def set_flags(self, flags: int) -> DebugFlags:
        """Replace the enabled flags, returning the previous ones."""
        old = self.flags
        self.flags = DebugFlags(flags)
        return old


log = Log()