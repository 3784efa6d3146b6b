"""Line-edited input collection from a character stream, with echo."""

from __future__ import annotations

import copy
from enum import Enum, IntEnum
from typing import Any, Callable, Optional, Protocol

COLUMN_MAX = 0xFF
MAX_PRINTF_LENGTH = 126

EOL = ord("\n")
CR = ord("\r")
LF = ord("\n")
RETYPE = ord("R") & 0x1F
TAB = ord("\t")
SPACE = ord(" ")
BACKSPACE = ord("H") & 0x1F
DEL = 0x7F
ESC = 0x1B
CANCEL = ord("U") & 0x1F
CARET = ord("^")


class Stream(Protocol):
    """The byte stream the collector reads from and echoes to."""

    def available(self) -> int: ...

    def read(self) -> int: ...

    def write(self, data: bytes) -> Any: ...


class ReadStatus(IntEnum):
    """Completion status passed to a read callback."""

    SUCCESS = 0
    OVERRUN = 1
    BUSY = 2
    IO_ERROR = 3


ReadCallback = Callable[[ReadStatus, bytes], None]


class _State(Enum):
    NORMAL = 0
    ESC1 = 1
    ESC_OSC = 2
    CSI1 = 3
    CSI2 = 4
    UTF8 = 5
    TRANSPARENT = 6


class Columnator:
    """Tracks the terminal column, skipping escape sequences and UTF-8 tails."""

    def __init__(self) -> None:
        self.column = 0
        self._state = _State.NORMAL

    def adjust(self, text: str | bytes) -> int:
        """Advance over a string and return the resulting column."""
        data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        for c in data:
            if c == 0:
                break
            self.adjust_column(c, False)
        return self.column

    def adjust_column(self, c: int, input_mode: bool) -> None:
        """Advance the column for one byte."""
        state = self._state
        if state is _State.TRANSPARENT:
            return
        if state is _State.ESC1:
            if c == ord("["):
                self._state = _State.CSI1
            elif c == ord("]"):
                self._state = _State.ESC_OSC
            else:
                self._state = _State.NORMAL
            return
        if state is _State.ESC_OSC:
            if 0x20 <= c <= 0x7E:
                return
            self._state = _State.NORMAL
        elif state in (_State.CSI1, _State.CSI2):
            if state is _State.CSI1 and 0x30 <= c <= 0x3F:
                return
            if 0x20 <= c <= 0x2F:
                self._state = _State.CSI2
                return
            self._state = _State.NORMAL
            if 0x40 <= c <= 0x7E:
                return
        elif state is _State.UTF8:
            if c >= 0xC0:
                return
            self._state = _State.NORMAL
        self._normal(c, input_mode)

    def _normal(self, c: int, input_mode: bool) -> None:
        if 0x20 <= c <= 0x7E or 0x80 <= c < 0xC0:
            if self.column < COLUMN_MAX:
                self.column += 1
        elif c >= 0xC0:
            self._state = _State.UTF8
        elif c in (CR, LF):
            self.column = 0
        elif c == BACKSPACE:
            if self.column > 0:
                self.column -= 1
        elif c == TAB:
            delta = 8 - (self.column & 7)
            if self.column > COLUMN_MAX - delta:
                self.column = COLUMN_MAX
            else:
                self.column += delta
        elif c == ESC:
            if not input_mode:
                self._state = _State.ESC1
        elif input_mode:
            # echoed as ^X, two columns
            if self.column <= COLUMN_MAX - 2:
                self.column += 2
            else:
                self.column = COLUMN_MAX

    def reset(self, column: int = 0) -> None:
        self.column = column
        self._state = _State.NORMAL

    def set_transparent(self, flag: bool) -> None:
        """Stop tracking columns, or resume from column zero."""
        if flag:
            self._state = _State.TRANSPARENT
        else:
            self.reset()


class StreamLineCollector:
    """Collects an edited line from a stream asynchronously, echoing as it goes."""

    def __init__(self) -> None:
        self._stream: Optional[Stream] = None
        self._ready: Optional[Callable[[], bool]] = None
        self._last_was_cr = False
        self._no_echo = False
        self._callback: Optional[ReadCallback] = None
        self._size = 0
        self._buffer = bytearray()
        self._input_column = Columnator()
        self._output_column = Columnator()

    @property
    def echo(self) -> bool:
        return not self._no_echo

    @echo.setter
    def echo(self, enable: bool) -> None:
        self._no_echo = not enable

    @property
    def busy(self) -> bool:
        return self._callback is not None

    @property
    def output_column(self) -> int:
        return self._output_column.column

    def begin(self, stream: Stream, ready: Optional[Callable[[], bool]] = None) -> None:
        """Attach a stream, with an optional function telling whether it is usable."""
        self._stream = stream
        self._ready = ready
        self._last_was_cr = False

    def _stream_ready(self) -> bool:
        return self._ready is None or bool(self._ready())

    def read_async(self, callback: Optional[ReadCallback], size: int) -> None:
        """Start collecting a line of at most size bytes; callback gets the result."""
        if callback is None:
            return
        if self.busy:
            callback(ReadStatus.BUSY, b"")
        self._callback = callback
        self._size = size
        self._buffer = bytearray()
        self._input_column.reset(self._output_column.column)

    def poll(self) -> None:
        if self._stream is None or not self.busy or not self._stream_ready():
            return
        stream = self._stream
        available = stream.available()
        if available == 0:
            return

        remaining = min(self._size - len(self._buffer), available)

        if remaining <= 0:
            while stream.available():
                c = stream.read()
                if c < 0:
                    break
                if c in (EOL, CR):
                    self._last_was_cr = c == CR
                    self._read_complete(ReadStatus.OVERRUN)
                    break
            return

        status = ReadStatus.BUSY
        count = 0
        while status is ReadStatus.BUSY and count < remaining:
            count += 1
            c = stream.read()
            if c < 0:
                status = ReadStatus.IO_ERROR
                break
            if c == CR:
                self._input_edit(EOL)
                self._last_was_cr = True
                status = ReadStatus.SUCCESS
            elif c == EOL:
                if not self._last_was_cr:
                    self._input_edit(c)
                    status = ReadStatus.SUCCESS
                self._last_was_cr = False
            else:
                self._input_edit(c)
                self._last_was_cr = False

        if status is not ReadStatus.BUSY:
            self._read_complete(status)

    def _input_edit(self, c: int) -> None:
        if c in (BACKSPACE, DEL):
            self._input_delete()
        elif c == CANCEL:
            self._input_cancel()
        elif c == RETYPE:
            self._input_retype()
        elif c == 0:
            pass
        else:
            self._echo(c)
            self._buffer.append(c)

    def _echo(self, c: int) -> None:
        if self._no_echo:
            return
        if c in (CR, LF, TAB):
            self.write(c)
        elif c <= 0x1F or c == DEL:
            self._echo_control(c)
        else:
            self.write(c)

    def _echo_control(self, c: int) -> None:
        self._echo(CARET)
        self._echo(c ^ 0x40)

    def _input_delete(self) -> None:
        if not self._buffer:
            return
        target = copy.copy(self._input_column)
        del self._buffer[-1]
        for c in self._buffer:
            target.adjust_column(c, True)
        self._realign(target)

    def _input_cancel(self) -> None:
        self._buffer.clear()
        self._echo_control(CANCEL)
        self._echo(LF)
        self._realign(self._input_column)

    def _input_retype(self) -> None:
        self._echo_control(RETYPE)
        self._echo(LF)
        self._realign(self._input_column)
        for c in bytes(self._buffer):
            self._echo(c)

    def _realign(self, target: Columnator) -> None:
        if self._no_echo:
            return
        while target.column < self._output_column.column:
            self.write(BACKSPACE)
            self.write(SPACE)
            self.write(BACKSPACE)
        while target.column > self._output_column.column:
            self.write(SPACE)

    def _read_complete(self, status: ReadStatus) -> None:
        callback = self._callback
        if callback is not None:
            self._callback = None
            callback(status, bytes(self._buffer))

    def write(self, c: int) -> None:
        """Write one byte, tracking the column; LF becomes CR LF mid-line."""
        if self._stream is None:
            raise RuntimeError("no stream attached; call begin() first")
        if c == LF and self._output_column.column != 0:
            self.write(CR)
        if c == TAB:
            target = copy.copy(self._output_column)
            target.adjust_column(c, False)
            self._realign(target)
            return
        self._output_column.adjust_column(c, False)
        self._stream.write(bytes([c]))

    def printf(self, fmt: str, *args: Any) -> None:
        """Format a printf-style message and write it, if the stream is ready."""
        if not self._stream_ready():
            return
        data = (fmt % args).encode("utf-8")[:MAX_PRINTF_LENGTH]
        for c in data:
            if c == 0:
                break
            self.write(c)