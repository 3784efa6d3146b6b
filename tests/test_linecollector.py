import pytest

from catenakit.linecollector import (
    COLUMN_MAX,
    Columnator,
    ReadStatus,
    StreamLineCollector,
)


class FakeStream:
    def __init__(self, data=b""):
        self.incoming = bytearray(data)
        self.output = bytearray()

    def feed(self, data):
        self.incoming += data

    def available(self):
        return len(self.incoming)

    def read(self):
        if not self.incoming:
            return -1
        return self.incoming.pop(0)

    def write(self, data):
        self.output += data


class LyingStream(FakeStream):
    def available(self):
        return 5


class Results:
    def __init__(self):
        self.calls = []

    def __call__(self, status, data):
        self.calls.append((status, data))


def setup(data=b"", ready=None, size=64):
    stream = FakeStream(data)
    coll = StreamLineCollector()
    coll.begin(stream, ready)
    results = Results()
    coll.read_async(results, size)
    return coll, stream, results


def test_simple_line():
    coll, stream, results = setup(b"hello\r")
    coll.poll()
    assert results.calls == [(ReadStatus.SUCCESS, b"hello\n")]
    assert stream.output == b"hello\r\n"
    assert not coll.busy


def test_crlf_counts_as_one_ending():
    coll, stream, results = setup(b"a\r\nb\n")
    coll.poll()
    coll.read_async(results, 64)
    coll.poll()
    assert results.calls == [
        (ReadStatus.SUCCESS, b"a\n"),
        (ReadStatus.SUCCESS, b"b\n"),
    ]


def test_backspace_edits_line():
    coll, stream, results = setup(b"abc\x08d\n")
    coll.poll()
    assert results.calls == [(ReadStatus.SUCCESS, b"abd\n")]


def test_delete_erases_on_terminal():
    coll, stream, results = setup(b"ab\x7f")
    coll.poll()
    assert results.calls == []
    assert stream.output == b"ab\x08 \x08"
    assert coll.output_column == 1


def test_cancel_clears_line():
    coll, stream, results = setup(b"abc\x15xy\n")
    coll.poll()
    assert results.calls == [(ReadStatus.SUCCESS, b"xy\n")]
    assert b"^U" in stream.output


def test_retype_echoes_buffer_again():
    coll, stream, results = setup(b"ab\x12")
    coll.poll()
    assert stream.output.startswith(b"ab^R")
    assert stream.output.endswith(b"ab")


def test_nul_is_discarded():
    coll, stream, results = setup(b"a\x00b\n")
    coll.poll()
    assert results.calls == [(ReadStatus.SUCCESS, b"ab\n")]


def test_control_char_echoed_with_caret():
    coll, stream, results = setup(b"\x01\n")
    coll.poll()
    assert stream.output.startswith(b"^A")
    assert results.calls == [(ReadStatus.SUCCESS, b"\x01\n")]


def test_overrun_discards_to_end_of_line():
    coll, stream, results = setup(b"abcdef\nz", size=3)
    coll.poll()
    assert results.calls == []
    coll.poll()
    assert results.calls == [(ReadStatus.OVERRUN, b"abc")]
    assert stream.incoming == b"z"


def test_busy_read_reports_busy():
    coll, stream, results = setup()
    second = Results()
    coll.read_async(second, 8)
    assert second.calls == [(ReadStatus.BUSY, b"")]
    assert coll.busy


def test_not_ready_consumes_nothing():
    coll, stream, results = setup(b"abc\n", ready=lambda: False)
    coll.poll()
    assert stream.incoming == b"abc\n"
    assert results.calls == []


def test_no_echo():
    stream = FakeStream(b"abc\n")
    coll = StreamLineCollector()
    coll.begin(stream)
    coll.echo = False
    results = Results()
    coll.read_async(results, 16)
    coll.poll()
    assert coll.echo is False
    assert stream.output == b""
    assert results.calls == [(ReadStatus.SUCCESS, b"abc\n")]


def test_io_error():
    stream = LyingStream(b"ab")
    coll = StreamLineCollector()
    coll.begin(stream)
    results = Results()
    coll.read_async(results, 16)
    coll.poll()
    assert results.calls == [(ReadStatus.IO_ERROR, b"ab")]


def test_printf_adds_cr_before_lf():
    stream = FakeStream()
    coll = StreamLineCollector()
    coll.begin(stream)
    coll.printf("x=%d\n", 5)
    assert stream.output == b"x=5\r\n"
    assert coll.output_column == 0


def test_printf_not_ready():
    stream = FakeStream()
    coll = StreamLineCollector()
    coll.begin(stream, lambda: False)
    coll.printf("hi")
    assert stream.output == b""


def test_tab_expands_to_spaces():
    stream = FakeStream()
    coll = StreamLineCollector()
    coll.begin(stream)
    coll.write(ord("\t"))
    assert stream.output == b" " * 8
    assert coll.output_column == 8


def test_write_without_stream_raises():
    coll = StreamLineCollector()
    with pytest.raises(RuntimeError):
        coll.write(ord("a"))


def test_columnator_plain_text():
    col = Columnator()
    assert col.adjust("abc") == 3


def test_columnator_skips_csi_sequence():
    col = Columnator()
    assert col.adjust("\x1b[31mab") == 2


def test_columnator_tab_stop():
    col = Columnator()
    col.adjust("abc")
    col.adjust_column(ord("\t"), False)
    assert col.column == 8


def test_columnator_caps_at_max():
    col = Columnator()
    assert col.adjust("a" * 300) == COLUMN_MAX


def test_columnator_input_mode_control_is_two_columns():
    col = Columnator()
    col.adjust_column(0x01, True)
    assert col.column == 2
    col.adjust_column(0x01, False)
    assert col.column == 2


def test_columnator_backspace_not_below_zero():
    col = Columnator()
    col.adjust_column(0x08, False)
    assert col.column == 0


def test_columnator_transparent_and_reset():
    col = Columnator()
    col.set_transparent(True)
    assert col.adjust("abc") == 0
    col.set_transparent(False)
    assert col.adjust("ab") == 2
    col.reset(7)
    assert col.column == 7


def test_columnator_utf8_two_byte_char_is_one_column():
    col = Columnator()
    assert col.adjust("é") == 1