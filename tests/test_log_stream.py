import pytest

from xlbase.log_stream import (
    MAX_NUMBER_SIZE,
    SMALL_BUFFER_SIZE,
    FixedBuffer,
    Fmt,
    LogStream,
)


def test_fixed_buffer_drops_data_that_does_not_fit():
    buf = FixedBuffer(8)
    buf.append(b"1234567")
    assert len(buf) == 7
    buf.append(b"x")
    assert bytes(buf) == b"1234567"
    assert buf.avail() == 1


def test_fixed_buffer_reset():
    buf = FixedBuffer(16)
    buf.append(b"abc")
    buf.reset()
    assert len(buf) == 0
    assert buf.avail() == 16


def test_stream_mixes_types():
    s = LogStream()
    s << "hello warn," << 3 << "int" << 56
    assert s.getvalue() == "hello warn,3int56"


def test_bools_and_chars():
    s = LogStream()
    s << "hello fail," << "c" << "," << True << False
    assert s.getvalue() == "hello fail,c,10"


def test_floats_and_negatives():
    s = LogStream()
    s << 1.234 << "," << -42
    assert s.getvalue() == "1.234,-42"


def test_none_renders_placeholder():
    s = LogStream()
    s << None
    assert s.getvalue() == "(nullptr)"


def test_bytes_appended_raw():
    s = LogStream()
    s << b"nihao"
    assert s.getvalue() == "nihao"


def test_fmt_inserted():
    s = LogStream()
    s << "format:" << Fmt("%.2f", 3.1415) << " ok"
    assert s.getvalue() == "format:3.14 ok"


def test_fmt_rejects_non_numbers():
    with pytest.raises(TypeError):
        Fmt("%s", "text")


def test_fmt_rejects_long_output():
    with pytest.raises(ValueError):
        Fmt("%040d", 1)


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        LogStream() << object()


def test_oversized_string_ignored():
    s = LogStream()
    s << "x" * (SMALL_BUFFER_SIZE + 1)
    assert s.getvalue() == ""


def test_number_dropped_when_space_low():
    s = LogStream()
    filler = "a" * (SMALL_BUFFER_SIZE - MAX_NUMBER_SIZE)
    s << filler
    assert s.buffer.avail() == MAX_NUMBER_SIZE
    s << 7 << 2.5
    assert s.getvalue() == filler