"""Fixed-size log buffers and a ``<<`` stream that renders values into them."""

from __future__ import annotations

from typing import Union

SMALL_BUFFER_SIZE = 4096
LARGE_BUFFER_SIZE = 4096 * 1024
MAX_NUMBER_SIZE = 32
_FMT_SIZE = 32


class FixedBuffer:
    """Byte buffer of fixed capacity; data that does not fit is dropped whole."""

    def __init__(self, size: int = SMALL_BUFFER_SIZE) -> None:
        self.size = size
        self._data = bytearray()

    def append(self, data: bytes) -> None:
        """Append ``data`` if it fits strictly within the remaining space."""
        if self.size - len(self._data) > len(data):
            self._data += data

    def reset(self) -> None:
        self._data.clear()

    def avail(self) -> int:
        """Return the number of unused bytes."""
        return self.size - len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)


class Fmt:
    """A single number rendered with a printf-style format, at most 31 characters."""

    def __init__(self, fmt: str, num: Union[int, float]) -> None:
        if not isinstance(num, (int, float)):
            raise TypeError(f"Fmt needs a number, not {type(num).__name__}")
        text = fmt % num
        if len(text) >= _FMT_SIZE:
            raise ValueError(f"formatted number too long: {text!r}")
        self._text = text

    def __str__(self) -> str:
        return self._text


class LogStream:
    """Collects rendered values in a small fixed buffer."""

    def __init__(self) -> None:
        self.buffer = FixedBuffer(SMALL_BUFFER_SIZE)

    def __lshift__(self, value: object) -> "LogStream":
        if isinstance(value, bool):
            self.buffer.append(b"1" if value else b"0")
        elif isinstance(value, int):
            if self.buffer.avail() > MAX_NUMBER_SIZE:
                self.buffer.append(str(value).encode("ascii"))
        elif isinstance(value, float):
            if self.buffer.avail() > MAX_NUMBER_SIZE:
                self.buffer.append(("%.12g" % value).encode("ascii"))
        elif value is None:
            self.buffer.append(b"(nullptr)")
        elif isinstance(value, str):
            self.buffer.append(value.encode("utf-8"))
        elif isinstance(value, (bytes, bytearray)):
            self.buffer.append(bytes(value))
        elif isinstance(value, Fmt):
            self.buffer.append(str(value).encode("ascii"))
        else:
            raise TypeError(f"cannot log a value of type {type(value).__name__}")
        return self

    def getvalue(self) -> str:
        """Return the buffered text."""
        return bytes(self.buffer).decode("utf-8", errors="replace")