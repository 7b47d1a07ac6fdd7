"""A buffered file opened for appending raw bytes."""

from __future__ import annotations

import os
from typing import BinaryIO, Optional, Union

BUFFER_SIZE = 64 * 1024


class AppendFile:
    """File that only ever grows; not thread-safe."""

    def __init__(self, file_name: Union[str, os.PathLike], mode: str = "a") -> None:
        if "b" not in mode:
            mode += "b"
        self.name = os.fspath(file_name)
        self._fp: Optional[BinaryIO] = open(self.name, mode, buffering=BUFFER_SIZE)

    @property
    def closed(self) -> bool:
        return self._fp is None

    def append(self, data: Union[bytes, str]) -> None:
        """Write ``data`` in full to the end of the file."""
        if self._fp is None:
            raise ValueError(f"append to closed file {self.name!r}")
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._fp.write(data)

    def flush(self) -> None:
        """Push buffered data to the operating system."""
        if self._fp is not None:
            self._fp.flush()

    def close(self) -> None:
        """Flush and close the file; further calls do nothing."""
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> "AppendFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()