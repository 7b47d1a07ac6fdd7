"""Log files named after the program, start time, host and process id."""

from __future__ import annotations

from typing import Optional, Union

from .append_file import AppendFile
from .process_info import exe_full_path, host_name, pid
from .string_helper import format_string
from .timestamp import user_format


def log_file_name(base_name: Optional[str] = None) -> str:
    """Return ``<base>.<YYYYmmdd-HHMMSS>.<host>.<pid>.log``; base defaults to the executable."""
    name = base_name if base_name is not None else exe_full_path()
    name += user_format(".%Y%m%d-%H%M%S")
    name += format_string(".%s.%d.log", host_name(), pid())
    return name


class LogFile:
    """A freshly named log file that text is appended to."""

    def __init__(self, base_name: Optional[str] = None) -> None:
        self.name = log_file_name(base_name)
        self._file: Optional[AppendFile] = AppendFile(self.name)

    def append(self, data: Union[str, bytes]) -> None:
        """Append ``data``; does nothing once closed."""
        if self._file is not None:
            self._file.append(data)

    def flush(self) -> None:
        if self._file is not None:
            self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "LogFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()