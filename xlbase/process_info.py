"""Facts about the running process: host, pid and executable location."""

from __future__ import annotations

import os
import socket

_UNKNOWN_HOST = "unkownhost"


def host_name() -> str:
    """Return the machine's host name, or a placeholder if it cannot be read."""
    try:
        return socket.gethostname()
    except OSError:
        return _UNKNOWN_HOST


def pid() -> int:
    """Return the id of the current process."""
    return os.getpid()


def exe_full_path() -> str:
    """Return the absolute path of the running executable, or an empty string."""
    try:
        return os.readlink("/proc/self/exe")
    except (OSError, NotImplementedError):
        return ""


def exe_path() -> str:
    """Return the directory of the executable, including the trailing slash."""
    head, sep, _ = exe_full_path().rpartition("/")
    return head + sep


def exe_name() -> str:
    """Return the file name of the executable."""
    return exe_full_path().rpartition("/")[2]