"""Append-only log writer with lazy time-based rotation onto hour-stamped files."""

import logging
import os
import threading
from datetime import datetime

from rotatedlog.naming import derive_path, format_line

logger = logging.getLogger(__name__)

FILE_MODE = 0o666
_CREATE_FLAGS = os.O_CREAT | os.O_WRONLY | os.O_TRUNC
_APPEND_FLAGS = os.O_APPEND | os.O_WRONLY


def _open_fd(path: str, flags: int):
    fd = os.open(path, flags, FILE_MODE)
    # line buffered: every formatted line ends in "\n" and reaches the OS on write
    return os.fdopen(fd, "a", buffering=1, encoding="utf-8")


class RotatingWriter:
    """Thread-safe writer that switches to a new dated file every N hours.

    Rotation is checked synchronously on each write; there is no timer thread.
    The file for the current checkpoint is only created on the first write
    unless it already exists, in which case it is reopened for append.
    """

    def __init__(self, base_name: str, rotation_hours: float, time_func=None):
        if rotation_hours < 0:
            raise ValueError(f"rotation_hours must be non-negative, got {rotation_hours}")
        self._base_name = base_name
        self._rotation_hours = float(rotation_hours)
        self._time_func = time_func or datetime.now
        self._lock = threading.Lock()
        self._file = None
        # path released by close(); a later write appends to it instead of truncating
        self._closed_path = None
        self._checkpoint = self._time_func()
        self._current_path = derive_path(base_name, self._checkpoint)
        with self._lock:
            self._open_existing()

    @property
    def base_name(self) -> str:
        return self._base_name

    @property
    def rotation_hours(self) -> float:
        return self._rotation_hours

    @property
    def current_path(self) -> str:
        with self._lock:
            return self._current_path

    @property
    def checkpoint(self) -> datetime:
        with self._lock:
            return self._checkpoint

    def _open_existing(self) -> bool:
        """Open current_path for append if it exists. Returns False if it does not."""
        try:
            os.stat(self._current_path)
        except FileNotFoundError:
            self._file = None
            return False
        self._file = _open_fd(self._current_path, _APPEND_FLAGS)
        return True

    def _create(self):
        self._file = _open_fd(self._current_path, _CREATE_FLAGS)

    def _reopen_or_create(self):
        if self._closed_path == self._current_path and self._open_existing():
            return
        self._create()

    def _close(self):
        if self._file is None:
            return
        try:
            self._file.close()
        except OSError as e:
            logger.debug("Ignoring error closing %s: %s", self._current_path, e)
        self._file = None

    def _rotate_needed(self, now: datetime) -> bool:
        elapsed_hours = (now - self._checkpoint).total_seconds() / 3600
        if elapsed_hours >= self._rotation_hours:
            self._checkpoint = now
            return True
        return False

    def _rotate(self):
        previous = self._current_path
        self._close()
        self._current_path = derive_path(self._base_name, self._checkpoint)
        if not self._open_existing():
            self._create()
        if self._current_path != previous:
            logger.info("Rotated %s -> %s", previous, self._current_path)

    def write(self, category: str, message: str):
        """Append "<category> <YYYY-MM-DD HH:MM:SS> <message>" as one line.

        Raises OSError if the target file cannot be opened or written. The
        writer stays usable afterwards; the next call retries the open.
        """
        with self._lock:
            now = self._time_func()
            if self._rotate_needed(now):
                self._rotate()
            if self._file is None:
                self._reopen_or_create()
            self._file.write(format_line(category, message, now))

    def close(self):
        """Release the file handle. A later write() reopens it for append."""
        with self._lock:
            if self._file is not None:
                self._closed_path = self._current_path
            self._close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def init(path: str, rotation_hours: int) -> RotatingWriter:
    """Create a writer for path, rotating every rotation_hours hours."""
    return RotatingWriter(path, rotation_hours)
