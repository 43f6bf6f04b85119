"""Watching desktop entry directories for added, changed and removed files."""

from __future__ import annotations

import enum
import os
import threading
from dataclasses import dataclass
from typing import Sequence

__all__ = ["ChangeType", "FileChange", "DirectoryWatcher"]

POLL_INTERVAL = 0.5

_Signature = tuple[int, int, int]


class ChangeType(enum.Enum):
    """What happened to a watched file."""

    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass(frozen=True)
class FileChange:
    """A change to a file below one of the watched search path directories.

    ``rank`` is the index of the search path directory and ``name`` the file's
    path relative to it.
    """

    rank: int
    name: str
    status: ChangeType


class DirectoryWatcher:
    """Watch search path directories recursively for file changes.

    A background thread rescans the directories periodically. Whenever changes
    are pending, the descriptor returned by :meth:`fileno` is readable, so the
    watcher can be used with ``select`` or ``poll``. Hidden files and
    directories are ignored.
    """

    def __init__(self, search_path: Sequence[str]) -> None:
        self._search_path = list(search_path)
        for path in self._search_path:
            if not os.path.isdir(path):
                raise FileNotFoundError(f"cannot watch '{path}': not a directory")

        self._lock = threading.Lock()
        self._changes: list[FileChange] = []
        self._snapshot: dict[int, dict[str, _Signature]] = {
            rank: self._scan(base) for rank, base in enumerate(self._search_path)
        }

        self._read_fd, self._write_fd = os.pipe()
        os.set_blocking(self._read_fd, False)
        os.set_blocking(self._write_fd, False)

        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="deskmenu-watcher", daemon=True
        )
        self._thread.start()

    @staticmethod
    def _scan(base: str) -> dict[str, _Signature]:
        files: dict[str, _Signature] = {}
        for dirpath, dirnames, filenames in os.walk(base):
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]
            rel_dir = os.path.relpath(dirpath, base)
            prefix = "" if rel_dir == "." else rel_dir.replace(os.sep, "/") + "/"
            for filename in filenames:
                if filename.startswith("."):
                    continue
                try:
                    st = os.stat(os.path.join(dirpath, filename))
                except OSError:
                    continue
                files[prefix + filename] = (st.st_mtime_ns, st.st_size, st.st_ino)
        return files

    def _rescan(self) -> bool:
        """Compare the directories with the last snapshot; call with the lock held."""
        found = False
        for rank, base in enumerate(self._search_path):
            current = self._scan(base)
            previous = self._snapshot[rank]
            for name in sorted(previous.keys() - current.keys()):
                self._changes.append(FileChange(rank, name, ChangeType.DELETED))
                found = True
            for name in sorted(current):
                if previous.get(name) != current[name]:
                    self._changes.append(FileChange(rank, name, ChangeType.MODIFIED))
                    found = True
            self._snapshot[rank] = current
        return found

    def _signal(self) -> None:
        try:
            os.write(self._write_fd, b"\0")
        except BlockingIOError:
            pass

    def _drain(self) -> None:
        while True:
            try:
                if not os.read(self._read_fd, 4096):
                    return
            except BlockingIOError:
                return

    def _run(self) -> None:
        while not self._stop.wait(POLL_INTERVAL):
            with self._lock:
                if self._stop.is_set():
                    return
                if self._rescan():
                    self._signal()

    def fileno(self) -> int:
        """Return a descriptor that is readable while changes are pending."""
        return self._read_fd

    def getchanges(self) -> list[FileChange]:
        """Return and clear all changes detected since the last call."""
        with self._lock:
            self._rescan()
            result = self._changes
            self._changes = []
            self._drain()
        return result

    def close(self) -> None:
        """Stop watching and release the notification descriptors."""
        if self._stop.is_set():
            return
        self._stop.set()
        self._thread.join()
        os.close(self._read_fd)
        os.close(self._write_fd)

    def __enter__(self) -> DirectoryWatcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()