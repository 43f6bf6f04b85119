"""Small string, path and file-descriptor helpers."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

__all__ = [
    "split",
    "join",
    "have_equal_element",
    "replace",
    "endswith",
    "startswith",
    "is_directory",
    "get_variable",
    "writen",
]


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``.

    A single trailing delimiter does not produce a trailing empty field, and an
    empty string yields an empty list.
    """
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def join(items: Iterable[str], delimiter: str = " ") -> str:
    """Join ``items`` with ``delimiter``."""
    return delimiter.join(items)


def have_equal_element(list1: Iterable[str], list2: Iterable[str]) -> bool:
    """Return True if the two collections share at least one element."""
    return not set(list1).isdisjoint(list2)


def replace(text: str, substr: str, substitute: str) -> str:
    """Return ``text`` with every occurrence of ``substr`` replaced.

    An empty ``substr`` leaves the text unchanged.
    """
    if not substr:
        return text
    return text.replace(substr, substitute)


def endswith(text: str, suffix: str) -> bool:
    """Return True if ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def startswith(text: str, prefix: str) -> bool:
    """Return True if ``text`` starts with ``prefix``."""
    return text.startswith(prefix)


def is_directory(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` exists and is a directory (symlinks followed)."""
    return os.path.isdir(path)


def get_variable(name: str) -> str:
    """Return the environment variable ``name`` or an empty string."""
    return os.environ.get(name, "")


def writen(fd: int, data: bytes | bytearray | memoryview | Sequence[int]) -> int:
    """Write all of ``data`` to ``fd``, retrying on short writes.

    Returns the number of bytes written. Raises OSError if a write fails or
    makes no progress.
    """
    view = memoryview(bytes(data))
    total = 0
    while total < len(view):
        try:
            written = os.write(fd, view[total:])
        except InterruptedError:
            continue
        if written <= 0:
            raise OSError(f"write to file descriptor {fd} made no progress")
        total += written
    return total