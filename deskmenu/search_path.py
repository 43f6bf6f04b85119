"""Directories searched for desktop entries, per the XDG base directory spec."""

from __future__ import annotations

from .utilities import get_variable, is_directory, split

__all__ = ["get_search_path"]


def _applications_dir(path: str) -> str:
    if path.endswith("/"):
        path = path[:-1]
    if not path.endswith("/applications"):
        path += "/applications"
    return path + "/"


def get_search_path() -> list[str]:
    """Return existing ``applications/`` directories, highest priority first.

    Each entry ends with a slash.
    """
    result: list[str] = []

    data_home = get_variable("XDG_DATA_HOME")
    if not data_home:
        data_home = get_variable("HOME") + "/.local/share/"
    data_home = _applications_dir(data_home)
    if is_directory(data_home):
        result.append(data_home)

    data_dirs = get_variable("XDG_DATA_DIRS")
    if not data_dirs:
        data_dirs = "/usr/share/:/usr/local/share/"

    for entry in split(data_dirs, ":"):
        path = _applications_dir(entry)
        if is_directory(path):
            result.append(path)

    return result