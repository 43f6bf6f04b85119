"""Helpers for dmenu-style launchers: search paths, locales, watching, lookup and commands."""

__version__ = "0.1.0"

__all__ = [
    "commands",
    "dynamic_compare",
    "locale_suffixes",
    "lookup",
    "notify",
    "search_path",
    "utilities",
]