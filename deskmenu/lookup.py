"""Resolving a menu choice to an application or a raw command."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

__all__ = [
    "ApplicationLookup",
    "CommandLookup",
    "lookup_name",
    "validate_search_path",
    "parse_log_level",
]

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass(frozen=True)
class ApplicationLookup:
    """A choice that names a known application.

    ``args`` holds whatever the user typed after the application's name.
    """

    app: Any
    is_generic: bool
    args: str = ""


@dataclass(frozen=True)
class CommandLookup:
    """A choice that matches no application and is run as a command."""

    command: str


LookupResult = Union[ApplicationLookup, CommandLookup]


def lookup_name(query: str, mapping: Mapping[str, Any]) -> LookupResult:
    """Resolve ``query`` against a mapping of menu names to applications.

    Each value unpacks into ``(app, is_generic)``. An exact name match wins;
    otherwise the first name, in the mapping's iteration order, that prefixes
    the query is used and the rest of the query becomes its arguments. If no
    name matches, the query is returned as a raw command.
    """
    resolved = mapping.get(query)
    if resolved is not None:
        app, is_generic = resolved
        return ApplicationLookup(app, is_generic)
    for name, resolved in mapping.items():
        if query.startswith(name):
            app, is_generic = resolved
            return ApplicationLookup(app, is_generic, query[len(name):])
    return CommandLookup(query)


def validate_search_path(search_path: Iterable[str]) -> list[str]:
    """Return the search path without relative entries, warning about problems.

    Empty entries and duplicates are reported but kept.
    """
    result: list[str] = []
    seen: set[str] = set()
    for path in search_path:
        if not path:
            logger.warning("Empty path in $XDG_DATA_DIRS!")
        elif not path.startswith("/"):
            logger.warning(
                "Relative path '%s' found in $XDG_DATA_DIRS, ignoring...", path
            )
            continue
        if path in seen:
            logger.warning("$XDG_DATA_DIRS contains duplicate element '%s'!", path)
        seen.add(path)
        result.append(path)
    return result


def parse_log_level(value: str) -> int:
    """Return the logging level named by ``value``.

    Accepts ERROR, WARNING, INFO and DEBUG; raises ValueError otherwise.
    """
    try:
        return _LOG_LEVELS[value]
    except KeyError:
        raise ValueError(f"Invalid loglevel '{value}'") from None