"""Locale name variants used to match localized desktop entry keys."""

from __future__ import annotations

import locale
import logging

__all__ = ["LocaleSuffixes", "current_messages_locale"]

logger = logging.getLogger(__name__)


def current_messages_locale() -> str:
    """Set LC_MESSAGES from the environment and return its name.

    Falls back to the C locale when the configuration is invalid; raises
    locale.Error when even that is unavailable.
    """
    try:
        return locale.setlocale(locale.LC_MESSAGES, "")
    except locale.Error:
        logger.warning(
            "Locale configuration invalid, check locale(1).\n"
            "No translated menu entries will be available."
        )
    try:
        return locale.setlocale(locale.LC_MESSAGES, "C")
    except locale.Error as exc:
        logger.error("POSIX/C locale is not available, setlocale(3) failed.")
        raise locale.Error("POSIX/C locale is not available") from exc


def _position(text: str, char: str) -> int:
    # A position of 0 means "absent", as a separator cannot lead the name.
    return max(text.rfind(char), 0)


class LocaleSuffixes:
    """The ordered variants of a locale name, most specific first.

    ``lang_COUNTRY@MODIFIER`` gives four variants, ``lang_COUNTRY`` or
    ``lang@MODIFIER`` two, and a bare ``lang`` one. The encoding is dropped.
    """

    __slots__ = ("_suffixes",)

    def __init__(self, locale_name: str | None = None) -> None:
        if locale_name is None:
            locale_name = current_messages_locale()
        name = locale_name
        uscore = _position(name, "_")
        dot = _position(name, ".")
        at = _position(name, "@")

        if dot:
            if at == 0:
                name = name[:dot]
            elif at < dot:
                name = name[:dot]
                at = dot
            else:
                name = name[:dot] + name[at:]
                at = dot

        if uscore == 0 and at == 0:
            self._suffixes: tuple[str, ...] = (name,)
        elif uscore and at:
            self._suffixes = (
                name,
                name[:at],
                name[:uscore] + name[at:],
                name[:uscore],
            )
        else:
            self._suffixes = (name, name[: uscore if at == 0 else at])

    def match(self, text: str) -> int | None:
        """Return the priority of ``text`` (0 is best), or None if it doesn't match."""
        try:
            return self._suffixes.index(text)
        except ValueError:
            return None

    def suffixes(self) -> tuple[str, ...]:
        """Return the variants, most specific first."""
        return self._suffixes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocaleSuffixes):
            return NotImplemented
        return self._suffixes == other._suffixes

    def __hash__(self) -> int:
        return hash(self._suffixes)

    def __repr__(self) -> str:
        return f"LocaleSuffixes({self._suffixes!r})"