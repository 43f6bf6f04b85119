"""A less-than comparison whose case sensitivity is chosen at runtime."""

from __future__ import annotations

import string

__all__ = ["DynamicCompare"]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class DynamicCompare:
    """Strict weak ordering of strings, optionally ignoring ASCII case."""

    __slots__ = ("case_insensitive",)

    def __init__(self, case_insensitive: bool) -> None:
        self.case_insensitive = bool(case_insensitive)

    def key(self, text: str) -> str:
        """Return a sort key consistent with this comparison."""
        if self.case_insensitive:
            return text.translate(_ASCII_LOWER)
        return text

    def __call__(self, a: str, b: str) -> bool:
        """Return True if ``a`` orders before ``b``."""
        return self.key(a) < self.key(b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicCompare):
            return NotImplemented
        return self.case_insensitive == other.case_insensitive

    def __hash__(self) -> int:
        return hash(self.case_insensitive)

    def __repr__(self) -> str:
        return f"DynamicCompare(case_insensitive={self.case_insensitive})"