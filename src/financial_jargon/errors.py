from __future__ import annotations


class JargonError(Exception):
    """Base class for conversion failures."""


class InvalidArgumentError(JargonError, ValueError):
    """Input has the wrong shape (length, emptiness, unknown locale)."""


class NotFoundError(JargonError, LookupError):
    """Input is well formed but not a key of the lookup table."""
