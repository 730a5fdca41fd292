"""
Vigenere Error Taxonomy
========================

Every failure raised by the cryptanalysis core derives from
:class:`VigenereError`, so front ends can catch a single type.  Errors that
describe a bad argument also derive from the matching builtin
(``TypeError`` / ``ValueError``).

The alphabet arithmetic never raises; a zero-letter frequency column is
reported through an infinite score rather than an exception.
"""

from __future__ import annotations

from typing import Any, Optional


class VigenereError(Exception):
    """Base class for all Vigenere cryptanalysis errors."""


class TypeMismatchError(VigenereError, TypeError):
    """A text or key argument was not a ``str``."""

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value_type = type(value).__name__
        super().__init__(
            f"{name} must be a str, got {self.value_type}"
        )


class NoCandidatesError(VigenereError):
    """Kasiski examination found nothing to suggest a key length from.

    Raised when the text has no repeated substrings at all, or when no
    ranked factor reaches the configured minimum key length.

    Attributes:
        recurrence: The (possibly empty) recurrence search result, kept
            so callers can still display what was found.
    """

    def __init__(self, message: str, recurrence: Optional[Any] = None) -> None:
        self.recurrence = recurrence
        super().__init__(message)


class InvalidParameterError(VigenereError, ValueError):
    """A numeric analysis parameter was out of range."""


class InvalidColumnCountError(InvalidParameterError):
    """Column count / key length smaller than 1."""


class InvalidCombinationError(InvalidParameterError):
    """A rank combination does not fit the candidate table."""


class TextTooLongError(InvalidParameterError):
    """Text exceeds the configured Kasiski examination limit."""
