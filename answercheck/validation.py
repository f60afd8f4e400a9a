"""Core validation results and validator interfaces.

Validators receive the user's answer to a prompt and decide whether it is
acceptable, returning ``Validation.valid()`` or ``Validation.invalid(...)``.
A validator that cannot decide raises an exception, which propagates to
the caller.
"""

from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import regex

__all__ = [
    "ErrorMessage",
    "Validation",
    "StringValidator",
    "MultiOptionValidator",
    "CustomTypeValidator",
    "DateValidator",
    "inquire_length",
]

_GRAPHEME = regex.compile(r"\X")


@dataclass(frozen=True)
class ErrorMessage:
    """Message shown when an answer is rejected.

    A message without text is the default one; the renderer supplies its
    standard wording in that case.
    """

    text: str | None = None

    @classmethod
    def custom(cls, message: Any) -> ErrorMessage:
        """Build a custom message from any value, using its string form."""
        return cls(str(message))

    @property
    def is_default(self) -> bool:
        return self.text is None

    def __str__(self) -> str:
        return "" if self.text is None else self.text


@dataclass(frozen=True)
class Validation:
    """Outcome of a successful validator run: valid, or invalid with a message."""

    error: ErrorMessage | None = None

    @classmethod
    def valid(cls) -> Validation:
        return cls()

    @classmethod
    def invalid(cls, message: Any = None) -> Validation:
        """Build an invalid result.

        ``message`` may be an :class:`ErrorMessage`, ``None`` for the default
        message, or any value whose string form becomes a custom message.
        """
        if isinstance(message, ErrorMessage):
            error = message
        elif message is None:
            error = ErrorMessage()
        else:
            error = ErrorMessage.custom(message)
        return cls(error)

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.is_valid


class _Validator(ABC):
    """Shared behaviour: a validator can be called like a function."""

    @abstractmethod
    def validate(self, input: Any) -> Validation:
        """Decide whether ``input`` is acceptable."""

    def __call__(self, input: Any) -> Validation:
        return self.validate(input)


class StringValidator(_Validator):
    """Validator for free-text answers."""

    @abstractmethod
    def validate(self, input: str) -> Validation:
        """Decide whether the given text is acceptable."""


class MultiOptionValidator(_Validator):
    """Validator for a list of selected options."""

    @abstractmethod
    def validate(self, input: Sequence[Any]) -> Validation:
        """Decide whether the given selection is acceptable."""


class CustomTypeValidator(_Validator):
    """Validator for an answer already parsed into a custom type."""

    @abstractmethod
    def validate(self, input: Any) -> Validation:
        """Decide whether the given value is acceptable."""


class DateValidator(_Validator):
    """Validator for a chosen calendar date."""

    @abstractmethod
    def validate(self, input: datetime.date) -> Validation:
        """Decide whether the given date is acceptable."""


def inquire_length(value: str | Sequence[Any]) -> int:
    """Length of an answer.

    Text is measured in extended grapheme clusters, so combined emoji and
    characters with variation selectors count once; other sequences use
    their item count.
    """
    if isinstance(value, str):
        return len(_GRAPHEME.findall(value))
    return len(value)