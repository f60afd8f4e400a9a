"""Ready-made validators for common answer constraints.

The length validators measure text in grapheme clusters and selections
by their number of items, so one instance works for both free-text and
multi-option answers.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from answercheck.validation import (
    MultiOptionValidator,
    StringValidator,
    Validation,
    inquire_length,
)

__all__ = [
    "ValueRequiredValidator",
    "MaxLengthValidator",
    "MinLengthValidator",
    "ExactLengthValidator",
    "required",
    "max_length",
    "min_length",
    "length",
]

_DEFAULT_REQUIRED_MESSAGE = "A response is required."


def _check_limit(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class ValueRequiredValidator(StringValidator):
    """Rejects an empty answer."""

    message: str = _DEFAULT_REQUIRED_MESSAGE

    def validate(self, input: str) -> Validation:
        if not input:
            return Validation.invalid(self.message)
        return Validation.valid()

    def __call__(self, input: str) -> Validation:
        return self.validate(input)


@dataclass(frozen=True)
class MaxLengthValidator(StringValidator, MultiOptionValidator):
    """Rejects an answer longer than ``limit``."""

    limit: int
    message: str | None = None

    def __post_init__(self) -> None:
        _check_limit("limit", self.limit)
        if self.message is None:
            object.__setattr__(
                self,
                "message",
                f"The length of the response should be at most {self.limit}",
            )

    def with_message(self, message: Any) -> MaxLengthValidator:
        """Return a copy of this validator using a custom error message."""
        return dataclasses.replace(self, message=str(message))

    def validate(self, input: str | Sequence[Any]) -> Validation:
        if inquire_length(input) <= self.limit:
            return Validation.valid()
        return Validation.invalid(self.message)

    def __call__(self, input: str | Sequence[Any]) -> Validation:
        return self.validate(input)


@dataclass(frozen=True)
class MinLengthValidator(StringValidator, MultiOptionValidator):
    """Rejects an answer shorter than ``limit``."""

    limit: int
    message: str | None = None

    def __post_init__(self) -> None:
        _check_limit("limit", self.limit)
        if self.message is None:
            object.__setattr__(
                self,
                "message",
                f"The length of the response should be at least {self.limit}",
            )

    def with_message(self, message: Any) -> MinLengthValidator:
        """Return a copy of this validator using a custom error message."""
        return dataclasses.replace(self, message=str(message))

    def validate(self, input: str | Sequence[Any]) -> Validation:
        if inquire_length(input) >= self.limit:
            return Validation.valid()
        return Validation.invalid(self.message)

    def __call__(self, input: str | Sequence[Any]) -> Validation:
        return self.validate(input)


@dataclass(frozen=True)
class ExactLengthValidator(StringValidator, MultiOptionValidator):
    """Rejects an answer whose length is not exactly ``length``."""

    length: int
    message: str | None = None

    def __post_init__(self) -> None:
        _check_limit("length", self.length)
        if self.message is None:
            object.__setattr__(
                self,
                "message",
                f"The length of the response should be {self.length}",
            )

    def with_message(self, message: Any) -> ExactLengthValidator:
        """Return a copy of this validator using a custom error message."""
        return dataclasses.replace(self, message=str(message))

    def validate(self, input: str | Sequence[Any]) -> Validation:
        if inquire_length(input) == self.length:
            return Validation.valid()
        return Validation.invalid(self.message)

    def __call__(self, input: str | Sequence[Any]) -> Validation:
        return self.validate(input)


def required(message: Any = None) -> ValueRequiredValidator:
    """Validator rejecting empty answers, with an optional custom message."""
    if message is None:
        return ValueRequiredValidator()
    return ValueRequiredValidator(str(message))


def max_length(limit: int, message: Any = None) -> MaxLengthValidator:
    """Validator accepting answers of at most ``limit`` in length."""
    validator = MaxLengthValidator(limit)
    return validator if message is None else validator.with_message(message)


def min_length(limit: int, message: Any = None) -> MinLengthValidator:
    """Validator accepting answers of at least ``limit`` in length."""
    validator = MinLengthValidator(limit)
    return validator if message is None else validator.with_message(message)


def length(length: int, message: Any = None) -> ExactLengthValidator:
    """Validator accepting answers of exactly ``length`` in length."""
    validator = ExactLengthValidator(length)
    return validator if message is None else validator.with_message(message)