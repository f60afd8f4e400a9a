import datetime

import pytest

from answercheck.validation import (
    CustomTypeValidator,
    DateValidator,
    ErrorMessage,
    MultiOptionValidator,
    StringValidator,
    Validation,
    inquire_length,
)

HEART = "\u2665\uFE0F"
FACEPALM = "\U0001F926\U0001F3FC\u200D\u2642\uFE0F"


class DigitRequired(StringValidator):
    def validate(self, input):
        if any(c.isdigit() for c in input):
            return Validation.valid()
        return Validation.invalid("Your password should contain at least 1 digit")


class NoWeekends(DateValidator):
    def validate(self, input):
        if input.weekday() >= 5:
            return Validation.invalid("Weekends are not allowed")
        return Validation.valid()


class AtMostTwo(MultiOptionValidator):
    def validate(self, input):
        if len(input) <= 2:
            return Validation.valid()
        return Validation.invalid("You should select at most two options")


class Positive(CustomTypeValidator):
    def validate(self, input):
        if input > 0:
            return Validation.valid()
        return Validation.invalid()


class Failing(StringValidator):
    def validate(self, input):
        raise RuntimeError("backend unavailable")


def test_error_message_default():
    message = ErrorMessage()
    assert message.is_default
    assert message.text is None
    assert str(message) == ""


def test_error_message_custom_uses_string_form():
    assert ErrorMessage.custom("oops") == ErrorMessage("oops")
    assert ErrorMessage.custom(42).text == "42"
    assert not ErrorMessage.custom("x").is_default


def test_validation_valid():
    result = Validation.valid()
    assert result.is_valid
    assert bool(result) is True
    assert result.error is None
    assert result == Validation.valid()


def test_validation_invalid_from_string_equals_custom_message():
    assert Validation.invalid("bad") == Validation.invalid(ErrorMessage.custom("bad"))
    assert Validation.invalid("bad").error == ErrorMessage("bad")
    assert not Validation.invalid("bad").is_valid


def test_validation_invalid_without_message_uses_default():
    result = Validation.invalid()
    assert result.error == ErrorMessage()
    assert bool(result) is False


def test_validation_valid_differs_from_invalid():
    assert Validation.valid() != Validation.invalid()


@pytest.mark.parametrize(
    "cls", [StringValidator, MultiOptionValidator, CustomTypeValidator, DateValidator]
)
def test_interfaces_are_abstract(cls):
    with pytest.raises(TypeError):
        cls()


def test_string_validator_example():
    validator = DigitRequired()
    assert validator.validate("hunter2") == Validation.valid()
    assert validator.validate("password") == Validation.invalid(
        "Your password should contain at least 1 digit"
    )


def test_validator_is_callable():
    validator = DigitRequired()
    assert validator("abc1") == Validation.valid()
    assert validator("abc") == validator.validate("abc")


def test_date_validator_example():
    validator = NoWeekends()
    assert validator.validate(datetime.date(2021, 7, 26)) == Validation.valid()
    assert validator.validate(datetime.date(2021, 7, 25)) == Validation.invalid(
        "Weekends are not allowed"
    )


def test_multi_option_validator_example():
    validator = AtMostTwo()
    answers = ["a", "b"]
    assert validator.validate(answers) == Validation.valid()
    answers.append("d")
    assert validator.validate(answers) == Validation.invalid(
        "You should select at most two options"
    )


def test_custom_type_validator():
    validator = Positive()
    assert validator.validate(3) == Validation.valid()
    assert validator.validate(-1) == Validation.invalid(ErrorMessage())


def test_validator_errors_propagate():
    validator = Failing()
    with pytest.raises(RuntimeError, match="backend unavailable"):
        StringValidator.__call__(validator, "anything")
    with pytest.raises(RuntimeError, match="backend unavailable"):
        validator("anything")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("five!", 5),
        ("five!!!", 7),
        ("mike", 4),
        (HEART * 5, 5),
        (HEART * 6, 6),
        (FACEPALM * 4, 4),
        (FACEPALM * 5, 5),
        (FACEPALM * 6, 6),
    ],
)
def test_string_length_counts_graphemes(text, expected):
    assert inquire_length(text) == expected


@pytest.mark.parametrize("count", [0, 1, 4, 5, 8])
def test_sequence_length(count):
    assert inquire_length([""] * count) == count
    assert inquire_length(tuple(range(count))) == count