# answercheck

Small validators for answers that users type or choose in interactive
prompts.

A validator looks at an answer and returns a `Validation`. The result is
either valid, or invalid with an `ErrorMessage` that can be shown to the
user. If a validator raises an exception, that exception reaches the
caller unchanged.

## Installation

```
pip install answercheck
```

## Results

`answercheck.validation` holds the result types:

- `Validation.valid()` and `Validation.invalid(message=None)` build results.
  `message` may be an `ErrorMessage`, `None` for the default message, or any
  value whose string form becomes a custom message.
- `Validation.is_valid` tells the two apart, and a `Validation` is truthy
  only when it is valid. An invalid result carries its message in `error`.
- `ErrorMessage.custom(message)` builds a custom message; `ErrorMessage()`
  is the default message, with `is_default` set and no text.

Both are frozen dataclasses, so results compare by value.

## Built-in validators

`answercheck.builtin` provides:

- `ValueRequiredValidator(message="A response is required.")`, which rejects
  an empty answer.
- `MaxLengthValidator(limit)`, `MinLengthValidator(limit)` and
  `ExactLengthValidator(length)`, which compare the answer's length with the
  given number. Each has a default message, and `with_message(message)`
  returns a copy with a custom one. A negative number raises `ValueError`.
- The shorthands `required(message=None)`, `max_length(limit, message=None)`,
  `min_length(limit, message=None)` and `length(length, message=None)`.

```python
from answercheck.builtin import (
    ExactLengthValidator,
    MinLengthValidator,
    max_length,
    required,
)
from answercheck.validation import Validation

check = required()
assert check.validate("Generic input") == Validation.valid()
assert check.validate("") == Validation.invalid("A response is required.")

check = max_length(5, "Not too large!")
assert check.validate("Good") == Validation.valid()
assert check.validate("Terrible") == Validation.invalid("Not too large!")

check = MinLengthValidator(3)
assert check.validate("No") == Validation.invalid(
    "The length of the response should be at least 3"
)

check = ExactLengthValidator(3).with_message("Three characters please.")
assert check("Yes") == Validation.valid()
```

Every validator can be called directly; calling it is the same as calling
`validate`.

Text is measured in user-perceived characters (extended grapheme clusters),
not in code points, so `"♥️♥️♥️♥️♥️"` has a length of 5. Any other sequence,
such as a list of selected options, is measured by its number of items, so
the length validators also work for multi-selection answers.
`inquire_length(value)` in `answercheck.validation` returns this length, so
your own validators can count the same way.

## Writing your own validator

Subclass one of the abstract classes in `answercheck.validation` and
implement `validate`: `StringValidator` for text, `MultiOptionValidator`
for a selection, `CustomTypeValidator` for an already parsed value, or
`DateValidator` for a `datetime.date`.

```python
import datetime

from answercheck.validation import DateValidator, Validation


class NoWeekends(DateValidator):
    def validate(self, input):
        if input.weekday() >= 5:
            return Validation.invalid("Weekends are not allowed")
        return Validation.valid()


assert NoWeekends().validate(datetime.date(2021, 7, 26)) == Validation.valid()
assert not NoWeekends()(datetime.date(2021, 7, 25))
```

## What this package does not do

It only decides whether answers are acceptable. It does not show prompts,
read input from a terminal or render error messages; in particular, the
wording of the default `ErrorMessage` is left to whatever displays it.