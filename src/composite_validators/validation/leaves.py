"""
Leaf validators.

Each leaf checks exactly one property of a string and is a pure, total
function of its input: it returns an invalid outcome instead of raising.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, ClassVar

import regex

from .base import BaseValidator
from .reasons import EmailValidationReason, PasswordValidationReason
from .result import ValidationOutcome

if TYPE_CHECKING:
    from .reasons import FailureReason

DEFAULT_PASSWORD_MIN_LENGTH = 8

_EMAIL_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
_EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    rf"@{_EMAIL_LABEL}(?:\.{_EMAIL_LABEL})*"
)

# Extended grapheme cluster: one user-perceived character.
_GRAPHEME_CLUSTER = regex.compile(r"\X")


def count_graphemes(value: str) -> int:
    """Count user-perceived characters, e.g. ``"e\\u0301"`` counts as one."""
    return len(_GRAPHEME_CLUSTER.findall(value))


class EmptyStringValidator(BaseValidator):
    """Rejects the empty string with the reason given at construction."""

    def __init__(self, reason: FailureReason) -> None:
        self.reason = reason

    def evaluate(self, value: str) -> ValidationOutcome:
        if not value:
            return ValidationOutcome.invalid(self.reason)
        return ValidationOutcome.valid()

    def describe(self) -> dict[str, Any]:
        return {"validator": self.name, "reason": self.reason.value}


class EmailFormatValidator(BaseValidator):
    """
    Checks the whole value against an email-address grammar.

    ``local-part@label(.label)*`` where every domain label is 1-63
    alphanumeric characters, with hyphens allowed only inside a label.
    """

    def evaluate(self, value: str) -> ValidationOutcome:
        if _EMAIL_PATTERN.fullmatch(value):
            return ValidationOutcome.valid()
        return ValidationOutcome.invalid(EmailValidationReason.INVALID_FORMAT)


class PasswordLengthValidator(BaseValidator):
    """Requires at least ``min_length`` grapheme clusters."""

    def __init__(self, min_length: int = DEFAULT_PASSWORD_MIN_LENGTH) -> None:
        if min_length < 1:
            raise ValueError(f"min_length must be at least 1, got {min_length}")
        self.min_length = min_length

    def evaluate(self, value: str) -> ValidationOutcome:
        if count_graphemes(value) >= self.min_length:
            return ValidationOutcome.valid()
        return ValidationOutcome.invalid(PasswordValidationReason.TOO_SHORT)

    def describe(self) -> dict[str, Any]:
        return {"validator": self.name, "min_length": self.min_length}


class CharacterClassValidator(BaseValidator):
    """Valid iff the value contains at least one character of ``pattern``."""

    pattern: ClassVar[re.Pattern[str]]
    reason: ClassVar[FailureReason]

    def evaluate(self, value: str) -> ValidationOutcome:
        if self.pattern.search(value):
            return ValidationOutcome.valid()
        return ValidationOutcome.invalid(self.reason)


class UppercaseLetterValidator(CharacterClassValidator):
    pattern = re.compile(r"[A-Z]")
    reason = PasswordValidationReason.NO_UPPERCASE_LETTER


class LowercaseLetterValidator(CharacterClassValidator):
    pattern = re.compile(r"[a-z]")
    reason = PasswordValidationReason.NO_LOWERCASE_LETTER


class ContainsNumberValidator(CharacterClassValidator):
    pattern = re.compile(r"[0-9]")
    reason = PasswordValidationReason.NO_NUMBER
