"""Validation system: ValidationOutcome, leaf validators, CompositeValidator."""

from __future__ import annotations

from .base import BaseValidator, CompositeValidator, describe_validator
from .leaves import (
    DEFAULT_PASSWORD_MIN_LENGTH,
    CharacterClassValidator,
    ContainsNumberValidator,
    EmailFormatValidator,
    EmptyStringValidator,
    LowercaseLetterValidator,
    PasswordLengthValidator,
    UppercaseLetterValidator,
    count_graphemes,
)
from .reasons import EmailValidationReason, FailureReason, PasswordValidationReason
from .result import ValidationOutcome

__all__ = [
    "DEFAULT_PASSWORD_MIN_LENGTH",
    "BaseValidator",
    "CharacterClassValidator",
    "CompositeValidator",
    "ContainsNumberValidator",
    "EmailFormatValidator",
    "EmailValidationReason",
    "EmptyStringValidator",
    "FailureReason",
    "LowercaseLetterValidator",
    "PasswordLengthValidator",
    "PasswordValidationReason",
    "UppercaseLetterValidator",
    "ValidationOutcome",
    "count_graphemes",
    "describe_validator",
]
