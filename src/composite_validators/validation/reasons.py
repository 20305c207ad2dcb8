from enum import Enum


class EmailValidationReason(str, Enum):
    """Why an email address was rejected."""

    EMPTY = "email.empty"
    INVALID_FORMAT = "email.invalid_format"


class PasswordValidationReason(str, Enum):
    """Why a password was rejected."""

    EMPTY = "password.empty"
    TOO_SHORT = "password.too_short"
    NO_UPPERCASE_LETTER = "password.no_uppercase_letter"
    NO_LOWERCASE_LETTER = "password.no_lowercase_letter"
    NO_NUMBER = "password.no_number"


FailureReason = EmailValidationReason | PasswordValidationReason
