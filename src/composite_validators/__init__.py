"""composite-validators — string validators composed with the composite pattern.

Leaf validators each check one property of a string; a
``CompositeValidator`` runs its children in order and reports the first
failure. ``ValidatorConfigurator`` wires them into email and password
validators.
"""

from __future__ import annotations

from .config import ValidatorSettings, load_settings
from .configurator import (
    ValidatorConfigurator,
    default_configurator,
    email_validator,
    password_validator,
    validator_for,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IValidator

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    CompositeValidatorsError,
    UnknownValidatorKindError,
    ValidatorConfigurationError,
)

# ── Validation ───────────────────────────────────────────────────
from .validation import (
    BaseValidator,
    CompositeValidator,
    ContainsNumberValidator,
    EmailFormatValidator,
    EmailValidationReason,
    EmptyStringValidator,
    FailureReason,
    LowercaseLetterValidator,
    PasswordLengthValidator,
    PasswordValidationReason,
    UppercaseLetterValidator,
    ValidationOutcome,
)

__all__ = [
    # Configuration
    "ValidatorConfigurator",
    "ValidatorSettings",
    "default_configurator",
    "email_validator",
    "load_settings",
    "password_validator",
    "validator_for",
    # Ports
    "IValidator",
    # Validation
    "BaseValidator",
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
    # Exceptions
    "CompositeValidatorsError",
    "UnknownValidatorKindError",
    "ValidatorConfigurationError",
]
