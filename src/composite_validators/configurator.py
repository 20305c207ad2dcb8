"""
ValidatorConfigurator — factory for the pre-wired field validators.

The configurator holds only immutable settings, so one shared instance
serves the whole process. Module-level :func:`email_validator` and
:func:`password_validator` delegate to that instance.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .config import ValidatorSettings, load_settings
from .primitives.exceptions import UnknownValidatorKindError
from .validation.base import CompositeValidator
from .validation.leaves import (
    ContainsNumberValidator,
    EmailFormatValidator,
    EmptyStringValidator,
    LowercaseLetterValidator,
    PasswordLengthValidator,
    UppercaseLetterValidator,
)
from .validation.reasons import EmailValidationReason, PasswordValidationReason

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger("composite_validators.configurator")


class ValidatorConfigurator:
    """
    Builds composite validators for known field kinds.

    Every call returns a freshly built composite::

        configurator = ValidatorConfigurator.shared_instance()
        configurator.password_validator().evaluate("paSSw0rd")

    Kinds can also be looked up by name with :meth:`validator_for`.
    """

    def __init__(
        self,
        settings: ValidatorSettings | Mapping[str, Any] | None = None,
    ) -> None:
        self._settings = load_settings(settings)
        self._factories: dict[str, Callable[[], CompositeValidator]] = {
            "email": self.email_validator,
            "password": self.password_validator,
        }

    @classmethod
    def shared_instance(cls) -> ValidatorConfigurator:
        """Return the process-wide configurator with default settings."""
        return default_configurator

    @property
    def settings(self) -> ValidatorSettings:
        return self._settings

    @property
    def kinds(self) -> tuple[str, ...]:
        return tuple(sorted(self._factories))

    # -- named composites ----------------------------------------------------

    def email_validator(self) -> CompositeValidator:
        """Empty check first, so ``""`` reports EMPTY rather than bad format."""
        validator = CompositeValidator(
            EmptyStringValidator(EmailValidationReason.EMPTY),
            EmailFormatValidator(),
        )
        logger.debug("Built email validator: %s", validator.describe())
        return validator

    def password_validator(self) -> CompositeValidator:
        """Empty check, then the nested strength composite."""
        validator = CompositeValidator(
            EmptyStringValidator(PasswordValidationReason.EMPTY),
            self._password_strength_validator(),
        )
        logger.debug("Built password validator: %s", validator.describe())
        return validator

    def validator_for(self, kind: str) -> CompositeValidator:
        """
        Build the composite registered under *kind* (case-insensitive).

        Raises:
            UnknownValidatorKindError: If *kind* is not a known kind.
        """
        factory = self._factories.get(kind.strip().lower())
        if factory is None:
            raise UnknownValidatorKindError(kind, list(self._factories))
        return factory()

    # -- helpers -------------------------------------------------------------

    def _password_strength_validator(self) -> CompositeValidator:
        # Length runs before the character-class checks.
        return CompositeValidator(
            PasswordLengthValidator(self._settings.password_min_length),
            UppercaseLetterValidator(),
            LowercaseLetterValidator(),
            ContainsNumberValidator(),
        )


default_configurator = ValidatorConfigurator()


def email_validator() -> CompositeValidator:
    return default_configurator.email_validator()


def password_validator() -> CompositeValidator:
    return default_configurator.password_validator()


def validator_for(kind: str) -> CompositeValidator:
    return default_configurator.validator_for(kind)
