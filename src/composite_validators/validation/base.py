"""BaseValidator and CompositeValidator — the composite pattern core."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..ports.validation import IValidator
from .result import ValidationOutcome

logger = logging.getLogger("composite_validators.validation")


def describe_validator(validator: IValidator) -> dict[str, Any]:
    """Return ``validator.describe()``, or its class name for plain IValidators."""
    describe = getattr(validator, "describe", None)
    if callable(describe):
        return describe()  # type: ignore[no-any-return]
    return {"validator": type(validator).__name__}


class BaseValidator(ABC):
    """Base class for validators with ``&`` composition support."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def evaluate(self, value: str) -> ValidationOutcome:
        ...

    def describe(self) -> dict[str, Any]:
        """Return a serialisable description of this validator."""
        return {"validator": self.name}

    def __and__(self, other: IValidator) -> CompositeValidator:
        return CompositeValidator(self, other)


class CompositeValidator(BaseValidator):
    """Runs child validators in order and stops at the first failure.

    Unlike collecting validation, only the **first** failing child's
    reason is reported; later children are never evaluated. A composite
    with no children is always valid.

    Usage::

        validator = CompositeValidator(
            EmptyStringValidator(PasswordValidationReason.EMPTY),
            CompositeValidator(PasswordLengthValidator(), ContainsNumberValidator()),
        )
        outcome = validator.evaluate("hunter2")
    """

    def __init__(self, *validators: IValidator) -> None:
        for validator in validators:
            if not isinstance(validator, IValidator):
                raise TypeError(
                    f"CompositeValidator children must implement evaluate(); "
                    f"got {type(validator).__name__}"
                )
        self._validators: tuple[IValidator, ...] = validators

    @property
    def validators(self) -> tuple[IValidator, ...]:
        return self._validators

    def evaluate(self, value: str) -> ValidationOutcome:
        for validator in self._validators:
            outcome = validator.evaluate(value)
            if not outcome.is_valid:
                logger.debug(
                    "%s stopped at %s: %s",
                    self.name,
                    type(validator).__name__,
                    outcome.reason.value if outcome.reason is not None else None,
                )
                return outcome
        return ValidationOutcome.valid()

    def describe(self) -> dict[str, Any]:
        return {
            "validator": self.name,
            "children": [describe_validator(v) for v in self._validators],
        }

    def __and__(self, other: IValidator) -> CompositeValidator:
        # Appending keeps a & b & c flat; evaluation order is unchanged.
        return CompositeValidator(*self._validators, other)
