"""ValidationOutcome — valid, or invalid with a single reason."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .reasons import FailureReason


@dataclass(frozen=True)
class ValidationOutcome:
    """Immutable result of one ``evaluate`` call.

    Usage::

        outcome = ValidationOutcome.valid()
        outcome = ValidationOutcome.invalid(PasswordValidationReason.TOO_SHORT)
    """

    reason: FailureReason | None = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def valid(cls) -> ValidationOutcome:
        return cls()

    @classmethod
    def invalid(cls, reason: FailureReason) -> ValidationOutcome:
        if reason is None:
            raise ValueError("An invalid outcome requires a reason.")
        return cls(reason=reason)

    # ── Serialisation ────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "reason": None if self.reason is None else self.reason.value,
        }

    def __bool__(self) -> bool:
        return self.is_valid
