"""Exception hierarchy for composite-validators.

Failing validation is never an exception: validators return
:class:`~composite_validators.validation.result.ValidationOutcome`.
These exceptions cover misuse of the library itself (bad settings,
unknown validator kinds) and provide ``to_dict()`` for API-friendly
error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class CompositeValidatorsError(Exception):
    """Root exception for the composite-validators package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidatorConfigurationError(CompositeValidatorsError):
    """Raised when configurator settings are invalid.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(
        self,
        message: str,
        errors: dict[str, list[str]] | None = None,
    ) -> None:
        self.message = message
        self.errors: dict[str, list[str]] = errors or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATOR_CONFIGURATION_ERROR",
            "message": self.message,
            "errors": self.errors,
        }


class UnknownValidatorKindError(CompositeValidatorsError, LookupError):
    """
    Unknown validator kind requested from the configurator.

    Provides fuzzy-matched suggestions for likely intended kinds.
    """

    def __init__(self, kind: str, known_kinds: list[str]) -> None:
        self.kind = kind
        self.known_kinds = known_kinds
        self.suggestions = get_close_matches(kind, known_kinds, n=3, cutoff=0.6)

        message = f"Unknown validator kind: '{kind}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Known kinds: {', '.join(sorted(known_kinds))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_VALIDATOR_KIND",
            "kind": self.kind,
            "suggestions": self.suggestions,
            "known_kinds": sorted(self.known_kinds),
        }
