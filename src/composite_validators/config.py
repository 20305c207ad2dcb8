"""Immutable settings for the validator configurator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .primitives.exceptions import ValidatorConfigurationError
from .validation.leaves import DEFAULT_PASSWORD_MIN_LENGTH

if TYPE_CHECKING:
    from collections.abc import Mapping


class ValidatorSettings(BaseModel):
    """Tunable parameters of the pre-wired composites.

    Settings are immutable and defined by their attributes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    password_min_length: int = Field(default=DEFAULT_PASSWORD_MIN_LENGTH, ge=1)


def load_settings(
    settings: ValidatorSettings | Mapping[str, Any] | None = None,
) -> ValidatorSettings:
    """Coerce *settings* into :class:`ValidatorSettings`.

    Raises:
        ValidatorConfigurationError: If the mapping fails model validation.
    """
    if settings is None:
        return ValidatorSettings()
    if isinstance(settings, ValidatorSettings):
        return settings

    try:
        return ValidatorSettings.model_validate(settings)
    except PydanticValidationError as exc:
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
            msg = error.get("msg", "validation error")
            errors.setdefault(loc or "__root__", []).append(msg)
        raise ValidatorConfigurationError(
            f"Invalid validator settings: {errors}", errors=errors
        ) from exc
