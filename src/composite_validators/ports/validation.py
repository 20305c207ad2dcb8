"""IValidator — composable string-validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..validation.result import ValidationOutcome


@runtime_checkable
class IValidator(Protocol):
    """Protocol for string validators.

    Leaf validators and
    :class:`~composite_validators.validation.base.CompositeValidator`
    both satisfy it, so composites nest to any depth.
    """

    def evaluate(self, value: str) -> ValidationOutcome:
        """Validate *value* and return a
        :class:`~composite_validators.validation.result.ValidationOutcome`.

        Must return :meth:`ValidationOutcome.valid()` or
        :meth:`ValidationOutcome.invalid(reason)`; never raises for
        an ordinary string.
        """
        ...
