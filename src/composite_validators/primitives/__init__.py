from .exceptions import (
    CompositeValidatorsError,
    UnknownValidatorKindError,
    ValidatorConfigurationError,
)

__all__ = [
    "CompositeValidatorsError",
    "UnknownValidatorKindError",
    "ValidatorConfigurationError",
]
