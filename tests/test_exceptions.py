"""Tests for exceptions module."""

from __future__ import annotations

from composite_validators.primitives.exceptions import (
    CompositeValidatorsError,
    UnknownValidatorKindError,
    ValidatorConfigurationError,
)

# -- UnknownValidatorKindError -----------------------------------------------


def test_unknown_kind_fuzzy_suggestion():
    err = UnknownValidatorKindError("emial", ["email", "password"])
    assert "emial" in str(err)
    assert "email" in err.suggestions


def test_unknown_kind_no_matches():
    err = UnknownValidatorKindError("zzzzz", ["email", "password"])
    d = err.to_dict()
    assert d["error"] == "UNKNOWN_VALIDATOR_KIND"
    assert d["suggestions"] == []
    assert "Did you mean" not in str(err)


def test_unknown_kind_to_dict():
    err = UnknownValidatorKindError("pass", ["password", "email"])
    d = err.to_dict()
    assert d["kind"] == "pass"
    assert d["known_kinds"] == ["email", "password"]


# -- ValidatorConfigurationError ---------------------------------------------


def test_configuration_error_with_errors():
    err = ValidatorConfigurationError(
        "bad settings", errors={"password_min_length": ["too small"]}
    )
    d = err.to_dict()
    assert d["error"] == "VALIDATOR_CONFIGURATION_ERROR"
    assert d["errors"] == {"password_min_length": ["too small"]}


def test_configuration_error_no_errors():
    err = ValidatorConfigurationError("bad settings")
    assert err.errors == {}
    assert str(err) == "bad settings"


def test_base_error_to_dict():
    err = CompositeValidatorsError("boom")
    assert err.to_dict() == {"error": "CompositeValidatorsError", "message": "boom"}


# -- Hierarchy ---------------------------------------------------------------


def test_all_inherit_from_composite_validators_error():
    assert issubclass(ValidatorConfigurationError, CompositeValidatorsError)
    assert issubclass(UnknownValidatorKindError, CompositeValidatorsError)
    assert issubclass(UnknownValidatorKindError, LookupError)
