import pytest
from pydantic import ValidationError as PydanticValidationError

from composite_validators.config import ValidatorSettings, load_settings
from composite_validators.configurator import ValidatorConfigurator
from composite_validators.primitives.exceptions import ValidatorConfigurationError


def test_default_settings() -> None:
    settings = load_settings()

    assert settings.password_min_length == 8


def test_load_settings_passes_instances_through() -> None:
    settings = ValidatorSettings(password_min_length=10)

    assert load_settings(settings) is settings


def test_settings_are_frozen() -> None:
    settings = ValidatorSettings()

    with pytest.raises(PydanticValidationError):
        settings.password_min_length = 3  # type: ignore[misc]


def test_settings_reject_non_positive_length() -> None:
    with pytest.raises(ValidatorConfigurationError) as exc:
        load_settings({"password_min_length": 0})

    assert "password_min_length" in exc.value.errors


def test_settings_reject_unknown_keys() -> None:
    with pytest.raises(ValidatorConfigurationError) as exc:
        load_settings({"password_max_length": 64})

    assert "password_max_length" in exc.value.errors


def test_settings_reject_non_mapping() -> None:
    with pytest.raises(ValidatorConfigurationError) as exc:
        load_settings(42)  # type: ignore[arg-type]

    assert "__root__" in exc.value.errors


def test_configurator_surfaces_configuration_error() -> None:
    with pytest.raises(ValidatorConfigurationError):
        ValidatorConfigurator({"password_min_length": "eight"})
