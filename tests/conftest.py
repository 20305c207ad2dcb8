"""Shared fixtures for composite-validators tests."""

from __future__ import annotations

import pytest

from composite_validators import CompositeValidator, ValidatorConfigurator


@pytest.fixture
def configurator() -> ValidatorConfigurator:
    """Configurator with default settings."""
    return ValidatorConfigurator()


@pytest.fixture
def email(configurator: ValidatorConfigurator) -> CompositeValidator:
    return configurator.email_validator()


@pytest.fixture
def password(configurator: ValidatorConfigurator) -> CompositeValidator:
    return configurator.password_validator()
