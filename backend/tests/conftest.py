"""Shared fixtures for evaluator and API tests."""

from unittest.mock import Mock, PropertyMock

import pytest

from credit_cards.core.enums import ValidationMode
from credit_cards.services.evaluator import CreditCardApplicationEvaluator
from credit_cards.services.validators import FrequentFlyerNumberValidator


@pytest.fixture
def mock_validator():
    """Validator mock with an active license that accepts every number."""
    validator = Mock(spec=FrequentFlyerNumberValidator)
    validator.get_license_status.return_value = "OK"
    validator.is_valid.return_value = True
    return validator


@pytest.fixture
def validation_mode(mock_validator):
    """PropertyMock recording reads and writes of validation_mode."""
    mode_property = PropertyMock(return_value=ValidationMode.QUICK)
    type(mock_validator).validation_mode = mode_property
    return mode_property


@pytest.fixture
def evaluator(mock_validator, validation_mode):
    """Evaluator wired to the mock validator with default thresholds."""
    return CreditCardApplicationEvaluator(mock_validator)
