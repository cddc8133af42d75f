"""
Base test mixins for validator test classes.

Usage:
    class TestValidatorProperties(ValidatorPropertiesTestMixin):
        validator_name = "my-validator"
        validator_category = "coverage"

        @pytest.fixture
        def validator(self):
            return MyValidator()
"""

from __future__ import annotations

from typing import Any

import pytest

from twpreset.validators.base import ValidationContext


class ValidatorPropertiesTestMixin:
    """Mixin providing standard validator property tests.

    Subclasses must define:
        validator_name: str - expected validator name
        validator_category: str - expected category

    Subclasses must also provide a `validator` pytest fixture that returns
    an instance of the validator being tested.
    """

    validator_name: str
    validator_category: str

    @pytest.mark.evergreen
    def test_name(self, validator: Any) -> None:
        """Verify validator has correct name."""
        assert validator.name == self.validator_name

    @pytest.mark.evergreen
    def test_category(self, validator: Any) -> None:
        """Verify validator has correct category."""
        assert validator.category == self.validator_category

    @pytest.mark.evergreen
    def test_result_carries_validator_name(self, validator: Any) -> None:
        """Verify results are attributed to the validator that produced them."""
        context = ValidationContext(classes=frozenset(), properties=frozenset())
        result = validator.validate(context)
        assert result.validator == self.validator_name
