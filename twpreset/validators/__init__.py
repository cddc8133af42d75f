"""
Pluggable validator system for preset checking.

Usage:
    from twpreset.validators import discover_validators, registry

    discover_validators()  # Import all validator modules
    for validator in registry.list_all():
        result = validator.validate(context)
"""

from .base import (
    BaseValidator,
    DisallowedPropertyFailure,
    Failure,
    InconsistentMappingFailure,
    MissingUtilityFailure,
    ValidationContext,
    Validator,
    ValidatorResult,
)
from .css_extract import extract_classes, extract_properties, kebab_to_camel
from .registry import discover_validators, register_validator, registry

__all__ = [
    # Base types
    "ValidationContext",
    "ValidatorResult",
    "Failure",
    "MissingUtilityFailure",
    "DisallowedPropertyFailure",
    "InconsistentMappingFailure",
    # Protocols
    "Validator",
    # Base class
    "BaseValidator",
    # Extraction
    "extract_classes",
    "extract_properties",
    "kebab_to_camel",
    # Registry
    "registry",
    "register_validator",
    "discover_validators",
]
