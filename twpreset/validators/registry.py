"""
Validator registry for plugin discovery and registration.

Validators register themselves on import via ``@register_validator``;
``discover_validators`` imports every module of the package so the runner
sees all of them.
"""

from __future__ import annotations

import importlib
import pkgutil
import warnings
from typing import Optional, Type, TypeVar

from .base import Validator

# Type variable for the decorator
V = TypeVar("V", bound=Type[Validator])

VALID_CATEGORIES = frozenset({"coverage", "allowlist", "schema"})


class ValidatorRegistry:
    """Registry for validator plugins.

    Keeps registration order so runs report validators deterministically.
    """

    def __init__(self) -> None:
        self._validators: dict[str, Validator] = {}
        self._by_category: dict[str, list[str]] = {}

    def register(self, validator: Validator) -> None:
        """Register a validator instance.

        Raises:
            TypeError: If validator doesn't implement the Validator protocol.
            ValueError: If the name is taken or the category is unknown.
        """
        if not isinstance(validator, Validator):
            raise TypeError(
                f"Validator must implement the Validator protocol. "
                f"Got {type(validator).__name__} which is missing required "
                f"attributes/methods (name, category, validate)."
            )

        name = validator.name
        category = validator.category

        if name in self._validators:
            existing = self._validators[name]
            raise ValueError(
                f"Validator '{name}' is already registered "
                f"(existing: {type(existing).__name__}, "
                f"new: {type(validator).__name__})"
            )

        if category not in VALID_CATEGORIES:
            raise ValueError(
                f"Invalid category '{category}' for validator '{name}'. "
                f"Must be one of: {', '.join(sorted(VALID_CATEGORIES))}"
            )

        self._validators[name] = validator
        self._by_category.setdefault(category, []).append(name)

    def get(self, name: str) -> Optional[Validator]:
        """Get a validator by name, or None if not found."""
        return self._validators.get(name)

    def get_by_category(self, category: str) -> list[Validator]:
        """Get all validators in a category (may be empty)."""
        names = self._by_category.get(category, [])
        return [self._validators[name] for name in names]

    def list_all(self) -> list[Validator]:
        """Get all registered validators in registration order."""
        return list(self._validators.values())

    def list_names(self) -> list[str]:
        """Get names of all registered validators, sorted alphabetically."""
        return sorted(self._validators.keys())

    def clear(self) -> None:
        """Clear all registered validators. Primarily for testing."""
        self._validators.clear()
        self._by_category.clear()

    def __len__(self) -> int:
        return len(self._validators)

    def __contains__(self, name: str) -> bool:
        return name in self._validators


# Module-level singleton instance
registry = ValidatorRegistry()


def register_validator(cls: V) -> V:
    """Decorator to register a validator class.

    The decorated class is instantiated (with no arguments) and registered
    with the global registry.

    Usage:
        @register_validator
        class MyValidator(BaseValidator):
            def __init__(self):
                super().__init__("my-validator", "coverage")

            def validate(self, context):
                ...
    """
    instance = cls()
    registry.register(instance)
    return cls


def discover_validators() -> int:
    """Import all validator modules to trigger registration.

    Safe to call repeatedly: modules already imported are not re-executed,
    so nothing registers twice.

    Returns:
        Number of validators newly registered by this call.
    """
    import twpreset.validators as validators_pkg

    initial_count = len(registry)
    skip_modules = {"__init__", "base", "registry", "css_extract"}

    for module_info in pkgutil.iter_modules(validators_pkg.__path__):
        if module_info.name in skip_modules:
            continue

        full_name = f"{validators_pkg.__name__}.{module_info.name}"
        try:
            importlib.import_module(full_name)
        except ImportError as e:
            warnings.warn(f"Failed to import validator module '{full_name}': {e}")

    return len(registry) - initial_count
