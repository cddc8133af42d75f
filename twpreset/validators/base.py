"""
Base types and protocols for the pluggable validator system.

Defines the contract that all validators must follow, plus data containers
for validation context, failures and results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

from twpreset.preset import (
    ALLOWED_UNSUPPORTED_PROPERTIES,
    SUPPORTED_PROPERTIES,
    UTILITY_MAPPING,
)


# =============================================================================
# Failure Records
# =============================================================================


@dataclass(frozen=True)
class MissingUtilityFailure:
    """A mapping entry whose expected utility class was not generated."""

    property: str
    value: str
    utility: str
    check: str = "utility-coverage"

    def describe(self) -> str:
        return (
            f"missing utility '.{self.utility}' for "
            f"{self.property}: {self.value}"
        )


@dataclass(frozen=True)
class DisallowedPropertyFailure:
    """An extracted property that neither allowlist covers."""

    property: str
    check: str = "property-allowlist"

    def describe(self) -> str:
        return f"property '{self.property}' is not in the supported or allowed-unsupported sets"


@dataclass(frozen=True)
class InconsistentMappingFailure:
    """A mapping entry that contradicts the allowlist tables."""

    property: str
    reason: str
    value: Optional[str] = None
    utility: Optional[str] = None
    check: str = "mapping-consistency"

    def describe(self) -> str:
        where = self.property if self.value is None else f"{self.property}: {self.value}"
        return f"mapping entry {where}: {self.reason}"


Failure = Union[MissingUtilityFailure, DisallowedPropertyFailure, InconsistentMappingFailure]


# =============================================================================
# Data Containers
# =============================================================================


@dataclass
class ValidationContext:
    """Context provided to validators for execution.

    Holds the sets extracted from one compiled stylesheet together with the
    static tables they are checked against. Built once per run.
    """

    classes: frozenset[str]
    """Class names extracted from the compiled stylesheet."""

    properties: frozenset[str]
    """camelCase property names extracted from the compiled stylesheet."""

    supported_properties: frozenset[str] = SUPPORTED_PROPERTIES
    """Properties the runtime renders."""

    allowed_unsupported_properties: frozenset[str] = ALLOWED_UNSUPPORTED_PROPERTIES
    """Properties tolerated in output without being individually usable."""

    mapping: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: UTILITY_MAPPING)
    """property -> value -> expected utility class."""

    css_length: int = 0
    """Length of the compiled stylesheet, for reporting."""

    extra: dict[str, Any] = field(default_factory=dict)
    """Extension point for validator-specific context data."""

    @property
    def allowlist(self) -> frozenset[str]:
        """Union of supported and allowed-unsupported properties."""
        return self.supported_properties | self.allowed_unsupported_properties


@dataclass
class ValidatorResult:
    """Result returned by a validator after execution."""

    validator: str
    """Name of the validator that produced this result."""

    passed: bool
    """Whether the validation passed."""

    failures: list[Failure] = field(default_factory=list)
    """Every failure found, in deterministic order."""

    metrics: dict[str, Any] = field(default_factory=dict)
    """Counts and ratios for reporting."""

    @property
    def findings(self) -> list[str]:
        """Human-readable description of each failure."""
        return [failure.describe() for failure in self.failures]


# =============================================================================
# Protocols (Interfaces)
# =============================================================================


@runtime_checkable
class Validator(Protocol):
    """Protocol for validators.

    Categories:
        - "coverage": expected output is present
        - "allowlist": output stays inside the permitted set
        - "schema": the static tables agree with each other
    """

    @property
    def name(self) -> str:
        """Unique identifier for this validator."""
        ...

    @property
    def category(self) -> str:
        """Validator category: 'coverage', 'allowlist' or 'schema'."""
        ...

    def validate(self, context: ValidationContext) -> ValidatorResult:
        """Execute validation and return results."""
        ...


# =============================================================================
# Base Classes (Optional Implementations)
# =============================================================================


class BaseValidator:
    """Optional base class providing common validator functionality."""

    def __init__(self, name: str, category: str) -> None:
        self._name = name
        self._category = category

    @property
    def name(self) -> str:
        return self._name

    @property
    def category(self) -> str:
        return self._category

    def validate(self, context: ValidationContext) -> ValidatorResult:
        """Override this method in subclasses."""
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement validate()"
        )

    def _make_result(
        self,
        failures: Optional[list[Failure]] = None,
        **kwargs: Any,
    ) -> ValidatorResult:
        """Helper to create a ValidatorResult; passes iff there are no failures."""
        failures = failures or []
        return ValidatorResult(
            validator=self.name,
            passed=not failures,
            failures=failures,
            **kwargs,
        )
