"""
Static table consistency validator.

The utility mapping and the allowlist are maintained by hand. This check keeps
them agreeing with each other: a mapped property the runtime does not support
would pass coverage while the allowlist check rejects the same utility.
Utility names shared by several entries are reported as metrics only.
"""

from __future__ import annotations

from collections import defaultdict
from typing import AbstractSet, Mapping

from twpreset.preset import iter_mapping_entries

from .base import BaseValidator, InconsistentMappingFailure, ValidationContext, ValidatorResult
from .registry import register_validator


def check_mapping_consistency(
    mapping: Mapping[str, Mapping[str, str]],
    allowlist: AbstractSet[str],
) -> list[InconsistentMappingFailure]:
    """Return failures for mapping entries the allowlist cannot back.

    Args:
        mapping: property -> value -> expected utility class.
        allowlist: Supported plus allowed-unsupported properties.

    Returns:
        One failure per unknown property and per blank value or utility.
    """
    failures: list[InconsistentMappingFailure] = []

    for prop, values in mapping.items():
        if prop not in allowlist:
            failures.append(
                InconsistentMappingFailure(
                    property=prop,
                    reason="property is not in the allowlist",
                )
            )
        if not values:
            failures.append(
                InconsistentMappingFailure(
                    property=prop,
                    reason="property has no values",
                )
            )

    for prop, value, utility in iter_mapping_entries(mapping):
        if not value.strip() or not utility.strip():
            failures.append(
                InconsistentMappingFailure(
                    property=prop,
                    value=value,
                    utility=utility,
                    reason="value and utility must be non-empty",
                )
            )

    return failures


def find_utility_collisions(
    mapping: Mapping[str, Mapping[str, str]],
) -> dict[str, list[str]]:
    """Map each utility used by more than one entry to its ``property: value`` owners."""
    owners: dict[str, list[str]] = defaultdict(list)
    for prop, value, utility in iter_mapping_entries(mapping):
        owners[utility].append(f"{prop}: {value}")
    return {utility: entries for utility, entries in owners.items() if len(entries) > 1}


@register_validator
class MappingConsistencyValidator(BaseValidator):
    """Checks the utility mapping only references allowlisted properties."""

    def __init__(self) -> None:
        super().__init__("mapping-consistency", "schema")

    def validate(self, context: ValidationContext) -> ValidatorResult:
        failures = check_mapping_consistency(context.mapping, context.allowlist)
        collisions = find_utility_collisions(context.mapping)
        unmapped = sorted(context.supported_properties - set(context.mapping))

        return self._make_result(
            failures=failures,
            metrics={
                "mapped_properties": len(context.mapping),
                "unmapped_supported_properties": unmapped,
                "utility_collisions": collisions,
            },
        )
