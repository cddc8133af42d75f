"""
Property allowlist validator.

No property in the compiled stylesheet may fall outside the supported and
allowed-unsupported sets. A leak means the preset exposes a utility the
restricted runtime cannot render.
"""

from __future__ import annotations

from typing import AbstractSet

from .base import BaseValidator, DisallowedPropertyFailure, ValidationContext, ValidatorResult
from .registry import register_validator


def check_property_allowlist(
    properties: AbstractSet[str],
    allowlist: AbstractSet[str],
) -> list[DisallowedPropertyFailure]:
    """Return one failure per property not in ``allowlist``, sorted by name."""
    return [
        DisallowedPropertyFailure(property=prop)
        for prop in sorted(properties)
        if prop not in allowlist
    ]


@register_validator
class PropertyAllowlistValidator(BaseValidator):
    """Checks the allowlist is an upper bound on the generated properties."""

    def __init__(self) -> None:
        super().__init__("property-allowlist", "allowlist")

    def validate(self, context: ValidationContext) -> ValidatorResult:
        failures = check_property_allowlist(context.properties, context.allowlist)

        return self._make_result(
            failures=failures,
            metrics={
                "properties_found": len(context.properties),
                "properties_disallowed": len(failures),
                "allowlist_size": len(context.allowlist),
            },
        )
