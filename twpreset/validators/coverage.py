"""
Utility coverage validator.

Every (property, value, utility) entry of the utility mapping must name a
class that exists in the compiled stylesheet. All entries are checked; every
miss is reported.
"""

from __future__ import annotations

from typing import AbstractSet, Mapping

from twpreset.preset import iter_mapping_entries

from .base import BaseValidator, MissingUtilityFailure, ValidationContext, ValidatorResult
from .registry import register_validator


def check_utility_coverage(
    mapping: Mapping[str, Mapping[str, str]],
    classes: AbstractSet[str],
) -> list[MissingUtilityFailure]:
    """Return one failure per mapping entry whose utility is not in ``classes``.

    Args:
        mapping: property -> value -> expected utility class.
        classes: Class names extracted from the compiled stylesheet.

    Returns:
        Failures in mapping order; empty when every utility exists.
    """
    return [
        MissingUtilityFailure(property=prop, value=value, utility=utility)
        for prop, value, utility in iter_mapping_entries(mapping)
        if utility not in classes
    ]


@register_validator
class UtilityCoverageValidator(BaseValidator):
    """Checks the mapping is a lower bound on the generated utilities.

    Metrics returned:
        - entries_checked: Number of mapping entries evaluated
        - entries_missing: Number of entries whose utility was absent
        - coverage: Ratio of present entries (0.0-1.0)
        - classes_found: Number of distinct classes in the stylesheet
    """

    def __init__(self) -> None:
        super().__init__("utility-coverage", "coverage")

    def validate(self, context: ValidationContext) -> ValidatorResult:
        failures = check_utility_coverage(context.mapping, context.classes)
        total = sum(len(values) for values in context.mapping.values())
        coverage = 1.0 if total == 0 else (total - len(failures)) / total

        return self._make_result(
            failures=failures,
            metrics={
                "entries_checked": total,
                "entries_missing": len(failures),
                "coverage": round(coverage, 4),
                "classes_found": len(context.classes),
            },
        )
