"""
Validator runner: generate, extract, check.

Builds one ValidationContext from a compiled stylesheet and runs every
selected validator against it. Check failures never stop the run; only a
generation failure does, and it propagates to the caller unchanged.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .config import CheckConfig
from .generator import compiled_stylesheet
from .preset import (
    ALLOWED_UNSUPPORTED_PROPERTIES,
    SUPPORTED_PROPERTIES,
    UTILITY_MAPPING,
)
from .utils import log
from .validators.base import Failure, ValidationContext, ValidatorResult
from .validators.css_extract import extract_classes, extract_properties
from .validators.registry import discover_validators, registry


# =============================================================================
# Result Type
# =============================================================================


@dataclass
class RunnerResult:
    """Aggregated result from running a set of validators."""

    results: dict[str, ValidatorResult] = field(default_factory=dict)
    """Validator name -> ValidatorResult for each validator that ran."""

    overall_passed: bool = True
    """True if all validators that ran passed and none raised."""

    errors: list[str] = field(default_factory=list)
    """Error messages from validators that raised exceptions."""

    css_length: int = 0
    """Length of the checked stylesheet."""

    @property
    def failures(self) -> list[Failure]:
        """Every failure from every validator, in run order."""
        return [
            failure
            for result in self.results.values()
            for failure in result.failures
        ]


# =============================================================================
# Context Building
# =============================================================================


def build_validation_context(
    css: str,
    config: Optional[CheckConfig] = None,
    mapping: Mapping[str, Mapping[str, str]] = UTILITY_MAPPING,
) -> ValidationContext:
    """Extract classes and properties from ``css`` and pair them with the tables.

    Args:
        css: Compiled stylesheet text.
        config: Run configuration; supplies the internal prefix and allowlist extras.
        mapping: Utility mapping to check (the static table by default).

    Returns:
        Fully populated ValidationContext.
    """
    config = config or CheckConfig()

    return ValidationContext(
        classes=frozenset(extract_classes(css)),
        properties=frozenset(extract_properties(css, config.internal_prefix)),
        supported_properties=SUPPORTED_PROPERTIES | config.extra_supported,
        allowed_unsupported_properties=(
            ALLOWED_UNSUPPORTED_PROPERTIES | config.extra_allowed_unsupported
        ),
        mapping=mapping,
        css_length=len(css),
    )


# =============================================================================
# Runner
# =============================================================================


def run_validators(
    context: ValidationContext,
    names: Optional[list[str]] = None,
) -> RunnerResult:
    """Run validators against an already built context.

    Args:
        context: Extracted sets and static tables.
        names: Validator names to run. If None, runs all registered validators.

    Returns:
        RunnerResult with per-validator results, overall status and any errors.
    """
    runner_result = RunnerResult(css_length=context.css_length)
    discover_validators()

    if names is None:
        validators = registry.list_all()
    else:
        validators = []
        for name in names:
            validator = registry.get(name)
            if validator is None:
                runner_result.errors.append(
                    f"Unknown validator '{name}'. "
                    f"Known validators: {', '.join(registry.list_names())}"
                )
                runner_result.overall_passed = False
                continue
            validators.append(validator)

    for validator in validators:
        try:
            result = validator.validate(context)
        except Exception as e:
            error_msg = f"validator '{validator.name}' raised {type(e).__name__}: {e}"
            runner_result.errors.append(error_msg)
            runner_result.overall_passed = False
            log.error(error_msg)
            log.dim(traceback.format_exc())
            continue

        runner_result.results[validator.name] = result
        if not result.passed:
            runner_result.overall_passed = False

    return runner_result


def check_stylesheet(
    css: str,
    config: Optional[CheckConfig] = None,
    names: Optional[list[str]] = None,
) -> RunnerResult:
    """Check compiled CSS text without invoking the generator."""
    context = build_validation_context(css, config)
    return run_validators(context, names)


def run_check(
    config: Optional[CheckConfig] = None,
    names: Optional[list[str]] = None,
) -> RunnerResult:
    """Generate the stylesheet, then check it.

    The generated file is removed before this returns, on every path.

    Raises:
        GenerationError: If the generator fails; nothing is checked.
    """
    config = config or CheckConfig()
    with compiled_stylesheet(config.generator) as css:
        context = build_validation_context(css, config)
    return run_validators(context, names)
