"""
Rendering of runner results for the terminal and for machines.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from .runner import RunnerResult
from .utils import log


def result_to_dict(result: RunnerResult) -> dict[str, Any]:
    """Convert a RunnerResult to a JSON-serializable dict."""
    return {
        "passed": result.overall_passed,
        "css_length": result.css_length,
        "errors": list(result.errors),
        "validators": {
            name: {
                "passed": vr.passed,
                "metrics": vr.metrics,
                "failures": [
                    {**asdict(failure), "message": failure.describe()}
                    for failure in vr.failures
                ],
            }
            for name, vr in result.results.items()
        },
    }


def render_json(result: RunnerResult) -> str:
    return json.dumps(result_to_dict(result), indent=2, sort_keys=True)


def render_error_json(error: Exception) -> str:
    """JSON report for a run that stopped before any check ran."""
    return json.dumps({"passed": False, "error": str(error)}, indent=2, sort_keys=True)


def print_report(result: RunnerResult) -> None:
    """Print every failure grouped by validator, then a summary line."""
    log.header("Preset check")
    log.dim(f"Stylesheet length: {result.css_length}")

    for name, vr in result.results.items():
        if vr.passed:
            log.success(name)
        else:
            log.error(f"{name}: {len(vr.failures)} failure(s)")
            for finding in vr.findings:
                log.info(f"  - {finding}")

        for key, value in vr.metrics.items():
            if isinstance(value, (int, float, str)):
                log.table_row(f"    {key}", str(value))

    for error in result.errors:
        log.error(error)

    total = len(result.failures)
    if result.overall_passed:
        log.success("All checks passed")
    else:
        log.error(f"{total} failure(s), {len(result.errors)} error(s)")
