"""
Main CLI for the twpreset tool.

Checks a restricted Tailwind preset: every expected utility is generated and
no generated utility uses a property the target runtime cannot render.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .utils import log


# =============================================================================
# Version
# =============================================================================

__version__ = "0.1.0"


# =============================================================================
# Argument Parsing
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with all subcommands."""

    parser = argparse.ArgumentParser(
        prog="twpreset",
        description="Restricted Tailwind preset checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  check       Generate the stylesheet and run all checks
  list        List registered validators

Examples:
  twpreset check                              # Use ./twpreset.yaml or defaults
  twpreset check --css dist/output.css        # Check an existing stylesheet
  twpreset check --only property-allowlist    # Run a single validator
  twpreset check --json                       # Machine-readable report
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # --- check ---
    check_parser = subparsers.add_parser(
        "check",
        help="Generate the stylesheet and run all checks",
        description="Run the generator, extract classes and properties, and cross-check them.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  twpreset check --cwd packages/preset --tailwind-config src/tailwind.config.ts --input src/styles.css
  twpreset check --css output.css --json
        """,
    )
    check_parser.add_argument(
        "--config",
        type=Path,
        help="Path to twpreset.yaml (default: ./twpreset.yaml if present)",
    )
    check_parser.add_argument(
        "--css",
        type=Path,
        help="Check this compiled stylesheet instead of running the generator",
    )
    check_parser.add_argument(
        "--cwd",
        type=Path,
        help="Working directory for the generator",
    )
    check_parser.add_argument(
        "--tailwind-config",
        type=Path,
        help="Generator configuration file",
    )
    check_parser.add_argument(
        "--input",
        type=Path,
        help="Input stylesheet passed to the generator",
    )
    check_parser.add_argument(
        "--output",
        type=Path,
        help="Where the generator writes (removed after the run)",
    )
    check_parser.add_argument(
        "--only",
        action="append",
        metavar="NAME",
        help="Run only this validator (repeatable)",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )

    # --- list ---
    subparsers.add_parser(
        "list",
        help="List registered validators",
        description="List every validator with its category.",
    )

    return parser


# =============================================================================
# Command Handlers
# =============================================================================


def cmd_check(args: argparse.Namespace) -> int:
    """Run the checks and print the report.

    With --json, stdout carries only the JSON document; log output goes to
    stderr.
    """
    if not args.json:
        return _check(args)

    from .config import ConfigError
    from .generator import GenerationError
    from .report import render_error_json

    previous = log.set_stream(sys.stderr)
    try:
        return _check(args)
    except (ConfigError, GenerationError) as e:
        log.error(str(e))
        print(render_error_json(e))
        return 1
    finally:
        log.set_stream(previous)


def _check(args: argparse.Namespace) -> int:
    from .config import load_config
    from .report import print_report, render_json
    from .runner import check_stylesheet, run_check

    config = load_config(args.config)

    generator = config.generator
    if args.cwd is not None:
        generator.cwd = args.cwd.resolve()
    if args.tailwind_config is not None:
        generator.config = args.tailwind_config.resolve()
    if args.input is not None:
        generator.input = args.input.resolve()
    if args.output is not None:
        generator.output = args.output.resolve()

    if args.css is not None:
        css = args.css.read_text(encoding="utf-8")
        result = check_stylesheet(css, config, args.only)
    else:
        result = run_check(config, args.only)

    if args.json:
        print(render_json(result))
    else:
        print_report(result)

    return 0 if result.overall_passed else 1


def cmd_list(args: argparse.Namespace) -> int:
    """Print every registered validator."""
    from .validators.registry import discover_validators, registry

    discover_validators()
    log.header("Validators")
    for validator in registry.list_all():
        log.table_row(validator.name, validator.category)
    return 0


# =============================================================================
# Command Dispatch
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        log.set_color(False)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "check":
            return cmd_check(args)

        elif args.command == "list":
            return cmd_list(args)

        else:
            log.error(f"Unknown command: {args.command}")
            return 1

    except KeyboardInterrupt:
        log.warning("\nInterrupted")
        return 130
    except Exception as e:
        log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
