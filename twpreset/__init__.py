"""
twpreset - restricted Tailwind preset checker.

Generates a stylesheet from a preset with the Tailwind CLI and verifies it in
both directions: every mapped utility exists, and no generated utility uses a
CSS property outside the runtime's allowlist.

Usage:
    python -m twpreset <command> [options]

Commands:
    check       Generate the stylesheet and run all checks
    list        List registered validators
"""

from .cli import __version__, main

__all__ = ["__version__", "main"]
