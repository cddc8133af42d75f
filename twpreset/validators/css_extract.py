"""
Class and property extraction from compiled utility CSS.

Both scans are regex based and tolerant: they never parse selector or
declaration grammar, so malformed CSS simply contributes fewer entries.
Results are sets, so the order of rules in the stylesheet does not matter.
"""

from __future__ import annotations

import re

# =============================================================================
# Patterns
# =============================================================================

# Leading class-name token of each selector fragment: `.flex`, `.items-center`
CLASS_PATTERN = re.compile(r"\.([\w-]+)")

# Declaration property followed by a colon: `border-top-style:`
PROPERTY_PATTERN = re.compile(r"([a-z-]+):")

# Custom properties the generator uses to compose values across utilities
DEFAULT_INTERNAL_PREFIX = "--tw-"

_HYPHEN_LETTER = re.compile(r"-([a-z])")


# =============================================================================
# Normalization
# =============================================================================


def kebab_to_camel(name: str) -> str:
    """Convert a hyphenated CSS property name to camelCase.

    Each hyphen followed by a lowercase letter collapses into the uppercased
    letter. Hyphens not followed by a letter are kept as-is.

    Examples:
        >>> kebab_to_camel("border-top-style")
        'borderTopStyle'
        >>> kebab_to_camel("-webkit-box")
        'WebkitBox'
        >>> kebab_to_camel("display")
        'display'
    """
    return _HYPHEN_LETTER.sub(lambda m: m.group(1).upper(), name)


# =============================================================================
# Extraction
# =============================================================================


def extract_classes(css: str) -> set[str]:
    """Extract every class-selector name from CSS text.

    Compound selectors contribute each class: `.flex.items-center` yields
    both `flex` and `items-center`.

    Args:
        css: Raw CSS text.

    Returns:
        Set of class names without the leading dot.
    """
    return {match.group(1) for match in CLASS_PATTERN.finditer(css)}


def extract_properties(
    css: str,
    internal_prefix: str = DEFAULT_INTERNAL_PREFIX,
) -> set[str]:
    """Extract every CSS property name used in CSS text, in camelCase.

    Tokens starting with ``internal_prefix`` are generator-internal custom
    properties and are skipped.

    Args:
        css: Raw CSS text.
        internal_prefix: Prefix of custom properties to ignore.

    Returns:
        Set of camelCase property names.
    """
    properties: set[str] = set()

    for match in PROPERTY_PATTERN.finditer(css):
        token = match.group(1)
        if internal_prefix and token.startswith(internal_prefix):
            continue
        properties.add(kebab_to_camel(token))

    return properties
