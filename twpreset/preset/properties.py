"""
CSS properties the restricted runtime is declared to render.

Property names use the camelCase form produced by
``twpreset.validators.css_extract.kebab_to_camel``. The tables are plain
frozensets so they can be audited and diffed without reading any checking
code.
"""

from __future__ import annotations

# =============================================================================
# Supported Properties
# =============================================================================

SUPPORTED_PROPERTIES = frozenset({
    "position",
    "boxSizing",
    "display",
    "overflow",
    "whiteSpace",
    "textAlign",
    "textOverflow",
    "fontWeight",
    "flexDirection",
    "flexWrap",
    "alignContent",
    "alignItems",
    "justifyContent",
    "fontStyle",
    "transform",
    "animationTimingFunction",
    "borderStyle",
    "transformOrigin",
    "linearOrientation",
    "linearGravity",
    "linearLayoutGravity",
    "layoutAnimationCreateTimingFunction",
    "layoutAnimationCreateProperty",
    "layoutAnimationDeleteTimingFunction",
    "layoutAnimationDeleteProperty",
    "layoutAnimationUpdateTimingFunction",
    "textDecoration",
    "visibility",
    "transitionProperty",
    "transitionTimingFunction",
    "borderLeftStyle",
    "borderRightStyle",
    "borderTopStyle",
    "borderBottomStyle",
    "overflowX",
    "overflowY",
    "wordBreak",
    "outlineStyle",
    "verticalAlign",
    "direction",
    "relativeCenter",
    "linearCrossGravity",
    "listMainAxisGap",
})


# =============================================================================
# Tolerated Properties
# =============================================================================

# Emitted by the generator as part of another utility (``break-normal`` sets
# overflow-wrap alongside word-break) but not usable on its own.
ALLOWED_UNSUPPORTED_PROPERTIES = frozenset({
    "overflowWrap",
})

