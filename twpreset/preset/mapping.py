"""
Expected utility for each supported property value.

``UTILITY_MAPPING[property][value]`` names the utility class that must exist
in the compiled stylesheet and set ``property`` to ``value``. The table is a
lower bound on the generated output: properties may be listed only partially,
and one utility may appear under several values.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping


def _freeze(table: dict[str, dict[str, str]]) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType(
        {prop: MappingProxyType(dict(values)) for prop, values in table.items()}
    )


UTILITY_MAPPING: Mapping[str, Mapping[str, str]] = _freeze({
    # Layout
    "position": {
        "absolute": "absolute",
        "relative": "relative",
        "fixed": "fixed",
        "sticky": "sticky",
    },
    "display": {
        "none": "hidden",
        "flex": "flex",
        "grid": "grid",
        "block": "block",
    },
    "boxSizing": {
        "border-box": "box-border",
        "content-box": "box-content",
    },
    "overflow": {
        "hidden": "overflow-hidden",
        "visible": "overflow-visible",
    },
    "overflowX": {
        "hidden": "overflow-x-hidden",
        "visible": "overflow-x-visible",
    },
    "overflowY": {
        "hidden": "overflow-y-hidden",
        "visible": "overflow-y-visible",
    },

    # Flex box
    "flexDirection": {
        "row": "flex-row",
        "row-reverse": "flex-row-reverse",
        "column": "flex-col",
        "column-reverse": "flex-col-reverse",
    },
    "flexWrap": {
        "wrap": "flex-wrap",
        "nowrap": "flex-nowrap",
        "wrap-reverse": "flex-wrap-reverse",
    },
    "alignContent": {
        "flex-start": "content-start",
        "flex-end": "content-end",
        "center": "content-center",
        "stretch": "content-stretch",
        "space-between": "content-between",
        "space-around": "content-around",
        "start": "content-start",
        "end": "content-end",
    },
    "justifyContent": {
        "flex-start": "justify-start",
        "center": "justify-center",
        "flex-end": "justify-end",
        "space-between": "justify-between",
        "space-around": "justify-around",
        "space-evenly": "justify-evenly",
        "stretch": "justify-stretch",
        "start": "justify-start",
        "end": "justify-end",
    },
    "alignItems": {
        "flex-start": "items-start",
        "center": "items-center",
        "flex-end": "items-end",
        "stretch": "items-stretch",
        "baseline": "items-baseline",
    },

    # Typography
    "textAlign": {
        "left": "text-left",
        "center": "text-center",
        "right": "text-right",
        "start": "text-start",
        "end": "text-end",
    },
    "fontWeight": {
        "normal": "font-normal",
        "bold": "font-bold",
    },
    "fontStyle": {
        "normal": "not-italic",
        "italic": "italic",
    },
    "textDecoration": {
        "none": "no-underline",
        "underline": "underline",
        "line-through": "line-through",
    },
    "whiteSpace": {
        "normal": "whitespace-normal",
        "nowrap": "whitespace-nowrap",
    },
    "wordBreak": {
        "normal": "break-normal",
        "break-all": "break-all",
        "keep-all": "break-keep",
    },
    "textOverflow": {
        "clip": "truncate",
        "ellipsis": "truncate",
    },

    # Border
    "borderStyle": {
        "solid": "border-solid",
        "dashed": "border-dashed",
        "dotted": "border-dotted",
        "double": "border-double",
        "none": "border-none",
    },

    # Visibility
    "visibility": {
        "visible": "visible",
        "hidden": "invisible",
        "none": "hidden",
        "collapse": "collapse",
    },
})


def iter_mapping_entries(
    mapping: Mapping[str, Mapping[str, str]] = UTILITY_MAPPING,
) -> Iterator[tuple[str, str, str]]:
    """Yield ``(property, value, utility)`` triples in table order."""
    for prop, values in mapping.items():
        for value, utility in values.items():
            yield prop, value, utility
