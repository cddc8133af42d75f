"""
Static preset tables: the runtime allowlist and the expected utility mapping.
"""

from .mapping import UTILITY_MAPPING, iter_mapping_entries
from .properties import (
    ALLOWED_UNSUPPORTED_PROPERTIES,
    SUPPORTED_PROPERTIES,
)

__all__ = [
    "SUPPORTED_PROPERTIES",
    "ALLOWED_UNSUPPORTED_PROPERTIES",
    "UTILITY_MAPPING",
    "iter_mapping_entries",
]
