"""Header normalization and old-to-new column matching."""

from .models import HeaderCompareOptions
from .comparator import (
    normalize_header,
    headers_equal,
    find_header_index,
    header_exists,
    find_deleted_header_indices,
    find_added_header_indices,
    create_header_position_mapping,
)

__all__ = [
    "HeaderCompareOptions",
    "normalize_header",
    "headers_equal",
    "find_header_index",
    "header_exists",
    "find_deleted_header_indices",
    "find_added_header_indices",
    "create_header_position_mapping",
]
