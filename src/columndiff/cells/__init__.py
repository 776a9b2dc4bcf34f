"""Markdown table row tokenizing."""

from .models import CellParseOptions
from .parser import count_table_cells, is_separator_row, parse_table_row_cells

__all__ = [
    "CellParseOptions",
    "count_table_cells",
    "is_separator_row",
    "parse_table_row_cells",
]
