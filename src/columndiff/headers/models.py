"""Data models for header comparison."""

from ..models import OptionsModel


class HeaderCompareOptions(OptionsModel):
    """Options controlling how two header labels are compared."""

    ignore_case: bool = False
    trim_whitespace: bool = True  # Strip outer whitespace
    normalize_whitespace: bool = True  # Collapse interior whitespace runs to one space
