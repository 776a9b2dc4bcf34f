"""Data models for table row tokenizing."""

from ..models import OptionsModel


class CellParseOptions(OptionsModel):
    """Options for splitting a table row into cells."""

    handle_escaped_pipes: bool = True  # Treat \| as a literal pipe inside a cell
    trim_cells: bool = True  # Strip surrounding whitespace from each cell
