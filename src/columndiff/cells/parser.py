"""Tokenizer for single markdown table rows."""

import re
from typing import Iterator, Optional, Union

from .models import CellParseOptions

# Alignment markers: ---, :---, ---:, :---:
SEPARATOR_CELL_PATTERN = re.compile(r"^[-:]+$")

OptionsLike = Optional[Union[CellParseOptions, dict]]


def _iter_delimiters(content: str, handle_escaped_pipes: bool) -> Iterator[int]:
    """
    Yield the positions of the pipes that separate cells.

    A pipe preceded by an odd number of consecutive backslashes is escaped
    and belongs to the cell text.
    """
    backslashes = 0
    for position, char in enumerate(content):
        if char == "|":
            if not (handle_escaped_pipes and backslashes % 2 == 1):
                yield position
            backslashes = 0
        elif char == "\\":
            backslashes += 1
        else:
            backslashes = 0


def _has_trailing_delimiter(content: str, last_delimiter: int) -> bool:
    return last_delimiter == len(content) - 1 and last_delimiter > 0


def count_table_cells(line: str, options: OptionsLike = None) -> int:
    """
    Count the cells in a table row without building the cell list.

    Args:
        line: A table row such as ``"| a | b | c |"``
        options: Cell parse options

    Returns:
        Number of cells, 0 when the line holds no pipe at all
    """
    opts = CellParseOptions.coerce(options)

    if not line or "|" not in line:
        return 0

    content = line.strip()
    if content == "|":
        return 0

    count = 1
    last_delimiter = -1
    for position in _iter_delimiters(content, opts.handle_escaped_pipes):
        count += 1
        last_delimiter = position

    if content.startswith("|"):
        count -= 1
    if _has_trailing_delimiter(content, last_delimiter):
        count -= 1
    return count


def parse_table_row_cells(line: str, options: OptionsLike = None) -> list[str]:
    """
    Split a table row into its cell values.

    Escaped pipes (``\\|``) stay inside their cell and lose the escaping
    backslash, so ``"| a \\| b | c |"`` gives ``["a | b", "c"]``.

    Args:
        line: A table row such as ``"| a | b | c |"``
        options: Cell parse options

    Returns:
        Cell values in column order
    """
    opts = CellParseOptions.coerce(options)

    if not line or "|" not in line:
        return []

    content = line.strip()
    if content == "|":
        return []

    delimiters = list(_iter_delimiters(content, opts.handle_escaped_pipes))
    edges = [-1] + delimiters + [len(content)]
    cells = [content[start + 1 : end] for start, end in zip(edges, edges[1:])]

    if content.startswith("|"):
        cells = cells[1:]
    if delimiters and _has_trailing_delimiter(content, delimiters[-1]):
        cells = cells[:-1]

    if opts.handle_escaped_pipes:
        # Every pipe left in a cell is escaped; drop one backslash before it
        cells = [cell.replace("\\|", "|") for cell in cells]
    if opts.trim_cells:
        cells = [cell.strip() for cell in cells]

    return cells


def is_separator_row(line: str, options: OptionsLike = None) -> bool:
    """
    Check whether a row is the alignment row under a table header.

    Args:
        line: A table row such as ``"| --- | :---: | ---: |"``
        options: Cell parse options

    Returns:
        True if the row has cells and every non-empty one is an alignment
        marker; a row of blank cells counts as a separator
    """
    cells = [cell.strip() for cell in parse_table_row_cells(line, options)]

    if not cells:
        return False

    return all(SEPARATOR_CELL_PATTERN.match(cell) for cell in cells if cell)
