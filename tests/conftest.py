"""Pytest configuration and shared fixtures."""

import pytest

from columndiff.detection import RowDiffEntry, RowStatus, HeaderRow, DataRow


@pytest.fixture
def header_removal_entries() -> list[dict]:
    """Row diff where column B was removed, in the row differ's JSON shape."""
    return [
        {"row": -2, "status": "deleted", "oldContent": "| A | B | C |"},
        {"row": -2, "status": "added", "newContent": "| A | C |"},
        {"row": 0, "status": "deleted", "oldContent": "| 1 | 2 | 3 |"},
        {"row": 0, "status": "added", "newContent": "| 1 | 3 |"},
    ]


@pytest.fixture
def data_only_entries() -> list[RowDiffEntry]:
    """Row diff with a shrunk data row and no header evidence."""
    return [
        RowDiffEntry(
            target=DataRow(index=0),
            status=RowStatus.DELETED,
            old_content="| 1 | 2 | 3 |",
        ),
        RowDiffEntry(
            target=DataRow(index=0),
            status=RowStatus.ADDED,
            new_content="| 1 | 2 |",
        ),
    ]


@pytest.fixture
def make_header_entries():
    """Build the two header entries for an old and a new header line."""

    def _make(old_line: str, new_line: str) -> list[RowDiffEntry]:
        return [
            RowDiffEntry(target=HeaderRow(), status=RowStatus.DELETED, old_content=old_line),
            RowDiffEntry(target=HeaderRow(), status=RowStatus.ADDED, new_content=new_line),
        ]

    return _make
