"""Column diff detection.

Works out which columns of a pipe table were added or removed between two
revisions using only the row-level diff. Three strategies are tried in
order:

1. header-comparison: both versions of the header line are in the diff, so
   columns are matched by label.
2. fallback-end-columns: only a removed data row or the old header line
   shows the old width, so the difference is assumed to be at the end of
   the row.
3. no-change: nothing contradicts the caller's column count.

Detection is best effort and never raises; malformed evidence is skipped.
"""

import logging
from typing import Any, Iterable, Optional, Union

from pydantic import ValidationError

from ..cells import count_table_cells, is_separator_row, parse_table_row_cells
from ..config import settings
from ..headers import (
    HeaderCompareOptions,
    create_header_position_mapping,
    find_added_header_indices,
)
from ..headers.comparator import NOT_FOUND
from .models import (
    ChangePosition,
    ChangeType,
    ColumnDiffDetectorOptions,
    ColumnDiffInfo,
    ColumnDiffInfoSimple,
    DetectionMethod,
    RowDiffEntry,
)

logger = logging.getLogger(__name__)

EntryLike = Union[RowDiffEntry, dict]
OptionsLike = Optional[Union[ColumnDiffDetectorOptions, dict]]


def _coerce_entries(entries: Any) -> list[RowDiffEntry]:
    """Validate diff entries, skipping the ones that cannot be read."""
    if entries is None:
        return []
    if isinstance(entries, (str, bytes, dict)):
        logger.debug(f"Ignoring entries of type {type(entries).__name__}")
        return []
    try:
        items = list(entries)
    except TypeError:
        logger.debug(f"Ignoring non-iterable entries: {entries!r}")
        return []

    valid = []
    for position, item in enumerate(items):
        if isinstance(item, RowDiffEntry):
            valid.append(item)
            continue
        try:
            valid.append(RowDiffEntry.model_validate(item))
        except ValidationError as e:
            logger.debug(f"Skipping diff entry {position}: {e.error_count()} error(s)")
    return valid


def _coerce_column_count(value: Any) -> int:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug(f"Invalid column count {value!r}, using 0")
        return 0
    return max(0, value)


class ColumnDiffDetector:
    """Detects added and removed columns for one table diff."""

    def __init__(self, options: OptionsLike = None):
        """
        Initialize the detector.

        Args:
            options: Detector options; invalid values fall back to defaults
        """
        self.options = ColumnDiffDetectorOptions.coerce(options)
        self.header_options = self.options.header_compare or HeaderCompareOptions(
            ignore_case=settings.ignore_case
        )
        self.cell_options = self.options.cell_parse
        self._trace = logger.info if (self.options.debug or settings.debug) else logger.debug

    def detect(self, entries: Iterable[EntryLike], new_column_count: int) -> ColumnDiffInfo:
        """
        Detect the column diff for a table.

        Args:
            entries: Row diff entries for the table
            new_column_count: Column count of the current table

        Returns:
            ColumnDiffInfo from the first strategy that has evidence
        """
        rows = _coerce_entries(entries)
        column_count = _coerce_column_count(new_column_count)
        self._trace(f"Detecting column diff from {len(rows)} entries, {column_count} columns")

        headers = self._extract_headers(rows)
        if headers is not None:
            return self._detect_by_headers(*headers, caller_count=column_count)

        old_count = self._extract_old_column_count(rows)
        if old_count is not None and old_count != column_count:
            return self._detect_by_fallback(old_count, column_count)

        self._trace("No column count change detected")
        return self._no_change(column_count)

    def _extract_headers(
        self, rows: list[RowDiffEntry]
    ) -> Optional[tuple[list[str], list[str]]]:
        """Find the old and new header lines, if both are in the diff."""
        old_line = next(
            (
                row.old_content
                for row in rows
                if row.is_header
                and row.carries_old
                and not is_separator_row(row.old_content, self.cell_options)
            ),
            None,
        )
        new_line = next(
            (
                row.new_content
                for row in rows
                if row.is_header
                and row.carries_new
                and not is_separator_row(row.new_content, self.cell_options)
            ),
            None,
        )
        if old_line is None or new_line is None:
            self._trace("Header line not present on both sides of the diff")
            return None

        old_headers = parse_table_row_cells(old_line, self.cell_options)
        new_headers = parse_table_row_cells(new_line, self.cell_options)
        if not old_headers or not new_headers:
            self._trace("Header line has no cells")
            return None

        self._trace(f"Headers old: {old_headers} new: {new_headers}")
        return old_headers, new_headers

    def _extract_old_column_count(self, rows: list[RowDiffEntry]) -> Optional[int]:
        """Column count of the first removed data row, else of the old header line."""
        for row in rows:
            if row.is_header or not row.carries_old:
                continue
            count = count_table_cells(row.old_content, self.cell_options)
            if count > 0:
                self._trace(f"Old column count {count} from data row {row.target.index}")
                return count

        for row in rows:
            if not row.is_header or not row.carries_old:
                continue
            if is_separator_row(row.old_content, self.cell_options):
                continue
            count = count_table_cells(row.old_content, self.cell_options)
            if count > 0:
                self._trace(f"Old column count {count} from header line")
                return count
        return None

    def _detect_by_headers(
        self, old_headers: list[str], new_headers: list[str], caller_count: int
    ) -> ColumnDiffInfo:
        new_count = len(new_headers)
        if new_count != caller_count:
            logger.debug(
                f"Header line has {new_count} columns, caller reported {caller_count}"
            )

        mapping = create_header_position_mapping(old_headers, new_headers, self.header_options)
        deleted = [index for index, target in enumerate(mapping) if target == NOT_FOUND]
        added = find_added_header_indices(old_headers, new_headers, self.header_options)

        confidence = settings.header_confidence
        if self.header_options.ignore_case and self.options.ignore_case_confidence is not None:
            confidence = self.options.ignore_case_confidence

        self._trace(f"Header comparison: deleted {deleted}, added {added}")
        return ColumnDiffInfo(
            old_column_count=len(old_headers),
            new_column_count=new_count,
            deleted_columns=deleted,
            added_columns=added,
            old_headers=old_headers,
            mapping=mapping,
            positions=_positions(deleted, added, confidence),
            detection_method=DetectionMethod.HEADER_COMPARISON,
        )

    def _detect_by_fallback(self, old_count: int, new_count: int) -> ColumnDiffInfo:
        """Assume columns were added or removed at the end of the row."""
        deleted: list[int] = []
        added: list[int] = []

        if old_count > new_count:
            deleted = list(range(new_count, old_count))
            mapping = list(range(new_count)) + [NOT_FOUND] * len(deleted)
        else:
            added = list(range(old_count, new_count))
            mapping = list(range(old_count))

        self._trace(f"Fallback to end columns: deleted {deleted}, added {added}")
        return ColumnDiffInfo(
            old_column_count=old_count,
            new_column_count=new_count,
            deleted_columns=deleted,
            added_columns=added,
            mapping=mapping,
            positions=_positions(deleted, added, settings.fallback_confidence),
            detection_method=DetectionMethod.FALLBACK_END_COLUMNS,
        )

    def _no_change(self, column_count: int) -> ColumnDiffInfo:
        return ColumnDiffInfo(
            old_column_count=column_count,
            new_column_count=column_count,
            mapping=list(range(column_count)),
            positions=[],
            detection_method=DetectionMethod.NO_CHANGE,
        )


def _positions(deleted: list[int], added: list[int], confidence: float) -> list[ChangePosition]:
    positions = [
        ChangePosition(index=index, type=ChangeType.REMOVED, confidence=confidence)
        for index in deleted
    ]
    positions.extend(
        ChangePosition(
            index=index, type=ChangeType.ADDED, confidence=confidence, new_index=index
        )
        for index in added
    )
    return positions


def detect_column_diff(
    entries: Iterable[EntryLike],
    new_column_count: int,
    options: OptionsLike = None,
) -> ColumnDiffInfo:
    """
    Detect added and removed columns from row-level diff evidence.

    Args:
        entries: Row diff entries (RowDiffEntry or dicts such as
            ``{"row": -2, "status": "deleted", "oldContent": "| A | B |"}``)
        new_column_count: Column count of the current table
        options: Detector options

    Returns:
        ColumnDiffInfo including the detection method
    """
    return ColumnDiffDetector(options).detect(entries, new_column_count)


def detect_column_diff_simple(
    entries: Iterable[EntryLike],
    new_column_count: int,
    options: OptionsLike = None,
) -> ColumnDiffInfoSimple:
    """Same as detect_column_diff without the detection method."""
    return detect_column_diff(entries, new_column_count, options).to_simple()
