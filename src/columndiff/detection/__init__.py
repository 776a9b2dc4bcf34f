"""Column diff detection from row-level diff evidence."""

from .models import (
    HEADER_ROW_INDEX,
    ChangePosition,
    ChangeType,
    ColumnDiffDetectorOptions,
    ColumnDiffInfo,
    ColumnDiffInfoSimple,
    DataRow,
    DetectionMethod,
    HeaderRow,
    RowDiffEntry,
    RowStatus,
    RowTarget,
    row_target_from_index,
)
from .detector import detect_column_diff, detect_column_diff_simple

__all__ = [
    "HEADER_ROW_INDEX",
    "ChangePosition",
    "ChangeType",
    "ColumnDiffDetectorOptions",
    "ColumnDiffInfo",
    "ColumnDiffInfoSimple",
    "DataRow",
    "DetectionMethod",
    "HeaderRow",
    "RowDiffEntry",
    "RowStatus",
    "RowTarget",
    "row_target_from_index",
    "detect_column_diff",
    "detect_column_diff_simple",
]
