"""Data models for column diff detection."""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..cells.models import CellParseOptions
from ..config import settings
from ..headers.models import HeaderCompareOptions
from ..models import OptionsModel

# Legacy row number the row differ uses for the header line
HEADER_ROW_INDEX = -2


class RowStatus(str, Enum):
    """Status of a row in the row-level diff."""

    ADDED = "added"
    DELETED = "deleted"
    UNCHANGED = "unchanged"
    MODIFIED = "modified"


class ChangeType(str, Enum):
    """Kind of column change at a position."""

    ADDED = "added"
    REMOVED = "removed"


class DetectionMethod(str, Enum):
    """Strategy that produced a column diff."""

    HEADER_COMPARISON = "header-comparison"
    FALLBACK_END_COLUMNS = "fallback-end-columns"
    NO_CHANGE = "no-change"


class HeaderRow(BaseModel):
    """Diff entry target: the table's header line."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["header"] = "header"


class DataRow(BaseModel):
    """Diff entry target: a data row, zero-based below the separator."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["data"] = "data"
    index: int = Field(ge=0)


RowTarget = Annotated[Union[HeaderRow, DataRow], Field(discriminator="kind")]


def row_target_from_index(row: Any) -> Optional[Union[HeaderRow, DataRow]]:
    """
    Convert a legacy integer row number into a row target.

    Returns:
        HeaderRow for -2, DataRow for non-negative integers, None otherwise
    """
    if isinstance(row, bool) or not isinstance(row, int):
        return None
    if row == HEADER_ROW_INDEX:
        return HeaderRow()
    if row >= 0:
        return DataRow(index=row)
    return None


class RowDiffEntry(BaseModel):
    """One row of evidence from the row-level diff."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    target: RowTarget
    status: RowStatus
    old_content: Optional[str] = None  # Present for deleted and modified rows
    new_content: Optional[str] = None  # Present for added and modified rows

    @model_validator(mode="before")
    @classmethod
    def accept_legacy_row(cls, data: Any) -> Any:
        """Allow ``{"row": -2, ...}`` in place of an explicit target."""
        if isinstance(data, dict) and "target" not in data and "row" in data:
            target = row_target_from_index(data["row"])
            if target is None:
                raise ValueError(f"Unsupported row number: {data['row']!r}")
            data = {key: value for key, value in data.items() if key != "row"}
            data["target"] = target.model_dump()
        return data

    @property
    def is_header(self) -> bool:
        return isinstance(self.target, HeaderRow)

    @property
    def carries_old(self) -> bool:
        """True if this entry holds the row as it was before the change."""
        return (
            self.status in (RowStatus.DELETED, RowStatus.MODIFIED)
            and self.old_content is not None
        )

    @property
    def carries_new(self) -> bool:
        """True if this entry holds the row as it is after the change."""
        return (
            self.status in (RowStatus.ADDED, RowStatus.MODIFIED)
            and self.new_content is not None
        )


class ChangePosition(BaseModel):
    """A single added or removed column."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    index: int = Field(ge=0)  # Old space for removed, new space for added
    type: ChangeType
    confidence: float = Field(ge=0.0, le=1.0)
    new_index: Optional[int] = None  # Final position in the new layout


class ColumnDiffInfoSimple(BaseModel):
    """Structural column diff between two revisions of a table."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    old_column_count: int = Field(ge=0)
    new_column_count: int = Field(ge=0)
    deleted_columns: list[int] = Field(default_factory=list)  # Old-space indices
    added_columns: list[int] = Field(default_factory=list)  # New-space indices
    old_headers: Optional[list[str]] = None
    mapping: Optional[list[int]] = None  # old index -> new index, -1 if removed
    positions: Optional[list[ChangePosition]] = None

    @model_validator(mode="after")
    def check_mapping(self) -> "ColumnDiffInfoSimple":
        """Keep mapping consistent with the column counts and deletions."""
        if self.mapping is None:
            return self
        if len(self.mapping) != self.old_column_count:
            raise ValueError(
                f"mapping has {len(self.mapping)} entries, "
                f"expected {self.old_column_count}"
            )
        for old_index, new_index in enumerate(self.mapping):
            if new_index != -1 and not 0 <= new_index < self.new_column_count:
                raise ValueError(
                    f"mapping[{old_index}] = {new_index} is outside "
                    f"[0, {self.new_column_count})"
                )
        unmapped = [i for i, new_index in enumerate(self.mapping) if new_index == -1]
        if unmapped != list(self.deleted_columns):
            raise ValueError(
                f"deleted_columns {self.deleted_columns} do not match "
                f"unmapped columns {unmapped}"
            )
        return self

    @property
    def has_changes(self) -> bool:
        return bool(self.deleted_columns or self.added_columns)

    @property
    def change_type(self) -> str:
        """Summary of the change: none, added, removed or mixed."""
        if self.deleted_columns and self.added_columns:
            return "mixed"
        if self.added_columns:
            return "added"
        if self.deleted_columns:
            return "removed"
        return "none"

    def is_estimated(self, threshold: Optional[float] = None) -> bool:
        """
        Check whether any change is below the high-confidence threshold.

        Args:
            threshold: Override for settings.high_confidence_threshold

        Returns:
            True if a renderer should qualify the diff as an estimate
        """
        if threshold is None:
            threshold = settings.high_confidence_threshold
        return any(position.confidence < threshold for position in self.positions or [])


class ColumnDiffInfo(ColumnDiffInfoSimple):
    """Column diff together with the strategy that produced it."""

    detection_method: DetectionMethod

    def to_simple(self) -> ColumnDiffInfoSimple:
        """Drop provenance, keeping only the structural diff."""
        return ColumnDiffInfoSimple.model_validate(
            self.model_dump(exclude={"detection_method"})
        )


class ColumnDiffDetectorOptions(OptionsModel):
    """Options for detect_column_diff."""

    header_compare: Optional[HeaderCompareOptions] = None  # None uses settings
    cell_parse: CellParseOptions = Field(default_factory=CellParseOptions)
    debug: bool = False  # Log the decision trace at INFO instead of DEBUG

    # Confidence for header-comparison positions when ignore_case is on;
    # None keeps the regular header confidence
    ignore_case_confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    @classmethod
    def coerce(cls, value: Any, defaults: Optional[dict[str, Any]] = None):
        """Coerce nested option bundles on their own before the rest."""
        if isinstance(value, cls):
            return value
        if isinstance(value, BaseModel):
            value = value.model_dump()
        if not isinstance(value, dict):
            return super().coerce(value, defaults)

        data: dict[str, Any] = {}
        for key, field_value in value.items():
            name = cls.field_name(key)
            if name is not None:
                data[name] = field_value

        if data.get("header_compare") is not None:
            data["header_compare"] = HeaderCompareOptions.coerce(data["header_compare"])
        if "cell_parse" in data:
            data["cell_parse"] = CellParseOptions.coerce(data["cell_parse"])
        return super().coerce(data, defaults)
