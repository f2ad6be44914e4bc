"""Data schemas for the grid editing engine.

This module defines the Pydantic data models shared by every engine
component: the column schema, cell coordinates, selection rectangles and the
clipboard payload.

Rows and grids are plain data, not models: a row is a ``dict`` mapping column
id to a cell value and a grid is a ``list`` of rows. Cell values form a closed
set: ``int``, ``float`` or ``str``, where ``""`` (or ``None``) is empty.

Classes:
    Column: Descriptor of a single column with a mandatory id.
    ColumnSchema: Ordered, duplicate-free sequence of columns.
    CellCoordinate: A (row index, column id) address.
    SelectionRange: A rectangle given by two corners, possibly unordered.
    NormalizedRange: A rectangle with ordered row and column-ordinal bounds.
    ClipboardOperation: Tag of a clipboard payload (copy or cut).
    ClipboardPayload: Detached copy of a selection plus its tag.
    Direction: Arrow-key navigation direction.

Example:
    >>> from gridkit.engine.schemas import SelectionRange
    >>> selection = SelectionRange(start_row=3, end_row=1, start_col="age", end_col="name")
    >>> selection.is_single_cell
    False
"""

from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gridkit.shared.consts import NOT_FOUND, SELECT_COLUMN_ID

CellValue = int | float | str | None
Row = dict[str, CellValue]
Grid = list[Row]


class Column(BaseModel):
    """Descriptor of a single grid column.

    Attributes:
        id: Unique column identifier, also the key of the column in every row.
        header: Display label. Defaults to the id.
        editable: Whether the cell text editor may change values in this column.
        selectable: Whether the cell cursor may rest on this column. The
            row-selection checkbox column is not selectable.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Unique column id")
    header: str | None = Field(default=None, description="Display label")
    editable: bool = Field(default=True, description="Cells may be edited")
    selectable: bool = Field(default=True, description="Cursor may rest on the column")

    @property
    def label(self) -> str:
        return self.header if self.header is not None else self.id

    @classmethod
    def select_column(cls) -> "Column":
        """The checkbox column the host view shows for row selection."""
        return cls(id=SELECT_COLUMN_ID, header="", editable=False, selectable=False)


class ColumnSchema(BaseModel):
    """Ordered sequence of columns.

    The position of a column in ``columns`` is its column index, the ordinal
    used by all range arithmetic.

    Raises:
        pydantic.ValidationError: If two columns share an id.
    """

    model_config = ConfigDict(frozen=True)

    columns: tuple[Column, ...] = Field(default=(), description="Columns in display order")

    @model_validator(mode="after")
    def _check_unique_ids(self) -> Self:
        seen: set[str] = set()
        for column in self.columns:
            if column.id in seen:
                raise ValueError(f"Duplicate column id: {column.id}")
            seen.add(column.id)
        return self

    @classmethod
    def from_ids(cls, *column_ids: str) -> "ColumnSchema":
        return cls(columns=tuple(Column(id=column_id) for column_id in column_ids))

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self):
        return iter(self.columns)

    def __getitem__(self, index: int) -> Column:
        return self.columns[index]


class CellCoordinate(BaseModel):
    """A cell address. ``row`` is a position in the grid, not the row's id."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, description="Row position in the grid")
    col: str = Field(description="Column id")


class SelectionRange(BaseModel):
    """A rectangle defined by two corner cells.

    The corners are kept as given: ``start_row`` may be greater than
    ``end_row`` and ``start_col`` may come after ``end_col`` in the schema.
    Consumers normalize at use time with ``gridkit.engine.ranges.normalize``.

    The same shape describes an in-progress drag-fill selection, whose start
    corner is the drag anchor.
    """

    model_config = ConfigDict(frozen=True)

    start_row: int
    end_row: int
    start_col: str
    end_col: str

    @classmethod
    def single(cls, row: int, col: str) -> "SelectionRange":
        return cls(start_row=row, end_row=row, start_col=col, end_col=col)

    @classmethod
    def between(cls, start: CellCoordinate, end: CellCoordinate) -> "SelectionRange":
        return cls(
            start_row=start.row,
            end_row=end.row,
            start_col=start.col,
            end_col=end.col,
        )

    @property
    def is_single_cell(self) -> bool:
        return self.start_row == self.end_row and self.start_col == self.end_col


class NormalizedRange(BaseModel):
    """A rectangle with inclusive, ordered bounds.

    Column bounds are ordinals into the column schema. A corner whose column
    id did not resolve leaves ``min_col`` at ``NOT_FOUND`` and the range is
    treated as empty.
    """

    model_config = ConfigDict(frozen=True)

    min_row: int
    max_row: int
    min_col: int
    max_col: int

    @property
    def is_valid(self) -> bool:
        return self.min_col != NOT_FOUND and self.max_col != NOT_FOUND

    @property
    def row_count(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def col_count(self) -> int:
        return self.max_col - self.min_col + 1


class ClipboardOperation(str, Enum):
    """How a clipboard payload was captured"""

    COPY = "copy"
    CUT = "cut"


class ClipboardPayload(BaseModel):
    """A detached copy of a selection.

    Attributes:
        rows: Captured values, one mapping of column id to value per selected
            row, columns in capture order.
        selection: The originating selection exactly as given (not normalized).
        operation: Whether the payload came from a copy or a cut.
    """

    model_config = ConfigDict(frozen=True)

    rows: list[dict[str, Any]] = Field(default_factory=list)
    selection: SelectionRange
    operation: ClipboardOperation = ClipboardOperation.COPY

    @property
    def is_cut(self) -> bool:
        return self.operation is ClipboardOperation.CUT


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
