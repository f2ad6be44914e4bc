"""Grid editor: the root of the editing engine.

GridEditor owns the live grid and the transient editing state (selection,
text edit, drag-fill, clipboard) and turns decoded gestures into state
transitions. Each gesture handler returns the list of effects it produced
and also hands them to subscribed observers. The editor registers no input
listeners of its own: the host calls the handlers directly.

Selection/edit state machine::

    Idle --click--> CellSelected --shift-click--> RangeSelected
    CellSelected/RangeSelected --double-click/Enter/printable key--> Editing
    Editing --commit/cancel--> CellSelected
    CellSelected --fill handle press--> Dragging --release--> CellSelected
    any --Escape--> Idle (clipboard cleared too)

Example:
    >>> schema = ColumnSchema.from_ids("id", "name", "age")
    >>> editor = GridEditor([{"id": 1, "name": "Ahmad", "age": 24}], schema)
    >>> editor.select_cell(0, "age")
    []
    >>> effects = editor.commit_edit(0, "age", 25)
    >>> editor.undo()[0].grid[0]["age"]
    24
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping

from gridkit.shared.consts import ROW_ID_FIELD
from gridkit.shared.utils import clone_grid

from .clipboard import ClipboardManager
from .columns import ColumnIndexResolver
from .config import FeatureFlags, GridEditorConfig
from .effects import CellEdited, DataChanged, Effect, Observer, SelectionChanged
from .fill import FillEngine
from .history import HistoryManager
from .ranges import normalize
from .schemas import (
    CellCoordinate,
    ClipboardPayload,
    ColumnSchema,
    Direction,
    Grid,
    SelectionRange,
)

if TYPE_CHECKING:
    from .keyboard import KeyGesture

logger = logging.getLogger(__name__)


class EditorMode(str, Enum):
    IDLE = "idle"
    CELL_SELECTED = "cell_selected"
    RANGE_SELECTED = "range_selected"
    EDITING = "editing"
    DRAGGING = "dragging"


@dataclass
class EditorState:
    """Everything a GridEditor tracks between gestures."""

    grid: Grid
    selected_cell: CellCoordinate | None = None
    selected_range: SelectionRange | None = None
    editing_cell: CellCoordinate | None = None
    drag_start: CellCoordinate | None = None
    drag_selection: SelectionRange | None = None
    clipboard: ClipboardPayload | None = None


class GridEditor:
    """Spreadsheet-like editing over an in-memory grid.

    Attributes:
        schema: The column schema. Stable for the lifetime of the editor.
        config: Feature flags and history depth.
        resolver: Column id to ordinal resolver for ``schema``.
        history: Undo/redo snapshots of the grid.
        state: The live editing state.
    """

    def __init__(
        self,
        data: Iterable[Mapping[str, Any]],
        schema: ColumnSchema,
        config: GridEditorConfig | None = None,
    ) -> None:
        """Initialize a GridEditor.

        Args:
            data: Initial rows. Each row must carry an ``id`` field. The rows
                are copied; the caller's objects are never modified.
            schema: The column schema.
            config: Feature flags and history depth. Defaults to everything on
                with 50 history states.

        Raises:
            ValueError: If a row has no ``id`` field.
        """
        grid = [dict(row) for row in data]
        for position, row in enumerate(grid):
            if ROW_ID_FIELD not in row:
                raise ValueError(f"Row {position} has no '{ROW_ID_FIELD}' field")

        self.schema = schema
        self.config = config or GridEditorConfig()
        self.resolver = ColumnIndexResolver(schema)
        self.clipboard_manager = ClipboardManager(self.resolver)
        self.fill_engine = FillEngine(self.resolver)
        self.history = HistoryManager(
            grid,
            max_states=self.config.max_history_states,
            enabled=self.config.features.history,
        )
        self.state = EditorState(grid=grid)
        self._observers: list[Observer] = []

        logger.info(
            f"Grid editor ready: {len(grid)} row(s), {len(schema)} column(s)"
        )

    # ==================== Observers ====================

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer`` for every future effect.

        Returns:
            A callable that unsubscribes the observer.
        """
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def _emit(self, effects: list[Effect]) -> list[Effect]:
        for effect in effects:
            for observer in list(self._observers):
                observer(effect)
        return effects

    # ==================== Queries ====================

    @property
    def features(self) -> FeatureFlags:
        return self.config.features

    @property
    def grid(self) -> Grid:
        """A copy of the live grid."""
        return clone_grid(self.state.grid)

    @property
    def mode(self) -> EditorMode:
        if self.state.editing_cell is not None:
            return EditorMode.EDITING
        if self.state.drag_start is not None:
            return EditorMode.DRAGGING
        if self.state.selected_range is not None:
            return EditorMode.RANGE_SELECTED
        if self.state.selected_cell is not None:
            return EditorMode.CELL_SELECTED
        return EditorMode.IDLE

    def value(self, row: int, column_id: str) -> Any:
        if not 0 <= row < len(self.state.grid):
            return None
        return self.state.grid[row].get(column_id)

    def active_selection(self) -> SelectionRange | None:
        """The target of clipboard and delete operations.

        The selected range, else the selected cell as a 1x1 range, else row 0
        of the first selectable column. None only for an empty schema.
        """
        if self.state.selected_range is not None:
            return self.state.selected_range

        cell = self.state.selected_cell
        if cell is not None:
            return SelectionRange.single(cell.row, cell.col)

        column_id = self.__default_column()
        if column_id is None:
            return None
        return SelectionRange.single(0, column_id)

    def __default_column(self) -> str | None:
        selectable = self.resolver.selectable_indices()
        if selectable:
            return self.resolver.column_id_at(selectable[0])
        return self.resolver.column_id_at(0)

    def __is_cell(self, row: int, column_id: str) -> bool:
        return 0 <= row < len(self.state.grid) and column_id in self.resolver

    def __covers_grid(self, selection: SelectionRange) -> bool:
        bounds = normalize(selection, self.resolver)
        return (
            bounds.is_valid
            and bounds.max_row >= 0
            and bounds.min_row < len(self.state.grid)
        )

    def __is_selectable(self, row: int, column_id: str) -> bool:
        column = self.resolver.column(column_id)
        return (
            column is not None
            and column.selectable
            and 0 <= row < len(self.state.grid)
        )

    # ==================== State helpers ====================

    def __set_range(self, selection: SelectionRange | None) -> list[Effect]:
        if selection == self.state.selected_range:
            return []
        self.state.selected_range = selection
        return [SelectionChanged(selection=selection)]

    def __commit(self, new_grid: Grid) -> DataChanged:
        self.state.grid = new_grid
        self.history.record(new_grid)
        return DataChanged(grid=clone_grid(new_grid))

    # ==================== Selection ====================

    def select_cell(self, row: int, column_id: str) -> list[Effect]:
        """Click: select a single cell and clear any selected range."""
        if not self.__is_selectable(row, column_id):
            logger.debug(f"Ignoring selection of ({row}, {column_id})")
            return []

        self.state.selected_cell = CellCoordinate(row=row, col=column_id)
        return self._emit(self.__set_range(None))

    def extend_selection(self, row: int, column_id: str) -> list[Effect]:
        """Shift-click: select the range from the selected cell to (row, column_id)."""
        anchor = self.state.selected_cell
        if anchor is None or not self.__is_selectable(row, column_id):
            return []

        selection = SelectionRange(
            start_row=anchor.row,
            end_row=row,
            start_col=anchor.col,
            end_col=column_id,
        )
        return self._emit(self.__set_range(selection))

    def click(self, row: int, column_id: str, shift: bool = False) -> list[Effect]:
        if shift and self.state.selected_cell is not None:
            return self.extend_selection(row, column_id)
        return self.select_cell(row, column_id)

    def navigate(self, direction: Direction | str) -> list[Effect]:
        """Move the selected cell one step, clamped to the grid.

        Rows clamp to the grid, columns to the selectable columns. Never
        wraps and never moves off the grid. No-op without a selected cell.
        """
        cell = self.state.selected_cell
        if cell is None:
            return []

        try:
            direction = Direction(direction)
        except ValueError:
            logger.debug(f"Ignoring unknown direction: {direction!r}")
            return []

        row = cell.row
        column_id = cell.col
        last_row = len(self.state.grid) - 1

        if direction is Direction.UP:
            row = max(0, cell.row - 1)
        elif direction is Direction.DOWN:
            row = max(0, min(last_row, cell.row + 1))
        else:
            selectable = self.resolver.selectable_indices()
            current = self.resolver.resolve(cell.col)
            if current in selectable:
                position = selectable.index(current)
                step = -1 if direction is Direction.LEFT else 1
                position = max(0, min(len(selectable) - 1, position + step))
                column_id = self.resolver.column_id_at(selectable[position])

        self.state.selected_cell = CellCoordinate(row=row, col=column_id)
        return []

    def escape(self) -> list[Effect]:
        """Return to Idle: drop edit, selection, drag and clipboard."""
        self.state.editing_cell = None
        self.state.selected_cell = None
        self.state.drag_start = None
        self.state.drag_selection = None
        if self.state.clipboard is not None:
            logger.debug("Clipboard cleared")
        self.state.clipboard = None
        return self._emit(self.__set_range(None))

    # ==================== Text editing ====================

    def begin_edit(self, row: int, column_id: str) -> list[Effect]:
        """Double-click: select the cell and open its text editor."""
        if not self.__is_selectable(row, column_id):
            logger.debug(f"Ignoring edit request at ({row}, {column_id})")
            return []

        effects = self.select_cell(row, column_id)

        self.start_editing_selected()
        return effects

    def start_editing_selected(self) -> bool:
        """Open the text editor on the selected cell, keeping the selection.

        Returns:
            True when editing started.
        """
        cell = self.state.selected_cell
        if cell is None:
            return False

        column = self.resolver.column(cell.col)
        if column is None or not column.editable:
            logger.debug(f"Column {cell.col} is not editable")
            return False

        self.state.editing_cell = cell
        return True

    def cancel_edit(self) -> list[Effect]:
        self.state.editing_cell = None
        return []

    def commit_edit(self, row: int, column_id: str, new_value: Any) -> list[Effect]:
        """Close the text editor, committing ``new_value`` into the cell."""
        self.state.editing_cell = None
        return self.set_value(row, column_id, new_value)

    def set_value(self, row: int, column_id: str, new_value: Any) -> list[Effect]:
        """Commit a single cell value and record it into history.

        Emits DataChanged followed by CellEdited. Out-of-grid cells and
        non-editable columns are ignored.
        """
        column = self.resolver.column(column_id)
        if column is None or not 0 <= row < len(self.state.grid):
            logger.debug(f"Ignoring edit outside the grid at ({row}, {column_id})")
            return []
        if not column.editable:
            logger.debug(f"Ignoring edit of read-only column {column_id}")
            return []

        old_value = self.state.grid[row].get(column_id)
        new_grid = clone_grid(self.state.grid)
        new_grid[row][column_id] = new_value

        logger.info(f"Cell ({row}, {column_id}) edited: {old_value!r} -> {new_value!r}")
        return self._emit(
            [
                self.__commit(new_grid),
                CellEdited(
                    row_index=row,
                    column_id=column_id,
                    old_value=old_value,
                    new_value=new_value,
                ),
            ]
        )

    # ==================== Clipboard ====================

    def copy(self) -> list[Effect]:
        if not self.features.clipboard:
            return []
        selection = self.active_selection()
        if selection is None:
            return []

        self.state.clipboard = self.clipboard_manager.copy(self.state.grid, selection)
        logger.info(f"Copied {len(self.state.clipboard.rows)} row(s)")
        return []

    def cut(self) -> list[Effect]:
        if not self.features.clipboard:
            return []
        selection = self.active_selection()
        if selection is None or not self.__covers_grid(selection):
            return []

        payload, new_grid = self.clipboard_manager.cut(self.state.grid, selection)
        self.state.clipboard = payload
        logger.info(f"Cut {len(payload.rows)} row(s)")
        return self._emit([self.__commit(new_grid)])

    def paste(self) -> list[Effect]:
        """Paste the clipboard at the active selection's start corner.

        A cut payload is consumed by its first paste. An empty capture or an
        anchor outside the grid pastes nothing and leaves the payload in place.
        """
        payload = self.state.clipboard
        if not self.features.clipboard or payload is None:
            return []
        if not any(payload.rows):
            logger.debug("Nothing to paste")
            return []
        anchor = self.active_selection()
        if anchor is None or not self.__is_cell(anchor.start_row, anchor.start_col):
            logger.debug(f"Paste target outside the grid: {anchor}")
            return []

        new_grid = self.clipboard_manager.paste(self.state.grid, payload, anchor)
        if payload.is_cut:
            self.state.clipboard = None
            logger.debug("Cut payload consumed by paste")

        logger.info(f"Pasted {len(payload.rows)} row(s) at ({anchor.start_row}, {anchor.start_col})")
        return self._emit([self.__commit(new_grid)])

    def delete_selection(self) -> list[Effect]:
        """Set every cell of the active selection to the empty string."""
        selection = self.active_selection()
        if selection is None or not self.__covers_grid(selection):
            logger.debug(f"Nothing to clear at {selection}")
            return []

        new_grid = self.clipboard_manager.clear(self.state.grid, selection)
        logger.info(f"Cleared selection {selection.model_dump()}")
        return self._emit([self.__commit(new_grid)])

    # ==================== Drag fill ====================

    def begin_drag(self, row: int, column_id: str) -> list[Effect]:
        """Fill handle pressed on (row, column_id), the fill's anchor."""
        if not self.features.drag_fill or not self.__is_cell(row, column_id):
            return []

        self.state.drag_start = CellCoordinate(row=row, col=column_id)
        self.state.drag_selection = None
        return []

    def update_drag(self, row: int, column_id: str) -> list[Effect]:
        """Pointer entered (row, column_id) while dragging."""
        start = self.state.drag_start
        if start is None or row < 0 or column_id not in self.resolver:
            return []

        self.state.drag_selection = SelectionRange.between(
            start, CellCoordinate(row=row, col=column_id)
        )
        return []

    def cancel_drag(self) -> list[Effect]:
        """Pointer left the grid: discard the drag without filling."""
        self.state.drag_start = None
        self.state.drag_selection = None
        return []

    def commit_drag(self) -> list[Effect]:
        """Pointer released: fill the dragged rectangle and record history.

        No-op when the pointer never left the anchor cell.
        """
        selection = self.state.drag_selection
        self.cancel_drag()

        if not self.features.drag_fill or selection is None:
            return []
        if selection.is_single_cell:
            logger.debug("Drag ended on its anchor, nothing to fill")
            return []

        new_grid = self.fill_engine.fill(self.state.grid, selection)
        logger.info(f"Filled {selection.model_dump()}")
        return self._emit([self.__commit(new_grid)])

    # ==================== History ====================

    def undo(self) -> list[Effect]:
        if not self.features.history:
            return []
        grid = self.history.undo()
        if grid is None:
            return []

        self.state.grid = grid
        logger.info(f"Undo to {self.history.position}/{len(self.history)}")
        return self._emit([DataChanged(grid=clone_grid(grid))])

    def redo(self) -> list[Effect]:
        if not self.features.history:
            return []
        grid = self.history.redo()
        if grid is None:
            return []

        self.state.grid = grid
        logger.info(f"Redo to {self.history.position}/{len(self.history)}")
        return self._emit([DataChanged(grid=clone_grid(grid))])

    # ==================== Keyboard ====================

    def handle_key(self, gesture: "KeyGesture") -> list[Effect]:
        """Dispatch a decoded key gesture. See ``gridkit.engine.keyboard``."""
        from .keyboard import dispatch_key

        return dispatch_key(self, gesture).effects
