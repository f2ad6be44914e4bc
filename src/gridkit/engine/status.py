"""Read-only views of a GridEditor for the host's status bar and cell styling.

Functions:
    summarize: Status bar labels and undo/redo availability.
    cell_state: Highlight flags of one cell.
    instructions: Gesture hints for the enabled features.
"""

from pydantic import BaseModel, ConfigDict

from .config import FeatureFlags
from .editor import GridEditor
from .ranges import contains
from .schemas import CellCoordinate


class StatusSummary(BaseModel):
    """Status bar content. A label is None when its feature is disabled."""

    model_config = ConfigDict(frozen=True)

    selection: str
    clipboard: str | None = None
    history: str | None = None
    can_undo: bool = False
    can_redo: bool = False


class CellState(BaseModel):
    """How the host should highlight a single cell."""

    model_config = ConfigDict(frozen=True)

    selected: bool = False
    editing: bool = False
    in_range: bool = False
    in_clipboard: bool = False
    clipboard_cut: bool = False
    in_drag: bool = False
    drag_anchor: bool = False
    show_fill_handle: bool = False


def summarize(editor: GridEditor) -> StatusSummary:
    state = editor.state
    features = editor.features

    if state.selected_range is not None:
        selection = state.selected_range
        selection_label = (
            f"Selected: {selection.start_row + 1}-{selection.end_row + 1}"
            f" × {selection.start_col}-{selection.end_col}"
        )
    elif state.selected_cell is not None:
        cell = state.selected_cell
        selection_label = f"Selected: Row {cell.row + 1}, {cell.col}"
    else:
        selection_label = "No selection"

    clipboard_label = None
    if features.clipboard:
        payload = state.clipboard
        if payload is None:
            clipboard_label = "Clipboard empty"
        else:
            verb = "Cut" if payload.is_cut else "Copied"
            clipboard_label = f"{verb}: {len(payload.rows)} cells"

    history_label = None
    if features.history:
        history_label = f"History: {editor.history.position}/{len(editor.history)}"

    return StatusSummary(
        selection=selection_label,
        clipboard=clipboard_label,
        history=history_label,
        can_undo=editor.history.can_undo,
        can_redo=editor.history.can_redo,
    )


def cell_state(editor: GridEditor, row: int, column_id: str) -> CellState:
    if row < 0:
        return CellState()

    state = editor.state
    features = editor.features
    resolver = editor.resolver
    coordinate = CellCoordinate(row=row, col=column_id)

    selected = state.selected_cell == coordinate
    column = resolver.column(column_id)

    in_clipboard = False
    if features.clipboard and state.clipboard is not None:
        in_clipboard = contains(state.clipboard.selection, row, column_id, resolver)

    in_range = False
    if state.selected_range is not None:
        in_range = contains(state.selected_range, row, column_id, resolver)

    in_drag = False
    if state.drag_selection is not None:
        in_drag = contains(state.drag_selection, row, column_id, resolver)

    return CellState(
        selected=selected,
        editing=state.editing_cell == coordinate,
        in_range=in_range and not selected,
        in_clipboard=in_clipboard,
        clipboard_cut=in_clipboard and state.clipboard.is_cut,
        in_drag=in_drag,
        drag_anchor=state.drag_start == coordinate,
        show_fill_handle=(
            selected
            and features.drag_fill
            and column is not None
            and column.selectable
        ),
    )


def instructions(features: FeatureFlags) -> list[str]:
    hints = ["Click cell to select", "Double-click or Enter to edit"]
    if features.drag_fill:
        hints.append("Drag the fill handle to fill")
    if features.keyboard_shortcuts:
        hints.append("Arrow keys to navigate")
    if features.clipboard:
        hints.extend(
            [
                "Ctrl+C to copy",
                "Ctrl+X to cut",
                "Ctrl+V to paste",
            ]
        )
    if features.history:
        hints.append("Ctrl+Z to undo, Ctrl+Y to redo")
    hints.append("Delete to clear cells")
    return hints
