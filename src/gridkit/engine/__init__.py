"""gridkit.engine: a spreadsheet-style editing engine for in-memory grids.

This package provides the state engine behind an editable data table: range
selection, clipboard transfer, bounded undo/redo and drag-fill with
arithmetic pattern detection. It renders nothing and listens to nothing; a
view layer calls the gesture handlers and observes the returned effects.

Features:
    - Rectangular selections addressed by (row index, column id)
    - Copy/cut/paste with column-offset remapping, never growing the grid
    - Linear undo/redo over full grid snapshots, capped in depth
    - Drag-fill that continues numeric progressions
    - Independently toggleable features

Main Classes:
    GridEditor: The orchestrator owning the live grid and editing state.
    ColumnSchema / Column: The column schema.
    GridEditorConfig / FeatureFlags: Configuration.
    HistoryManager, ClipboardManager, FillEngine: The editing components.

Quick Start:
    >>> from gridkit.engine import ColumnSchema, GridEditor
    >>>
    >>> schema = ColumnSchema.from_ids("id", "name", "age")
    >>> editor = GridEditor(
    ...     [{"id": 1, "name": "Ahmad", "age": 24}, {"id": 2, "name": "Rina", "age": 22}],
    ...     schema,
    ... )
    >>>
    >>> # Select a cell and copy it
    >>> editor.select_cell(0, "name")
    >>> editor.copy()
    >>>
    >>> # Paste one row down, then take it back
    >>> editor.select_cell(1, "name")
    >>> editor.paste()
    >>> editor.undo()
"""

from .clipboard import ClipboardManager
from .columns import ColumnIndexResolver
from .config import FeatureFlags, GridEditorConfig
from .editor import EditorMode, EditorState, GridEditor
from .effects import CellEdited, DataChanged, Effect, SelectionChanged
from .fill import FillEngine
from .history import HistoryManager
from .keyboard import KeyGesture, KeyOutcome, dispatch_key
from .patterns import common_difference, detect_pattern, extrapolate
from .ranges import contains, normalize
from .schemas import (
    CellCoordinate,
    ClipboardOperation,
    ClipboardPayload,
    Column,
    ColumnSchema,
    Direction,
    NormalizedRange,
    SelectionRange,
)
from .status import CellState, StatusSummary, cell_state, instructions, summarize

__all__ = [
    # Editor
    "GridEditor",
    "EditorMode",
    "EditorState",
    # Config
    "FeatureFlags",
    "GridEditorConfig",
    # Schemas
    "CellCoordinate",
    "ClipboardOperation",
    "ClipboardPayload",
    "Column",
    "ColumnSchema",
    "Direction",
    "NormalizedRange",
    "SelectionRange",
    # Components
    "ClipboardManager",
    "ColumnIndexResolver",
    "FillEngine",
    "HistoryManager",
    # Effects
    "CellEdited",
    "DataChanged",
    "Effect",
    "SelectionChanged",
    # Keyboard
    "KeyGesture",
    "KeyOutcome",
    "dispatch_key",
    # Functions
    "common_difference",
    "contains",
    "detect_pattern",
    "extrapolate",
    "normalize",
    # Status
    "CellState",
    "StatusSummary",
    "cell_state",
    "instructions",
    "summarize",
]
