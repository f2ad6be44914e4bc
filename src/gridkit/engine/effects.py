"""Notifications a GridEditor emits towards its host.

Every gesture handler returns the effects it produced, in order, and hands
them to the subscribed observers as well.

Classes:
    DataChanged: A committed mutation replaced the live grid.
    SelectionChanged: The selected range changed (None when cleared).
    CellEdited: A single cell was committed through the text editor.
"""

from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict

from .schemas import SelectionRange


class DataChanged(BaseModel):
    model_config = ConfigDict(frozen=True)

    grid: list[dict[str, Any]]


class SelectionChanged(BaseModel):
    model_config = ConfigDict(frozen=True)

    selection: SelectionRange | None


class CellEdited(BaseModel):
    model_config = ConfigDict(frozen=True)

    row_index: int
    column_id: str
    old_value: Any = None
    new_value: Any = None


Effect = Union[DataChanged, SelectionChanged, CellEdited]
Observer = Callable[[Effect], None]
