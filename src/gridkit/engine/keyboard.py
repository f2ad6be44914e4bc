"""Global key gesture dispatch for a GridEditor.

The host decodes its own key events into KeyGesture objects and passes them
to ``dispatch_key`` (or ``GridEditor.handle_key``). The outcome says whether
the key was consumed, so the host can stop its default handling.

Bindings:
    printable character  start editing the selected cell
    Ctrl/Cmd+C, X, V     copy, cut, paste          (clipboard feature)
    Ctrl/Cmd+Z           undo                      (history feature)
    Ctrl/Cmd+Y,
    Ctrl/Cmd+Shift+Z     redo                      (history feature)
    Delete, Backspace    clear the active selection
    Enter                start editing the selected cell
    Escape               clear selection, edit and clipboard
    Arrow keys           move the selected cell

Nothing is dispatched while the keyboard_shortcuts feature is off, while a
cell is being edited, or while focus is on a text input outside the grid.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from .effects import Effect
from .schemas import Direction

if TYPE_CHECKING:
    from .editor import GridEditor

ARROW_KEYS = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}


class KeyGesture(BaseModel):
    """A decoded key press.

    Attributes:
        key: Key name as reported by the host ("a", "Enter", "ArrowUp", ...).
        ctrl: Control held.
        meta: Command/meta held (treated like Control).
        shift: Shift held.
        alt: Alt/Option held.
        in_text_input: Focus is on a text input outside the grid.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
    alt: bool = False
    in_text_input: bool = False

    @property
    def is_command(self) -> bool:
        return self.ctrl or self.meta

    @property
    def is_printable(self) -> bool:
        return len(self.key) == 1 and not self.is_command and not self.alt


@dataclass
class KeyOutcome:
    handled: bool = False
    effects: list[Effect] = field(default_factory=list)


def dispatch_key(editor: "GridEditor", gesture: KeyGesture) -> KeyOutcome:
    """Route ``gesture`` to the matching editor operation.

    Returns:
        Whether the key was consumed and the effects it produced.
    """
    features = editor.features
    if not features.keyboard_shortcuts:
        return KeyOutcome()
    if editor.state.editing_cell is not None or gesture.in_text_input:
        return KeyOutcome()

    if gesture.is_printable and editor.state.selected_cell is not None:
        return KeyOutcome(handled=editor.start_editing_selected())

    key = gesture.key

    if gesture.is_command and key.lower() in ("c", "v", "x"):
        if not features.clipboard:
            return KeyOutcome()
        operation = {"c": editor.copy, "v": editor.paste, "x": editor.cut}[key.lower()]
        return KeyOutcome(handled=True, effects=operation())

    if gesture.is_command and key.lower() in ("z", "y"):
        if not features.history:
            return KeyOutcome()
        if key.lower() == "z" and not gesture.shift:
            return KeyOutcome(handled=True, effects=editor.undo())
        return KeyOutcome(handled=True, effects=editor.redo())

    if key in ("Delete", "Backspace"):
        return KeyOutcome(handled=True, effects=editor.delete_selection())

    if key == "Enter":
        return KeyOutcome(handled=editor.start_editing_selected())

    if key == "Escape":
        return KeyOutcome(handled=True, effects=editor.escape())

    if key in ARROW_KEYS:
        return KeyOutcome(handled=True, effects=editor.navigate(ARROW_KEYS[key]))

    return KeyOutcome()
