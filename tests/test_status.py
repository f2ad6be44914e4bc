from gridkit.engine import (
    CellState,
    FeatureFlags,
    GridEditor,
    GridEditorConfig,
    cell_state,
    instructions,
    summarize,
)


class TestSummarize:
    def test_initial_state(self, editor):
        summary = summarize(editor)

        assert summary.selection == "No selection"
        assert summary.clipboard == "Clipboard empty"
        assert summary.history == "History: 1/1"
        assert not summary.can_undo
        assert not summary.can_redo

    def test_single_cell(self, editor):
        editor.select_cell(2, "age")
        assert summarize(editor).selection == "Selected: Row 3, age"

    def test_range(self, editor):
        editor.select_cell(0, "name")
        editor.extend_selection(2, "age")
        assert summarize(editor).selection == "Selected: 1-3 × name-age"

    def test_clipboard_labels(self, editor):
        editor.select_cell(0, "name")
        editor.extend_selection(1, "age")
        editor.copy()
        assert summarize(editor).clipboard == "Copied: 2 cells"

        editor.cut()
        assert summarize(editor).clipboard == "Cut: 2 cells"

    def test_history_progress(self, editor):
        editor.set_value(0, "age", 30)
        editor.set_value(0, "age", 31)
        editor.undo()

        summary = summarize(editor)

        assert summary.history == "History: 2/3"
        assert summary.can_undo
        assert summary.can_redo

    def test_disabled_features_have_no_label(self, people_rows, people_schema):
        config = GridEditorConfig(features=FeatureFlags(clipboard=False, history=False))
        summary = summarize(GridEditor(people_rows, people_schema, config))

        assert summary.clipboard is None
        assert summary.history is None


class TestCellState:
    def test_selected_cell_shows_fill_handle(self, editor):
        editor.select_cell(1, "name")
        state = cell_state(editor, 1, "name")

        assert state.selected
        assert state.show_fill_handle
        assert not state.in_range

    def test_range_excludes_selected_cell(self, editor):
        editor.select_cell(0, "name")
        editor.extend_selection(1, "age")

        assert not cell_state(editor, 0, "name").in_range
        assert cell_state(editor, 1, "age").in_range
        assert not cell_state(editor, 2, "age").in_range

    def test_clipboard_marking(self, editor):
        editor.select_cell(0, "city")
        editor.cut()

        state = cell_state(editor, 0, "city")
        assert state.in_clipboard
        assert state.clipboard_cut
        assert not cell_state(editor, 1, "city").in_clipboard

    def test_drag_marking(self, editor):
        editor.begin_drag(0, "age")
        editor.update_drag(2, "age")

        assert cell_state(editor, 0, "age").drag_anchor
        assert cell_state(editor, 1, "age").in_drag
        assert not cell_state(editor, 1, "name").in_drag

    def test_editing(self, editor):
        editor.begin_edit(3, "city")
        assert cell_state(editor, 3, "city").editing

    def test_no_fill_handle_when_drag_fill_off(self, people_rows, people_schema):
        config = GridEditorConfig(features=FeatureFlags(drag_fill=False))
        editor = GridEditor(people_rows, people_schema, config)
        editor.select_cell(0, "age")

        assert not cell_state(editor, 0, "age").show_fill_handle

    def test_negative_row(self, editor):
        assert cell_state(editor, -1, "age") == CellState()


class TestInstructions:
    def test_all_features(self):
        hints = instructions(FeatureFlags())
        assert "Ctrl+C to copy" in hints
        assert "Ctrl+Z to undo, Ctrl+Y to redo" in hints
        assert "Drag the fill handle to fill" in hints

    def test_hints_follow_features(self):
        hints = instructions(FeatureFlags(clipboard=False, history=False, drag_fill=False))
        assert hints == [
            "Click cell to select",
            "Double-click or Enter to edit",
            "Arrow keys to navigate",
            "Delete to clear cells",
        ]
