import copy

from gridkit.engine import ClipboardOperation, SelectionRange


class TestCopy:
    def test_captures_rows_in_column_order(self, clipboard, people_rows):
        selection = SelectionRange(start_row=2, end_row=1, start_col="age", end_col="name")
        payload = clipboard.copy(people_rows, selection)

        assert payload.operation is ClipboardOperation.COPY
        assert payload.selection == selection
        assert payload.rows == [
            {"name": "Rina", "age": 22},
            {"name": "Yudi", "age": 27},
        ]
        assert list(payload.rows[0]) == ["name", "age"]

    def test_rows_outside_grid_capture_nothing(self, clipboard, people_rows):
        selection = SelectionRange(start_row=5, end_row=7, start_col="name", end_col="name")
        payload = clipboard.copy(people_rows, selection)
        assert payload.rows == [{"name": "Doni"}, {}, {}]

    def test_payload_is_detached(self, clipboard, people_rows):
        payload = clipboard.copy(people_rows, SelectionRange.single(0, "name"))
        people_rows[0]["name"] = "Changed"
        assert payload.rows == [{"name": "Ahmad"}]


class TestCutAndPaste:
    def test_copy_paste_round_trip(self, clipboard, people_rows):
        selection = SelectionRange(start_row=1, end_row=3, start_col="name", end_col="city")
        payload = clipboard.copy(people_rows, selection)

        assert clipboard.paste(people_rows, payload, selection) == people_rows

    def test_cut_clears_and_paste_moves(self, clipboard, people_rows):
        original = copy.deepcopy(people_rows)
        selection = SelectionRange(start_row=0, end_row=1, start_col="name", end_col="age")

        payload, cut_grid = clipboard.cut(people_rows, selection)

        assert payload.operation is ClipboardOperation.CUT
        assert people_rows == original
        for row in range(2):
            assert cut_grid[row]["name"] == ""
            assert cut_grid[row]["age"] == ""
            assert cut_grid[row]["city"] == original[row]["city"]

        pasted = clipboard.paste(cut_grid, payload, SelectionRange.single(3, "name"))
        assert pasted[3]["name"] == "Ahmad"
        assert pasted[3]["age"] == 24
        assert pasted[4]["name"] == "Rina"
        assert pasted[4]["age"] == 22
        assert pasted[0]["name"] == ""

    def test_paste_rows_past_end_are_dropped(self, clipboard, people_rows):
        selection = SelectionRange(start_row=0, end_row=2, start_col="name", end_col="name")
        payload = clipboard.copy(people_rows, selection)
        anchor = SelectionRange.single(len(people_rows) - 2, "name")

        pasted = clipboard.paste(people_rows, payload, anchor)

        assert len(pasted) == len(people_rows)
        assert pasted[4]["name"] == "Ahmad"
        assert pasted[5]["name"] == "Rina"

    def test_paste_columns_past_end_are_dropped(self, clipboard, people_rows):
        selection = SelectionRange(start_row=0, end_row=0, start_col="name", end_col="city")
        payload = clipboard.copy(people_rows, selection)

        pasted = clipboard.paste(people_rows, payload, SelectionRange.single(1, "age"))

        assert pasted[1]["age"] == "Ahmad"
        assert pasted[1]["city"] == 24
        assert set(pasted[1]) == {"id", "name", "age", "city"}

    def test_paste_uses_anchor_start_corner(self, clipboard, people_rows):
        payload = clipboard.copy(people_rows, SelectionRange.single(0, "city"))
        anchor = SelectionRange(start_row=4, end_row=2, start_col="city", end_col="name")

        pasted = clipboard.paste(people_rows, payload, anchor)

        assert pasted[4]["city"] == "Kendari"
        assert pasted[2]["name"] == "Yudi"

    def test_paste_at_unknown_column_changes_nothing(self, clipboard, people_rows):
        payload = clipboard.copy(people_rows, SelectionRange.single(0, "city"))
        pasted = clipboard.paste(people_rows, payload, SelectionRange.single(0, "salary"))
        assert pasted == people_rows

    def test_clear_only_touches_range(self, clipboard, people_rows):
        selection = SelectionRange(start_row=1, end_row=2, start_col="age", end_col="city")
        cleared = clipboard.clear(people_rows, selection)

        for row in range(len(people_rows)):
            for column_id in ("id", "name", "age", "city"):
                inside = row in (1, 2) and column_id in ("age", "city")
                expected = "" if inside else people_rows[row][column_id]
                assert cleared[row][column_id] == expected
