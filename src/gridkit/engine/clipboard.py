"""Clipboard capture and paste over a grid.

The ClipboardManager never mutates the grid it receives. ``cut`` and
``paste`` return a new grid that the caller commits (and records into
history).

Example:
    >>> manager = ClipboardManager(resolver)
    >>> payload = manager.copy(grid, SelectionRange.single(0, "name"))
    >>> new_grid = manager.paste(grid, payload, SelectionRange.single(1, "name"))
"""

import logging

from gridkit.shared.consts import EMPTY_VALUE, NOT_FOUND
from gridkit.shared.utils import clone_grid

from .columns import ColumnIndexResolver
from .ranges import iter_cells, normalize
from .schemas import ClipboardOperation, ClipboardPayload, Grid, SelectionRange

logger = logging.getLogger(__name__)


class ClipboardManager:
    """Copies, cuts and pastes rectangular sub-grids.

    Attributes:
        resolver: Resolver for the active column schema.
    """

    def __init__(self, resolver: ColumnIndexResolver) -> None:
        self.resolver = resolver

    def copy(self, grid: Grid, selection: SelectionRange) -> ClipboardPayload:
        """Capture the cells of ``selection``.

        Every selected row yields one mapping of column id to value, columns
        in schema order. Rows outside the grid yield an empty mapping so the
        row offsets of the payload match the selection.

        Args:
            grid: The grid to read from.
            selection: The selection, corners in any order.

        Returns:
            A payload tagged ``copy`` whose selection is ``selection`` as given.
        """
        bounds = normalize(selection, self.resolver)

        rows: list[dict] = []
        if bounds.is_valid:
            for row in range(bounds.min_row, bounds.max_row + 1):
                captured = {}
                if 0 <= row < len(grid):
                    for col in range(bounds.min_col, bounds.max_col + 1):
                        column_id = self.resolver.column_id_at(col)
                        if column_id is not None:
                            captured[column_id] = grid[row].get(column_id)
                rows.append(captured)
        else:
            logger.debug(f"Copy over unresolvable selection ignored: {selection}")

        return ClipboardPayload(
            rows=rows, selection=selection, operation=ClipboardOperation.COPY
        )

    def cut(
        self, grid: Grid, selection: SelectionRange
    ) -> tuple[ClipboardPayload, Grid]:
        """Capture the cells of ``selection`` and clear them.

        Returns:
            The payload tagged ``cut`` and a new grid with every captured cell
            set to the empty string. ``grid`` itself is untouched.
        """
        payload = self.copy(grid, selection).model_copy(
            update={"operation": ClipboardOperation.CUT}
        )
        return payload, self.clear(grid, selection)

    def clear(self, grid: Grid, selection: SelectionRange) -> Grid:
        """Return a new grid with every in-range cell set to the empty string."""
        new_grid = clone_grid(grid)
        bounds = normalize(selection, self.resolver)

        for row, column_id in iter_cells(bounds, self.resolver):
            if 0 <= row < len(new_grid):
                new_grid[row][column_id] = EMPTY_VALUE

        return new_grid

    def paste(
        self, grid: Grid, payload: ClipboardPayload, anchor: SelectionRange
    ) -> Grid:
        """Write ``payload`` with its top-left cell at the anchor's start corner.

        Captured row ``r`` and captured column ``c`` (in capture order) land at
        row ``anchor.start_row + r`` and column index ``start index + c``.
        Targets past the last row or the last column are dropped: paste never
        grows the grid or the schema.

        Returns:
            A new grid with the payload applied. ``grid`` itself is untouched.
        """
        new_grid = clone_grid(grid)

        start_col = self.resolver.resolve(anchor.start_col)
        if start_col == NOT_FOUND:
            logger.debug(f"Paste anchor column not found: {anchor.start_col}")
            return new_grid

        dropped = 0
        for row_offset, captured in enumerate(payload.rows):
            target_row = anchor.start_row + row_offset
            if not 0 <= target_row < len(new_grid):
                dropped += len(captured)
                continue

            for col_offset, column_id in enumerate(captured):
                target_col = self.resolver.column_id_at(start_col + col_offset)
                if target_col is None:
                    dropped += 1
                    continue
                new_grid[target_row][target_col] = captured[column_id]

        if dropped:
            logger.debug(f"Paste dropped {dropped} cell(s) outside the grid")

        return new_grid
