"""Drag-fill propagation.

A drag-fill starts at an anchor (source) cell and covers the rectangle the
pointer was dragged over. Two paths exist:

- Single column: the value above the source and the source value form a
  sample. If they make a numeric progression with a nonzero step and the
  source is a number, every target row continues the progression. Otherwise
  the source value is copied verbatim.
- Several columns: the source column counts up by one per row from a numeric
  source (no pattern detection), every other column repeats the source row's
  value in that column. Writing the anchor cell's own value into every other
  column would also be a reading of the multi-column rule; this module keeps
  each column's own anchor-row value so a dragged row is copied intact.

Example:
    >>> engine = FillEngine(resolver)
    >>> drag = SelectionRange(start_row=2, end_row=4, start_col="age", end_col="age")
    >>> new_grid = engine.fill(grid, drag)
"""

import logging
from typing import Any

from gridkit.shared.consts import NOT_FOUND
from gridkit.shared.utils import clone_grid, is_number

from .columns import ColumnIndexResolver
from .patterns import extrapolate, find_difference
from .ranges import iter_cells, normalize
from .schemas import Grid, NormalizedRange, SelectionRange

logger = logging.getLogger(__name__)


class FillEngine:
    """Applies drag-fill selections to grids.

    Attributes:
        resolver: Resolver for the active column schema.
    """

    def __init__(self, resolver: ColumnIndexResolver) -> None:
        self.resolver = resolver

    def fill(self, grid: Grid, drag: SelectionRange) -> Grid:
        """Fill the rectangle of ``drag`` from its start (anchor) cell.

        Args:
            grid: The grid to read from. It is not modified.
            drag: The committed drag selection. ``start_row``/``start_col``
                is the source cell.

        Returns:
            A new grid with the fill applied. Target rows outside the grid
            are skipped; an anchor outside the grid or schema fills nothing.
        """
        new_grid = clone_grid(grid)

        source_row, source_col = drag.start_row, drag.start_col
        if not 0 <= source_row < len(new_grid):
            logger.debug(f"Fill source row {source_row} outside the grid")
            return new_grid
        if self.resolver.resolve(source_col) == NOT_FOUND:
            logger.debug(f"Fill source column not found: {source_col}")
            return new_grid

        bounds = normalize(drag, self.resolver)
        if not bounds.is_valid:
            logger.debug(f"Fill over unresolvable selection ignored: {drag}")
            return new_grid

        if drag.start_col == drag.end_col:
            self.__fill_column(new_grid, bounds, source_row, source_col)
        else:
            self.__fill_block(new_grid, bounds, source_row, source_col)

        return new_grid

    def sample(self, grid: Grid, row: int, column_id: str) -> list[Any]:
        """Pattern sample for a source cell: the value above it (when the row
        above has the column) followed by the source value."""
        values = [grid[row].get(column_id)]
        if row > 0 and column_id in grid[row - 1]:
            values.insert(0, grid[row - 1][column_id])
        return values

    def __fill_column(
        self,
        grid: Grid,
        bounds: NormalizedRange,
        source_row: int,
        source_col: str,
    ) -> None:
        source_value = grid[source_row].get(source_col)

        difference = find_difference(self.sample(grid, source_row, source_col))
        extend = bool(difference) and is_number(source_value)
        if extend:
            logger.debug(f"Extending {source_col} with step {difference}")

        for row in range(bounds.min_row, bounds.max_row + 1):
            if row == source_row or not 0 <= row < len(grid):
                continue

            value = source_value
            if extend:
                value = extrapolate(source_value, difference, source_row, row)
            grid[row][source_col] = value

    def __fill_block(
        self,
        grid: Grid,
        bounds: NormalizedRange,
        source_row: int,
        source_col: str,
    ) -> None:
        source = grid[source_row]
        source_value = source.get(source_col)

        for row, column_id in iter_cells(bounds, self.resolver):
            if not 0 <= row < len(grid):
                continue
            if row == source_row and column_id == source_col:
                continue

            if column_id == source_col:
                value = source_value
                if is_number(source_value):
                    value = extrapolate(source_value, 1, source_row, row)
            else:
                value = source.get(column_id)
            grid[row][column_id] = value
