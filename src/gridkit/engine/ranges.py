"""Selection range algebra.

Pure functions over SelectionRange rectangles: normalization into ordered
row/column-ordinal bounds, cell containment, and row-major cell iteration.

Functions:
    normalize: Order the corners of a selection.
    contains: Test whether a cell lies inside a selection.
    iter_cells: Iterate the (row, column id) pairs of a normalized range.

Example:
    >>> resolver = ColumnIndexResolver(ColumnSchema.from_ids("id", "name", "age"))
    >>> selection = SelectionRange(start_row=4, end_row=1, start_col="age", end_col="name")
    >>> normalize(selection, resolver)
    NormalizedRange(min_row=1, max_row=4, min_col=1, max_col=2)
    >>> contains(selection, 2, "name", resolver)
    True
"""

from typing import Iterator

from gridkit.shared.consts import NOT_FOUND

from .columns import ColumnIndexResolver
from .schemas import NormalizedRange, SelectionRange


def normalize(
    selection: SelectionRange, resolver: ColumnIndexResolver
) -> NormalizedRange:
    """Rewrite a selection so that min <= max on both axes.

    Args:
        selection: The selection, corners in any order.
        resolver: Resolver for the active column schema.

    Returns:
        The normalized rectangle. If either corner column does not resolve,
        both column bounds are ``NOT_FOUND`` and ``is_valid`` is False.
    """
    start_col = resolver.resolve(selection.start_col)
    end_col = resolver.resolve(selection.end_col)

    if NOT_FOUND in (start_col, end_col):
        min_col = max_col = NOT_FOUND
    else:
        min_col, max_col = min(start_col, end_col), max(start_col, end_col)

    return NormalizedRange(
        min_row=min(selection.start_row, selection.end_row),
        max_row=max(selection.start_row, selection.end_row),
        min_col=min_col,
        max_col=max_col,
    )


def contains(
    selection: SelectionRange,
    row: int,
    column_id: str,
    resolver: ColumnIndexResolver,
) -> bool:
    """Whether the cell (row, column_id) is inside the selection.

    An unresolvable column id, probed or at a corner, is never contained.
    """
    col = resolver.resolve(column_id)
    if col == NOT_FOUND:
        return False

    bounds = normalize(selection, resolver)
    if not bounds.is_valid:
        return False

    return (
        bounds.min_row <= row <= bounds.max_row
        and bounds.min_col <= col <= bounds.max_col
    )


def iter_cells(
    bounds: NormalizedRange, resolver: ColumnIndexResolver
) -> Iterator[tuple[int, str]]:
    """Yield (row, column id) for every cell of ``bounds`` in row-major order.

    Grid bounds are not checked here; callers skip rows outside their grid.
    """
    if not bounds.is_valid:
        return

    for row in range(bounds.min_row, bounds.max_row + 1):
        for col in range(bounds.min_col, bounds.max_col + 1):
            column_id = resolver.column_id_at(col)
            if column_id is not None:
                yield row, column_id
