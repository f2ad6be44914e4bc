"""Bounded linear undo/redo history of grid snapshots.

Example:
    >>> history = HistoryManager([{"id": 1, "age": 24}], max_states=50)
    >>> history.record([{"id": 1, "age": 25}])
    >>> history.undo()
    [{'id': 1, 'age': 24}]
    >>> history.undo() is None  # already at the oldest snapshot
    True
"""

import logging

from gridkit.shared.consts import DEFAULT_MAX_HISTORY_STATES
from gridkit.shared.utils import clone_grid

from .schemas import Grid

logger = logging.getLogger(__name__)


class HistoryManager:
    """A capped sequence of full grid snapshots plus a cursor.

    The cursor always indexes a stored snapshot. Recording after an undo
    discards every snapshot past the cursor. When the sequence grows past
    ``max_states`` the oldest snapshot is evicted.

    Every snapshot going in or coming out is cloned, so later edits of the
    live grid never reach stored history.

    Attributes:
        max_states: Maximum number of snapshots kept.
        enabled: When False, record/undo/redo are no-ops.
    """

    def __init__(
        self,
        initial: Grid,
        max_states: int = DEFAULT_MAX_HISTORY_STATES,
        enabled: bool = True,
    ) -> None:
        if max_states < 1:
            raise ValueError(f"max_states must be at least 1, got {max_states}")

        self.max_states = max_states
        self.enabled = enabled
        self._snapshots: list[Grid] = [clone_grid(initial)]
        self._cursor: int = 0

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def position(self) -> int:
        """1-based cursor position, for status display."""
        return self._cursor + 1

    @property
    def can_undo(self) -> bool:
        return self.enabled and self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self.enabled and self._cursor < len(self._snapshots) - 1

    def record(self, grid: Grid) -> None:
        """Append a snapshot of ``grid`` after the cursor.

        Any redo snapshots are discarded. No-op when history is disabled.
        """
        if not self.enabled:
            return

        snapshots = self._snapshots[: self._cursor + 1]
        snapshots.append(clone_grid(grid))

        if len(snapshots) > self.max_states:
            snapshots.pop(0)
            logger.debug(f"History full ({self.max_states}), evicted oldest snapshot")

        self._snapshots = snapshots
        self._cursor = len(snapshots) - 1

    def undo(self) -> Grid | None:
        """Step back one snapshot.

        Returns:
            A copy of the previous snapshot, or None at the oldest snapshot
            or when history is disabled.
        """
        if not self.can_undo:
            return None

        self._cursor -= 1
        return clone_grid(self._snapshots[self._cursor])

    def redo(self) -> Grid | None:
        """Step forward one snapshot.

        Returns:
            A copy of the next snapshot, or None at the newest snapshot or
            when history is disabled.
        """
        if not self.can_redo:
            return None

        self._cursor += 1
        return clone_grid(self._snapshots[self._cursor])

    def snapshot(self, index: int | None = None) -> Grid:
        """Copy of the snapshot at ``index`` (defaults to the cursor)."""
        if index is None:
            index = self._cursor
        return clone_grid(self._snapshots[index])
