"""
Linear undo/redo history of region list snapshots.

Snapshots are immutable tuples, so the log stores them directly. The cursor
points at the snapshot that matches the visible state. Cursor -1 stands for
the state before the first recorded edit, which is always the empty list.

Classes:
    HistoryLog: Snapshot stack with a cursor and truncate-on-push semantics
"""

from typing import List, Optional
import logging

from SB_Libs.RegionEditLib.region_models import RegionList

logger = logging.getLogger(__name__)

EMPTY_SNAPSHOT: RegionList = ()


class HistoryLog:
    """
    Snapshot stack for undo/redo.

    Example:
        >>> log = HistoryLog()
        >>> log.push((region_a,))
        >>> log.push((region_a, region_b))
        >>> log.undo()
        (region_a,)
        >>> log.redo()
        (region_a, region_b)
    """

    def __init__(self, max_entries: Optional[int] = None):
        """
        Initialize an empty log.

        Args:
            max_entries: Oldest snapshots are dropped beyond this many
                         entries (None = unlimited)
        """
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")

        self._entries: List[RegionList] = []
        self._cursor = -1
        self._floor = -1
        self._max_entries = max_entries

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def entries(self) -> List[RegionList]:
        return list(self._entries)

    @property
    def current(self) -> RegionList:
        """Snapshot at the cursor (empty before the first edit)."""
        if self._cursor < 0:
            return EMPTY_SNAPSHOT
        return self._entries[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > self._floor

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, snapshot: RegionList) -> None:
        """
        Record a snapshot after the cursor, discarding any redo entries.

        Args:
            snapshot: Region list to record
        """
        del self._entries[self._cursor + 1:]
        self._entries.append(tuple(snapshot))

        if self._max_entries is not None and len(self._entries) > self._max_entries:
            overflow = len(self._entries) - self._max_entries
            del self._entries[:overflow]
            # The empty pre-edit state is no longer reachable
            self._floor = 0

        self._cursor = len(self._entries) - 1
        logger.debug("History push: cursor=%d, entries=%d", self._cursor, len(self._entries))

    def undo(self) -> Optional[RegionList]:
        """
        Step back one snapshot.

        Returns:
            The snapshot now at the cursor, or None at the start of history
        """
        if not self.can_undo:
            return None

        self._cursor -= 1
        logger.debug("History undo: cursor=%d", self._cursor)
        return self.current

    def redo(self) -> Optional[RegionList]:
        """
        Step forward one snapshot.

        Returns:
            The snapshot now at the cursor, or None at the end of history
        """
        if not self.can_redo:
            return None

        self._cursor += 1
        logger.debug("History redo: cursor=%d", self._cursor)
        return self.current

    def reset(self) -> None:
        self._entries.clear()
        self._cursor = -1
        self._floor = -1
