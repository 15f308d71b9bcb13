"""
Vertex table for maze graphs.

This module maps opaque vertex payloads (room identifiers, room objects)
to the dense integer indices used by the adjacency stores.
"""

import logging
from typing import Any, Iterator, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10


class VertexTable:
    """
    Bidirectional mapping between vertex payloads and dense indices.

    Payloads are compared by value (``==``), so two equal payloads always
    resolve to the same index. Indices are contiguous in ``0..count``;
    removing a vertex shifts every later vertex down by one.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize an empty table.

        Args:
            capacity: Initial number of slots, doubled whenever the table fills up
        """
        if not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

        self._slots: List[Any] = [None] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[:self._count])

    def __contains__(self, payload: Any) -> bool:
        return self.index_of(payload) is not None

    def add(self, payload: Any) -> int:
        """
        Append a payload in the next free slot.

        Args:
            payload: Vertex payload

        Returns:
            Index assigned to the payload
        """
        if self._count == len(self._slots):
            self._expand_capacity()

        index = self._count
        self._slots[index] = payload
        self._count += 1
        return index

    def index_of(self, payload: Any) -> Optional[int]:
        """
        Resolve a payload to its index by equality scan.

        Returns:
            Index of the first equal payload, or None if absent
        """
        for index in range(self._count):
            if self._slots[index] == payload:
                return index
        return None

    def get(self, index: int) -> Optional[Any]:
        """Get the payload stored at an index, or None for an invalid index."""
        if self.is_valid(index):
            return self._slots[index]
        return None

    def is_valid(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < self._count

    def remove_by_index(self, index: int) -> Optional[Any]:
        """
        Remove the payload at an index and shift later slots down by one.

        The caller must reindex its adjacency store afterwards.

        Returns:
            The removed payload, or None if the index is invalid
        """
        if not self.is_valid(index):
            return None

        payload = self._slots[index]
        self._slots[index:self._count - 1] = self._slots[index + 1:self._count]
        self._count -= 1
        self._slots[self._count] = None
        return payload

    def to_list(self) -> List[Any]:
        return self._slots[:self._count]

    def _expand_capacity(self):
        new_capacity = len(self._slots) * 2
        self._slots.extend([None] * (new_capacity - len(self._slots)))
        logger.debug(f"Expanded vertex table capacity to {new_capacity}")
