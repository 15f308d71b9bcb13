"""
Adjacency stores for maze graphs.

This module provides the connectivity storage behind a maze graph. Two
interchangeable strategies share one contract:

- AdjacencyMatrix: dense ``capacity x capacity`` numpy grid, neighbors in
  ascending index order
- AdjacencyList: sparse per-vertex lists of (neighbor, weight) records,
  neighbors in insertion order

Edges are undirected; both stores record every edge on both endpoints.
"""

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

from .vertex_table import DEFAULT_CAPACITY

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1.0


class AdjacencyStrategy(Enum):
    """Available adjacency representations."""
    MATRIX = "matrix"
    LIST = "list"


def check_weight(weight) -> float:
    """
    Validate an edge weight.

    Args:
        weight: Candidate weight

    Returns:
        The weight as a float

    Raises:
        ValueError: If the weight is negative, NaN or infinite
    """
    value = float(weight)
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise ValueError(f"Edge weight must be a finite non-negative number, got {weight!r}")
    return value


class AdjacencyStore(ABC):
    """
    Common contract for adjacency representations.

    Indices are managed by the owning graph: ``add_vertex`` opens the next
    index, ``remove_vertex`` drops an index and renumbers everything above it.
    Invalid indices never raise; queries answer as if the vertex had no edges.
    """

    strategy: AdjacencyStrategy

    def __init__(self, capacity: int = DEFAULT_CAPACITY, weighted: bool = True):
        if not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

        self.weighted = weighted
        self._count = 0

    def __len__(self) -> int:
        return self._count

    @property
    def count(self) -> int:
        return self._count

    @property
    @abstractmethod
    def capacity(self) -> int:
        """Number of vertex slots currently allocated."""

    def is_valid(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < self._count

    def add_vertex(self) -> int:
        """
        Open a slot for a new isolated vertex.

        Returns:
            Index of the new vertex
        """
        if self._count == self.capacity:
            self._expand_capacity()
            logger.debug(f"Expanded {type(self).__name__} capacity to {self.capacity}")

        index = self._count
        self._reset_slot(index)
        self._count += 1
        return index

    @abstractmethod
    def connect(self, i: int, j: int, weight: float = DEFAULT_WEIGHT) -> bool:
        """
        Record the undirected edge i <-> j, overwriting any existing weight.

        Returns:
            True if the edge was recorded, False for invalid indices
        """

    @abstractmethod
    def disconnect(self, i: int, j: int) -> bool:
        """
        Remove the edge i <-> j.

        Returns:
            True if an edge existed and was removed
        """

    @abstractmethod
    def weighted_neighbors(self, i: int) -> Iterator[Tuple[int, float]]:
        """Lazily yield (neighbor index, weight) pairs of vertex i."""

    @abstractmethod
    def weight(self, i: int, j: int) -> float:
        """Weight of edge i <-> j, or ``math.inf`` if there is none."""

    @abstractmethod
    def remove_vertex(self, index: int) -> bool:
        """
        Drop every edge touching ``index`` and decrement all larger indices.

        Returns:
            True if the index was valid
        """

    def neighbors(self, i: int) -> Iterator[int]:
        """Lazily yield neighbor indices of vertex i."""
        for j, _ in self.weighted_neighbors(i):
            yield j

    def has_edge(self, i: int, j: int) -> bool:
        return self.weight(i, j) < math.inf

    def degree(self, i: int) -> int:
        return sum(1 for _ in self.neighbors(i))

    def edges(self) -> Iterator[Tuple[int, int, float]]:
        """Yield each undirected edge once as ``(i, j, weight)`` with ``i <= j``."""
        for i in range(self._count):
            for j, w in self.weighted_neighbors(i):
                if i <= j:
                    yield i, j, w

    def _edge_value(self, weight: float) -> float:
        if not self.weighted:
            return DEFAULT_WEIGHT
        return check_weight(weight)

    @abstractmethod
    def _expand_capacity(self):
        """Double the number of vertex slots, keeping existing edges."""

    @abstractmethod
    def _reset_slot(self, index: int):
        """Clear any stale connectivity left in a slot before reuse."""


class AdjacencyMatrix(AdjacencyStore):
    """
    Dense adjacency matrix backed by a numpy array.

    Weighted stores keep a float grid with ``inf`` as the absent sentinel;
    unweighted stores keep a boolean grid with ``False`` as the sentinel.
    """

    strategy = AdjacencyStrategy.MATRIX

    def __init__(self, capacity: int = DEFAULT_CAPACITY, weighted: bool = True):
        super().__init__(capacity, weighted)

        if weighted:
            self._absent = np.inf
            self._dtype = float
        else:
            self._absent = False
            self._dtype = bool

        self._matrix = np.full((capacity, capacity), self._absent, dtype=self._dtype)

    @property
    def capacity(self) -> int:
        return self._matrix.shape[0]

    def connect(self, i: int, j: int, weight: float = DEFAULT_WEIGHT) -> bool:
        if not (self.is_valid(i) and self.is_valid(j)):
            return False

        value = self._edge_value(weight) if self.weighted else True
        self._matrix[i, j] = value
        self._matrix[j, i] = value
        return True

    def disconnect(self, i: int, j: int) -> bool:
        if not self.has_edge(i, j):
            return False

        self._matrix[i, j] = self._absent
        self._matrix[j, i] = self._absent
        return True

    def neighbors(self, i: int) -> Iterator[int]:
        if not self.is_valid(i):
            return
        for j in np.flatnonzero(self._present(self._matrix[i, :self._count])):
            yield int(j)

    def weighted_neighbors(self, i: int) -> Iterator[Tuple[int, float]]:
        for j in self.neighbors(i):
            yield j, self._value_to_weight(self._matrix[i, j])

    def weight(self, i: int, j: int) -> float:
        if not (self.is_valid(i) and self.is_valid(j)):
            return math.inf
        return self._value_to_weight(self._matrix[i, j])

    def degree(self, i: int) -> int:
        if not self.is_valid(i):
            return 0
        return int(np.count_nonzero(self._present(self._matrix[i, :self._count])))

    def remove_vertex(self, index: int) -> bool:
        if not self.is_valid(index):
            return False

        n = self._count
        m = self._matrix
        # Shift rows up, then columns left, over the live submatrix
        m[index:n - 1, :n] = m[index + 1:n, :n].copy()
        m[:n - 1, index:n - 1] = m[:n - 1, index + 1:n].copy()
        m[n - 1, :n] = self._absent
        m[:n, n - 1] = self._absent
        self._count -= 1
        return True

    def _present(self, values: np.ndarray) -> np.ndarray:
        if self.weighted:
            return np.isfinite(values)
        return values

    def _value_to_weight(self, value) -> float:
        if self.weighted:
            return float(value)
        return DEFAULT_WEIGHT if value else math.inf

    def _expand_capacity(self):
        n = self._count
        larger = np.full((self.capacity * 2, self.capacity * 2), self._absent, dtype=self._dtype)
        larger[:n, :n] = self._matrix[:n, :n]
        self._matrix = larger

    def _reset_slot(self, index: int):
        self._matrix[index, :] = self._absent
        self._matrix[:, index] = self._absent


class AdjacencyList(AdjacencyStore):
    """
    Sparse adjacency lists, one list of (neighbor, weight) records per vertex.

    Reconnecting an existing pair updates the weight in place, so a pair is
    never stored twice.
    """

    strategy = AdjacencyStrategy.LIST

    def __init__(self, capacity: int = DEFAULT_CAPACITY, weighted: bool = True):
        super().__init__(capacity, weighted)
        self._lists: List[List[Tuple[int, float]]] = [[] for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self._lists)

    def connect(self, i: int, j: int, weight: float = DEFAULT_WEIGHT) -> bool:
        if not (self.is_valid(i) and self.is_valid(j)):
            return False

        value = self._edge_value(weight)
        self._upsert(i, j, value)
        if i != j:
            self._upsert(j, i, value)
        return True

    def disconnect(self, i: int, j: int) -> bool:
        if not (self.is_valid(i) and self.is_valid(j)):
            return False

        removed = self._drop(i, j)
        if i != j:
            self._drop(j, i)
        return removed

    def weighted_neighbors(self, i: int) -> Iterator[Tuple[int, float]]:
        if not self.is_valid(i):
            return
        for j, w in self._lists[i]:
            yield j, w

    def weight(self, i: int, j: int) -> float:
        if not (self.is_valid(i) and self.is_valid(j)):
            return math.inf
        for neighbor, w in self._lists[i]:
            if neighbor == j:
                return w
        return math.inf

    def degree(self, i: int) -> int:
        if not self.is_valid(i):
            return 0
        return len(self._lists[i])

    def remove_vertex(self, index: int) -> bool:
        if not self.is_valid(index):
            return False

        del self._lists[index]
        self._lists.append([])
        self._count -= 1

        for k in range(self._count):
            self._lists[k] = [
                (neighbor - 1 if neighbor > index else neighbor, w)
                for neighbor, w in self._lists[k]
                if neighbor != index
            ]
        return True

    def _upsert(self, i: int, j: int, weight: float):
        records = self._lists[i]
        for k, (neighbor, _) in enumerate(records):
            if neighbor == j:
                records[k] = (j, weight)
                return
        records.append((j, weight))

    def _drop(self, i: int, j: int) -> bool:
        records = self._lists[i]
        kept = [record for record in records if record[0] != j]
        self._lists[i] = kept
        return len(kept) != len(records)

    def _expand_capacity(self):
        self._lists.extend([] for _ in range(self.capacity))

    def _reset_slot(self, index: int):
        self._lists[index] = []


def create_adjacency_store(strategy: Union[AdjacencyStrategy, str] = AdjacencyStrategy.LIST,
                           capacity: int = DEFAULT_CAPACITY,
                           weighted: bool = True) -> AdjacencyStore:
    """
    Build an adjacency store for the requested strategy.

    Args:
        strategy: AdjacencyStrategy member or its name ("matrix" / "list")
        capacity: Initial vertex capacity
        weighted: False for presence-only edges

    Returns:
        A new, empty AdjacencyStore

    Raises:
        ValueError: If the strategy is unknown
    """
    if isinstance(strategy, str):
        try:
            strategy = AdjacencyStrategy(strategy.lower())
        except ValueError:
            raise ValueError(f"Unknown adjacency strategy: {strategy!r}") from None

    if strategy is AdjacencyStrategy.MATRIX:
        return AdjacencyMatrix(capacity, weighted)
    if strategy is AdjacencyStrategy.LIST:
        return AdjacencyList(capacity, weighted)

    raise ValueError(f"Unknown adjacency strategy: {strategy!r}")
