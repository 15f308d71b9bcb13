"""
Core graph data structure for maze representation.

This module provides the index-level graph without traversal or path queries.
"""

import logging
from typing import Any, List, Optional, Union

from .adjacency import (
    AdjacencyStore,
    AdjacencyStrategy,
    DEFAULT_WEIGHT,
    create_adjacency_store,
)
from .vertex_table import DEFAULT_CAPACITY, VertexTable

logger = logging.getLogger(__name__)


class MazeGraph:
    """
    Core graph data structure for mazes.

    This class keeps a VertexTable and an AdjacencyStore in lock-step. It provides:
    - Vertex registration and removal with index renumbering
    - Undirected edge creation and removal by index
    - Basic graph queries (vertex lookup, neighbor indices, edge weights)
    """

    def __init__(self,
                 strategy: Union[AdjacencyStrategy, str] = AdjacencyStrategy.LIST,
                 capacity: int = DEFAULT_CAPACITY,
                 weighted: bool = True):
        """
        Initialize an empty maze graph.

        Args:
            strategy: Adjacency representation to use
            capacity: Initial vertex capacity, doubled on demand
            weighted: False to store presence-only edges
        """
        self.vertices = VertexTable(capacity)
        self.store: AdjacencyStore = create_adjacency_store(strategy, capacity, weighted)
        self.strategy = self.store.strategy

        logger.debug(f"Initializing MazeGraph with {self.strategy.value} adjacency, "
                     f"capacity {capacity}, weighted={weighted}")

    @property
    def weighted(self) -> bool:
        return self.store.weighted

    def get_vertex_count(self) -> int:
        """Get the number of live vertices."""
        return len(self.vertices)

    def get_vertex_by_id(self, vertex_id: int) -> Optional[Any]:
        """
        Get a vertex payload by its index.

        Args:
            vertex_id: Vertex index (0-based)

        Returns:
            The payload, or None if the index is invalid
        """
        return self.vertices.get(vertex_id)

    def get_vertex_id(self, vertex: Any) -> Optional[int]:
        """
        Get the index of a vertex payload.

        Args:
            vertex: Payload to look up

        Returns:
            Vertex index (0-based), or None if not found
        """
        return self.vertices.index_of(vertex)

    def get_vertices(self) -> List[Any]:
        return self.vertices.to_list()

    def index_is_valid(self, index: Optional[int]) -> bool:
        return self.vertices.is_valid(index)

    def add_vertex(self, vertex: Any) -> int:
        """
        Register a vertex payload.

        Equal payloads denote the same vertex, so re-adding returns the
        existing index without creating a new slot.

        Returns:
            Index of the vertex
        """
        existing = self.vertices.index_of(vertex)
        if existing is not None:
            logger.debug(f"Vertex {vertex!r} already present at index {existing}")
            return existing

        index = self.vertices.add(vertex)
        store_index = self.store.add_vertex()
        assert index == store_index, "vertex table and adjacency store out of sync"

        logger.debug(f"Added vertex {vertex!r} at index {index}")
        return index

    def remove_vertex_by_id(self, index: int) -> Optional[Any]:
        """
        Remove the vertex at an index along with its incident edges.

        Every vertex above the removed index moves down by one.

        Returns:
            The removed payload, or None if the index is invalid
        """
        if not self.vertices.is_valid(index):
            return None

        payload = self.vertices.remove_by_index(index)

        self.store.remove_vertex(index)
        logger.debug(f"Removed vertex {payload!r} from index {index}, {len(self.vertices)} vertices left")
        return payload

    def connect(self, i: int, j: int, weight: float = DEFAULT_WEIGHT) -> bool:
        """Create or update the undirected edge i <-> j."""
        return self.store.connect(i, j, weight)

    def disconnect(self, i: int, j: int) -> bool:
        """Remove the undirected edge i <-> j."""
        return self.store.disconnect(i, j)

    def neighbors(self, index: int) -> List[int]:
        """Snapshot of neighbor indices in adjacency order."""
        return list(self.store.neighbors(index))

    def edge_weight(self, i: int, j: int) -> float:
        return self.store.weight(i, j)

    def get_edge_count(self) -> int:
        return sum(1 for _ in self.store.edges())
