"""
Main facade class for maze graphs.

This module provides the pymazegraph class, the payload-level API that
collaborators (map loaders, turn managers, bots) use. It delegates index
bookkeeping to MazeGraph and queries to the analysis modules.
"""

import logging
import math
from typing import Any, Callable, List, Optional, Union

from .adjacency import AdjacencyStrategy, DEFAULT_WEIGHT
from .graph import MazeGraph
from .vertex_table import DEFAULT_CAPACITY
from ..analysis.pathfinding import PathFinder
from ..analysis.traversal import GraphTraverser

logger = logging.getLogger(__name__)


class pymazegraph:
    """
    Main facade class for maze graphs.

    Vertices are rooms identified by any payload with value equality, edges
    are undirected corridors and edge weights are traversal costs.
    Mutating calls change the graph in place; queries return fresh lists
    that stay valid after later mutations.
    """

    def __init__(self,
                 strategy: Union[AdjacencyStrategy, str] = AdjacencyStrategy.LIST,
                 capacity: int = DEFAULT_CAPACITY,
                 weighted: bool = True):
        """
        Initialize an empty maze graph.

        Args:
            strategy: Adjacency representation, AdjacencyStrategy or "matrix" / "list"
            capacity: Initial vertex capacity, doubled whenever it fills up
            weighted: False for presence-only corridors (every edge costs DEFAULT_WEIGHT)
        """
        # Initialize core graph
        self._graph = MazeGraph(strategy, capacity, weighted)

        # Initialize analysis components
        self._traverser = GraphTraverser(self._graph)
        self._pathfinder = PathFinder(self._graph)

    @property
    def strategy(self) -> AdjacencyStrategy:
        return self._graph.strategy

    @property
    def weighted(self) -> bool:
        return self._graph.weighted

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def add_vertex(self, vertex: Any) -> int:
        """Add a room; re-adding an equal payload returns the existing index."""
        return self._graph.add_vertex(vertex)

    def remove_vertex(self, vertex: Any) -> bool:
        """
        Remove a room and every corridor touching it.

        Returns:
            True if the room existed
        """
        vertex_id = self._graph.get_vertex_id(vertex)
        if vertex_id is None:
            logger.warning(f"Cannot remove vertex {vertex!r}: not in graph")
            return False

        self._graph.remove_vertex_by_id(vertex_id)
        return True

    def add_edge(self, vertex1: Any, vertex2: Any, weight: float = DEFAULT_WEIGHT) -> bool:
        """
        Add or update the corridor between two rooms.

        Args:
            vertex1: First room
            vertex2: Second room
            weight: Traversal cost, ignored on unweighted graphs

        Returns:
            True if both rooms exist and the corridor was recorded

        Raises:
            ValueError: If the weight is negative, NaN or infinite
        """
        index1 = self._graph.get_vertex_id(vertex1)
        index2 = self._graph.get_vertex_id(vertex2)

        if index1 is None or index2 is None:
            logger.warning(f"Cannot add edge {vertex1!r} <-> {vertex2!r}: vertex not in graph")
            return False

        added = self._graph.connect(index1, index2, weight)
        logger.debug(f"Added edge {vertex1!r} <-> {vertex2!r} (weight {self._graph.edge_weight(index1, index2)})")
        return added

    def remove_edge(self, vertex1: Any, vertex2: Any) -> bool:
        """
        Remove the corridor between two rooms.

        Returns:
            True if a corridor existed
        """
        index1 = self._graph.get_vertex_id(vertex1)
        index2 = self._graph.get_vertex_id(vertex2)

        if index1 is None or index2 is None:
            logger.warning(f"Cannot remove edge {vertex1!r} <-> {vertex2!r}: vertex not in graph")
            return False

        return self._graph.disconnect(index1, index2)

    def has_edge(self, vertex1: Any, vertex2: Any) -> bool:
        return self.edge_weight(vertex1, vertex2) < math.inf

    def edge_weight(self, vertex1: Any, vertex2: Any) -> float:
        """Weight of the corridor between two rooms, ``math.inf`` if there is none."""
        index1 = self._graph.get_vertex_id(vertex1)
        index2 = self._graph.get_vertex_id(vertex2)
        if index1 is None or index2 is None:
            return math.inf
        return self._graph.edge_weight(index1, index2)

    def neighbors(self, vertex: Any) -> List[Any]:
        """
        Get the rooms directly reachable from a room.

        Args:
            vertex: Room to inspect

        Returns:
            Neighboring rooms in adjacency order, empty for an unknown room
        """
        vertex_id = self._graph.get_vertex_id(vertex)
        if vertex_id is None:
            return []
        return self._payloads(self._graph.neighbors(vertex_id))

    def size(self) -> int:
        """Get the number of rooms."""
        return self._graph.get_vertex_count()

    def is_empty(self) -> bool:
        return self.size() == 0

    def get_edge_count(self) -> int:
        return self._graph.get_edge_count()

    def get_vertices(self) -> List[Any]:
        """Get all rooms in index order."""
        return self._graph.get_vertices()

    def get_vertex_by_id(self, vertex_id: int) -> Optional[Any]:
        """Get a room by its internal index."""
        return self._graph.get_vertex_by_id(vertex_id)

    def get_vertex_id(self, vertex: Any) -> Optional[int]:
        """Get the internal index of a room."""
        return self._graph.get_vertex_id(vertex)

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def iterator_bfs(self, vertex: Any = None) -> List[Any]:
        """
        Rooms reachable from a room in breadth-first order.

        Without an argument the walk starts at the first room added.
        """
        start_id = 0 if vertex is None else self._graph.get_vertex_id(vertex)
        return self._payloads(self._traverser.bfs(start_id))

    def iterator_dfs(self, vertex: Any = None) -> List[Any]:
        """
        Rooms reachable from a room in depth-first order.

        Without an argument the walk starts at the first room added.
        """
        start_id = 0 if vertex is None else self._graph.get_vertex_id(vertex)
        return self._payloads(self._traverser.dfs(start_id))

    def is_connected(self) -> bool:
        """True if every room is reachable from every other; False for an empty maze."""
        return self._traverser.is_connected()

    def find_vertex(self, predicate: Callable[[Any], bool]) -> Optional[Any]:
        """
        Find the first room matching a predicate.

        Rooms are scanned in breadth-first order from the first room, then
        any rooms unreachable from it in index order.

        Args:
            predicate: Callable returning True for the wanted room

        Returns:
            The matching room, or None
        """
        reachable = self._traverser.bfs(0)
        seen = set(reachable)
        order = reachable + [i for i in range(self.size()) if i not in seen]

        for vertex_id in order:
            vertex = self._graph.get_vertex_by_id(vertex_id)
            if predicate(vertex):
                return vertex
        return None

    # ========================================================================
    # PATH FINDING
    # ========================================================================

    def shortest_path(self, vertex1: Any, vertex2: Any) -> List[Any]:
        """
        Cheapest route between two rooms.

        Weighted graphs use Dijkstra, unweighted graphs the fewest-hops BFS
        path. ``shortest_path(a, a)`` is ``[a]``.

        Returns:
            Rooms from vertex1 to vertex2, empty if either is unknown or
            no route exists
        """
        start_id = self._graph.get_vertex_id(vertex1)
        target_id = self._graph.get_vertex_id(vertex2)

        if self.weighted:
            path = self._pathfinder.shortest_path_weighted(start_id, target_id)
        else:
            path = self._pathfinder.shortest_path_unweighted(start_id, target_id)
        return self._payloads(path)

    def shortest_path_hops(self, vertex1: Any, vertex2: Any) -> List[Any]:
        """Route with the fewest corridors between two rooms, ignoring weights."""
        start_id = self._graph.get_vertex_id(vertex1)
        target_id = self._graph.get_vertex_id(vertex2)
        return self._payloads(self._pathfinder.shortest_path_unweighted(start_id, target_id))

    def path_weight(self, vertex1: Any, vertex2: Any) -> float:
        """
        Total cost of the cheapest route between two rooms.

        Returns:
            0.0 for the same room, ``math.inf`` if either room is unknown or
            no route exists
        """
        start_id = self._graph.get_vertex_id(vertex1)
        target_id = self._graph.get_vertex_id(vertex2)
        return self._pathfinder.path_weight(start_id, target_id)

    # ========================================================================
    # PYTHON PROTOCOLS
    # ========================================================================

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, vertex: Any) -> bool:
        return self._graph.get_vertex_id(vertex) is not None

    def __str__(self) -> str:
        lines = []
        store = self._graph.store
        for vertex_id, vertex in enumerate(self._graph.get_vertices()):
            records = [(self._graph.get_vertex_by_id(j), w) for j, w in store.weighted_neighbors(vertex_id)]
            lines.append(f"{vertex} -> {records}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (f"pymazegraph(strategy={self.strategy.value!r}, vertices={self.size()}, "
                f"edges={self.get_edge_count()}, weighted={self.weighted})")

    # ========================================================================
    # PRIVATE METHODS
    # ========================================================================

    def _payloads(self, vertex_ids: List[int]) -> List[Any]:
        return [self._graph.get_vertex_by_id(vertex_id) for vertex_id in vertex_ids]
