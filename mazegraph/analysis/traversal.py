"""
Breadth-first and depth-first traversal of maze graphs.

This module provides reachability walks over a MazeGraph and the
connectivity check built on them.
"""

import logging
from collections import deque
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from ..core.graph import MazeGraph

logger = logging.getLogger(__name__)


class VisitState(Enum):
    """Traversal state of a vertex. VISITED is terminal."""
    UNVISITED = 0
    FRONTIER = 1
    VISITED = 2


class GraphTraverser:
    """
    Traversal algorithms for maze graphs.

    This class provides methods for:
    - Breadth-first traversal (non-decreasing distance from the start)
    - Depth-first traversal with an explicit stack
    - Connectivity check from vertex 0

    Ties are broken by the adjacency order of the underlying store, so the
    dense matrix visits in ascending index order and the sparse list in edge
    insertion order.
    """

    def __init__(self, graph: MazeGraph):
        """
        Initialize the traverser.

        Args:
            graph: MazeGraph instance to walk
        """
        self.graph = graph

    def bfs(self, start_id: Optional[int]) -> List[int]:
        """
        Breadth-first traversal from a start vertex.

        Args:
            start_id: Index of the start vertex

        Returns:
            Vertex indices in visit order, empty if the start is invalid
        """
        if not self.graph.index_is_valid(start_id):
            return []

        store = self.graph.store
        state = [VisitState.UNVISITED] * self.graph.get_vertex_count()
        order = []

        queue = deque([start_id])
        state[start_id] = VisitState.FRONTIER

        while queue:
            current_id = queue.popleft()
            state[current_id] = VisitState.VISITED
            order.append(current_id)

            for neighbor_id in store.neighbors(current_id):
                if state[neighbor_id] is VisitState.UNVISITED:
                    state[neighbor_id] = VisitState.FRONTIER
                    queue.append(neighbor_id)

        logger.debug(f"BFS from {start_id} visited {len(order)} vertices")
        return order

    def dfs(self, start_id: Optional[int]) -> List[int]:
        """
        Depth-first (pre-order) traversal from a start vertex.

        A vertex is recorded when it is pushed; the top of the stack is
        popped only once it has no unvisited neighbor left.

        Args:
            start_id: Index of the start vertex

        Returns:
            Vertex indices in visit order, empty if the start is invalid
        """
        if not self.graph.index_is_valid(start_id):
            return []

        store = self.graph.store
        state = [VisitState.UNVISITED] * self.graph.get_vertex_count()
        order = [start_id]
        state[start_id] = VisitState.VISITED

        # Each frame keeps its own neighbor iterator so a vertex's
        # adjacency is scanned once across all of its resumptions
        stack: List[Tuple[int, Iterator[int]]] = [(start_id, store.neighbors(start_id))]

        while stack:
            _, pending = stack[-1]
            for neighbor_id in pending:
                if state[neighbor_id] is VisitState.UNVISITED:
                    state[neighbor_id] = VisitState.VISITED
                    order.append(neighbor_id)
                    stack.append((neighbor_id, store.neighbors(neighbor_id)))
                    break
            else:
                stack.pop()

        logger.debug(f"DFS from {start_id} visited {len(order)} vertices")
        return order

    def is_connected(self) -> bool:
        """
        Check whether every vertex is reachable from vertex 0.

        An empty graph is not connected.
        """
        vertex_count = self.graph.get_vertex_count()
        if vertex_count == 0:
            return False
        return len(self.bfs(0)) == vertex_count

