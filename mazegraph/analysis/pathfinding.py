"""
Shortest path queries for maze graphs.

This module provides unweighted (fewest corridors) and weighted (lowest
traversal cost) single-source shortest path algorithms.
"""

import logging
import math
from collections import deque
from typing import List, Optional, Tuple

import numpy as np

from ..core.graph import MazeGraph

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms for maze graphs.

    This class provides methods for:
    - Fewest-hops paths using BFS with predecessor tracking
    - Lowest-weight paths and path weights using Dijkstra's algorithm

    Missing vertices and unreachable targets are answered with an empty
    path or an infinite weight, never with an exception.
    """

    def __init__(self, graph: MazeGraph):
        """
        Initialize the path finder.

        Args:
            graph: MazeGraph instance to search
        """
        self.graph = graph

    def shortest_path_unweighted(self, start_id: Optional[int], target_id: Optional[int]) -> List[int]:
        """
        Find the path with the fewest edges between two vertices.

        Args:
            start_id: Start vertex index
            target_id: Target vertex index

        Returns:
            Vertex indices from start to target, empty if no path exists
        """
        if not (self.graph.index_is_valid(start_id) and self.graph.index_is_valid(target_id)):
            return []

        if start_id == target_id:
            return [start_id]

        store = self.graph.store
        predecessor = np.full(self.graph.get_vertex_count(), -1, dtype=int)
        visited = np.zeros(self.graph.get_vertex_count(), dtype=bool)

        queue = deque([start_id])
        visited[start_id] = True
        found = False

        while queue and not found:
            current_id = queue.popleft()
            for neighbor_id in store.neighbors(current_id):
                if visited[neighbor_id]:
                    continue
                visited[neighbor_id] = True
                predecessor[neighbor_id] = current_id
                if neighbor_id == target_id:
                    found = True
                    break
                queue.append(neighbor_id)

        if not found:
            logger.debug(f"No unweighted path from {start_id} to {target_id}")
            return []

        return self._reconstruct_path(predecessor, start_id, target_id)

    def dijkstra(self, start_id: int, target_id: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
        """
        Array-based Dijkstra from a start vertex.

        Each round finalizes the unvisited vertex with the lowest tentative
        weight, ties going to the lowest index, then relaxes its edges.
        The search stops as soon as ``target_id`` is finalized.

        Args:
            start_id: Start vertex index (must be valid)
            target_id: Optional vertex index at which to stop early

        Returns:
            Tuple of (path_weight, predecessor) arrays indexed by vertex
        """
        vertex_count = self.graph.get_vertex_count()
        store = self.graph.store

        path_weight = np.full(vertex_count, np.inf)
        predecessor = np.full(vertex_count, -1, dtype=int)
        visited = np.zeros(vertex_count, dtype=bool)
        path_weight[start_id] = 0.0

        for _ in range(vertex_count):
            tentative = np.where(visited, np.inf, path_weight)
            # argmin returns the first minimum, which gives the ascending-index tie-break
            current_id = int(np.argmin(tentative))
            if math.isinf(tentative[current_id]):
                break

            visited[current_id] = True
            if current_id == target_id:
                logger.debug(f"Dijkstra finalized target {target_id} early")
                break

            for neighbor_id, weight in store.weighted_neighbors(current_id):
                if visited[neighbor_id]:
                    continue
                candidate = path_weight[current_id] + weight
                if candidate < path_weight[neighbor_id]:
                    path_weight[neighbor_id] = candidate
                    predecessor[neighbor_id] = current_id

        return path_weight, predecessor

    def shortest_path_weighted(self, start_id: Optional[int], target_id: Optional[int]) -> List[int]:
        """
        Find the lowest-weight path between two vertices.

        Args:
            start_id: Start vertex index
            target_id: Target vertex index

        Returns:
            Vertex indices from start to target, empty if no path exists
        """
        if not (self.graph.index_is_valid(start_id) and self.graph.index_is_valid(target_id)):
            return []

        if start_id == target_id:
            return [start_id]

        path_weight, predecessor = self.dijkstra(start_id, target_id)
        if math.isinf(path_weight[target_id]):
            logger.debug(f"No weighted path from {start_id} to {target_id}")
            return []

        return self._reconstruct_path(predecessor, start_id, target_id)

    def path_weight(self, start_id: Optional[int], target_id: Optional[int]) -> float:
        """
        Total weight of the lowest-weight path between two vertices.

        Returns:
            Path weight, 0.0 for start == target, ``math.inf`` if unreachable
            or either vertex is missing
        """
        if not (self.graph.index_is_valid(start_id) and self.graph.index_is_valid(target_id)):
            return math.inf

        if start_id == target_id:
            return 0.0

        path_weight, _ = self.dijkstra(start_id, target_id)
        return float(path_weight[target_id])

    def hop_count(self, start_id: Optional[int], target_id: Optional[int]) -> float:
        """Number of edges on the fewest-hops path, ``math.inf`` if unreachable."""
        path = self.shortest_path_unweighted(start_id, target_id)
        if not path:
            return math.inf
        return float(len(path) - 1)

    def _reconstruct_path(self, predecessor: np.ndarray, start_id: int, target_id: int) -> List[int]:
        path = []
        current_id = target_id
        while current_id != -1:
            path.append(int(current_id))
            if current_id == start_id:
                break
            current_id = predecessor[current_id]
        path.reverse()
        return path
