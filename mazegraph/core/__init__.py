"""
Core graph data structures and management.

This module contains the vertex table, the adjacency stores and the
index-level graph, without traversal or path finding.
"""

from .vertex_table import VertexTable, DEFAULT_CAPACITY
from .adjacency import (
    AdjacencyStore,
    AdjacencyMatrix,
    AdjacencyList,
    AdjacencyStrategy,
    DEFAULT_WEIGHT,
    create_adjacency_store,
)
from .graph import MazeGraph

__all__ = [
    'VertexTable',
    'AdjacencyStore',
    'AdjacencyMatrix',
    'AdjacencyList',
    'AdjacencyStrategy',
    'MazeGraph',
    'create_adjacency_store',
    'DEFAULT_CAPACITY',
    'DEFAULT_WEIGHT',
]
