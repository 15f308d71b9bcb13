"""
PyMazegraph - Maze Graph Library

A Python library for representing a maze as an undirected, optionally
weighted graph: rooms are vertices, corridors are edges and edge weights
are traversal costs. Provides interchangeable dense-matrix and sparse-list
adjacency stores, BFS/DFS traversal and shortest path queries.

Main Classes:
    pymazegraph: Payload-level maze graph (facade)
    MazeGraph: Index-level graph core
    AdjacencyStrategy: Choice of adjacency representation

Example:
    >>> from mazegraph import pymazegraph
    >>> maze = pymazegraph(strategy="matrix")
    >>> for room in ("A", "B", "C"):
    ...     _ = maze.add_vertex(room)
    >>> _ = maze.add_edge("A", "B", 1.0)
    >>> _ = maze.add_edge("B", "C", 2.5)
    >>> maze.shortest_path("A", "C")
    ['A', 'B', 'C']
"""

import logging

__version__ = "0.1.0"

from mazegraph.core.adjacency import AdjacencyStrategy, DEFAULT_WEIGHT
from mazegraph.core.vertex_table import DEFAULT_CAPACITY
from mazegraph.core.graph import MazeGraph
from mazegraph.core.mazegraph import pymazegraph

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'pymazegraph',
    'MazeGraph',
    'AdjacencyStrategy',
    'DEFAULT_CAPACITY',
    'DEFAULT_WEIGHT',
]
