"""
Graph analysis modules for maze graphs.

This module contains traversal and path finding algorithms.
"""

from .traversal import GraphTraverser, VisitState
from .pathfinding import PathFinder

__all__ = [
    'GraphTraverser',
    'VisitState',
    'PathFinder',
]
