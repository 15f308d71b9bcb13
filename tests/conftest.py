"""Shared fixtures: every contract test runs against both adjacency strategies."""

import pytest

from mazegraph import AdjacencyStrategy, pymazegraph


@pytest.fixture(params=[AdjacencyStrategy.MATRIX, AdjacencyStrategy.LIST], ids=lambda s: s.value)
def strategy(request):
    return request.param


@pytest.fixture
def maze(strategy):
    return pymazegraph(strategy=strategy)


def make_maze(strategy, rooms, corridors, **kwargs) -> pymazegraph:
    graph = pymazegraph(strategy=strategy, **kwargs)
    for room in rooms:
        graph.add_vertex(room)
    for corridor in corridors:
        graph.add_edge(*corridor)
    return graph
