"""Tests for the payload-level maze graph facade."""

import logging
import math
from dataclasses import dataclass

import pytest

from mazegraph import AdjacencyStrategy, DEFAULT_CAPACITY, pymazegraph

from conftest import make_maze


@dataclass(frozen=True)
class Room:
    room_id: str
    kind: str = "standard"


def test_add_vertex_is_isolated(maze):
    assert maze.add_vertex("A") == 0
    assert maze.get_vertex_id("A") == 0
    assert maze.get_vertex_by_id(0) == "A"
    assert maze.neighbors("A") == []
    assert maze.size() == 1
    assert "A" in maze


def test_equal_payloads_are_the_same_vertex(maze):
    maze.add_vertex(Room("hall"))
    assert maze.add_vertex(Room("hall")) == 0
    assert maze.size() == 1

    maze.add_vertex(Room("vault", kind="treasure"))
    assert maze.add_edge(Room("hall"), Room("vault", kind="treasure"), 3.0)
    assert maze.neighbors(Room("hall")) == [Room("vault", kind="treasure")]


def test_edges_are_symmetric(strategy):
    maze = make_maze(strategy, ["A", "B"], [("A", "B", 2.5)])

    assert "B" in maze.neighbors("A")
    assert "A" in maze.neighbors("B")
    assert maze.edge_weight("A", "B") == maze.edge_weight("B", "A") == 2.5
    assert maze.has_edge("B", "A")
    assert maze.get_edge_count() == 1


def test_default_weight(maze):
    maze.add_vertex("A")
    maze.add_vertex("B")
    maze.add_edge("A", "B")
    assert maze.edge_weight("A", "B") == 1.0


def test_add_edge_with_unknown_room_is_ignored(maze, caplog):
    maze.add_vertex("A")

    with caplog.at_level(logging.WARNING, logger="mazegraph"):
        assert maze.add_edge("A", "Z") is False

    assert "not in graph" in caplog.text
    assert maze.neighbors("A") == []
    assert maze.get_edge_count() == 0


def test_negative_weight_rejected(maze):
    maze.add_vertex("A")
    maze.add_vertex("B")
    with pytest.raises(ValueError):
        maze.add_edge("A", "B", -2.0)
    assert not maze.has_edge("A", "B")


def test_remove_edge(strategy):
    maze = make_maze(strategy, ["A", "B", "C"], [("A", "B"), ("B", "C")])

    assert maze.remove_edge("B", "A") is True
    assert maze.remove_edge("B", "A") is False
    assert maze.remove_edge("A", "Z") is False
    assert maze.neighbors("A") == []
    assert maze.neighbors("B") == ["C"]


def test_remove_vertex_renumbers_and_drops_incident_edges(strategy):
    maze = make_maze(
        strategy,
        ["A", "B", "C", "D"],
        [("A", "B", 1.0), ("B", "C", 2.0), ("C", "D", 3.0), ("A", "D", 4.0)],
    )

    assert maze.remove_vertex("B") is True

    assert maze.size() == 3
    assert maze.get_vertices() == ["A", "C", "D"]
    assert [maze.get_vertex_id(room) for room in ("A", "C", "D")] == [0, 1, 2]
    assert "B" not in maze
    assert maze.get_edge_count() == 2
    assert maze.edge_weight("C", "D") == 3.0
    assert maze.edge_weight("A", "D") == 4.0
    assert maze.neighbors("C") == ["D"]
    assert math.isinf(maze.edge_weight("A", "C"))


def test_remove_absent_vertex_is_noop(strategy, caplog):
    maze = make_maze(strategy, ["A", "B"], [("A", "B")])

    with caplog.at_level(logging.WARNING, logger="mazegraph"):
        assert maze.remove_vertex("Z") is False

    assert maze.size() == 2
    assert maze.has_edge("A", "B")
    assert "Cannot remove vertex" in caplog.text


def test_growth_past_default_capacity(strategy):
    rooms = [f"R{i}" for i in range(15)]
    corridors = [(rooms[i], rooms[i + 1], float(i + 1)) for i in range(9)]
    maze = make_maze(strategy, rooms[:10], corridors)

    for room in rooms[10:]:
        maze.add_vertex(room)
    maze.add_edge("R9", "R14", 0.5)

    assert DEFAULT_CAPACITY == 10
    assert maze.size() == 15
    for i in range(9):
        assert maze.edge_weight(rooms[i], rooms[i + 1]) == float(i + 1)
    assert maze.shortest_path("R0", "R14") == rooms[:10] + ["R14"]
    assert maze.path_weight("R0", "R14") == pytest.approx(sum(range(1, 10)) + 0.5)


def test_neighbors_are_snapshots(strategy):
    maze = make_maze(strategy, ["A", "B", "C"], [("A", "B"), ("A", "C")])
    neighbors = maze.neighbors("A")

    maze.remove_edge("A", "B")

    assert sorted(neighbors) == ["B", "C"]
    assert maze.neighbors("A") == ["C"]


def test_neighbors_of_unknown_room(maze):
    assert maze.neighbors("nowhere") == []


def test_strategy_selection():
    assert pymazegraph().strategy is AdjacencyStrategy.LIST
    assert pymazegraph(strategy="matrix").strategy is AdjacencyStrategy.MATRIX
    with pytest.raises(ValueError):
        pymazegraph(strategy="octree")
    with pytest.raises(ValueError):
        pymazegraph(capacity=0)


def test_both_strategies_answer_alike():
    rooms = list("ABCDEFG")
    corridors = [("A", "B", 2.0), ("B", "C", 1.0), ("C", "D", 4.0), ("A", "E", 1.0),
                 ("E", "F", 1.0), ("F", "D", 1.0), ("G", "G", 1.0)]
    matrix = make_maze(AdjacencyStrategy.MATRIX, rooms, corridors)
    sparse = make_maze(AdjacencyStrategy.LIST, rooms, corridors)

    for maze in (matrix, sparse):
        maze.remove_vertex("E")
        maze.add_edge("A", "D", 2.5)

    for start in rooms:
        for target in rooms:
            assert matrix.path_weight(start, target) == sparse.path_weight(start, target)
        assert sorted(matrix.neighbors(start)) == sorted(sparse.neighbors(start))
        assert set(matrix.iterator_bfs(start)) == set(sparse.iterator_dfs(start))
    assert matrix.is_connected() == sparse.is_connected() is False


def test_find_vertex(strategy):
    rooms = [Room("gate", kind="entrance"), Room("hall"), Room("crypt"), Room("vault", kind="treasure")]
    maze = make_maze(strategy, rooms, [(rooms[0], rooms[1]), (rooms[1], rooms[2])])

    assert maze.find_vertex(lambda room: room.kind == "entrance") == rooms[0]
    assert maze.find_vertex(lambda room: room.room_id == "crypt") == rooms[2]
    assert maze.find_vertex(lambda room: room.kind == "treasure") == rooms[3]
    assert maze.find_vertex(lambda room: room.room_id == "attic") is None
    assert pymazegraph(strategy=strategy).find_vertex(lambda room: True) is None


def test_is_empty_and_len(maze):
    assert maze.is_empty()
    assert len(maze) == 0
    maze.add_vertex("A")
    assert not maze.is_empty()
    assert len(maze) == 1


def test_string_dump(strategy):
    maze = make_maze(strategy, ["A", "B", "C"], [("A", "B", 2.0)])

    assert str(maze).splitlines() == [
        "A -> [('B', 2.0)]",
        "B -> [('A', 2.0)]",
        "C -> []",
    ]
    assert repr(maze) == (
        f"pymazegraph(strategy='{strategy.value}', vertices=3, edges=1, weighted=True)"
    )
