import random

import pytest

from hexwalls.graph import (
    Direction,
    Graph,
    GraphType,
    cyclic_coords,
    holey_coords,
    triangular_coords,
)


@pytest.fixture
def small():
    return Graph.create(GraphType.TRIANGULAR, 3, random.Random(7))


def test_add_edge_neighbors_are_connected(small):
    for target, direction in small.neighbors(0):
        assert small.has_edge(0, target)
        assert small.direction(0, target) == direction


def test_remove_edge_both_ways(small):
    neighbors = small.neighbors(0)
    assert len(neighbors) > 0
    neighbor = neighbors[0].pos
    assert small.has_edge(0, neighbor)
    assert small.has_edge(neighbor, 0)
    small.remove_edge(0, neighbor)
    assert not small.has_edge(0, neighbor)
    assert not small.has_edge(neighbor, 0)


def test_neighbors_vertex(small):
    for v in range(small.num_vertices):
        nbr = small.neighbors(v)
        for u, d in nbr:
            assert small.has_edge(v, u)
            assert small.direction(v, u) == d
        if nbr:
            gc = small.copy()
            gc.remove_edge(v, nbr[0].pos)
            assert len(gc.neighbors(v)) == len(nbr) - 1
            assert len(small.neighbors(v)) == len(nbr)


def test_direction_opposite_and_next():
    assert Direction.NW.opposite() is Direction.SE
    assert Direction.SW.opposite() is Direction.NE
    assert Direction.NO_EDGE.opposite() is Direction.NO_EDGE
    assert Direction.NW.next() is Direction.W
    assert Direction.E.next() is Direction.NE
    assert Direction.NO_EDGE.next() is Direction.NO_EDGE


def test_triangular_coords_small():
    assert triangular_coords(2) == [(-1, 0), (-1, 1), (0, -1), (0, 0), (0, 1), (1, -1), (1, 0)]


def test_triangular_sizes(small):
    assert small.num_vertices == 19
    assert small.start == (0, 18)
    assert sum(len(small.neighbors(v)) for v in range(small.num_vertices)) == 2 * small.num_edges


def test_center_has_six_neighbors(small):
    center = triangular_coords(3).index((0, 0))
    assert len(small.neighbors(center)) == 6


def test_edges_are_symmetric(small):
    for v in range(small.num_vertices):
        for u, d in small.neighbors(v):
            assert small.direction(u, v) == d.opposite()


def test_cyclic_board():
    g = Graph.create(GraphType.CYCLIC, 4, random.Random(1))
    assert g.num_vertices == 12 * 4 - 18
    assert len(cyclic_coords(4)) == g.num_vertices
    assert (0, 0) not in cyclic_coords(4)


def test_holey_board():
    g = Graph.create(GraphType.HOLEY, 6, random.Random(1))
    assert g.num_vertices == 84
    assert g.start == (0, 83)
    assert (0, 0) not in holey_coords(6)
    assert len(holey_coords(6)) == g.num_vertices


def test_objectives_mirror():
    g = Graph.create(GraphType.TRIANGULAR, 6, random.Random(3))
    assert g.num_objectives == 4
    for i in range(2):
        assert g.objectives[i] < g.num_vertices // 2
        assert g.objectives[i + 2] == g.num_vertices - g.objectives[i] - 1


def test_objectives_deterministic_with_seed():
    a = Graph.create(GraphType.TRIANGULAR, 6, random.Random(42))
    b = Graph.create(GraphType.TRIANGULAR, 6, random.Random(42))
    assert a.objectives == b.objectives


def test_copy_is_independent(small):
    clone = small.copy()
    u = small.neighbors(4)[0].pos
    clone.remove_edge(4, u)
    assert small.has_edge(4, u)
    assert not clone.has_edge(4, u)
    assert clone.objectives == small.objectives


def test_remove_edge_out_of_range_is_ignored(small):
    before = small.neighbors(0)
    small.remove_edge(0, 1000)
    assert small.neighbors(0) == before


def test_add_edge_out_of_bounds(small):
    with pytest.raises(IndexError):
        small.add_edge(0, small.num_vertices, Direction.E)


def test_board_too_small():
    with pytest.raises(ValueError):
        Graph.create(GraphType.TRIANGULAR, 1, random.Random(0))