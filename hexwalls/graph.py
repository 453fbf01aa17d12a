"""Hexagonal board graphs with directed, labelled adjacency and objectives."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import NamedTuple, Optional

NUM_DIRS = 6
NUM_OBJECTIVES = 4


class Direction(IntEnum):
    """Direction of an edge; WALL marks an edge that has been blocked."""

    NO_EDGE = 0
    NW = 1
    NE = 2
    E = 3
    SE = 4
    SW = 5
    W = 6
    WALL = 7

    def opposite(self) -> Direction:
        """The direction pointing the other way."""
        if self == Direction.NO_EDGE:
            return Direction.NO_EDGE
        return Direction(self - 3 if self >= 4 else self + 3)

    def next(self) -> Direction:
        """The next direction in counterclockwise order."""
        if self == Direction.NO_EDGE:
            return Direction.NO_EDGE
        if self == Direction.NW:
            return Direction.W
        return Direction(self - 1)


FIRST_DIR = Direction.NW
LAST_DIR = Direction.W
MOVE_DIRECTIONS = tuple(Direction(d) for d in range(FIRST_DIR, LAST_DIR + 1))

HEX_VECTORS = {
    Direction.NW: (0, -1),
    Direction.NE: (1, -1),
    Direction.E: (1, 0),
    Direction.SE: (0, 1),
    Direction.SW: (-1, 1),
    Direction.W: (-1, 0),
}


class GraphType(IntEnum):
    """Shape of the board."""

    TRIANGULAR = 0
    CYCLIC = 1
    HOLEY = 2


class PosDir(NamedTuple):
    """A neighbouring vertex and the direction leading to it."""

    pos: int
    dir: Direction


def _hex_distance(q: int, r: int) -> int:
    return max(abs(q), abs(r), abs(q + r))


def _axial_cells(m: int):
    span = range(-(m - 1), m)
    for q in span:
        for r in span:
            yield q, r


def triangular_coords(m: int) -> list[tuple[int, int]]:
    """Axial coordinates of a full hexagonal board of side m, in vertex order."""
    return [(q, r) for q, r in _axial_cells(m) if _hex_distance(q, r) < m]


def cyclic_coords(m: int) -> list[tuple[int, int]]:
    """Axial coordinates of the two outer rings of a board of side m."""
    return [(q, r) for q, r in _axial_cells(m) if m - 2 <= _hex_distance(q, r) < m]


def _hole_centers(hole_size: int) -> list[tuple[int, int]]:
    offset = 3 * hole_size - (hole_size - 1)
    side = 2 * hole_size + 1
    return [
        (0, -offset),
        (side, -offset),
        (-side, 0),
        (0, 0),
        (side, 0),
        (-side, offset),
        (0, offset),
    ]


def holey_coords(m: int) -> list[tuple[int, int]]:
    """Axial coordinates of a board of side m with seven hexagonal holes."""
    hole_size = m // 3 - 1
    centers = _hole_centers(hole_size)

    def in_hole(q: int, r: int) -> bool:
        return any(_hex_distance(q - cq, r - cr) < hole_size for cq, cr in centers)

    return [
        (q, r) for q, r in _axial_cells(m) if _hex_distance(q, r) < m and not in_hole(q, r)
    ]


class Graph:
    """A board: vertices, directed labelled edges, start vertices and objectives."""

    def __init__(
        self,
        graph_type: GraphType,
        num_vertices: int,
        num_edges: int = 0,
        start: Optional[tuple[int, int]] = None,
        objectives: Optional[list[int]] = None,
    ) -> None:
        self.graph_type = GraphType(graph_type)
        self.num_vertices = num_vertices
        self.num_edges = num_edges
        self.start = tuple(start) if start is not None else (0, num_vertices - 1)
        self.objectives = list(objectives) if objectives is not None else []
        self._rows: list[dict[int, Direction]] = [{} for _ in range(num_vertices)]

    @property
    def num_objectives(self) -> int:
        return len(self.objectives)

    @classmethod
    def create(
        cls, graph_type: GraphType, m: int, rng: Optional[random.Random] = None
    ) -> Graph:
        """Build a board of the given shape and side, with random objectives."""
        graph_type = GraphType(graph_type)
        if graph_type is GraphType.TRIANGULAR:
            expected = 3 * m * m - 3 * m + 1
            num_edges = 9 * m * m - 15 * m + 6
            coords = triangular_coords(m)
        elif graph_type is GraphType.CYCLIC:
            expected = 12 * m - 18
            num_edges = 24 * m - 36
            coords = cyclic_coords(m)
        else:
            expected = (2 * m * m) // 3 + 18 * m - 48
            num_edges = 2 * m * m + 34 * m - 78
            coords = holey_coords(m)

        if graph_type is not GraphType.HOLEY and len(coords) != expected:
            raise ValueError(f"board side {m} is too small for a {graph_type.name} board")

        graph = cls(graph_type, len(coords), num_edges, start=(0, expected - 1))
        if not all(0 <= s < graph.num_vertices for s in graph.start):
            raise ValueError(f"board side {m} is too small for a {graph_type.name} board")

        index = {coord: i for i, coord in enumerate(coords)}
        for i, (q, r) in enumerate(coords):
            for direction, (dq, dr) in HEX_VECTORS.items():
                j = index.get((q + dq, r + dr))
                if j is not None:
                    graph.add_edge(i, j, direction)
                    graph.add_edge(j, i, direction.opposite())

        graph.initialize_objectives(rng)
        return graph

    def add_edge(self, i: int, j: int, direction: Direction) -> None:
        """Record that j lies in `direction` from i."""
        if not (0 <= i < self.num_vertices and 0 <= j < self.num_vertices):
            raise IndexError(f"edge out of bounds ({i} -> {j})")
        self._rows[i][j] = Direction(direction)

    def remove_edge(self, i: int, j: int) -> None:
        """Wall off the edge between i and j in both directions."""
        if not (0 <= i < self.num_vertices and 0 <= j < self.num_vertices):
            return
        if not self.has_edge(i, j):
            return
        self._rows[i][j] = Direction.WALL
        if i in self._rows[j]:
            self._rows[j][i] = Direction.WALL

    def neighbors(self, vertex: int) -> list[PosDir]:
        """Open neighbours of `vertex`, ordered by vertex id."""
        return [
            PosDir(pos, d)
            for pos, d in sorted(self._rows[vertex].items())
            if d not in (Direction.WALL, Direction.NO_EDGE)
        ]

    def has_edge(self, frm: int, to: int) -> bool:
        """Whether an open edge leads from `frm` to `to`."""
        return self.direction(frm, to) is not Direction.NO_EDGE

    def direction(self, frm: int, to: int) -> Direction:
        """Direction of the open edge from `frm` to `to`, or NO_EDGE."""
        d = self._rows[frm].get(to, Direction.NO_EDGE)
        return Direction.NO_EDGE if d == Direction.WALL else d

    def copy(self) -> Graph:
        """An independent copy of the board."""
        clone = Graph(
            self.graph_type, self.num_vertices, self.num_edges, self.start, self.objectives
        )
        clone._rows = [dict(row) for row in self._rows]
        return clone

    def initialize_objectives(self, rng: Optional[random.Random] = None) -> None:
        """Draw objectives in the first half of the board and mirror them."""
        rng = rng if rng is not None else random.Random()
        count = self.num_objectives or NUM_OBJECTIVES
        half = count // 2
        half_vertices = self.num_vertices // 2

        firsts: list[int] = []
        for i in range(half_vertices):
            if len(firsts) == half:
                break
            if i != self.start[0]:
                firsts.append(rng.randrange(half_vertices))
        if len(firsts) < half:
            raise ValueError("board too small to place objectives")

        self.objectives = firsts + [self.num_vertices - (o + 1) for o in firsts]