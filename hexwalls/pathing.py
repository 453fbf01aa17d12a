"""Distances, paths and wall candidates on a board graph."""

from __future__ import annotations

import math
from collections import deque
from itertools import islice
from typing import Iterable, NamedTuple, Optional, Sequence

from hexwalls.graph import Graph
from hexwalls.moves import Edge
from hexwalls.rules import PlayerInfo, find_closest_objective, shortest_path, wall_conflicts

WallPair = tuple[Edge, Edge]


def _walk(info: PlayerInfo, frm: int, to: int):
    """Yield every vertex stepped on along a shortest path, after `frm`."""
    step: Optional[int] = frm
    while step != to:
        step = shortest_path(info.graph, step, to)
        if step is None:
            return
        yield step


def mark_path_objectives(info: PlayerInfo, frm: int, to: int) -> None:
    """Mark as reached every objective on a shortest path from `frm` to `to`."""
    for step in _walk(info, frm, to):
        info.objectives = [None if o == step else o for o in info.objectives]


def count_path_objectives(info: PlayerInfo, frm: int, to: int) -> int:
    """Count the objectives met on a shortest path from `frm` to `to`."""
    return sum(
        1 for step in _walk(info, frm, to) for o in info.objectives if o is not None and o == step
    )


def bfs_distance(graph: Graph, frm: int, to: int) -> Optional[int]:
    """Number of steps from `frm` to `to`, or None when `to` cannot be reached."""
    if frm == to:
        return 0
    visited = {frm}
    queue = deque([(frm, 0)])
    while queue:
        vertex, dist = queue.popleft()
        for pos, _ in graph.neighbors(vertex):
            if pos in visited:
                continue
            if pos == to:
                return dist + 1
            visited.add(pos)
            queue.append((pos, dist + 1))
    return None


class _OpenNode(NamedTuple):
    vertex: int
    f: float
    g: float


def _heuristic(a: int, b: int) -> float:
    return float(abs(a - b))


def _astar_search(graph: Graph, frm: int, to: int) -> tuple[float, dict[int, int]]:
    """Run A* from `frm`; return the cost to `to` (inf if unreached) and the parents."""
    gcost: dict[int, float] = {frm: 0.0}
    parent: dict[int, int] = {}
    open_list = [_OpenNode(frm, _heuristic(frm, to), 0.0)]

    while open_list:
        idx = min(enumerate(open_list), key=lambda item: item[1].f)[0]
        current = open_list[idx]
        last = open_list.pop()
        if idx < len(open_list):
            open_list[idx] = last

        if current.vertex == to:
            return current.g, parent

        for pos, _ in graph.neighbors(current.vertex):
            cost = current.g + 1.0
            if cost < gcost.get(pos, math.inf):
                gcost[pos] = cost
                parent[pos] = current.vertex
                open_list.append(_OpenNode(pos, cost + _heuristic(pos, to), cost))
    return math.inf, parent


def astar_distance(graph: Graph, frm: int, to: int) -> float:
    """Cost of the path A* finds from `frm` to `to`; infinity when there is none."""
    if frm == to:
        return 0.0
    cost, _ = _astar_search(graph, frm, to)
    return cost


def astar_path(graph: Graph, frm: int, to: int, max_size: int) -> list[int]:
    """Vertices after `frm` up to and including `to` on the A* path.

    At most `max_size` vertices are kept, those nearest to `to`.
    """
    if frm == to:
        return [to] if max_size > 0 else []
    _, parent = _astar_search(graph, frm, to)

    path: list[int] = []
    vertex: Optional[int] = to
    while vertex is not None and vertex != frm and len(path) < max_size:
        path.append(vertex)
        vertex = parent.get(vertex)
    path.reverse()
    return path


def enumerate_candidate_walls(
    graph: Graph, opp_path: Iterable[Optional[int]], k: int, max_out: int
) -> list[WallPair]:
    """Walls of two adjacent edges around the first `k` vertices of `opp_path`.

    The path stops early at a None entry; at most `max_out` walls are returned.
    """
    walls: list[WallPair] = []
    for vertex in islice(opp_path, k):
        if vertex is None or len(walls) >= max_out:
            break
        neighbors = graph.neighbors(vertex)
        for i, first in enumerate(neighbors):
            for j, second in enumerate(neighbors):
                if len(walls) >= max_out:
                    return walls
                if i == j or first.dir.next() != second.dir:
                    continue
                wall = (Edge(vertex, first.pos), Edge(vertex, second.pos))
                if wall_conflicts(graph, wall):
                    continue
                duplicate = any(
                    w[0] == wall[0] or w[0] == wall[1].reversed() for w in walls
                )
                if not duplicate:
                    walls.append(wall)
    return walls


def _player_has_way(graph: Graph, player: PlayerInfo) -> bool:
    target = find_closest_objective(graph, player.current, player.objectives)
    if target is None:
        target = player.start
    if bfs_distance(graph, player.current, target) is None:
        return False
    return bfs_distance(graph, target, player.start) is not None


def wall_preserves_connectivity(
    graph: Graph, wall: Sequence[Edge], me: PlayerInfo, opp: PlayerInfo
) -> bool:
    """Whether both players can still reach an objective and get back home."""
    trial = graph.copy()
    for edge in wall[:2]:
        trial.remove_edge(edge.frm, edge.to)
    return _player_has_way(trial, me) and _player_has_way(trial, opp)