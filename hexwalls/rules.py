"""Game rules shared by the server and the players: moves, jumps, walls and paths."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from hexwalls.graph import Direction, Graph, PosDir
from hexwalls.moves import Edge, PlayerColor

MAX_SAME_DIRECTION_STEPS = 3
MAX_TURNING_STEPS = 2


@dataclass
class PlayerInfo:
    """What a player knows about itself: position, board, objectives left.

    A reached objective is replaced by None in `objectives`.
    """

    graph: Graph
    start: int = 0
    current: int = 0
    objectives: list[Optional[int]] = field(default_factory=list)
    last_opponent: Optional[int] = None
    color: PlayerColor = PlayerColor.BLACK
    last_dir: Direction = Direction.NO_EDGE
    id: int = 0
    num_walls: int = 0

    @property
    def remaining(self) -> int:
        """Number of objectives not reached yet."""
        return sum(1 for o in self.objectives if o is not None)


def next_objective(info: PlayerInfo) -> Optional[int]:
    """Index of the first objective not reached yet, or None if all are reached."""
    return next((i for i, o in enumerate(info.objectives) if o is not None), None)


def is_almost_done(info: PlayerInfo) -> bool:
    """Whether at most three objectives are left."""
    return info.remaining <= 3


def opponent_almost_done(info: PlayerInfo) -> bool:
    """Whether at most one objective is left."""
    return info.remaining <= 1


def has_won(info: PlayerInfo) -> bool:
    """Whether every objective is reached and the player is back at its start."""
    return info.current == info.start and info.remaining == 0


def _bfs_first_match(graph: Graph, start: int, targets: set[int]) -> Optional[int]:
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current in targets:
            return current
        for pos, _ in graph.neighbors(current):
            if pos not in visited:
                visited.add(pos)
                queue.append(pos)
    return None


def _targets(objectives: Iterable[Optional[int]]) -> set[int]:
    return {o for o in objectives if o is not None}


def has_path_to_objectives(
    graph: Graph, start: int, objectives: Iterable[Optional[int]]
) -> bool:
    """Whether some objective can be reached from `start`."""
    return _bfs_first_match(graph, start, _targets(objectives)) is not None


def find_closest_objective(
    graph: Graph, start: int, objectives: Iterable[Optional[int]]
) -> Optional[int]:
    """The objective nearest to `start` in breadth-first order, or None."""
    return _bfs_first_match(graph, start, _targets(objectives))


def jump_over(graph: Graph, me_pos: int, opponent: Optional[int]) -> Optional[int]:
    """Vertex reached by jumping over an adjacent opponent, or None."""
    dir_to_opp = next((d for pos, d in graph.neighbors(me_pos) if pos == opponent), None)
    if dir_to_opp is None or opponent is None or not graph.has_edge(me_pos, opponent):
        return None
    for pos, d in graph.neighbors(opponent):
        if d == dir_to_opp and graph.has_edge(opponent, pos) and pos not in (me_pos, opponent):
            return pos
    return None


def _max_steps(d: Direction, last_dir: Direction) -> int:
    if last_dir in (Direction.NO_EDGE, Direction.WALL):
        return 1
    if d == last_dir:
        return MAX_SAME_DIRECTION_STEPS
    if d == last_dir.next() or last_dir == d.next():
        return MAX_TURNING_STEPS
    return 1


def compute_valid_moves(
    graph: Graph, pos: int, last_dir: Direction, opponent: Optional[int]
) -> list[PosDir]:
    """Every vertex reachable in one turn from `pos`, with the direction taken.

    A step in the same direction as the previous move may go up to three
    vertices, a step turning by one sixth up to two; an adjacent opponent
    may be jumped over.
    """
    last_dir = Direction(last_dir)
    neighbors = graph.neighbors(pos)
    moves: list[PosDir] = []

    for nxt, d in neighbors:
        if nxt == opponent:
            jump = jump_over(graph, pos, opponent)
            if jump is not None and jump not in (pos, opponent):
                moves.append(PosDir(jump, d))
            continue

        if not graph.has_edge(pos, nxt):
            continue
        moves.append(PosDir(nxt, d))

        cur = nxt
        for _ in range(1, _max_steps(d, last_dir)):
            step = next(
                (
                    p
                    for p, nd in graph.neighbors(cur)
                    if nd == d and graph.has_edge(cur, p) and p != opponent
                ),
                None,
            )
            if step is None:
                break
            cur = step
            moves.append(PosDir(cur, d))
    return moves


def direction_between(graph: Graph, frm: int, to: int) -> Optional[Direction]:
    """Direction of the open edge from `frm` to `to`, or None."""
    d = graph.direction(frm, to)
    return None if d == Direction.NO_EDGE else d


def wall_conflicts(graph: Graph, wall: Sequence[Edge]) -> bool:
    """Whether one of the wall's edges is already blocked or missing."""
    return any(not graph.has_edge(edge.frm, edge.to) for edge in wall)


def wall_is_legal(
    graph: Graph,
    wall: Sequence[Edge],
    pos_self: int,
    pos_opp: int,
    self_objectives: Iterable[Optional[int]],
    opp_objectives: Iterable[Optional[int]],
) -> bool:
    """Whether both players still reach an objective once the wall stands."""
    trial = graph.copy()
    for edge in wall:
        trial.remove_edge(edge.frm, edge.to)
    return has_path_to_objectives(trial, pos_self, self_objectives) and has_path_to_objectives(
        trial, pos_opp, opp_objectives
    )


def shortest_path(graph: Graph, frm: int, to: int) -> Optional[int]:
    """First vertex on a shortest path from `frm` to `to`; `frm` itself if equal.

    Returns None when `to` cannot be reached.
    """
    if frm == to:
        return frm
    parent: dict[int, Optional[int]] = {frm: None}
    queue = deque([frm])
    while queue:
        current = queue.popleft()
        for neighbor, _ in graph.neighbors(current):
            if neighbor in parent:
                continue
            parent[neighbor] = current
            if neighbor == to:
                node = to
                while parent[node] is not None and parent[node] != frm:
                    node = parent[node]
                return node
            queue.append(neighbor)
    return None


def is_opponent_near_last_objective(info: PlayerInfo) -> bool:
    """Whether some remaining objective lies within three steps of the player."""
    for obj in info.objectives:
        if obj is None:
            continue
        tmp: Optional[int] = info.current
        dist = 0
        while tmp != obj and dist <= 3:
            tmp = shortest_path(info.graph, tmp, obj)
            if tmp is None:
                break
            dist += 1
        if dist <= 3:
            return True
    return False