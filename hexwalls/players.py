"""Automated players: each keeps its own view of the board and picks a move per turn."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from hexwalls.graph import Direction, Graph
from hexwalls.moves import Edge, Move, MoveType, PlayerColor
from hexwalls.pathing import (
    WallPair,
    astar_distance,
    bfs_distance,
    count_path_objectives,
    mark_path_objectives,
)
from hexwalls.rules import (
    PlayerInfo,
    compute_valid_moves,
    find_closest_objective,
    has_path_to_objectives,
    next_objective,
    shortest_path,
    wall_conflicts,
    wall_is_legal,
)

WALL_TRIGGER_DISTANCE = 6
MIN_WALL_GAIN = 2
SAFE_GAP = 2.0
NO_OPPONENT_GAP = 10.0
EPSILON = 1e-6


class Player(ABC):
    """A player driven by the server: initialized once, asked to play each turn."""

    name: ClassVar[str] = ""

    def __init__(self) -> None:
        self._info: Optional[PlayerInfo] = None

    @property
    def info(self) -> PlayerInfo:
        """The player's state; only available between initialize and finalize."""
        if self._info is None:
            raise RuntimeError("player is not initialized")
        return self._info

    def initialize(self, player_id: int, graph: Graph) -> None:
        """Take ownership of `graph` and set up the state for `player_id`."""
        color = PlayerColor.BLACK if player_id == 0 else PlayerColor.WHITE
        start = graph.start[player_id]
        self._info = PlayerInfo(
            graph=graph,
            start=start,
            current=start,
            objectives=list(graph.objectives),
            last_opponent=None,
            color=color,
            last_dir=Direction.NO_EDGE,
            id=player_id,
            num_walls=(graph.num_edges + 15) // 16,
        )
        print("initial objectives:")
        for i, objective in enumerate(graph.objectives):
            print(f"  - objective[{i}] = {objective}")

    def play(self, previous_move: Move) -> Move:
        """Take the opponent's last move into account and return this player's move."""
        info = self.info
        self._observe(info, previous_move)
        return self._decide(info)

    def finalize(self) -> None:
        """Release the player's state."""
        self._info = None

    @staticmethod
    def _observe(info: PlayerInfo, previous_move: Move) -> None:
        if previous_move.type == MoveType.NO_TYPE or previous_move.color == info.color:
            return
        info.last_opponent = previous_move.vertex
        if previous_move.type == MoveType.WALL:
            for edge in previous_move.edges:
                info.graph.remove_edge(edge.frm, edge.to)

    @staticmethod
    def _target(info: PlayerInfo) -> int:
        target = find_closest_objective(info.graph, info.current, info.objectives)
        return info.start if target is None else target

    @abstractmethod
    def _decide(self, info: PlayerInfo) -> Move:
        """Choose the move to play."""


class WallBuilderPlayer(Player):
    """Blocks a nearby opponent with walls when that costs it two steps; otherwise
    moves to collect the most objectives on the way, then the nearest one."""

    name = "wall-builder"

    def _decide(self, info: PlayerInfo) -> Move:
        wall = self._choose_wall(info)
        if wall is not None:
            for edge in wall:
                info.graph.remove_edge(edge.frm, edge.to)
            info.num_walls -= 1
            return Move(color=info.color, type=MoveType.WALL, edges=wall)
        return self._step(info)

    @staticmethod
    def _opponent_target(info: PlayerInfo) -> int:
        index = next_objective(info)
        if index is not None:
            return info.graph.num_vertices - info.objectives[index] - 1
        other = PlayerColor.WHITE if info.color == PlayerColor.BLACK else PlayerColor.BLACK
        return info.graph.start[other]

    def _choose_wall(self, info: PlayerInfo) -> Optional[WallPair]:
        opponent = info.last_opponent
        if info.num_walls <= 0 or opponent is None:
            return None
        graph = info.graph
        opp_target = self._opponent_target(info)
        old_dist = bfs_distance(graph, opponent, opp_target)
        if old_dist is None or old_dist > WALL_TRIGGER_DISTANCE:
            return None

        neighbors = graph.neighbors(opponent)
        best_wall: Optional[WallPair] = None
        best_delta = 0
        for i, first in enumerate(neighbors):
            for j, second in enumerate(neighbors):
                if i == j or first.dir.next() != second.dir:
                    continue
                wall = (Edge(opponent, first.pos), Edge(opponent, second.pos))
                if wall_conflicts(graph, wall):
                    continue
                trial = graph.copy()
                for edge in wall:
                    trial.remove_edge(edge.frm, edge.to)
                if not has_path_to_objectives(trial, opponent, [opp_target]):
                    continue
                if not wall_is_legal(
                    trial, wall, info.current, opponent, info.objectives, [opp_target]
                ):
                    continue
                new_dist = bfs_distance(trial, opponent, opp_target)
                closest = find_closest_objective(trial, info.current, info.objectives)
                my_dist = None if closest is None else bfs_distance(trial, info.current, closest)
                if new_dist is None or my_dist is None:
                    continue
                delta = new_dist - old_dist
                if delta > best_delta:
                    best_delta = delta
                    best_wall = wall

        return best_wall if best_delta >= MIN_WALL_GAIN else None

    def _step(self, info: PlayerInfo) -> Move:
        graph = info.graph
        target = self._target(info)
        best = info.current
        best_dir = info.last_dir
        best_gain = 0
        best_dist = math.inf
        best_safe = -1

        for cand, cdir in compute_valid_moves(graph, info.current, info.last_dir, info.last_opponent):
            if cand == info.current or cand == info.last_opponent:
                continue
            gain = count_path_objectives(info, info.current, cand)
            dist = astar_distance(graph, cand, target)
            gap = (
                astar_distance(graph, cand, info.last_opponent)
                if info.last_opponent is not None
                else NO_OPPONENT_GAP
            )
            safe = 1 if gap >= SAFE_GAP else 0

            same_dist = dist == best_dist or abs(dist - best_dist) < EPSILON
            if (
                gain > best_gain
                or (gain == best_gain and dist < best_dist)
                or (gain == best_gain and same_dist and safe > best_safe)
            ):
                best_gain, best_dist, best_safe = gain, dist, safe
                best, best_dir = cand, cdir

        mark_path_objectives(info, info.current, best)
        info.current = best
        info.last_dir = best_dir
        return Move(color=info.color, type=MoveType.MOVE, vertex=best)


class GreedyPlayer(Player):
    """Always moves to the reachable vertex closest to the nearest objective."""

    name = "greedy"

    def _decide(self, info: PlayerInfo) -> Move:
        graph = info.graph
        target = self._target(info)
        best = info.current
        min_dist: Optional[int] = None

        for cand, cdir in compute_valid_moves(graph, info.current, info.last_dir, info.last_opponent):
            if cand == info.current or cand == info.last_opponent:
                continue
            dist = self._steps_to(graph, cand, target)
            if min_dist is None or dist < min_dist:
                min_dist = dist
                best = cand
                info.last_dir = cdir

        info.current = best
        info.objectives = [None if o == best else o for o in info.objectives]
        return Move(color=info.color, type=MoveType.MOVE, vertex=best)

    @staticmethod
    def _steps_to(graph: Graph, frm: int, to: int) -> int:
        """Steps walked toward `to`, stopping early if the path breaks."""
        steps = 0
        vertex: Optional[int] = frm
        while vertex != to:
            vertex = shortest_path(graph, vertex, to)
            if vertex is None:
                break
            steps += 1
        return steps


_PLAYERS: dict[str, type[Player]] = {
    WallBuilderPlayer.name: WallBuilderPlayer,
    GreedyPlayer.name: GreedyPlayer,
}


def get_player(name: str) -> Player:
    """A new player of the kind called `name`."""
    try:
        return _PLAYERS[name]()
    except KeyError:
        known = ", ".join(sorted(_PLAYERS))
        raise ValueError(f"unknown player {name!r} (known: {known})") from None