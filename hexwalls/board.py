"""The server's view of a game: shared board, per-player boards, positions, objectives."""

from __future__ import annotations

import random
from typing import Optional

from hexwalls.graph import Graph, GraphType
from hexwalls.moves import NUM_PLAYERS, Move, PlayerColor
from hexwalls.rules import shortest_path


class Board:
    """State of a game kept by the server.

    Each player has its own copy of the graph; `server_graph` is the reference.
    Reached objectives are replaced by None in `objectives[player_id]`, while
    `display_objectives` keeps the original list.
    """

    def __init__(
        self,
        graph_type: GraphType,
        m: int,
        first_player: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        base = Graph.create(graph_type, m, rng)
        self.server_graph = base
        self.graphs = [base.copy() for _ in range(NUM_PLAYERS)]
        colors = [
            PlayerColor.BLACK if i == first_player else PlayerColor.WHITE
            for i in range(NUM_PLAYERS)
        ]
        self.start = tuple(base.start[color] for color in colors)
        self.positions = list(self.start)
        self.objectives: list[list[Optional[int]]] = [
            list(base.objectives) for _ in range(NUM_PLAYERS)
        ]
        self.display_objectives = tuple(base.objectives)

    @property
    def num_objectives(self) -> int:
        return len(self.display_objectives)

    def _reach(self, player_id: int, vertex: int, how: str) -> None:
        goals = self.objectives[player_id]
        for i, objective in enumerate(goals):
            if objective is not None and objective == vertex:
                goals[i] = None
                print(f" objective reached{how}: player {player_id} reached {vertex}")

    def mark_objective_reached(self, player_id: int, vertex: int) -> None:
        """Mark `vertex` as reached by the player if it is one of its objectives."""
        self._reach(player_id, vertex, "")

    def remaining_objectives(self, player_id: int) -> list[int]:
        """Objectives the player has not reached yet, in their original order."""
        return [o for o in self.objectives[player_id] if o is not None]

    def add_walls(self, player_id: int, move: Move) -> None:
        """Block the wall's edges on every board of the game."""
        boards = (
            self.graphs[player_id],
            self.graphs[1 - player_id],
            self.server_graph,
        )
        size = self.graphs[player_id].num_vertices
        for edge in move.edges:
            if not (0 <= edge.frm < size and 0 <= edge.to < size):
                continue
            for graph in boards:
                if graph.has_edge(edge.frm, edge.to):
                    graph.remove_edge(edge.frm, edge.to)

    def mark_path_objectives(self, player_id: int, frm: int, to: int) -> None:
        """Mark every objective on a shortest path from `frm` to `to` as reached."""
        step: Optional[int] = frm
        while step != to:
            step = shortest_path(self.server_graph, step, to)
            if step is None:
                break
            self._reach(player_id, step, " (path)")