"""Players, move kinds and the moves exchanged between players."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

NUM_PLAYERS = 2


class PlayerColor(IntEnum):
    """Colour of a player; BLACK plays first."""

    BLACK = 0
    WHITE = 1
    NO_COLOR = 2


class MoveType(IntEnum):
    """Kind of a move."""

    NO_TYPE = 0
    WALL = 1
    MOVE = 2


@dataclass(frozen=True)
class Edge:
    """A directed edge between two vertices."""

    frm: int
    to: int

    def reversed(self) -> Edge:
        """Return the same edge walked the other way."""
        return Edge(self.to, self.frm)


_NULL_EDGE = Edge(0, 0)


@dataclass(frozen=True)
class Move:
    """A move: a step to `vertex`, or a wall made of the two `edges`."""

    color: PlayerColor = PlayerColor.NO_COLOR
    type: MoveType = MoveType.NO_TYPE
    vertex: int = 0
    edges: tuple[Edge, Edge] = (_NULL_EDGE, _NULL_EDGE)