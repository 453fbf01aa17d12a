"""Game server: reads the options, runs two players against each other, reports the winner."""

from __future__ import annotations

import getopt
import random
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from hexwalls.board import Board
from hexwalls.display import render
from hexwalls.graph import GraphType
from hexwalls.moves import NUM_PLAYERS, Move, MoveType, PlayerColor
from hexwalls.players import Player, get_player
from hexwalls.rules import PlayerInfo, has_path_to_objectives, has_won

PROGRAM_NAME = "hexwalls"
DEFAULT_SIZE = 6
_TYPE_CODES = {"T": GraphType.TRIANGULAR, "C": GraphType.CYCLIC, "H": GraphType.HOLEY}


@dataclass(frozen=True)
class GameOptions:
    """Settings of a game; `max_turns` of 0 means no limit."""

    player1: str
    player2: str
    graph_type: GraphType = GraphType.TRIANGULAR
    m: int = DEFAULT_SIZE
    max_turns: int = 0


@dataclass
class GameResult:
    """Outcome of a game: the winner (None if the turn limit ended it) and moves played."""

    winner: Optional[int]
    turns: int
    board: Board


def usage(progname: str = PROGRAM_NAME) -> str:
    """The command line summary."""
    return f"Usage: {progname} [-m size] [-t type] [-M max_turns] player1 player2"


def _to_int(flag: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"option {flag} expects an integer, got {value!r}") from None


def parse_arguments(argv: Sequence[str]) -> GameOptions:
    """Read the command-line arguments; raise ValueError when they are wrong."""
    try:
        opts, rest = getopt.gnu_getopt(list(argv), "m:t:M:")
    except getopt.GetoptError as err:
        raise ValueError(str(err)) from None

    graph_type = GraphType.TRIANGULAR
    m = DEFAULT_SIZE
    max_turns = 0
    for flag, value in opts:
        if flag == "-m":
            m = _to_int(flag, value)
        elif flag == "-t":
            if value not in _TYPE_CODES:
                raise ValueError(f"Invalid graph type: {value}")
            graph_type = _TYPE_CODES[value]
        elif flag == "-M":
            max_turns = _to_int(flag, value)

    if len(rest) != 2:
        raise ValueError("exactly two players are expected")
    return GameOptions(rest[0], rest[1], graph_type, m, max_turns)


def is_invalid(move: Move) -> bool:
    """Whether the move is empty, which ends the game."""
    return move.type == MoveType.NO_TYPE


def _describe(turn: int, player: int, move: Move) -> str:
    if move.type == MoveType.MOVE:
        return f"[SERVER] Turn {turn}: player {player} played MOVE to {move.vertex}"
    if move.type == MoveType.WALL:
        a, b = move.edges
        return (
            f"[SERVER] Turn {turn}: player {player} played WALL between "
            f"[{a.frm}-{a.to}] and [{b.frm}-{b.to}]"
        )
    return f"[SERVER] Turn {turn}: player {player} passed (NO_TYPE)"


def _wall_keeps_paths(board: Board, move: Move) -> bool:
    trial = board.server_graph.copy()
    for edge in move.edges:
        trial.remove_edge(edge.frm, edge.to)
    return all(
        has_path_to_objectives(trial, board.positions[pid], board.objectives[pid])
        for pid in range(NUM_PLAYERS)
    )


def _apply(board: Board, player: int, move: Move, out: TextIO) -> None:
    if move.type == MoveType.WALL:
        if _wall_keeps_paths(board, move):
            print("[SERVER] The wall is valid, applying it.", file=out)
            board.add_walls(player, move)
        else:
            print("[SERVER] Illegal wall, ignored.", file=out)
    elif move.type == MoveType.MOVE:
        old = board.positions[player]
        board.positions[player] = move.vertex
        board.mark_path_objectives(player, old, move.vertex)


def _report(board: Board, m: int, out: TextIO) -> None:
    p0, p1 = board.positions
    out.write(render(board.graphs[0], m, p0, p1, board.display_objectives))
    print("\nRemaining objectives:", file=out)
    for pid in range(NUM_PLAYERS):
        name = PlayerColor(pid).name
        left = "".join(f" {o}" for o in board.remaining_objectives(pid))
        print(f"  Player {pid} ({name}):{left}", file=out)


def run_game(
    options: GameOptions,
    players: Sequence[Player],
    rng: Optional[random.Random] = None,
    out: Optional[TextIO] = None,
) -> GameResult:
    """Play a whole game between the two players and return its outcome."""
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout
    if len(players) != NUM_PLAYERS:
        raise ValueError(f"a game needs exactly {NUM_PLAYERS} players")

    first_player = rng.randrange(NUM_PLAYERS)
    board = Board(options.graph_type, options.m, first_player, rng)
    for i, player in enumerate(players):
        color = PlayerColor.BLACK if i == first_player else PlayerColor.WHITE
        player.initialize(color, board.graphs[i])

    move = Move(color=PlayerColor.NO_COLOR, type=MoveType.NO_TYPE)
    current = first_player
    turn = 0
    winner: Optional[int] = None
    played = 0
    try:
        while True:
            if options.max_turns > 0 and turn >= options.max_turns:
                print(f"Maximum number of turns reached ({options.max_turns}).", file=out)
                played = turn
                break

            move = players[current].play(move)
            print(_describe(turn, current, move), file=out)
            _apply(board, current, move, out)
            _report(board, options.m, out)

            info = PlayerInfo(
                graph=board.graphs[current],
                start=board.start[current],
                current=board.positions[current],
                objectives=list(board.objectives[current]),
            )
            if is_invalid(move) or has_won(info):
                print(f"Player {current} wins!", file=out)
                winner = current
                played = turn + 1
                break

            current = 1 - current
            turn += 1
    finally:
        for player in players:
            player.finalize()

    print("Game over.", file=out)
    return GameResult(winner=winner, turns=played, board=board)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_arguments(args)
    except ValueError as err:
        print(err, file=sys.stderr)
        print(usage(), file=sys.stderr)
        return 1

    players = []
    for name in (options.player1, options.player2):
        try:
            players.append(get_player(name))
        except ValueError as err:
            print(err, file=sys.stderr)
            return 1
        print(f"Player '{name}' loaded successfully!")

    try:
        run_game(options, players)
    except ValueError as err:
        print(f"error while creating the board: {err}", file=sys.stderr)
        return 1
    return 0