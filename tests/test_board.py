import random

from hexwalls.board import Board
from hexwalls.graph import GraphType
from hexwalls.moves import Edge, Move, MoveType, PlayerColor


def make_board(first_player=0, m=3, seed=3):
    return Board(GraphType.TRIANGULAR, m, first_player, random.Random(seed))


def test_starts_follow_first_player():
    board = make_board(first_player=0)
    base = board.server_graph
    assert board.start == (base.start[0], base.start[1])
    swapped = make_board(first_player=1)
    assert swapped.start == (swapped.server_graph.start[1], swapped.server_graph.start[0])


def test_positions_begin_at_start():
    board = make_board()
    assert tuple(board.positions) == board.start


def test_objectives_copied_from_graph():
    board = make_board()
    base = board.server_graph.objectives
    assert board.objectives[0] == base
    assert board.objectives[1] == base
    assert list(board.display_objectives) == base
    assert board.num_objectives == len(base)


def test_player_graphs_are_independent_copies():
    board = make_board()
    board.graphs[0].remove_edge(0, 1)
    assert not board.graphs[0].has_edge(0, 1)
    assert board.graphs[1].has_edge(0, 1)
    assert board.server_graph.has_edge(0, 1)


def test_same_seed_gives_same_objectives():
    first = make_board(seed=11)
    second = make_board(seed=11)
    objectives = list(first.display_objectives)
    assert objectives == list(second.display_objectives)
    size = first.server_graph.num_vertices
    assert len(objectives) == 4
    half = len(objectives) // 2
    for i in range(half):
        assert 0 <= objectives[i] < size // 2
        assert objectives[i + half] == size - objectives[i] - 1


def test_mark_objective_reached(capsys):
    board = make_board()
    target = board.objectives[0][0]
    board.mark_objective_reached(0, target)
    assert target not in board.objectives[0]
    assert target in board.objectives[1]
    assert target in board.display_objectives
    assert f"player 0 reached {target}" in capsys.readouterr().out


def test_mark_objective_not_an_objective_changes_nothing():
    board = make_board()
    before = [list(o) for o in board.objectives]
    outside = next(v for v in range(board.server_graph.num_vertices)
                   if v not in board.display_objectives)
    board.mark_objective_reached(1, outside)
    assert board.objectives == before


def test_remaining_objectives():
    board = make_board()
    first = board.objectives[1][0]
    board.objectives[1][0] = None
    remaining = board.remaining_objectives(1)
    assert remaining == [o for o in board.display_objectives[1:] if o is not None]
    assert len(remaining) == board.num_objectives - 1 or first in remaining


def test_add_walls_ignores_out_of_range_edges():
    board = make_board()
    size = board.server_graph.num_vertices
    move = Move(PlayerColor.WHITE, MoveType.WALL, 0, (Edge(0, size), Edge(0, 1)))
    board.add_walls(1, move)
    assert not board.server_graph.has_edge(0, 1)
    assert len(board.server_graph.neighbors(0)) == len(board.graphs[0].neighbors(0))


def test_mark_path_objectives(capsys):
    board = make_board()
    board.objectives[0] = [1, 2, 5, None]
    board.mark_path_objectives(0, 0, 2)
    assert board.objectives[0] == [None, None, 5, None]
    out = capsys.readouterr().out
    assert "(path)" in out


def test_mark_path_objectives_blocked_path_stops():
    board = make_board()
    goal = board.server_graph.num_vertices - 1
    for pos, _ in board.server_graph.neighbors(goal):
        board.server_graph.remove_edge(goal, pos)
    board.objectives[0] = [goal]
    board.mark_path_objectives(0, 0, goal)
    assert board.objectives[0] == [goal]