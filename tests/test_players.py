import random

import pytest

from hexwalls.graph import Direction, Graph, GraphType
from hexwalls.moves import Edge, Move, MoveType, PlayerColor
from hexwalls.players import GreedyPlayer, WallBuilderPlayer, get_player
from hexwalls.rules import compute_valid_moves


def _graph(m=3, seed=1):
    return Graph.create(GraphType.TRIANGULAR, m, random.Random(seed))


@pytest.mark.parametrize("cls", [GreedyPlayer, WallBuilderPlayer])
def test_initialize_sets_state(cls):
    graph = _graph()
    player = cls()
    player.initialize(1, graph)
    info = player.info
    assert info.color == PlayerColor.WHITE
    assert info.start == graph.start[1]
    assert info.current == info.start
    assert info.objectives == graph.objectives
    assert info.last_opponent is None
    assert info.last_dir == Direction.NO_EDGE
    assert info.num_walls == 3


@pytest.mark.parametrize("cls", [GreedyPlayer, WallBuilderPlayer])
def test_player_zero_is_black(cls):
    player = cls()
    player.initialize(0, _graph())
    assert player.info.color == PlayerColor.BLACK


@pytest.mark.parametrize("cls", [GreedyPlayer, WallBuilderPlayer])
def test_play_before_initialize_raises(cls):
    with pytest.raises(RuntimeError):
        cls().play(Move())


@pytest.mark.parametrize("cls", [GreedyPlayer, WallBuilderPlayer])
def test_play_after_finalize_raises(cls):
    player = cls()
    player.initialize(0, _graph())
    player.finalize()
    with pytest.raises(RuntimeError):
        player.play(Move())


@pytest.mark.parametrize("cls", [GreedyPlayer, WallBuilderPlayer])
def test_first_move_is_a_valid_step(cls):
    graph = _graph(m=6, seed=7)
    player = cls()
    player.initialize(0, graph)
    start = player.info.current
    valid = {p for p, _ in compute_valid_moves(graph, start, Direction.NO_EDGE, None)}
    move = player.play(Move())
    assert move.type == MoveType.MOVE
    assert move.color == PlayerColor.BLACK
    assert move.vertex in valid
    assert move.vertex != start
    assert player.info.current == move.vertex


@pytest.mark.parametrize("cls", [GreedyPlayer, WallBuilderPlayer])
def test_adjacent_objective_is_taken(cls):
    graph = _graph()
    target = graph.neighbors(0)[-1].pos
    graph.objectives = [target, graph.num_vertices - target - 1]
    player = cls()
    player.initialize(0, graph)
    move = player.play(Move())
    assert move.vertex == target
    assert player.info.objectives[0] is None
    assert player.info.objectives[1] == graph.num_vertices - target - 1
    assert player.info.last_dir == graph.direction(0, target)


def test_opponent_wall_is_applied_to_own_graph():
    graph = _graph(m=4, seed=3)
    center = max(range(graph.num_vertices), key=lambda v: len(graph.neighbors(v)))
    a, b = (n.pos for n in graph.neighbors(center)[:2])
    player = GreedyPlayer()
    player.initialize(0, graph)
    wall = Move(
        color=PlayerColor.WHITE,
        type=MoveType.WALL,
        vertex=0,
        edges=(Edge(center, a), Edge(center, b)),
    )
    player.play(wall)
    assert not graph.has_edge(center, a)
    assert not graph.has_edge(a, center)
    assert not graph.has_edge(center, b)
    assert player.info.last_opponent == 0


def test_own_color_move_is_ignored():
    graph = _graph(m=4, seed=3)
    first = graph.neighbors(5)[0].pos
    second = graph.neighbors(5)[1].pos
    player = GreedyPlayer()
    player.initialize(0, graph)
    mine = Move(
        color=PlayerColor.BLACK,
        type=MoveType.WALL,
        vertex=5,
        edges=(Edge(5, first), Edge(5, second)),
    )
    player.play(mine)
    assert graph.has_edge(5, first)
    assert graph.has_edge(5, second)
    assert player.info.last_opponent is None


def test_opponent_move_records_position():
    graph = _graph(m=6, seed=2)
    player = WallBuilderPlayer()
    player.initialize(1, graph)
    opponent_at = graph.start[0]
    move = player.play(Move(color=PlayerColor.BLACK, type=MoveType.MOVE, vertex=opponent_at))
    assert player.info.last_opponent == opponent_at
    assert move.color == PlayerColor.WHITE


def test_wall_builder_blocks_cornered_opponent():
    graph = _graph()
    graph.objectives = [15, 3]
    player = WallBuilderPlayer()
    player.initialize(1, graph)
    walls_before = player.info.num_walls
    move = player.play(Move(color=PlayerColor.BLACK, type=MoveType.MOVE, vertex=0))
    assert move.type == MoveType.WALL
    assert set(move.edges) == {Edge(0, 4), Edge(0, 3)}
    assert all(edge.frm == 0 for edge in move.edges)
    assert not any(graph.has_edge(e.frm, e.to) for e in move.edges)
    assert player.info.num_walls == walls_before - 1
    assert player.info.current == player.info.start


@pytest.mark.parametrize("name, cls", [("greedy", GreedyPlayer), ("wall-builder", WallBuilderPlayer)])
def test_get_player_by_name(name, cls):
    player = get_player(name)
    assert isinstance(player, cls)
    assert player.name == name


def test_get_player_unknown_name():
    with pytest.raises(ValueError):
        get_player("nobody")


def test_get_player_returns_fresh_instances():
    first = get_player("greedy")
    second = get_player("greedy")
    first.initialize(0, _graph())
    assert first is not second
    with pytest.raises(RuntimeError):
        second.play(Move())