# hexwalls

hexwalls is a two-player game on a hexagonal board. Each player starts on
their own start cell. A player wins by reaching every objective cell and
then getting back to their start cell. On each turn a player either moves
or places a wall. A wall blocks two edges around one cell. The server
refuses a wall if, once it is in place, either player can no longer reach
any of their remaining objectives. A refused wall is ignored.

Movement carries momentum. A piece always moves at least one cell. It can
move up to three cells when it keeps the direction of its previous move,
and up to two cells when it turns by one step. A piece can also jump over
an adjacent opponent.

## Boards

- **Triangular** (`T`): a full hexagon of side `m`.
- **Cyclic** (`C`): the two outer rings of the hexagon, which form a loop.
- **Holey** (`H`): the full hexagon with seven hexagonal holes cut out.

Each board gets four objectives. Two are drawn at random in the first half
of the vertex numbering, and the other two mirror them in the second half.

## Installation

```
pip install .
```

## Running a game

```
hexwalls [-m size] [-t type] [-M max_turns] PLAYER1 PLAYER2
```

- `-m size`: the side length of the board. The default is 6.
- `-t type`: the board type, `T`, `C` or `H`. The default is `T`.
- `-M max_turns`: stop after this many turns. The default is 0, meaning no limit.
- `PLAYER1`, `PLAYER2`: names of built-in players, either `wall-builder` or `greedy`.

The server picks at random which player moves first. After every turn it
prints the move, draws the board as text, and lists the objectives each
player still has to reach. The game ends in one of three ways: a player
wins, a player returns an empty move, or the turn limit is reached.

## Players

- `greedy` (`GreedyPlayer`): moves to the reachable cell that is closest
  to its nearest objective.
- `wall-builder` (`WallBuilderPlayer`): when the opponent is close to its
  target, places a wall that lengthens the opponent's path by at least two
  steps. Otherwise it moves so as to collect as many objectives as it can
  on the way.

New players subclass `hexwalls.players.Player` and implement `_decide`. To
play them, pass them to `hexwalls.server.run_game`.

## Using the library

```python
import random

from hexwalls.display import render
from hexwalls.graph import Direction, Graph, GraphType
from hexwalls.rules import compute_valid_moves

rng = random.Random(1)
graph = Graph.create(GraphType.TRIANGULAR, 4, rng)
print(render(graph, 4, graph.start[0], graph.start[1], graph.objectives))

for step in compute_valid_moves(graph, graph.start[0], Direction.NO_EDGE, None):
    print(step.pos, step.dir.name)
```

The modules are:

- `hexwalls.moves`: player colours, move types, edges and moves.
- `hexwalls.graph`: directions, board generation, and editing edges and walls.
- `hexwalls.rules`: legal moves, jumps, wall legality and breadth-first searches.
- `hexwalls.pathing`: distances, A* paths and candidate walls.
- `hexwalls.board`: the state the server keeps, with a separate graph and
  objective list for each player.
- `hexwalls.display`: draws a board as text.
- `hexwalls.players`: the `Player` base class, the two built-in players
  and `get_player`.
- `hexwalls.server`: argument parsing, `run_game`, and the `hexwalls` command.

## Limitations

The `hexwalls` command can only run the built-in players, chosen by name.
It cannot load players from separate files or programs.

## Tests

```
pip install .[test]
pytest
```