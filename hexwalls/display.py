"""Text rendering of a board: vertices, open edges, players and objectives."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from hexwalls.graph import Graph, GraphType, cyclic_coords, holey_coords, triangular_coords

RED = "\033[1;31m"
BLUE = "\033[1;34m"
GREEN = "\033[1;32m"
RESET = "\033[0m"
BOLD = "\033[1m"

GRID_W = 70
GRID_H = 25

_Grid = list[list[str]]


def cell_symbol(vertex: int, p0: int, p1: int, objectives: Iterable[Optional[int]]) -> str:
    """Symbol drawn for `vertex`: player markers first, then objectives, else a dot."""
    if vertex == p0:
        return f"{RED}B{RESET}"
    if vertex == p1:
        return f"{BLUE}W{RESET}"
    if any(o is not None and o == vertex for o in objectives):
        return f"{GREEN}*{RESET}"
    return "."


def _half(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def _screen(q: int, r: int) -> tuple[int, int]:
    return 6 * q + 3 * r + GRID_W // 2, 2 * r + GRID_H // 2


def _inside(x: int, y: int) -> bool:
    return 0 <= x < GRID_W and 0 <= y < GRID_H


def _edge_char(x: int, y: int, x2: int, y2: int) -> str:
    if x == x2:
        return "|"
    if y == y2:
        return "─"
    if (x < x2 and y < y2) or (x > x2 and y > y2):
        return "\\"
    return "/"


def _draw(
    graph: Graph,
    coords: Sequence[tuple[int, int]],
    p0: int,
    p1: int,
    objectives: Sequence[Optional[int]],
    careful: bool,
) -> _Grid:
    """Lay the board out on a character grid.

    With `careful`, a vertex does not overwrite a filled cell and edges to
    off-grid neighbours are skipped.
    """
    if graph.num_vertices > len(coords):
        raise ValueError("graph has more vertices than the board shape allows")
    grid: _Grid = [[" "] * GRID_W for _ in range(GRID_H)]

    for vertex in range(graph.num_vertices):
        x, y = _screen(*coords[vertex])
        if _inside(x, y) and (not careful or grid[y][x][0] == " "):
            grid[y][x] = cell_symbol(vertex, p0, p1, objectives)

        for pos, _ in graph.neighbors(vertex):
            if careful and pos >= graph.num_vertices:
                continue
            x2, y2 = _screen(*coords[pos])
            if careful and not _inside(x2, y2):
                continue
            xm, ym = _half(x + x2), _half(y + y2)
            if _inside(xm, ym):
                grid[ym][xm] = _edge_char(x, y, x2, y2)
    return grid


def _header(name: str, m: int) -> str:
    return f"\n{BOLD}Game state {name} (m = {m}) :{RESET}\n\n"


def _rows(grid: _Grid, skip_blank: bool) -> str:
    return "".join(
        "".join(row) + "\n"
        for row in grid
        if not skip_blank or any(cell[0] != " " for cell in row)
    )


def render_triangular(
    graph: Graph, m: int, p0: int, p1: int, objectives: Iterable[Optional[int]]
) -> str:
    """Render a full hexagonal board of side m."""
    grid = _draw(graph, triangular_coords(m), p0, p1, list(objectives), careful=True)
    return _header("TRIANGULAR", m) + _rows(grid, skip_blank=True)


def render_cyclic(
    graph: Graph, m: int, p0: int, p1: int, objectives: Iterable[Optional[int]]
) -> str:
    """Render a ring board of side m, every grid row included."""
    grid = _draw(graph, cyclic_coords(m), p0, p1, list(objectives), careful=False)
    return _header("CYCLIC", m) + _rows(grid, skip_blank=False)


def render_holey(
    graph: Graph, m: int, p0: int, p1: int, objectives: Iterable[Optional[int]]
) -> str:
    """Render a board of side m with holes."""
    grid = _draw(graph, holey_coords(m), p0, p1, list(objectives), careful=False)
    return _header("HOLEY", m) + _rows(grid, skip_blank=True)


_RENDERERS: dict[GraphType, Callable[..., str]] = {
    GraphType.TRIANGULAR: render_triangular,
    GraphType.CYCLIC: render_cyclic,
    GraphType.HOLEY: render_holey,
}


def render(graph: Graph, m: int, p0: int, p1: int, objectives: Iterable[Optional[int]]) -> str:
    """Render the board with the layout matching its shape."""
    return _RENDERERS[graph.graph_type](graph, m, p0, p1, objectives)