from __future__ import annotations

from typing import List, Optional, Sequence, Set, Tuple

from .color import Color

Coord = Tuple[int, int]
Cells = List[List[Optional[Color]]]


def neighbors(cells: Sequence[Sequence[Optional[Color]]], coord: Coord) -> List[Coord]:
    """Gets the in-bounds orthogonal neighbors of a coordinate (no wrap-around)."""
    r, c = coord
    height = len(cells)
    width = len(cells[0]) if height else 0
    out: List[Coord] = []
    if r > 0:
        out.append((r - 1, c))
    if r + 1 < height:
        out.append((r + 1, c))
    if c > 0:
        out.append((r, c - 1))
    if c + 1 < width:
        out.append((r, c + 1))
    return out


def flood_clear(cells: Cells, start: Coord) -> int:
    """
    Clears the same-color region containing `start` in place and returns the number of cells cleared.
    A cell is cleared as soon as it is visited, so clearing doubles as the visited marker.
    """
    r0, c0 = start
    color = cells[r0][c0]
    if color is None:
        return 0
    cells[r0][c0] = None
    cleared = 1
    stack: List[Coord] = [start]
    while stack:
        current = stack.pop()
        for nr, nc in neighbors(cells, current):
            if cells[nr][nc] == color:
                cells[nr][nc] = None
                cleared += 1
                stack.append((nr, nc))
    return cleared


def apply_gravity(cells: Cells) -> None:
    """Shifts every colored cell down over the empty cells below it, column by column."""
    height = len(cells)
    if not height:
        return
    for c in range(len(cells[0])):
        empty = 0
        for r in range(height - 1, -1, -1):
            if cells[r][c] is None:
                empty += 1
            elif empty > 0:
                cells[r + empty][c] = cells[r][c]
                cells[r][c] = None


def measure_cluster(cells: Sequence[Sequence[Optional[Color]]], start: Coord, visited: Set[Coord]) -> List[Coord]:
    """
    Collects the same-color region containing `start` without touching the cells.
    Every coordinate collected is added to `visited`.
    """
    r0, c0 = start
    color = cells[r0][c0]
    if color is None or start in visited:
        return []
    visited.add(start)
    region: List[Coord] = [start]
    stack: List[Coord] = [start]
    while stack:
        current = stack.pop()
        for nxt in neighbors(cells, current):
            if nxt in visited or cells[nxt[0]][nxt[1]] != color:
                continue
            visited.add(nxt)
            region.append(nxt)
            stack.append(nxt)
    return region
