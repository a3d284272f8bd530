from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

from .color import Color, EMPTY_SYMBOL
from .flood import Cells, Coord, apply_gravity, flood_clear, measure_cluster

BoardKey = Tuple[Tuple[Optional[Color], ...], ...]


@dataclass
class Board:
    """
    A rectangular grid of colored cells plus the moves applied to reach it.
    Equality compares the cells only; `moves` is bookkeeping.
    """
    cells: Cells
    moves: List[Coord] = field(default_factory=list, compare=False)

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def clone(self) -> 'Board':
        """Returns an independent copy; the two boards share no mutable state."""
        return Board([list(row) for row in self.cells], list(self.moves))

    def key(self) -> BoardKey:
        """Hashable identity of the cell contents, used to spot repeated positions."""
        return tuple(tuple(row) for row in self.cells)

    def remove(self, r: int, c: int) -> None:
        """
        Removes the cell at (r, c) together with every same-colored cell connected to it,
        then lets the remaining cells fall. Removing an empty cell only records the move.
        """
        self.moves.append((r, c))
        if flood_clear(self.cells, (r, c)):
            apply_gravity(self.cells)

    def is_solved(self) -> bool:
        return all(cell is None for row in self.cells for cell in row)

    is_empty = is_solved

    def empty_tiles(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is None)

    def valid_moves(self) -> List[Coord]:
        """Every coordinate that still holds a color, row-major."""
        return [(r, c) for (r, c) in self.coords() if self.cells[r][c] is not None]

    def clusters(self) -> List[List[Coord]]:
        """All same-color connected regions, ordered by their first cell in row-major order."""
        visited: Set[Coord] = set()
        out: List[List[Coord]] = []
        for coord in self.coords():
            region = measure_cluster(self.cells, coord, visited)
            if region:
                out.append(region)
        return out

    def largest_cluster(self) -> int:
        return max((len(region) for region in self.clusters()), default=0)

    def cluster_count(self) -> int:
        return len(self.clusters())

    def pretty(self) -> str:
        """Generates a framed, one-character-per-cell view of the board."""
        border = f"+{'-' * self.cols}+"
        lines: List[str] = [border]
        for row in self.cells:
            lines.append('|' + ''.join(' ' if cell is None else cell.symbol for cell in row) + '|')
        lines.append(border)
        return "\n".join(lines)

    def to_text(self) -> str:
        """Serializes the cells in the board-file format read by the parser."""
        return "\n".join(
            ''.join(EMPTY_SYMBOL if cell is None else cell.symbol for cell in row) for row in self.cells
        )

    def __str__(self) -> str:
        return self.pretty()
