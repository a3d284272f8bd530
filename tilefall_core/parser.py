from __future__ import annotations

from typing import List, Optional

from .board import Board, Coord
from .color import Color, color_from_char


class ParseError(ValueError):
    """Raised for malformed board or move text."""


def parse_board(text: str) -> Board:
    """
    Parses a board file: one line per row, 'O', 'P', 'B', 'G' for colors and '.' for an empty cell.
    Rows must all have the same length. Trailing blank lines are ignored.
    """
    lines = text.rstrip('\r\n').splitlines()
    lines = [line.rstrip('\r') for line in lines]
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise ParseError("Board is empty")

    cells: List[List[Optional[Color]]] = []
    for r, line in enumerate(lines):
        row: List[Optional[Color]] = []
        for c, ch in enumerate(line):
            try:
                row.append(color_from_char(ch))
            except ValueError:
                raise ParseError(f"Invalid character at ({r}, {c}): {ch}")
        cells.append(row)

    width = len(cells[0])
    if width == 0:
        raise ParseError("Row 0 is empty")
    for r, row in enumerate(cells):
        if len(row) != width:
            raise ParseError(f"Row {r} has length {len(row)}, expected {width}")
    return Board(cells)


def parse_coord(text: str) -> Coord:
    """Parses 'r,c' or 'r c' into a coordinate."""
    sep = ',' if ',' in text else ' '
    parts = [t.strip() for t in text.strip().split(sep) if t.strip() != '']
    if len(parts) != 2:
        raise ParseError(f"Invalid move format: {text.strip()!r}")
    r_s, c_s = parts
    try:
        r = int(r_s)
    except ValueError:
        raise ParseError(f"Invalid row: {r_s!r}")
    try:
        c = int(c_s)
    except ValueError:
        raise ParseError(f"Invalid col: {c_s!r}")
    return (r, c)


def parse_moves(text: str) -> List[Coord]:
    """Parses a move file with one 'row,col' per line. Blank lines are skipped."""
    moves: List[Coord] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        if line.count(',') != 1:
            raise ParseError(f"Invalid move format: {line.strip()!r}")
        moves.append(parse_coord(line))
    return moves
