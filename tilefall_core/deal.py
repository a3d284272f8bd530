from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from .board import Board
from .color import Color


def deal_board(rows: int, cols: int, seed: Optional[int] = None, colors: Optional[Sequence[Color]] = None) -> Board:
    """Creates a fully colored rows x cols board with uniformly random colors."""
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
    rng = random.Random(seed)
    palette: List[Color] = list(colors) if colors else list(Color)
    cells = [[rng.choice(palette) for _ in range(cols)] for _ in range(rows)]
    return Board(cells)


def parse_dims(text: str) -> Tuple[int, int]:
    """Parses 'ROWSxCOLS' (e.g. '6x8')."""
    try:
        r_s, c_s = text.lower().split('x')
        return int(r_s), int(c_s)
    except ValueError:
        raise ValueError(f"Expected ROWSxCOLS, got {text!r}")
