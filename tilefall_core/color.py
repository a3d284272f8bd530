from __future__ import annotations

from enum import Enum
from typing import Optional


class Color(Enum):
    """Tile colors. Each value is the single character used in board files."""
    ORANGE = 'O'
    PINK = 'P'
    BLUE = 'B'
    GREEN = 'G'

    @property
    def symbol(self) -> str:
        return self.value


EMPTY_SYMBOL = '.'


def color_from_char(ch: str) -> Optional[Color]:
    """Maps a board-file character to a color. '.' is an empty cell; anything else raises ValueError."""
    if ch == EMPTY_SYMBOL:
        return None
    return Color(ch)
