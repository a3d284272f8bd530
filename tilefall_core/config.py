from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_MAX_DEPTH = 40
DEFAULT_BEAM_WIDTH = 50


def _env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def debug_enabled() -> bool:
    """Set TILEFALL_DEBUG=1 to print search traces."""
    return _env_flag('TILEFALL_DEBUG')


@dataclass(frozen=True)
class SolverSettings:
    """Search limits. Environment variables provide defaults; explicit values win."""
    max_depth: int = DEFAULT_MAX_DEPTH
    beam_width: int = DEFAULT_BEAM_WIDTH

    @classmethod
    def from_env(cls, max_depth: Optional[int] = None, beam_width: Optional[int] = None) -> 'SolverSettings':
        return cls(
            max_depth=max_depth if max_depth is not None else _env_int('TILEFALL_MAX_DEPTH', DEFAULT_MAX_DEPTH),
            beam_width=beam_width if beam_width is not None else _env_int('TILEFALL_BEAM_WIDTH', DEFAULT_BEAM_WIDTH),
        )
