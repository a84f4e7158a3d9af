"""A single move from one square to another."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .position import Position

if TYPE_CHECKING:
    from .player import Player

__all__ = ["Move"]


@dataclass(frozen=True)
class Move:
    """A move of a piece from ``start`` to ``end``, made by ``player``."""

    start: Position
    end: Position
    player: Optional["Player"] = None

    def __str__(self) -> str:
        return f"{self.start} -> {self.end}"