"""The full army a player starts the game with."""

from __future__ import annotations

from collections.abc import Iterable

from .models import PIECE_TYPES
from .piece import Piece
from .player import Player

__all__ = ["piece_list", "piece_list_strategic_value"]


def piece_list(player: Player) -> list[Piece]:
    """A fresh set of pieces for ``player``, weakest types first."""
    return [
        Piece(piece_type, player)
        for piece_type in PIECE_TYPES
        for _ in range(piece_type.count)
    ]


def piece_list_strategic_value(pieces: Iterable[Piece]) -> int:
    """The summed strategic value of ``pieces``."""
    return sum(piece.piece_type.strategic_value for piece in pieces)