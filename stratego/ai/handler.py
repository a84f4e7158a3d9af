"""Drives the AI through one turn at a time."""

from __future__ import annotations

import random
from typing import Optional

from ..board import Board
from ..move import Move
from ..player import Player
from .fafo import FafoAI

__all__ = ["FafoHandler"]


class FafoHandler:
    """Feeds the opponent's moves to a :class:`FafoAI` and asks it for replies."""

    def __init__(self, player: Player, rng: Optional[random.Random] = None) -> None:
        self.ai = FafoAI(player, rng)

    def take_turn(
        self, board: Board, opponent_move: Optional[Move], opponent: Player
    ) -> Move:
        """Study the opponent's last move, if any, then return the AI's move."""
        if opponent_move is not None and opponent_move.start.x >= 0:
            self.ai.analyze_move(opponent_move, opponent)
        return self.ai.make_move(board)