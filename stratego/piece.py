"""Pieces on the board and the rules of combat between them."""

from __future__ import annotations

from dataclasses import dataclass

from . import models
from .models import PieceType
from .player import Player

__all__ = ["Piece"]


@dataclass(eq=False)
class Piece:
    """One piece owned by a player; alive and hidden when created."""

    piece_type: PieceType
    owner: Player
    alive: bool = True
    revealed: bool = False

    @property
    def rank(self) -> str:
        return self.piece_type.rank

    @property
    def strategic_value(self) -> int:
        return self.piece_type.strategic_value

    @property
    def can_move(self) -> bool:
        return self.piece_type.movable

    def reveal(self) -> None:
        self.revealed = True

    def eliminate(self) -> None:
        """Mark the piece dead and deduct it from its owner's score."""
        self.alive = False
        self.owner.update_piece_score(self)

    def attack(self, target: "Piece") -> tuple["Piece", "Piece"]:
        """Fight ``target`` and return the attacker and target afterwards.

        Capturing the flag wins the game; a spy beats a marshal; a bomb
        destroys any attacker but a miner; otherwise the higher rank wins
        and equal ranks destroy each other.
        """
        if target.rank == models.FLAG.rank:
            target.eliminate()
            self.owner.set_winner()
        elif self.rank == models.SPY.rank and target.rank == models.MARSHAL.rank:
            target.eliminate()
        elif target.rank == models.BOMB.rank:
            if self.rank == models.MINER.rank:
                target.eliminate()
            else:
                self.eliminate()
        elif self.rank > target.rank:
            target.eliminate()
        elif self.rank < target.rank:
            self.eliminate()
        else:
            self.eliminate()
            target.eliminate()
        return self, target