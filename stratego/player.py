"""Players and the pieces they still have on the board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .position import Position

if TYPE_CHECKING:
    from .piece import Piece

__all__ = ["Player"]


@dataclass(eq=False)
class Player:
    """A participant in the game, tracking score and live pieces."""

    id: int
    name: str
    avatar: str
    piece_score: int = 0
    won: bool = False
    _alive_pieces: list["Piece"] = field(default_factory=list, init=False, repr=False)
    _positions: dict["Piece", Position] = field(
        default_factory=dict, init=False, repr=False
    )

    @property
    def has_won(self) -> bool:
        return self.won

    def set_winner(self) -> None:
        self.won = True

    @property
    def alive_pieces(self) -> list["Piece"]:
        """The pieces this player still has, in the order they were added."""
        return list(self._alive_pieces)

    def update_piece_score(self, eliminated_piece: "Piece") -> None:
        """Subtract an eliminated piece's value and stop tracking it."""
        self.piece_score -= eliminated_piece.strategic_value
        self.remove_piece(eliminated_piece)

    def reset_piece_score(self) -> None:
        self.piece_score = 0

    def initialize_piece_score(self, initial_score: int) -> None:
        self.piece_score = initial_score

    def add_piece(self, piece: "Piece", pos: Position) -> None:
        self._alive_pieces.append(piece)
        self._positions[piece] = pos

    def remove_piece(self, piece: "Piece") -> None:
        for index, candidate in enumerate(self._alive_pieces):
            if candidate is piece:
                del self._alive_pieces[index]
                break
        self._positions.pop(piece, None)

    def update_piece_position(self, piece: "Piece", new_pos: Position) -> None:
        self._positions[piece] = new_pos

    def piece_position(self, piece: "Piece") -> Optional[Position]:
        """Where the piece stands, or ``None`` if it is not tracked."""
        return self._positions.get(piece)