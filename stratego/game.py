"""Turn order, moves and combat resolution for a two-player game."""

from __future__ import annotations

from typing import Optional

from .board import SIZE, Board
from .move import Move
from .piece import Piece
from .player import Player
from .position import Position

__all__ = ["Game"]


class Game:
    """A game between two players on a fresh board."""

    def __init__(self, player1: Player, player2: Player) -> None:
        self.players: list[Player] = [player1, player2]
        self.board = Board()
        self.current_player: Player = player1
        self.move_history: list[Move] = []
        self.round = 1
        self.winner: Optional[Player] = None

    def next_turn(self) -> None:
        """Record a winner if there is one, otherwise pass the turn."""
        first, second = self.players
        if first.has_won:
            self.winner = first
        elif second.has_won:
            self.winner = second
        elif self.current_player is first:
            self.current_player = second
        else:
            self.current_player = first
            self.round += 1

    def make_move(
        self, move: Move, piece: Piece
    ) -> tuple[Piece, Optional[Piece]]:
        """Carry out ``move`` with ``piece``, fighting any piece in the way.

        Returns the moving piece and the piece it met, if any.
        """
        target = self.board[move.end]
        if target is not None:
            piece, target = piece.attack(target)
        if target is not None and not piece.alive:
            self.board.remove_piece_at(move.start)
            if not target.alive:
                self.board.remove_piece_at(move.end)
        else:
            self.board.move_piece(move, piece)
            piece.owner.update_piece_position(piece, move.end)
        self.move_history.append(move)
        self.next_turn()
        return piece, target

    def initialize_pieces(self) -> None:
        """Register every piece on the board with its owner."""
        for y in range(SIZE):
            for x in range(SIZE):
                pos = Position(x, y)
                piece = self.board[pos]
                if piece is not None:
                    piece.owner.add_piece(piece, pos)