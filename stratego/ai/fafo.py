"""A simple opponent that attacks what it can, advances, or moves at random."""

from __future__ import annotations

import random
from collections.abc import Iterator
from typing import Optional

from .. import models
from ..board import SIZE, Board, BoardError
from ..move import Move
from ..piece import Piece
from ..player import Player
from ..position import Position

__all__ = ["NoMovesError", "FafoAI"]


class NoMovesError(Exception):
    """Raised when the AI has no legal move to make."""


def _check(pos: Position) -> None:
    if not (0 <= pos.x < SIZE and 0 <= pos.y < SIZE):
        raise IndexError(f"position {pos.x},{pos.y} is off the board")


class FafoAI:
    """Plays for ``player`` and remembers what it has learned about the enemy."""

    def __init__(self, player: Player, rng: Optional[random.Random] = None) -> None:
        self.player = player
        self._rng = rng if rng is not None else random.Random()
        self._memory: dict[Position, Piece] = {}

    def is_piece_memorized(self, pos: Position) -> bool:
        return self.recall_piece(pos) is not None

    def pick_random_piece(self) -> Optional[Piece]:
        """One of the player's live pieces, or ``None`` if none are left."""
        pieces = self.player.alive_pieces
        if not pieces:
            return None
        return self._rng.choice(pieces)

    def make_move(self, board: Board) -> Move:
        """Choose a move: attack if sensible, else advance, else anything legal."""
        move = self._find_attack_move(board)
        if move is not None:
            return move
        move = self._find_exploration_move(board)
        if move is not None:
            return move
        return self._find_random_move(board)

    def _moves_for(
        self, board: Board, pieces: list[Piece]
    ) -> Iterator[tuple[Piece, list[Move]]]:
        for piece in pieces:
            if not piece.can_move:
                continue
            pos = self.player.piece_position(piece)
            if pos is None:
                continue
            try:
                moves = board.list_moves(pos)
            except BoardError:
                continue
            yield piece, moves

    def _shuffled_pieces(self) -> list[Piece]:
        pieces = self.player.alive_pieces
        self._rng.shuffle(pieces)
        return pieces

    def _find_attack_move(self, board: Board) -> Optional[Move]:
        for piece, moves in self._moves_for(board, self.player.alive_pieces):
            for move in moves:
                target = board[move.end]
                if target is None or target.owner is self.player:
                    continue
                if self.recall_piece(move.end) is not None or piece.rank >= target.rank:
                    return move
        return None

    def _find_exploration_move(self, board: Board) -> Optional[Move]:
        enemy_y = 9 if self.player.id == 1 else 0
        for _, moves in self._moves_for(board, self._shuffled_pieces()):
            best: Optional[Move] = None
            best_dist = 100
            for move in moves:
                if board[move.end] is not None:
                    continue
                dist = abs(move.end.y - enemy_y)
                if dist < best_dist:
                    best_dist = dist
                    best = move
            if best is not None:
                return best
        return None

    def _find_random_move(self, board: Board) -> Move:
        for _, moves in self._moves_for(board, self._shuffled_pieces()):
            if moves:
                return self._rng.choice(moves)
        raise NoMovesError("no valid moves available")

    def analyze_move(self, opponent_move: Move, opponent: Player) -> None:
        """Learn from the opponent's move: a long jump can only be a scout."""
        dx = abs(opponent_move.start.x - opponent_move.end.x)
        dy = abs(opponent_move.start.y - opponent_move.end.y)
        if dx > 1 or dy > 1:
            self.memorize_piece(opponent_move.end, Piece(models.SCOUT, opponent))

    def memorize_piece(self, pos: Position, piece: Optional[Piece]) -> None:
        _check(pos)
        if piece is None:
            self._memory.pop(pos, None)
        else:
            self._memory[pos] = piece

    def recall_piece(self, pos: Position) -> Optional[Piece]:
        _check(pos)
        return self._memory.get(pos)

    def forget_piece(self, pos: Position) -> None:
        _check(pos)
        self._memory.pop(pos, None)