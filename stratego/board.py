"""The 10x10 playing field with its two lakes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from .move import Move
from .piece import Piece
from .position import Position

__all__ = ["SIZE", "BoardError", "Board"]

SIZE = 10

_LAKES = frozenset(
    {
        Position(2, 4),
        Position(3, 4),
        Position(2, 5),
        Position(3, 5),
        Position(6, 4),
        Position(7, 4),
        Position(6, 5),
        Position(7, 5),
    }
)

_DIRECTIONS = (
    Position(0, -1),  # up
    Position(0, 1),  # down
    Position(-1, 0),  # left
    Position(1, 0),  # right
)


class BoardError(Exception):
    """Raised when an operation on the board cannot be carried out."""


def _on_board(pos: Position) -> bool:
    return 0 <= pos.x < SIZE and 0 <= pos.y < SIZE


class Board:
    """A square grid of optional pieces; lakes can never be entered."""

    def __init__(self) -> None:
        self._field: list[list[Optional[Piece]]] = [
            [None] * SIZE for _ in range(SIZE)
        ]
        self.lakes: frozenset[Position] = _LAKES

    @staticmethod
    def _check(pos: Position) -> None:
        if not _on_board(pos):
            raise IndexError(f"position {pos.x},{pos.y} is off the board")

    def __getitem__(self, pos: Position) -> Optional[Piece]:
        self._check(pos)
        return self._field[pos.y][pos.x]

    def __setitem__(self, pos: Position, piece: Optional[Piece]) -> None:
        self._check(pos)
        self._field[pos.y][pos.x] = piece

    def is_lake(self, pos: Position) -> bool:
        return pos in self.lakes

    def is_valid_move(self, move: Move) -> bool:
        """Whether the destination is on the board, dry and not friendly."""
        if not _on_board(move.end) or self.is_lake(move.end):
            return False
        target = self[move.end]
        mover = self[move.start] if _on_board(move.start) else None
        if target is not None and mover is not None and target.owner is mover.owner:
            return False
        return True

    def swap_pieces(self, pos1: Position, pos2: Position) -> None:
        first, second = self[pos1], self[pos2]
        if first is None or second is None:
            raise BoardError("one or both positions are empty")
        self[pos1], self[pos2] = second, first

    def remove_piece_at(self, pos: Position) -> None:
        """Clear a square holding a piece that has been eliminated."""
        piece = self[pos]
        if piece is None:
            raise BoardError("no piece at the given position to remove")
        if piece.alive:
            raise BoardError("cannot remove a piece that is still alive")
        self[pos] = None

    def move_piece(self, move: Move, piece: Optional[Piece]) -> None:
        self[move.start] = None
        self[move.end] = piece

    def list_moves(self, pos: Position) -> list[Move]:
        """All legal moves for the piece standing at ``pos``."""
        piece = self[pos]
        if piece is None or not piece.can_move:
            raise BoardError("no movable piece at the given position")
        if piece.piece_type.name == "Scout":
            return list(self._scout_moves(pos))
        return list(self._standard_moves(pos))

    def _scout_moves(self, pos: Position) -> Iterator[Move]:
        for direction in _DIRECTIONS:
            for step in range(1, SIZE):
                target = Position(pos.x + direction.x * step, pos.y + direction.y * step)
                move = Move(pos, target)
                if not self.is_valid_move(move):
                    break
                yield move
                if self[target] is not None:
                    break

    def _standard_moves(self, pos: Position) -> Iterator[Move]:
        for direction in _DIRECTIONS:
            move = Move(pos, Position(pos.x + direction.x, pos.y + direction.y))
            if self.is_valid_move(move):
                yield move

    def _cell(self, pos: Position) -> str:
        piece = self[pos]
        if piece is not None:
            return f" {piece.piece_type.icon} "
        return " ~~ " if self.is_lake(pos) else " .. "

    def __str__(self) -> str:
        return "".join(
            "".join(self._cell(Position(x, y)) for x in range(SIZE)) + "\n"
            for y in range(SIZE)
        )