import pytest

from stratego import models
from stratego.board import Board, BoardError
from stratego.move import Move
from stratego.piece import Piece
from stratego.player import Player
from stratego.position import Position

LAKES = [
    Position(2, 4), Position(3, 4), Position(2, 5), Position(3, 5),
    Position(6, 4), Position(7, 4), Position(6, 5), Position(7, 5),
]


@pytest.fixture
def player():
    return Player(1, "Alice", "red")


@pytest.fixture
def board():
    return Board()


def test_new_board_lakes(board):
    assert all(board.is_lake(pos) for pos in LAKES)
    assert not board.is_lake(Position(0, 0))


def test_new_board_is_empty(board):
    assert all(board[Position(x, y)] is None for x in range(10) for y in range(10))


def test_set_and_get_piece_at(board, player):
    piece = Piece(models.MARSHAL, player)
    board[Position(0, 0)] = piece
    assert board[Position(0, 0)] is piece


def test_get_piece_at(board, player):
    piece = Piece(models.MARSHAL, player)
    board[Position(1, 1)] = piece
    assert board[Position(1, 1)] is piece


def test_get_off_board_raises(board):
    with pytest.raises(IndexError):
        board[Position(10, 0)]


def test_is_lake(board):
    assert board.is_lake(Position(2, 4))


def test_is_valid_move(board, player):
    board[Position(0, 0)] = Piece(models.MARSHAL, player)
    assert board.is_valid_move(Move(Position(0, 0), Position(0, 1), player))
    assert not board.is_valid_move(Move(Position(0, 0), Position(2, 4), player))


def test_invalid_move_outside_field(board, player):
    board[Position(0, 0)] = Piece(models.MARSHAL, player)
    assert not board.is_valid_move(Move(Position(0, 0), Position(10, 10), player))


def test_invalid_move_into_lake(board, player):
    board[Position(1, 4)] = Piece(models.MARSHAL, player)
    assert not board.is_valid_move(Move(Position(1, 4), Position(2, 4), player))


def test_invalid_move_to_team_piece(board, player):
    board[Position(0, 0)] = Piece(models.MARSHAL, player)
    board[Position(0, 1)] = Piece(models.GENERAL, player)
    assert not board.is_valid_move(Move(Position(0, 0), Position(0, 1), player))


def test_valid_move_to_enemy_piece(board, player):
    enemy = Player(2, "Bob", "blue")
    board[Position(0, 0)] = Piece(models.MARSHAL, player)
    board[Position(0, 1)] = Piece(models.GENERAL, enemy)
    assert board.is_valid_move(Move(Position(0, 0), Position(0, 1), player))


def test_swap_pieces(board, player):
    piece1 = Piece(models.MARSHAL, player)
    piece2 = Piece(models.GENERAL, player)
    board[Position(0, 0)] = piece1
    board[Position(0, 1)] = piece2
    board.swap_pieces(Position(0, 0), Position(0, 1))
    assert board[Position(0, 0)] is piece2
    assert board[Position(0, 1)] is piece1


def test_swap_pieces_invalid_position(board, player):
    board[Position(0, 0)] = Piece(models.MARSHAL, player)
    with pytest.raises(BoardError):
        board.swap_pieces(Position(0, 0), Position(0, 1))


def test_remove_piece_at(board, player):
    piece = Piece(models.MARSHAL, player)
    board[Position(0, 0)] = piece
    piece.eliminate()
    board.remove_piece_at(Position(0, 0))
    assert board[Position(0, 0)] is None


def test_remove_piece_that_doesnt_exist(board):
    with pytest.raises(BoardError):
        board.remove_piece_at(Position(0, 0))


def test_remove_alive_piece(board, player):
    piece = Piece(models.MARSHAL, player)
    board[Position(0, 0)] = piece
    with pytest.raises(BoardError):
        board.remove_piece_at(Position(0, 0))
    assert board[Position(0, 0)] is piece


def test_move_piece(board, player):
    piece = Piece(models.MARSHAL, player)
    board[Position(0, 0)] = piece
    board.move_piece(Move(Position(0, 0), Position(0, 1), player), piece)
    assert board[Position(0, 1)] is piece
    assert board[Position(0, 0)] is None


def test_list_moves_standard_piece(board, player):
    board[Position(1, 1)] = Piece(models.MARSHAL, player)
    moves = board.list_moves(Position(1, 1))
    assert [m.end for m in moves] == [
        Position(1, 0), Position(1, 2), Position(0, 1), Position(2, 1)
    ]


def test_list_moves_standard_piece_no_moves_available(board, player):
    for pos in (Position(1, 0), Position(1, 2), Position(0, 1), Position(2, 1)):
        board[pos] = Piece(models.SCOUT, player)
    board[Position(1, 1)] = Piece(models.MARSHAL, player)
    assert board.list_moves(Position(1, 1)) == []


def test_list_moves_scout(board, player):
    board[Position(0, 0)] = Piece(models.SCOUT, player)
    assert len(board.list_moves(Position(0, 0))) == 18


def test_list_moves_scout_stops_at_enemy(board, player):
    enemy = Player(2, "Bob", "blue")
    board[Position(0, 0)] = Piece(models.SCOUT, player)
    board[Position(0, 3)] = Piece(models.MAJOR, enemy)
    moves = board.list_moves(Position(0, 0))
    downs = [m.end for m in moves if m.end.x == 0]
    assert downs == [Position(0, 1), Position(0, 2), Position(0, 3)]
    assert len(moves) == 12


def test_list_moves_scout_stops_at_lake(board, player):
    board[Position(2, 0)] = Piece(models.SCOUT, player)
    moves = board.list_moves(Position(2, 0))
    assert Position(2, 3) in [m.end for m in moves]
    assert Position(2, 4) not in [m.end for m in moves]
    assert len(moves) == 12


def test_list_moves_no_piece(board):
    with pytest.raises(BoardError):
        board.list_moves(Position(0, 0))


def test_list_moves_immovable_piece(board, player):
    board[Position(0, 0)] = Piece(models.BOMB, player)
    with pytest.raises(BoardError):
        board.list_moves(Position(0, 0))


def test_str_empty_board(board):
    lines = str(board).split("\n")
    assert len(lines) == 11
    assert lines[-1] == ""
    assert lines[0] == " .. " * 10
    assert lines[4] == " .. " * 2 + " ~~ " * 2 + " .. " * 2 + " ~~ " * 2 + " .. " * 2


def test_str_shows_icon(board, player):
    board[Position(0, 0)] = Piece(models.FLAG, player)
    assert str(board).startswith(" \U0001F6A9  .. ")