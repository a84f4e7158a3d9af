# stratego

A Stratego game engine: a 10×10 board with two lakes, the twelve classic piece
types, battle resolution, turn and round tracking, and a simple computer
opponent. It is a library with no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Overview

- `stratego.models` defines the frozen dataclass `PieceType` (name, rank,
  movable, description, icon, count, strategic value) and the standard types
  `FLAG`, `BOMB`, `SPY`, `SCOUT`, `MINER`, `SERGEANT`, `LIEUTENANT`, `CAPTAIN`,
  `MAJOR`, `COLONEL`, `GENERAL` and `MARSHAL`, collected in `PIECE_TYPES`.
  Ranks are single characters compared by character code.
- `stratego.position.Position` is an immutable board coordinate (`y` grows
  downwards) with `to_left()`, `to_right()`, `to_up()` and `to_down()`.
  `str(Position(0, 0))` gives `(A,0)`.
- `stratego.move.Move` records a move from `start` to `end`, optionally with
  the `player` who made it; `str()` gives e.g. `(A,0) -> (A,1)`.
- `stratego.player.Player` holds an id, name, avatar, piece score and win
  flag, and tracks the player's living pieces (`alive_pieces`) and where they
  stand (`add_piece`, `remove_piece`, `update_piece_position`,
  `piece_position`). `update_piece_score` deducts an eliminated piece's value.
- `stratego.piece.Piece` is a piece owned by a player. `attack(target)`
  resolves a battle and returns `(attacker, target)`: capturing the flag wins
  the game for the attacker's owner, a spy beats a marshal, only a miner
  defuses a bomb, and otherwise the higher rank wins and equal ranks fall
  together. Eliminated pieces are deducted from their owner's score.
- `stratego.board.Board` holds the field and the lakes. Index it with a
  `Position` (off-board positions raise `IndexError`), check moves with
  `is_valid_move`, list legal moves with `list_moves` (scouts move any distance
  in a straight line until blocked), and use `swap_pieces`, `move_piece` and
  `remove_piece_at`. Failed operations raise `BoardError`. `str(board)` draws
  the field with piece icons, `~~` for lakes and `..` for empty squares.
- `stratego.game.Game` runs a match between two players: `make_move` carries
  out a move or an attack, records it in `move_history` and calls
  `next_turn`, which records a `winner` or passes the turn and counts
  `round`s; `initialize_pieces` registers every piece on the board with its
  owner.
- `stratego.piece_list.piece_list(player)` builds a player's full set of 40
  pieces, and `piece_list_strategic_value(pieces)` sums their values (219 for
  a full set).
- `stratego.ai.fafo.FafoAI` is a computer opponent that attacks enemy pieces
  it remembers or does not rank below, otherwise advances toward the enemy
  side, otherwise makes a random legal move, and raises `NoMovesError` when
  it has none. It remembers opponent pieces by position and concludes that a
  move of more than one square was made by a scout. It accepts an optional
  `random.Random` for reproducible play.
- `stratego.ai.handler.FafoHandler` wraps the AI for turn-by-turn play:
  `take_turn(board, opponent_move, opponent)` studies the opponent's last move
  (if any) and returns the AI's move.

## Example

```python
from stratego.game import Game
from stratego.models import CAPTAIN, SCOUT
from stratego.move import Move
from stratego.piece import Piece
from stratego.player import Player
from stratego.position import Position

alice = Player(1, "Alice", "red")
bob = Player(2, "Bob", "blue")
game = Game(alice, bob)

attacker = Piece(CAPTAIN, alice)
defender = Piece(SCOUT, bob)
game.board[Position(0, 0)] = attacker
game.board[Position(0, 1)] = defender

game.make_move(Move(Position(0, 0), Position(0, 1), alice), attacker)
print(game.board)
```

## What it does not do

- There is no command-line program, user interface or network play; the
  package is a library to build those on.
- It does not arrange a starting setup: place pieces on the board yourself
  (for example from `piece_list`) and then call `Game.initialize_pieces`.
- `Game.make_move` does not check that a move is legal or that it is the
  moving player's turn; use `Board.list_moves` or `Board.is_valid_move` first.