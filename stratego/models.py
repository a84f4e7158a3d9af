"""Piece types and the standard set of pieces each army starts with."""

from dataclasses import dataclass

__all__ = [
    "PieceType",
    "FLAG",
    "BOMB",
    "SPY",
    "SCOUT",
    "MINER",
    "SERGEANT",
    "LIEUTENANT",
    "CAPTAIN",
    "MAJOR",
    "COLONEL",
    "GENERAL",
    "MARSHAL",
    "PIECE_TYPES",
]


@dataclass(frozen=True)
class PieceType:
    """Static description of one kind of piece.

    ``rank`` is a single character; ranks are compared by character code,
    so ``"M"`` beats ``"9"`` and ``"9"`` beats ``"1"``.
    """

    name: str
    rank: str
    movable: bool
    description: str
    icon: str
    count: int
    strategic_value: int


_WEAK = "The piece that can move and attack but is weak."

_POLICE = "\U0001F46E"
_POLICE_MAN = "\U0001F46E\u200D\u2642\uFE0F"
_POLICE_WOMAN = "\U0001F46E\u200D\u2640\uFE0F"

FLAG = PieceType(
    "Flag", "0", False, "The piece you must capture to win the game.", "\U0001F6A9", 1, 0
)
BOMB = PieceType(
    "Bomb",
    "B",
    False,
    "The piece that cannot move and eliminates most attackers.",
    "\U0001F4A3",
    6,
    7,
)
SPY = PieceType("Spy", "1", True, _WEAK, "\U0001F575\uFE0F", 1, 7)
SCOUT = PieceType(
    "Scout",
    "2",
    True,
    "The piece that can move multiple spaces and attack.",
    "\U0001F575\uFE0F\u200D\u2642\uFE0F",
    8,
    3,
)
MINER = PieceType("Miner", "3", True, _WEAK, "\u26CF\uFE0F", 5, 6)
SERGEANT = PieceType("Sergeant", "4", True, _WEAK, _POLICE, 4, 4)
LIEUTENANT = PieceType("Lieutenant", "5", True, _WEAK, _POLICE_MAN, 4, 5)
CAPTAIN = PieceType("Captain", "6", True, _WEAK, _POLICE_WOMAN, 4, 6)
MAJOR = PieceType("Major", "7", True, _WEAK, _POLICE_MAN, 3, 7)
COLONEL = PieceType("Colonel", "8", True, _WEAK, _POLICE_WOMAN, 2, 8)
GENERAL = PieceType("General", "9", True, _WEAK, _POLICE_MAN, 1, 9)
MARSHAL = PieceType("Marshal", "M", True, _WEAK, _POLICE_WOMAN, 1, 10)

PIECE_TYPES: tuple[PieceType, ...] = (
    FLAG,
    BOMB,
    SPY,
    SCOUT,
    MINER,
    SERGEANT,
    LIEUTENANT,
    CAPTAIN,
    MAJOR,
    COLONEL,
    GENERAL,
    MARSHAL,
)