"""Board coordinates."""

from dataclasses import dataclass

__all__ = ["Position"]


def _label(base: str, offset: int) -> str:
    code = ord(base) + offset
    if code < 0 or code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        return "\uFFFD"
    return chr(code)


@dataclass(frozen=True)
class Position:
    """A square on the board; ``y`` grows downwards."""

    x: int
    y: int

    def to_left(self) -> "Position":
        return Position(self.x - 1, self.y)

    def to_right(self) -> "Position":
        return Position(self.x + 1, self.y)

    def to_up(self) -> "Position":
        return Position(self.x, self.y - 1)

    def to_down(self) -> "Position":
        return Position(self.x, self.y + 1)

    def __str__(self) -> str:
        return f"({_label('A', self.x)},{_label('0', self.y)})"