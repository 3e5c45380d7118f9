"""Position component.

Immutable integer grid coordinates shared by world and display space. A
display cell and the world cell with the same ``Position`` are offset by half
a tile: the display cell is centred on the world cell's top-left corner.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (grows to the right).
        y: Row index (grows downward).
    """

    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)
