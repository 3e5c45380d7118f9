"""Atlas coordinate component.

Identifies one tile inside a tileset atlas by column/row. Variant selection
only ever shifts coordinates along ``x`` (mixed and bespoke blocks sit to the
right of the base 4x4 block).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AtlasCoord:
    """Tile coordinate inside an atlas.

    Attributes:
        x: Atlas column.
        y: Atlas row.
    """

    x: int
    y: int

    def shifted(self, dx: int) -> "AtlasCoord":
        """Return the coordinate moved ``dx`` columns to the right."""
        return AtlasCoord(self.x + dx, self.y)
