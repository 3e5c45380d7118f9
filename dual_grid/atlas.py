"""Terrain atlas lookup table.

Every terrain atlas shares the same 4x4 base layout: one tile for each of the
16 ways the 4 world cells around a display cell can be occupied. The table
below maps an :data:`~dual_grid.types.OccupancyKey` to that base tile.

Keys are packed into a 4-bit index (top-left is the most significant bit) so
the table is a plain tuple with no gaps. The all-false key has no tile to
paint and maps to :data:`EMPTY_TILE`; the base block's remaining cell
(:data:`ALIAS_TILE`) is a legitimate tile kept for single-terrain display.

Variant blocks sit to the right of the base block:

* ``mixed`` tiles at ``x + MIXED_X_OFFSET`` are used where two or more
  terrains together fill all 4 slots.
* ``bespoke`` tiles at ``x + offset`` (offset configured per terrain pair)
  replace the mixed tiles for one specific pair.
"""

from typing import Tuple

from dual_grid.components import AtlasCoord
from dual_grid.errors import InvariantViolation
from dual_grid.types import OccupancyKey


EMPTY_TILE = AtlasCoord(-1, -1)
ALIAS_TILE = AtlasCoord(0, 3)
MIXED_X_OFFSET = 4
FULL_KEY: OccupancyKey = (True, True, True, True)
EMPTY_KEY: OccupancyKey = (False, False, False, False)

# Indexed by ``occupancy_index``; comments give (TL, TR, BL, BR).
OCCUPANCY_TABLE: Tuple[AtlasCoord, ...] = (
    EMPTY_TILE,  # 0000 nothing to draw
    AtlasCoord(1, 3),  # 0001 outer bottom-right corner
    AtlasCoord(0, 0),  # 0010 outer bottom-left corner
    AtlasCoord(3, 0),  # 0011 bottom edge
    AtlasCoord(0, 2),  # 0100 outer top-right corner
    AtlasCoord(1, 0),  # 0101 right edge
    AtlasCoord(2, 3),  # 0110 bottom-left + top-right corners
    AtlasCoord(1, 1),  # 0111 inner top-left corner missing
    AtlasCoord(3, 3),  # 1000 outer top-left corner
    AtlasCoord(0, 1),  # 1001 top-left + bottom-right corners
    AtlasCoord(3, 2),  # 1010 left edge
    AtlasCoord(2, 0),  # 1011 inner top-right corner missing
    AtlasCoord(1, 2),  # 1100 top edge
    AtlasCoord(2, 2),  # 1101 inner bottom-left corner missing
    AtlasCoord(3, 1),  # 1110 inner bottom-right corner missing
    AtlasCoord(2, 1),  # 1111 fully covered
)


def occupancy_index(key: OccupancyKey) -> int:
    """Pack a 4-slot occupancy key into its table index.

    Raises:
        InvariantViolation: If ``key`` is not exactly 4 booleans.
    """
    if len(key) != 4 or not all(isinstance(flag, bool) for flag in key):
        raise InvariantViolation(f"Malformed occupancy key: {key!r}")
    top_left, top_right, bottom_left, bottom_right = key
    return (top_left << 3) | (top_right << 2) | (bottom_left << 1) | bottom_right


def lookup(key: OccupancyKey) -> AtlasCoord:
    """Return the base atlas tile for ``key`` (``EMPTY_TILE`` for no occupancy)."""
    return OCCUPANCY_TABLE[occupancy_index(key)]


def is_fully_occupied(key: OccupancyKey) -> bool:
    return occupancy_index(key) == 0b1111


def mixed_variant(base: AtlasCoord) -> AtlasCoord:
    """Generic mixed tile for ``base``."""
    return base.shifted(MIXED_X_OFFSET)


def bespoke_variant(base: AtlasCoord, offset: int) -> AtlasCoord:
    """Pair-specific tile for ``base`` using the configured ``offset``."""
    return base.shifted(offset)
