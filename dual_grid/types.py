"""Common type aliases and enumerations.

``LayerOrderFn`` is the central extension point for art-style specific
layering: it decides in which order the terrains present at one display cell
are stacked onto the 4 display layers.
"""

from enum import StrEnum, auto
from typing import Callable, Sequence, Tuple, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from dual_grid.components import AtlasCoord

TerrainId = str
AtlasSourceId = int
LayerIndex = int

Neighborhood = Tuple[TerrainId, TerrainId, TerrainId, TerrainId]
"""Terrains bordering a display cell: (top-left, top-right, bottom-left, bottom-right)."""

OccupancyKey = Tuple[bool, bool, bool, bool]
"""Per-slot occupancy flags in the same order as ``Neighborhood``."""

TerrainVariant = Tuple[TerrainId, "AtlasCoord"]
"""A terrain paired with the atlas coordinate selected for it."""

LayerOrderFn = Callable[
    [Sequence[TerrainVariant], Neighborhood], Sequence[TerrainVariant]
]


class Terrain(StrEnum):
    """Built-in terrain names.

    ``NONE`` is reserved and means no terrain occupies a cell. Any other
    string may be used as a terrain id as long as it is configured.
    """

    NONE = auto()
    DIRT = auto()
    GRASS = auto()
    SAND = auto()
    STONE = auto()
    WATER = auto()


NONE_SOURCE_ID: AtlasSourceId = -1
LAYER_COUNT = 4
