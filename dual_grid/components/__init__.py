"""Value components.

Re-exports the small immutable dataclasses passed between the systems:
:class:`Position` for world/display coordinates, :class:`AtlasCoord` for
tiles inside an atlas and :class:`TilePaint` for a single display-layer write.
"""

from .atlas_coord import AtlasCoord
from .position import Position
from .tile_paint import TilePaint

__all__ = [
    "AtlasCoord",
    "Position",
    "TilePaint",
]
