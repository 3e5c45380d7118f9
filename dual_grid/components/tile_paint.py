from dataclasses import dataclass

from dual_grid.components.atlas_coord import AtlasCoord
from dual_grid.types import AtlasSourceId, TerrainId


@dataclass(frozen=True)
class TilePaint:
    """A single display-layer write.

    Attributes:
        terrain: Terrain the tile belongs to.
        source_id: Atlas source the tile is taken from.
        atlas_coord: Tile coordinate inside that atlas.
    """

    terrain: TerrainId
    source_id: AtlasSourceId
    atlas_coord: AtlasCoord
