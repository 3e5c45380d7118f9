from typing import Dict, Mapping, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from dual_grid import atlas
from dual_grid.components import AtlasCoord, Position
from dual_grid.config import DEFAULT_TERRAIN_SOURCES
from dual_grid.display import DisplayLayer
from dual_grid.types import AtlasSourceId, Terrain, TerrainId


DEFAULT_TILE_SIZE = 16
DEFAULT_ATLAS_COLUMNS = 12
BACKGROUND = (0, 0, 0, 0)

RGB = Tuple[int, int, int]

DEFAULT_TERRAIN_COLORS: Dict[TerrainId, RGB] = {
    Terrain.DIRT: (134, 96, 67),
    Terrain.GRASS: (95, 159, 53),
    Terrain.SAND: (219, 203, 142),
    Terrain.STONE: (128, 128, 128),
    Terrain.WATER: (52, 98, 182),
}

AtlasMap = Mapping[AtlasSourceId, Image.Image]


def load_atlas(path: str) -> Image.Image:
    return Image.open(path).convert("RGBA")


def crop_tile(sheet: Image.Image, coord: AtlasCoord, tile_size: int) -> Image.Image:
    x0, y0 = coord.x * tile_size, coord.y * tile_size
    return sheet.crop((x0, y0, x0 + tile_size, y0 + tile_size))


def solid_color_atlas(
    color: RGB,
    tile_size: int = DEFAULT_TILE_SIZE,
    columns: int = DEFAULT_ATLAS_COLUMNS,
) -> Image.Image:
    """
    Placeholder atlas: every base tile fills the quadrants its occupancy key covers.
    Blocks to the right of the base block repeat it, darkened, for mixed/bespoke variants.
    """
    half = tile_size // 2
    arr = np.zeros((4 * tile_size, columns * tile_size, 4), dtype=np.uint8)
    for index, coord in enumerate(atlas.OCCUPANCY_TABLE):
        if coord == atlas.EMPTY_TILE:
            coord = atlas.ALIAS_TILE
        quadrants = [(index >> shift) & 1 for shift in (3, 2, 1, 0)]
        for block in range(columns // atlas.MIXED_X_OFFSET):
            shade = 1.0 - 0.2 * block
            rgba = [int(c * shade) for c in color] + [255]
            cx = (coord.x + block * atlas.MIXED_X_OFFSET) * tile_size
            cy = coord.y * tile_size
            for slot, filled in enumerate(quadrants):
                if not filled:
                    continue
                qx = cx + (slot % 2) * half
                qy = cy + (slot // 2) * half
                arr[qy : qy + half, qx : qx + half] = rgba
    return Image.fromarray(arr)


def default_atlases(tile_size: int = DEFAULT_TILE_SIZE) -> Dict[AtlasSourceId, Image.Image]:
    return {
        DEFAULT_TERRAIN_SOURCES[terrain]: solid_color_atlas(color, tile_size)
        for terrain, color in DEFAULT_TERRAIN_COLORS.items()
    }


def display_bounds(
    layers: Sequence[DisplayLayer],
) -> Optional[Tuple[Position, Position]]:
    positions = [pos for layer in layers for pos in layer.cells().keys()]
    if not positions:
        return None
    return (
        Position(min(p.x for p in positions), min(p.y for p in positions)),
        Position(max(p.x for p in positions), max(p.y for p in positions)),
    )


def render_layers(
    layers: Sequence[DisplayLayer],
    atlases: AtlasMap,
    tile_size: int = DEFAULT_TILE_SIZE,
) -> Image.Image:
    """
    Composite display layers bottom-to-top into an RGBA image.
    Pixel (0, 0) is the top-left corner of the top-left painted display cell; in world terms the
    image starts half a tile up-left of that cell's world position.
    """
    bounds = display_bounds(layers)
    if bounds is None:
        return Image.new("RGBA", (tile_size, tile_size), BACKGROUND)
    low, high = bounds
    img = Image.new(
        "RGBA",
        ((high.x - low.x + 1) * tile_size, (high.y - low.y + 1) * tile_size),
        BACKGROUND,
    )

    cache: Dict[Tuple[AtlasSourceId, AtlasCoord], Image.Image] = {}
    for layer in layers:
        for pos, (source_id, coord) in sorted(
            layer.cells().items(), key=lambda item: (item[0].y, item[0].x)
        ):
            if source_id not in atlases:
                raise ValueError(f"No atlas image for source id {source_id}")
            key = (source_id, coord)
            if key not in cache:
                cache[key] = crop_tile(atlases[source_id], coord, tile_size)
            img.alpha_composite(
                cache[key], ((pos.x - low.x) * tile_size, (pos.y - low.y) * tile_size)
            )
    return img


class TextureRenderer:
    atlases: AtlasMap
    tile_size: int

    def __init__(
        self,
        atlases: Optional[AtlasMap] = None,
        tile_size: int = DEFAULT_TILE_SIZE,
    ):
        self.tile_size = tile_size
        self.atlases = atlases if atlases is not None else default_atlases(tile_size)

    def render(self, layers: Sequence[DisplayLayer]) -> Image.Image:
        return render_layers(layers, self.atlases, self.tile_size)
