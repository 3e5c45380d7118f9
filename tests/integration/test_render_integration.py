from pathlib import Path

from PIL import Image

from dual_grid import DualGridTileMap, Position, Terrain
from dual_grid.__main__ import main
from dual_grid.config import DEFAULT_TERRAIN_SOURCES
from dual_grid.display import make_display_layers
from dual_grid.renderer.texture import (
    TextureRenderer,
    crop_tile,
    render_layers,
    solid_color_atlas,
)
from dual_grid.components import AtlasCoord


def test_solid_color_atlas_quadrants() -> None:
    sheet = solid_color_atlas((200, 0, 0), tile_size=8)
    assert sheet.size == (12 * 8, 4 * 8)
    # (0, 0) is the bottom-left-only tile
    tile = crop_tile(sheet, AtlasCoord(0, 0), 8)
    assert tile.getpixel((1, 6))[3] == 255
    assert tile.getpixel((6, 1))[3] == 0
    full = crop_tile(sheet, AtlasCoord(2, 1), 8)
    assert all(full.getpixel((x, y))[3] == 255 for x in (0, 7) for y in (0, 7))


def test_render_empty_layers() -> None:
    img = render_layers(make_display_layers(), {}, tile_size=8)
    assert img.size == (8, 8)


def test_render_single_cell() -> None:
    layers = make_display_layers()
    tilemap = DualGridTileMap(layers=layers)
    tilemap.paint(Position(0, 0), Terrain.GRASS)
    img = TextureRenderer(tile_size=8).render(layers)
    assert img.size == (16, 16)
    # The world cell covers the centre of the 2x2 display block.
    assert img.getpixel((8, 8))[3] == 255
    assert img.getpixel((0, 0))[3] == 0


def test_cli_writes_png(tmp_path: Path) -> None:
    map_file = tmp_path / "map.txt"
    map_file.write_text("gg.\ngww\n..s\n", encoding="utf-8")
    out = tmp_path / "out.png"
    assert main([str(map_file), str(out), "--tile-size", "4"]) == 0
    with Image.open(out) as img:
        assert img.size == (4 * 4, 4 * 4)


def test_default_sources_cover_render_colors() -> None:
    renderer = TextureRenderer(tile_size=4)
    for terrain in (Terrain.GRASS, Terrain.WATER):
        assert DEFAULT_TERRAIN_SOURCES[terrain] in renderer.atlases
