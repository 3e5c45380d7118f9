"""Render an ASCII world map to a PNG preview.

Usage::

    python -m dual_grid map.txt out.png --tile-size 32

Map characters: ``.`` empty, ``d`` dirt, ``g`` grass, ``s`` sand, ``r`` stone,
``w`` water.
"""

import argparse
import logging
from typing import Optional, Sequence

from dual_grid.display import make_display_layers
from dual_grid.levels import world_from_rows
from dual_grid.renderer.texture import DEFAULT_TILE_SIZE, TextureRenderer
from dual_grid.tilemap import DualGridTileMap
from dual_grid.types import Terrain


ASCII_LEGEND = {
    ".": Terrain.NONE,
    " ": Terrain.NONE,
    "d": Terrain.DIRT,
    "g": Terrain.GRASS,
    "s": Terrain.SAND,
    "r": Terrain.STONE,
    "w": Terrain.WATER,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="dual_grid", description=__doc__.splitlines()[0])
    parser.add_argument("map", help="ASCII map file")
    parser.add_argument("output", help="PNG file to write")
    parser.add_argument("--tile-size", type=int, default=DEFAULT_TILE_SIZE)
    parser.add_argument("--layer-order", default="default")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    with open(args.map, encoding="utf-8") as fh:
        rows = [line.rstrip("\n") for line in fh]
    layers = make_display_layers()
    DualGridTileMap(
        layers=layers,
        world=world_from_rows(rows, ASCII_LEGEND),
        layer_order=args.layer_order,
    )
    TextureRenderer(tile_size=args.tile_size).render(layers).save(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
