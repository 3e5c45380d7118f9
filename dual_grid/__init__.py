"""Dual-grid terrain tiling.

Renders a sparse world grid of terrain cells through 4 display layers offset
by half a cell, so that any terrain can border any other using one generic
4x4 atlas per terrain (plus optional mixed and bespoke blocks).

The pipeline for one display cell is: sample the 4 bordering world cells
(:mod:`dual_grid.systems.sampler`), pick a tile per terrain
(:mod:`dual_grid.systems.variant`), stack the terrains onto layers
(:mod:`dual_grid.systems.layer`) and write them
(:mod:`dual_grid.systems.propagation`). :class:`DualGridTileMap` drives the
pipeline from world edits.
"""

from dual_grid.components import AtlasCoord, Position, TilePaint
from dual_grid.config import TerrainConfig, build_terrain_config
from dual_grid.errors import ConfigurationError, DualGridError, InvariantViolation
from dual_grid.tilemap import DualGridTileMap
from dual_grid.types import Terrain
from dual_grid.world import WorldGrid

__all__ = [
    "AtlasCoord",
    "ConfigurationError",
    "DualGridError",
    "DualGridTileMap",
    "InvariantViolation",
    "Position",
    "Terrain",
    "TerrainConfig",
    "TilePaint",
    "WorldGrid",
    "build_terrain_config",
]
