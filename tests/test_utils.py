from typing import Dict, Mapping, Optional, Tuple

from pyrsistent import pmap

from dual_grid.components import Position
from dual_grid.config import TerrainConfig, build_terrain_config
from dual_grid.display import DisplayLayer, make_display_layers
from dual_grid.systems.sampler import neighbor_positions
from dual_grid.types import NONE_SOURCE_ID, Neighborhood, Terrain, TerrainId
from dual_grid.world import WorldGrid

A: TerrainId = Terrain.GRASS
B: TerrainId = Terrain.DIRT
C: TerrainId = Terrain.WATER
D: TerrainId = Terrain.SAND
_ = Terrain.NONE

SOURCES: Dict[TerrainId, int] = {
    Terrain.NONE: NONE_SOURCE_ID,
    A: 10,
    B: 11,
    C: 12,
    D: 13,
}


def make_config(
    bespoke: Optional[Mapping[TerrainId, Mapping[TerrainId, int]]] = None,
) -> TerrainConfig:
    """Config with four terrains and optional bespoke mixes."""
    return build_terrain_config(SOURCES, bespoke)


def make_world(cells: Mapping[Tuple[int, int], TerrainId]) -> WorldGrid:
    return WorldGrid(
        pmap({Position(x, y): t for (x, y), t in cells.items() if t != Terrain.NONE})
    )


def world_with_neighborhood(
    display_pos: Position, neighborhood: Neighborhood
) -> WorldGrid:
    """World whose only cells are the 4 bordering ``display_pos``."""
    cells: Dict[Position, TerrainId] = {}
    for pos, terrain in zip(neighbor_positions(display_pos), neighborhood):
        if terrain != Terrain.NONE:
            cells[pos] = terrain
    return WorldGrid(pmap(cells))


def snapshot(layers: list[DisplayLayer]) -> Tuple[object, ...]:
    return tuple(layer.cells() for layer in layers)


def fresh_layers() -> list[DisplayLayer]:
    return make_display_layers()
