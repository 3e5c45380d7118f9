from __future__ import annotations

from typing import Dict, Mapping, Sequence, Tuple

import numpy as np
import numpy.typing as npt
from pyrsistent import pmap

from dual_grid.components import Position
from dual_grid.errors import ConfigurationError
from dual_grid.types import Terrain, TerrainId
from dual_grid.world import WorldGrid

IntArray = npt.NDArray[np.int_]

EMPTY_INDEX = -1


def world_from_rows(
    rows: Sequence[str],
    legend: Mapping[str, TerrainId],
    origin: Position = Position(0, 0),
) -> WorldGrid:
    """
    Build a world grid from ASCII rows, one character per cell.
    `legend` maps characters to terrains; characters mapped to Terrain.NONE stay empty.
    Unknown characters raise ConfigurationError.
    """
    cells: Dict[Position, TerrainId] = {}
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char not in legend:
                raise ConfigurationError(f"No terrain for {char!r} at {(x, y)}")
            terrain = legend[char]
            if terrain != Terrain.NONE:
                cells[Position(origin.x + x, origin.y + y)] = terrain
    return WorldGrid(pmap(cells))


def world_from_array(
    array: npt.ArrayLike,
    terrains: Sequence[TerrainId],
    origin: Position = Position(0, 0),
) -> WorldGrid:
    """
    Build a world grid from a 2D integer array indexed [y, x].
    Values index into `terrains`; negative values mean an empty cell.
    """
    raw = np.asarray(array)
    if raw.size and not np.issubdtype(raw.dtype, np.integer):
        raise ConfigurationError(f"Expected integer terrain indices, got {raw.dtype}")
    grid: IntArray = raw.astype(np.int_)
    if grid.ndim != 2:
        raise ConfigurationError(f"Expected a 2D array, got shape {grid.shape}")
    if grid.size and int(grid.max()) >= len(terrains):
        raise ConfigurationError(
            f"Terrain index {int(grid.max())} out of range for {len(terrains)} terrains"
        )
    cells: Dict[Position, TerrainId] = {}
    ys, xs = np.nonzero(grid >= 0)
    for y, x in zip(ys.tolist(), xs.tolist()):
        terrain = terrains[int(grid[y, x])]
        if terrain != Terrain.NONE:
            cells[Position(origin.x + x, origin.y + y)] = terrain
    return WorldGrid(pmap(cells))


def world_to_array(
    world: WorldGrid, terrains: Sequence[TerrainId]
) -> Tuple[IntArray, Position]:
    """
    Inverse of world_from_array over the world's bounding box.
    Returns (array, origin) where origin is the top-left occupied corner.
    """
    positions = world.occupied_positions()
    if not positions:
        return np.zeros((0, 0), dtype=np.int_), Position(0, 0)
    index = {terrain: i for i, terrain in enumerate(terrains)}
    min_x = min(p.x for p in positions)
    min_y = min(p.y for p in positions)
    max_x = max(p.x for p in positions)
    max_y = max(p.y for p in positions)
    grid: IntArray = np.full(
        (max_y - min_y + 1, max_x - min_x + 1), EMPTY_INDEX, dtype=np.int_
    )
    for pos in positions:
        terrain = world.terrain_at(pos)
        if terrain not in index:
            raise ConfigurationError(f"Terrain {terrain!r} is not in the terrain list")
        grid[pos.y - min_y, pos.x - min_x] = index[terrain]
    return grid, Position(min_x, min_y)
