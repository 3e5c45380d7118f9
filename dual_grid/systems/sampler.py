"""Neighbourhood sampling.

A display cell ``D`` sits on the shared corner of 4 world cells. With the
offsets ``(0,0)``, ``(1,0)``, ``(0,1)``, ``(1,1)`` the world cells are
``D - offset``; the cell ``D - (1,1)`` lies up-left of the display cell's
centre, so it fills the top-left slot, and ``D - (0,0)`` fills the
bottom-right slot. Slot ``i`` therefore reads ``D - NEIGHBOR_OFFSETS[3 - i]``.

The same offsets applied the other way round give the display cells a world
cell contributes to (see :mod:`~dual_grid.systems.propagation`).
"""

from typing import Tuple

from dual_grid.components import Position
from dual_grid.types import Neighborhood, OccupancyKey, Terrain, TerrainId
from dual_grid.world import WorldGridReader


NEIGHBOR_OFFSETS: Tuple[Position, Position, Position, Position] = (
    Position(0, 0),
    Position(1, 0),
    Position(0, 1),
    Position(1, 1),
)


def neighbor_positions(
    display_pos: Position,
) -> Tuple[Position, Position, Position, Position]:
    """World positions bordering ``display_pos`` in (TL, TR, BL, BR) order."""
    return (
        display_pos - NEIGHBOR_OFFSETS[3],
        display_pos - NEIGHBOR_OFFSETS[2],
        display_pos - NEIGHBOR_OFFSETS[1],
        display_pos - NEIGHBOR_OFFSETS[0],
    )


def sample(world: WorldGridReader, display_pos: Position) -> Neighborhood:
    top_left, top_right, bottom_left, bottom_right = neighbor_positions(display_pos)
    return (
        world.terrain_at(top_left),
        world.terrain_at(top_right),
        world.terrain_at(bottom_left),
        world.terrain_at(bottom_right),
    )


def occupancy_of(neighborhood: Neighborhood, terrain: TerrainId) -> OccupancyKey:
    """Slots of ``neighborhood`` holding exactly ``terrain``."""
    a, b, c, d = neighborhood
    return (a == terrain, b == terrain, c == terrain, d == terrain)


def any_occupancy_of(neighborhood: Neighborhood) -> OccupancyKey:
    """Slots of ``neighborhood`` holding any terrain."""
    a, b, c, d = neighborhood
    return (
        a != Terrain.NONE,
        b != Terrain.NONE,
        c != Terrain.NONE,
        d != Terrain.NONE,
    )


def occupied_by(
    world: WorldGridReader, display_pos: Position, terrain: TerrainId
) -> OccupancyKey:
    return occupancy_of(sample(world, display_pos), terrain)


def any_occupied(world: WorldGridReader, display_pos: Position) -> OccupancyKey:
    return any_occupancy_of(sample(world, display_pos))


def distinct_terrains(neighborhood: Neighborhood) -> list[TerrainId]:
    """Non-``NONE`` terrains in first-occurrence order (TL, TR, BL, BR)."""
    seen: list[TerrainId] = []
    for terrain in neighborhood:
        if terrain != Terrain.NONE and terrain not in seen:
            seen.append(terrain)
    return seen
