"""Variant selection.

For each distinct terrain around a display cell pick the atlas tile to paint.

Rules, in order:

* No terrain: nothing to paint.
* One terrain: its base tile for its own occupancy key. Even when that
  terrain fills all 4 slots the plain base tile is used; mixing needs at
  least two terrains.
* Several terrains, some slot empty: each terrain gets its base tile.
  Partial neighbourhoods never mix.
* Several terrains filling all 4 slots: each terrain's base tile is moved to
  a mixed block. With exactly two terrains a registered bespoke offset for
  the pair (either ordering) wins over the generic mixed offset.
"""

from typing import List

from dual_grid import atlas
from dual_grid.components import Position
from dual_grid.config import TerrainConfig
from dual_grid.systems.sampler import (
    any_occupancy_of,
    distinct_terrains,
    occupancy_of,
    sample,
)
from dual_grid.types import Neighborhood, TerrainVariant
from dual_grid.world import WorldGridReader


def select_variants(
    world: WorldGridReader, display_pos: Position, config: TerrainConfig
) -> List[TerrainVariant]:
    """Sample ``display_pos`` and select a tile per terrain.

    Args:
        world (WorldGridReader): World grid to read.
        display_pos (Position): Display cell to compute.
        config (TerrainConfig): Provides bespoke mix offsets.

    Returns:
        List[TerrainVariant]: ``(terrain, atlas_coord)`` per distinct terrain,
            in first-occurrence order.
    """
    return variants_for(sample(world, display_pos), config)


def variants_for(
    neighborhood: Neighborhood, config: TerrainConfig
) -> List[TerrainVariant]:
    """Same as :func:`select_variants` for an already sampled neighbourhood."""
    terrains = distinct_terrains(neighborhood)
    if not terrains:
        return []

    if len(terrains) == 1:
        terrain = terrains[0]
        return [(terrain, atlas.lookup(occupancy_of(neighborhood, terrain)))]

    mixing = atlas.is_fully_occupied(any_occupancy_of(neighborhood))
    variants: List[TerrainVariant] = []
    for terrain in terrains:
        coord = atlas.lookup(occupancy_of(neighborhood, terrain))
        if mixing:
            offset = None
            if len(terrains) == 2:
                other = terrains[1] if terrain == terrains[0] else terrains[0]
                offset = config.bespoke_offset(terrain, other)
            if offset is not None:
                coord = atlas.bespoke_variant(coord, offset)
            else:
                coord = atlas.mixed_variant(coord)
        variants.append((terrain, coord))
    return variants
