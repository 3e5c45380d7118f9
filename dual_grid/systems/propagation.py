"""Update propagation.

A world cell borders exactly 4 display cells: ``world_pos + offset`` for the
sampling offsets. Whenever a world cell changes those 4 display cells are
recomputed. Recomputing is a pure function of the current world snapshot, so
overlapping or repeated recomputes are harmless.

Each recompute first builds the complete set of writes for the cell
(:func:`planned_writes`) and only then clears and repaints all 4 layers, so a
cell is never left with a subset of its layers updated.
"""

import logging
from typing import Iterable, List, Sequence, Set

from pyrsistent import PMap, pmap

from dual_grid.components import Position, TilePaint
from dual_grid.config import TerrainConfig
from dual_grid.display import DisplayLayerWriter, write_cell
from dual_grid.systems.layer import assign_layers, default_layer_order
from dual_grid.systems.sampler import NEIGHBOR_OFFSETS, sample
from dual_grid.systems.variant import variants_for
from dual_grid.types import LayerIndex, LayerOrderFn
from dual_grid.world import WorldGridReader


log = logging.getLogger(__name__)


def affected_display_positions(world_pos: Position) -> List[Position]:
    """Display cells bordering ``world_pos``."""
    return [world_pos + offset for offset in NEIGHBOR_OFFSETS]


def planned_writes(
    world: WorldGridReader,
    display_pos: Position,
    config: TerrainConfig,
    order_fn: LayerOrderFn = default_layer_order,
) -> PMap[LayerIndex, TilePaint]:
    """Tiles a recompute of ``display_pos`` would paint, by layer index.

    Layers missing from the result are cleared. An empty result means the
    cell has no bordering terrain.
    """
    neighborhood = sample(world, display_pos)
    variants = variants_for(neighborhood, config)
    if not variants:
        return pmap()
    assigned = assign_layers(variants, neighborhood, order_fn)
    return pmap(
        {
            index: TilePaint(terrain, config.source_id(terrain), coord)
            for index, (terrain, coord) in assigned.items()
        }
    )


def recompute_display_cell(
    world: WorldGridReader,
    display_pos: Position,
    config: TerrainConfig,
    layers: Sequence[DisplayLayerWriter],
    order_fn: LayerOrderFn = default_layer_order,
) -> PMap[LayerIndex, TilePaint]:
    """Clear and repaint ``display_pos`` on all layers.

    Returns:
        PMap[LayerIndex, TilePaint]: The writes that were applied.
    """
    paints = planned_writes(world, display_pos, config, order_fn)
    write_cell(layers, display_pos, paints)
    log.debug("Recomputed display cell %s: %d layer(s)", display_pos, len(paints))
    return paints


def plan_display_cells(
    world: WorldGridReader,
    display_positions: Iterable[Position],
    config: TerrainConfig,
    order_fn: LayerOrderFn = default_layer_order,
) -> PMap[Position, PMap[LayerIndex, TilePaint]]:
    """Writes for several display cells, computed without touching any layer.

    Raises:
        InvariantViolation: If any cell cannot be computed.
    """
    return pmap(
        {
            display_pos: planned_writes(world, display_pos, config, order_fn)
            for display_pos in display_positions
        }
    )


def apply_plan(
    layers: Sequence[DisplayLayerWriter],
    plan: PMap[Position, PMap[LayerIndex, TilePaint]],
) -> None:
    """Clear and repaint every cell of a plan from :func:`plan_display_cells`."""
    for display_pos, paints in plan.items():
        write_cell(layers, display_pos, paints)


def on_world_cell_changed(
    world: WorldGridReader,
    world_pos: Position,
    config: TerrainConfig,
    layers: Sequence[DisplayLayerWriter],
    order_fn: LayerOrderFn = default_layer_order,
) -> List[Position]:
    """Recompute the 4 display cells bordering ``world_pos``.

    Returns:
        List[Position]: The recomputed display positions.
    """
    positions = affected_display_positions(world_pos)
    for display_pos in positions:
        recompute_display_cell(world, display_pos, config, layers, order_fn)
    return positions


def rebuild_all(
    world: WorldGridReader,
    config: TerrainConfig,
    layers: Sequence[DisplayLayerWriter],
    order_fn: LayerOrderFn = default_layer_order,
) -> Set[Position]:
    """Recompute every display cell bordering an occupied world cell.

    Equivalent to calling :func:`on_world_cell_changed` for each occupied
    cell. Display cells left over from an earlier world are not visited;
    clear them first (see ``DualGridTileMap.load``).

    Returns:
        Set[Position]: Distinct display positions that were recomputed.
    """
    touched: Set[Position] = set()
    occupied = world.occupied_positions()
    for world_pos in occupied:
        touched.update(on_world_cell_changed(world, world_pos, config, layers, order_fn))
    log.debug(
        "Rebuilt %d display cell(s) from %d world cell(s)", len(touched), len(occupied)
    )
    return touched
