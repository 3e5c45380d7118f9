"""Dual-grid tile map.

:class:`DualGridTileMap` ties a world grid snapshot, a terrain configuration,
a layer order policy and 4 injected display layer writers together. It owns
no engine state: hosts pass their own writers and call :meth:`paint`,
:meth:`erase` or :meth:`load` whenever the world changes.

Example
-------
>>> from dual_grid import DualGridTileMap, Position, Terrain
>>> from dual_grid.display import make_display_layers
>>> tilemap = DualGridTileMap(layers=make_display_layers())
>>> _ = tilemap.paint(Position(0, 0), Terrain.GRASS)
"""

import logging
from typing import List, Optional, Sequence, Set, Union

from dual_grid.components import Position
from dual_grid.config import DEFAULT_CONFIG, TerrainConfig
from dual_grid.display import DisplayLayerWriter, validate_layers
from dual_grid.errors import ConfigurationError
from dual_grid.systems.layer import layer_order_fn
from dual_grid.systems.propagation import (
    affected_display_positions,
    apply_plan,
    on_world_cell_changed,
    plan_display_cells,
    rebuild_all,
    recompute_display_cell,
)
from dual_grid.types import LayerOrderFn, TerrainId
from dual_grid.world import WorldGrid


log = logging.getLogger(__name__)


class DualGridTileMap:
    world: WorldGrid
    config: TerrainConfig
    layers: Sequence[DisplayLayerWriter]
    order_fn: LayerOrderFn

    def __init__(
        self,
        layers: Sequence[Optional[DisplayLayerWriter]],
        config: TerrainConfig = DEFAULT_CONFIG,
        world: Optional[WorldGrid] = None,
        layer_order: Union[str, LayerOrderFn] = "default",
    ):
        """Create a tile map and paint ``world`` (if given) onto the layers.

        Args:
            layers: Exactly 4 display layer writers, bottom first.
            config: Terrain configuration.
            world: Initial world grid; empty when omitted.
            layer_order: Registered policy name or a ``LayerOrderFn``.

        Raises:
            ConfigurationError: If a layer is missing or the policy name is
                unknown.
        """
        validate_layers(layers)
        self.layers = list(layers)  # type: ignore[arg-type]
        self.config = config
        self.order_fn = (
            layer_order_fn(layer_order) if isinstance(layer_order, str) else layer_order
        )
        if not callable(self.order_fn):
            raise ConfigurationError(f"Layer order is not callable: {layer_order!r}")
        self.world = WorldGrid()
        log.info(
            "Dual-grid tile map ready: %d terrain(s), %d bespoke mix source(s)",
            len(config.terrains),
            len(config.bespoke_mixes),
        )
        if world is not None:
            self.load(world)

    def terrain_at(self, pos: Position) -> TerrainId:
        return self.world.terrain_at(pos)

    def paint(self, pos: Position, terrain: TerrainId) -> List[Position]:
        """Set a world cell and repaint the display cells around it.

        Painting ``Terrain.NONE`` erases the cell. The world and the layers
        are only changed once every affected cell has been computed.

        Returns:
            List[Position]: Display positions that were recomputed.

        Raises:
            InvariantViolation: If ``terrain`` or a neighbouring cell is not
                configured; the tile map is left unchanged.
        """
        return self._commit(self.world.with_terrain(pos, terrain), pos)

    def erase(self, pos: Position) -> List[Position]:
        return self._commit(self.world.without(pos), pos)

    def refresh(self, pos: Position) -> List[Position]:
        """Recompute the display cells bordering world cell ``pos``."""
        return on_world_cell_changed(
            self.world, pos, self.config, self.layers, self.order_fn
        )

    def refresh_display_cell(self, display_pos: Position) -> None:
        recompute_display_cell(
            self.world, display_pos, self.config, self.layers, self.order_fn
        )

    def load(self, world: WorldGrid) -> Set[Position]:
        """Replace the whole world and rebuild the display layers.

        Display cells painted for the previous world that the new one no
        longer reaches are cleared. If any cell of ``world`` cannot be
        displayed nothing is written and the previous world is kept.

        Returns:
            Set[Position]: Display positions that were recomputed.
        """
        positions: Set[Position] = set()
        for grid in (self.world, world):
            for world_pos in grid.occupied_positions():
                positions.update(affected_display_positions(world_pos))
        plan = plan_display_cells(world, positions, self.config, self.order_fn)
        apply_plan(self.layers, plan)
        self.world = world
        log.info(
            "Loaded world with %d cell(s); %d display cell(s) recomputed",
            len(world),
            len(positions),
        )
        return positions

    def rebuild(self) -> Set[Position]:
        """Recompute every display cell of the current world."""
        return rebuild_all(self.world, self.config, self.layers, self.order_fn)

    def _commit(self, world: WorldGrid, world_pos: Position) -> List[Position]:
        positions = affected_display_positions(world_pos)
        plan = plan_display_cells(world, positions, self.config, self.order_fn)
        apply_plan(self.layers, plan)
        self.world = world
        return positions
