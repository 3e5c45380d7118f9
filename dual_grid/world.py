"""World grid readers.

The world grid is the logical, hidden grid holding one terrain per cell. The
core only reads it through :class:`WorldGridReader`; two implementations are
provided:

* :class:`WorldGrid` stores terrain ids directly in a persistent map. It is
  immutable; painting returns a new grid, mirroring how the rest of the
  package treats snapshots as values.
* :class:`SourceIdWorldGrid` stores atlas source ids, the way a host engine's
  tile map records which tileset a cell was painted with, and translates them
  through the configuration's reverse table on every read.

Absence of an entry always reads as ``Terrain.NONE``.
"""

from dataclasses import dataclass, replace
from typing import Protocol, Sequence

from pyrsistent import PMap, pmap

from dual_grid.components import Position
from dual_grid.config import TerrainConfig
from dual_grid.types import AtlasSourceId, NONE_SOURCE_ID, Terrain, TerrainId


class WorldGridReader(Protocol):
    """Read-only access to the world grid."""

    def terrain_at(self, pos: Position) -> TerrainId: ...

    def occupied_positions(self) -> Sequence[Position]: ...


@dataclass(frozen=True)
class WorldGrid:
    """Immutable sparse world grid keyed by ``Position``.

    Attributes:
        cells (PMap[Position, TerrainId]): Occupied cells only; ``NONE`` is
            never stored.
    """

    cells: PMap[Position, TerrainId] = pmap()

    def terrain_at(self, pos: Position) -> TerrainId:
        return self.cells.get(pos, Terrain.NONE)

    def occupied_positions(self) -> Sequence[Position]:
        return list(self.cells.keys())

    def with_terrain(self, pos: Position, terrain: TerrainId) -> "WorldGrid":
        """Return a grid with ``pos`` set to ``terrain`` (``NONE`` erases)."""
        if terrain == Terrain.NONE:
            return self.without(pos)
        return replace(self, cells=self.cells.set(pos, terrain))

    def without(self, pos: Position) -> "WorldGrid":
        """Return a grid with ``pos`` erased (no-op when already empty)."""
        return replace(self, cells=self.cells.discard(pos))

    def __len__(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class SourceIdWorldGrid:
    """World grid storing atlas source ids.

    Reads go through ``config.terrain_for_source`` so an id without a
    configured terrain raises ``InvariantViolation`` instead of reading as an
    empty cell.

    Attributes:
        config (TerrainConfig): Configuration providing the reverse table.
        sources (PMap[Position, AtlasSourceId]): Painted cells.
    """

    config: TerrainConfig
    sources: PMap[Position, AtlasSourceId] = pmap()

    def terrain_at(self, pos: Position) -> TerrainId:
        return self.config.terrain_for_source(self.sources.get(pos, NONE_SOURCE_ID))

    def occupied_positions(self) -> Sequence[Position]:
        return [
            pos for pos, source_id in self.sources.items() if source_id != NONE_SOURCE_ID
        ]

    def with_source(self, pos: Position, source_id: AtlasSourceId) -> "SourceIdWorldGrid":
        if source_id == NONE_SOURCE_ID:
            return replace(self, sources=self.sources.discard(pos))
        return replace(self, sources=self.sources.set(pos, source_id))

    def to_world_grid(self) -> WorldGrid:
        """Translate every cell to its terrain id."""
        return WorldGrid(
            pmap({pos: self.terrain_at(pos) for pos in self.occupied_positions()})
        )
