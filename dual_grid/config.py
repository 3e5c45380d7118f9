"""Terrain configuration.

A :class:`TerrainConfig` is built once, at start-up, by
:func:`build_terrain_config`. It holds:

* ``terrain_to_source``: forward table from terrain id to the atlas source id
  holding that terrain's tiles. Must contain ``Terrain.NONE`` mapped to the
  ``NONE_SOURCE_ID`` sentinel.
* ``source_to_terrain``: reverse table derived from the forward one. It never
  contains the sentinel, so a world cell holding an unconfigured source id is
  reported instead of being read as empty.
* ``bespoke_mixes``: sparse ``terrain -> {other terrain -> x offset}`` table of
  pair-specific mixed tiles. Either ordering of a pair may be registered.

All maps are persistent (``pyrsistent``) so a config can be shared freely.
"""

from dataclasses import dataclass
from typing import Mapping, Optional

from pyrsistent import PMap, pmap

from dual_grid.errors import ConfigurationError, InvariantViolation
from dual_grid.types import AtlasSourceId, NONE_SOURCE_ID, Terrain, TerrainId


BespokeMixes = Mapping[TerrainId, Mapping[TerrainId, int]]


@dataclass(frozen=True)
class TerrainConfig:
    """Immutable terrain/atlas configuration.

    Attributes:
        terrain_to_source (PMap[TerrainId, AtlasSourceId]): Forward table,
            including the ``NONE`` sentinel entry.
        source_to_terrain (PMap[AtlasSourceId, TerrainId]): Derived reverse
            table over configured (non-sentinel) source ids.
        bespoke_mixes (PMap[TerrainId, PMap[TerrainId, int]]): Pair-specific
            x offsets for mixed tiles.
    """

    terrain_to_source: PMap[TerrainId, AtlasSourceId]
    source_to_terrain: PMap[AtlasSourceId, TerrainId]
    bespoke_mixes: PMap[TerrainId, PMap[TerrainId, int]] = pmap()

    @property
    def terrains(self) -> tuple[TerrainId, ...]:
        """Configured terrains, ``NONE`` excluded."""
        return tuple(t for t in self.terrain_to_source if t != Terrain.NONE)

    def source_id(self, terrain: TerrainId) -> AtlasSourceId:
        """Atlas source id for ``terrain``.

        Raises:
            InvariantViolation: If the terrain is not configured.
        """
        if terrain not in self.terrain_to_source:
            raise InvariantViolation(f"Terrain {terrain!r} is not configured")
        return self.terrain_to_source[terrain]

    def terrain_for_source(self, source_id: AtlasSourceId) -> TerrainId:
        """Terrain stored under ``source_id``.

        ``NONE_SOURCE_ID`` reads as ``Terrain.NONE``; any other unknown id is
        an error.

        Raises:
            InvariantViolation: If ``source_id`` has no reverse mapping.
        """
        if source_id == NONE_SOURCE_ID:
            return Terrain.NONE
        if source_id not in self.source_to_terrain:
            raise InvariantViolation(
                f"Atlas source id {source_id} has no configured terrain"
            )
        return self.source_to_terrain[source_id]

    def bespoke_offset(self, terrain: TerrainId, other: TerrainId) -> Optional[int]:
        """Registered x offset for the pair, trying both orderings."""
        offset = self.bespoke_mixes.get(terrain, pmap()).get(other)
        if offset is None:
            offset = self.bespoke_mixes.get(other, pmap()).get(terrain)
        return offset


def build_terrain_config(
    terrain_to_source: Mapping[TerrainId, AtlasSourceId],
    bespoke_mixes: Optional[BespokeMixes] = None,
) -> TerrainConfig:
    """Validate the forward tables and derive the reverse one.

    Args:
        terrain_to_source: Terrain id to atlas source id. Must include
            ``Terrain.NONE`` mapped to ``NONE_SOURCE_ID``.
        bespoke_mixes: Optional sparse pair table of x offsets.

    Returns:
        TerrainConfig: Immutable configuration.

    Raises:
        ConfigurationError: If the sentinel is missing or wrong, a source id is
            shared by two terrains, or a bespoke entry names ``NONE``, the same
            terrain twice or an unconfigured terrain, has a non-int offset, or
            disagrees with the opposite ordering of its pair.
    """
    if Terrain.NONE not in terrain_to_source:
        raise ConfigurationError("terrain_to_source must map Terrain.NONE")
    if terrain_to_source[Terrain.NONE] != NONE_SOURCE_ID:
        raise ConfigurationError(
            f"Terrain.NONE must map to {NONE_SOURCE_ID}, "
            f"got {terrain_to_source[Terrain.NONE]}"
        )

    reverse: dict[AtlasSourceId, TerrainId] = {}
    for terrain, source_id in terrain_to_source.items():
        if terrain == Terrain.NONE:
            continue
        if source_id == NONE_SOURCE_ID:
            raise ConfigurationError(
                f"Terrain {terrain!r} uses the reserved source id {NONE_SOURCE_ID}"
            )
        if source_id in reverse:
            raise ConfigurationError(
                f"Source id {source_id} is shared by {reverse[source_id]!r} "
                f"and {terrain!r}"
            )
        reverse[source_id] = terrain

    mixes: dict[TerrainId, PMap[TerrainId, int]] = {}
    for terrain, others in (bespoke_mixes or {}).items():
        for other, offset in others.items():
            _check_bespoke_pair(terrain, other, offset, terrain_to_source)
            registered = mixes.get(other, pmap()).get(terrain)
            if registered is not None and registered != offset:
                raise ConfigurationError(
                    f"Bespoke mix {terrain!r}/{other!r} registered with offsets "
                    f"{offset} and {registered}"
                )
        mixes[terrain] = pmap(others)

    return TerrainConfig(
        terrain_to_source=pmap(terrain_to_source),
        source_to_terrain=pmap(reverse),
        bespoke_mixes=pmap(mixes),
    )


def _check_bespoke_pair(
    terrain: TerrainId,
    other: TerrainId,
    offset: int,
    terrain_to_source: Mapping[TerrainId, AtlasSourceId],
) -> None:
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise ConfigurationError(
            f"Bespoke mix {terrain!r}/{other!r} offset must be an int, got {offset!r}"
        )
    if Terrain.NONE in (terrain, other):
        raise ConfigurationError("Bespoke mixes cannot involve Terrain.NONE")
    if terrain == other:
        raise ConfigurationError(f"Bespoke mix pairs {terrain!r} with itself")
    for t in (terrain, other):
        if t not in terrain_to_source:
            raise ConfigurationError(f"Bespoke mix names unconfigured terrain {t!r}")


DEFAULT_TERRAIN_SOURCES: PMap[TerrainId, AtlasSourceId] = pmap(
    {
        Terrain.NONE: NONE_SOURCE_ID,
        Terrain.DIRT: 0,
        Terrain.GRASS: 1,
        Terrain.SAND: 2,
        Terrain.STONE: 3,
        Terrain.WATER: 4,
    }
)
"""Source ids for the built-in terrains, one atlas per terrain."""

DEFAULT_CONFIG: TerrainConfig = build_terrain_config(DEFAULT_TERRAIN_SOURCES)
