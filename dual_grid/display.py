"""Display layer writers.

Display layers are the 4 visible grids, offset by half a cell from the world
grid. They are the only thing the core mutates. A host engine supplies its
own :class:`DisplayLayerWriter` implementations; :class:`DisplayLayer` is an
in-memory one used by tests, the CLI and the preview renderer.
"""

from typing import Dict, Optional, Protocol, Sequence

from pyrsistent import PMap, pmap

from dual_grid.components import AtlasCoord, Position, TilePaint
from dual_grid.errors import ConfigurationError
from dual_grid.types import AtlasSourceId, LAYER_COUNT


class DisplayLayerWriter(Protocol):
    """Write access to one display layer."""

    def set_cell(
        self, pos: Position, source_id: AtlasSourceId, atlas_coord: AtlasCoord
    ) -> None: ...

    def clear_cell(self, pos: Position) -> None: ...


class DisplayLayer:
    """Dictionary-backed display layer.

    Cells are stored as ``(source_id, atlas_coord)`` pairs. ``writes`` counts
    ``set_cell`` calls, which is handy when checking how much work a change
    caused.
    """

    name: str
    writes: int

    def __init__(self, name: str = "layer") -> None:
        self.name = name
        self.writes = 0
        self._cells: Dict[Position, tuple[AtlasSourceId, AtlasCoord]] = {}

    def set_cell(
        self, pos: Position, source_id: AtlasSourceId, atlas_coord: AtlasCoord
    ) -> None:
        self._cells[pos] = (source_id, atlas_coord)
        self.writes += 1

    def clear_cell(self, pos: Position) -> None:
        self._cells.pop(pos, None)

    def cell_at(self, pos: Position) -> Optional[tuple[AtlasSourceId, AtlasCoord]]:
        return self._cells.get(pos)

    def cells(self) -> PMap[Position, tuple[AtlasSourceId, AtlasCoord]]:
        """Snapshot of all painted cells."""
        return pmap(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"DisplayLayer({self.name!r}, cells={len(self._cells)})"


def make_display_layers() -> list[DisplayLayer]:
    """Four empty in-memory layers named ``layer1`` .. ``layer4``."""
    return [DisplayLayer(f"layer{i + 1}") for i in range(LAYER_COUNT)]


def validate_layers(layers: Sequence[Optional[DisplayLayerWriter]]) -> None:
    """Check that exactly 4 layer handles are present.

    Raises:
        ConfigurationError: If the count is wrong or a handle is ``None``.
    """
    if len(layers) != LAYER_COUNT:
        raise ConfigurationError(
            f"Expected {LAYER_COUNT} display layers, got {len(layers)}"
        )
    for index, layer in enumerate(layers):
        if layer is None:
            raise ConfigurationError(f"Display layer {index + 1} is missing")


def write_cell(
    layers: Sequence[DisplayLayerWriter],
    pos: Position,
    paints: PMap[int, TilePaint],
) -> None:
    """Clear ``pos`` on every layer, then paint ``paints`` (layer index -> tile).

    ``paints`` is fully computed by the caller before this runs, so a failure
    while selecting tiles never leaves a half-written cell.
    """
    for layer in layers:
        layer.clear_cell(pos)
    for index, paint in sorted(paints.items()):
        layers[index].set_cell(pos, paint.source_id, paint.atlas_coord)
