"""Layer assignment.

Terrains that share a display cell are stacked onto the 4 display layers;
layer 0 is drawn first (bottom), layer 3 last (top). The stacking order is a
pluggable :data:`~dual_grid.types.LayerOrderFn`: it receives the selected
variants (first-occurrence order) plus the sampled neighbourhood and returns
the variants bottom-to-top.

Built-in policies:

* :func:`reversed_layer_order`: the terrain scanned first paints last, so
  lower neighbours sit above upper ones.
* :func:`forward_layer_order`: scan order, bottom-to-top.
* :func:`default_layer_order`: reversed, except that a top-right cell
  differing from the other three (``X, Y, X, X``) is drawn above them.

Users may supply their own function or extend :data:`LAYER_ORDER_REGISTRY`.
"""

from typing import Dict, Sequence

from pyrsistent import PMap, pmap

from dual_grid.errors import ConfigurationError, InvariantViolation
from dual_grid.types import (
    LAYER_COUNT,
    LayerIndex,
    LayerOrderFn,
    Neighborhood,
    Terrain,
    TerrainVariant,
)


def reversed_layer_order(
    variants: Sequence[TerrainVariant], neighborhood: Neighborhood
) -> Sequence[TerrainVariant]:
    return list(reversed(variants))


def forward_layer_order(
    variants: Sequence[TerrainVariant], neighborhood: Neighborhood
) -> Sequence[TerrainVariant]:
    return list(variants)


def is_top_right_island(neighborhood: Neighborhood) -> bool:
    """True for the pattern ``(X, Y, X, X)`` with ``X`` present and ``Y != X``."""
    top_left, top_right, bottom_left, bottom_right = neighborhood
    return (
        top_left != Terrain.NONE
        and top_left != top_right
        and top_left == bottom_left
        and top_left == bottom_right
    )


def default_layer_order(
    variants: Sequence[TerrainVariant], neighborhood: Neighborhood
) -> Sequence[TerrainVariant]:
    if is_top_right_island(neighborhood):
        return forward_layer_order(variants, neighborhood)
    return reversed_layer_order(variants, neighborhood)


LAYER_ORDER_REGISTRY: Dict[str, LayerOrderFn] = {
    "default": default_layer_order,
    "reversed": reversed_layer_order,
    "forward": forward_layer_order,
}
"""Registry of built-in layer order policies by name."""


def layer_order_fn(name: str) -> LayerOrderFn:
    """Look up a registered policy.

    Raises:
        ConfigurationError: If ``name`` is not registered.
    """
    if name not in LAYER_ORDER_REGISTRY:
        raise ConfigurationError(
            f"Unknown layer order {name!r}; expected one of "
            f"{sorted(LAYER_ORDER_REGISTRY)}"
        )
    return LAYER_ORDER_REGISTRY[name]


def assign_layers(
    variants: Sequence[TerrainVariant],
    neighborhood: Neighborhood,
    order_fn: LayerOrderFn = default_layer_order,
) -> PMap[LayerIndex, TerrainVariant]:
    """Map each variant to a display layer index.

    A single variant always goes to layer 0 without consulting ``order_fn``.

    Raises:
        InvariantViolation: If more than 4 variants are given or the policy
            drops or invents variants.
    """
    if len(variants) > LAYER_COUNT:
        raise InvariantViolation(
            f"{len(variants)} terrains cannot share one display cell"
        )
    if len(variants) == 1:
        return pmap({0: variants[0]})

    ordered = list(order_fn(variants, neighborhood))
    if sorted(ordered, key=repr) != sorted(variants, key=repr):
        raise InvariantViolation(
            f"Layer order policy changed the variants: {variants} -> {ordered}"
        )
    return pmap({index: variant for index, variant in enumerate(ordered)})
