"""Authoring helpers for building world grids from text or arrays."""

from .convert import world_from_array, world_from_rows, world_to_array

__all__ = ["world_from_array", "world_from_rows", "world_to_array"]
