import numpy as np
import pytest

from dual_grid.components import Position
from dual_grid.errors import ConfigurationError
from dual_grid.levels import world_from_array, world_from_rows, world_to_array
from dual_grid.types import Terrain
from tests.test_utils import A, B

LEGEND = {".": Terrain.NONE, "a": A, "b": B}


def test_world_from_rows() -> None:
    world = world_from_rows(["a.", ".b"], LEGEND)
    assert world.terrain_at(Position(0, 0)) == A
    assert world.terrain_at(Position(1, 1)) == B
    assert world.terrain_at(Position(1, 0)) == Terrain.NONE
    assert len(world) == 2


def test_world_from_rows_origin() -> None:
    world = world_from_rows(["a"], LEGEND, origin=Position(-2, 5))
    assert world.occupied_positions() == [Position(-2, 5)]


def test_world_from_rows_unknown_char() -> None:
    with pytest.raises(ConfigurationError):
        world_from_rows(["a?"], LEGEND)


def test_world_from_array_negative_is_empty() -> None:
    world = world_from_array(np.array([[0, -1], [1, 0]]), [A, B])
    assert world.terrain_at(Position(1, 0)) == Terrain.NONE
    assert world.terrain_at(Position(0, 1)) == B
    assert len(world) == 3


def test_world_from_array_rejects_bad_input() -> None:
    with pytest.raises(ConfigurationError):
        world_from_array(np.array([0, 1]), [A, B])
    with pytest.raises(ConfigurationError):
        world_from_array(np.array([[2]]), [A, B])


def test_world_to_array_bounding_box() -> None:
    world = world_from_rows(["..a", ".b."], LEGEND)
    grid, origin = world_to_array(world, [A, B])
    assert origin == Position(1, 0)
    assert grid.tolist() == [[-1, 0], [1, -1]]
    assert world_from_array(grid, [A, B], origin=origin) == world


def test_world_to_array_empty() -> None:
    grid, origin = world_to_array(world_from_rows([".."], LEGEND), [A])
    assert grid.shape == (0, 0)
    assert origin == Position(0, 0)


def test_world_from_array_rejects_float_indices() -> None:
    with pytest.raises(ConfigurationError):
        world_from_array(np.array([[0.0, 1.7]]), [A, B])


def test_world_from_array_accepts_integer_lists() -> None:
    world = world_from_array([[1, -1]], [A, B])
    assert world.terrain_at(Position(0, 0)) == B
