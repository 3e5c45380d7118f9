import pytest
from pyrsistent import pmap

from dual_grid.components import Position
from dual_grid.errors import InvariantViolation
from dual_grid.types import NONE_SOURCE_ID, Terrain
from dual_grid.world import SourceIdWorldGrid, WorldGrid
from tests.test_utils import A, B, make_config


def test_absent_cell_reads_none() -> None:
    assert WorldGrid().terrain_at(Position(3, -7)) == Terrain.NONE


def test_with_terrain_is_persistent() -> None:
    world = WorldGrid()
    painted = world.with_terrain(Position(0, 0), A)
    assert painted.terrain_at(Position(0, 0)) == A
    assert world.terrain_at(Position(0, 0)) == Terrain.NONE
    assert len(painted) == 1


def test_painting_none_erases() -> None:
    world = WorldGrid().with_terrain(Position(1, 1), A)
    erased = world.with_terrain(Position(1, 1), Terrain.NONE)
    assert erased.occupied_positions() == []


def test_without_missing_cell_is_noop() -> None:
    world = WorldGrid().with_terrain(Position(0, 0), B)
    assert world.without(Position(5, 5)) == world


def test_source_id_grid_maps_through_reverse_table() -> None:
    grid = SourceIdWorldGrid(make_config()).with_source(Position(0, 0), 10)
    assert grid.terrain_at(Position(0, 0)) == A
    assert grid.terrain_at(Position(1, 0)) == Terrain.NONE
    assert grid.occupied_positions() == [Position(0, 0)]


def test_source_id_grid_unknown_id_raises() -> None:
    grid = SourceIdWorldGrid(make_config(), pmap({Position(0, 0): 42}))
    with pytest.raises(InvariantViolation):
        grid.terrain_at(Position(0, 0))


def test_source_id_grid_sentinel_erases() -> None:
    grid = SourceIdWorldGrid(make_config()).with_source(Position(0, 0), 11)
    grid = grid.with_source(Position(0, 0), NONE_SOURCE_ID)
    assert grid.occupied_positions() == []


def test_source_id_grid_to_world_grid() -> None:
    grid = (
        SourceIdWorldGrid(make_config())
        .with_source(Position(0, 0), 10)
        .with_source(Position(2, 3), 11)
    )
    world = grid.to_world_grid()
    assert world.terrain_at(Position(0, 0)) == A
    assert world.terrain_at(Position(2, 3)) == B
