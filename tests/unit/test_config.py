import pytest

from dual_grid.config import DEFAULT_CONFIG, build_terrain_config
from dual_grid.errors import ConfigurationError, InvariantViolation
from dual_grid.types import NONE_SOURCE_ID, Terrain
from tests.test_utils import A, B, C, SOURCES, make_config


def test_reverse_table_derived_without_sentinel() -> None:
    config = make_config()
    assert config.source_to_terrain[10] == A
    assert config.source_to_terrain[11] == B
    assert NONE_SOURCE_ID not in config.source_to_terrain
    assert Terrain.NONE not in config.source_to_terrain.values()


def test_terrain_for_source() -> None:
    config = make_config()
    assert config.terrain_for_source(12) == C
    assert config.terrain_for_source(NONE_SOURCE_ID) == Terrain.NONE


def test_unknown_source_id_raises() -> None:
    with pytest.raises(InvariantViolation):
        make_config().terrain_for_source(99)


def test_unknown_terrain_source_raises() -> None:
    with pytest.raises(InvariantViolation):
        make_config().source_id("lava")


def test_missing_none_sentinel_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_terrain_config({A: 0, B: 1})


def test_wrong_none_sentinel_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_terrain_config({Terrain.NONE: 5, A: 0})


def test_shared_source_id_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_terrain_config({Terrain.NONE: NONE_SOURCE_ID, A: 0, B: 0})


def test_sentinel_reused_by_terrain_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_terrain_config({Terrain.NONE: NONE_SOURCE_ID, A: NONE_SOURCE_ID})


def test_configuration_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        build_terrain_config({})


def test_bespoke_offset_both_orderings() -> None:
    config = make_config({A: {B: 8}})
    assert config.bespoke_offset(A, B) == 8
    assert config.bespoke_offset(B, A) == 8
    assert config.bespoke_offset(A, C) is None


@pytest.mark.parametrize(
    "bespoke",
    [
        {A: {Terrain.NONE: 8}},
        {Terrain.NONE: {A: 8}},
        {A: {A: 8}},
        {A: {"lava": 8}},
    ],
)
def test_invalid_bespoke_rejected(bespoke: dict) -> None:  # type: ignore[type-arg]
    with pytest.raises(ConfigurationError):
        build_terrain_config(SOURCES, bespoke)


def test_default_config_terrains() -> None:
    assert Terrain.NONE not in DEFAULT_CONFIG.terrains
    assert set(DEFAULT_CONFIG.terrains) == {
        Terrain.DIRT,
        Terrain.GRASS,
        Terrain.SAND,
        Terrain.STONE,
        Terrain.WATER,
    }


def test_conflicting_bespoke_orderings_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_terrain_config(SOURCES, {A: {B: 8}, B: {A: 12}})


def test_matching_bespoke_orderings_accepted() -> None:
    config = build_terrain_config(SOURCES, {A: {B: 8}, B: {A: 8}})
    assert config.bespoke_offset(A, B) == config.bespoke_offset(B, A) == 8


@pytest.mark.parametrize("offset", ["8", 8.0, None, True])
def test_non_int_bespoke_offset_rejected(offset: object) -> None:
    with pytest.raises(ConfigurationError):
        build_terrain_config(SOURCES, {A: {B: offset}})  # type: ignore[dict-item]
