"""Tests for World queries."""

import pytest

from isopod_adventure.engine.world import DIRECTIONS, World

from conftest import COOKIE


def test_describe(world: World):
    assert "lush garden" in world.describe("Garden")
    assert world.describe("Nowhere") is None


def test_exits_of(world: World):
    assert world.exits_of("Garden") == ("north", "east")
    assert world.exits_of("Nowhere") == ()


def test_exits_of_is_stable(world: World):
    assert world.exits_of("Forest") == world.exits_of("Forest")


def test_destination_matches_declared_exits(world: World):
    """destination() returns a location iff an exit is declared."""
    for name, loc in world.locations.items():
        for direction in DIRECTIONS:
            dest = world.destination(name, direction)
            if direction in loc.exits:
                assert dest == loc.exits[direction]
                assert dest in world.locations
            else:
                assert dest is None


def test_destination_unrecognized_direction(world: World):
    assert world.destination("Garden", "up") is None
    assert world.destination("Nowhere", "north") is None


def test_item_at(world: World):
    assert world.item_at("Garden") == COOKIE
    assert world.item_at("Rocky Path") is None


def test_locations_are_immutable(world: World):
    garden = world.locations["Garden"]
    with pytest.raises(AttributeError):
        garden.description = "A parking lot."
    with pytest.raises(TypeError):
        garden.exits["west"] = "Pond"
