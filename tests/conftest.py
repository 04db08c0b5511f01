"""Shared test fixtures for Isopod Adventure."""

import pytest

from isopod_adventure.engine.loader import default_world_path, load_world
from isopod_adventure.engine.state import GameState, new_game_state
from isopod_adventure.engine.world import World

COOKIE = "Cookie Crumb 🍪"
FRIEND = "Isopod Friend 🐾"
HIDEOUT = "A Place to Hide 🛏️"


@pytest.fixture
def world() -> World:
    return load_world(default_world_path())


@pytest.fixture
def state(world: World) -> GameState:
    return new_game_state(world)
