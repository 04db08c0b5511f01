"""Mutable per-game state.

Holds only names and labels, never World references, so the world can
be shared between games.
"""

from dataclasses import dataclass, field

from .world import DEFAULT_START_LOCATION, World


@dataclass
class GameState:
    """Where the isopod is and what it has collected."""

    current_location: str = DEFAULT_START_LOCATION
    inventory: set[str] = field(default_factory=set)
    # Every item ever revealed; guards against collecting twice.
    # Nothing is ever dropped, so this always equals inventory.
    found_items: set[str] = field(default_factory=set)

    turns: int = 0
    is_finished: bool = False


def new_game_state(world: World) -> GameState:
    """Create a fresh game state at the world's starting location."""
    return GameState(current_location=world.start_location)
