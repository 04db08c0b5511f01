"""Immutable data structures for the isopod's world.

Built once from world.toml at startup and shared by reference with the
game state machine.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# The only directions an exit may be labelled with.
DIRECTIONS = ("north", "south", "east", "west")

DEFAULT_START_LOCATION = "Garden"


@dataclass(frozen=True)
class Location:
    """A named place with a description and directional exits."""

    name: str
    description: str
    exits: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class World:
    """The complete game world: locations, items and game text."""

    locations: Mapping[str, Location] = field(
        default_factory=lambda: MappingProxyType({})
    )
    # location name → item label, at most one item per location
    items: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    welcome_text: str = ""
    win_text: str = ""
    start_location: str = DEFAULT_START_LOCATION

    def describe(self, location: str) -> str | None:
        loc = self.locations.get(location)
        return loc.description if loc else None

    def exits_of(self, location: str) -> tuple[str, ...]:
        """Exit directions from a location, in declaration order."""
        loc = self.locations.get(location)
        if loc is None:
            return ()
        return tuple(loc.exits)

    def destination(self, location: str, direction: str) -> str | None:
        """Where going `direction` from `location` leads, if anywhere."""
        loc = self.locations.get(location)
        if loc is None:
            return None
        return loc.exits.get(direction)

    def item_at(self, location: str) -> str | None:
        return self.items.get(location)

    @property
    def total_items(self) -> int:
        """Number of distinct collectible items."""
        return len(set(self.items.values()))
