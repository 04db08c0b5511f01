"""Parse a world.toml data file into a World object.

The file has three kinds of tables:

    [game]               welcome_text, win_text, optional start_location
    [locations.<name>]   description plus one key per exit direction
    [items]              location name = item label

The world is validated as it is built; any inconsistency is a
WorldLoadError rather than something the game discovers mid-play.
"""

import tomllib
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .errors import WorldLoadError
from .world import DEFAULT_START_LOCATION, DIRECTIONS, Location, World


def default_world_path() -> Path:
    """Locate the packaged world.toml (works when installed in a venv)."""
    return resources.files("isopod_adventure.data").joinpath("world.toml")


def _require_table(data: dict[str, Any], key: str) -> dict[str, Any]:
    table = data.get(key)
    if not isinstance(table, dict):
        raise WorldLoadError(f"Missing [{key}] table")
    return table


def _require_text(table: dict[str, Any], key: str, where: str) -> str:
    value = table.get(key)
    if not isinstance(value, str):
        raise WorldLoadError(f"{where}: {key!r} must be a string")
    return value


def _parse_location(name: str, table: Any) -> Location:
    """One [locations.<name>] table: a description and flattened exits."""
    if not isinstance(table, dict):
        raise WorldLoadError(f"Location {name!r} must be a table")
    where = f"Location {name!r}"
    description = _require_text(table, "description", where)

    exits: dict[str, str] = {}
    for key, value in table.items():
        if key == "description":
            continue
        if key not in DIRECTIONS:
            raise WorldLoadError(f"{where}: unknown direction {key!r}")
        if not isinstance(value, str):
            raise WorldLoadError(f"{where}: exit {key!r} must be a location name")
        exits[key] = value

    return Location(
        name=name,
        description=description,
        exits=MappingProxyType(exits),
    )


def _check_references(
    locations: dict[str, Location], items: dict[str, str], start: str,
) -> None:
    """Every exit, item and the start must point at a known location."""
    for loc in locations.values():
        for direction, dest in loc.exits.items():
            if dest not in locations:
                raise WorldLoadError(
                    f"Location {loc.name!r}: exit {direction!r} leads to "
                    f"unknown location {dest!r}"
                )
    for loc_name in items:
        if loc_name not in locations:
            raise WorldLoadError(f"Item placed at unknown location {loc_name!r}")
    if start not in locations:
        raise WorldLoadError(f"Start location {start!r} does not exist")


def parse_world(data: dict[str, Any]) -> World:
    """Build a validated World from already-decoded TOML data."""
    game = _require_table(data, "game")
    welcome_text = _require_text(game, "welcome_text", "[game]")
    win_text = _require_text(game, "win_text", "[game]")
    start = game.get("start_location", DEFAULT_START_LOCATION)
    if not isinstance(start, str):
        raise WorldLoadError("[game]: 'start_location' must be a string")

    locations = {
        name: _parse_location(name, table)
        for name, table in _require_table(data, "locations").items()
    }

    raw_items = data.get("items", {})
    if not isinstance(raw_items, dict):
        raise WorldLoadError("[items] must be a table")
    items: dict[str, str] = {}
    for loc_name, label in raw_items.items():
        if not isinstance(label, str):
            raise WorldLoadError(f"Item at {loc_name!r} must be a string label")
        items[loc_name] = label

    _check_references(locations, items, start)

    return World(
        locations=MappingProxyType(locations),
        items=MappingProxyType(items),
        welcome_text=welcome_text.strip(),
        win_text=win_text.strip(),
        start_location=start,
    )


def load_world(data_path: Path) -> World:
    """Parse world.toml and return a populated World."""
    try:
        with open(data_path, "rb") as fh:
            data = tomllib.load(fh)
    except OSError as exc:
        raise WorldLoadError(f"Could not read world file {data_path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise WorldLoadError(f"Could not parse world file {data_path}: {exc}") from exc

    return parse_world(data)
