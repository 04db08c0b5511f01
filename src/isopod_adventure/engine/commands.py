"""Game transitions and command dispatch.

look() and move() are the only operations that change where the isopod
is or what it carries. handle_command(world, state, raw_input) -> str is
the text entry point: it normalizes a line, dispatches it to a handler
and returns the response to show the player.
"""

from collections.abc import Callable
from dataclasses import dataclass

from .errors import InvalidDirection, InvalidExit, UnknownCommand
from .state import GameState
from .world import DIRECTIONS, World

FAREWELL = "Goodbye, little isopod! 🐾"

HELP_TEXT = (
    "Commands:\n"
    "- go [direction]: Move in a direction (north, south, east, west)\n"
    "- look: Look around the current location\n"
    "- inventory: Show your inventory\n"
    "- help: Show this help message\n"
    "- quit: Exit the game"
)


@dataclass(frozen=True)
class LookResult:
    """What the isopod sees at its current location."""

    location: str
    description: str
    exits: tuple[str, ...]
    found_item: str | None = None

    def render(self) -> str:
        lines = [self.description]
        if self.found_item is not None:
            lines.append(f"You found: {self.found_item}")
        if self.exits:
            lines.append(f"You can go: {', '.join(self.exits)}")
        else:
            lines.append("There is no way out of here.")
        return "\n".join(lines)


def look(world: World, state: GameState) -> LookResult:
    """Reveal the current location, collecting its item the first time."""
    location = state.current_location
    description = world.describe(location) or ""

    found = None
    item = world.item_at(location)
    if item is not None and item not in state.found_items:
        state.inventory.add(item)
        state.found_items.add(item)
        found = item

    return LookResult(
        location=location,
        description=description,
        exits=world.exits_of(location),
        found_item=found,
    )


def move(world: World, state: GameState, direction: str) -> LookResult:
    """Follow the exit in `direction`, then look around.

    Raises InvalidExit, leaving state untouched, when there is no such exit.
    """
    dest = world.destination(state.current_location, direction)
    if dest is None:
        raise InvalidExit(state.current_location, direction)
    state.current_location = dest
    return look(world, state)


def has_won(world: World, state: GameState) -> bool:
    """True once every distinct item in the world has been collected."""
    total = world.total_items
    return total > 0 and len(state.inventory) == total


def get_inventory(state: GameState) -> list[str]:
    """Carried items, sorted for stable output."""
    return sorted(state.inventory)


def parse_direction(word: str) -> str:
    """Validate a direction word against the four cardinals."""
    if word not in DIRECTIONS:
        raise InvalidDirection(word)
    return word


def _cmd_help(world: World, state: GameState, arg: str | None = None) -> str:
    return HELP_TEXT


def _cmd_look(world: World, state: GameState, arg: str | None = None) -> str:
    return look(world, state).render()


def _cmd_inventory(world: World, state: GameState, arg: str | None = None) -> str:
    """Handle INVENTORY command."""
    items = get_inventory(state)
    if not items:
        return "Your inventory is empty."
    return "You have: " + ", ".join(items)


def _cmd_go(world: World, state: GameState, arg: str | None = None) -> str:
    """Handle GO <direction>."""
    if not arg:
        return "Go where? Try north, south, east, or west."
    try:
        direction = parse_direction(arg)
        result = move(world, state, direction)
    except InvalidDirection:
        return "Invalid direction. Try north, south, east, or west."
    except InvalidExit:
        return f"You can't go {arg} from here."
    return f"You move {direction} to the {result.location}.\n" + result.render()


def _cmd_quit(world: World, state: GameState, arg: str | None = None) -> str:
    state.is_finished = True
    return FAREWELL


_COMMAND_DISPATCH: dict[str, Callable[[World, GameState, str | None], str]] = {
    "help": _cmd_help,
    "look": _cmd_look,
    "inventory": _cmd_inventory,
    "go": _cmd_go,
    "quit": _cmd_quit,
}


def parse_command(raw_input: str) -> tuple[str, str | None]:
    """Split a line into a known command word and its argument.

    Case and surrounding/repeated whitespace are ignored.
    """
    words = raw_input.strip().lower().split()
    verb = words[0]
    arg = " ".join(words[1:]) or None
    if verb not in _COMMAND_DISPATCH:
        raise UnknownCommand(verb)
    # Only "go" takes an argument.
    if arg is not None and verb != "go":
        raise UnknownCommand(" ".join(words))
    return verb, arg


def handle_command(world: World, state: GameState, raw_input: str) -> str:
    """Process a command and return the response text."""
    state.turns += 1

    if not raw_input.strip():
        return "I beg your pardon?"

    try:
        verb, arg = parse_command(raw_input)
    except UnknownCommand:
        return "Unknown command. Type 'help' for a list of commands."

    return _COMMAND_DISPATCH[verb](world, state, arg)
