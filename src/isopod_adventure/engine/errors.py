"""Exceptions raised by the game engine."""


class AdventureError(Exception):
    """Base class for all game errors."""


class InvalidExit(AdventureError):
    """The current location has no exit in the requested direction."""

    def __init__(self, location: str, direction: str):
        super().__init__(f"No exit {direction!r} from {location!r}")
        self.location = location
        self.direction = direction


class InvalidDirection(AdventureError):
    """A direction word that is not one of the four cardinals."""

    def __init__(self, direction: str):
        super().__init__(f"Unrecognized direction {direction!r}")
        self.direction = direction


class UnknownCommand(AdventureError):
    """Input that does not match any known command."""

    def __init__(self, command: str):
        super().__init__(f"Unknown command {command!r}")
        self.command = command


class WorldLoadError(AdventureError):
    """The world data file is missing or malformed."""
