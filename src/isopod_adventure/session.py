"""Session layer: owns one game and drives the interactive loop."""

from typing import TextIO

import structlog

from .engine.commands import (
    HELP_TEXT,
    get_inventory,
    handle_command,
    has_won,
    look,
)
from .engine.state import GameState, new_game_state
from .engine.world import World
from .logging import get_logger

logger = get_logger(__name__)

PROMPT = "> "


class GameSession:
    """Wraps a World and the single GameState played against it."""

    def __init__(self, world: World, game_state: GameState):
        self.world = world
        self.state = game_state

    @classmethod
    def new(cls, world: World) -> "GameSession":
        """Start a fresh game at the world's starting location."""
        state = new_game_state(world)
        logger.info(
            "game_started",
            location=state.current_location,
            total_items=world.total_items,
        )
        return cls(world, state)

    @property
    def is_finished(self) -> bool:
        return self.state.is_finished

    def intro(self) -> str:
        """Welcome text followed by the command list."""
        if not self.world.welcome_text:
            return HELP_TEXT
        return self.world.welcome_text + "\n\n" + HELP_TEXT

    def process_command(self, raw_input: str) -> str:
        """Run one command, then check whether it won the game."""
        location = self.state.current_location
        carried = len(self.state.inventory)

        response = handle_command(self.world, self.state, raw_input)

        if self.state.current_location != location:
            logger.debug(
                "location_entered",
                location=self.state.current_location,
                turns=self.state.turns,
            )
        if len(self.state.inventory) > carried:
            logger.info(
                "item_found",
                location=self.state.current_location,
                carried=len(self.state.inventory),
                total_items=self.world.total_items,
            )
        if self.state.is_finished:
            logger.info("game_quit", turns=self.state.turns)
            return response

        if has_won(self.world, self.state):
            self.state.is_finished = True
            logger.info("game_won", turns=self.state.turns)
            if self.world.win_text:
                response = response + "\n\n" + self.world.win_text
        return response

    def get_inventory(self) -> list[str]:
        return get_inventory(self.state)

    def look(self) -> str:
        return look(self.world, self.state).render()


def play(world: World, stdin: TextIO, stdout: TextIO) -> GameSession:
    """Read commands from stdin until the game is won, quit, or input ends."""
    session = GameSession.new(world)
    structlog.contextvars.bind_contextvars(start=world.start_location)

    stdout.write(session.intro() + "\n")
    while not session.is_finished:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            # End of input behaves like quitting.
            stdout.write("\n" + session.process_command("quit") + "\n")
            break
        stdout.write(session.process_command(line) + "\n")

    structlog.contextvars.clear_contextvars()
    return session
