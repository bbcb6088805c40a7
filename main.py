import argparse
import logging
import random
import sys
from typing import Optional, TextIO

from rich.console import Console

from config import GameSetupError, build_config, parse_density, parse_dimension
from controls import QUIT, parse_command
from environment import GameState, new_game

logger = logging.getLogger(__name__)

DIMENSION_PROMPT = "enter grid dimension (e.g., 10 for 10x10): "
DENSITY_PROMPT = "enter the density (e.g. .2 for 20%): "
MOVE_PROMPT = "Move (W/A/S/D), Q to quit: "


def read_line(console: Console, prompt: str, stream: Optional[TextIO] = None) -> Optional[str]:
    """Prompt for one line; None once input is exhausted."""
    try:
        line = console.input(prompt, markup=False, stream=stream)
    except EOFError:
        return None
    if stream is not None and line == "":
        return None
    return line


def render(console: Console, game: GameState) -> None:
    console.clear()
    for row in game.project():
        console.print(row, markup=False, highlight=False)
    console.print(f"Steps: {game.steps}", markup=False, highlight=False)


def play(console: Console, game: GameState, stream: Optional[TextIO] = None) -> bool:
    """Run the move loop until the player wins or quits. Returns True on a win."""
    while True:
        render(console, game)
        line = read_line(console, MOVE_PROMPT, stream)
        if line is None:
            console.print()
            console.print("Goodbye!")
            return False

        command = parse_command(line)
        if command is None:
            continue
        if command == QUIT:
            console.print("Goodbye!")
            return False

        game.try_move(command)
        if game.won:
            render(console, game)
            console.print(f"You won! Total steps: {game.steps}", highlight=False)
            return True


def main(
    argv: Optional[list[str]] = None,
    console: Optional[Console] = None,
    stream: Optional[TextIO] = None,
) -> int:
    parser = argparse.ArgumentParser(prog="gridwalk", description="Walk off the edge of a random grid.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible grid")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (written to stderr)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = console or Console(highlight=False)
    console.print("Welcome to the Grid!")

    try:
        raw_size = read_line(console, DIMENSION_PROMPT, stream)
        size = parse_dimension(raw_size or "")
        raw_density = read_line(console, DENSITY_PROMPT, stream)
        density = parse_density(raw_density or "")
        config = build_config(size, density, seed=args.seed)
        game = new_game(config.size, config.density, random.Random(config.seed))
    except GameSetupError as exc:
        logger.info("Startup failed: %s", exc)
        console.print(f"Error starting game: {exc}", markup=False)
        return 1

    play(console, game, stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())
