"""Keyboard commands: W/A/S/D to move, Q to quit."""

from environment import Direction

QUIT = "quit"


def key_direction(key: str) -> Direction | None:
    if key == "w":
        return Direction.UP
    if key == "d":
        return Direction.RIGHT
    if key == "s":
        return Direction.DOWN
    if key == "a":
        return Direction.LEFT
    return None


def parse_command(line: str) -> Direction | str | None:
    """
    Turns one input line into a Direction, QUIT, or None.

    Only the first non-blank character counts. Blank lines and unknown
    keys give None so the caller can simply prompt again.
    """
    text = line.strip()
    if not text:
        return None

    key = text[0].lower()
    if key == "q":
        return QUIT
    return key_direction(key)
