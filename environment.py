"""Grid walk game state: grid generation, placement, moves and the text projection."""

import logging
import random
from enum import Enum

from config import InvalidDimensionError, NoOpenCellError

logger = logging.getLogger(__name__)


class Cell(Enum):
    OPEN = "."
    BLOCKED = "#"


class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


class MoveResult(Enum):
    MOVED = "moved"
    BLOCKED = "blocked"
    ESCAPED = "escaped"
    IGNORED = "ignored"


def direction_delta(direction: Direction) -> tuple[int, int]:
    """(row, col) offset of one step in `direction`."""
    if direction is Direction.UP:
        return -1, 0
    if direction is Direction.RIGHT:
        return 0, 1
    if direction is Direction.DOWN:
        return 1, 0
    if direction is Direction.LEFT:
        return 0, -1
    raise ValueError(f"unknown direction: {direction!r}")


def direction_glyph(direction: Direction) -> str:
    if direction is Direction.UP:
        return "^"
    if direction is Direction.RIGHT:
        return ">"
    if direction is Direction.DOWN:
        return "v"
    if direction is Direction.LEFT:
        return "<"
    raise ValueError(f"unknown direction: {direction!r}")


def generate_grid(size: int, density: float, rng: random.Random) -> list[list[Cell]]:
    """Fill a size x size grid, blocking each cell independently with probability `density`.

    Nothing guarantees the result is walkable.
    """
    if size <= 0:
        raise InvalidDimensionError(f"invalid grid size: {size}")
    density = min(max(density, 0.0), 1.0)

    grid = []
    for _ in range(size):
        row = []
        for _ in range(size):
            row.append(Cell.BLOCKED if rng.random() < density else Cell.OPEN)
        grid.append(row)
    return grid


def open_cells(grid: list[list[Cell]]) -> list[tuple[int, int]]:
    """Open cells in row-major order."""
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell is Cell.OPEN
    ]


def place_player(
    grid: list[list[Cell]], rng: random.Random
) -> tuple[tuple[int, int], Direction]:
    empties = open_cells(grid)
    if not empties:
        raise NoOpenCellError("no empty cells generated")
    position = rng.choice(empties)
    facing = rng.choice(list(Direction))
    return position, facing


class GameState:
    def __init__(
        self,
        grid: list[list[Cell]],
        position: tuple[int, int],
        facing: Direction,
    ):
        self.grid = grid
        self.size = len(grid)
        self.position = position
        self.facing = facing
        self.steps = 0
        self.won = False

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def try_move(self, direction: Direction) -> MoveResult:
        if self.won:
            logger.warning("Move %s ignored, game already won", direction.value)
            return MoveResult.IGNORED

        # Facing tracks the attempted move, even when it fails
        self.facing = direction

        dr, dc = direction_delta(direction)
        row, col = self.position
        nr, nc = row + dr, col + dc

        # Walking off any edge is the only way to win
        if not self.in_bounds(nr, nc):
            self.steps += 1
            self.won = True
            logger.info("Escaped the grid at (%d, %d) after %d steps", nr, nc, self.steps)
            return MoveResult.ESCAPED

        if self.grid[nr][nc] is Cell.BLOCKED:
            logger.debug("Move %s blocked at (%d, %d)", direction.value, nr, nc)
            return MoveResult.BLOCKED

        self.position = (nr, nc)
        self.steps += 1
        logger.debug("Moved %s to (%d, %d)", direction.value, nr, nc)
        return MoveResult.MOVED

    def project(self) -> list[str]:
        """One string per grid row, with the player drawn as its facing glyph."""
        rows = []
        for r, row in enumerate(self.grid):
            line = [cell.value for cell in row]
            if r == self.position[0]:
                line[self.position[1]] = direction_glyph(self.facing)
            rows.append("".join(line))
        return rows


def new_game(size: int, density: float, rng: random.Random | None = None) -> GameState:
    rng = rng or random.Random()
    grid = generate_grid(size, density, rng)
    position, facing = place_player(grid, rng)
    logger.info(
        "New %dx%d game, %d open cells, player at %s facing %s",
        size,
        size,
        len(open_cells(grid)),
        position,
        facing.value,
    )
    return GameState(grid, position, facing)


def try_move(state: GameState, direction: Direction) -> MoveResult:
    return state.try_move(direction)


def project(state: GameState) -> list[str]:
    return state.project()
