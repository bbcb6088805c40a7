"""Startup configuration for a game and the errors that abort startup."""

import logging
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class GameSetupError(Exception):
    """A game could not be started."""


class InvalidDimensionError(GameSetupError):
    """The grid size is not a positive integer."""


class NoOpenCellError(GameSetupError):
    """Every generated cell is blocked, so the player has nowhere to start."""


class GameConfig(BaseModel):
    size: int = Field(gt=0)
    density: float = 0.2
    seed: Optional[int] = None

    @field_validator("density")
    @classmethod
    def clamp_density(cls, value: float) -> float:
        # Out-of-range densities are coerced, never rejected
        if value < 0:
            return 0.0
        if value > 1:
            return 1.0
        return value


def parse_dimension(raw: str) -> int:
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        raise InvalidDimensionError(
            "Invalid input. Please enter an integer like 10."
        ) from None


def parse_density(raw: str) -> float:
    text = raw.strip()
    try:
        return float(text)
    except ValueError:
        raise GameSetupError(
            "invalid input please enter a decimal point less than 1 like .2"
        ) from None


def build_config(size: int, density: float, seed: Optional[int] = None) -> GameConfig:
    """Validate the startup answers, mapping pydantic failures to setup errors."""
    try:
        config = GameConfig(size=size, density=density, seed=seed)
    except ValidationError as exc:
        fields = {err["loc"][0] for err in exc.errors() if err["loc"]}
        if "size" in fields:
            raise InvalidDimensionError(f"invalid grid size: {size}") from None
        raise GameSetupError(str(exc)) from None
    logger.info("Game config: %s", config.model_dump_json())
    return config
