from __future__ import annotations

import io
import logging
import random

import pytest
from rich.console import Console

from environment import new_game
from main import main


def run(script: str, *argv: str) -> tuple[int, str]:
    out = io.StringIO()
    console = Console(file=out, width=120, highlight=False)
    code = main(list(argv), console=console, stream=io.StringIO(script))
    return code, out.getvalue()


def test_walking_off_the_grid_wins() -> None:
    expected_steps = new_game(3, 0.0, random.Random(1)).position[0] + 1

    code, out = run("3\n0\nw\nw\nw\n", "--seed", "1")

    assert code == 0
    assert out.startswith("Welcome to the Grid!")
    assert f"You won! Total steps: {expected_steps}" in out


def test_seeded_grid_is_rendered() -> None:
    game = new_game(4, 0.3, random.Random(8))

    code, out = run("4\n.3\nq\n", "--seed", "8")

    assert code == 0
    assert "\n".join(game.project()) in out
    assert "Steps: 0" in out
    assert out.rstrip().endswith("Goodbye!")


def test_blank_and_unknown_lines_are_skipped() -> None:
    code, out = run("1\n0\n\nx\n   \nd\n")

    assert code == 0
    assert "You won! Total steps: 1" in out


def test_end_of_input_quits() -> None:
    code, out = run("2\n0\n")

    assert code == 0
    assert "Goodbye!" in out
    assert "You won!" not in out


@pytest.mark.parametrize(
    "script, message",
    [
        ("abc\n", "Please enter an integer"),
        ("0\n0.1\n", "invalid grid size"),
        ("3\nhalf\n", "decimal point"),
        ("2\n1\n", "no empty cells generated"),
        ("5\n7\n", "no empty cells generated"),
    ],
)
def test_setup_errors_abort(script: str, message: str) -> None:
    code, out = run(script)

    assert code == 1
    assert "Error starting game:" in out
    assert message in out
    assert "Steps:" not in out


def test_setup_error_is_logged_below_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG):
        code, _ = run("nope\n")

    assert code == 1
    assert any("Startup failed" in rec.getMessage() for rec in caplog.records)
    assert all(rec.levelno < logging.WARNING for rec in caplog.records)


def test_final_board_points_at_exit() -> None:
    code, out = run("1\n0\nd\n")

    assert code == 0
    assert ">\nSteps: 1\nYou won! Total steps: 1" in out
