from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def open_grid():
    from environment import Cell

    def make(size: int):
        return [[Cell.OPEN] * size for _ in range(size)]

    return make
