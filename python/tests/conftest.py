from __future__ import annotations

import pytest

from backend.models.board import Board

START = "a   *    b c    "
GOAL = "abc*            "


@pytest.fixture
def start() -> Board:
    return Board.from_string(START)


@pytest.fixture
def goal() -> Board:
    return Board.from_string(GOAL)
