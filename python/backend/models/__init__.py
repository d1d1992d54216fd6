from backend.models.board import AGENT, BLANK, CELLS, SIZE, Board, InvalidBoardError, Move
from backend.models.node import SearchNode

__all__ = [
    "AGENT",
    "BLANK",
    "CELLS",
    "SIZE",
    "Board",
    "InvalidBoardError",
    "Move",
    "SearchNode",
]
