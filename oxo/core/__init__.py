"""Core engine components: board rules and minimax search."""

from .board import (
    BOARD_CELLS,
    EMPTY_BOARD,
    LINES,
    NO_MOVE,
    Board,
    Outcome,
    Player,
    Status,
    evaluate,
)
from .search import SearchEngine
