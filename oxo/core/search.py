import logging
import random
import time
from typing import Dict, Optional, Sequence

from oxo.core.board import (
    NO_MOVE,
    Board,
    Cell,
    Player,
    Status,
    empty_cells,
    evaluate,
    place,
)
from oxo.core.utils import format_info

logger = logging.getLogger(__name__)

WIN_SCORE = 10
INF = 1000


def pick_best(scores: Dict[int, int]) -> int:
    """Index with the strictly greatest score; ties go to the earliest entry."""
    best_score = -INF
    best = NO_MOVE
    for index, score in scores.items():
        if score > best_score:
            best_score = score
            best = index
    return best


class SearchEngine:
    """Computer opponent: depth-limited minimax with a deliberate blunder rate.

    With probability `random_move_probability` the engine ignores the search
    and plays a uniformly random empty cell, which keeps it beatable. Pass
    `random_move_probability=0` for fully deterministic play.
    """

    def __init__(
        self,
        depth: int = 4,
        random_move_probability: float = 0.1,
        rng: Optional[random.Random] = None,
    ):
        if depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {depth}")
        if not 0.0 <= random_move_probability <= 1.0:
            raise ValueError(
                f"random_move_probability must be within [0, 1], got {random_move_probability}"
            )
        self.max_depth = depth
        self.random_move_probability = random_move_probability
        self.rng = rng or random.Random()
        self.nodes = 0

    # Public API
    def select_move(self, board: Sequence[Cell]) -> int:
        """Pick the computer's move, or NO_MOVE when the board is full."""
        empty = empty_cells(board)
        if not empty:
            return NO_MOVE

        if self.rng.random() < self.random_move_probability:
            move = self.rng.choice(empty)
            logger.debug("Random move %d (p=%.2f)", move, self.random_move_probability)
            return move

        return self.best_move(board)

    def best_move(self, board: Sequence[Cell]) -> int:
        """Deterministic branch: first empty cell with the strictly greatest score."""
        return pick_best(self.score_moves(board))

    def score_moves(self, board: Sequence[Cell]) -> Dict[int, int]:
        """Minimax score of each empty cell if the computer played there.

        Keys come out in ascending index order.
        """
        root: Board = tuple(board)
        self.nodes = 0
        start_time = time.time()

        scores = {}
        for index in empty_cells(root):
            child = place(root, index, Player.COMPUTER)
            scores[index] = self._minimax(child, 0, maximizing=False)

        logger.debug(format_info(self.max_depth, scores, self.nodes, time.time() - start_time))
        return scores

    # -------------------------
    # Core minimax
    # -------------------------
    def _minimax(self, board: Board, depth: int, maximizing: bool) -> int:
        self.nodes += 1
        outcome = evaluate(board)
        if outcome.status is Status.COMPUTER_WIN:
            return WIN_SCORE - depth
        if outcome.status is Status.HUMAN_WIN:
            return depth - WIN_SCORE
        if outcome.status is Status.DRAW or depth >= self.max_depth:
            return 0

        mover = Player.COMPUTER if maximizing else Player.HUMAN
        scores = (
            self._minimax(place(board, index, mover), depth + 1, not maximizing)
            for index in empty_cells(board)
        )
        return max(scores) if maximizing else min(scores)
