"""Game session: board, cached outcome and running score for one player vs the computer."""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from oxo.config import CONFIG
from oxo.core.board import (
    BOARD_CELLS,
    EMPTY_BOARD,
    IN_PROGRESS,
    NO_MOVE,
    Board,
    Outcome,
    Player,
    Status,
    board_to_list,
    evaluate,
    place,
    player_to_move,
)
from oxo.core.search import SearchEngine

logger = logging.getLogger(__name__)


@dataclass
class Score:
    human: int = 0
    computer: int = 0


class GameSession:
    def __init__(self, search: Optional[SearchEngine] = None):
        """Start with an empty board; the search engine defaults to CONFIG."""
        if search is None:
            rng = random.Random(CONFIG.search.seed)
            search = SearchEngine(CONFIG.search.depth, CONFIG.search.random_move_probability, rng)
        self.search = search
        self.board: Board = EMPTY_BOARD
        self.outcome: Outcome = IN_PROGRESS
        self.score = Score()

    @property
    def to_move(self) -> Player:
        return player_to_move(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    def apply_move(self, index: int, player: Player) -> bool:
        """Place `player` at `index`. Returns False (and changes nothing) if rejected.

        A move is rejected when `player` is not a Player, the index is not an
        int in range (bools included), the cell is taken, the game has ended,
        or it is not `player`'s turn.
        """
        if not isinstance(player, Player):
            logger.debug("Rejected move at %r: unknown player %r", index, player)
            return False
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < BOARD_CELLS:
            logger.debug("Rejected %s move: index %r out of range", player, index)
            return False
        if self.outcome.is_over:
            logger.debug("Rejected %s move at %d: game is over", player, index)
            return False
        if self.board[index] is not None:
            logger.debug("Rejected %s move at %d: cell taken", player, index)
            return False
        if player is not self.to_move:
            logger.debug("Rejected %s move at %d: not their turn", player, index)
            return False

        self.board = place(self.board, index, player)
        self.outcome = evaluate(self.board)

        if self.outcome.status is Status.HUMAN_WIN:
            self.score.human += 1
        elif self.outcome.status is Status.COMPUTER_WIN:
            self.score.computer += 1
        if self.outcome.is_over:
            logger.info(
                "Game over: %s (line=%s, score %d-%d)",
                self.outcome.status.value,
                self.outcome.line,
                self.score.human,
                self.score.computer,
            )
        return True

    def play_computer_move(self) -> int:
        """Let the computer answer. Returns the index played or NO_MOVE."""
        if self.outcome.is_over or self.to_move is not Player.COMPUTER:
            return NO_MOVE
        move = self.search.select_move(self.board)
        if move == NO_MOVE or not self.apply_move(move, Player.COMPUTER):
            return NO_MOVE
        return move

    def reset(self):
        """Clear the board for a new game. The score is kept."""
        self.board = EMPTY_BOARD
        self.outcome = IN_PROGRESS
        logger.info("New game (score %d-%d)", self.score.human, self.score.computer)

    def to_dict(self) -> dict:
        return {
            "board": board_to_list(self.board),
            "to_move": self.to_move.value,
            "status": self.outcome.status.value,
            "winner": self.outcome.winner.value if self.outcome.winner else None,
            "line": list(self.outcome.line) if self.outcome.line else None,
            "is_game_over": self.outcome.is_over,
            "score": {"human": self.score.human, "computer": self.score.computer},
        }
