"""Board representation and rules for 3x3 tic-tac-toe."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

BOARD_CELLS = 9
NO_MOVE = -1


class Player(str, Enum):
    HUMAN = "X"
    COMPUTER = "O"


Cell = Optional[Player]
Board = Tuple[Cell, ...]
Line = Tuple[int, int, int]

# Order matters: the first complete line is the one reported.
LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),  # rows
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),  # cols
    (0, 4, 8),
    (2, 4, 6),  # diagonals
)

EMPTY_BOARD: Board = (None,) * BOARD_CELLS


class Status(str, Enum):
    IN_PROGRESS = "in-progress"
    HUMAN_WIN = "human-win"
    COMPUTER_WIN = "computer-win"
    DRAW = "draw"


_WIN_STATUS = {Player.HUMAN: Status.HUMAN_WIN, Player.COMPUTER: Status.COMPUTER_WIN}


@dataclass(frozen=True)
class Outcome:
    status: Status = Status.IN_PROGRESS
    line: Optional[Line] = None

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        if self.status is Status.HUMAN_WIN:
            return Player.HUMAN
        if self.status is Status.COMPUTER_WIN:
            return Player.COMPUTER
        return None


IN_PROGRESS = Outcome()


def evaluate(board: Sequence[Cell]) -> Outcome:
    """Classify a board as won, drawn or still in progress.

    Lines are scanned rows first, then columns, then the two diagonals, and
    the first one holding three identical marks wins. Works on malformed
    boards too, so callers can probe arbitrary positions.
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(board)}")
    for line in LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Outcome(_WIN_STATUS[Player(board[a])], line)
    if all(cell is not None for cell in board):
        return Outcome(Status.DRAW)
    return IN_PROGRESS


def empty_cells(board: Sequence[Cell]) -> List[int]:
    """Indices of empty cells in ascending order."""
    return [i for i, cell in enumerate(board) if cell is None]


def place(board: Board, index: int, player: Player) -> Board:
    """Return a copy of `board` with `player` at `index`."""
    return board[:index] + (player,) + board[index + 1:]


def player_to_move(board: Sequence[Cell]) -> Player:
    """Human always opens, so equal mark counts mean it is Human's turn."""
    humans = sum(1 for cell in board if cell is Player.HUMAN)
    computers = sum(1 for cell in board if cell is Player.COMPUTER)
    return Player.HUMAN if humans == computers else Player.COMPUTER


def parse_board(cells: Sequence[Optional[str]]) -> Board:
    """Build a board from "X"/"O"/None values (as sent over the wire)."""
    if len(cells) != BOARD_CELLS:
        raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(cells)}")
    return tuple(Player(cell) if cell is not None else None for cell in cells)


def board_to_list(board: Sequence[Cell]) -> List[Optional[str]]:
    return [cell.value if cell is not None else None for cell in board]
