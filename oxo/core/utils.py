import logging
import sys
from typing import Dict, Sequence

from oxo.core.board import Cell


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the CLI and API entry points."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def format_info(depth: int, scores: Dict[int, int], nodes: int, elapsed: float) -> str:
    score_str = " ".join(f"{i}:{s}" for i, s in scores.items()) or "-"
    nps = int(nodes / elapsed) if elapsed > 0 else 0
    return f"info depth {depth} nodes {nodes} nps {nps} time {int(elapsed * 1000)} scores {score_str}"


def render_board(board: Sequence[Cell]) -> str:
    """ASCII board; empty cells show their index."""
    rows = []
    for r in range(3):
        cells = [board[r * 3 + c].value if board[r * 3 + c] else str(r * 3 + c) for c in range(3)]
        rows.append(f" {' | '.join(cells)}")
    return "\n---+---+---\n".join(rows)
