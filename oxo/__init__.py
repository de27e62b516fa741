"""Oxo: tic-tac-toe rules and a beatable minimax opponent."""

from oxo.core.board import NO_MOVE, Outcome, Player, Status, evaluate
from oxo.core.search import SearchEngine
from oxo.session import GameSession, Score

__version__ = "1.0.0"
