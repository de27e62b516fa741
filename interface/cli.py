import argparse
import random
import time
from typing import List, Optional

from oxo.config import CONFIG
from oxo.core.board import NO_MOVE, Player, Status
from oxo.core.search import SearchEngine
from oxo.core.utils import render_board, setup_logging
from oxo.session import GameSession, Score

RESULT_TEXT = {
    Status.HUMAN_WIN: "You win!",
    Status.COMPUTER_WIN: "Computer wins!",
    Status.DRAW: "It's a draw!",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against the computer.")
    parser.add_argument("--depth", type=int, default=CONFIG.search.depth, help="search depth in plies")
    parser.add_argument(
        "--random-probability",
        type=float,
        default=CONFIG.search.random_move_probability,
        help="chance the computer plays a random cell",
    )
    parser.add_argument("--seed", type=int, default=CONFIG.search.seed)
    parser.add_argument(
        "--delay-ms", type=int, default=CONFIG.ui.computer_delay_ms, help="pause before the computer answers"
    )
    return parser


def play_round(session: GameSession, delay_ms: int):
    while not session.is_game_over:
        print(render_board(session.board))
        print("----------------------------")

        raw = input(f"Your move ({Player.HUMAN.value}), cell 0-8: ").strip()
        try:
            index = int(raw)
        except ValueError:
            print("Enter a number between 0 and 8.")
            continue
        if not session.apply_move(index, Player.HUMAN):
            print(f"Cell {index} is not available, try again.")
            continue

        if session.is_game_over:
            break
        if delay_ms > 0:
            time.sleep(delay_ms / 1000)
        move = session.play_computer_move()
        if move != NO_MOVE:
            print(f"Computer plays: {move}")

    print(render_board(session.board))
    print(RESULT_TEXT[session.outcome.status])


def main(argv: Optional[List[str]] = None) -> Score:
    args = build_parser().parse_args(argv)
    setup_logging(CONFIG.log_level)

    search = SearchEngine(args.depth, args.random_probability, random.Random(args.seed))
    session = GameSession(search)

    try:
        while True:
            play_round(session, args.delay_ms)
            print(f"Score  You: {session.score.human}  Computer: {session.score.computer}")
            if input("Play again? [y/N]: ").strip().lower() != "y":
                break
            session.reset()
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted.")

    return session.score


if __name__ == "__main__":
    main()
