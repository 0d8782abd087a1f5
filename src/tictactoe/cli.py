from __future__ import annotations

import argparse
import logging

from .board import deserialize_board
from .game import Game
from .settings import default_players, verbose_from_env
from .ui import MENU, Ui, parse_game_players


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    sub.add_parser("menu", help="Print the player-selection menu")

    p_new = sub.add_parser("new", help="Start a game from a menu choice and show its board")
    p_new.add_argument(
        "--players",
        default=None,
        help="Menu choice 1|2|3 (default: $TTT_PLAYERS, else 3)",
    )

    p_show = sub.add_parser(
        "show",
        help="Render a board (9 digits, 0=empty,1=X,2=O)",
    )
    p_show.add_argument("--board", required=True, help="Board string, e.g., 100020000")

    p_turns = sub.add_parser("turns", help="Print the first N moves handed out by a new game")
    p_turns.add_argument("--count", type=int, default=2, help="Number of moves (default: 2)")

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    verbose = getattr(ns, "verbose", False) or verbose_from_env()
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")
    # basicConfig is a no-op once root has handlers
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-core"))
        except Exception:
            print("unknown")
        return 0

    if ns.cmd == "menu":
        print(MENU)
        return 0

    if ns.cmd == "new":
        raw = ns.players if ns.players is not None else default_players()
        try:
            p1, p2 = parse_game_players(raw)
        except ValueError as e:
            logging.error("%s", e)
            return 2
        ui = Ui(Game(p1, p2))
        logging.info("player_1=%s player_2=%s", p1.value, p2.value)
        print(ui.show_board())
        return 0

    if ns.cmd == "show":
        try:
            board = deserialize_board(ns.board.strip())
        except ValueError as e:
            logging.error("%s", e)
            return 2
        logging.debug("marked_cells=%d", len(board))
        game = Game()
        game.board = board
        print(Ui(game).show_board())
        return 0

    if ns.cmd == "turns":
        if ns.count < 0:
            logging.error("Count must be non-negative: %s", ns.count)
            return 2
        game = Game()
        for _ in range(ns.count):
            cell, mark = game.fetch_move()
            print(f"{cell} {mark.value}")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
