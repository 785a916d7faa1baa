"""Command-line entry point: seat the table and play rounds until told to stop."""

import argparse
import logging
import sys
from random import Random

from blackjack.console import ConsoleDisplay, ConsoleInput, Display, Input
from blackjack.errors import DeckExhaustedError, InvalidInputError
from blackjack.game import Table
from config import AppConfig, TableConfig, env_bool, env_setting

logger = logging.getLogger(__name__)

CONTINUE_PROMPT = "Play another round? (y/n)"


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.

    Environment defaults are passed through as raw strings so argparse
    converts them only when no flag overrides them. Validation of the
    merged options happens once, in main().
    """
    parser = argparse.ArgumentParser(prog="blackjack", description="Play blackjack at the terminal")
    parser.add_argument(
        "-p", "--players", type=int, default=env_setting("BLACKJACK_NUM_PLAYERS"),
        help="Number of human players",
    )
    parser.add_argument(
        "--bot", action=argparse.BooleanOptionalAction, default=env_bool("BLACKJACK_BOT_PLAYER"),
        help="Seat a bot player too",
    )
    parser.add_argument(
        "-d", "--decks", type=int, default=env_setting("BLACKJACK_NUM_DECKS"),
        help="Standard decks in the deck",
    )
    parser.add_argument(
        "-b", "--buyin", type=int, default=env_setting("BLACKJACK_BUYIN"),
        help="Starting money per player (0 disables betting)",
    )
    parser.add_argument(
        "-r", "--payout-ratio", type=float, default=env_setting("BLACKJACK_PAYOUT_RATIO"),
        help="Payout for a natural, e.g. 1.5 for 3:2",
    )
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed for a repeatable game")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine diagnostics")
    return parser


def ask_to_continue(input_source: Input, display: Display) -> bool:
    """Ask until the answer is a clear yes or no."""
    while True:
        display.show(CONTINUE_PROMPT)
        try:
            return input_source.read_continue()
        except InvalidInputError as e:
            display.show(str(e))


def run(table: Table, input_source: Input) -> None:
    """Play rounds at the table until a player declines another one."""
    while True:
        table.play_round()
        if not ask_to_continue(input_source, table.display):
            return
        table.display.show("")


def main(
    argv: list[str] | None = None,
    input_source: Input | None = None,
    display: Display | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app = AppConfig()
        settings = TableConfig(
            num_players=args.players,
            bot_player=args.bot,
            num_decks=args.decks,
            betting_buyin=args.buyin,
            payout_ratio=args.payout_ratio,
        )
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else app.logging_level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    seed = args.seed if args.seed is not None else app.seed
    input_source = input_source or ConsoleInput()
    display = display or ConsoleDisplay()

    try:
        table = Table.from_config(settings, input_source, display, rng=Random(seed))
        run(table, input_source)
    except DeckExhaustedError as e:
        logger.error("Round abandoned: %s", e)
        display.show("The deck ran out mid-round. Try again with more decks.")
        return 1
    except (EOFError, KeyboardInterrupt):
        display.show("")

    display.show("Thanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
