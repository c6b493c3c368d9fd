"""Command-line entry point: ``indigo [play|deck|show]``."""

from __future__ import annotations

import argparse

import numpy as np

from indigo.config import LOG_LEVEL, GameConfig
from indigo.engine.cards import Rank, Suit, cards_to_str
from indigo.engine.deck import Deck
from indigo.logging_utils import get_logger, setup_logging

from .deck_session import run_deck_session
from .game_session import run_game

log = get_logger(__name__)


def show_cards(rng: np.random.Generator) -> None:
    """Print every rank, every suit, and one shuffled deck."""
    print(cards_to_str(Rank))
    print()
    print(cards_to_str(Suit))
    print()
    print(Deck.default().shuffle(rng))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="indigo", description="Indigo card game for the console")
    parser.add_argument(
        "command",
        nargs="?",
        choices=("play", "deck", "show"),
        default="play",
        help="play a game (default), explore a deck, or list ranks, suits and a shuffled deck",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible shuffles")
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help=f"DEBUG, INFO, WARNING or ERROR (default: {LOG_LEVEL}, from LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    config = GameConfig(seed=args.seed)
    rng = np.random.default_rng(config.seed)
    log.debug("Running %r with seed=%s", args.command, config.seed)

    try:
        if args.command == "deck":
            run_deck_session(rng=rng)
        elif args.command == "show":
            show_cards(rng)
        else:
            run_game(rng=rng, config=config)
    except (EOFError, KeyboardInterrupt) as exc:
        log.warning("Input ended before the session finished (%s)", type(exc).__name__)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
