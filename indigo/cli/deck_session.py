"""
Deck explorer: a small command loop over a single deck.

Actions:
    reset    go back to the sorted 52-card deck
    shuffle  shuffle the current deck
    get      ask for a number of cards and take them off the top
    exit     leave the loop

The deck is threaded through the loop as an immutable value; nothing is
shared between iterations except the returned Deck.
"""

from __future__ import annotations

import numpy as np

from indigo.config import DECK_SIZE
from indigo.engine.deck import Deck
from indigo.logging_utils import get_logger

from .prompts import ReadLine, Write, ask_number

log = get_logger(__name__)

ACTION_PROMPT = "Choose an action (reset, shuffle, get, exit):"


def run_deck_session(
    read_line: ReadLine = input,
    write: Write = print,
    rng: np.random.Generator | None = None,
    deck: Deck | None = None,
) -> Deck:
    """Run the explorer until 'exit' and return the deck as it was left."""
    if rng is None:
        rng = np.random.default_rng()
    if deck is None:
        deck = Deck.default()

    while True:
        write(ACTION_PROMPT)
        action = read_line().strip()
        if action == "reset":
            deck = Deck.default()
            write("Card deck is reset.")
        elif action == "shuffle":
            deck = deck.shuffle(rng)
            write("Card deck is shuffled.")
        elif action == "get":
            number = ask_number(
                "Number of cards:",
                read_line,
                write,
                valid_range=(1, deck.size),
                allowed_range=(1, DECK_SIZE),
                invalid_message="Invalid number of cards.",
                out_of_range_message="The remaining cards are insufficient to meet the request.",
            )
            if number is not None:
                cards, deck = deck.take(number)
                write(str(cards))
                log.debug("Took %d cards, %d left", number, deck.size)
        elif action == "exit":
            write("Bye")
            return deck
        else:
            write("Wrong action.")
