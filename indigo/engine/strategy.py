"""
Players and move selection.

A move strategy is any callable that, given the table and the acting
player's hand, returns the card to play or None to cancel the game:

    MoveStrategy = Callable[[Deck, Deck], Card | None]

Two strategies ship with the game:
    first_card_strategy   computer: always plays the first card in hand
    make_human_strategy   console: lists the hand and asks for a 1-based index
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from .cards import Card
from .deck import Deck

EXIT_TOKEN = "exit"


class Player(Enum):
    HUMAN = "Player"
    COMPUTER = "Computer"

    @property
    def opponent(self) -> Player:
        return Player.COMPUTER if self is Player.HUMAN else Player.HUMAN

    def __str__(self) -> str:
        return self.value


# move_strategy(table, hand) -> card to play, or None to cancel
MoveStrategy = Callable[[Deck, Deck], Card | None]


def first_card_strategy(table: Deck, hand: Deck) -> Card | None:
    """Computer strategy: play the first card in hand."""
    return hand[0]


def format_hand(hand: Deck) -> str:
    """Render a hand as a 1-indexed, space separated list.

    Examples:
        >>> format_hand(Deck.default().take(3)[0])
        '1)K♣ 2)Q♣ 3)J♣'
    """
    return " ".join(f"{i}){card}" for i, card in enumerate(hand, start=1))


def make_human_strategy(
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> MoveStrategy:
    """Build a strategy that asks the person at the console for a card.

    The returned strategy prints the hand, then prompts until it reads either
    a number in 1..len(hand) or the exit token. Any other input re-prompts.

    Args:
        read_line: Returns the next line of input (EOFError propagates).
        write: Prints one line of output.
    """

    def choose(table: Deck, hand: Deck) -> Card | None:
        write(f"Cards in hand: {format_hand(hand)}")
        while True:
            write(f"Choose a card to play (1-{hand.size}):")
            raw = read_line().strip()
            if raw == EXIT_TOKEN:
                return None
            if raw.isdecimal() and 1 <= int(raw) <= hand.size:
                return hand[int(raw) - 1]

    return choose
