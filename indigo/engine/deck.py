"""
Immutable deck container.

A Deck wraps a tuple of Card values. Every operation returns a new Deck (or a
pair of values) and leaves the receiver untouched, so callers thread the
returned deck forward:

    hand, draw_pile = draw_pile.take(6)
    card, hand = hand.take_at(0)
    table = table.append(card)

Shuffling draws a permutation from a NumPy Generator so a seeded game is
reproducible.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from .cards import SORTED_CARDS, Card, cards_to_str


@dataclass(frozen=True)
class Deck:
    """Ordered, immutable sequence of cards."""

    cards: tuple[Card, ...] = ()

    @classmethod
    def default(cls) -> Deck:
        """Return the full 52-card deck in default (sorted) order.

        Examples:
            >>> deck = Deck.default()
            >>> deck.size
            52
            >>> str(deck[0]), str(deck[-1])
            ('K♣', 'A♠')
        """
        return cls(SORTED_CARDS)

    @classmethod
    def of(cls, cards: Iterable[Card]) -> Deck:
        return cls(tuple(cards))

    # ── Observers ─────────────────────────────────────────────────────────────

    @property
    def size(self) -> int:
        return len(self.cards)

    @property
    def top(self) -> Card | None:
        """The most recently appended card, or None for an empty deck."""
        return self.cards[-1] if self.cards else None

    def is_empty(self) -> bool:
        return not self.cards

    def index(self, card: Card) -> int:
        """Return the position of card.

        Raises:
            ValueError: If the card is not in the deck.
        """
        return self.cards.index(card)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __str__(self) -> str:
        return cards_to_str(self.cards)

    # ── Transformations ───────────────────────────────────────────────────────

    def shuffle(self, rng: np.random.Generator | None = None) -> Deck:
        """Return a new deck holding the same cards in uniformly random order.

        Args:
            rng: NumPy Generator to draw the permutation from. A fresh
                 unseeded generator is used when omitted.
        """
        if rng is None:
            rng = np.random.default_rng()
        order = rng.permutation(len(self.cards))
        return Deck(tuple(self.cards[int(i)] for i in order))

    def take(self, n: int = 1) -> tuple[Deck, Deck]:
        """Split off the first n cards.

        Returns:
            (first n cards, remaining cards), both as new decks.

        Raises:
            ValueError: If n is negative or larger than the deck.

        Examples:
            >>> taken, rest = Deck.default().take(4)
            >>> str(taken), rest.size
            ('K♣ Q♣ J♣ 10♣', 48)
        """
        if n < 0 or n > len(self.cards):
            raise ValueError(f"Cannot take {n} cards from a deck of {len(self.cards)}.")
        return Deck(self.cards[:n]), Deck(self.cards[n:])

    def take_at(self, index: int) -> tuple[Card, Deck]:
        """Remove the card at index.

        Returns:
            (removed card, deck without it), relative order of the rest kept.

        Raises:
            IndexError: If index is outside [0, size).
        """
        if not 0 <= index < len(self.cards):
            raise IndexError(f"Card index {index} out of range for a deck of {len(self.cards)}.")
        return self.cards[index], Deck(self.cards[:index] + self.cards[index + 1:])

    def append(self, other: Card | Deck) -> Deck:
        """Return a new deck with a card, or every card of another deck, added at the end."""
        if isinstance(other, Deck):
            return Deck(self.cards + other.cards)
        return Deck(self.cards + (other,))
