"""
Card value types, the default deck order, and human-readable I/O helpers.

A card is a frozen (Rank, Suit) pair. Its string form is the rank symbol
followed by the suit symbol:
    Card(Rank.TEN, Suit.HEART)  ->  '10♥'
    Card(Rank.KING, Suit.CLUB)  ->  'K♣'

The default order used by a fresh deck is suit by suit in declaration order
(♣ ♦ ♥ ♠), ranks descending within each suit (K, Q, J, 10, ..., A).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    CLUB = "♣"
    DIAMOND = "♦"
    HEART = "♥"
    SPADE = "♠"

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    ACE = (1, "A")
    TWO = (2, "2")
    THREE = (3, "3")
    FOUR = (4, "4")
    FIVE = (5, "5")
    SIX = (6, "6")
    SEVEN = (7, "7")
    EIGHT = (8, "8")
    NINE = (9, "9")
    TEN = (10, "10")
    JACK = (11, "J")
    QUEEN = (12, "Q")
    KING = (13, "K")

    @property
    def number(self) -> int:
        return self.value[0]

    @property
    def symbol(self) -> str:
        return self.value[1]

    def __str__(self) -> str:
        return self.symbol


# ASCII aliases accepted by str_to_card in place of the suit symbol.
SUIT_LETTERS: dict[str, Suit] = {"C": Suit.CLUB, "D": Suit.DIAMOND, "H": Suit.HEART, "S": Suit.SPADE}

_SUIT_BY_SYMBOL: dict[str, Suit] = {s.symbol: s for s in Suit}
_RANK_BY_SYMBOL: dict[str, Rank] = {r.symbol: r for r in Rank}


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


# ─── Default order ────────────────────────────────────────────────────────────

SORTED_CARDS: tuple[Card, ...] = tuple(
    Card(rank, suit) for suit in Suit for rank in reversed(list(Rank))
)


# ─── String I/O ───────────────────────────────────────────────────────────────

def str_to_card(s: str) -> Card:
    """Parse a human-readable card string.

    The suit is the last character, either its symbol or one of C/D/H/S.
    Everything before it is the rank symbol.

    Examples:
        >>> str_to_card('10♥')
        Card(rank=<Rank.TEN: (10, '10')>, suit=<Suit.HEART: '♥'>)
        >>> str(str_to_card('kc'))
        'K♣'

    Raises:
        ValueError: If the rank or suit is not recognised.
    """
    text = s.strip().upper()
    if len(text) < 2:
        raise ValueError(f"Not a card: {s!r}")
    suit_char, rank_str = text[-1], text[:-1]
    suit = _SUIT_BY_SYMBOL.get(suit_char) or SUIT_LETTERS.get(suit_char)
    rank = _RANK_BY_SYMBOL.get(rank_str)
    if suit is None or rank is None:
        raise ValueError(f"Not a card: {s!r}")
    return Card(rank, suit)


def cards_to_str(cards: Iterable[object]) -> str:
    """Join cards (or ranks, or suits) with single spaces.

    Examples:
        >>> cards_to_str([Card(Rank.ACE, Suit.SPADE), Card(Rank.TEN, Suit.HEART)])
        'A♠ 10♥'
    """
    return " ".join(str(c) for c in cards)
