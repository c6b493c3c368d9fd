"""
Shared pytest fixtures for Indigo tests.

Provides a hand() builder around str_to_card and a scripted console that
feeds canned input lines and records everything written.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pytest

from indigo.engine.cards import str_to_card
from indigo.engine.deck import Deck


def hand(*card_strs: str) -> Deck:
    """Build a deck from human-readable card strings.

    Examples:
        >>> str(hand('KC', '10H'))
        'K♣ 10♥'
    """
    return Deck.of(str_to_card(s) for s in card_strs)


class ScriptedConsole:
    """Stands in for input()/print(): replays lines, records output."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.output: list[str] = []

    def read_line(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError("scripted input exhausted") from None

    def write(self, text: str = "") -> None:
        self.output.append(text)

    def count(self, text: str) -> int:
        return sum(1 for line in self.output if line == text)


@pytest.fixture
def fresh_deck() -> Deck:
    """Return the sorted 52-card deck."""
    return Deck.default()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)

