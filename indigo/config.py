"""
Game configuration and environment switches.

Environment:
    LOG_LEVEL=DEBUG / INFO / WARNING / ERROR   (default WARNING)

Command-line flags in indigo.cli.main take precedence over the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .engine.cards import SORTED_CARDS

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

DECK_SIZE: int = len(SORTED_CARDS)


@dataclass(frozen=True)
class GameConfig:
    """Deal sizes for one game.

    The draw pile left after the opening deal must be consumed by whole
    refills of both hands, otherwise a refill would run the pile short.
    """

    table_size: int = 4
    hand_size: int = 6
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.table_size < 0 or self.hand_size <= 0:
            raise ValueError(
                f"Invalid deal sizes: table_size={self.table_size}, hand_size={self.hand_size}"
            )
        remainder = DECK_SIZE - self.table_size
        if remainder < 2 * self.hand_size or remainder % (2 * self.hand_size) != 0:
            raise ValueError(
                f"A {DECK_SIZE}-card deck cannot be dealt as {self.table_size} table cards "
                f"plus refills of two {self.hand_size}-card hands."
            )


DEFAULT_CONFIG = GameConfig()
