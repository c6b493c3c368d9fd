"""
Interactive game: the human at the console against the first-card computer.

Output follows this shape:

    Indigo Card Game
    Play first?
    yes
    Initial cards on the table: 10♥ 4♠ Q♦ 7♣

    4 cards on the table, and the top card is 7♣
    Cards in hand: 1)K♣ 2)2♥ 3)9♠ 4)A♦ 5)5♣ 6)J♥
    Choose a card to play (1-6):
    2

    5 cards on the table, and the top card is 2♥
    Computer plays 8♦
    ...
    Game Over
"""

from __future__ import annotations

import numpy as np

from indigo.config import DEFAULT_CONFIG, GameConfig
from indigo.engine.game_state import GameResult, GameState, Play, play_game, start_game, step
from indigo.engine.strategy import Player, first_card_strategy, make_human_strategy

from .prompts import ReadLine, Write, ask_yes_no, table_banner

TITLE = "Indigo Card Game"
GAME_OVER = "Game Over"


def run_game(
    read_line: ReadLine = input,
    write: Write = print,
    rng: np.random.Generator | None = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> GameResult:
    """Play one full game on the console and return how it ended."""
    write(TITLE)
    first = Player.HUMAN if ask_yes_no("Play first?", read_line, write) else Player.COMPUTER

    strategies = {
        Player.HUMAN: make_human_strategy(read_line, write),
        Player.COMPUTER: first_card_strategy,
    }

    state = step(start_game(first, rng=rng, config=config), strategies)
    write(f"Initial cards on the table: {state.table}")

    def on_turn(current: GameState) -> None:
        write("")
        write(table_banner(current.table))

    def on_play(play: Play) -> None:
        if play.player is Player.COMPUTER:
            write(f"Computer plays {play.card}")

    result = play_game(state, strategies, on_turn=on_turn, on_play=on_play)
    write(GAME_OVER)
    return result
