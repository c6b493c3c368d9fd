"""Tests for indigo/cli/game_session.py: a full console game with scripted input."""

from __future__ import annotations

import numpy as np
import pytest

from indigo.cli.game_session import GAME_OVER, TITLE, run_game
from indigo.engine.game_state import EndReason
from indigo.engine.strategy import Player
from tests.conftest import ScriptedConsole


def _run(lines, seed=11):
    console = ScriptedConsole(lines)
    result = run_game(console.read_line, console.write, rng=np.random.default_rng(seed))
    return result, console


class TestFullGame:
    def test_human_first_plays_to_the_end(self):
        result, console = _run(["yes"] + ["1"] * 24)
        assert result.reason is EndReason.EXHAUSTED
        assert result.player is Player.HUMAN
        assert console.output[0] == TITLE
        assert console.output[1] == "Play first?"
        assert console.output[2].startswith("Initial cards on the table: ")
        assert console.output[-1] == GAME_OVER
        assert console.output[-2].startswith("52 cards on the table, and the top card is ")
        assert sum(line.startswith("Computer plays ") for line in console.output) == 24

    def test_computer_first(self):
        result, console = _run(["NO"] + ["6"] + ["1"] * 23)
        assert result.reason is EndReason.EXHAUSTED
        assert result.player is Player.COMPUTER
        first_banner = console.output.index("4 cards on the table, and the top card is "
                                            f"{result.state.table[3]}")
        assert console.output[first_banner + 1].startswith("Computer plays ")

    def test_initial_table_matches_state(self):
        result, console = _run(["yes"] + ["1"] * 24)
        expected = " ".join(str(c) for c in list(result.state.table)[:4])
        assert console.output[2] == f"Initial cards on the table: {expected}"

    def test_human_choice_is_played(self):
        result, console = _run(["yes", "3", "exit"])
        hand_line = next(line for line in console.output if line.startswith("Cards in hand: "))
        third = hand_line.split()[5].split(")")[1]
        assert str(result.state.history[0].card) == third

    def test_reprompts_until_yes_or_no(self):
        _, console = _run(["sure", "y", "yes", "exit"])
        assert console.count("Play first?") == 3


class TestCancel:
    def test_exit_ends_game_immediately(self):
        result, console = _run(["no", "exit"])
        assert result.reason is EndReason.CANCELLED
        assert result.player is Player.HUMAN
        assert result.state.table.size == 5
        assert console.output[-1] == GAME_OVER
        assert console.count("Choose a card to play (1-6):") == 1

    def test_exit_on_first_turn(self):
        result, console = _run(["yes", "exit"])
        assert result.state.history == ()
        assert result.state.table.size == 4
        assert not any(line.startswith("Computer plays ") for line in console.output)


class TestInputEnds:
    def test_eof_propagates(self):
        with pytest.raises(EOFError):
            _run(["yes", "1"])
