"""Tests for indigo/config.py and indigo/logging_utils.py."""

from __future__ import annotations

import logging

import pytest

from indigo.config import DECK_SIZE, DEFAULT_CONFIG, GameConfig
from indigo.logging_utils import get_logger, setup_logging


class TestGameConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.table_size == 4
        assert DEFAULT_CONFIG.hand_size == 6
        assert DEFAULT_CONFIG.seed is None
        assert DECK_SIZE == 52

    @pytest.mark.parametrize("table_size, hand_size", [(4, 6), (2, 5), (0, 2), (0, 26), (12, 20)])
    def test_accepts_sizes_that_drain_the_deck(self, table_size, hand_size):
        config = GameConfig(table_size=table_size, hand_size=hand_size)
        assert config.hand_size == hand_size

    @pytest.mark.parametrize("table_size, hand_size", [(4, 5), (4, 0), (-1, 6), (3, 6), (52, 6), (4, 25)])
    def test_rejects_sizes_that_cannot(self, table_size, hand_size):
        with pytest.raises(ValueError):
            GameConfig(table_size=table_size, hand_size=hand_size)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.hand_size = 7  # type: ignore[misc]


class TestLogging:
    def test_get_logger_name(self):
        assert get_logger("indigo.test").name == "indigo.test"

    def test_setup_logging_does_not_raise_on_unknown_level(self):
        setup_logging("NOT_A_LEVEL")
        assert isinstance(logging.getLogger(), logging.Logger)
