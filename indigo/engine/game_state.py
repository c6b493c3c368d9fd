"""
Game state and the turn loop.

Flow of one game:
    DEALING → AWAITING_MOVE ⇄ REFILLING → TERMINAL

    DEALING        table gets 4 cards, then the human hand 6, then the computer hand 6
    AWAITING_MOVE  the active player's strategy picks a card; it leaves the hand,
                   goes on top of the table and the turn passes
    REFILLING      both hands are empty and the draw pile is not: deal 6 + 6,
                   the active player does not change
    TERMINAL       both hands and the draw pile are empty (EXHAUSTED), or a
                   strategy returned None (CANCELLED)

No scoring is done. The result names the player whose turn it was when the
loop stopped, for both ways of ending.

Every state is a frozen snapshot; step() returns a new one. The card total
(draw pile + table + both hands) is 52 in every snapshot.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from enum import Enum, auto

import numpy as np

from ..config import DEFAULT_CONFIG, GameConfig
from ..logging_utils import get_logger

from .cards import Card
from .deck import Deck
from .strategy import MoveStrategy, Player

log = get_logger(__name__)


# ─── Enumerations ─────────────────────────────────────────────────────────────

class Phase(Enum):
    DEALING = auto()
    AWAITING_MOVE = auto()
    REFILLING = auto()
    TERMINAL = auto()


class EndReason(Enum):
    EXHAUSTED = auto()   # draw pile and both hands empty
    CANCELLED = auto()   # a strategy declined to pick a card


# ─── State / Result types ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Play:
    player: Player
    card: Card

    def __str__(self) -> str:
        return f"{self.player} plays {self.card}"


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of a game in progress."""
    draw_pile: Deck
    table: Deck
    human_hand: Deck
    computer_hand: Deck
    active: Player
    phase: Phase
    config: GameConfig = DEFAULT_CONFIG
    history: tuple[Play, ...] = ()
    end_reason: EndReason | None = None

    def hand_of(self, player: Player) -> Deck:
        return self.human_hand if player is Player.HUMAN else self.computer_hand

    @property
    def total_cards(self) -> int:
        return self.draw_pile.size + self.table.size + self.human_hand.size + self.computer_hand.size

    @property
    def hands_empty(self) -> bool:
        return self.human_hand.is_empty() and self.computer_hand.is_empty()

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.TERMINAL


@dataclass(frozen=True)
class GameResult:
    """How a game ended.

    player is whoever was about to move when the loop stopped; it is not a
    winner computed from the cards.
    """
    player: Player
    reason: EndReason
    state: GameState


# on_turn(state) at every observation point; on_play(play) after each card
TurnObserver = Callable[[GameState], None]
PlayObserver = Callable[[Play], None]


# ─── Transitions ──────────────────────────────────────────────────────────────

def start_game(
    first_player: Player,
    rng: np.random.Generator | None = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> GameState:
    """Create a game in the DEALING phase from a freshly shuffled default deck.

    Args:
        first_player: Who makes the first move.
        rng: Generator for the single shuffle. When omitted one is built from
             config.seed (unseeded if that is None as well).
        config: Deal sizes.
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)
    return GameState(
        draw_pile=Deck.default().shuffle(rng),
        table=Deck(),
        human_hand=Deck(),
        computer_hand=Deck(),
        active=first_player,
        phase=Phase.DEALING,
        config=config,
    )


def _settle_phase(state: GameState) -> GameState:
    """Pick the phase that follows a deal or a play."""
    if not state.hands_empty:
        return replace(state, phase=Phase.AWAITING_MOVE)
    if not state.draw_pile.is_empty():
        return replace(state, phase=Phase.REFILLING)
    return replace(state, phase=Phase.TERMINAL, end_reason=EndReason.EXHAUSTED)


def _deal_hands(state: GameState) -> GameState:
    size = state.config.hand_size
    human_hand, draw_pile = state.draw_pile.take(size)
    computer_hand, draw_pile = draw_pile.take(size)
    return replace(state, draw_pile=draw_pile, human_hand=human_hand, computer_hand=computer_hand)


def _deal(state: GameState) -> GameState:
    table, draw_pile = state.draw_pile.take(state.config.table_size)
    state = _deal_hands(replace(state, draw_pile=draw_pile, table=table))
    log.debug("Dealt table=%s, %d cards to each hand", state.table, state.config.hand_size)
    return state


def _refill(state: GameState) -> GameState:
    state = _deal_hands(state)
    log.debug("Refilled both hands, %d cards left in the draw pile", state.draw_pile.size)
    return state


def _move(state: GameState, strategy: MoveStrategy) -> GameState:
    player = state.active
    hand = state.hand_of(player)
    card = strategy(state.table, hand)
    if card is None:
        log.info("%s cancelled the game", player)
        return replace(state, phase=Phase.TERMINAL, end_reason=EndReason.CANCELLED)

    played, hand = hand.take_at(hand.index(card))
    play = Play(player, played)
    log.debug("%s", play)
    if player is Player.HUMAN:
        state = replace(state, human_hand=hand)
    else:
        state = replace(state, computer_hand=hand)
    return replace(
        state,
        table=state.table.append(played),
        active=player.opponent,
        history=state.history + (play,),
    )


def step(state: GameState, strategies: Mapping[Player, MoveStrategy]) -> GameState:
    """Advance the game by exactly one transition.

    Args:
        state: Current snapshot.
        strategies: Move strategy for each player.

    Returns:
        The next snapshot. The input is not modified.

    Raises:
        ValueError: If the game is already over.
    """
    if state.phase is Phase.TERMINAL:
        raise ValueError("Cannot step a finished game.")
    if state.phase is Phase.DEALING:
        return _settle_phase(_deal(state))
    if state.phase is Phase.REFILLING:
        return _settle_phase(_refill(state))

    state = _move(state, strategies[state.active])
    if state.is_over:
        return state
    return _settle_phase(state)


def play_game(
    state: GameState,
    strategies: Mapping[Player, MoveStrategy],
    on_turn: TurnObserver | None = None,
    on_play: PlayObserver | None = None,
) -> GameResult:
    """Run the turn loop until the game ends.

    on_turn sees every state that waits for a move and, when the cards run
    out, the final state. A cancelled game skips the final observation.
    """
    while not state.is_over:
        if on_turn is not None and state.phase is Phase.AWAITING_MOVE:
            on_turn(state)
        played_before = len(state.history)
        state = step(state, strategies)
        if on_play is not None and len(state.history) > played_before:
            on_play(state.history[-1])

    assert state.end_reason is not None
    if on_turn is not None and state.end_reason is EndReason.EXHAUSTED:
        on_turn(state)

    log.info("Game ended (%s) on %s's turn after %d plays",
             state.end_reason.name, state.active, len(state.history))
    return GameResult(player=state.active, reason=state.end_reason, state=state)
