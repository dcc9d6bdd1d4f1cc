"""Single round runner."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from unoquiz.config import MAX_TURNS
from unoquiz.engine import (
    GameState,
    PlayerView,
    TurnPhase,
    advance_turn,
    apply_card_effect,
    can_play,
    check_winner,
    current_color,
    deal,
    discard_final_card,
    draw,
    playable_cards,
    remove_card,
    score_round,
    select_card,
)
from unoquiz.history import RoundRecord, make_round_record

if TYPE_CHECKING:
    from unoquiz.agent.protocol import AgentProtocol
    from unoquiz.history import MatchRecorder

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed round."""

    winner: Optional[str]  # player name
    num_turns: int
    final_state: GameState
    duration: float
    record: Optional[RoundRecord] = None


class GameRunner:
    """Runs a single UNO Quiz round to completion.

    Each turn follows the fixed order: pick a card, check it is legal, ask its
    question, pick a color for wilds, apply the effect, advance the turn.
    An illegal pick, a wrong answer or a timeout draws one card instead.
    """

    def __init__(
        self,
        agents: dict[str, "AgentProtocol"],
        seed: Optional[int] = None,
        recorder: Optional["MatchRecorder"] = None,
        max_turns: int = MAX_TURNS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._agents = agents
        self._rng = random.Random(seed)
        self._recorder = recorder
        self._max_turns = max_turns
        self._clock = clock
        self.phase = TurnPhase.PLAYING
        self.state: Optional[GameState] = None

    def _agent_for(self, state: GameState) -> "AgentProtocol":
        return self._agents[state.current_player().name]

    def _draw_and_pass(self, state: GameState) -> GameState:
        player = state.current_player()
        state = draw(state, player.id, 1, self._rng)
        return advance_turn(state)

    def play_turn(self, state: GameState) -> GameState:
        """Run one player's turn and return the resulting state."""
        self.phase = TurnPhase.PLAYING
        player = state.current_player()
        agent = self._agent_for(state)
        top = state.top_discard()
        color = current_color(state)
        view = PlayerView.from_state(state, player.id)

        playable = playable_cards(player.hand, top, color)
        card = agent.choose_card(view, playable) if playable else None
        if card is None:
            logger.debug("%s draws", player.name)
            return self._draw_and_pass(state)
        if card not in player.hand or not can_play(card, top, color):
            logger.debug("%s picked an unplayable card %s", player.name, card)
            return self._draw_and_pass(state)

        self.phase = TurnPhase.AWAITING_ANSWER
        state = select_card(state, card)
        answer = agent.answer_question(card.question, view)
        if not card.question.is_correct(answer):
            logger.debug("%s missed the question for %s", player.name, card)
            self.phase = TurnPhase.PLAYING
            return self._draw_and_pass(state)

        state = remove_card(state, player.id, card.id)
        winner = check_winner(state)
        if winner is not None:
            state = discard_final_card(state, card)
            self.phase = TurnPhase.ROUND_OVER
            return score_round(state, winner)

        chosen = None
        if card.is_wild:
            self.phase = TurnPhase.AWAITING_COLOR
            chosen = agent.choose_color(PlayerView.from_state(state, player.id))

        state = apply_card_effect(state, card, chosen, self._rng)
        self.phase = TurnPhase.PLAYING
        return advance_turn(state)

    def run(self, initial_state: Optional[GameState] = None) -> GameResult:
        """Run the round and return the result."""
        state = initial_state or deal(list(self._agents.keys()), rng=self._rng)
        started = self._clock()
        num_turns = 0
        self.phase = TurnPhase.PLAYING

        while self.phase != TurnPhase.ROUND_OVER and num_turns < self._max_turns:
            state = self.play_turn(state)
            self.state = state
            num_turns += 1

        duration = self._clock() - started
        self.state = state
        if state.winner is None:
            logger.warning("Round %d stopped after %d turns without a winner", state.round_number, num_turns)
            return GameResult(winner=None, num_turns=num_turns, final_state=state, duration=duration)

        record = make_round_record(state, duration)
        if self._recorder is not None:
            self._recorder.append(record)
        logger.info("Round %d won by %s in %d turns", state.round_number, state.winner.name, num_turns)
        return GameResult(
            winner=state.winner.name,
            num_turns=num_turns,
            final_state=state,
            duration=duration,
            record=record,
        )
