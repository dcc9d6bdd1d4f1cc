"""Game engine for UNO Quiz."""

from unoquiz.engine.card import Card, CardAction, Color, Question, PLAYABLE_COLORS
from unoquiz.engine.deck import build_deck
from unoquiz.engine.game_state import GameState, Player, PlayerView, TurnPhase
from unoquiz.engine.rules import (
    advance_turn,
    apply_card_effect,
    can_play,
    check_winner,
    current_color,
    deal,
    discard_final_card,
    draw,
    next_round,
    playable_cards,
    remove_card,
    score_round,
    select_card,
)
from unoquiz.engine.trivia import all_questions

__all__ = [
    "Card",
    "CardAction",
    "Color",
    "Question",
    "PLAYABLE_COLORS",
    "build_deck",
    "all_questions",
    "GameState",
    "Player",
    "PlayerView",
    "TurnPhase",
    "advance_turn",
    "apply_card_effect",
    "can_play",
    "check_winner",
    "current_color",
    "deal",
    "discard_final_card",
    "draw",
    "next_round",
    "playable_cards",
    "remove_card",
    "score_round",
    "select_card",
]
