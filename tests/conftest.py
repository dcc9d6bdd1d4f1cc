"""Shared factories for hand-built cards and states."""

import uuid
from typing import Optional

import pytest

from unoquiz.engine import Card, CardAction, Color, GameState, Player, all_questions


def build_card(color: str, action: str = "number", value: Optional[int] = None) -> Card:
    return Card(
        id=uuid.uuid4().hex,
        color=Color(color),
        action=CardAction(action),
        value=value,
        question=all_questions()[0],
    )


def build_state(
    hands: list[list[Card]],
    discard: list[Card],
    deck: Optional[list[Card]] = None,
    current: int = 0,
    direction: int = 1,
) -> GameState:
    players = tuple(
        Player(id=f"p{i}", name=f"P{i}", avatar="fox", hand=tuple(hand))
        for i, hand in enumerate(hands)
    )
    return GameState(
        players=players,
        current_player_index=current,
        direction=direction,
        discard_pile=tuple(discard),
        deck=tuple(deck or []),
        message=f"{players[current].name}'s turn",
    )


@pytest.fixture
def card():
    return build_card


@pytest.fixture
def state_of():
    return build_state
