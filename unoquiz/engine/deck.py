"""Deck creation and shuffling."""

import random
import uuid
from itertools import cycle
from typing import Iterator, List, Optional

from unoquiz.engine.card import PLAYABLE_COLORS, Card, CardAction, Color, Question
from unoquiz.engine.trivia import all_questions

DECK_SIZE = 108
ACTIONS_PER_COLOR = (CardAction.SKIP, CardAction.REVERSE, CardAction.DRAW2)


def new_card_id() -> str:
    return uuid.uuid4().hex


def _question_stream(rng: random.Random) -> Iterator[Question]:
    """Endless questions from a shuffled copy of the catalog, wrapping around."""
    questions = list(all_questions())
    rng.shuffle(questions)
    return cycle(questions)


def build_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Create a shuffled 108-card UNO Quiz deck.

    - 4 colors x (one 0, two of 1-9, two Skip, two Reverse, two Draw Two): 100 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 108 cards, each bound to a trivia question
    """
    rng = rng or random.Random()
    questions = _question_stream(rng)

    def make(color: Color, action: CardAction, value: Optional[int] = None) -> Card:
        return Card(
            id=new_card_id(),
            color=color,
            action=action,
            value=value,
            question=next(questions),
        )

    cards: List[Card] = []
    for color in PLAYABLE_COLORS:
        # One zero per color
        cards.append(make(color, CardAction.NUMBER, 0))
        for value in range(1, 10):
            cards.append(make(color, CardAction.NUMBER, value))
            cards.append(make(color, CardAction.NUMBER, value))
        for action in ACTIONS_PER_COLOR:
            cards.append(make(color, action))
            cards.append(make(color, action))

    for action in (CardAction.WILD, CardAction.WILD4):
        for _ in range(4):
            cards.append(make(Color.WILD, action))

    rng.shuffle(cards)
    return cards
