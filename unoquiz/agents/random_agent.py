"""Seeded bot that plays a random legal card and knows the answer some of the time."""

import random
from collections import Counter
from typing import Iterable, Optional

from unoquiz.engine import PLAYABLE_COLORS, Card, Color, PlayerView, Question


def preferred_color(hand: Iterable[Card]) -> Color:
    """Most common non-wild color in a hand, red when there is none."""
    counts = Counter(c.color for c in hand if c.color in PLAYABLE_COLORS)
    if not counts:
        return Color.RED
    # Ties go to the earlier color in PLAYABLE_COLORS
    return max(PLAYABLE_COLORS, key=lambda color: counts.get(color, 0))


class RandomAgent:
    """Bot player.

    Answers correctly with probability `accuracy`, otherwise picks a wrong
    option at random.
    """

    def __init__(self, name: str = "bot", accuracy: float = 0.7, seed: Optional[int] = None):
        if not 0.0 <= accuracy <= 1.0:
            raise ValueError(f"accuracy must be between 0 and 1, got {accuracy}")
        self._name = name
        self._accuracy = accuracy
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def choose_card(self, player_view: PlayerView, playable: list[Card]) -> Optional[Card]:
        if not playable:
            return None
        return self._rng.choice(playable)

    def answer_question(self, question: Question, player_view: PlayerView) -> Optional[int]:
        if self._rng.random() < self._accuracy:
            return question.correct
        wrong = [i for i in range(len(question.options)) if i != question.correct]
        return self._rng.choice(wrong)

    def choose_color(self, player_view: PlayerView) -> Color:
        return preferred_color(player_view.my_hand)
