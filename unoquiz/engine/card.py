"""Card, Color and Question types for UNO Quiz."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors. WILD only marks an unresolved wild card."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    WILD = "wild"


PLAYABLE_COLORS = (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW)
FALLBACK_COLOR = Color.RED


class CardAction(str, Enum):
    """What a card does when played."""

    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW2 = "draw2"
    WILD = "wild"
    WILD4 = "wild4"


WILD_ACTIONS = (CardAction.WILD, CardAction.WILD4)


@dataclass(frozen=True)
class Question:
    """A multiple-choice trivia question gating a card play."""

    text: str
    options: tuple[str, ...]
    correct: int
    category: str

    def __post_init__(self) -> None:
        if len(self.options) != 4:
            raise ValueError(f"Question needs exactly 4 options, got {len(self.options)}")
        if not 0 <= self.correct < len(self.options):
            raise ValueError(f"Correct index out of range: {self.correct}")

    def is_correct(self, answer: Optional[int]) -> bool:
        """True if `answer` is the correct option index. None means timed out."""
        return answer is not None and answer == self.correct

    @property
    def answer(self) -> str:
        return self.options[self.correct]


@dataclass(frozen=True)
class Card:
    """An UNO Quiz card.

    Number cards carry a value 0-9, every other action has value=None.
    Wild cards are created with color=WILD and get a real color once played.
    Many cards share the same Question instance.
    """

    id: str
    color: Color
    action: CardAction
    value: Optional[int]
    question: Question

    def __post_init__(self) -> None:
        if self.action == CardAction.NUMBER:
            if self.value is None or not 0 <= self.value <= 9:
                raise ValueError(f"Number card needs a value 0-9, got {self.value}")
        elif self.value is not None:
            raise ValueError(f"{self.action.value} card cannot have a value")
        if self.action not in WILD_ACTIONS and self.color == Color.WILD:
            raise ValueError("Only wild cards may have color=wild")

    @property
    def is_wild(self) -> bool:
        return self.action in WILD_ACTIONS

    @property
    def points(self) -> int:
        """Points this card is worth in a loser's hand."""
        if self.action == CardAction.NUMBER:
            return self.value or 0
        if self.is_wild:
            return 50
        return 20

    def with_color(self, color: Color) -> "Card":
        """Copy of this card with its color replaced (same id)."""
        return replace(self, color=color)

    def __str__(self) -> str:
        label = str(self.value) if self.action == CardAction.NUMBER else self.action.value
        if self.color == Color.WILD:
            return label
        return f"{self.color.value}_{label}"
