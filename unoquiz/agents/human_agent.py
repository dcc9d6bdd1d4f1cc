"""Human agent - reads choices from terminal."""

import time
from typing import Callable, Optional

from unoquiz.config import QUESTION_TIME_LIMIT
from unoquiz.engine import PLAYABLE_COLORS, Card, Color, PlayerView, Question


class HumanAgent:
    """Agent that prompts the human for input via terminal.

    The question timer is checked after the answer is typed: an answer that
    arrives after `time_limit` seconds counts as a timeout.
    """

    def __init__(
        self,
        name: str = "human",
        time_limit: float = QUESTION_TIME_LIMIT,
        input_fn: Callable[[str], str] = input,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._name = name
        self._time_limit = time_limit
        self._input = input_fn
        self._clock = clock

    @property
    def name(self) -> str:
        return self._name

    def _read_index(self, prompt: str, upper: int, allow_blank: bool = False) -> Optional[int]:
        while True:
            try:
                raw = self._input(prompt).strip()
            except EOFError:
                return None
            if allow_blank and raw == "":
                return None
            try:
                idx = int(raw)
            except ValueError:
                idx = -1
            if 0 <= idx < upper:
                return idx
            print("Invalid. Try again.")

    def choose_card(self, player_view: PlayerView, playable: list[Card]) -> Optional[Card]:
        print(f"\n--- {player_view.name}'s turn ---")
        print("Your hand:", " ".join(str(c) for c in player_view.my_hand))
        print("Top discard:", player_view.top_discard, f"(color: {player_view.active_color.value})")
        if not playable:
            print("No playable cards, you draw.")
            return None

        print("\nPlayable cards:")
        for i, card in enumerate(playable):
            print(f"  {i}: {card}")
        idx = self._read_index("Enter number (blank to draw): ", len(playable), allow_blank=True)
        return None if idx is None else playable[idx]

    def answer_question(self, question: Question, player_view: PlayerView) -> Optional[int]:
        print(f"\n[{question.category}] {question.text}  ({self._time_limit:g}s)")
        for i, option in enumerate(question.options):
            print(f"  {i}: {option}")

        started = self._clock()
        idx = self._read_index("Answer: ", len(question.options))
        if self._clock() - started > self._time_limit:
            print("Time's up!")
            return None
        if question.is_correct(idx):
            print("Correct!")
        else:
            print(f"Wrong! The answer was: {question.answer}")
        return idx

    def choose_color(self, player_view: PlayerView) -> Color:
        print("\nChoose a color:")
        for i, color in enumerate(PLAYABLE_COLORS):
            print(f"  {i}: {color.value}")
        idx = self._read_index("Color: ", len(PLAYABLE_COLORS))
        return PLAYABLE_COLORS[idx] if idx is not None else Color.RED
