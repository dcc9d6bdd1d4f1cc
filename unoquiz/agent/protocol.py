"""Agent protocol - interface that human, LLM and bot players implement."""

from typing import Optional, Protocol

from unoquiz.engine import Card, Color, PlayerView, Question


class AgentProtocol(Protocol):
    """Interface for UNO Quiz players."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def choose_card(self, player_view: PlayerView, playable: list[Card]) -> Optional[Card]:
        """Pick a card to play, or None to draw instead.

        Args:
            player_view: Snapshot of the game for this player.
            playable: Cards from the hand that pass the legality check.

        Returns:
            One of `playable`, or None to draw a card and end the turn.
        """
        ...

    def answer_question(self, question: Question, player_view: PlayerView) -> Optional[int]:
        """Answer the gating question of the chosen card.

        Returns:
            Index into `question.options`, or None when the time ran out.
        """
        ...

    def choose_color(self, player_view: PlayerView) -> Color:
        """Pick the color a wild card resolves to (red, blue, green or yellow)."""
        ...
