"""Game state for UNO Quiz."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from unoquiz.engine.card import Card, Color

AVATARS = ("lion", "tiger", "fox", "wolf", "raccoon", "bear", "panda", "unicorn",
           "dragon", "butterfly", "eagle", "dolphin")


class TurnPhase(str, Enum):
    """Where the caller is within a turn. Not stored in GameState."""

    PLAYING = "playing"
    AWAITING_ANSWER = "awaiting_answer"
    AWAITING_COLOR = "awaiting_color"
    ROUND_OVER = "round_over"


@dataclass(frozen=True)
class Player:
    """A seated player. Hand order is acquisition order."""

    id: str
    name: str
    avatar: str
    hand: tuple[Card, ...] = ()
    score: int = 0


@dataclass(frozen=True)
class GameState:
    """Immutable UNO Quiz game state."""

    players: tuple[Player, ...]  # seat order
    current_player_index: int
    direction: int  # 1 = clockwise, -1 = counter-clockwise
    discard_pile: tuple[Card, ...]  # top is last
    deck: tuple[Card, ...]  # draw from the front
    active_card: Optional[Card] = None  # selected, question pending
    winner: Optional[Player] = None
    round_number: int = 1
    message: str = ""
    history: tuple[str, ...] = field(default_factory=tuple)  # Log of events

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    def player_by_id(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)

    def seat_of(self, player_id: str) -> Optional[int]:
        for i, p in enumerate(self.players):
            if p.id == player_id:
                return i
        return None

    def total_cards(self) -> int:
        """Cards across deck, discard pile and all hands."""
        return len(self.deck) + len(self.discard_pile) + sum(len(p.hand) for p in self.players)


@dataclass
class PlayerView:
    """Snapshot of the game prepared for one agent.

    Other players' hands are reduced to counts to keep prompts short; this is
    not an access barrier, the full GameState is in-process anyway.
    """

    player_id: str
    name: str
    my_hand: List[Card]
    top_discard: Optional[Card]
    active_color: Color
    current_player: str
    direction: int
    num_cards_per_player: Dict[str, int]  # name -> count
    scores: Dict[str, int]  # name -> score
    round_number: int
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, player_id: str) -> "PlayerView":
        """Create a player view from full game state."""
        from unoquiz.engine.rules import current_color

        me = state.player_by_id(player_id)
        if me is None:
            raise ValueError(f"Unknown player id: {player_id}")
        return cls(
            player_id=player_id,
            name=me.name,
            my_hand=list(me.hand),
            top_discard=state.top_discard(),
            active_color=current_color(state),
            current_player=state.current_player().name,
            direction=state.direction,
            num_cards_per_player={p.name: len(p.hand) for p in state.players},
            scores={p.name: p.score for p in state.players},
            round_number=state.round_number,
            history=list(state.history[-10:]),  # Last 10 events
        )
