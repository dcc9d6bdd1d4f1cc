"""Round records handed to the match recorder."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from unoquiz.engine.game_state import GameState


@dataclass(frozen=True)
class PlayerSummary:
    """One seat's standing at the end of a round."""

    name: str
    avatar: str
    score: int
    cards_left: int


@dataclass(frozen=True)
class RoundRecord:
    """A completed round."""

    id: str
    date: str  # ISO-8601, UTC
    round_number: int
    players: tuple[PlayerSummary, ...]
    winner: str
    duration: int  # seconds

    def to_dict(self) -> dict[str, Any]:
        """JSON payload using the stored camelCase keys."""
        return {
            "id": self.id,
            "date": self.date,
            "roundNumber": self.round_number,
            "players": [
                {"name": p.name, "avatar": p.avatar, "score": p.score, "cardsLeft": p.cards_left}
                for p in self.players
            ],
            "winner": self.winner,
            "duration": self.duration,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RoundRecord":
        return cls(
            id=str(data["id"]),
            date=str(data["date"]),
            round_number=int(data["roundNumber"]),
            players=tuple(
                PlayerSummary(
                    name=p["name"],
                    avatar=p["avatar"],
                    score=int(p["score"]),
                    cards_left=int(p["cardsLeft"]),
                )
                for p in data["players"]
            ),
            winner=str(data["winner"]),
            duration=int(data["duration"]),
        )


def make_round_record(
    state: GameState,
    duration: float,
    round_number: Optional[int] = None,
    now: Optional[datetime] = None,
) -> RoundRecord:
    """Summarize a scored, finished round.

    `duration` is measured by the caller; the engine keeps no clock.
    """
    if state.winner is None:
        raise ValueError("Round has no winner yet; call score_round first")
    stamp = now or datetime.now(timezone.utc)
    return RoundRecord(
        id=uuid.uuid4().hex,
        date=stamp.isoformat(),
        round_number=round_number if round_number is not None else state.round_number,
        players=tuple(
            PlayerSummary(name=p.name, avatar=p.avatar, score=p.score, cards_left=len(p.hand))
            for p in state.players
        ),
        winner=state.winner.name,
        duration=int(duration),
    )
