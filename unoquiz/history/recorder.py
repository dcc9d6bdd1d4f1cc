"""Match recorders: where finished rounds and win tallies are kept."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Protocol

from unoquiz.config import MAX_RECORDS
from unoquiz.history.records import RoundRecord

logger = logging.getLogger(__name__)


class MatchRecorder(Protocol):
    """Interface the game runner reports finished rounds to."""

    def append(self, record: RoundRecord) -> None:
        """Store a round (newest first) and count a win for its winner."""
        ...

    def list_recent(self, n: Optional[int] = None) -> list[RoundRecord]:
        """Stored rounds, newest first, optionally only the first `n`."""
        ...

    def win_tally(self) -> dict[str, int]:
        """Player name -> total rounds won."""
        ...


class InMemoryMatchRecorder:
    """Recorder keeping everything in process."""

    def __init__(self, max_records: int = MAX_RECORDS):
        self._max_records = max_records
        self._rounds: list[RoundRecord] = []
        self._wins: dict[str, int] = {}
        self._player_names: list[str] = []

    def append(self, record: RoundRecord) -> None:
        self._rounds.insert(0, record)
        del self._rounds[self._max_records:]
        self._wins[record.winner] = self._wins.get(record.winner, 0) + 1

    def list_recent(self, n: Optional[int] = None) -> list[RoundRecord]:
        rounds = list(self._rounds)
        return rounds if n is None else rounds[:n]

    def win_tally(self) -> dict[str, int]:
        return dict(self._wins)

    def player_names(self) -> list[str]:
        return list(self._player_names)

    def save_player_names(self, names: list[str]) -> None:
        self._player_names = list(names)

    def clear(self) -> None:
        """Forget rounds and wins; saved player names stay."""
        self._rounds = []
        self._wins = {}


class JsonFileMatchRecorder(InMemoryMatchRecorder):
    """Recorder persisted to a single JSON file.

    The whole file is rewritten on every change. A missing or unreadable
    file is treated as empty history.
    """

    def __init__(self, path: Path, max_records: int = MAX_RECORDS):
        super().__init__(max_records=max_records)
        self._path = Path(path)
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            rounds = [RoundRecord.from_dict(r) for r in data.get("rounds", [])]
            wins = {str(k): int(v) for k, v in data.get("totalWins", {}).items()}
            names = [str(n) for n in data.get("playerNames", [])]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Ignoring unreadable history file %s: %s", self._path, e)
            return
        self._rounds = rounds[: self._max_records]
        self._wins = wins
        self._player_names = names

    def _save(self) -> None:
        payload: dict[str, Any] = {
            "playerNames": self._player_names,
            "rounds": [r.to_dict() for r in self._rounds],
            "totalWins": self._wins,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug("Saved %d rounds to %s", len(self._rounds), self._path)

    def append(self, record: RoundRecord) -> None:
        super().append(record)
        self._save()

    def save_player_names(self, names: list[str]) -> None:
        super().save_player_names(names)
        self._save()

    def clear(self) -> None:
        super().clear()
        self._save()
