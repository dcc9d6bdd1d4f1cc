"""Match history: round records and recorders."""

from unoquiz.history.records import PlayerSummary, RoundRecord, make_round_record
from unoquiz.history.recorder import InMemoryMatchRecorder, JsonFileMatchRecorder, MatchRecorder

__all__ = [
    "PlayerSummary",
    "RoundRecord",
    "make_round_record",
    "MatchRecorder",
    "InMemoryMatchRecorder",
    "JsonFileMatchRecorder",
]
