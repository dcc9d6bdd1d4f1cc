"""Game orchestration."""

from unoquiz.orchestration.game_runner import GameResult, GameRunner
from unoquiz.orchestration.match import MatchResult, run_match

__all__ = ["GameResult", "GameRunner", "MatchResult", "run_match"]
