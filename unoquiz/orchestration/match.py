"""Match - play several rounds with the same seats and aggregate results."""

import random
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Optional

from unoquiz.engine import deal, next_round
from unoquiz.orchestration.game_runner import GameResult, GameRunner


@dataclass
class MatchResult:
    """Wins and cumulative scores after a match."""

    wins: dict[str, int]
    scores: dict[str, int]
    rounds: list[GameResult] = field(default_factory=list)


def run_match(
    agents: dict[str, Any],
    num_rounds: int = 3,
    seed: Optional[int] = None,
    recorder: Any = None,
) -> MatchResult:
    """Play `num_rounds` rounds, carrying scores from one round to the next.

    Returns:
        MatchResult with wins per player name and final scores.
    """
    if num_rounds < 1:
        raise ValueError("A match needs at least one round")

    rng = random.Random(seed)
    wins: dict[str, int] = defaultdict(int)
    results: list[GameResult] = []
    state = None

    for _ in range(num_rounds):
        runner = GameRunner(agents, seed=rng.randint(0, 2**31 - 1), recorder=recorder)
        if state is None:
            state = deal(list(agents.keys()), rng=rng)
        else:
            state = next_round(state, rng=rng)
        result = runner.run(state)
        results.append(result)
        state = result.final_state
        if result.winner:
            wins[result.winner] += 1

    scores = {p.name: p.score for p in state.players}
    return MatchResult(wins=dict(wins), scores=scores, rounds=results)
