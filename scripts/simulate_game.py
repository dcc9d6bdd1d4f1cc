"""Simulate a round with random bots."""

from unoquiz.agents.random_agent import RandomAgent
from unoquiz.history import InMemoryMatchRecorder
from unoquiz.orchestration.game_runner import GameRunner


def main():
    agents = {
        "Ana": RandomAgent("Ana", accuracy=0.9, seed=1),
        "Bia": RandomAgent("Bia", accuracy=0.7, seed=2),
        "Caio": RandomAgent("Caio", accuracy=0.5, seed=3),
        "Duda": RandomAgent("Duda", accuracy=0.3, seed=4),
    }
    recorder = InMemoryMatchRecorder()

    runner = GameRunner(agents, seed=42, recorder=recorder)
    result = runner.run()

    for event in result.final_state.history:
        print(f"> {event}")

    print(f"Round finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    print(f"Wins so far: {recorder.win_tally()}")


if __name__ == "__main__":
    main()
