"""CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from unoquiz.config import QUESTION_TIME_LIMIT, history_file

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO Quiz: UNO where every card is gated by a trivia question")

_settings: dict[str, object] = {"history_file": None}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every turn"),
    history_path: Optional[Path] = typer.Option(
        None,
        "--history-file",
        help="JSON file for match history (default: $UNOQUIZ_HISTORY_FILE or ~/.unoquiz/history.json)",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _settings["history_file"] = history_path


def _recorder():
    from unoquiz.history import JsonFileMatchRecorder

    path = _settings["history_file"] or history_file()
    return JsonFileMatchRecorder(Path(path))


def _parse_players(
    player_specs: str,
    llm_provider: str,
    llm_model: str,
    time_limit: float,
    seed: Optional[int],
) -> dict[str, "AgentProtocol"]:
    from unoquiz.agent.protocol import AgentProtocol
    from unoquiz.agents.human_agent import HumanAgent
    from unoquiz.agents.llm_agent import LLMAgent
    from unoquiz.agents.random_agent import RandomAgent

    parts = [s.strip() for s in player_specs.split(",") if s.strip()]
    if not 2 <= len(parts) <= 4:
        raise typer.BadParameter(f"UNO Quiz needs 2-4 players, got {len(parts)}")

    agents: dict[str, AgentProtocol] = {}
    for i, part in enumerate(parts):
        if "=" in part:
            name, kind = (s.strip() for s in part.split("=", 1))
        else:
            name, kind = f"Player {i + 1}", part
        if not name:
            raise typer.BadParameter(f"Empty player name in '{part}'")
        if name in agents:
            raise typer.BadParameter(f"Duplicate player name: {name}")
        kind = kind.lower()
        if ":" in kind:
            kind, model = kind.split(":", 1)
        else:
            model = llm_model

        if kind == "llm":
            try:
                agents[name] = LLMAgent(provider=llm_provider, model=model)
            except ValueError as e:
                raise typer.BadParameter(str(e)) from e
        elif kind == "human":
            agents[name] = HumanAgent(name=name, time_limit=time_limit)
        elif kind in ("random", "bot"):
            bot_seed = None if seed is None else seed + i
            agents[name] = RandomAgent(name=name, seed=bot_seed)
        else:
            raise typer.BadParameter(f"Unknown agent type: {kind}. Use 'human', 'llm' or 'random'.")
    return agents


PLAYERS_HELP = (
    "Comma-separated seats, each name=kind where kind is human, random or llm[:model] "
    "(e.g. Ana=human,Bia=random,Caio=llm:openai/gpt-4o-mini)"
)


@app.command()
def play(
    players: str = typer.Option("You=human,Bot=random", "--players", "-a", help=PLAYERS_HELP),
    llm_provider: str = typer.Option(
        "openrouter",
        "--llm-provider",
        "-p",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: str = typer.Option("openai/gpt-4o-mini", "--llm-model", "-m", help="Default model name"),
    time_limit: float = typer.Option(QUESTION_TIME_LIMIT, "--time-limit", "-t", help="Seconds per question"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Play a single round."""
    from unoquiz.orchestration.game_runner import GameRunner

    agent_map = _parse_players(players, llm_provider, llm_model, time_limit, seed)
    recorder = _recorder()
    recorder.save_player_names(list(agent_map))
    result = GameRunner(agent_map, seed=seed, recorder=recorder).run()

    typer.echo(f"Winner: {result.winner or 'None (turn limit reached)'}")
    typer.echo(f"Turns: {result.num_turns}")
    for p in sorted(result.final_state.players, key=lambda p: -p.score):
        typer.echo(f"  {p.avatar:<9} {p.name}: {p.score} points, {len(p.hand)} cards left")


@app.command()
def match(
    players: str = typer.Option("Bot 1=random,Bot 2=random", "--players", "-a", help=PLAYERS_HELP),
    rounds: int = typer.Option(3, "--rounds", "-r", min=1, help="Number of rounds"),
    llm_provider: str = typer.Option("openrouter", "--llm-provider", "-p", help="LLM provider"),
    llm_model: str = typer.Option("openai/gpt-4o-mini", "--llm-model", "-m", help="Default model name"),
    time_limit: float = typer.Option(QUESTION_TIME_LIMIT, "--time-limit", "-t", help="Seconds per question"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Play several rounds, carrying scores over."""
    from unoquiz.orchestration.match import run_match

    agent_map = _parse_players(players, llm_provider, llm_model, time_limit, seed)
    recorder = _recorder()
    recorder.save_player_names(list(agent_map))
    result = run_match(agent_map, num_rounds=rounds, seed=seed, recorder=recorder)

    typer.echo("Match results:")
    for name, score in sorted(result.scores.items(), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {score} points, {result.wins.get(name, 0)} wins")


@app.command()
def history(
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Rounds to show"),
) -> None:
    """Show recent rounds and total wins."""
    recorder = _recorder()
    rounds = recorder.list_recent(limit)
    if not rounds:
        typer.echo("No rounds played yet.")
        return
    for record in rounds:
        minutes, seconds = divmod(record.duration, 60)
        typer.echo(f"{record.date[:19]}  round {record.round_number}  winner: {record.winner}  ({minutes}m{seconds:02d}s)")
        for p in sorted(record.players, key=lambda p: -p.score):
            typer.echo(f"    {p.name}: {p.score} points, {p.cards_left} cards left")
    typer.echo("\nTotal wins:")
    for name, wins in sorted(recorder.win_tally().items(), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {wins}")


@app.command("clear-history")
def clear_history(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete stored rounds and win counts."""
    if not yes:
        typer.confirm("Delete all match history?", abort=True)
    _recorder().clear()
    typer.echo("History cleared.")


@app.command()
def questions(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only this category"),
) -> None:
    """List the trivia catalog."""
    from unoquiz.engine.trivia import questions_by_category

    grouped = questions_by_category()
    if category is not None:
        matches = {k: v for k, v in grouped.items() if k.lower() == category.lower()}
        if not matches:
            raise typer.BadParameter(f"Unknown category: {category}. Choose from: {', '.join(grouped)}")
        grouped = matches
    for name, items in grouped.items():
        typer.echo(f"{name} ({len(items)})")
        for q in items:
            typer.echo(f"  - {q.text} [{q.answer}]")


if __name__ == "__main__":
    app()
