"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO game with scripted, LLM and human agents")


def _parse_agents(
    agent_specs: str,
    llm_provider: str,
    llm_model: str,
) -> list[tuple[str, "AgentProtocol"]]:
    from unoengine.agent.protocol import AgentProtocol
    from unoengine.agents.human_agent import HumanAgent
    from unoengine.agents.scripted_agent import ScriptedAgent

    parts = [s.strip().lower() for s in agent_specs.split(",") if s.strip()]
    agents: list[tuple[str, AgentProtocol]] = []
    for i, part in enumerate(parts):
        name = f"Player {i + 1}"
        if ":" in part:
            kind, model = part.split(":", 1)
        else:
            kind, model = part, llm_model

        if kind == "llm":
            from unoengine.agents.llm_agent import LLMAgent

            agents.append((f"{name} (AI)", LLMAgent(provider=llm_provider, model=model)))
        elif kind == "scripted":
            agents.append((f"{name} (AI)", ScriptedAgent(name=name)))
        elif kind == "human":
            agents.append((name, HumanAgent(name=name)))
        else:
            raise typer.BadParameter(f"Unknown agent type: {kind}. Use 'scripted', 'llm' or 'human'.")
    if len(agents) < 2:
        raise typer.BadParameter("Uno requires at least 2 players.")
    return agents


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def play(
    agents: str = typer.Option(
        "human,scripted",
        "--agents",
        "-a",
        help="Comma-separated: scripted, llm, human, or llm:model_name (e.g. human,llm:gpt-4o,scripted)",
    ),
    llm_provider: str = typer.Option(
        "openrouter",
        "--llm-provider",
        "-p",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: str = typer.Option(
        "openai/gpt-4o-mini",
        "--llm-model",
        "-m",
        help="Model name (e.g. openai/gpt-4o-mini, meta-llama/llama-3-8b-instruct)",
    ),
    strict_draw: bool = typer.Option(
        False,
        "--strict-draw",
        help="Only allow drawing when no card in hand can be played",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine events"),
) -> None:
    """Run a single UNO game."""
    from unoengine.orchestration.game_runner import GameRunner

    _configure_logging(verbose)
    agent_list = _parse_agents(agents, llm_provider, llm_model)
    runner = GameRunner(agent_list, seed=seed, strict_draw=strict_draw)
    result = runner.run()
    for event in result.final_state.history:
        typer.echo(f"> {event}")
    typer.echo(f"Winner: {result.winner or 'None (turn limit reached)'}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def tournament(
    agents: str = typer.Option(
        "scripted,scripted",
        "--agents",
        "-a",
        help="Comma-separated agent types or llm:model_name (e.g. scripted,llm:llama3)",
    ),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    llm_provider: str = typer.Option(
        "openrouter",
        "--llm-provider",
        "-p",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: str = typer.Option(
        "openai/gpt-4o-mini",
        "--llm-model",
        "-m",
        help="Model name",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine events"),
) -> None:
    """Run a tournament."""
    from unoengine.orchestration.tournament import run_tournament

    _configure_logging(verbose)
    agent_list = _parse_agents(agents, llm_provider, llm_model)
    wins = run_tournament(agent_list, num_games=games, seed=seed)
    typer.echo("Tournament results:")
    for name, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {w} wins")


if __name__ == "__main__":
    app()
