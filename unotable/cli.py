"""CLI entry point."""

from __future__ import annotations

import time
from typing import Optional

import typer
from dotenv import load_dotenv

from unotable.config import Settings, load_settings

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Four-seat UNO: you against three scripted bots")


def _settings() -> Settings:
    try:
        return load_settings()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _turn_cap(max_turns: Optional[int], settings: Settings) -> int:
    if max_turns is None:
        return settings.max_turns
    if max_turns <= 0:
        raise typer.BadParameter("--max-turns must be positive")
    return max_turns


def _echo_new_events(history: tuple[str, ...], seen: int) -> int:
    for event in history[seen:]:
        typer.echo(f"> {event}")
    return len(history)


def _play_round(table, human, delay: float, max_turns: int) -> None:
    from unotable.engine import Phase
    from unotable.orchestration.controller import Verdict

    seen = _echo_new_events(table.session.history, 0)
    turns = 0
    while table.session.phase != Phase.GAME_OVER:
        if turns >= max_turns:
            typer.echo(f"Turn cap of {max_turns} reached, no winner.")
            return
        turns += 1
        if table.session.phase == Phase.AWAITING_HUMAN:
            move = human.get_move(table.view())
            if move.draw:
                table.draw()
            else:
                for index in dict.fromkeys(move.indices):
                    table.toggle(index)
                verdict = table.play()
                if verdict == Verdict.NEEDS_COLOR:
                    table.choose_color(human.get_color())
                    verdict = table.play()
                if verdict == Verdict.REJECTED:
                    typer.echo("That play is not allowed.")
        else:
            activation = table.schedule_opponent()
            if delay > 0:
                time.sleep(delay)
            table.run_activation(activation)
        seen = _echo_new_events(table.session.history, seen)

    typer.echo(table.session.message)


@app.command()
def play(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    think_delay: Optional[float] = typer.Option(
        None,
        "--think-delay",
        "-d",
        help="Seconds each bot waits before acting (default: UNO_THINK_DELAY or 1.0)",
    ),
    max_turns: Optional[int] = typer.Option(None, "--max-turns", help="Turn cap per game"),
) -> None:
    """Play an interactive game in the terminal."""
    from unotable.agents.human_agent import HumanAgent
    from unotable.orchestration.table import GameTable

    settings = _settings()
    delay = think_delay if think_delay is not None else settings.think_delay
    if delay < 0:
        raise typer.BadParameter("--think-delay must not be negative")
    turn_cap = _turn_cap(max_turns, settings)

    table = GameTable(
        seed=seed if seed is not None else settings.seed,
        discard_preview=settings.discard_preview,
    )
    human = HumanAgent()
    while True:
        _play_round(table, human, delay, turn_cap)
        if not typer.confirm("Play again?", default=False):
            break
        table.new_game()


@app.command()
def simulate(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    max_turns: Optional[int] = typer.Option(None, "--max-turns", help="Turn cap"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the result"),
) -> None:
    """Run a single game with every seat scripted."""
    from unotable.engine.game_state import seat_name
    from unotable.orchestration.game_runner import GameRunner

    settings = _settings()
    runner = GameRunner(
        seed=seed if seed is not None else settings.seed,
        max_turns=_turn_cap(max_turns, settings),
    )
    result = runner.run()
    if not quiet:
        for event in result.history:
            typer.echo(f"> {event}")
    winner = seat_name(result.winner) if result.winner is not None else "None (turn cap)"
    typer.echo(f"Winner: {winner}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def tournament(
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Run many scripted games and report wins per seat."""
    from unotable.engine.game_state import seat_name
    from unotable.orchestration.tournament import run_tournament

    if games <= 0:
        raise typer.BadParameter("--games must be positive")
    settings = _settings()
    wins = run_tournament(
        num_games=games,
        seed=seed if seed is not None else settings.seed,
        max_turns=settings.max_turns,
    )
    typer.echo("Tournament results:")
    for seat, w in sorted(wins.items(), key=lambda x: -x[1]):
        label = seat_name(seat) if seat >= 0 else "unfinished"
        typer.echo(f"  {label}: {w} wins")


if __name__ == "__main__":
    app()
