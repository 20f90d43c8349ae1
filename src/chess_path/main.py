import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console

from chess_path.config import DEFAULT_TARGET_NAME, SearchConfig
from chess_path.exceptions import UnknownTargetError
from chess_path.lichess import LichessService
from chess_path.logging_config import setup_logging
from chess_path.models import SearchOutcome
from chess_path.search import PathFinder


app = typer.Typer(help="Find your chain of Lichess games to a chess celebrity.")
console = Console()


@app.command()
def find(
    username: str = typer.Argument(..., help="The Lichess username to start from."),
    target: str = typer.Option(
        DEFAULT_TARGET_NAME,
        "--target",
        "-t",
        help="Name of the target identity to search for.",
    ),
    max_depth: Optional[int] = typer.Option(
        None,
        "--max-depth",
        "-d",
        min=1,
        help="Maximum degrees of separation to explore.",
    ),
    games_per_user: Optional[int] = typer.Option(
        None,
        "--games-per-user",
        "-g",
        min=1,
        help="Number of recent games fetched per player.",
    ),
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Log level."),
):
    """
    Search for a path from USERNAME to a target identity.
    """
    setup_logging(level=log_level)

    config = SearchConfig.from_env()
    overrides = {}
    if max_depth is not None:
        overrides["max_depth"] = max_depth
    if games_per_user is not None:
        overrides["games_per_user"] = games_per_user
    if overrides:
        config = config.model_copy(update=overrides)

    outcome = asyncio.run(run_search_async(username, target, config))
    if outcome is None:
        raise typer.Exit(code=2)

    print_outcome(outcome)
    raise typer.Exit(code=0 if outcome.found else 1)


@app.command()
def targets():
    """
    List the configured target identities.
    """
    config = SearchConfig.from_env()
    for identity in config.targets.values():
        console.print(f"[bold]{identity.name}[/bold]: {', '.join(identity.accounts)}")
        if identity.description:
            console.print(f"  {identity.description}")


async def run_search_async(username: str, target: str, config: SearchConfig) -> Optional[SearchOutcome]:
    logger = logging.getLogger(__name__)
    finder = PathFinder(LichessService.from_config(config), config)
    try:
        return await finder.find_path_to(username, target)
    except UnknownTargetError as e:
        logger.error(e.message)
        console.print(f"[red]{e.message}[/red]. Available: {', '.join(config.targets)}")
        return None


def print_outcome(outcome: SearchOutcome) -> None:
    if not outcome.found:
        console.print(f"[red]{outcome.headline()}[/red]")
        return

    console.print(f"[bold]{outcome.headline()}[/bold]")
    for index, node in enumerate(outcome.path):
        console.print(f"  ♘ {node.username} (Rating: {node.rating_label})")
        if index < len(outcome.path) - 1:
            console.print("  │")
    console.print(
        f"[dim]{outcome.api_calls} API calls in {outcome.computation_time_ms / 1000:.1f}s[/dim]"
    )


if __name__ == "__main__":
    app()
