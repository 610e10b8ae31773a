#!/usr/bin/env python3
"""Sliding Tiles.

Usage::

    python main.py                                 # Rich terminal, 3×3
    python main.py -q "width=4&height=4"           # 4×4 board
    python main.py -f pygame -q "size=80"          # Pygame GUI, 80 px tiles
    python main.py -f vanilla --seed 7 --moves ll  # scripted, prints result
"""

import importlib
import logging
import sys
import time
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import PuzzleConfig, parse_query_string  # noqa: E402

logger = logging.getLogger("sliding_tiles")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def build_config(query: str, seed: Optional[int]) -> PuzzleConfig:
    """Resolve the startup options; *seed* defaults to the current time."""
    params = parse_query_string(query)
    if seed is not None:
        params["seed"] = str(seed)
    return PuzzleConfig.from_query(params, default_seed=time.time_ns() // 1_000_000)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    query: str = typer.Option(
        "", "-q", "--query",
        help="Options as a query string, e.g. 'width=4&height=4&shuffle=50'.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Shuffle seed (overrides 'seed' in --query).",
    ),
    moves: Optional[str] = typer.Option(
        None, "--moves",
        help="Apply these u/d/l/r moves, print the board and exit (status 1 if unsolved).",
    ),
    log_level: str = typer.Option(
        "warning", "--log-level",
        help="Logging level (debug, info, warning, error).",
    ),
) -> None:
    """Sliding Tiles."""
    _setup_logging(log_level)
    config = build_config(query, seed)
    logger.info(f"Starting {config.width}×{config.height} board, seed {config.seed}")

    if moves is not None:
        from frontend.cli.vanilla.app import run_script

        state = run_script(config, moves)
        raise typer.Exit(code=0 if state.is_solved else 1)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(config)


if __name__ == "__main__":
    app()
