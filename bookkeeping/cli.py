"""Console demo: replay a seed scenario and print the account report."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from bookkeeping.config import get_settings
from bookkeeping.logging_setup import configure_logging
from bookkeeping.report import build_account_report, render_account_report
from bookkeeping.seed import load_seed
from bookkeeping.timing import timed

app = typer.Typer(add_completion=False, help=__doc__)


@app.command()
def report(
    seed: Annotated[
        Optional[Path],
        typer.Option("--seed", exists=True, dir_okay=False, help="Scenario JSON to replay."),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level, e.g. DEBUG or INFO."),
    ] = None,
) -> None:
    settings = get_settings()
    configure_logging(log_level or settings.log_level)

    # InsufficientFundsError is left to propagate and abort the run
    with timed("Adding operations"):
        loaded = load_seed(seed or settings.seed_path)

    for line in render_account_report(build_account_report(loaded.account), settings.currency):
        typer.echo(line)


def main() -> None:
    app()
