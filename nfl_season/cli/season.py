"""Season commands: status, standings, next."""

import json
from datetime import datetime

import pydantic
import structlog
import typer

from nfl_season.exceptions import SeasonError
from nfl_season.models.season import SeasonInfo
from nfl_season.season.classifier import compute_season_info
from nfl_season.season.clock import parse_moment, system_clock
from nfl_season.season.display import (
    days_until_next_season,
    format_season_date,
    next_season_start,
    should_display_standings,
    status_message,
)
from nfl_season.utils.logging import clear_log_context, log_context

season_app = typer.Typer(help="Season phase commands.")

logger = structlog.get_logger(__name__)

AT_OPTION_HELP = "Instant to classify (YYYY-MM-DD or ISO datetime). Defaults to now."


def _resolve_moment(at: str | None) -> datetime:
    if at is None:
        return system_clock()
    return parse_moment(at)


def _classify(at: str | None) -> tuple[datetime, SeasonInfo]:
    """Parse ``--at`` and classify it, exiting with code 1 on failure."""
    log_context(at=at or "now")
    try:
        moment = _resolve_moment(at)
        return moment, compute_season_info(moment)
    except (SeasonError, pydantic.ValidationError) as e:
        logger.error("Season classification failed", error=str(e))
        typer.echo(f"[FAIL] {e}", err=True)
        raise typer.Exit(code=1) from e
    finally:
        clear_log_context("at")


@season_app.command()
def status(
    at: str = typer.Option(None, "--at", help=AT_OPTION_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the season info as JSON"),
) -> None:
    """
    Show the current season phase.

    Prints the status banner, or the full season info with --json.
    """
    _, info = _classify(at)
    logger.debug("Season status requested", year=info.year, status=info.status.value)

    if as_json:
        payload = info.model_dump(mode="json")
        payload["label"] = info.label
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(status_message(info))


@season_app.command()
def standings(
    at: str = typer.Option(None, "--at", help=AT_OPTION_HELP),
) -> None:
    """Report whether league standings should be displayed."""
    _, info = _classify(at)

    if should_display_standings(info):
        typer.echo(f"[OK] Standings visible: {info.label} {info.status.value}")
    else:
        typer.echo(f"Standings hidden: {info.label} {info.status.value}")


@season_app.command("next")
def next_season(
    at: str = typer.Option(None, "--at", help=AT_OPTION_HELP),
) -> None:
    """Show when the next season starts and how many days remain."""
    moment, info = _classify(at)

    start = next_season_start(info)
    days = days_until_next_season(info, moment)

    typer.echo(f"Next season starts: {format_season_date(start)} ({start.isoformat()})")
    typer.echo(f"Days until kickoff: {days}")
