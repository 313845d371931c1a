"""Configuration commands."""

import pydantic
import structlog
import typer

from nfl_season.utils.config import get_settings
from nfl_season.utils.logging import get_active_log_file

config_app = typer.Typer(help="Configuration commands.")

logger = structlog.get_logger(__name__)


@config_app.command()
def show() -> None:
    """Show the active season calendar and logging settings."""
    settings = get_settings()
    try:
        calendar = settings.season_calendar()
    except pydantic.ValidationError as e:
        logger.error("Invalid season calendar", error=str(e))
        typer.echo(f"[FAIL] Invalid season calendar: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo("Season Calendar")
    typer.echo("=" * 40)
    typer.echo(f"Season start:        {calendar.start_month:02d}-{calendar.start_day:02d}")
    typer.echo(
        "Regular season end:  "
        f"{calendar.regular_season_end_month:02d}-{calendar.regular_season_end_day:02d} (next year)"
    )
    typer.echo(
        "Playoffs end:        "
        f"{calendar.playoffs_end_month:02d}-{calendar.playoffs_end_day:02d} (next year)"
    )
    typer.echo("")
    typer.echo("Logging")
    typer.echo("=" * 40)
    typer.echo(f"Level:  {settings.log_level}")
    typer.echo(f"Format: {settings.log_format}")
    typer.echo(f"Dir:    {settings.log_dir or '(stdout only)'}")
    log_file = get_active_log_file()
    typer.echo(f"File:   {log_file or '(none)'}")
