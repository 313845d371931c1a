"""Command-line interface for NFL Season."""

import typer

from nfl_season.utils.config import ensure_directories
from nfl_season.utils.logging import setup_logging

from .config import config_app
from .season import season_app

app = typer.Typer(
    name="nfl-season",
    help="NFL Season - season phase classification for fantasy football leagues",
    add_completion=False,
)

app.add_typer(season_app, name="season")
app.add_typer(config_app, name="config")


@app.callback()
def startup() -> None:
    """Prepare directories and logging before any command runs."""
    ensure_directories()
    setup_logging()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
