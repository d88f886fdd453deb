"""Command-line entry point."""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from statechess import __version__
from statechess.game.controller import GameController
from statechess.ui.console import GameConsole
from statechess.ui.settings import AppSettings

app = typer.Typer(
    name="statechess",
    help="Kings, rooks and pawns on the terminal.",
    add_completion=False,
)
console = Console(highlight=False)


def configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Print version information."""
    console.print(f"[bold blue]statechess[/bold blue] v{__version__}")


@app.command()
def play(
    layout: Optional[str] = typer.Option(
        None, "--layout", "-l", help="Starting placement, e.g. 'k7/2K5/8/8/8/8/8/R7'"
    ),
    unicode: bool = typer.Option(False, "--unicode/--ascii", help="Draw pieces as figurines"),
    coordinates: bool = typer.Option(
        True, "--coordinates/--no-coordinates", help="Show rank and file labels"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
) -> None:
    """Play a game, reading commands from standard input."""
    try:
        settings = AppSettings(
            show_coordinates=coordinates,
            use_unicode=unicode,
            log_level=log_level,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    configure_logging(settings.log_level)

    controller = GameController()
    game_console = GameConsole(controller, settings, console)
    try:
        controller.new_game(layout)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--layout") from exc

    game_console.show()
    game_console.run(sys.stdin)


def main() -> None:
    """Launch the statechess CLI."""
    app()


if __name__ == "__main__":
    main()
