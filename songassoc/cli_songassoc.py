"""CLI subcommands for playing Song Association in the terminal."""

import logging
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from songassoc.config import WORDS_FILE, GameConfig, load_config
from songassoc.errors import SongAssociationError
from songassoc.events import GameEvent, GameOver, NewWord
from songassoc.model import SongAssociationModel
from songassoc.session import GameSession, RoundOutcome
from songassoc.utils.logging import setup_logging
from songassoc.words import load_words

app = typer.Typer(help="Play Song Association: name a song whose lyrics contain the word")
console = Console()
logger = logging.getLogger(__name__)


def _now() -> float:
    return time.monotonic()


class TerminalView:
    """Redraws the terminal whenever the model announces a change."""

    def __init__(self, console: Console):
        self.console = console

    def __call__(self, model: SongAssociationModel, event: GameEvent) -> None:
        if isinstance(event, NewWord):
            self.show_word(model, event.word)
        elif isinstance(event, GameOver):
            self.show_results(model)

    def show_word(self, model: SongAssociationModel, word: str) -> None:
        self.console.rule(
            f"[bold][ROUND {model.current_round}][/bold] "
            f"[SCORE: {model.current_score}/{model.rounds_per_game}]"
        )
        self.console.print("[dim]WORD:[/dim]")
        self.console.print(f"[bold underline]{word.upper()}[/bold underline]\n")

    def show_results(self, model: SongAssociationModel) -> None:
        self.console.rule("[bold]GAME OVER[/bold]")

        table = Table(title="Your Metrics", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("NEW SCORE", str(model.current_score))
        table.add_row("AVERAGE SCORE", str(model.average_score))
        table.add_row("NEW TIME", f"{model.total_answer_time} s")
        table.add_row("AVERAGE TIME", f"{model.average_total_time} s")
        self.console.print(table)

        if model.song_answers:
            self.console.print("\n[bold]Your Mix[/bold]")
            for i, song in enumerate(model.song_answers, 1):
                self.console.print(f"  {i}. {song}")
        self.console.print()


def _play_round(session: GameSession, time_per_word: int) -> RoundOutcome:
    """Run one round from the word reveal to the next round or game over."""
    started = _now()
    while True:
        action = console.input(
            f"[dim]You have {time_per_word}s. Press Enter once you've sung the lyric (q to quit):[/dim] "
        ).strip().lower()
        if action != "q":
            break
        outcome = session.quit()
        if outcome is RoundOutcome.QUIT_WARNING:
            console.print(f"[yellow]{session.warning}[/yellow]")
            continue
        return outcome

    outcome = session.stop_timer(_now() - started)
    if outcome is RoundOutcome.TIMED_OUT:
        console.print("[red]TOO LATE[/red]")
        return session.time_out()

    while True:
        artist = console.input("Artist name: ")
        title = console.input("Song name: ")
        outcome = session.submit(artist, title)
        if outcome is RoundOutcome.FORFEIT_WARNING:
            console.print(f"[yellow]{session.warning}[/yellow]")
            continue
        return outcome


def _play_games(session: GameSession, time_per_word: int) -> None:
    """Play games until the player goes back to the start screen."""
    session.begin()
    while True:
        outcome = _play_round(session, time_per_word)
        if outcome is RoundOutcome.NEXT_ROUND:
            continue
        if outcome is RoundOutcome.RETURNED_HOME:
            return

        choice = console.input("[bold]N[/bold]ew game or [bold]H[/bold]ome? ").strip().lower()
        if choice.startswith("n"):
            session.new_game()
        else:
            session.go_home()
            return


def _build_config(
    config_file: Optional[str],
    rounds: Optional[int],
    time_per_word: Optional[int],
    words_file: Optional[str],
    seed: Optional[int],
) -> GameConfig:
    base = load_config(config_file) if config_file else GameConfig()
    return base.with_overrides(
        rounds_per_game=rounds,
        time_per_word=time_per_word,
        words_file=words_file,
        seed=seed,
    )


@app.command()
def play(
    rounds: Optional[int] = typer.Option(None, "--rounds", "-r", help="Rounds per game (default 15)"),
    time_per_word: Optional[int] = typer.Option(None, "--time-per-word", "-t", help="Seconds to think of a song"),
    words_file: Optional[str] = typer.Option(None, "--words-file", "-w", help="Path to prompt words file"),
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible word order"),
    log_path: str = typer.Option("logs/songassoc", help="Directory for log files"),
    verbose: bool = typer.Option(False, help="Enable verbose logging"),
):
    """Play Song Association in the terminal.

    Each round shows a word. Press Enter as soon as you've sung a lyric
    containing it, then type the artist and song title. Leaving a field blank
    and submitting twice forfeits the round.
    """
    setup_logging(Path(log_path), verbose)

    try:
        config = _build_config(config_file, rounds, time_per_word, words_file, seed)
        model = SongAssociationModel(config)
    except SongAssociationError as e:
        logger.error(str(e))
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    model.add_observer(TerminalView(console))
    session = GameSession(model)

    console.print("[bold]🎵 SONG ASSOCIATION[/bold]")
    console.print(
        f"Sing a song containing the word. {config.rounds_per_game} rounds, "
        f"{config.time_per_word}s per word.\n"
    )

    try:
        while True:
            choice = console.input("Press Enter to start ([bold]q[/bold] to exit): ").strip().lower()
            if choice == "q":
                break
            _play_games(session, config.time_per_word)
    except SongAssociationError as e:
        # the word file can disappear between refills
        logger.error(str(e))
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if model.games_played:
        console.print(
            f"\nGames played: {model.games_played} | "
            f"Average score: {model.average_score} | "
            f"Average time: {model.average_total_time} s"
        )


@app.command()
def words(
    words_file: str = typer.Option(WORDS_FILE, "--words-file", "-w", help="Path to prompt words file"),
):
    """Check that the prompt words file loads."""
    try:
        loaded = load_words(words_file)
    except SongAssociationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Loaded {len(loaded)} words from {words_file}[/green]")
