"""Command-line interface for Song Association.

This is the CLI entry point:
- `songassoc game play` - Play Song Association in the terminal
- `songassoc game words` - Check the prompt words file
- `songassoc version` - Show version information
"""

import typer
from rich.console import Console

from songassoc.cli_songassoc import app as game_app

# Main application
app = typer.Typer(
    help="Song Association - sing a song whose lyrics contain the word",
    no_args_is_help=True,
)
console = Console()

# Register subcommands
app.add_typer(game_app, name="game", help="Play Song Association games")


@app.callback()
def main():
    """Song Association - a single-player party game.

    Each round shows a word and a countdown. Think of a song whose lyrics
    contain the word, then enter its artist and title.

    Examples:

        # Play with the default 15 rounds and 10 seconds per word
        songassoc game play

        # Shorter games with your own words
        songassoc game play --rounds 5 --words-file my_words.txt

        # Check a words file
        songassoc game words --words-file my_words.txt
    """
    pass


@app.command()
def version():
    """Show version information."""
    from songassoc import __version__

    console.print("[bold]Song Association[/bold]")
    console.print(f"  songassoc: {__version__}")


if __name__ == "__main__":
    app()
