"""Player-facing round policy on top of the game model.

The model only counts rounds and points. This module decides what a player
action means: stopping the timer, submitting a half-typed answer, running out
of time or quitting mid-game. Front-ends (the terminal CLI, tests) drive a
GameSession and redraw from the model's notifications.
"""

import logging
from enum import Enum
from typing import Optional

from songassoc.model import SongAssociationModel

logger = logging.getLogger(__name__)

FORFEIT_WARNING = "Finish typing or forfeit."
QUIT_WARNING = "Click again to confirm."


class RoundOutcome(Enum):
    """Result of a player action."""
    AWAITING_ANSWER = "awaiting_answer"  # timer stopped in time, enter artist/title
    TIMED_OUT = "timed_out"  # timer ran out, only moving on is possible
    FORFEIT_WARNING = "forfeit_warning"  # blank field, submit again to forfeit
    NEXT_ROUND = "next_round"
    GAME_OVER = "game_over"
    QUIT_WARNING = "quit_warning"  # quit again to confirm
    RETURNED_HOME = "returned_home"


def format_answer(artist: str, title: str) -> Optional[str]:
    """Join artist and title as "artist - title", or None if either is blank."""
    artist = (artist or "").strip()
    title = (title or "").strip()
    if not artist or not title:
        return None
    return f"{artist} - {title}"


class GameSession:
    """Drives a SongAssociationModel the way a player interacts with it."""

    def __init__(self, model: SongAssociationModel):
        self.model = model
        self.time_per_word = model.config.time_per_word
        self.warning: Optional[str] = None
        self.current_word: Optional[str] = None
        self._answer_time: Optional[int] = None
        self._timed_out = False
        self._submit_attempts = 0
        self._quit_attempts = 0

    def begin(self) -> str:
        """Start a fresh game (also used for "new game")."""
        self.model.reset()
        return self._start_round()

    new_game = begin

    def go_home(self) -> RoundOutcome:
        """Abandon the game in progress without starting another."""
        self.model.reset()
        self._clear_round()
        self.current_word = None
        logger.debug("Returned home")
        return RoundOutcome.RETURNED_HOME

    def stop_timer(self, elapsed: float) -> RoundOutcome:
        """The player says they sang a lyric after ``elapsed`` seconds."""
        if self.model.is_game_over:
            return RoundOutcome.GAME_OVER
        if elapsed > self.time_per_word:
            logger.debug(f"Timer stopped too late ({elapsed:.1f}s)")
            self._timed_out = True
            return RoundOutcome.TIMED_OUT
        self._answer_time = max(0, int(elapsed))
        self._submit_attempts = 0
        return RoundOutcome.AWAITING_ANSWER

    def time_out(self) -> RoundOutcome:
        """The countdown ran out: no answer, full time charged."""
        if self.model.is_game_over:
            return RoundOutcome.GAME_OVER
        return self._finish_round(None, self.time_per_word)

    def submit(self, artist: str, title: str) -> RoundOutcome:
        """Submit an answer for the current round.

        Both fields filled in scores the song. With a blank field the first
        attempt only warns; submitting again forfeits the round. After the
        timer ran out the round is forfeited whatever was typed.
        """
        if self.model.is_game_over:
            return RoundOutcome.GAME_OVER
        if self._timed_out:
            return self.time_out()
        if self._answer_time is None:
            raise RuntimeError("stop_timer() must be called before submit()")

        self._submit_attempts += 1
        song = format_answer(artist, title)
        if song is not None:
            return self._finish_round(song, self._answer_time)

        if self._submit_attempts == 1:
            self.warning = FORFEIT_WARNING
            return RoundOutcome.FORFEIT_WARNING

        logger.debug(f"Round {self.model.current_round} forfeited")
        return self._finish_round(None, self._answer_time)

    def quit(self) -> RoundOutcome:
        """Quit the game in progress. Needs to be confirmed by a second call."""
        self._quit_attempts += 1
        if self._quit_attempts == 1:
            self.warning = QUIT_WARNING
            return RoundOutcome.QUIT_WARNING
        return self.go_home()

    def _finish_round(self, song: Optional[str], answer_time: int) -> RoundOutcome:
        self.model.end_round(song, answer_time)
        if self.model.current_round <= self.model.rounds_per_game:
            self._start_round()
            return RoundOutcome.NEXT_ROUND
        self._clear_round()
        return RoundOutcome.GAME_OVER

    def _start_round(self) -> str:
        self._clear_round()
        self.current_word = self.model.start_round()
        return self.current_word

    def _clear_round(self) -> None:
        self.warning = None
        self._answer_time = None
        self._timed_out = False
        self._submit_attempts = 0
        self._quit_attempts = 0
