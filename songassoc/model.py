"""Round and score state machine for Song Association."""

import logging
import random
from enum import Enum
from typing import List, Optional, Tuple

from songassoc.config import GameConfig
from songassoc.events import GameEvent, GameOver, NewWord, Observer
from songassoc.words import WordSupply

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Where the model is in a game."""
    AWAITING_ROUND = "awaiting_round"
    ROUND_IN_PROGRESS = "round_in_progress"
    GAME_OVER = "game_over"


class SongAssociationModel:
    """The model of a song association game.

    A game is ``rounds_per_game`` rounds. Each round the presentation layer
    calls ``start_round()`` (observers receive ``NewWord``) and later
    ``end_round()`` with the player's answer, or ``None`` if they did not
    name a song. The call that ends the last round records the game in the
    session history and notifies observers with ``GameOver``.

    Session history (final scores and times) lives as long as the model;
    ``reset()`` only clears the game in progress.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        words: Optional[WordSupply] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        if words is None:
            rng = rng or random.Random(self.config.seed)
            words = WordSupply(self.config.words_file, rng=rng)
        self.words = words

        self._observers: List[Observer] = []

        # Session history
        self._all_scores: List[int] = []
        self._all_total_answer_times: List[int] = []
        self._games_played = 0
        self._average_score = 0
        self._average_total_time = 0

        # Current game
        self._song_answers: List[str] = []
        self.reset()

    def reset(self) -> None:
        """Clear the game in progress. Session history is kept."""
        self._total_answer_time = 0
        self._points_scored = 0
        self._song_answers = []
        self._current_round = 1
        self._state = GameState.AWAITING_ROUND

    def start_round(self) -> str:
        """Draw the next word and announce it. Round counters are unchanged."""
        self.words.refill_if_empty()
        word = self.words.draw()
        self._state = GameState.ROUND_IN_PROGRESS
        logger.debug(f"Round {self._current_round} word: {word}")
        self._announce(NewWord(word))
        return word

    def end_round(self, song: Optional[str], answer_time: int) -> None:
        """End the current round.

        Args:
            song: "artist - title" entered by the player, or None
            answer_time: seconds the player took to end the round
        """
        # counted whether or not the player named a song
        self._current_round += 1
        self._total_answer_time += answer_time

        if song is not None:
            self._song_answers.append(song)
            self._points_scored += 1

        if self._current_round > self.config.rounds_per_game:
            self._finish_game()
        else:
            self._state = GameState.AWAITING_ROUND

    def _finish_game(self) -> None:
        self._all_scores.append(self._points_scored)
        self._all_total_answer_times.append(self._total_answer_time)
        self._games_played += 1

        self._average_score = sum(self._all_scores) // self._games_played
        self._average_total_time = sum(self._all_total_answer_times) // self._games_played
        self._state = GameState.GAME_OVER

        logger.info(
            f"Game {self._games_played} over: score {self._points_scored}, "
            f"time {self._total_answer_time}s "
            f"(averages: {self._average_score} pts, {self._average_total_time}s)"
        )
        self._announce(GameOver())

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def rounds_per_game(self) -> int:
        return self.config.rounds_per_game

    @property
    def current_round(self) -> int:
        """1-based round number. Reads rounds_per_game + 1 once the game is over."""
        return self._current_round

    @property
    def is_game_over(self) -> bool:
        return self._current_round > self.config.rounds_per_game

    @property
    def current_score(self) -> int:
        return self._points_scored

    @property
    def average_score(self) -> int:
        return self._average_score

    @property
    def total_answer_time(self) -> int:
        return self._total_answer_time

    @property
    def average_total_time(self) -> int:
        return self._average_total_time

    @property
    def games_played(self) -> int:
        return self._games_played

    @property
    def song_answers(self) -> Tuple[str, ...]:
        return tuple(self._song_answers)

    @property
    def score_history(self) -> Tuple[int, ...]:
        return tuple(self._all_scores)

    @property
    def time_history(self) -> Tuple[int, ...]:
        return tuple(self._all_total_answer_times)

    def add_observer(self, observer: Observer) -> None:
        """Register an observer. Observers are notified in registration order."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def _announce(self, event: GameEvent) -> None:
        for observer in list(self._observers):
            observer(self, event)
