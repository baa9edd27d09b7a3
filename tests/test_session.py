"""Tests for the player-facing round policy."""

import random

import pytest

from songassoc.config import GameConfig
from songassoc.events import GameOver, NewWord
from songassoc.model import SongAssociationModel
from songassoc.session import (
    FORFEIT_WARNING,
    QUIT_WARNING,
    GameSession,
    RoundOutcome,
    format_answer,
)
from songassoc.words import WordSupply


WORDS = ["love", "night", "fire", "heart", "dance", "rain", "summer", "money"]


class TestFormatAnswer:
    """Test cases for joining artist and title."""

    def test_both_fields(self):
        assert format_answer("Queen", "Radio Ga Ga") == "Queen - Radio Ga Ga"

    def test_fields_are_trimmed(self):
        assert format_answer("  Queen ", " Radio Ga Ga\n") == "Queen - Radio Ga Ga"

    def test_blank_field(self):
        assert format_answer("Queen", "") is None
        assert format_answer("   ", "Radio Ga Ga") is None


class TestGameSession:
    """Test cases for GameSession."""

    def setup_method(self):
        """Setup for each test."""
        self.model = SongAssociationModel(
            GameConfig(rounds_per_game=3, time_per_word=10),
            words=WordSupply(WORDS, rng=random.Random(42)),
        )
        self.events = []
        self.model.add_observer(lambda model, event: self.events.append(event))
        self.session = GameSession(self.model)

    def test_begin_starts_first_round(self):
        """Test begin resets the model and announces a word."""
        self.model.end_round("A - B", 2)
        word = self.session.begin()

        assert self.model.current_round == 1
        assert self.model.current_score == 0
        assert self.session.current_word == word
        assert self.events == [NewWord(word)]

    def test_answer_in_time(self):
        """Test a full answer scores and moves to the next round."""
        self.session.begin()
        assert self.session.stop_timer(4.6) is RoundOutcome.AWAITING_ANSWER
        outcome = self.session.submit("Queen", "Radio Ga Ga")

        assert outcome is RoundOutcome.NEXT_ROUND
        assert self.model.song_answers == ("Queen - Radio Ga Ga",)
        assert self.model.total_answer_time == 4
        assert self.model.current_round == 2
        assert len(self.events) == 2

    def test_too_late(self):
        """Test stopping the timer after time is up charges the full time."""
        self.session.begin()
        assert self.session.stop_timer(10.5) is RoundOutcome.TIMED_OUT
        outcome = self.session.time_out()

        assert outcome is RoundOutcome.NEXT_ROUND
        assert self.model.current_score == 0
        assert self.model.total_answer_time == 10

    def test_blank_field_warns_first(self):
        """Test the first incomplete submit only warns."""
        self.session.begin()
        self.session.stop_timer(3)
        outcome = self.session.submit("Queen", "")

        assert outcome is RoundOutcome.FORFEIT_WARNING
        assert self.session.warning == FORFEIT_WARNING
        assert self.model.current_round == 1

    def test_blank_field_then_complete(self):
        """Test finishing the answer after the warning still scores."""
        self.session.begin()
        self.session.stop_timer(3)
        self.session.submit("Queen", "")
        outcome = self.session.submit("Queen", "Radio Ga Ga")

        assert outcome is RoundOutcome.NEXT_ROUND
        assert self.model.current_score == 1

    def test_blank_field_twice_forfeits(self):
        """Test a second incomplete submit forfeits the round."""
        self.session.begin()
        self.session.stop_timer(3)
        self.session.submit("", "")
        outcome = self.session.submit("", "")

        assert outcome is RoundOutcome.NEXT_ROUND
        assert self.model.current_score == 0
        assert self.model.total_answer_time == 3
        assert self.model.current_round == 2

    def test_warning_cleared_next_round(self):
        """Test forfeit attempts do not carry over into the next round."""
        self.session.begin()
        self.session.stop_timer(1)
        self.session.submit("", "")
        self.session.submit("", "")
        self.session.stop_timer(1)

        assert self.session.warning is None
        assert self.session.submit("", "") is RoundOutcome.FORFEIT_WARNING

    def test_late_answer_is_forfeited(self):
        """Test an answer typed after the timer ran out does not score."""
        self.session.begin()
        assert self.session.stop_timer(11) is RoundOutcome.TIMED_OUT
        outcome = self.session.submit("Queen", "Radio Ga Ga")

        assert outcome is RoundOutcome.NEXT_ROUND
        assert self.model.current_score == 0
        assert self.model.song_answers == ()
        assert self.model.total_answer_time == 10
        assert self.model.current_round == 2

    def test_no_rounds_after_game_over(self):
        """Test round actions after the last round leave the session history alone."""
        self.session.begin()
        for _ in range(3):
            self.session.time_out()
        assert self.model.games_played == 1
        game_over_count = self.events.count(GameOver())

        assert self.session.time_out() is RoundOutcome.GAME_OVER
        assert self.session.stop_timer(2) is RoundOutcome.GAME_OVER
        assert self.session.submit("Queen", "Radio Ga Ga") is RoundOutcome.GAME_OVER

        assert self.model.games_played == 1
        assert self.model.time_history == (30,)
        assert self.model.current_round == 4
        assert self.events.count(GameOver()) == game_over_count

    def test_submit_requires_stopped_timer(self):
        """Test submitting before the timer is stopped is a caller bug."""
        self.session.begin()
        with pytest.raises(RuntimeError):
            self.session.submit("Queen", "Radio Ga Ga")

    def test_full_game(self):
        """Test the last round ends the game without starting another."""
        self.session.begin()
        outcomes = []
        for _ in range(3):
            self.session.stop_timer(2)
            outcomes.append(self.session.submit("A", "B"))

        assert outcomes == [
            RoundOutcome.NEXT_ROUND,
            RoundOutcome.NEXT_ROUND,
            RoundOutcome.GAME_OVER,
        ]
        assert self.model.current_round == 4
        assert self.model.games_played == 1
        assert self.model.average_score == 3
        assert sum(isinstance(e, NewWord) for e in self.events) == 3
        assert self.events[-1] == GameOver()

    def test_new_game_after_game_over(self):
        """Test a new game starts at round 1 and keeps history."""
        self.session.begin()
        for _ in range(3):
            self.session.time_out()
        self.session.new_game()

        assert self.model.current_round == 1
        assert self.model.games_played == 1
        assert self.model.time_history == (30,)
        assert isinstance(self.events[-1], NewWord)

    def test_quit_needs_confirmation(self):
        """Test quitting asks once and then returns home."""
        self.session.begin()
        self.session.stop_timer(1)
        self.session.submit("A", "B")

        assert self.session.quit() is RoundOutcome.QUIT_WARNING
        assert self.session.warning == QUIT_WARNING
        assert self.model.current_score == 1

        assert self.session.quit() is RoundOutcome.RETURNED_HOME
        assert self.model.current_round == 1
        assert self.model.current_score == 0
        assert self.model.games_played == 0
        assert self.session.current_word is None

    def test_quit_confirmation_resets_each_round(self):
        """Test a single quit click in one round is forgotten in the next."""
        self.session.begin()
        self.session.quit()
        self.session.time_out()
        assert self.session.quit() is RoundOutcome.QUIT_WARNING
