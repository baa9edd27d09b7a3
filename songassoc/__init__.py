"""Song Association: a single-player word-to-lyric party game.

Each round shows a word; the player recalls a song whose lyrics contain it
and, if they manage in time, enters the artist and title.
- 15 rounds per game (configurable)
- 1 point per song entered before time runs out
- Session metrics: average score and average total answer time
"""

__version__ = "0.1.0"

from songassoc.config import GameConfig, load_config
from songassoc.errors import ConfigError, SongAssociationError, WordSourceError
from songassoc.events import GameEvent, GameOver, NewWord, Observer
from songassoc.model import SongAssociationModel
from songassoc.session import GameSession, RoundOutcome
from songassoc.words import WordSupply, load_words

__all__ = [
    "ConfigError",
    "GameConfig",
    "GameEvent",
    "GameOver",
    "GameSession",
    "NewWord",
    "Observer",
    "RoundOutcome",
    "SongAssociationError",
    "SongAssociationModel",
    "WordSourceError",
    "WordSupply",
    "load_config",
    "load_words",
]
