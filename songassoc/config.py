"""Game configuration."""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from songassoc.errors import ConfigError

logger = logging.getLogger(__name__)

ROUNDS_PER_GAME = 15
TIME_PER_WORD = 10
WORDS_FILE = "data/words.txt"


@dataclass(frozen=True)
class GameConfig:
    """Settings for a Song Association game.

    Attributes:
        rounds_per_game: Rounds played in each game
        time_per_word: Seconds the player has to think of a song each round
        words_file: Line-oriented (or YAML) file of prompt words
        seed: Optional random seed for reproducible word order
    """

    rounds_per_game: int = ROUNDS_PER_GAME
    time_per_word: int = TIME_PER_WORD
    words_file: str = WORDS_FILE
    seed: Optional[int] = None

    def __post_init__(self):
        if self.rounds_per_game < 1:
            raise ConfigError(f"rounds_per_game must be at least 1, got {self.rounds_per_game}")
        if self.time_per_word < 1:
            raise ConfigError(f"time_per_word must be at least 1, got {self.time_per_word}")

    def with_overrides(self, **overrides: Any) -> "GameConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def load_config(path: str) -> GameConfig:
    """Load a GameConfig from a YAML mapping."""
    config_path = Path(path)
    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")

    # null values fall back to the defaults
    values: Dict[str, Any] = {k: v for k, v in data.items() if v is not None}
    for key in ("rounds_per_game", "time_per_word", "seed"):
        # bool is an int subclass, so YAML true/false would pass as 1/0
        if key in values and (isinstance(values[key], bool) or not isinstance(values[key], int)):
            raise ConfigError(f"{key} must be an integer, got {values[key]!r}")
    if "words_file" in values:
        values["words_file"] = str(values["words_file"])

    logger.info(f"Loaded config from {config_path}")
    return GameConfig(**values)
