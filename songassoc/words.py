"""Prompt word loading and the shuffled word supply."""

import logging
import random
from pathlib import Path
from typing import Iterable, List, Optional, Union

import yaml

from songassoc.errors import WordSourceError

logger = logging.getLogger(__name__)

WordSource = Union[str, Path, Iterable[str]]


def _clean(lines: Iterable[str]) -> List[str]:
    words = []
    for line in lines:
        word = str(line).strip()
        if word:
            words.append(word)
    return words


def load_words(source: WordSource) -> List[str]:
    """Load prompt words from a file path or an iterable of lines.

    Plain files hold one word per line. YAML files (``.yaml``/``.yml``) hold a
    top-level ``words`` list. Blank lines are skipped.

    Raises:
        WordSourceError: if the source is missing, unreadable or has no words.
    """
    if not isinstance(source, (str, Path)):
        words = _clean(source)
        if not words:
            raise WordSourceError("<lines>", "no words found")
        return words

    path = Path(source)
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
                if not isinstance(data, dict):
                    raise WordSourceError(str(path), "expected a mapping with a 'words' list")
                listed = data.get("words")
                if not isinstance(listed, list):
                    raise WordSourceError(str(path), "expected a 'words' list")
                words = _clean(listed)
            else:
                words = _clean(f)
    except FileNotFoundError as e:
        logger.error(f"Words file not found: {path}")
        raise WordSourceError(str(path), "file not found") from e
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.error(f"Error loading words: {e}")
        raise WordSourceError(str(path), str(e)) from e

    if not words:
        raise WordSourceError(str(path), "no words found")

    logger.debug(f"Loaded {len(words)} words from {path}")
    return words


class WordSupply:
    """Shuffled, exhaustible sequence of prompt words.

    Words are consumed from the front. When the pool runs dry the full word
    set is reloaded from the source and shuffled again.
    """

    def __init__(self, source: WordSource, rng: Optional[random.Random] = None):
        # Materialize iterables so the pool can be reloaded
        if not isinstance(source, (str, Path)):
            source = list(source)
        self.source = source
        self.rng = rng or random.Random()
        self.refills = 0
        self._words: List[str] = []
        self.refill_if_empty()

    def __len__(self) -> int:
        return len(self._words)

    def refill_if_empty(self) -> None:
        """Reload and reshuffle the full word set if the pool is empty."""
        if self._words:
            return
        words = load_words(self.source)
        self.rng.shuffle(words)
        self._words = words
        self.refills += 1
        logger.info(f"Word pool filled with {len(words)} words (fill #{self.refills})")

    def draw(self) -> str:
        """Remove and return the next word. The pool must not be empty."""
        return self._words.pop(0)

    def peek(self) -> List[str]:
        """Remaining words in draw order."""
        return list(self._words)
