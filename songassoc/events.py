"""Notifications sent by the game model to its observers."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Union

if TYPE_CHECKING:
    from songassoc.model import SongAssociationModel

WORD_MARKER = "word:"


@dataclass(frozen=True)
class NewWord:
    """A round has started with this prompt word."""

    word: str

    @property
    def marker(self) -> str:
        """Legacy ``word:<word>`` string form."""
        return f"{WORD_MARKER}{self.word}"


@dataclass(frozen=True)
class GameOver:
    """The last round of the game has ended."""


GameEvent = Union[NewWord, GameOver]


class Observer(Protocol):
    """Anything that wants to hear about model changes."""

    def __call__(self, model: "SongAssociationModel", event: GameEvent) -> None:
        ...
