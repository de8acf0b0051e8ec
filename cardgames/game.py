"""Abstract interfaces shared by card games."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any

from cardgames.cards import Card


class Game(ABC):
    """A playable card game with a setup phase, a play loop and an outcome."""

    @abstractmethod
    def setup(self) -> None:
        """Prepare the game, e.g. deal the opening cards."""

    @abstractmethod
    def play(self) -> None:
        """Run the game until it is finished."""

    @abstractmethod
    def is_finished(self) -> bool:
        """True once the game has ended."""

    @abstractmethod
    def winner(self) -> Any:
        """The outcome of the game."""


class GameState(Enum):
    """The lifecycle stage of a game."""

    WAITING = auto()
    IN_PROGRESS = auto()
    COMPLETE = auto()


class GameRules(ABC):
    """Game-specific rules for valuing cards."""

    @staticmethod
    @abstractmethod
    def card_value(card: Card) -> int:
        """The value a single card is worth under these rules."""