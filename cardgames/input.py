"""Sources of player decisions."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass

from cardgames.hand import Hand


class PlayerInput(ABC):
    """Decides the player's next action given their hand."""

    @abstractmethod
    def choose_action(self, hand: Hand) -> str:
        """Return the chosen action, e.g. "h" or "s"."""


class TerminalInput(PlayerInput):
    """Asks the player on the terminal."""

    PROMPT = "Do you want to [h]it or [s]tay? "

    def choose_action(self, hand: Hand) -> str:
        """Prompt on stdout and read a line from stdin.

        Raises EOFError when stdin is exhausted.
        """
        sys.stdout.write(self.PROMPT)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.strip().lower()


@dataclass
class FixedInput(PlayerInput):
    """Always answers with the same response."""

    response: str

    def choose_action(self, hand: Hand) -> str:
        return self.response