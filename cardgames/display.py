"""Presentation of a Blackjack round."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cardgames.cards import Card
from cardgames.hand import Hand
from cardgames.outcome import GameResult, Turn


class BlackjackDisplay(ABC):
    """Receives everything a Blackjack round wants to show."""

    @abstractmethod
    def show_turn(self, turn: Turn) -> None: ...

    @abstractmethod
    def show_hand(self, label: str, hand: Hand) -> None: ...

    @abstractmethod
    def show_score(self, label: str, score: int) -> None: ...

    @abstractmethod
    def show_card_drawn(self, card: Card) -> None: ...

    @abstractmethod
    def show_result(self, result: GameResult) -> None: ...

    @abstractmethod
    def show_message(self, message: str) -> None: ...


_TURN_HEADINGS = {
    Turn.PLAYER: "\n=== Your Turn ===",
    Turn.DEALER: "\n=== Dealer's Turn ===",
    Turn.DONE: "\n=== Game Over ===",
}


class ConsoleDisplay(BlackjackDisplay):
    """Prints the round to standard output."""

    def show_turn(self, turn: Turn) -> None:
        print(_TURN_HEADINGS[turn])

    def show_hand(self, label: str, hand: Hand) -> None:
        print(f"{label} hand: {hand}")

    def show_score(self, label: str, score: int) -> None:
        print(f"{label} score: {score}")

    def show_card_drawn(self, card: Card) -> None:
        print(f"Drew: {card}")

    def show_result(self, result: GameResult) -> None:
        print(result)

    def show_message(self, message: str) -> None:
        print(message)