"""Turns and results of a Blackjack round."""

from __future__ import annotations

from enum import Enum, auto


class Turn(Enum):
    """Whose turn it is in a Blackjack round."""

    PLAYER = auto()
    DEALER = auto()
    DONE = auto()


class GameResult(Enum):
    """The result of a Blackjack round."""

    PENDING = "⏳ Game in progress..."
    PLAYER_WIN = "🎉 You win!"
    DEALER_WIN = "💥 Dealer wins!"
    PUSH = "🤝 Push!"

    def __str__(self) -> str:
        return self.value


def determine_result(p_score: int, d_score: int) -> GameResult:
    """Compare final scores; a player bust loses even if the dealer busts."""
    if p_score > 21:
        return GameResult.DEALER_WIN
    if d_score > 21:
        return GameResult.PLAYER_WIN
    if p_score > d_score:
        return GameResult.PLAYER_WIN
    if p_score < d_score:
        return GameResult.DEALER_WIN
    return GameResult.PUSH