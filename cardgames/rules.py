"""Scoring and win-condition rules for Blackjack."""

from __future__ import annotations

from typing import Iterable

from cardgames.cards import Card, Value
from cardgames.game import GameRules

BLACKJACK = 21

_CARD_VALUES = {
    Value.ACE: 11,
    Value.TWO: 2,
    Value.THREE: 3,
    Value.FOUR: 4,
    Value.FIVE: 5,
    Value.SIX: 6,
    Value.SEVEN: 7,
    Value.EIGHT: 8,
    Value.NINE: 9,
    Value.TEN: 10,
    Value.JACK: 10,
    Value.QUEEN: 10,
    Value.KING: 10,
    Value.JOKER: 0,
}


class BlackjackRules(GameRules):
    """Blackjack scoring: aces count 11 or 1, face cards 10, jokers 0."""

    @staticmethod
    def card_value(card: Card) -> int:
        """The value of one card, counting an ace as 11."""
        return _CARD_VALUES[card.value]

    @staticmethod
    def hand_score(hand: Iterable[Card]) -> int:
        """Score a hand, counting aces as 1 where 11 would bust it."""
        cards = tuple(hand)
        score = sum(BlackjackRules.card_value(card) for card in cards)
        aces = sum(1 for card in cards if card.value is Value.ACE)
        while score > BLACKJACK and aces > 0:
            score -= 10
            aces -= 1
        return score

    @staticmethod
    def is_bust(hand: Iterable[Card]) -> bool:
        """True if the hand scores over 21."""
        return BlackjackRules.hand_score(hand) > BLACKJACK

    @staticmethod
    def is_blackjack(hand: Iterable[Card]) -> bool:
        """True for a natural: exactly two cards scoring 21."""
        cards = tuple(hand)
        return len(cards) == 2 and BlackjackRules.hand_score(cards) == BLACKJACK