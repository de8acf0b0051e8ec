"""Playing cards: suits, values and the cards built from them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class Suit(Enum):
    """The suit of a playing card, including a special Joker suit."""

    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"
    JOKER = "joker"

    def __str__(self) -> str:
        return _SUIT_SYMBOLS[self]

    @staticmethod
    def standard_suits() -> Iterator[Suit]:
        """Iterate over the four standard suits, leaving out the Joker."""
        return (suit for suit in Suit if suit is not Suit.JOKER)

    def is_red(self) -> bool:
        """True for Hearts and Diamonds."""
        return self in (Suit.DIAMONDS, Suit.HEARTS)

    def is_black(self) -> bool:
        """True for Clubs and Spades."""
        return self in (Suit.CLUBS, Suit.SPADES)


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
    Suit.JOKER: "Joker",
}


class Value(Enum):
    """The face value of a playing card; Joker has value 0."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    JOKER = 0

    def __str__(self) -> str:
        return self.name.capitalize()

    @staticmethod
    def standard_values() -> Iterator[Value]:
        """Iterate over Ace through King, leaving out the Joker."""
        return (value for value in Value if value is not Value.JOKER)

    def is_face_card(self) -> bool:
        """True for Jack, Queen and King."""
        return self in (Value.JACK, Value.QUEEN, Value.KING)

    def is_numeric(self) -> bool:
        """True for Two through Ten."""
        return 2 <= self.value <= 10

    def is_ace(self) -> bool:
        """True for the Ace."""
        return self is Value.ACE

    def rank(self) -> int | None:
        """The numerical rank (Ace = 1, King = 13), or None for the Joker."""
        if self is Value.JOKER:
            return None
        return self.value


@dataclass(frozen=True)
class Card:
    """A playing card made of a suit and a value."""

    suit: Suit
    value: Value

    @classmethod
    def joker(cls) -> Card:
        """Return a Joker card."""
        return cls(Suit.JOKER, Value.JOKER)

    def is_joker(self) -> bool:
        return self.value is Value.JOKER

    def is_face_card(self) -> bool:
        return self.value.is_face_card()

    def is_red(self) -> bool:
        return self.suit.is_red()

    def is_black(self) -> bool:
        return self.suit.is_black()

    def rank(self) -> int | None:
        return self.value.rank()

    def __str__(self) -> str:
        if self.is_joker():
            return "Joker"
        return f"{self.value} of {self.suit}"