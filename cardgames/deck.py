"""A deck of cards that can be shuffled, drawn from and dealt."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Iterable, Iterator

from cardgames.cards import Card

if TYPE_CHECKING:
    from cardgames.player import Player


class DeckEmptyError(Exception):
    """Raised when the deck runs out of cards while dealing."""


class Deck:
    """A stack of cards; the last card is the top of the deck."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    def remaining_cards(self) -> int:
        return len(self._cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the deck in place, optionally with a given random source."""
        (rng or random).shuffle(self._cards)

    def deal(self, num_to_deal: int, players: Iterable[Player]) -> None:
        """Deal cards round by round, one to each player per round.

        Raises DeckEmptyError if the deck runs out.
        """
        players = list(players)
        for _ in range(num_to_deal):
            for player in players:
                if not self._cards:
                    raise DeckEmptyError("Deck is out of cards!")
                player.hand.add(self._cards.pop())

    def draw(self) -> Card | None:
        """Take the top card, or return None if the deck is empty."""
        return self._cards.pop() if self._cards else None

    def peek(self) -> Card | None:
        """Return the top card without removing it, or None if empty."""
        return self._cards[-1] if self._cards else None

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def is_empty(self) -> bool:
        return not self._cards

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __str__(self) -> str:
        return "".join(f"|{card}|" for card in self._cards)

    def __repr__(self) -> str:
        return f"Deck({self._cards!r})"