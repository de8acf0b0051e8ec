"""A hand of playing cards held by a player."""

from __future__ import annotations

from typing import Iterator

from cardgames.cards import Card


class Hand:
    """An ordered collection of cards held by a player."""

    def __init__(self) -> None:
        self._cards: list[Card] = []

    def add(self, card: Card) -> None:
        """Add a card to the hand."""
        self._cards.append(card)

    def clear(self) -> None:
        """Remove every card from the hand."""
        self._cards.clear()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def cards(self) -> tuple[Card, ...]:
        """The cards currently in the hand, in the order they were added."""
        return tuple(self._cards)

    def __str__(self) -> str:
        return "".join(f"|{card}|" for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand({self._cards!r})"