"""A fluent builder for standard and custom decks."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cardgames.cards import Card, Suit, Value
from cardgames.deck import Deck


@dataclass(frozen=True)
class DeckBuilder:
    """Configures a deck; each step returns a new builder."""

    base_cards: tuple[Card, ...] = ()
    repeat_count: int = 0
    include_jokers: bool = False

    def standard52(self) -> DeckBuilder:
        """Use the 52 standard cards as the base."""
        cards = tuple(
            Card(suit, value)
            for suit in Suit.standard_suits()
            for value in Value.standard_values()
        )
        return replace(self, base_cards=cards)

    def with_jokers(self) -> DeckBuilder:
        """Add two jokers for each repetition of the base cards."""
        return replace(self, include_jokers=True)

    def repeat(self, count: int) -> DeckBuilder:
        """Repeat the base cards the given number of times (at least once)."""
        return replace(self, repeat_count=count)

    def build(self) -> Deck:
        """Build the configured deck."""
        cards: list[Card] = []
        for _ in range(max(self.repeat_count, 1)):
            cards.extend(self.base_cards)
            if self.include_jokers:
                cards.extend((Card.joker(), Card.joker()))
        return Deck(cards)