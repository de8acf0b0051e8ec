"""Playing cards, decks, hands, players and a console round of Blackjack."""

__version__ = "0.1.0"