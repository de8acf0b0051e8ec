"""Players taking part in a card game."""

from __future__ import annotations

from dataclasses import dataclass, field

from cardgames.hand import Hand


@dataclass
class Player:
    """A named participant holding a hand of cards."""

    name: str
    hand: Hand = field(default_factory=Hand)
    is_dealer: bool = False

    @classmethod
    def dealer_player(cls) -> Player:
        """A computer-controlled dealer named "CPU"."""
        return cls("CPU", is_dealer=True)

    def reset_hand(self) -> None:
        """Discard every card in the player's hand."""
        self.hand.clear()