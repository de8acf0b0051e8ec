"""A single round of Blackjack between one player and the dealer."""

from __future__ import annotations

from dataclasses import dataclass

from cardgames.deck import Deck
from cardgames.deck_builder import DeckBuilder
from cardgames.display import BlackjackDisplay
from cardgames.game import Game
from cardgames.input import PlayerInput
from cardgames.outcome import GameResult, Turn, determine_result
from cardgames.player import Player
from cardgames.rules import BlackjackRules

DEALER_STANDS_AT = 17


@dataclass
class BlackjackPlayers:
    """The two participants of a round."""

    player: Player
    dealer: Player


class BlackjackGame(Game):
    """One round of Blackjack driven by an input source and a display."""

    def __init__(
        self,
        player_input: PlayerInput,
        display: BlackjackDisplay,
        deck: Deck | None = None,
    ) -> None:
        if deck is None:
            deck = DeckBuilder().standard52().build()
            deck.shuffle()
        self.player_input = player_input
        self.display = display
        self.deck = deck
        self.players = BlackjackPlayers(Player("You"), Player.dealer_player())
        self.turn = Turn.PLAYER
        self.result = GameResult.PENDING
        self._finished = False

    def setup(self) -> None:
        """Deal two cards each. Raises DeckEmptyError if the deck is short."""
        self.deck.deal(2, [self.players.player, self.players.dealer])

    def play(self) -> None:
        """Play turns until the round is over."""
        while not self.is_finished():
            if self.turn is Turn.PLAYER:
                self._handle_player_turn()
            elif self.turn is Turn.DEALER:
                self._handle_dealer_turn()
            else:
                self._end_game()

    def is_finished(self) -> bool:
        return self._finished

    def winner(self) -> GameResult:
        return self.result

    def _finish_turn(self, result: GameResult) -> None:
        self.result = result
        self.turn = Turn.DONE

    def _handle_player_turn(self) -> None:
        player = self.players.player
        visible_card = self.players.dealer.hand.cards()[0]

        self.display.show_turn(self.turn)
        self.display.show_message(f"Dealer is showing: |{visible_card}|")

        while True:
            self.display.show_hand("You", player.hand)
            self.display.show_score("You", BlackjackRules.hand_score(player.hand))

            if BlackjackRules.is_blackjack(player.hand):
                self._finish_turn(GameResult.PLAYER_WIN)
                return
            if BlackjackRules.is_bust(player.hand):
                self._finish_turn(GameResult.DEALER_WIN)
                return

            choice = self.player_input.choose_action(player.hand)
            if choice in ("hit", "h"):
                card = self.deck.draw()
                if card is None:
                    self.display.show_message("Deck is empty.")
                    self._finish_turn(GameResult.DEALER_WIN)
                    return
                self.display.show_card_drawn(card)
                player.hand.add(card)
            elif choice in ("stay", "s"):
                self.turn = Turn.DEALER
                return
            else:
                self.display.show_message("Invalid input. Please type 'h' or 's'.")

    def _handle_dealer_turn(self) -> None:
        dealer = self.players.dealer

        self.display.show_turn(self.turn)
        self.display.show_hand("Dealer", dealer.hand)

        score = BlackjackRules.hand_score(dealer.hand)
        self.display.show_score("Dealer", score)

        while score < DEALER_STANDS_AT:
            self.display.show_message("Dealer hits.")
            card = self.deck.draw()
            if card is None:
                self.display.show_message("Deck is empty. Dealer cannot draw.")
                break
            self.display.show_card_drawn(card)
            dealer.hand.add(card)
            score = BlackjackRules.hand_score(dealer.hand)
            self.display.show_score("Dealer", score)

        if DEALER_STANDS_AT <= score <= 21:
            self.display.show_message("Dealer stays.")
        elif score > 21:
            self.display.show_message("Dealer busted!")

        self.display.show_hand("Dealer", dealer.hand)
        self.display.show_score("Dealer", score)
        self.turn = Turn.DONE

    def _end_game(self) -> None:
        player = self.players.player
        dealer = self.players.dealer

        p_score = BlackjackRules.hand_score(player.hand)
        d_score = BlackjackRules.hand_score(dealer.hand)

        self.display.show_message(f"Your final hand: {player.hand} (Score: {p_score})")
        self.display.show_message(f"Dealer final hand: {dealer.hand} (Score: {d_score})")

        result = determine_result(p_score, d_score)
        self.display.show_result(result)
        self.result = result
        self._finished = True