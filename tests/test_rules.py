import pytest

from cardgames.cards import Card, Suit, Value
from cardgames.game import GameRules
from cardgames.hand import Hand
from cardgames.rules import BlackjackRules


def make_hand(*cards):
    hand = Hand()
    for card in cards:
        hand.add(card)
    return hand


def test_blackjack_scoring_with_ace_adjusts_correctly():
    hand = make_hand(
        Card(Suit.DIAMONDS, Value.ACE),
        Card(Suit.SPADES, Value.NINE),
        Card(Suit.HEARTS, Value.NINE),
    )
    assert BlackjackRules.hand_score(hand.cards()) == 19


def test_blackjack_detects_blackjack_hand():
    hand = make_hand(Card(Suit.SPADES, Value.ACE), Card(Suit.HEARTS, Value.KING))
    assert BlackjackRules.is_blackjack(hand.cards())


def test_hand_with_multiple_aces_adjusts_correctly():
    hand = make_hand(
        Card(Suit.HEARTS, Value.ACE),
        Card(Suit.SPADES, Value.ACE),
        Card(Suit.CLUBS, Value.NINE),
    )
    assert BlackjackRules.hand_score(hand.cards()) == 21


def test_hand_busts_without_aces():
    hand = make_hand(
        Card(Suit.SPADES, Value.TEN),
        Card(Suit.HEARTS, Value.KING),
        Card(Suit.DIAMONDS, Value.FIVE),
    )
    assert BlackjackRules.is_bust(hand.cards())


def test_ace_prevents_bust():
    hand = make_hand(
        Card(Suit.SPADES, Value.TEN),
        Card(Suit.HEARTS, Value.SIX),
        Card(Suit.DIAMONDS, Value.ACE),
    )
    assert BlackjackRules.hand_score(hand.cards()) == 17
    assert not BlackjackRules.is_bust(hand.cards())


def test_hand_with_three_cards_equals_21():
    hand = make_hand(
        Card(Suit.HEARTS, Value.SEVEN),
        Card(Suit.CLUBS, Value.SEVEN),
        Card(Suit.SPADES, Value.SEVEN),
    )
    assert BlackjackRules.hand_score(hand.cards()) == 21
    assert not BlackjackRules.is_blackjack(hand.cards())


def test_two_cards_can_bust_and_not_be_blackjack():
    hand = make_hand(Card(Suit.HEARTS, Value.JACK), Card(Suit.SPADES, Value.QUEEN))
    assert BlackjackRules.hand_score(hand.cards()) == 20
    assert not BlackjackRules.is_blackjack(hand.cards())
    assert not BlackjackRules.is_bust(hand.cards())


def test_docs_example_three_tens_and_three_is_bust():
    hand = [
        Card(Suit.SPADES, Value.TEN),
        Card(Suit.HEARTS, Value.TEN),
        Card(Suit.DIAMONDS, Value.THREE),
    ]
    assert BlackjackRules.is_bust(hand)


@pytest.mark.parametrize(
    "value, expected",
    [
        (Value.QUEEN, 10),
        (Value.ACE, 11),
        (Value.TWO, 2),
        (Value.NINE, 9),
        (Value.TEN, 10),
        (Value.JACK, 10),
        (Value.KING, 10),
        (Value.JOKER, 0),
    ],
)
def test_card_value(value, expected):
    assert BlackjackRules.card_value(Card(Suit.HEARTS, value)) == expected


def test_hand_score_accepts_hand_object():
    hand = make_hand(Card(Suit.HEARTS, Value.ACE), Card(Suit.CLUBS, Value.NINE))
    assert BlackjackRules.hand_score(hand) == BlackjackRules.hand_score(hand.cards())


def test_empty_hand_scores_zero():
    assert BlackjackRules.hand_score([]) == 0
    assert not BlackjackRules.is_blackjack([])


def test_game_rules_is_abstract():
    with pytest.raises(TypeError):
        GameRules()