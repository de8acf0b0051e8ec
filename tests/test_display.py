import pytest

from cardgames.cards import Card, Suit, Value
from cardgames.display import BlackjackDisplay, ConsoleDisplay
from cardgames.hand import Hand
from cardgames.outcome import GameResult, Turn


@pytest.mark.parametrize(
    "turn, heading",
    [
        (Turn.PLAYER, "=== Your Turn ==="),
        (Turn.DEALER, "=== Dealer's Turn ==="),
        (Turn.DONE, "=== Game Over ==="),
    ],
)
def test_show_turn(capsys, turn, heading):
    ConsoleDisplay().show_turn(turn)
    assert capsys.readouterr().out == f"\n{heading}\n"


def test_show_hand(capsys):
    hand = Hand()
    hand.add(Card(Suit.HEARTS, Value.TEN))
    hand.add(Card(Suit.CLUBS, Value.ACE))
    ConsoleDisplay().show_hand("You", hand)
    assert capsys.readouterr().out == f"You hand: {hand}\n"


def test_show_score(capsys):
    ConsoleDisplay().show_score("Dealer", 17)
    assert capsys.readouterr().out == "Dealer score: 17\n"


def test_show_card_drawn(capsys):
    card = Card(Suit.SPADES, Value.KING)
    ConsoleDisplay().show_card_drawn(card)
    assert capsys.readouterr().out == f"Drew: {card}\n"


def test_show_result(capsys):
    ConsoleDisplay().show_result(GameResult.PLAYER_WIN)
    assert capsys.readouterr().out == "🎉 You win!\n"


def test_show_message(capsys):
    ConsoleDisplay().show_message("Dealer hits.")
    assert capsys.readouterr().out == "Dealer hits.\n"


def test_display_is_abstract():
    with pytest.raises(TypeError):
        BlackjackDisplay()