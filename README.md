# cardgames

Playing cards, hands, decks and a single round of Blackjack that you play in
the terminal.

## Install

```
pip install .
```

## Play

```
cardgames
```

The deck is a shuffled standard 52-card deck. You and the dealer each get two
cards, and you see the dealer's first card. Type `h` (or `hit`) to draw another
card, or `s` (or `stay`) to stand. Anything else is rejected and you are asked
again. A two-card 21 wins at once, and going over 21 loses. Once you stay, the
dealer draws until reaching at least 17. The higher score that has not gone over
21 wins, and equal scores are a push. An ace counts as 11, or as 1 when 11 would
take the hand over 21. Face cards count as 10.

The command takes no options other than `--help`. It plays one round and exits.
If standard input ends partway through the round, the command stops with
`EOFError`.

## Use as a library

```python
from cardgames.cards import Card, Suit, Value
from cardgames.deck_builder import DeckBuilder
from cardgames.hand import Hand
from cardgames.rules import BlackjackRules

deck = DeckBuilder().standard52().with_jokers().repeat(2).build()
print(deck.remaining_cards())   # 108
deck.shuffle()

hand = Hand()
hand.add(Card(Suit.SPADES, Value.ACE))
hand.add(Card(Suit.HEARTS, Value.KING))
print(hand)                                       # |Ace of ♠||King of ♥|
print(BlackjackRules.hand_score(hand.cards()))    # 21
print(BlackjackRules.is_blackjack(hand.cards()))  # True
```

`DeckBuilder` is immutable, so each step returns a new builder. You can reuse
one builder to build fresh decks. `with_jokers()` adds two jokers for each
repetition. `Deck.shuffle` takes an optional `random.Random`, which gives you
reproducible shuffles. `Deck.draw` and `Deck.peek` return `None` on an empty
deck. The top of the deck is the last card added.

Dealing to players:

```python
from cardgames.player import Player

you = Player("You")
dealer = Player.dealer_player()
deck.deal(2, [you, dealer])
```

`Deck.deal` deals one card to each player per round. It raises `DeckEmptyError`
from `cardgames.deck` if the deck runs out partway through.

You can drive a game with any `PlayerInput` and show it with any
`BlackjackDisplay`. `FixedInput` always gives the same answer, which suits
scripted runs. `BlackjackGame` also accepts a prepared `deck`, which lets you
stack the cards. Cards are drawn from the end of the deck.

```python
from cardgames.blackjack import BlackjackGame
from cardgames.display import ConsoleDisplay
from cardgames.input import FixedInput

game = BlackjackGame(FixedInput("s"), ConsoleDisplay())
game.setup()
game.play()
print(game.winner())   # e.g. 🎉 You win!
```

`determine_result(p_score, d_score)` in `cardgames.outcome` compares two final
scores and returns a `GameResult`. A player who has gone over 21 loses even if
the dealer has too.

## Limits

Blackjack is the only game. A game is a single round with one player against
the dealer. There is no betting, splitting, doubling down or insurance, and the
package does not keep scores or state between rounds.

## Tests

```
pip install .[test]
pytest
```