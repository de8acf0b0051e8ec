"""Command-line entry point: play a round of Blackjack in the terminal."""

from __future__ import annotations

import argparse
from typing import Sequence

from cardgames.blackjack import BlackjackGame
from cardgames.display import ConsoleDisplay
from cardgames.input import TerminalInput


def main(argv: Sequence[str] | None = None) -> int:
    """Play one round of Blackjack on the console."""
    parser = argparse.ArgumentParser(
        prog="cardgames", description="Play a round of Blackjack against the dealer."
    )
    parser.parse_args(argv)

    print("Welcome to Card Games")
    game = BlackjackGame(TerminalInput(), ConsoleDisplay())
    game.setup()
    game.play()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())