#!/usr/bin/env python3
"""
Terminal front end for the cribbage quiz.
Deals a hand, reads guesses, and reports how close they were.
"""

import logging
from typing import Callable

from .config import GameConfig, build_parser
from .engine.game import GuessingGame
from .engine.guess import Correct, Incorrect
from .pretty import PrettyPrinter

HELP_TEXT = """
You've got a cribbage hand in front of you.  Score it!

You can just enter a number, or a bunch: "2 2 1" to guess 5.

If you want to say you know exactly the melds in your hand, great!  You can
enter them in compact notation, like "p3n" for "a Pair Royal and His Nobs".
You can put spaces between codes or not, it's up to you!  Here they are:

  n - his nobs
  f - fifteen
  s - a flush in the hand (but not the starter)
  S - a flush across all five cards
  r[3-5] - a run of 3, 4, or 5 cards; you need the number
  p[2-4] - a "pair" of 2, 3, or 4 cards; if no number, it's a pair

Type "quit" to stop.
"""

QUIT_WORDS = {"quit", "exit"}
DIVIDER = "┄" * 60


def play(game: GuessingGame, read: Callable[[str], str] = input,
         write: Callable[[str], None] = print) -> None:
    """Run the guessing loop until the player quits or input runs out."""
    game.prep_next_turn()
    show_hand = True

    while True:
        if show_hand:
            write(PrettyPrinter.hand_string(game.current_hand))
            show_hand = False

        try:
            guess = read("Your guess? ")
        except (EOFError, KeyboardInterrupt):
            break

        guess = guess.strip()

        # Empty string is just "oops, try again".
        if not guess:
            continue

        if guess.lower() in QUIT_WORDS:
            break

        if guess in ("?", "help"):
            write(HELP_TEXT)
            continue

        result = game.handle_guess(guess)

        if result is None:
            write("\n❓ I couldn't understand you, sorry!\n")
            continue

        if isinstance(result, Correct):
            write(f"\n⭐️ You got it! Your streak is now: {game.streak}\n")
        elif isinstance(result, Incorrect):
            write(f"\n❌ Nope!{' ' + result.brief if result.brief else ''}\n")
            if result.details:
                write(result.details)
        else:
            raise TypeError(f"Expected a GuessResult but got {result!r}")

        write(PrettyPrinter.score_string(game.current_hand.score_board))
        write("")
        write(DIVIDER)

        game.prep_next_turn()
        show_hand = True

    write("\nOkay, have fun, bye!")


def main(argv: list[str] = None) -> None:
    args = build_parser().parse_args(argv)
    config = GameConfig.from_args(args)

    logging.basicConfig(level=config.log_level,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    game = GuessingGame(deck=config.make_deck())

    if config.show_help:
        print(HELP_TEXT)

    play(game)

    if config.history_path:
        game.history.save(config.history_path)
        print(f"History saved to {config.history_path}")


if __name__ == "__main__":
    main()
