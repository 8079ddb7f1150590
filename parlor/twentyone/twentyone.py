"""
Console twenty-one against a fixed-policy dealer.

Before a session the player may move the bust limit away from 21, in which
case they also pick the dealer limit. The limits hold for the whole session.
"""

import logging
import random
import sys
from typing import List, Optional

from parlor.common.cli import run_program
from parlor.common.deck import Deck
from parlor.common.io_interface import IOInterface
from parlor.common.match import (
    GameType,
    MatchTally,
    Outcome,
    choose_game_type,
    say_goodbye,
    show_game_winner,
    show_match_result,
    show_single_game_result,
)
from parlor.twentyone.hand import TwentyOneHand
from parlor.twentyone.rules import GameOptions
from parlor.twentyone.turns import RoundResult, play_round

logger = logging.getLogger(__name__)

WELCOME = "twenty one"
OPPONENT = "Dealer"

MODIFY_LIMIT = (
    "Please enter 'y/yes' or 'n/no' to indicate whether you wish to set a "
    "limit other than 21.\n"
)
SET_LIMIT = "Please enter a positive integer for the new limit.\n"
SET_DEALER_LIMIT = (
    "Please enter a new dealer limit that's less than the bust limit "
    "(otherwise it's not fair).\n"
)
HIT_OR_STAY = "Do you want another card? ('y/yes' or 'n/no')\n"


class TwentyOneGame:
    """
    One twenty-one session bound to an IO interface.

    :param io_interface: Where prompts and output go
    :param rng: Random source for dealing
    """

    def __init__(self, io_interface: IOInterface, rng: Optional[random.Random] = None):
        self.io_interface = io_interface
        self.rng = rng or random.Random()
        self.options = GameOptions()
        self.game_type = GameType.SINGLE

    def set_up(self) -> None:
        """Reset to default limits, then ask for the game type and any new limits."""
        self.io_interface.clear()
        self.io_interface.banner(WELCOME)
        self.options = GameOptions()
        self.game_type = choose_game_type(self.io_interface)
        if self.io_interface.ask_yes_no(MODIFY_LIMIT):
            self.options = self.ask_for_limits()
        logger.debug(
            "New %s session with %s", self.game_type.name, self.options.to_dict()
        )

    def ask_for_limits(self) -> GameOptions:
        bust_limit = self.io_interface.check_numeric_response(
            SET_LIMIT, minimum=2, retry=SET_LIMIT.upper()
        )
        dealer_limit = self.io_interface.check_numeric_response(
            SET_DEALER_LIMIT,
            minimum=1,
            maximum=bust_limit - 1,
            retry=SET_LIMIT.upper(),
        )
        return GameOptions(bust_limit=bust_limit, dealer_limit=dealer_limit)

    def show_cards_and_total(self, hand: TwentyOneHand, is_player: bool) -> None:
        if is_player:
            intro, owner = "You have the following cards: ", "Your"
        else:
            intro, owner = "Dealer has the following cards: ", "Dealer's"
        self.io_interface.output(intro)
        self.io_interface.output(hand.describe())
        self.io_interface.output(
            f"{owner} total is {hand.value(self.options.bust_limit)}.\n"
        )

    def show_opening(self, player: TwentyOneHand, dealer: TwentyOneHand) -> None:
        self.io_interface.clear()
        self.show_cards_and_total(player, is_player=True)
        self.io_interface.output(f"Dealer is showing {dealer.cards[1].label}")

    def wants_hit(self, hand: TwentyOneHand) -> bool:
        return self.io_interface.ask_yes_no(HIT_OR_STAY)

    def play_single_game(self) -> RoundResult:
        result = play_round(
            self.options,
            self.wants_hit,
            deck=Deck(),
            on_hit=lambda hand: self.show_cards_and_total(hand, is_player=True),
            on_deal=self.show_opening,
            rng=self.rng,
        )
        logger.debug(
            "Round over: %s (player %s, dealer %s)",
            result.outcome.name,
            result.player_score,
            result.dealer_score,
        )
        return result

    def report_bust(self, result: RoundResult) -> None:
        loser = "Dealer" if result.outcome == Outcome.PLAYER else "Player"
        self.io_interface.output(f"{loser} busted.")

    def show_final_hands(self, result: RoundResult) -> None:
        self.show_cards_and_total(result.player, is_player=True)
        self.show_cards_and_total(result.dealer, is_player=False)

    def declare_winner(self, result: RoundResult) -> None:
        if result.busted:
            self.report_bust(result)
        else:
            self.show_final_hands(result)
        show_single_game_result(self.io_interface, result.outcome)

    def play_best_of_five(self) -> Outcome:
        """Play until five rounds have been decided; ties don't count."""
        tally = MatchTally()
        while not tally.is_decided:
            result = self.play_single_game()
            self.io_interface.clear()
            if result.busted:
                self.report_bust(result)
            else:
                self.show_final_hands(result)
            show_game_winner(self.io_interface, result.outcome, OPPONENT)
            tally = tally.record(result.outcome)
            self.io_interface.output(tally.describe(OPPONENT))
            if not tally.is_decided:
                self.io_interface.pause()
        return tally.leader

    def play(self) -> None:
        self.set_up()
        if self.game_type == GameType.SINGLE:
            result = self.play_single_game()
            self.io_interface.clear()
            self.declare_winner(result)
        else:
            show_match_result(self.io_interface, self.play_best_of_five())


def play_twenty_one(
    io_interface: IOInterface, rng: Optional[random.Random] = None
) -> None:
    game = TwentyOneGame(io_interface, rng)
    while True:
        game.play()
        if not io_interface.ask_play_again():
            break
    say_goodbye(io_interface)


def main(argv: Optional[List[str]] = None) -> int:
    return run_program("Play twenty-one against the dealer.", play_twenty_one, argv)


if __name__ == "__main__":
    sys.exit(main())
