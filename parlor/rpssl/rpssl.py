"""
Console rock-paper-scissors-Spock-lizard against a computer that picks at
random.
"""

import logging
import random
import sys
from typing import List, Optional, Tuple

from parlor.common.cli import run_program
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
from parlor.rpssl.rules import Weapon, get_winner, random_weapon

logger = logging.getLogger(__name__)

WELCOME = "rock paper scissors\nspock lizard"
OPPONENT = "Computer"

WEAPON_MENU = (
    "Choose your weapon!\n"
    "1)rock\n"
    "2)paper\n"
    "3)scissors\n"
    "4)spock\n"
    "5)lizard\n"
)

Throw = Tuple[Weapon, Weapon, Outcome]


class RPSSLGame:
    """
    One rock-paper-scissors-Spock-lizard session bound to an IO interface.
    """

    def __init__(self, io_interface: IOInterface, rng: Optional[random.Random] = None):
        self.io_interface = io_interface
        self.rng = rng or random.Random()

    def play_one(self) -> Throw:
        """Ask for the player's weapon, draw the computer's, and score them."""
        player = Weapon(self.io_interface.choose(WEAPON_MENU, [w.value for w in Weapon]))
        computer = random_weapon(self.rng)
        outcome = get_winner(player, computer)
        logger.debug("%s vs %s: %s", player.label, computer.label, outcome.name)
        return player, computer, outcome

    def display_weapon_choices(self, player: Weapon, computer: Weapon) -> None:
        self.io_interface.clear()
        self.io_interface.output(f"You chose {player}. Computer chose {computer}.\n")

    def play_best_of_five(self) -> Outcome:
        tally = MatchTally()
        while not tally.is_decided:
            player, computer, outcome = self.play_one()
            self.display_weapon_choices(player, computer)
            show_game_winner(self.io_interface, outcome, OPPONENT)
            tally = tally.record(outcome)
            self.io_interface.output(tally.describe(OPPONENT))
        return tally.leader

    def play(self) -> None:
        self.io_interface.clear()
        self.io_interface.banner(WELCOME)
        game_type = choose_game_type(self.io_interface)
        self.io_interface.clear()
        if game_type == GameType.SINGLE:
            player, computer, outcome = self.play_one()
            self.display_weapon_choices(player, computer)
            show_single_game_result(self.io_interface, outcome)
        else:
            show_match_result(self.io_interface, self.play_best_of_five())


def play_rpssl(io_interface: IOInterface, rng: Optional[random.Random] = None) -> None:
    game = RPSSLGame(io_interface, rng)
    while True:
        game.play()
        if not io_interface.ask_play_again():
            break
    say_goodbye(io_interface)


def main(argv: Optional[List[str]] = None) -> int:
    return run_program(
        "Play rock-paper-scissors-Spock-lizard against the computer.", play_rpssl, argv
    )


if __name__ == "__main__":
    sys.exit(main())
