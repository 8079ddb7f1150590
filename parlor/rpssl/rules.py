"""Weapons and who beats whom in rock-paper-scissors-Spock-lizard."""

import random
from enum import Enum
from typing import Optional

from parlor.common.match import Outcome


class Weapon(Enum):
    """The five weapons, keyed by their menu number."""

    ROCK = "1"
    PAPER = "2"
    SCISSORS = "3"
    SPOCK = "4"
    LIZARD = "5"

    @property
    def label(self) -> str:
        return "Spock" if self == Weapon.SPOCK else self.name.lower()

    def __str__(self) -> str:
        return self.label


BEATS = {
    Weapon.ROCK: frozenset({Weapon.SCISSORS, Weapon.LIZARD}),
    Weapon.PAPER: frozenset({Weapon.ROCK, Weapon.SPOCK}),
    Weapon.SCISSORS: frozenset({Weapon.PAPER, Weapon.LIZARD}),
    Weapon.SPOCK: frozenset({Weapon.ROCK, Weapon.SCISSORS}),
    Weapon.LIZARD: frozenset({Weapon.PAPER, Weapon.SPOCK}),
}


def get_winner(player: Weapon, computer: Weapon) -> Outcome:
    if computer in BEATS[player]:
        return Outcome.PLAYER
    if player == computer:
        return Outcome.TIE
    return Outcome.OPPONENT


def random_weapon(rng: Optional[random.Random] = None) -> Weapon:
    return (rng or random).choice(list(Weapon))
