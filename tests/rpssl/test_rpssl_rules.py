import random

import pytest

from parlor.common.match import Outcome
from parlor.rpssl.rules import BEATS, Weapon, get_winner, random_weapon


def test_each_weapon_beats_exactly_two_others():
    for weapon, beaten in BEATS.items():
        assert len(beaten) == 2
        assert weapon not in beaten


def test_every_pair_has_one_winner():
    for a in Weapon:
        for b in Weapon:
            if a != b:
                assert (b in BEATS[a]) != (a in BEATS[b])


@pytest.mark.parametrize(
    "player, computer",
    [
        (Weapon.ROCK, Weapon.SCISSORS),
        (Weapon.ROCK, Weapon.LIZARD),
        (Weapon.PAPER, Weapon.ROCK),
        (Weapon.PAPER, Weapon.SPOCK),
        (Weapon.SCISSORS, Weapon.PAPER),
        (Weapon.SCISSORS, Weapon.LIZARD),
        (Weapon.SPOCK, Weapon.ROCK),
        (Weapon.SPOCK, Weapon.SCISSORS),
        (Weapon.LIZARD, Weapon.PAPER),
        (Weapon.LIZARD, Weapon.SPOCK),
    ],
)
def test_player_wins(player, computer):
    assert get_winner(player, computer) == Outcome.PLAYER
    assert get_winner(computer, player) == Outcome.OPPONENT


@pytest.mark.parametrize("weapon", list(Weapon))
def test_same_weapon_ties(weapon):
    assert get_winner(weapon, weapon) == Outcome.TIE


def test_labels():
    assert str(Weapon.SPOCK) == "Spock"
    assert str(Weapon.LIZARD) == "lizard"


def test_random_weapon_covers_all():
    rng = random.Random(8)
    assert {random_weapon(rng) for _ in range(200)} == set(Weapon)
