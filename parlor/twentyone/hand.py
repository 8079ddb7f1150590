"""
TwentyOneHand and the hand-value calculation.

Aces are resolved against whatever bust limit the match uses, so a hand that
is soft under 21 may be hard under a lower limit.
"""

from typing import Iterable

from parlor.common.card import Card
from parlor.common.hand import Hand
from parlor.twentyone.rules import DEFAULT_BUST_LIMIT


def non_ace_value(cards: Iterable[Card]) -> int:
    """Sum of the fixed point values of every card that isn't an ace."""
    return sum(card.points for card in cards if not card.is_ace)


def ace_value(
    non_ace_total: int, num_aces: int, bust_limit: int = DEFAULT_BUST_LIMIT
) -> int:
    """
    Combined contribution of `num_aces` aces.

    Every ace starts at 11. While the aces push the total over the bust limit
    and one of them still counts 11, that ace drops to 1.
    """
    margin = bust_limit - non_ace_total
    value = num_aces * 11
    soft_aces = num_aces
    while value > margin and soft_aces:
        value -= 10
        soft_aces -= 1
    return value


def compute_hand_value(
    cards: Iterable[Card], bust_limit: int = DEFAULT_BUST_LIMIT
) -> int:
    """
    Total of a hand with aces resolved against `bust_limit`.

    >>> from parlor.common.card import Rank, Suit
    >>> compute_hand_value([Card(Suit.HEARTS, Rank.ACE), Card(Suit.CLUBS, Rank.KING)])
    21
    """
    cards = list(cards)
    num_aces = sum(1 for card in cards if card.is_ace)
    base = non_ace_value(cards)
    return base + ace_value(base, num_aces, bust_limit)


class TwentyOneHand(Hand):
    """A hand in twenty-one. Its value is always derived, never stored."""

    def value(self, bust_limit: int = DEFAULT_BUST_LIMIT) -> int:
        return compute_hand_value(self._cards, bust_limit)

    def describe(self) -> str:
        """One line per card, e.g. ``The ten of spades.``"""
        return "\n".join(f"The {card.label}." for card in self._cards)
