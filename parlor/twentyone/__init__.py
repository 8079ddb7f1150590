"""
Twenty-one module.

This module provides the hand scoring, dealing and turn logic for
twenty-one, and the console game built on them.
"""

from parlor.twentyone.hand import (
    TwentyOneHand as TwentyOneHand,
    compute_hand_value as compute_hand_value,
)
from parlor.twentyone.rules import BUST as BUST, GameOptions as GameOptions
from parlor.twentyone.turns import (
    RoundResult as RoundResult,
    deal_initial_hands as deal_initial_hands,
    deal_random_card as deal_random_card,
    dealer_turn as dealer_turn,
    determine_winner as determine_winner,
    play_round as play_round,
    player_turn as player_turn,
)

__all__ = [
    "TwentyOneHand",
    "compute_hand_value",
    "BUST",
    "GameOptions",
    "RoundResult",
    "deal_initial_hands",
    "deal_random_card",
    "dealer_turn",
    "determine_winner",
    "play_round",
    "player_turn",
]
