"""
Dealing and turn logic for twenty-one.

Each function works on the deck and hands it is given. The only outside
input is the player's hit-or-stay decision, which arrives through a callback
so the turn logic never touches the terminal.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from parlor.common.card import Card
from parlor.common.deck import Deck
from parlor.common.match import Outcome
from parlor.twentyone.hand import TwentyOneHand
from parlor.twentyone.rules import BUST, GameOptions

logger = logging.getLogger(__name__)

HitDecision = Callable[[TwentyOneHand], bool]
CardObserver = Callable[[TwentyOneHand], None]


@dataclass
class RoundResult:
    """
    Everything the shell needs to report a finished round.

    Attributes:
        outcome: Who won
        busted: True if a bust decided the round
        player: The player's final hand
        dealer: The dealer's final hand
        player_score: Player's total, or BUST
        dealer_score: Dealer's total, BUST, or None if the dealer never played
    """

    outcome: Outcome
    busted: bool
    player: TwentyOneHand
    dealer: TwentyOneHand
    player_score: int
    dealer_score: Optional[int] = None


def deal_random_card(
    deck: Deck, hand: TwentyOneHand, rng: Optional[random.Random] = None
) -> Card:
    """Move one uniformly random card from the deck into the hand."""
    card = deck.deal_random(rng)
    hand.add_card(card)
    return card


def deal_initial_hands(
    deck: Deck,
    player: TwentyOneHand,
    dealer: TwentyOneHand,
    rng: Optional[random.Random] = None,
) -> None:
    """Deal two cards each, alternating player, dealer, player, dealer."""
    for hand in (player, dealer, player, dealer):
        deal_random_card(deck, hand, rng)


def player_turn(
    deck: Deck,
    hand: TwentyOneHand,
    options: GameOptions,
    wants_hit: HitDecision,
    on_hit: Optional[CardObserver] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Let the player hit until they stay or bust.

    Args:
        deck: Cards left to deal
        hand: The player's hand, extended in place
        options: Bust and dealer limits
        wants_hit: Called with the hand before every draw; True means hit
        on_hit: Called with the hand after every draw
        rng: Random source for dealing

    Returns:
        The final total, or BUST
    """
    score = hand.value(options.bust_limit)
    if options.is_bust(score):
        return BUST

    while wants_hit(hand):
        card = deal_random_card(deck, hand, rng)
        score = hand.value(options.bust_limit)
        logger.debug("Player hits: %s, total %d", card, score)
        if on_hit is not None:
            on_hit(hand)
        if options.is_bust(score):
            logger.debug("Player busts with %d", score)
            return BUST

    logger.debug("Player stays on %d", score)
    return score


def dealer_turn(
    deck: Deck,
    hand: TwentyOneHand,
    options: GameOptions,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Draw for the dealer while the total is below the dealer limit.

    Returns:
        The final total, or BUST
    """
    score = hand.value(options.bust_limit)
    while options.dealer_should_hit(score):
        card = deal_random_card(deck, hand, rng)
        score = hand.value(options.bust_limit)
        logger.debug("Dealer draws %s, total %d", card, score)
        if options.is_bust(score):
            logger.debug("Dealer busts with %d", score)
            return BUST

    if options.is_bust(score):
        return BUST
    logger.debug("Dealer stands on %d", score)
    return score


def determine_winner(player_score: int, dealer_score: int) -> Outcome:
    """Higher total wins; equal totals tie."""
    if player_score > dealer_score:
        return Outcome.PLAYER
    if player_score < dealer_score:
        return Outcome.OPPONENT
    return Outcome.TIE


def play_round(
    options: GameOptions,
    wants_hit: HitDecision,
    deck: Optional[Deck] = None,
    on_hit: Optional[CardObserver] = None,
    on_deal: Optional[Callable[[TwentyOneHand, TwentyOneHand], None]] = None,
    rng: Optional[random.Random] = None,
) -> RoundResult:
    """
    Play one full round from a fresh deck.

    A player bust ends the round before the dealer draws.
    """
    deck = deck if deck is not None else Deck()
    player, dealer = TwentyOneHand(), TwentyOneHand()
    deal_initial_hands(deck, player, dealer, rng)
    if on_deal is not None:
        on_deal(player, dealer)

    player_score = player_turn(deck, player, options, wants_hit, on_hit, rng)
    if player_score == BUST:
        return RoundResult(Outcome.OPPONENT, True, player, dealer, player_score)

    dealer_score = dealer_turn(deck, dealer, options, rng)
    if dealer_score == BUST:
        return RoundResult(
            Outcome.PLAYER, True, player, dealer, player_score, dealer_score
        )

    outcome = determine_winner(player_score, dealer_score)
    return RoundResult(outcome, False, player, dealer, player_score, dealer_score)
