"""
This module contains the Deck class, which represents a deck of cards.

>>> deck = Deck()
>>> deck.size
52
>>> card = deck.deal_random()
>>> deck.size
51
"""

import logging
import random
from typing import List, Optional, Union

from parlor.common.card import Card, Rank, Suit

logger = logging.getLogger(__name__)


class Deck:
    """
    A class representing a deck of cards.
    """

    # Precompute the default deck
    _default_deck = [Card(suit, rank) for suit in Suit for rank in Rank]

    def __init__(self, cards: Union[List[Card], None] = None):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, a default deck will be constructed.
        >>> deck = Deck()
        >>> deck.size
        52
        """
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
        else:
            self.cards = cards.copy()

    def initialize_default_deck(self) -> List[Card]:
        """
        Construct a default deck with all possible combinations of suits and ranks.

        :return: A list of Card instances representing the default deck.
        >>> deck = Deck()
        >>> len(deck.cards)
        52
        """
        return self._default_deck.copy()

    def deal_random(self, rng: Optional[random.Random] = None) -> Card:
        """
        Remove and return a uniformly random card from the remaining cards.

        :param rng: Random source to draw from (defaults to the `random` module).
        :raises ValueError: If the deck is empty.
        """
        if self.is_empty():
            raise ValueError("Cannot deal from an empty deck")
        index = (rng or random).randrange(len(self.cards))
        card = self.cards.pop(index)
        logger.debug("Dealt %r, %d cards left", card, len(self.cards))
        return card

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.

        :return: The size of the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        """
        Check if the deck is empty.

        :return: True if the deck is empty, False otherwise.
        """
        return len(self.cards) == 0

    def __contains__(self, card: Card) -> bool:
        return card in self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the deck.

        :return: A string representation of the deck.
        """
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the deck.

        :return: A string representation of the deck.
        >>> deck = Deck()
        >>> str(deck)
        'Deck of 52 cards'
        """
        return f"Deck of {len(self.cards)} cards"
