"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Clubs, Hearts, Diamonds, and Spades.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Two through Ten, Jack, Queen, King, and Ace. Each rank carries the number
of points it scores in twenty-one.

- `Card`: A class representing a playing card. A card has a suit and a
rank. The `Card` class also provides methods for comparing cards and for
converting cards to strings for display.
"""

from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    CLUBS = "♣"
    HEARTS = "♥"
    DIAMONDS = "♦"
    SPADES = "♠"

    @property
    def label(self) -> str:
        """The lower-case name of the suit, e.g. ``clubs``."""
        return self.name.lower()

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.

    The value is the rank's position, two being lowest. Scoring goes through
    `rank_value`, which collapses the face cards to ten.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def rank_value(self) -> int:
        """The value of the rank, used for scoring. Aces count 11 here."""
        if self == Rank.ACE:
            return 11
        if self.is_face:
            return 10
        return self.value

    @property
    def rank_str(self) -> str:
        """A short string representation of the rank."""
        if self.is_face or self == Rank.ACE:
            return self.name[0]
        return str(self.value)

    @property
    def label(self) -> str:
        """The lower-case name of the rank, e.g. ``queen``."""
        return self.name.lower()

    def __str__(self) -> str:
        return self.rank_str


class Card:
    """
    Class representing a playing card. This class is a member of a card deck.

    >>> card = Card(Suit.HEARTS, Rank.TWO)
    >>> print(card)
    2 of ♥
    >>> card.label
    'two of hearts'
    """

    __slots__ = ("suit", "rank", "str_rep")

    def __init__(self, suit: Suit, rank: Rank):
        """
        Initialize a Card instance.

        :param suit: Suit of the card (one of the Suit enums)
        :param rank: Rank of the card (one of the Rank enums)
        """
        if not isinstance(suit, Suit):
            raise TypeError(f"Invalid suit: {suit}")
        if not isinstance(rank, Rank):
            raise TypeError(f"Invalid rank: {rank}")
        self.suit = suit
        self.rank = rank
        self.str_rep = f"{self.rank.rank_str} of {str(self.suit)}"

    @property
    def points(self) -> int:
        """Points the card scores before any ace adjustment."""
        return self.rank.rank_value

    @property
    def is_ace(self) -> bool:
        return self.rank == Rank.ACE

    @property
    def label(self) -> str:
        """Long form used in game messages, e.g. ``ten of spades``."""
        return f"{self.rank.label} of {self.suit.label}"

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self.rank == other.rank and self.suit == other.suit
        return NotImplemented

    def __hash__(self):
        return hash((self.suit, self.rank))

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string representation of the card.
        """
        return self.str_rep
