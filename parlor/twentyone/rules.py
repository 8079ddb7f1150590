"""Limits that govern a game of twenty-one."""

from dataclasses import dataclass, asdict

DEFAULT_BUST_LIMIT = 21
DEFAULT_DEALER_LIMIT = 17

# Score reported for a hand that went over the bust limit.
BUST = -1


@dataclass(frozen=True)
class GameOptions:
    """
    Bust and dealer limits for one match.

    Attributes:
        bust_limit: Totals above this lose outright
        dealer_limit: The dealer draws while below this
    """

    bust_limit: int = DEFAULT_BUST_LIMIT
    dealer_limit: int = DEFAULT_DEALER_LIMIT

    def __post_init__(self):
        if self.bust_limit < 1:
            raise ValueError(f"Bust limit must be positive, got {self.bust_limit}")
        if not 1 <= self.dealer_limit < self.bust_limit:
            raise ValueError(
                f"Dealer limit must be between 1 and {self.bust_limit - 1}, "
                f"got {self.dealer_limit}"
            )

    def is_bust(self, score: int) -> bool:
        return score > self.bust_limit

    def dealer_should_hit(self, score: int) -> bool:
        """Determine if the dealer should hit based on the game limits."""
        return score < self.dealer_limit

    def to_dict(self) -> dict:
        """Convert options to a dictionary for logging."""
        return asdict(self)
