"""
Outcomes and the best-of-five tally shared by the game shells.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto

from parlor.common.io_interface import IOInterface


class Outcome(Enum):
    """Result of a single game, from the player's point of view."""

    PLAYER = auto()
    OPPONENT = auto()
    TIE = auto()


class GameType(Enum):
    """Menu entry for how long a session runs."""

    SINGLE = "1"
    BEST_OF_FIVE = "2"


GAME_TYPE_MENU = (
    "Welcome player! Choose one of the following options:\n"
    "1) Single game\n"
    "2) Best of five\n"
)

DECISIVE_GAMES = 5


@dataclass(frozen=True)
class MatchTally:
    """
    Immutable tally for a best-of-five match.

    Ties never count towards the five decisive games; they only feed the
    consecutive-ties counter.
    """

    player_wins: int = 0
    opponent_wins: int = 0
    consecutive_ties: int = 0

    def record(self, outcome: Outcome) -> "MatchTally":
        """Return a new tally with `outcome` applied."""
        if outcome == Outcome.PLAYER:
            return replace(self, player_wins=self.player_wins + 1, consecutive_ties=0)
        if outcome == Outcome.OPPONENT:
            return replace(
                self, opponent_wins=self.opponent_wins + 1, consecutive_ties=0
            )
        return replace(self, consecutive_ties=self.consecutive_ties + 1)

    @property
    def decisive_games(self) -> int:
        return self.player_wins + self.opponent_wins

    @property
    def is_decided(self) -> bool:
        return self.decisive_games >= DECISIVE_GAMES

    @property
    def leader(self) -> Outcome:
        """PLAYER if the player is ahead, otherwise OPPONENT."""
        if self.player_wins > self.opponent_wins:
            return Outcome.PLAYER
        return Outcome.OPPONENT

    def describe(self, opponent: str) -> str:
        return (
            f"Current tally is player: {self.player_wins}, "
            f"{opponent.lower()}: {self.opponent_wins}.\n"
        )


VICTORY = "awesome you won"
DEFEAT = "darn you lost"
TIE = "it was a tie"
GOODBYE = "thanks for playing"


def choose_game_type(io: IOInterface) -> GameType:
    return GameType(io.choose(GAME_TYPE_MENU, [t.value for t in GameType]))


def show_single_game_result(io: IOInterface, outcome: Outcome) -> None:
    """Announce a stand-alone game in the large font."""
    messages = {Outcome.PLAYER: VICTORY, Outcome.OPPONENT: DEFEAT, Outcome.TIE: TIE}
    io.banner(messages[outcome])


def show_game_winner(io: IOInterface, outcome: Outcome, opponent: str) -> None:
    """Announce one game inside a best-of-five match in plain text."""
    if outcome == Outcome.PLAYER:
        io.output("Player won.\n")
    elif outcome == Outcome.OPPONENT:
        io.output(f"{opponent} won.\n")
    else:
        io.output("Tie.\n")


def show_match_result(io: IOInterface, outcome: Outcome) -> None:
    io.banner(VICTORY if outcome == Outcome.PLAYER else DEFEAT)


def say_goodbye(io: IOInterface) -> None:
    io.clear()
    io.banner(GOODBYE)
