"""
This module contains the IOInterface abstract base class and its implementations.

The game engines never talk to the terminal. Each game shell owns an
IOInterface and uses the prompt helpers defined here to turn raw lines into
already-validated values (a menu choice, a yes/no answer, an integer) before
handing them to the engine.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

import pyfiglet

logger = logging.getLogger(__name__)

INVALID_CHOICE = (
    "I'm afraid that's not a valid choice. "
    "Please select one of the options listed above.\n"
)

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")

BANNER_FONT = "standard"


def render_banner(text: str, font: str = BANNER_FONT) -> str:
    """Render text in a large ASCII-art font, one figlet block per line of text."""
    blocks = [pyfiglet.figlet_format(line, font=font) for line in text.split("\n")]
    return "\n" + "".join(blocks) + "\n"


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    Subclasses provide the raw operations (`output`, `input`, `clear`,
    `banner`). The prompt helpers keep asking until the answer is valid, so
    callers only ever see well-formed values.
    """

    invalid_message = INVALID_CHOICE

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the screen between turns."""

    @abstractmethod
    def banner(self, text: str) -> None:
        """Show a key message in a large font."""

    def choose(self, prompt: str, options: Iterable[str]) -> str:
        """
        Ask until the answer is one of `options` and return it.

        :param prompt: The first prompt shown.
        :param options: The accepted answers, compared exactly.
        """
        valid = list(options)
        choice = self.input(prompt).strip()
        while choice not in valid:
            logger.debug("Rejected %r, expected one of %s", choice, valid)
            choice = self.input(self.invalid_message).strip()
        return choice

    def ask_yes_no(self, prompt: str) -> bool:
        """Ask until the answer is y/yes/n/no (any case); True means yes."""
        answer = self.choose_answer(prompt, YES_ANSWERS + NO_ANSWERS)
        return answer in YES_ANSWERS

    def choose_answer(self, prompt: str, options: Sequence[str]) -> str:
        """Like `choose`, but case-insensitive. Returns the lower-cased answer."""
        answer = self.input(prompt).strip().lower()
        while answer not in options:
            logger.debug("Rejected %r, expected one of %s", answer, list(options))
            answer = self.input(self.invalid_message).strip().lower()
        return answer

    def ask_play_again(
        self, prompt: str = "Would you like to play again (y/n)? "
    ) -> bool:
        """Anything other than y/yes counts as no."""
        return self.input(prompt).strip().lower() in YES_ANSWERS

    def check_numeric_response(
        self,
        ctx: str,
        minimum: int = 1,
        maximum: Optional[int] = None,
        retry: Optional[str] = None,
    ) -> int:
        """
        Ask until the response is an integer within [minimum, maximum].

        :param ctx: The prompt.
        :param minimum: Smallest accepted value.
        :param maximum: Largest accepted value, unbounded if None.
        :param retry: Prompt for subsequent attempts (defaults to `ctx`).
        """
        response = self.input(ctx)
        while True:
            try:
                value = int(response.strip())
            except ValueError:
                value = None
            if value is not None and value >= minimum:
                if maximum is None or value <= maximum:
                    return value
            logger.debug(
                "Rejected numeric response %r (range %s..%s)", response, minimum, maximum
            )
            response = self.input(retry or ctx)

    def pause(self, prompt: str = "Press enter to continue.") -> None:
        self.input(prompt)


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    replays scripted input lines.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next scripted input.

    def add_inputs(self, *lines):
        Queue more input lines.
    """

    __test__ = False

    def __init__(self, inputs: Optional[Iterable[str]] = None):
        self.sent_messages: List[str] = []
        self.prompts: List[str] = []
        self.banners: List[str] = []
        self.clears = 0
        self.input_responses: List[str] = list(inputs or [])

    def add_inputs(self, *lines: str) -> None:
        self.input_responses.extend(lines)

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise EOFError("No more scripted input left in TestIOInterface queue.")

    def clear(self) -> None:
        self.clears += 1

    def banner(self, text: str) -> None:
        self.banners.append(text)

    @property
    def transcript(self) -> str:
        return "\n".join(self.sent_messages)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    Methods
    -------
    def output(self, message: str):
        Output a message to the console.

    def input(self, prompt: str):
        Get input from the console.

    def clear(self):
        Clear the terminal.

    def banner(self, text: str):
        Print text in a large figlet font.
    """

    def __init__(self, font: str = BANNER_FONT):
        self.font = font

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)

    def clear(self) -> None:
        os.system("cls" if os.name == "nt" else "clear")

    def banner(self, text: str) -> None:
        print(render_banner(text, self.font))
