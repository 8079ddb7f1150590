"""
Command-line plumbing shared by the console programs.

Every program takes the same single optional flag and runs one interactive
session against the terminal.
"""

import argparse
import logging
from typing import Callable, List, Optional

from parlor.common.io_interface import ConsoleIOInterface, IOInterface
from parlor.common.log_config import configure_logging

logger = logging.getLogger(__name__)


def parse_args(description: str, argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Write debug logging to stderr.",
    )
    return parser.parse_args(argv)


def run_program(
    description: str,
    session: Callable[[IOInterface], None],
    argv: Optional[List[str]] = None,
    io_interface: Optional[IOInterface] = None,
) -> int:
    """
    Parse arguments, set up logging and run `session` until it returns.

    Ctrl-C and end-of-input end the program quietly.
    """
    args = parse_args(description, argv)
    configure_logging(args.verbose)
    io_interface = io_interface or ConsoleIOInterface()

    try:
        session(io_interface)
    except (KeyboardInterrupt, EOFError) as exc:
        logger.debug("Session interrupted: %s", type(exc).__name__)
        io_interface.output("\nGoodbye!")
    return 0
