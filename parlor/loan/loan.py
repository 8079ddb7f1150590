"""
Console loan payment calculator.
"""

import logging
import sys
from typing import Callable, List, Optional

from parlor.common.cli import run_program
from parlor.common.io_interface import IOInterface
from parlor.loan.calculator import (
    is_valid_apr,
    is_valid_whole_amount,
    monthly_payment,
)

logger = logging.getLogger(__name__)

ASK_PRINCIPAL = "What is the loan amount in USD?\n"
RETRY_PRINCIPAL = "Please enter a valid loan amount (must be a positive integer).\n"
ASK_DURATION = "What is the loan duration in years?\n"
RETRY_DURATION = "Please enter a valid duration length (must be a positive integer).\n"
ASK_APR = "Please enter the APR in percentage form.\n"
RETRY_APR = "Please enter a non-negative numeric value.\n"
ASK_AGAIN = "Would you like to perform another calculation? (y/n)"


def ask_until(
    io_interface: IOInterface, prompt: str, retry: str, is_valid: Callable[[str], bool]
) -> float:
    answer = io_interface.input(prompt)
    while not is_valid(answer):
        logger.debug("Rejected %r", answer)
        answer = io_interface.input(retry)
    return float(answer)


def calculate_once(io_interface: IOInterface) -> float:
    """Collect the three inputs, print the payment and return it."""
    principal = ask_until(
        io_interface, ASK_PRINCIPAL, RETRY_PRINCIPAL, is_valid_whole_amount
    )
    years = ask_until(io_interface, ASK_DURATION, RETRY_DURATION, is_valid_whole_amount)
    apr = ask_until(io_interface, ASK_APR, RETRY_APR, is_valid_apr)

    payment = monthly_payment(principal, years, apr)
    logger.debug("principal=%s years=%s apr=%s -> %.4f", principal, years, apr, payment)
    io_interface.output(f"The monthly payment is ${payment:.2f}")
    return payment


def run_calculator(io_interface: IOInterface) -> None:
    calculate_once(io_interface)
    # Only a plain 'y' asks for another round.
    while io_interface.input(ASK_AGAIN).strip().lower() == "y":
        calculate_once(io_interface)


def main(argv: Optional[List[str]] = None) -> int:
    return run_program("Work out the monthly payment on a loan.", run_calculator, argv)


if __name__ == "__main__":
    sys.exit(main())
