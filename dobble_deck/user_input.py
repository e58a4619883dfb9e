#!/usr/bin/python3
"""Parse the number of symbols per card typed by the user."""
import re
from enum import auto
from enum import IntEnum

MIN_SYMBOLS_PER_CARD = 2
MAX_SYMBOLS_PER_CARD = 15

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InputError(IntEnum):
    """Reason why the user input was rejected."""
    MISSING = auto()
    INVALID_NUMBER = auto()
    TOO_SMALL = auto()
    TOO_LARGE = auto()


class InvalidInputError(ValueError):
    """Raised when the user input can't be used to generate a deck."""

    def __init__(self, kind: InputError, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def parse_symbols_per_card(text: str) -> int:
    """Convert the user input into a number of symbols per card in [2, 15].

    Raises:
        InvalidInputError: If the input is empty, not an integer, or out of range
    """
    if text == "":
        raise InvalidInputError(InputError.MISSING,
                                "please enter the number of images per card")

    # Plain ASCII digits only, no whitespace, underscores or other unicode digits
    if INTEGER_PATTERN.fullmatch(text) is None:
        raise InvalidInputError(InputError.INVALID_NUMBER,
                                "please enter a valid number")
    value = int(text)

    if value < MIN_SYMBOLS_PER_CARD:
        raise InvalidInputError(InputError.TOO_SMALL,
                                f"the number of images per card must be greater than {MIN_SYMBOLS_PER_CARD - 1}")

    if value > MAX_SYMBOLS_PER_CARD:
        raise InvalidInputError(InputError.TOO_LARGE,
                                f"the number of images per card is limited to {MAX_SYMBOLS_PER_CARD} for performance")

    return value
