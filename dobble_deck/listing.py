#!/usr/bin/python3
"""Text rendering of a generated deck."""
from collections.abc import Sequence
from dataclasses import dataclass
from enum import auto
from enum import IntEnum

from dobble_deck.generator import GenerationResult


def format_card(card: Sequence[int]) -> str:
    """Format a card as a bracketed list of symbols, e.g. [1, 2, 3]."""
    return "[" + ", ".join(str(symbol) for symbol in card) + "]"


class StatusKind(IntEnum):
    SUCCESS = auto()
    ERROR = auto()


@dataclass(frozen=True)
class StatusMessage:
    kind: StatusKind
    text: str


def status_message(result: GenerationResult) -> StatusMessage:
    """Tell whether the whole deck is valid or only a part of it is displayed."""
    if result.valid:
        return StatusMessage(StatusKind.SUCCESS,
                             f"Generated {result.raw_card_count} cards ({result.symbols_per_card} symbols(images) "
                             f"per card, {result.total_symbols} total symbols(images))")
    return StatusMessage(StatusKind.ERROR,
                         f"Showing {len(result.cards)} of {result.raw_card_count} correct cards")


def formula_summary(result: GenerationResult) -> str:
    """Summarize the order, the number of symbols and the number of cards."""
    return (f"Formula: n={result.order}, symbols=n²+n+1={result.total_symbols}, "
            f"cards={result.total_symbols}")


class CardListing:
    """Per-card "processed" flags displayed on top of a generation result.

    The flags belong to the listing, the result itself is never modified.
    """

    def __init__(self, result: GenerationResult) -> None:
        self.result = result
        self._processed = [False] * len(result.cards)

    def __len__(self) -> int:
        return len(self._processed)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._processed):
            raise IndexError(f"Card index {index} out of range [0, {len(self._processed)})")

    def set_processed(self, index: int, checked: bool = True) -> None:
        self._check_index(index)
        self._processed[index] = checked

    def is_processed(self, index: int) -> bool:
        self._check_index(index)
        return self._processed[index]

    def lines(self) -> list[str]:
        """Get one line per card. Processed cards only show their number."""
        return [f"Card {k+1}" if processed else f"Card {k+1}: {format_card(card)}"
                for k, (card, processed) in enumerate(zip(self.result.cards, self._processed))]
