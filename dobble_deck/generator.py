#!/usr/bin/python3
"""Generate a Dobble deck for a given number of symbols per card."""
from dataclasses import dataclass

from dobble_deck.steps.filter import filter_valid_cards
from dobble_deck.steps.optim import get_cards
from dobble_deck.steps.symbols import order
from dobble_deck.steps.symbols import total_symbols
from dobble_deck.steps.validate import is_valid_deck
from dobble_deck.utils.logger import logger
from dobble_deck.utils.profiling import profile


@dataclass(frozen=True)
class GenerationResult:
    """Immutable output of one generation request.

    Attributes:
        symbols_per_card: Requested number of symbols per card
        cards: Cards to display, i.e. the raw deck if valid or its filtered sub-deck
        valid: True if the raw deck satisfies the one-common-symbol rule
        total_symbols: Number of symbols n^2 + n + 1
        raw_card_count: Number of cards of the raw deck, before filtering
    """
    symbols_per_card: int
    cards: tuple[tuple[int, ...], ...]
    valid: bool
    total_symbols: int
    raw_card_count: int

    @property
    def order(self) -> int:
        return order(self.symbols_per_card)


@profile
def generate(symbols_per_card: int) -> GenerationResult:
    """Build the raw deck, validate it, and keep only a valid sub-deck if needed.

    symbols_per_card is expected to be already checked by the caller (see user_input).
    """
    raw_cards = get_cards(symbols_per_card)
    valid = is_valid_deck(raw_cards)
    display_cards = raw_cards if valid else filter_valid_cards(raw_cards)

    logger.debug(f"n={order(symbols_per_card)}: {len(raw_cards)} raw cards, valid={valid}, "
                 f"{len(display_cards)} cards kept")

    return GenerationResult(symbols_per_card=symbols_per_card,
                            cards=tuple(tuple(card) for card in display_cards),
                            valid=valid,
                            total_symbols=total_symbols(symbols_per_card),
                            raw_card_count=len(raw_cards))
