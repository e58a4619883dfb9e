# /usr/bin/python3
"""Dobble"""
import logging
import sys

import fire
from typing_extensions import assert_never

from dobble_deck.generator import generate
from dobble_deck.generator import GenerationResult
from dobble_deck.listing import CardListing
from dobble_deck.listing import formula_summary
from dobble_deck.listing import status_message
from dobble_deck.listing import StatusKind
from dobble_deck.steps.optim import get_cards
from dobble_deck.steps.stats import compute_stats
from dobble_deck.steps.validate import find_invalid_pairs
from dobble_deck.user_input import InvalidInputError
from dobble_deck.user_input import MAX_SYMBOLS_PER_CARD
from dobble_deck.user_input import MIN_SYMBOLS_PER_CARD
from dobble_deck.user_input import parse_symbols_per_card
from dobble_deck.utils.logger import logger
from dobble_deck.utils.multiprocess import multiprocess
from dobble_deck.utils.profiling import export_profiling_events
from dobble_deck.utils.profiling import LogScopeTime
from dobble_deck.utils.profiling import set_profiling


def _log_result(result: GenerationResult) -> None:
    status = status_message(result)
    if status.kind is StatusKind.SUCCESS:
        logger.info(status.text)
    elif status.kind is StatusKind.ERROR:
        logger.error(status.text)
        if logger.isEnabledFor(logging.DEBUG):
            invalid_pairs = find_invalid_pairs(get_cards(result.symbols_per_card))
            logger.debug(f"{len(invalid_pairs)} pairs of raw cards don't share exactly one symbol")
    else:
        assert_never(status.kind)
    logger.info(formula_summary(result))


def _generate_listing(value: int,
                      processed: list[int] | int | None,
                      stats: bool) -> CardListing:
    with LogScopeTime("Generation"):
        result = generate(value)

    _log_result(result)

    listing = CardListing(result)
    if isinstance(processed, int):
        processed = [processed]  # fire parses a single value as an int
    for card_number in processed or []:
        try:
            listing.set_processed(card_number - 1)
        except IndexError:
            logger.error(f"card number {card_number} is not in [1, {len(listing)}]")
            sys.exit(1)

    if stats:
        deck_stats = compute_stats(result)
        logger.info(f"{deck_stats.n_cards} cards, {deck_stats.n_unused_symbols} unused symbols, "
                    f"each symbol appears on {deck_stats.min_frequency} to {deck_stats.max_frequency} cards")
        logger.info(f"Common symbols between two cards: {deck_stats.histogram}")

    return listing


def main(symbols_per_card: str | int,
         processed: list[int] | int | None = None,
         stats: bool = False,
         profiling_json: str | None = None,
         verbose: bool = False) -> list[str]:
    """Generate a Dobble deck and list its cards.

    Args:
        symbols_per_card: Number of symbols (images) per card, between 2 and 15
        processed: Numbers (1-based) of the cards already processed, only their number is displayed
        stats: Log the symbol distribution and the pairwise intersections of the displayed cards
        profiling_json: Optional output path of a Chrome tracing JSON file
        verbose: Log debug messages, e.g. the number of invalid pairs of raw cards
    """
    try:
        value = parse_symbols_per_card(str(symbols_per_card))
    except InvalidInputError as e:
        logger.error(str(e))
        sys.exit(1)

    previous_level = logger.level
    if verbose:
        logger.setLevel(logging.DEBUG)
    set_profiling(profiling_json is not None)
    try:
        listing = _generate_listing(value, processed, stats)
        if profiling_json is not None:
            export_profiling_events(profiling_json)
    finally:
        set_profiling(False)
        logger.setLevel(previous_level)

    lines = listing.lines()
    for line in lines:
        print(line)
    return lines


def _survey_row(symbols_per_card: int) -> tuple[int, int, int, bool]:
    result = generate(symbols_per_card)
    return symbols_per_card, result.raw_card_count, len(result.cards), result.valid


def survey(min_symbols: int = MIN_SYMBOLS_PER_CARD,
           max_symbols: int = MAX_SYMBOLS_PER_CARD,
           n_jobs: int | None = None) -> list[tuple[int, int, int, bool]]:
    """Generate the decks of every size in a range and report which ones are complete.

    Args:
        min_symbols: Smallest number of symbols per card
        max_symbols: Largest number of symbols per card
        n_jobs: Number of worker processes. Use None for 80% of the cpus, and a negative value for all of them
    """
    try:
        min_symbols = parse_symbols_per_card(str(min_symbols))
        max_symbols = parse_symbols_per_card(str(max_symbols))
    except InvalidInputError as e:
        logger.error(str(e))
        sys.exit(1)

    list_kwargs = [{"symbols_per_card": s} for s in range(min_symbols, max_symbols+1)]
    rows = multiprocess(_survey_row, list_kwargs, tqdm_title="Survey", n_jobs=n_jobs)

    for symbols_per_card, n_raw, n_kept, valid in rows:
        verdict = "complete" if valid else "partial"
        logger.info(f"{symbols_per_card:>2} symbols per card: {n_kept:>3} of {n_raw:>3} cards ({verdict})")

    supported = [row[0] for row in rows if row[3]]
    logger.info(f"Supported values: {', '.join(str(s) for s in supported)}")
    return rows


def cli() -> None:
    """Command line entry point."""
    fire.Fire({"generate": main,
               "survey": survey})


if __name__ == "__main__":
    cli()
