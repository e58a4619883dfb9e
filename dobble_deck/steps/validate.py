#!/usr/bin/python3
"""Check that every pair of cards shares exactly one symbol."""
from collections.abc import Sequence

from dobble_deck.steps.symbols import common_symbol_count
from dobble_deck.utils.profiling import profile


@profile
def is_valid_deck(deck: Sequence[Sequence[int]]) -> bool:
    """Return True if any two distinct cards have exactly one symbol in common."""
    for k1 in range(len(deck)):
        for k2 in range(k1+1, len(deck)):
            if common_symbol_count(deck[k1], deck[k2]) != 1:
                return False
    return True


def find_invalid_pairs(deck: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """List the indices (k1, k2), k1 < k2, of the card pairs not sharing exactly one symbol."""
    return [(k1, k2)
            for k1 in range(len(deck))
            for k2 in range(k1+1, len(deck))
            if common_symbol_count(deck[k1], deck[k2]) != 1]
