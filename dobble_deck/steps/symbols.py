#!/usr/bin/python3
"""Symbol arithmetic."""
from collections.abc import Sequence


def order(n_symbols_per_card: int) -> int:
    """Get the order n of the plane, i.e. the number of symbols per card minus one."""
    return n_symbols_per_card - 1


def total_symbols(n_symbols_per_card: int) -> int:
    """Get the number of distinct symbols n^2 + n + 1 for a given number of symbols per card."""
    n = order(n_symbols_per_card)
    return n*n + n + 1


def common_symbol_count(card_a: Sequence[int], card_b: Sequence[int]) -> int:
    """Count the symbols present on both cards.

    Cards hold at most 15 symbols, so a plain double loop is enough.
    """
    count = 0
    for s_a in card_a:
        for s_b in card_b:
            if s_a == s_b:
                count += 1
    return count
