#!/usr/bin/python3
"""Extract a valid sub-deck from an invalid deck."""
from collections.abc import Sequence

from dobble_deck.steps.symbols import common_symbol_count
from dobble_deck.utils.profiling import profile


def _is_compatible(candidate: Sequence[int], accepted: list[list[int]]) -> bool:
    return all(common_symbol_count(candidate, card) == 1 for card in accepted)


@profile
def filter_valid_cards(deck: Sequence[Sequence[int]]) -> list[list[int]]:
    """Greedily select cards sharing exactly one symbol with each other.

    Start from the first card, then repeatedly scan the remaining cards in their
    original order and accept the first one that is compatible with all the
    accepted cards. After each acceptance the scan restarts from the beginning.
    Stop when a full scan doesn't accept anything.

    The result is deterministic but isn't guaranteed to be the largest valid subset.
    """
    if len(deck) == 0:
        return []

    accepted = [list(deck[0])]
    used = [False] * len(deck)
    used[0] = True

    added = True
    while added:
        added = False
        for idx in range(1, len(deck)):
            if used[idx]:
                continue
            if _is_compatible(deck[idx], accepted):
                accepted.append(list(deck[idx]))
                used[idx] = True
                added = True
                break  # Restart the scan

    return accepted
