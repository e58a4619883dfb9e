#!/usr/bin/python3
"""Deck statistics: symbol distribution and pairwise intersections."""
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from dobble_deck.generator import GenerationResult
from dobble_deck.utils.np_types import NpBoolArrayType
from dobble_deck.utils.np_types import NpIntArrayType


def incidence_matrix(deck: Sequence[Sequence[int]], n_symbols: int) -> NpBoolArrayType:
    """Get the (n_cards, n_symbols) boolean matrix, True where the symbol is on the card.

    Symbols are 1-indexed, column k stands for symbol k+1.
    """
    matrix = np.zeros((len(deck), n_symbols), dtype=bool)
    for row, card in enumerate(deck):
        matrix[row, np.asarray(card, dtype=int) - 1] = True
    return matrix


def symbol_frequencies(deck: Sequence[Sequence[int]], n_symbols: int) -> NpIntArrayType:
    """Get the number of cards each symbol appears on."""
    return np.count_nonzero(incidence_matrix(deck, n_symbols), axis=0)


def intersection_histogram(deck: Sequence[Sequence[int]]) -> dict[int, int]:
    """Count the pairs of distinct cards for each number of common symbols."""
    if len(deck) < 2:
        return {}
    n_symbols = max(max(card) for card in deck)
    matrix = incidence_matrix(deck, n_symbols).astype(int)
    inter = matrix @ matrix.T
    upper = inter[np.triu_indices(len(deck), k=1)]
    values, counts = np.unique(upper, return_counts=True)
    return {int(v): int(c) for v, c in zip(values, counts)}


@dataclass(frozen=True)
class DeckStats:
    n_cards: int
    n_unused_symbols: int
    min_frequency: int
    max_frequency: int
    histogram: dict[int, int]


def compute_stats(result: GenerationResult) -> DeckStats:
    """Compute the statistics of the displayed cards of a generation result."""
    frequencies = symbol_frequencies(result.cards, result.total_symbols)
    used = frequencies[frequencies > 0]
    return DeckStats(n_cards=len(result.cards),
                     n_unused_symbols=int(np.count_nonzero(frequencies == 0)),
                     min_frequency=int(used.min()) if used.size > 0 else 0,
                     max_frequency=int(used.max()) if used.size > 0 else 0,
                     histogram=intersection_histogram(result.cards))
