#!/usr/bin/python3
"""Test Deck Statistics."""
import numpy as np

from dobble_deck.generator import generate
from dobble_deck.steps.stats import compute_stats
from dobble_deck.steps.stats import incidence_matrix
from dobble_deck.steps.stats import intersection_histogram
from dobble_deck.steps.stats import symbol_frequencies


def test_incidence_matrix() -> None:
    """Test 1-indexed symbols are mapped to columns."""
    # GIVEN
    deck = [[1, 2], [1, 3], [2, 3]]

    # WHEN
    matrix = incidence_matrix(deck, 3)

    # THEN
    np.testing.assert_array_equal(matrix, [[True, True, False],
                                           [True, False, True],
                                           [False, True, True]])


def test_symbol_frequencies() -> None:
    """Test unused symbols have a zero frequency."""
    # GIVEN
    deck = [[1, 2], [1, 4]]

    # WHEN
    frequencies = symbol_frequencies(deck, 5)

    # THEN
    np.testing.assert_array_equal(frequencies, [2, 1, 0, 1, 0])


def test_intersection_histogram() -> None:
    """Test pairs of cards are counted per number of common symbols."""
    assert intersection_histogram([]) == {}
    assert intersection_histogram([[1, 2]]) == {}
    assert intersection_histogram([[1, 2], [1, 3], [2, 3]]) == {1: 3}
    assert intersection_histogram([[1, 2, 3], [1, 2, 4], [5, 6, 7]]) == {0: 2, 2: 1}


def test_valid_deck_stats() -> None:
    """Test each symbol of the Fano plane appears on 3 cards."""
    # WHEN
    stats = compute_stats(generate(3))

    # THEN
    assert stats.n_cards == 7
    assert stats.n_unused_symbols == 0
    assert stats.min_frequency == 3
    assert stats.max_frequency == 3
    assert stats.histogram == {1: 21}


def test_filtered_deck_stats() -> None:
    """Test a filtered deck only has pairs sharing one symbol."""
    # GIVEN
    result = generate(5)
    n_cards = len(result.cards)

    # WHEN
    stats = compute_stats(result)

    # THEN
    assert stats.n_cards == n_cards
    assert stats.histogram == {1: n_cards * (n_cards - 1) // 2}
