#!/usr/bin/python3
"""Test Deck Filter."""
import pytest

from dobble_deck.steps.filter import filter_valid_cards
from dobble_deck.steps.optim import get_cards
from dobble_deck.steps.validate import is_valid_deck


def test_empty_deck() -> None:
    """Test nothing is returned for an empty deck."""
    assert filter_valid_cards([]) == []


def test_single_card() -> None:
    """Test a single card is kept."""
    assert filter_valid_cards([[1, 2, 3]]) == [[1, 2, 3]]


def test_valid_deck_is_unchanged() -> None:
    """Test an already valid deck is returned with the same cards in the same order."""
    # GIVEN
    cards = get_cards(4)

    # WHEN
    filtered = filter_valid_cards(cards)

    # THEN
    assert filtered == cards


def test_greedy_selection() -> None:
    """Test cards are accepted in their original order, restarting after each acceptance."""
    # GIVEN
    deck = [[1, 2],
            [3, 4],  # Nothing in common with the first card
            [1, 3],
            [2, 3],
            [1, 4]]  # Nothing in common with [2, 3]

    # WHEN
    filtered = filter_valid_cards(deck)

    # THEN
    assert filtered == [[1, 2], [1, 3], [2, 3]]
    assert is_valid_deck(filtered)


def test_order_sensitivity() -> None:
    """Test the selected cards depend on the order of the input deck."""
    # GIVEN
    deck = [[1, 2], [1, 3], [2, 3], [2, 4]]

    # WHEN
    filtered = filter_valid_cards(deck)
    filtered_reversed = filter_valid_cards(deck[::-1])

    # THEN
    assert filtered == [[1, 2], [1, 3], [2, 3]]
    assert filtered_reversed == [[2, 4], [2, 3], [1, 2]]


def test_input_is_not_modified() -> None:
    """Test the input deck is left untouched."""
    # GIVEN
    deck = [[1, 2], [3, 4], [1, 3]]
    copy = [list(card) for card in deck]

    # WHEN
    filtered = filter_valid_cards(deck)
    filtered[0].append(5)

    # THEN
    assert deck == copy


@pytest.mark.parametrize("symbols_per_card", [5, 7, 9, 10])
def test_filter_invalid_raw_deck(symbols_per_card: int) -> None:
    """Test the filtered deck is a smaller valid deck starting with the first card."""
    # GIVEN
    cards = get_cards(symbols_per_card)

    # WHEN
    filtered = filter_valid_cards(cards)

    # THEN
    assert 1 <= len(filtered) < len(cards)
    assert filtered[0] == cards[0]
    assert is_valid_deck(filtered)
    assert all(card in cards for card in filtered)
    assert filter_valid_cards(cards) == filtered
