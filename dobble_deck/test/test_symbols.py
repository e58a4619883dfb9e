#!/usr/bin/python3
"""Test Symbol Arithmetic."""
import pytest

from dobble_deck.steps.symbols import common_symbol_count
from dobble_deck.steps.symbols import order
from dobble_deck.steps.symbols import total_symbols


@pytest.mark.parametrize("symbols_per_card", range(2, 16))
def test_total_symbols(symbols_per_card: int) -> None:
    """Test total number of symbols is n^2 + n + 1."""
    # GIVEN
    n = symbols_per_card - 1

    # WHEN
    total = total_symbols(symbols_per_card)

    # THEN
    assert order(symbols_per_card) == n
    assert total == n**2 + n + 1


def test_total_symbols_known_values() -> None:
    """Test junior and standard Dobble sizes."""
    assert total_symbols(2) == 3
    assert total_symbols(6) == 31
    assert total_symbols(8) == 57


def test_common_symbol_count() -> None:
    """Test common symbols are counted on both orders."""
    # GIVEN
    card_a = [1, 2, 3, 4]
    card_b = [4, 5, 3, 6]
    card_c = [7, 8, 9, 10]

    # THEN
    assert common_symbol_count(card_a, card_b) == 2
    assert common_symbol_count(card_b, card_a) == 2
    assert common_symbol_count(card_a, card_c) == 0
    assert common_symbol_count(card_c, card_a) == 0
    assert common_symbol_count(card_a, card_a) == 4
    assert common_symbol_count([], card_a) == 0
