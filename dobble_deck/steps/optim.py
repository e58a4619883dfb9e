# /usr/bin/python3
"""Solve the Dobble symbols distribution."""
from dobble_deck.steps.symbols import order
from dobble_deck.utils.asserts import assert_len


def get_n_cards(n_symbols_per_card: int) -> int:
    """Get the number of cards 1 + n + n^2 built for a given number of symbols per card."""
    n = order(n_symbols_per_card)
    return 1 + n + n*n


def get_cards(n_symbols_per_card: int) -> list[list[int]]:
    """Get Cards.

    Build the 1 + n + n^2 lines of the projective plane of order n = n_symbols_per_card - 1,
    using 1-indexed symbols in [1, n^2 + n + 1].

    The formula only gives a valid deck when n is prime. Nothing is checked here,
    use the validator on the output.
    """
    n = order(n_symbols_per_card)
    cards: list[list[int]] = []

    # Line at infinity
    cards.append([i+1 for i in range(n+1)])

    # n vertical lines, all going through symbol 1
    for i in range(n):
        cards.append([1] + [(n+1) + i*n + j + 1 for j in range(n)])

    # n^2 lines of slope i and intercept j, going through the point at infinity i+2
    for i in range(n):
        for j in range(n):
            cards.append([i+2] + [(n+1) + k*n + (i*k+j) % n + 1 for k in range(n)])

    assert_len(cards, get_n_cards(n_symbols_per_card))
    for card in cards:
        assert_len(card, n+1)
    return cards
