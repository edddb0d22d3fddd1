import pytest

from leetsolutions.stocks import (
    max_profit,
    max_profit_k_transactions,
    max_profit_two_transactions,
    max_profit_unlimited,
)

SAMPLES = [
    [1, 2, 3, 7, 3, 9],
    [1, 2, 3, 4, 5],
    [3, 2, 6, 5, 0, 3],
    [7, 6, 4, 3, 1],
    [3, 3, 5, 0, 0, 3, 1, 4],
    [5],
]


def test_single_transaction_example():
    assert max_profit([1, 2, 3, 7, 3, 9]) == 8


def test_unlimited_example():
    assert max_profit_unlimited([1, 2, 3, 7, 3, 9]) == 12


def test_k_transactions_example():
    assert max_profit_k_transactions(2, [3, 2, 6, 5, 0, 3]) == 7


def test_empty_prices_give_no_profit():
    assert max_profit([]) == 0
    assert max_profit_unlimited([]) == 0
    assert max_profit_two_transactions([]) == 0
    assert max_profit_k_transactions(3, []) == 0


@pytest.mark.parametrize("prices", SAMPLES)
def test_more_transactions_never_earn_less(prices):
    single = max_profit(prices)
    two = max_profit_two_transactions(prices)
    unlimited = max_profit_unlimited(prices)
    assert 0 <= single <= two <= unlimited


@pytest.mark.parametrize("prices", SAMPLES)
def test_k_variant_agrees_with_special_cases(prices):
    assert max_profit_k_transactions(1, prices) == max_profit(prices)
    assert max_profit_k_transactions(2, prices) == max_profit_two_transactions(prices)
    assert max_profit_k_transactions(len(prices), prices) == max_profit_unlimited(prices)
    assert max_profit_k_transactions(0, prices) == max_profit([])


@pytest.mark.parametrize("prices", SAMPLES)
def test_shifting_prices_keeps_profits(prices):
    shifted = [price + 100 for price in prices]
    assert max_profit(shifted) == max_profit(prices)
    assert max_profit_unlimited(shifted) == max_profit_unlimited(prices)
    assert max_profit_two_transactions(shifted) == max_profit_two_transactions(prices)


def test_rising_prices_profit_is_total_rise():
    prices = [1, 2, 3, 4, 5]
    rise = prices[-1] - prices[0]
    assert max_profit(prices) == rise
    assert max_profit_unlimited(prices) == rise
    assert max_profit_two_transactions(prices) == rise


def test_falling_prices_give_no_profit():
    prices = [7, 6, 4, 3, 1]
    assert max_profit(prices) == max_profit([])
    assert max_profit_two_transactions(prices) == max_profit([])


def test_negative_k_raises():
    with pytest.raises(ValueError):
        max_profit_k_transactions(-1, [1, 2, 3])