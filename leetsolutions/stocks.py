"""Best time to buy and sell stock, in its four variants."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from at most one buy and one later sell."""
    lowest = None
    profit = 0
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        profit = max(profit, price - lowest)
    return profit


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit with any number of non-overlapping transactions."""
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Best profit with at most two non-overlapping transactions."""
    n = len(prices)
    if n == 0:
        return 0

    forward = [0] * n
    lowest = prices[0]
    for i in range(1, n):
        lowest = min(lowest, prices[i])
        forward[i] = max(forward[i - 1], prices[i] - lowest)

    backward = [0] * n
    highest = prices[-1]
    for j in range(n - 2, -1, -1):
        highest = max(highest, prices[j + 1])
        backward[j] = max(backward[j + 1], highest - prices[j + 1])

    return max(
        (first + second for first, second in zip(forward[1:], backward[1:])),
        default=0,
    )


def max_profit_k_transactions(k: int, prices: Sequence[int]) -> int:
    """Best profit with at most ``k`` non-overlapping transactions."""
    if k < 0:
        raise ValueError("k must not be negative")
    if len(prices) < 2:
        return 0
    previous = [0] * (len(prices) + 1)
    for _ in range(k):
        current = [0] * (len(prices) + 1)
        holding = -prices[0]
        for day, price in enumerate(prices, start=1):
            holding = max(holding, previous[day - 1] - price)
            current[day] = max(current[day - 1], holding + price)
        previous = current
    return previous[-1]