"""Dynamic programming puzzles: grids, coins, decodings, games and word breaks."""

from __future__ import annotations

import math
from functools import cache
from typing import Iterable, Sequence

_UNREACHABLE = -999999


def cherry_pickup(grid: Sequence[Sequence[int]]) -> int:
    """Most cherries gathered on a round trip across a square grid.

    Cells hold 1 for a cherry, 0 for empty and -1 for a thorn that blocks
    the way. Returns 0 when no round trip is possible.
    """
    n = len(grid)

    @cache
    def best(i1: int, j1: int, i2: int) -> int:
        j2 = i1 + j1 - i2
        if i1 >= n or i2 >= n or j1 >= n or j2 >= n:
            return _UNREACHABLE
        if grid[i1][j1] == -1 or grid[i2][j2] == -1:
            return _UNREACHABLE
        if i1 == n - 1 and j1 == n - 1 and i2 == n - 1:
            return grid[i1][j1]

        if i1 == i2 and j1 == j2 and grid[i1][j1] == 1:
            gathered = 1
        else:
            gathered = grid[i1][j1] + grid[i2][j2]

        return gathered + max(
            best(i1 + 1, j1, i2 + 1),
            best(i1, j1 + 1, i2),
            best(i1 + 1, j1, i2),
            best(i1, j1 + 1, i2 + 1),
        )

    return max(0, best(0, 0, 0))


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Fewest coins that add up to ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    denominations = sorted(coins)
    if denominations and denominations[0] < 0:
        raise ValueError("coin values must not be negative")
    fewest: list[float] = [0] + [math.inf] * amount
    for total in range(1, amount + 1):
        for coin in denominations:
            if coin > total:
                break
            fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    result = fewest[amount]
    return -1 if result == math.inf else int(result)


def change(amount: int, coins: Iterable[int]) -> int:
    """Number of coin combinations that add up to ``amount``."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        if coin < 0:
            raise ValueError("coin values must not be negative")
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def _is_letter_code(pair: str) -> bool:
    if not (pair.isascii() and pair.isdigit()):
        return False
    return 9 < int(pair) < 27


def num_decodings(s: str) -> int:
    """Number of ways to read a digit string as letters numbered 1 to 26."""
    if not s:
        raise ValueError("s must not be empty")
    if s[0] == "0":
        return 0
    ways = [0] * len(s)
    ways[0] = 1
    for i in range(1, len(s)):
        if s[i] != "0":
            ways[i] = ways[i - 1]
        if _is_letter_code(s[i - 1 : i + 1]):
            ways[i] += ways[i - 2] if i > 1 else 1
    return ways[-1]


def max_coins(nums: Sequence[int]) -> int:
    """Most coins won by bursting every balloon in the best order."""
    n = len(nums)
    padded = [1, *nums, 1]
    best = [[0] * (n + 2) for _ in range(n + 2)]
    for length in range(1, n + 1):
        for left in range(1, n - length + 2):
            right = left + length - 1
            for last in range(left, right + 1):
                gain = padded[left - 1] * padded[last] * padded[right + 1]
                best[left][right] = max(
                    best[left][right],
                    best[left][last - 1] + gain + best[last + 1][right],
                )
    return best[1][n]


def stone_game_ii(piles: Sequence[int]) -> int:
    """Most stones the first player can take in Stone Game II."""
    n = len(piles)

    @cache
    def best(start: int, m: int, remaining: int) -> int:
        if start + 2 * m >= n:
            return remaining
        opponent = math.inf
        left = remaining
        for take in range(1, 2 * m + 1):
            left -= piles[start + take - 1]
            opponent = min(opponent, best(start + take, max(take, m), left))
        return remaining - opponent

    return int(best(0, 1, sum(piles)))


def stone_game_iii(piles: Sequence[int]) -> str:
    """Winner of Stone Game III: ``"Alice"``, ``"Bob"`` or ``"Tie"``."""
    n = len(piles)
    best = [0] * (n + 1)
    remaining = 0
    for start in range(n - 1, -1, -1):
        remaining += piles[start]
        best[start] = remaining - min(
            best[start + take] for take in range(1, 4) if start + take <= n
        )
    total = sum(piles)
    alice = best[0]
    if total - alice < alice:
        return "Alice"
    if total - alice > alice:
        return "Bob"
    return "Tie"


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be at least 1")
    row = [1] * n
    for _ in range(1, m):
        for j in range(1, n):
            row[j] += row[j - 1]
    return row[-1]


def unique_paths_with_obstacles(obstacle_grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths across a grid avoiding cells marked 1."""
    if not obstacle_grid:
        return 0
    width = len(obstacle_grid[0])
    if width == 0:
        raise ValueError("grid rows must not be empty")
    row = [0] * width
    for i, cells in enumerate(obstacle_grid):
        for j in range(width):
            if cells[j] == 1:
                row[j] = 0
            elif i == 0 and j == 0:
                row[j] = 1
            elif j > 0:
                row[j] += row[j - 1]
    return row[-1]


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Whether ``s`` splits into dictionary words.

    Only pieces of two or more characters are tried.
    """
    if not s:
        raise ValueError("s must not be empty")
    words = set(word_dict)
    splits = [False] * len(s)
    for i in range(len(s)):
        for j in range(i - 1, -1, -1):
            if splits[i]:
                break
            if s[j : i + 1] in words:
                splits[i] = splits[j - 1] if j > 0 else True
    return splits[-1]


def word_break_sentences(s: str, word_dict: Iterable[str]) -> list[str]:
    """Every way to split ``s`` into dictionary words, joined by spaces."""
    if not s:
        raise ValueError("s must not be empty")
    words = set(word_dict)
    sentences: list[list[str]] = [[] for _ in s]
    for i in range(len(s)):
        for j in range(i + 1):
            piece = s[j : i + 1]
            if piece not in words:
                continue
            if j > 0:
                sentences[i].extend(f"{prefix} {piece}" for prefix in sentences[j - 1])
            else:
                sentences[i].append(piece)
    return sentences[-1]