"""Enumeration puzzles: combination sums, permutations and bracket strings."""

from __future__ import annotations

from collections import Counter
from functools import cache
from itertools import permutations
from typing import Iterable, Iterator, Sequence


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Every multiset of candidates, each usable any number of times, summing to ``target``.

    Each combination lists its values in non-decreasing order.
    """
    if target < 0:
        raise ValueError("target must not be negative")
    pool = sorted(candidates)
    if pool and pool[0] <= 0:
        raise ValueError("candidates must be positive")
    ways: list[list[list[int]]] = [[] for _ in range(target + 1)]
    ways[0].append([])
    for value in pool:
        for total in range(value, target + 1):
            ways[total].extend([*combo, value] for combo in ways[total - value])
    return ways[target]


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Every distinct combination of candidates, each used at most once, summing to ``target``."""
    pool = sorted(candidates)
    found: list[list[int]] = []

    def search(start: int, remaining: int, chosen: list[int]) -> None:
        if remaining == 0:
            found.append(chosen)
        if start >= len(pool) or remaining < 0:
            return
        for i, value in enumerate(pool[start:], start=start):
            if i > start and value == pool[i - 1]:
                continue
            if value <= remaining:
                search(i + 1, remaining - value, [*chosen, value])

    search(0, target, [])
    return found


def combination_sum3(k: int, target: int) -> list[list[int]]:
    """Every set of ``k`` distinct digits from 1 to 9 summing to ``target``."""
    found: list[list[int]] = []

    def search(first: int, remaining: int, chosen: list[int]) -> None:
        if remaining == 0 and len(chosen) == k:
            found.append(chosen)
        if first > 9 or remaining < 0 or len(chosen) > k:
            return
        for digit in range(first, 10):
            if digit <= remaining:
                search(digit + 1, remaining - digit, [*chosen, digit])

    search(1, target, [])
    return found


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Every ordering of ``nums``, in order of the input positions."""
    return [list(ordering) for ordering in permutations(nums)]


def permute_unique(nums: Iterable[int]) -> list[list[int]]:
    """Every distinct ordering of ``nums``, in ascending lexicographic order."""
    counts = Counter(nums)
    values = sorted(counts)
    total = sum(counts.values())

    def extend(prefix: list[int]) -> Iterator[list[int]]:
        if len(prefix) == total:
            yield list(prefix)
            return
        for value in values:
            if counts[value]:
                counts[value] -= 1
                prefix.append(value)
                yield from extend(prefix)
                prefix.pop()
                counts[value] += 1

    return list(extend([]))


@cache
def _parenthesis(n: int) -> tuple[str, ...]:
    if n == 0:
        return ("",)
    return tuple(
        f"({inner}){rest}"
        for split in range(n)
        for inner in _parenthesis(split)
        for rest in _parenthesis(n - split - 1)
    )


def generate_parenthesis(n: int) -> list[str]:
    """Every well-formed string of ``n`` pairs of parentheses."""
    if n < 0:
        return []
    return list(_parenthesis(n))


def gray_code(n: int) -> list[int]:
    """A reflected Gray code sequence over ``n`` bits, starting at zero."""
    if n < 1:
        raise ValueError("n must be at least 1")
    codes = [0, 1]
    for _ in range(n - 1):
        codes = [code << 1 for code in codes] + [(code << 1) | 1 for code in reversed(codes)]
    return codes


def remove_invalid_parentheses(s: str) -> list[str]:
    """Every valid string left after removing the fewest parentheses from ``s``."""
    extra_open = extra_close = 0
    for char in s:
        if char == "(":
            extra_open += 1
        elif char == ")":
            if extra_open == 0:
                extra_close += 1
            else:
                extra_open -= 1

    found: dict[str, None] = {}

    def walk(pos: int, opened: int, closed: int, drop_open: int, drop_close: int, kept: str) -> None:
        if pos == len(s) and drop_open == 0 and drop_close == 0:
            found[kept] = None
            return
        if pos >= len(s):
            return
        char = s[pos]
        if char == "(" and drop_open > 0:
            walk(pos + 1, opened, closed, drop_open - 1, drop_close, kept)
        elif char == ")" and drop_close > 0:
            walk(pos + 1, opened, closed, drop_open, drop_close - 1, kept)
        kept += char
        if char == "(":
            walk(pos + 1, opened + 1, closed, drop_open, drop_close, kept)
        elif char == ")":
            if opened > closed:
                walk(pos + 1, opened, closed + 1, drop_open, drop_close, kept)
        else:
            walk(pos + 1, opened, closed, drop_open, drop_close, kept)

    walk(0, 0, 0, extra_open, extra_close, "")
    return list(found)