"""String puzzles: hints, runs, sorting, matching and formatting."""

from __future__ import annotations

from collections import Counter, defaultdict
from itertools import groupby
from typing import Iterable, Sequence


def get_hint(secret: str, guess: str) -> str:
    """Score a Bulls and Cows guess as ``"<bulls>A<cows>B"``."""
    if len(guess) < len(secret):
        raise ValueError("guess is shorter than the secret")
    bulls = 0
    secret_left: Counter[str] = Counter()
    guess_left: Counter[str] = Counter()
    for wanted, tried in zip(secret, guess):
        if wanted == tried:
            bulls += 1
        else:
            secret_left[wanted] += 1
            guess_left[tried] += 1
    cows = sum((secret_left & guess_left).values())
    return f"{bulls}A{cows}B"


def max_power(s: str) -> int:
    """Length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(s)), default=0)


def custom_sort_string(order: str, s: str) -> str:
    """Sort ``s`` by the positions of its characters in ``order``.

    Characters absent from ``order`` rank with its first character.
    """
    rank = {char: position for position, char in enumerate(order)}
    return "".join(sorted(s, key=lambda char: rank.get(char, 0)))


def _to_minutes(stamp: str) -> int:
    return int(stamp[:2]) * 60 + int(stamp[2:])


def find_high_access_employees(access_times: Iterable[Sequence[str]]) -> list[str]:
    """Names that accessed three or more times within less than an hour.

    Times are ``HHMM`` strings; names come back in order of first appearance.
    """
    minutes: dict[str, list[int]] = defaultdict(list)
    for entry in access_times:
        minutes[entry[0]].append(_to_minutes(entry[1]))
    result = []
    for name, times in minutes.items():
        times.sort()
        if any(later - earlier < 60 for earlier, later in zip(times, times[2:])):
            result.append(name)
    return result


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other."""
    groups: dict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def is_match(s: str, p: str) -> bool:
    """Match ``s`` against a pattern where ``?`` is one char and ``*`` any run."""
    i = j = match = 0
    last_star = -1
    while i < len(s):
        if j < len(p) and p[j] in (s[i], "?"):
            i += 1
            j += 1
        elif j < len(p) and p[j] == "*":
            last_star = j
            match = i
            j += 1
        elif last_star != -1:
            match += 1
            i = match
            j = last_star + 1
        else:
            return False
    while j < len(p) and p[j] == "*":
        j += 1
    return j == len(p)


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, collapsing the spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def subdomain_visits(cpdomains: Iterable[str]) -> list[str]:
    """Total visits per domain and each of its parent domains."""
    totals: dict[str, int] = defaultdict(int)
    for entry in cpdomains:
        parts = entry.split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed count-paired domain: {entry!r}")
        visits = int(parts[0])
        labels = parts[1].split(".")
        for start in reversed(range(len(labels))):
            totals[".".join(labels[start:])] += visits
    return [f"{count} {domain}" for domain, count in totals.items()]


def wrap_lines(words: Iterable[str], length: int) -> list[str]:
    """Join words with dashes into lines shorter than ``length``."""
    lines = []
    current = ""
    width = 0
    for word in words:
        if not current:
            current = word
            width += len(word)
        elif width + len(word) < length:
            current = f"{current}-{word}"
            width += len(word) + 1
        else:
            lines.append(current)
            current = word
            width = len(word)
    if current:
        lines.append(current)
    return lines