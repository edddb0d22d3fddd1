"""Array puzzles: windows, stacks, binary searches and frequency counts."""

from __future__ import annotations

import bisect
from collections import Counter, defaultdict, deque
from typing import MutableSequence, Sequence


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the vertical lines."""
    i, j = 0, len(height) - 1
    best = 0
    while i < j:
        best = max(best, (j - i) * min(height[i], height[j]))
        if height[i] > height[j]:
            j -= 1
        else:
            i += 1
    return best


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run; zero for an empty input."""
    if not nums:
        return 0
    best = nums[0]
    current = 0
    for value in nums:
        current = max(current, 0) + value
        best = max(best, current)
    return best


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under the histogram."""
    n = len(heights)
    lower_left = [-1] * n
    lower_right = [n] * n
    stack: list[int] = []
    for i, height in enumerate(heights):
        while stack and heights[stack[-1]] > height:
            lower_right[stack.pop()] = i
        if stack:
            lower_left[i] = stack[-1]
        stack.append(i)
    return max(
        (
            height * (right - left - 1)
            for height, left, right in zip(heights, lower_left, lower_right)
        ),
        default=0,
    )


def max_result(nums: Sequence[int], k: int) -> int:
    """Best score reaching the last index with jumps of at most ``k`` steps."""
    if not nums:
        raise ValueError("nums must not be empty")
    if k < 1:
        raise ValueError("k must be at least 1")
    best = [0] * len(nums)
    best[0] = nums[0]
    window = deque([0])
    for i in range(1, len(nums)):
        best[i] = nums[i] + best[window[0]]
        while window and best[window[-1]] <= best[i]:
            window.pop()
        window.append(i)
        while window[0] <= i - k:
            window.popleft()
    return best[-1]


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones after flipping at most ``k`` zeros."""
    left = right = flipped = best = 0
    while right < len(nums):
        if nums[right] == 1:
            right += 1
        elif flipped < k:
            flipped += 1
            right += 1
        else:
            left += 1
            if nums[left - 1] == 0:
                flipped -= 1
        best = max(best, right - left)
    return best


def subarrays_with_k_distinct(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays with exactly ``k`` distinct values.

    A ``k`` of zero counts as one.
    """
    if k == 0:
        return 1
    counts: defaultdict[int, int] = defaultdict(int)
    left = result = distinct = skipped = 0
    for value in nums:
        if counts[value] == 0:
            distinct += 1
        counts[value] += 1
        while distinct > k:
            skipped = 0
            if counts[nums[left]] == 1:
                distinct -= 1
            counts[nums[left]] -= 1
            left += 1
        if distinct == k:
            while counts[nums[left]] > 1:
                skipped += 1
                counts[nums[left]] -= 1
                left += 1
            result += skipped + 1
    return result


def merge(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place."""
    if m + n > len(nums1):
        raise ValueError("nums1 has no room for the merged values")
    i, j = m - 1, n - 1
    for slot in range(m + n - 1, -1, -1):
        if j < 0:
            break
        if i >= 0 and nums1[i] >= nums2[j]:
            nums1[slot] = nums1[i]
            i -= 1
        else:
            nums1[slot] = nums2[j]
            j -= 1


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list in place so each value appears once.

    Returns the length of the compacted prefix.
    """
    write = 0
    for value in nums:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in sorted ``nums``, or ``[-1, -1]``."""
    first = bisect.bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect.bisect_right(nums, target, lo=first) - 1]


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Slowest eating speed that finishes every pile within ``h`` hours."""
    if not piles:
        raise ValueError("piles must not be empty")
    low, high = 1, max(piles)
    found = high
    while low <= high:
        mid = (low + high) // 2
        if _hours_needed(piles, mid) <= h:
            found = mid
            high = mid - 1
        else:
            low = mid + 1
    return found


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Up to ``k`` values, most frequent first; ties keep first appearance."""
    return [value for value, _ in Counter(nums).most_common(max(k, 0))]


def top_k_frequent_buckets(nums: Sequence[int], k: int) -> list[int]:
    """Most frequent values gathered by whole frequency buckets.

    Buckets are taken from the highest frequency down, stopping once exactly
    ``k`` values have been gathered; otherwise every value is returned.
    """
    if len(nums) <= 1:
        return list(nums)
    buckets: defaultdict[int, list[int]] = defaultdict(list)
    for value, count in Counter(nums).items():
        buckets[count].append(value)
    result: list[int] = []
    for count in range(len(nums), 0, -1):
        result.extend(buckets.get(count, ()))
        if len(result) == k:
            break
    return result