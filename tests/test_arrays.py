import bisect
from collections import Counter

import pytest

from leetsolutions.arrays import (
    largest_rectangle_area,
    longest_ones,
    max_area,
    max_result,
    max_sub_array,
    merge,
    min_eating_speed,
    remove_duplicates,
    search_insert,
    search_range,
    subarrays_with_k_distinct,
    top_k_frequent,
    top_k_frequent_buckets,
)


def test_max_area_two_bars_uses_shorter_bar():
    assert max_area([4, 9]) == 4
    assert max_area([9, 4]) == 4


def test_max_area_is_bounded_by_tallest_times_width():
    heights = [1, 3, 1, 3, 5, 3, 6, 7]
    result = max_area(heights)
    assert result <= max(heights) * (len(heights) - 1)
    assert result >= min(heights[0], heights[-1]) * (len(heights) - 1)


def test_max_area_single_bar_holds_nothing():
    assert max_area([5]) == max_area([])


def test_max_sub_array_example():
    assert max_sub_array([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_sub_array_all_positive_is_total():
    nums = [3, 1, 4, 1, 5]
    assert max_sub_array(nums) == sum(nums)


def test_max_sub_array_all_negative_is_largest():
    nums = [-8, -3, -6]
    assert max_sub_array(nums) == max(nums)


def test_max_sub_array_empty():
    assert max_sub_array([]) == 0


def test_largest_rectangle_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_largest_rectangle_uniform():
    assert largest_rectangle_area([3] * 5) == 3 * 5


def test_largest_rectangle_at_least_tallest_bar():
    heights = [1, 4, 2, 9, 3]
    assert largest_rectangle_area(heights) >= max(heights)
    assert largest_rectangle_area([7]) == 7


def test_max_result_example():
    assert max_result([1, -1, -2, 4, -7, 3], 2) == 7


def test_max_result_single_step_visits_everything():
    nums = [1, -1, -2, 4, -7, 3]
    assert max_result(nums, 1) == sum(nums)


def test_max_result_long_jump_skips_negatives():
    nums = [2, -5, -9, 4]
    assert max_result(nums, len(nums)) == nums[0] + nums[-1]


@pytest.mark.parametrize("nums, k", [([], 2), ([1, 2], 0)])
def test_max_result_rejects_bad_input(nums, k):
    with pytest.raises(ValueError):
        max_result(nums, k)


def test_longest_ones_all_ones():
    nums = [1, 1, 1, 1, 1]
    assert longest_ones(nums, 3) == len(nums)


def test_longest_ones_enough_flips_covers_everything():
    nums = [0, 1, 0, 0, 1]
    assert longest_ones(nums, nums.count(0)) == len(nums)


def test_longest_ones_bounded_by_length():
    nums = [1, 1, 1, 0, 0, 0, 1, 1, 1, 1, 0]
    result = longest_ones(nums, 2)
    assert nums.count(1) <= result + nums.count(0) - 2 + 4
    assert result <= len(nums)
    assert result >= 4


def test_subarrays_with_k_distinct_example():
    assert subarrays_with_k_distinct([1, 2, 1, 2, 3], 2) == 7


def test_subarrays_with_one_distinct_over_distinct_values():
    nums = [5, 6, 7, 8]
    assert subarrays_with_k_distinct(nums, 1) == len(nums)


def test_subarrays_with_all_distinct_whole_array():
    nums = [5, 6, 7, 8]
    assert subarrays_with_k_distinct(nums, len(nums)) == 1


def test_subarrays_with_more_distinct_than_exist():
    assert subarrays_with_k_distinct([1, 1, 2], 3) == subarrays_with_k_distinct([], 1)


def test_merge_produces_sorted_union():
    first = [1, 2, 3, 0, 0, 0]
    second = [2, 5, 6]
    merge(first, 3, second, 3)
    assert first == sorted([1, 2, 3] + second)


def test_merge_into_empty_prefix():
    first = [0]
    merge(first, 0, [1], 1)
    assert first == [1]


def test_merge_rejects_short_target():
    with pytest.raises(ValueError):
        merge([1], 1, [2], 1)


def test_remove_duplicates_compacts_prefix():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    distinct = sorted(set(nums))
    length = remove_duplicates(nums)
    assert length == len(distinct)
    assert nums[:length] == distinct


def test_search_insert_found():
    nums = [0, 2, 3, 4, 5]
    assert search_insert(nums, 4) == nums.index(4)


@pytest.mark.parametrize("target", [-1, 1, 6])
def test_search_insert_missing_matches_bisect(target):
    nums = [0, 2, 3, 4, 5]
    assert search_insert(nums, target) == bisect.bisect_left(nums, target)


def test_search_range_example():
    assert search_range([5, 7, 7, 8, 8, 10], 8) == [3, 4]


def test_search_range_missing_and_empty():
    assert search_range([5, 7, 7, 8, 8, 10], 6) == [-1, -1]
    assert search_range([], 0) == [-1, -1]


def test_search_range_brackets_every_occurrence():
    nums = [1, 2, 2, 2, 2, 3]
    first, last = search_range(nums, 2)
    assert nums[first:last + 1] == [2] * nums.count(2)


def test_min_eating_speed_example():
    assert min_eating_speed([3, 6, 7, 11], 8) == 4


def test_min_eating_speed_one_hour_per_pile_needs_largest():
    piles = [30, 11, 23, 4, 20]
    assert min_eating_speed(piles, len(piles)) == max(piles)


def test_min_eating_speed_is_minimal():
    piles = [30, 11, 23, 4, 20]
    hours = 6
    speed = min_eating_speed(piles, hours)
    assert sum(-(-pile // speed) for pile in piles) <= hours
    assert sum(-(-pile // (speed - 1)) for pile in piles) > hours


def test_min_eating_speed_rejects_empty():
    with pytest.raises(ValueError):
        min_eating_speed([], 3)


def test_top_k_frequent_orders_by_frequency():
    nums = [1, 1, 1, 2, 2, 3]
    counts = Counter(nums)
    result = top_k_frequent(nums, 2)
    assert len(result) == 2
    assert [counts[v] for v in result] == sorted(counts.values(), reverse=True)[:2]


def test_top_k_frequent_more_than_distinct():
    nums = [1, 2]
    assert sorted(top_k_frequent(nums, 5)) == sorted(set(nums))


def test_top_k_frequent_buckets_matches_heap_version_without_ties():
    nums = [4, 4, 4, 4, 9, 9, 9, 2, 2, 7]
    assert top_k_frequent_buckets(nums, 2) == top_k_frequent(nums, 2)


def test_top_k_frequent_buckets_short_input_returned_as_is():
    assert top_k_frequent_buckets([8], 1) == [8]
    assert top_k_frequent_buckets([], 1) == []