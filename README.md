# leetsolutions

Solutions to classic algorithm puzzles, written as plain Python functions,
together with a few small data structures they share. Only the standard
library is used.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `leetsolutions.structures` | `AllOne`, `TreeNode`, `MaxPriorityQueue` |
| `leetsolutions.stocks` | `max_profit`, `max_profit_unlimited`, `max_profit_two_transactions`, `max_profit_k_transactions` |
| `leetsolutions.text` | `get_hint`, `max_power`, `custom_sort_string`, `find_high_access_employees`, `group_anagrams`, `is_match`, `reverse_words`, `subdomain_visits`, `wrap_lines` |
| `leetsolutions.arrays` | `max_area`, `max_sub_array`, `largest_rectangle_area`, `max_result`, `longest_ones`, `subarrays_with_k_distinct`, `merge`, `remove_duplicates`, `search_insert`, `search_range`, `min_eating_speed`, `top_k_frequent`, `top_k_frequent_buckets` |
| `leetsolutions.dynamic` | `cherry_pickup`, `coin_change`, `change`, `num_decodings`, `max_coins`, `stone_game_ii`, `stone_game_iii`, `unique_paths`, `unique_paths_with_obstacles`, `word_break`, `word_break_sentences` |
| `leetsolutions.combinatorics` | `combination_sum`, `combination_sum2`, `combination_sum3`, `permute`, `permute_unique`, `generate_parenthesis`, `gray_code`, `remove_invalid_parentheses` |
| `leetsolutions.disjoint` | `DisjointSet`, `are_connected`, `latest_day_to_cross`, `find_redundant_connection`, `find_redundant_directed_connection`, `remove_stones` |
| `leetsolutions.graphs` | `schedule_course`, `check_if_prerequisite`, `critical_connections`, `find_cheapest_price`, `del_nodes` |
| `leetsolutions.cli` | `main`, behind the `leetsolutions` command |

## Examples

```python
from leetsolutions.stocks import max_profit
from leetsolutions.text import get_hint
from leetsolutions.dynamic import coin_change
from leetsolutions.structures import AllOne

max_profit([7, 1, 5, 3, 6, 4])      # 5
get_hint("1807", "7810")            # "1A3B"
coin_change([1, 2, 5], 11)          # 3

counter = AllOne()
counter.inc("a")
counter.inc("a")
counter.inc("b")
counter.get_max_key()               # "a"
counter.get_min_key()               # "b"
```

`MaxPriorityQueue` hands out the largest value first, and entries of equal
value in the order they were pushed:

```python
from leetsolutions.structures import MaxPriorityQueue

queue = MaxPriorityQueue()
queue.push(3, "low")
queue.push(7, "high")
queue.peek()                        # (7, "high")
queue.pop()                         # (7, "high")
len(queue)                          # 1
```

Disjoint sets can be used directly:

```python
from leetsolutions.disjoint import DisjointSet

sets = DisjointSet(4)
sets.union(0, 1)                    # True
sets.find(0) == sets.find(1)        # True
sets.union(1, 0)                    # False, already joined
```

## Behaviour worth knowing

- Several functions raise `ValueError` on input they cannot handle, for
  example a negative `amount` in `coin_change` and `change`, an empty string
  in `num_decodings` and `word_break`, or empty `piles` in `min_eating_speed`.
- `word_break` only tries pieces of two or more characters, so a
  one-letter word in the dictionary is never used on its own.
- `custom_sort_string` ranks characters missing from `order` together with
  the first character of `order`.
- `merge` and `remove_duplicates` change the list they are given in place.
- `del_nodes` detaches the deleted nodes from the tree it is given.

## Command line

Installing the package provides a `leetsolutions` command:

```
leetsolutions
```

It takes no options besides `--help`. It prints the minimum eating speed
that `min_eating_speed` finds for one fixed sample (a single pile of
312884470 within 968709470 hours), which is `1`.

## What it does not do

This is a library of standalone functions. The command only prints the one
fixed sample above; there is no way to choose a puzzle or supply input from
the command line.