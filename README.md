# algopractice

Solutions to well-known algorithm problems, grouped by theme. The package also
has small helpers that build linked lists and binary trees from their usual
bracketed text form, such as `"[1,2,3]"` or `"[3,9,20,null,null,15,7]"`.

It needs only the standard library and Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Helpers

- `algopractice.parsing`: `parse_matrix`, `parse_pairs`, `parse_values` and
  `parse_optional_values` turn text such as `"[[1,2],[3,4]]"` or
  `"[1,null,3]"` into lists of integers. In `parse_optional_values`, `null`
  becomes `None`.
- `algopractice.linked_list`: the `ListNode` dataclass (`val`, `next`) with
  the class methods `from_str`, `from_list`, `from_num` and
  `from_num_reversed`. A node can be iterated over its values and has
  `to_list()`. `str()` shows at most 15 values and then `...`. The functions
  `list_to_str`, `list_to_num` and `list_to_num_reversed` take a head node or
  `None`.
- `algopractice.binary_tree`: the `TreeNode` dataclass (`val`, `left`,
  `right`) with the class methods `from_str` and `from_list`, both in level
  order. It also has `iter_bfs()`, which gives level-order values with `None`
  for gaps and no trailing gaps, and `to_list()`. `str()` shows at most 15
  values and then `...`. `tree_to_str(root)` renders a whole tree and gives
  `"[]"` for `None`.

## Problems

- `algopractice.linked_list_problems`: `add_two_numbers`, `reverse_k_group`
  (changes the list in place), `reverse_k_group_recursive` (builds new nodes),
  `odd_even_list`, `middle_node`, `middle_node_by_count`.
- `algopractice.lru`: `LRUCache(capacity)` with `get(key)`, which returns
  `-1` when the key is absent, `put(key, value)` and `len()`.
- `algopractice.tree_problems`: `zigzag_level_order`,
  `find_duplicate_subtrees`, `leaf_similar`, `range_sum_bst`,
  `is_complete_tree`, `max_product`.
- `algopractice.graphs`: `sort_items`, `count_sub_trees`, `valid_path`,
  `number_of_good_paths`.
- `algopractice.text_matching`: `is_match` and `is_match_bottom_up` (patterns
  with `.` and `*`), `str_str` (KMP) and `str_str_rolling_hash`,
  `find_substring`, `word_pattern`, `longest_common_subsequence`,
  `minimum_score`.
- `algopractice.integers`: `reverse_integer`, `is_palindrome_number`,
  `divide`, `closest_primes`, `punishment_number`, `num_tilings`,
  `num_rolls_to_target`.
- `algopractice.strings`: `length_of_longest_substring`,
  `length_of_longest_substring_indexed`, `longest_palindrome`,
  `zigzag_convert`, `my_atoi`, `frequency_sort`,
  `optimal_compression_length`, `find_the_string`.
- `algopractice.grids`: `max_points`, `longest_increasing_path`,
  `snakes_and_ladders`, `unique_paths_iii`, `max_distance`.
- `algopractice.searching`: `two_sum`, `find_median_sorted_arrays`,
  `search_rotated`, `two_sum_sorted`, `daily_temperatures`, `sort_array`
  (quicksort, returns a sorted copy), `minimum_average_difference`,
  `minimum_rounds`, `count_subarrays`.
- `algopractice.intervals`: `find_min_arrow_shots`, `connect_sticks`,
  `get_order`, `count_ways`, `restore_array`.
- `algopractice.dynamic_programming`: `can_jump`, `can_jump_scan`,
  `can_jump_reach`, `find_paths`, `find_longest_chain_graph`,
  `find_longest_chain_dp`, `find_longest_chain_greedy`,
  `len_longest_fib_subseq`, `min_falling_path_sum`,
  `min_falling_path_sum_reduce`, `mct_from_leaf_values`, `min_difficulty`,
  `max_dot_product`, `min_cost`, `maximum_score`.

Where a problem has its own "not found" answer, the function returns it, for
example `-1`, `[-1, -1]` or `""`. Some inputs raise `ValueError`: empty inputs
that a problem does not allow, and `two_sum` or `two_sum_sorted` when no pair
exists. `divide` raises `ZeroDivisionError` when the divisor is zero.

## Example

```python
from algopractice.binary_tree import TreeNode, tree_to_str
from algopractice.tree_problems import zigzag_level_order
from algopractice.linked_list import ListNode, list_to_str
from algopractice.linked_list_problems import reverse_k_group
from algopractice.lru import LRUCache

root = TreeNode.from_str("[3,9,20,null,null,15,7]")
print(zigzag_level_order(root))          # [[3], [20, 9], [15, 7]]
print(tree_to_str(root))                 # [3,9,20,null,null,15,7]

head = ListNode.from_str("[1,2,3,4,5]")
print(list_to_str(reverse_k_group(head, 2)))  # [2,1,4,3,5]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
print(cache.get(1))                      # 1
```

## What it does not do

This is a library only. It has no command-line tool, and it reads no input
files: you pass the inputs to the functions yourself, either as Python lists
or as text through the parsing helpers.