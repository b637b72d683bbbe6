import pytest

from algopractice.dynamic_programming import (
    can_jump,
    can_jump_reach,
    can_jump_scan,
    find_longest_chain_dp,
    find_longest_chain_graph,
    find_longest_chain_greedy,
    find_paths,
    len_longest_fib_subseq,
    max_dot_product,
    maximum_score,
    mct_from_leaf_values,
    min_cost,
    min_difficulty,
    min_falling_path_sum,
    min_falling_path_sum_reduce,
)
from algopractice.parsing import parse_matrix, parse_pairs

JUMP_CASES = [([0], True), ([2, 3, 1, 1, 4], True), ([3, 2, 1, 0, 4], False)]


@pytest.mark.parametrize("nums, expected", JUMP_CASES)
def test_can_jump(nums, expected):
    assert can_jump(nums) == expected


@pytest.mark.parametrize("nums, expected", JUMP_CASES)
def test_can_jump_scan(nums, expected):
    assert can_jump_scan(nums) == expected


@pytest.mark.parametrize("nums, expected", JUMP_CASES)
def test_can_jump_reach(nums, expected):
    assert can_jump_reach(nums) == expected


def test_can_jump_rejects_empty():
    with pytest.raises(ValueError):
        can_jump([])


@pytest.mark.parametrize(
    "m, n, max_move, start_row, start_column, expected",
    [(2, 2, 2, 0, 0, 6), (1, 3, 3, 0, 1, 12)],
)
def test_find_paths(m, n, max_move, start_row, start_column, expected):
    assert find_paths(m, n, max_move, start_row, start_column) == expected


def test_find_paths_no_moves():
    assert find_paths(3, 3, 0, 1, 1) == 0


def test_find_paths_rejects_outside_start():
    with pytest.raises(ValueError):
        find_paths(2, 2, 1, 5, 0)


CHAIN_CASES = [("[[1,2],[7,8],[4,5]]", 3), ("[[1,2],[2,3],[3,4]]", 2)]


@pytest.mark.parametrize("pairs, expected", CHAIN_CASES)
def test_find_longest_chain_graph(pairs, expected):
    assert find_longest_chain_graph(parse_pairs(pairs)) == expected


@pytest.mark.parametrize("pairs, expected", CHAIN_CASES)
def test_find_longest_chain_dp(pairs, expected):
    assert find_longest_chain_dp(parse_pairs(pairs)) == expected


@pytest.mark.parametrize("pairs, expected", CHAIN_CASES)
def test_find_longest_chain_greedy(pairs, expected):
    assert find_longest_chain_greedy(parse_pairs(pairs)) == expected


@pytest.mark.parametrize(
    "arr, expected",
    [
        ([1, 2, 3, 4, 5, 6, 7, 8], 5),
        ([1, 3, 7, 11, 12, 14, 18], 3),
        ([2, 5, 6, 7, 8, 10, 12, 17, 24, 41, 65], 5),
    ],
)
def test_len_longest_fib_subseq(arr, expected):
    assert len_longest_fib_subseq(arr) == expected


FALLING_CASES = [
    ("[[2,1,3],[6,5,4],[7,8,9]]", 13),
    ("[[-19,57],[-40,-5]]", -59),
    ("[[1]]", 1),
]


@pytest.mark.parametrize("matrix, expected", FALLING_CASES)
def test_min_falling_path_sum(matrix, expected):
    assert min_falling_path_sum(parse_matrix(matrix)) == expected


@pytest.mark.parametrize("matrix, expected", FALLING_CASES)
def test_min_falling_path_sum_reduce(matrix, expected):
    assert min_falling_path_sum_reduce(parse_matrix(matrix)) == expected


def test_min_falling_path_sum_leaves_input_untouched():
    matrix = parse_matrix("[[2,1,3],[6,5,4],[7,8,9]]")
    min_falling_path_sum(matrix)
    assert matrix == [[2, 1, 3], [6, 5, 4], [7, 8, 9]]


def test_min_falling_path_sum_rejects_empty():
    with pytest.raises(ValueError):
        min_falling_path_sum([])


@pytest.mark.parametrize("arr, expected", [([4, 11], 44), ([6, 2, 4], 32), ([5], 0)])
def test_mct_from_leaf_values(arr, expected):
    assert mct_from_leaf_values(arr) == expected


@pytest.mark.parametrize(
    "jobs, days, expected",
    [([6, 5, 4, 3, 2, 1], 2, 7), ([9, 9, 9], 4, -1), ([1, 1, 1], 3, 3)],
)
def test_min_difficulty(jobs, days, expected):
    assert min_difficulty(jobs, days) == expected


@pytest.mark.parametrize(
    "nums1, nums2, expected",
    [
        ([2, 1, -2, 5], [3, 0, -6], 18),
        ([3, -2], [2, -6, 7], 21),
        ([-1, -1], [1, 1], -1),
        ([-3, -8, 3, -10, 1, 3, 9], [9, 2, 3, 7, -9, 1, -8, 5, -1, -1], 200),
    ],
)
def test_max_dot_product(nums1, nums2, expected):
    assert max_dot_product(nums1, nums2) == expected


@pytest.mark.parametrize(
    "houses, cost, m, n, target, expected",
    [
        ([1, 2], "[[1,1],[1,1]]", 2, 2, 1, -1),
        ([0, 0, 0, 0, 0], "[[1,10],[10,1],[10,1],[1,10],[5,1]]", 5, 2, 3, 9),
        ([0, 2, 1, 2, 0], "[[1,10],[10,1],[10,1],[1,10],[5,1]]", 5, 2, 3, 11),
        ([3, 1, 2, 3], "[[1,1,1],[1,1,1],[1,1,1],[1,1,1]]", 4, 3, 3, -1),
    ],
)
def test_min_cost(houses, cost, m, n, target, expected):
    assert min_cost(houses, parse_matrix(cost), m, n, target) == expected


@pytest.mark.parametrize(
    "nums, multipliers, expected",
    [([1, 2, 3], [3, 2, 1], 14), ([-5, -3, -3, -2, 7, 1], [-10, -5, 3, 4, 6], 102)],
)
def test_maximum_score(nums, multipliers, expected):
    assert maximum_score(nums, multipliers) == expected