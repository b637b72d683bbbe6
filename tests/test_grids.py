import pytest

from algopractice.grids import (
    longest_increasing_path,
    max_distance,
    max_points,
    snakes_and_ladders,
    unique_paths_iii,
)
from algopractice.parsing import parse_matrix, parse_pairs


@pytest.mark.parametrize(
    "points, expected",
    [
        ("[[1,1]", 1),
        ("[[1,1],[2,2],[3,3]]", 3),
        ("[[1,1],[3,2],[5,3],[4,1],[2,3],[1,4]]", 4),
    ],
)
def test_max_points(points, expected):
    assert max_points(parse_pairs(points)) == expected


def test_longest_increasing_path():
    assert longest_increasing_path(parse_matrix("[[3,4,5],[3,2,6],[2,2,1]]")) == 4


def test_longest_increasing_path_flat_matrix():
    assert longest_increasing_path([[7, 7], [7, 7]]) == 1


def test_longest_increasing_path_rejects_empty():
    with pytest.raises(ValueError):
        longest_increasing_path([])


@pytest.mark.parametrize(
    "board, expected",
    [
        (
            "[[-1,-1,-1,46,47,-1,-1,-1],[51,-1,-1,63,-1,31,21,-1],[-1,-1,26,-1,-1,38,-1,-1],"
            "[-1,-1,11,-1,14,23,56,57],[11,-1,-1,-1,49,36,-1,48],[-1,-1,-1,33,56,-1,57,21],"
            "[-1,-1,-1,-1,-1,-1,2,-1],[-1,-1,-1,8,3,-1,6,56]]",
            4,
        ),
        (
            "[[-1,-1,-1,-1,-1,-1],[-1,-1,-1,-1,-1,-1],[-1,-1,-1,-1,-1,-1],"
            "[-1,35,-1,-1,13,-1],[-1,-1,-1,-1,-1,-1],[-1,15,-1,-1,-1,-1]]",
            4,
        ),
        ("[[-1,7,-1],[-1,6,9],[-1,-1,2]]", 1),
        ("[[-1,-1,-1],[-1,9,8],[-1,8,9]]", 1),
        ("[[-1,1,1,1],[-1,7,1,1],[16,1,1,1],[-1,1,9,1]]", 3),
    ],
)
def test_snakes_and_ladders(board, expected):
    assert snakes_and_ladders(parse_matrix(board)) == expected


def test_snakes_and_ladders_rejects_empty_board():
    with pytest.raises(ValueError):
        snakes_and_ladders([])


@pytest.mark.parametrize(
    "grid, expected",
    [
        ("[[1,0,0,0],[0,0,0,0],[0,0,2,-1]]", 2),
        ("[[1,0,0,0],[0,0,0,0],[0,0,0,2]]", 4),
        ("[[0,1],[2,0]]", 0),
        ("[[1,2]]", 1),
    ],
)
def test_unique_paths_iii(grid, expected):
    assert unique_paths_iii(parse_matrix(grid)) == expected


@pytest.mark.parametrize(
    "grid, expected",
    [
        ("[[0,0,1,1,1],[0,1,1,0,0],[0,0,1,1,0],[1,0,0,0,0],[1,1,0,0,1]]", 2),
        ("[[1,0,0,1],[0,0,0,0],[0,0,0,0],[1,0,0,1]", 2),
        ("[[1,0],[0,0]]", 2),
        ("[[0,0],[0,0]]", -1),
        ("[[1,1],[1,1]]", -1),
    ],
)
def test_max_distance(grid, expected):
    assert max_distance(parse_matrix(grid)) == expected