import json

import pytest

from algopractice.parsing import (
    parse_matrix,
    parse_optional_values,
    parse_pairs,
    parse_values,
)


def _compact(value):
    return json.dumps(value, separators=(",", ":"))


@pytest.mark.parametrize(
    "matrix",
    [[[3, 4, 5], [3, 2, 6], [2, 2, 1]], [[7]], [[-19, 57], [-40, -5]]],
)
def test_parse_matrix_round_trip(matrix):
    assert parse_matrix(_compact(matrix)) == matrix


@pytest.mark.parametrize("pairs", [[[1, 1], [2, 2], [3, 3]], [[10, 16], [-2, 8]]])
def test_parse_pairs_round_trip(pairs):
    assert parse_pairs(_compact(pairs)) == pairs


def test_parse_pairs_tolerates_unbalanced_brackets():
    assert parse_pairs("[[1,1]") == [[1, 1]]


@pytest.mark.parametrize(
    "values", [[10, 5, None, 3], [1], [3, 9, 20, None, None, 15, 7]]
)
def test_parse_optional_values_round_trip(values):
    text = "[" + ",".join("null" if v is None else str(v) for v in values) + "]"
    assert parse_optional_values(text) == values


def test_parse_optional_values_empty():
    assert parse_optional_values("[]") == []


@pytest.mark.parametrize("values", [[1, 2, 3], [-4, 0, 12]])
def test_parse_values_round_trip_with_spaces(values):
    text = "[" + ", ".join(map(str, values)) + "]"
    assert parse_values(text) == values


def test_parse_values_empty():
    assert parse_values(" [ ] ") == []


def test_parse_values_rejects_garbage():
    with pytest.raises(ValueError):
        parse_values("[1,a]")


def test_parse_pairs_rejects_triples():
    with pytest.raises(ValueError):
        parse_pairs("[[1,2,3]]")


def test_parse_pairs_rejects_single():
    with pytest.raises(ValueError):
        parse_pairs("[[1]]")


def test_parse_matrix_rejects_garbage():
    with pytest.raises(ValueError):
        parse_matrix("[[1,b]]")