"""Parsers for the bracketed list notation used to describe problem inputs."""

from __future__ import annotations

_TRIM = " []"


def _rows(text: str) -> list[str]:
    return [row.strip(_TRIM) for row in text.strip(_TRIM).split("],[")]


def parse_matrix(text: str) -> list[list[int]]:
    """Parse ``[[1,2],[3,4]]`` into a list of integer rows."""
    return [[int(cell) for cell in row.split(",")] for row in _rows(text)]


def parse_pairs(text: str) -> list[list[int]]:
    """Parse ``[[a,b],[c,d]]`` into a list of two-element integer lists."""
    pairs = []
    for row in _rows(text):
        first, sep, second = row.partition(",")
        if not sep:
            raise ValueError(f"not a pair: {row!r}")
        pairs.append([int(first), int(second)])
    return pairs


def parse_optional_values(text: str) -> list[int | None]:
    """Parse ``[1,null,3]`` into a list where ``null`` and blanks become None."""
    body = text.strip(_TRIM)
    if not body:
        return []
    values: list[int | None] = []
    for token in body.split(","):
        token = token.strip()
        values.append(None if token in ("", "null") else int(token))
    return values


def parse_values(text: str) -> list[int]:
    """Parse ``[1,2,3]`` into a list of integers."""
    body = text.strip(_TRIM)
    if not body:
        return []
    return [int(token.strip()) for token in body.split(",")]