"""Least-significant-digit radix sort of key/value pairs by key."""

from __future__ import annotations

from collections.abc import Sequence

from keyhashsort.pairs import KeyValuePair

_BASE = 10


def max_key(pairs: Sequence[KeyValuePair]) -> int:
    """Return the largest key; raise ValueError for no pairs."""
    if not pairs:
        raise ValueError("no pairs to inspect")
    return max(pair.key for pair in pairs)


def _check_keys(pairs: Sequence[KeyValuePair]) -> None:
    if any(pair.key < 0 for pair in pairs):
        raise ValueError("radix sort requires non-negative keys")


def counting_sort_by_digit(
    pairs: Sequence[KeyValuePair], exp: int
) -> list[KeyValuePair]:
    """Stable sort of ``pairs`` by the decimal digit selected by ``exp``."""
    if exp <= 0:
        raise ValueError("exp must be a positive power of ten")
    _check_keys(pairs)
    buckets: list[list[int]] = [[] for _ in range(_BASE)]
    for pair in pairs:
        buckets[(pair.key // exp) % _BASE].append(pair.key)
    return [KeyValuePair(key) for bucket in buckets for key in bucket]


def radix_sort(pairs: Sequence[KeyValuePair]) -> list[KeyValuePair]:
    """Return the pairs sorted by key in ascending order."""
    if not pairs:
        return []
    _check_keys(pairs)
    result = list(pairs)
    largest = max_key(result)
    exp = 1
    while largest // exp > 0:
        result = counting_sort_by_digit(result, exp)
        exp *= _BASE
    return result