"""A hash map with separate chaining from keys to array indices."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from keyhashsort.pairs import KeyValuePair

_RULE = "-" * 70


@dataclass(frozen=True)
class KeyPointer:
    """A key and the index of its pair in the pair list."""

    key: int
    index: int


@dataclass(frozen=True)
class MapStats:
    """Health figures of a hash map: longest chain and bucket occupancy."""

    buckets: int
    max_bucket_index: int
    max_chain_length: int
    non_empty_buckets: int

    @property
    def non_empty_percentage(self) -> int:
        """Share of buckets holding at least one entry, rounded half up."""
        return math.floor(self.non_empty_buckets / self.buckets * 100 + 0.5)

    def report(self) -> str:
        return "\n".join(
            [
                _RULE,
                f"bucket with the max chain is at index {self.max_bucket_index} "
                f"and has {self.max_chain_length} elements         |",
                f"{self.non_empty_percentage}% of locations have 1 or more "
                "elements                              |",
                _RULE,
            ]
        )


class ChainedHashMap:
    """Maps integer keys to indices, using key modulo bucket count."""

    def __init__(self, buckets: int) -> None:
        if buckets <= 0:
            raise ValueError("bucket count must be positive")
        self.buckets = buckets
        self._table: list[list[KeyPointer]] = [[] for _ in range(buckets)]

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._table)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.find(key) is not None

    def bucket_of(self, key: int) -> int:
        return key % self.buckets

    def insert(self, key: int, index: int) -> None:
        self._table[self.bucket_of(key)].append(KeyPointer(key, index))

    def insert_pairs(self, pairs: Iterable[KeyValuePair]) -> None:
        """Insert every pair's key, pointing at its position in ``pairs``."""
        for index, pair in enumerate(pairs):
            self.insert(pair.key, index)

    def find(self, key: int) -> tuple[int, KeyPointer] | None:
        """Return the bucket and first entry for ``key``, or None."""
        bucket = self.bucket_of(key)
        for entry in self._table[bucket]:
            if entry.key == key:
                return bucket, entry
        return None

    def lookup(self, key: int) -> int:
        """Return the index stored for ``key``; raise KeyError if absent."""
        found = self.find(key)
        if found is None:
            raise KeyError(key)
        return found[1].index

    def format_table(self) -> str:
        lines = []
        for bucket, chain in enumerate(self._table):
            entries = "".join(
                f"--> {{key= {e.key}, index in keyValuePair arr= {e.index}}}"
                for e in chain
            )
            lines.append(f"[{bucket}]{entries}")
        return "\n".join(lines)

    def stats(self) -> MapStats:
        max_index = 0
        max_length = 0
        non_empty = 0
        for bucket, chain in enumerate(self._table):
            if len(chain) > max_length:
                max_length = len(chain)
                max_index = bucket
            if chain:
                non_empty += 1
        return MapStats(self.buckets, max_index, max_length, non_empty)