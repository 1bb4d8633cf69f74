"""Key/value records whose value is derived from the key."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

VALUE_FACTOR = 10


@dataclass(frozen=True)
class KeyValuePair:
    """An integer key together with its value, ten times the key."""

    key: int = 0

    @property
    def value(self) -> int:
        return self.key * VALUE_FACTOR

    def __str__(self) -> str:
        return f"{{{self.key} , {self.value}}}"


def make_pairs(keys: Iterable[int]) -> list[KeyValuePair]:
    """Build one pair per key, keeping the order of the keys."""
    return [KeyValuePair(int(key)) for key in keys]