"""Reading key files of fixed-width integers and writing sorted keys back."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from keyhashsort.pairs import KeyValuePair, make_pairs

# Each record is six digits followed by a newline.
RECORD_WIDTH = 7

StrPath = str | os.PathLike[str]


def count_entries(path: StrPath) -> int:
    """Estimate the number of keys in ``path`` from its size in bytes.

    Every record takes seven bytes, and the last one need not end in a
    newline, so the count is the size divided by seven, plus one.
    """
    size = Path(path).stat().st_size
    return size // RECORD_WIDTH + 1


def _parse_keys(text: str) -> list[int]:
    keys = []
    for token in text.split():
        try:
            keys.append(int(token))
        except ValueError:
            raise ValueError(f"not an integer key: {token!r}") from None
    return keys


def read_pairs(path: StrPath) -> list[KeyValuePair]:
    """Read every whitespace-separated integer of ``path`` as a pair."""
    text = Path(path).read_text(encoding="ascii")
    return make_pairs(_parse_keys(text))


def write_keys(pairs: Iterable[KeyValuePair], path: StrPath) -> Path:
    """Write one key per line, with no newline after the last, and return the path."""
    target = Path(path)
    target.write_text("\n".join(str(pair.key) for pair in pairs), encoding="ascii")
    return target