"""Interactive menu over a key file: print, sort, look up and inspect the map."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

from keyhashsort.hashmap import ChainedHashMap
from keyhashsort.keyfile import count_entries, read_pairs, write_keys
from keyhashsort.pairs import KeyValuePair
from keyhashsort.radix import radix_sort

PAIRS_PER_LINE = 10
EXIT_CHOICE = -1
EXIT_LOOKUP = -2
MAX_CHOICE = 6
_BANNER = "=" * 80


def format_pairs(pairs: Sequence[KeyValuePair]) -> str:
    """Render pairs ten to a line, each line preceded by a newline."""
    return "".join(
        "\n" + "".join(str(pair) for pair in pairs[start:start + PAIRS_PER_LINE])
        for start in range(0, len(pairs), PAIRS_PER_LINE)
    )


def menu_text() -> str:
    return (
        "\n"
        "1-print key-value pairs array\n"
        "2-sort array by key and output in a file\n"
        "3-look up a value\n"
        "4-print the hashmap\n"
        "5-hashmap analytics"
    )


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _as_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _lookup_loop(
    pairs: Sequence[KeyValuePair], table: ChainedHashMap, tokens: Iterator[str]
) -> Iterator[str]:
    while True:
        yield "enter key (-2 to exit)\n"
        token = next(tokens, None)
        if token is None:
            return
        key = _as_int(token)
        if key == EXIT_LOOKUP:
            return
        yield f"\n{_BANNER}\n"
        found = None if key is None else table.find(key)
        if found is None:
            yield "Key not found"
        else:
            bucket, entry = found
            yield (
                f"item found in bucket {bucket} and corresponds to index "
                f"{entry.index} in the array \n"
                f"[{bucket}] --> .... --> {key}\n"
            )
            yield f"val = arr[{entry.index}] = {pairs[entry.index].value}"
        yield f"\n{_BANNER}\n\n"


def run_session(
    pairs: Sequence[KeyValuePair],
    table: ChainedHashMap,
    lines: Iterable[str],
    output_path: str,
) -> Iterator[str]:
    """Drive the menu from ``lines`` of input, yielding output as it is produced.

    The session ends on the exit choice or when the input runs out.
    """
    current = list(pairs)
    tokens = _tokens(lines)
    while True:
        yield menu_text() + "\n"
        yield "\nenter choice (-1 to exit)\n"
        token = next(tokens, None)
        if token is None:
            return
        choice = _as_int(token)
        if choice == EXIT_CHOICE:
            return
        if choice is None or not 0 <= choice <= MAX_CHOICE:
            yield "invalid input\n"
        elif choice == 1:
            yield format_pairs(current)
        elif choice == 2:
            yield "sorting array...\n"
            current = radix_sort(current)
            yield format_pairs(current)
            write_keys(current, output_path)
            yield f"\nOutput path: {output_path}\n"
        elif choice == 3:
            yield from _lookup_loop(current, table, tokens)
        elif choice == 4:
            yield table.format_table() + "\n"
        elif choice == 5:
            yield table.stats().report() + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="keyhashsort",
        description="Load a file of six-digit keys, hash them and radix-sort them.",
    )
    parser.add_argument("path", nargs="?", default="keys.txt", help="key file to read")
    parser.add_argument(
        "-o", "--output", default="output.txt", help="file for the sorted keys"
    )
    args = parser.parse_args(argv)

    try:
        size = count_entries(args.path)
        print("File Opened")
        print("reading file...")
        print("initializing array...")
        pairs = read_pairs(args.path)
    except OSError:
        print("Cannot Open File", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Items read = {len(pairs)} ")

    table = ChainedHashMap(size)
    table.insert_pairs(pairs)
    for chunk in run_session(pairs, table, sys.stdin, args.output):
        print(chunk, end="", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())