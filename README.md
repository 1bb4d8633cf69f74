# keyhashsort

A small teaching tool. It reads a text file of six-digit integer keys, one per
line, and turns each key into a key-value pair whose value is ten times the
key. The pairs are then:

- indexed in a hash map with separate chaining, which keeps only each key and
  the key's position in the pair list;
- sorted by key with an LSD radix sort that uses counting sort on each decimal
  digit, after which the sorted keys are written to a file in the same format
  as the input.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The command

```
keyhashsort keys.txt
keyhashsort keys.txt --output sorted.txt
```

The path defaults to `keys.txt` and the output file to `output.txt`
(`-o`/`--output`). The hash map gets one bucket per expected record, counted
from the file size at seven bytes a record. The command then reads menu
choices from standard input:

```
1-print key-value pairs array
2-sort array by key and output in a file
3-look up a value
4-print the hashmap
5-hashmap analytics
```

Enter `-1` to quit; the session also ends when the input runs out. Anything
that is not a whole number from 0 to 6 is reported as invalid input.

- Option 1 prints the pairs, ten to a line, as `{key , value}`.
- Option 2 radix-sorts the pairs, prints them and writes the sorted keys to the
  output file, one per line with no newline after the last.
- Option 3 asks for keys one after another and shows the bucket, the index and
  the value of each one found, or `Key not found`; enter `-2` to go back to
  the menu.
- Option 4 prints every bucket and its chain.
- Option 5 prints the longest chain and the share of buckets in use.

If the file cannot be opened, or holds something that is not an integer, the
command prints an error and exits with status 1.

## Using it as a library

```python
from keyhashsort.keyfile import read_pairs, write_keys
from keyhashsort.hashmap import ChainedHashMap
from keyhashsort.radix import radix_sort

pairs = read_pairs("keys.txt")          # list of KeyValuePair

table = ChainedHashMap(len(pairs))
table.insert_pairs(pairs)
index = table.lookup(123456)            # position in pairs; KeyError if absent
found = table.find(123456)              # (bucket, KeyPointer) or None
print(table.stats().report())           # longest chain and share of used buckets

ordered = radix_sort(pairs)             # new list, sorted by key
write_keys(ordered, "output.txt")
```

Modules:

- `keyhashsort.pairs`: `KeyValuePair` (a frozen dataclass whose `value` is
  ten times its `key`) and `make_pairs(keys)`.
- `keyhashsort.hashmap`: `ChainedHashMap`, which sends a key to bucket
  `key % buckets`, supports `insert`, `insert_pairs`, `find`, `lookup`,
  `len()` and `in`, and renders itself with `format_table()`. `stats()`
  returns a `MapStats` with the longest chain, its bucket, the number of
  non-empty buckets and `non_empty_percentage`. Entries are `KeyPointer`
  records of a key and an index.
- `keyhashsort.radix`: `max_key`, `counting_sort_by_digit` and `radix_sort`.
  Keys must be non-negative; otherwise `ValueError` is raised.
- `keyhashsort.keyfile`: `count_entries`, `read_pairs` and `write_keys`.
- `keyhashsort.cli`: `main`, `run_session` (drives the menu from any iterable
  of input lines and yields the output), `format_pairs` and `menu_text`.

## What it does not do

The hash map has no delete operation, and entries cannot be replaced: inserting
a key twice keeps both entries, and lookups return the first one.