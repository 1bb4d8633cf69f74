import io

import pytest

from keyhashsort.cli import format_pairs, main, menu_text, run_session
from keyhashsort.hashmap import ChainedHashMap
from keyhashsort.keyfile import read_pairs
from keyhashsort.pairs import make_pairs

KEYS = [654321, 123456, 100000, 999999, 500005]


@pytest.fixture
def pairs():
    return make_pairs(KEYS)


@pytest.fixture
def table(pairs):
    hashmap = ChainedHashMap(len(pairs))
    hashmap.insert_pairs(pairs)
    return hashmap


def _session(pairs, table, text, output_path):
    return "".join(run_session(pairs, table, io.StringIO(text), str(output_path)))


def test_format_pairs_ten_per_line():
    many = make_pairs(range(1, 13))
    text = format_pairs(many)
    assert text.startswith("\n")
    lines = text.split("\n")[1:]
    assert len(lines) == 2
    assert lines[0] == "".join(str(p) for p in many[:10])
    assert lines[1] == "".join(str(p) for p in many[10:])


def test_format_pairs_empty():
    assert format_pairs([]) == ""


def test_menu_text_lists_options():
    text = menu_text()
    assert "1-print key-value pairs array" in text
    assert "2-sort array by key and output in a file" in text
    assert text.splitlines()[-1] == "5-hashmap analytics"


def test_session_print_pairs(pairs, table, tmp_path):
    out = _session(pairs, table, "1\n-1\n", tmp_path / "out.txt")
    assert format_pairs(pairs) in out
    assert out.count("enter choice (-1 to exit)") == 2


def test_session_sort_writes_file(pairs, table, tmp_path):
    target = tmp_path / "out.txt"
    out = _session(pairs, table, "2\n-1\n", target)
    assert "sorting array..." in out
    assert f"Output path: {target}" in out
    assert [p.key for p in read_pairs(target)] == sorted(KEYS)


def test_session_lookup_found(pairs, table, tmp_path):
    out = _session(pairs, table, "3\n123456\n-2\n-1\n", tmp_path / "out.txt")
    assert f"val = arr[1] = {pairs[1].value}" in out
    assert "[" + str(table.bucket_of(123456)) + "] --> .... --> 123456" in out


def test_session_lookup_missing(pairs, table, tmp_path):
    out = _session(pairs, table, "3\n42\n-2\n-1\n", tmp_path / "out.txt")
    assert "Key not found" in out
    assert "val = arr" not in out


def test_session_invalid_choice(pairs, table, tmp_path):
    out = _session(pairs, table, "9\nabc\n-1\n", tmp_path / "out.txt")
    assert out.count("invalid input") == 2


def test_session_map_views(pairs, table, tmp_path):
    out = _session(pairs, table, "4\n5\n-1\n", tmp_path / "out.txt")
    assert table.format_table() in out
    assert table.stats().report() in out


def test_session_ends_when_input_runs_out(pairs, table, tmp_path):
    out = _session(pairs, table, "", tmp_path / "out.txt")
    assert out.count("enter choice (-1 to exit)") == 1


def test_main_runs_and_sorts(tmp_path, monkeypatch, capsys):
    source = tmp_path / "keys.txt"
    source.write_text("\n".join(str(k) for k in KEYS), encoding="ascii")
    target = tmp_path / "sorted.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n-1\n"))
    assert main([str(source), "--output", str(target)]) == 0
    assert [p.key for p in read_pairs(target)] == sorted(KEYS)
    assert f"Items read = {len(KEYS)}" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Cannot Open File" in capsys.readouterr().err