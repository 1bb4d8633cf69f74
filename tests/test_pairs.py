import pytest

from keyhashsort.pairs import KeyValuePair, make_pairs


def test_default_pair_is_zero():
    pair = KeyValuePair()
    assert (pair.key, pair.value) == (0, 0)


def test_value_is_ten_times_key():
    assert KeyValuePair(123456).value == 1234560


@pytest.mark.parametrize("key", [0, 1, 7, 99999, 999999])
def test_value_is_multiple_of_key(key):
    pair = KeyValuePair(key)
    assert pair.key == key
    assert pair.value % 10 == 0
    assert pair.value // 10 == key


def test_pairs_are_immutable():
    pair = KeyValuePair(5)
    with pytest.raises(AttributeError):
        pair.key = 6
    assert (pair.key, pair.value) == (5, 50)


def test_pairs_compare_by_key():
    assert KeyValuePair(42) == KeyValuePair(42)
    assert KeyValuePair(42) != KeyValuePair(43)


def test_str_shows_key_and_value():
    assert str(KeyValuePair(3)) == "{3 , 30}"


def test_make_pairs_keeps_order():
    keys = [500000, 100000, 300000]
    pairs = make_pairs(keys)
    assert [p.key for p in pairs] == keys
    assert all(p.value == p.key * 10 for p in pairs)


def test_make_pairs_accepts_generators():
    pairs = make_pairs(k for k in range(3))
    assert [p.key for p in pairs] == [0, 1, 2]


def test_make_pairs_empty():
    assert make_pairs([]) == []