import logging
import random
import string

import pytest

from src.custom_data_structures.Trie.Trie import ROOT_KEY_CHAR, Trie

TRIE_LOGGER = "src.custom_data_structures.Trie.Trie"


def test_new_trie_is_empty(empty_trie):
    """Test that a new trie only has a bare root."""
    assert empty_trie.root.get_key_char() == ROOT_KEY_CHAR
    assert empty_trie.root.has_value() is False
    assert empty_trie.root.has_children() is False


@pytest.mark.parametrize(
    "key,value",
    [
        ("a", 1),
        ("apple", "fruit"),
        ("honeydew melon", [1, 2]),
        ("ключ", {"unicode": True}),
        ("日本", 0),
    ],
)
def test_insert_then_get_value(empty_trie, key, value):
    """Test looking up a key right after inserting it."""
    assert empty_trie.insert(key, value) is True
    assert empty_trie.get_value(key) == value


def test_insert_creates_one_node_per_character(empty_trie):
    """Test that only the last node of a key carries the value."""
    empty_trie.insert("abc", 1)

    a = empty_trie.root.get_child_node("a")
    b = a.get_child_node("b")
    c = b.get_child_node("c")

    assert (a.has_value(), b.has_value(), c.has_value()) == (
        False,
        False,
        True,
    )
    assert c.get_value() == 1
    assert c.has_children() is False


def test_duplicate_insert_is_rejected(empty_trie):
    """Test that a second insert of a key keeps the first value."""
    assert empty_trie.insert("key", "first") is True
    assert empty_trie.insert("key", "second") is False
    assert empty_trie.get_value("key") == "first"


def test_duplicate_insert_of_none_value_is_rejected(empty_trie):
    """Test that a key stored with a None value still counts as present."""
    assert empty_trie.insert("k", None) is True

    assert empty_trie.insert("k", "second") is False
    assert empty_trie.get_value("k") is None
    assert empty_trie.root.get_child_node("k").has_value() is True


def test_none_value_on_existing_prefix_node(empty_trie):
    """Test storing None on a node first created as a prefix."""
    empty_trie.insert("ab", 1)

    assert empty_trie.insert("a", None) is True
    assert empty_trie.insert("a", 2) is False
    assert empty_trie.get_value("ab") == 1


def test_duplicate_insert_is_logged(empty_trie, caplog):
    caplog.set_level(logging.DEBUG, logger=TRIE_LOGGER)
    empty_trie.insert("key", 1)

    empty_trie.insert("key", 2)

    assert "duplicate key 'key'" in caplog.text


def test_empty_key_is_rejected(empty_trie):
    """Test that the empty key is refused and changes nothing."""
    empty_trie.insert("a", 1)
    before = Trie()
    before.insert("a", 1)

    assert empty_trie.insert("", 2) is False
    assert empty_trie == before
    assert empty_trie.root.has_value() is False


def test_empty_key_lookup(empty_trie):
    assert empty_trie.get_value("") is None


def test_missing_key_lookup(empty_trie):
    empty_trie.insert("apple", 1)

    assert empty_trie.get_value("banana") is None
    assert empty_trie.get_value("apples") is None


def test_prefix_lookup_is_absent(empty_trie):
    """Test that a prefix of a key is not a key itself."""
    empty_trie.insert("apple", 1)

    assert empty_trie.get_value("app") is None
    assert empty_trie.get_value("a") is None


def test_prefix_can_be_inserted_later(empty_trie):
    empty_trie.insert("apple", 1)

    assert empty_trie.insert("app", 2) is True
    assert empty_trie.get_value("app") == 2
    assert empty_trie.get_value("apple") == 1
    assert empty_trie.insert("app", 3) is False


def test_random_order_insert(empty_trie):
    """Test inserting nested keys out of length order."""
    empty_trie.insert("a", "one")
    empty_trie.insert("aaa", "three")
    empty_trie.insert("aaaa", "four")
    empty_trie.insert("aa", "two")

    assert empty_trie.get_value("a") == "one"
    assert empty_trie.get_value("aaa") == "three"
    assert empty_trie.get_value("aaaa") == "four"
    assert empty_trie.get_value("aa") == "two"

    assert empty_trie.insert("a", "one") is False


def test_falsy_values_are_stored(empty_trie):
    """Test that falsy values are real values."""
    assert empty_trie.insert("zero", 0) is True
    assert empty_trie.insert("empty", "") is True

    assert empty_trie.get_value("zero") == 0
    assert empty_trie.get_value("empty") == ""
    assert empty_trie.insert("zero", 1) is False


def test_round_trip_many_keys(empty_trie):
    """Test looking up many unique keys in shuffled order."""
    rng = random.Random(1234)
    keys = {
        "".join(rng.choices(string.ascii_lowercase[:4], k=rng.randint(1, 8)))
        for _ in range(500)
    }
    expected = {key: index for index, key in enumerate(sorted(keys))}

    for key, value in expected.items():
        assert empty_trie.insert(key, value) is True

    lookup_order = list(expected)
    rng.shuffle(lookup_order)
    for key in lookup_order:
        assert empty_trie.get_value(key) == expected[key]


def test_tries_compare_structurally():
    left = Trie()
    right = Trie()
    for trie in (left, right):
        trie.insert("ab", 1)
        trie.insert("ac", 2)

    assert left == right

    right.insert("a", 3)
    assert left != right
