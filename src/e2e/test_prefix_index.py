# src/e2e/test_prefix_index.py
import pytest

from typeahead.trie import PrefixIndex


def test_repeated_inserts_accumulate_frequency():
    idx = PrefixIndex()
    for _ in range(3):
        idx.insert("car")
    idx.insert("cart", 2)
    assert idx.frequency("car") == 3
    assert idx.frequency("cart") == 2
    assert len(idx) == 2


@pytest.mark.parametrize("k", [1, 2, 7])
def test_frequency_equals_insert_count(k):
    idx = PrefixIndex()
    for _ in range(k):
        idx.insert("word")
    assert idx.frequency("word") == k


def test_every_prefix_of_a_word_finds_it():
    words = ["pizza", "peanut", "pasta", "p", "zebra"]
    idx = PrefixIndex()
    for w in words:
        idx.insert(w)
    for w in words:
        for i in range(1, len(w) + 1):
            found = {word for word, _ in idx.find_with_prefix(w[:i])}
            assert w in found


def test_prefix_search_returns_counts_and_only_matches():
    idx = PrefixIndex()
    idx.insert("car", 3)
    idx.insert("cart", 2)
    idx.insert("dog")
    assert sorted(idx.find_with_prefix("ca")) == [("car", 3), ("cart", 2)]
    assert idx.find_with_prefix("cx") == []
    assert idx.find_with_prefix("carts") == []


def test_empty_prefix_lists_every_word():
    idx = PrefixIndex()
    idx.insert("a")
    idx.insert("ab", 4)
    assert sorted(idx.find_with_prefix("")) == [("a", 1), ("ab", 4)]
    assert sorted(idx.items()) == [("a", 1), ("ab", 4)]


def test_inner_nodes_are_not_words():
    idx = PrefixIndex()
    idx.insert("cart")
    assert not idx.contains("car")
    assert idx.frequency("car") == 0
    assert "cart" in idx
    assert "car" not in idx
    assert 42 not in idx


def test_empty_word_and_non_positive_delta_are_ignored():
    idx = PrefixIndex()
    idx.insert("")
    idx.insert("x", 0)
    idx.insert("y", -3)
    assert len(idx) == 0
    assert idx.node_count == 1


def test_shared_prefixes_share_nodes():
    idx = PrefixIndex()
    idx.insert("car")
    idx.insert("cart")
    assert idx.node_count == 5  # root + c, a, r, t
