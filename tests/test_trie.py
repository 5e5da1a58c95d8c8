import pytest

from cpkit.trie import DigitTrie


def test_full_match_returns_length():
    trie = DigitTrie()
    digits = [3, 1, 4, 1, 5]
    trie.add(digits)
    assert trie.longest_prefix(digits) == len(digits)


def test_longer_query_stops_at_stored_end():
    trie = DigitTrie()
    stored = [2, 7, 1]
    trie.add(stored)
    assert trie.longest_prefix(stored + [8, 2, 8]) == len(stored)


def test_partial_match():
    trie = DigitTrie()
    prefix = [1, 2]
    trie.add(prefix + [3])
    assert trie.longest_prefix(prefix + [9, 9]) == len(prefix)


def test_empty_trie_matches_nothing():
    trie = DigitTrie()
    assert trie.longest_prefix([4, 2]) == 0


def test_best_among_many_sequences():
    trie = DigitTrie()
    short = [5, 0]
    long = [5, 0, 7, 7]
    trie.add(short)
    trie.add(long)
    trie.add([6])
    assert trie.longest_prefix(long + [1]) == len(long)
    assert trie.longest_prefix(short + [1]) == len(short)


def test_invalid_digit_in_add():
    trie = DigitTrie()
    with pytest.raises(ValueError):
        trie.add([1, 10])


def test_invalid_digit_in_query():
    trie = DigitTrie()
    trie.add([1, 2])
    with pytest.raises(ValueError):
        trie.longest_prefix([-1])