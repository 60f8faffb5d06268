"""
Tests for team split enumeration.
"""

from math import comb
from pathlib import Path
import sys

# Add the court_scheduler package to the path
sys.path.append(str(Path(__file__).parent.parent))

from court_scheduler.combinations import doubles_splits, pairs, solo_pair_splits


def test_pairs_order():
    """Test pairs are enumerated in ascending index order."""
    assert list(pairs([1, 2, 3])) == [
        ((1,), (2,)),
        ((1,), (3,)),
        ((2,), (3,)),
    ]


def test_doubles_splits_order():
    """Test each 4-subset is split ab|cd, ac|bd, ad|bc."""
    assert list(doubles_splits([1, 2, 3, 4])) == [
        ((1, 2), (3, 4)),
        ((1, 3), (2, 4)),
        ((1, 4), (2, 3)),
    ]


def test_solo_pair_splits_order():
    """Test the solo player rotates through each triple."""
    assert list(solo_pair_splits([3, 4, 5])) == [
        ((3,), (4, 5)),
        ((4,), (3, 5)),
        ((5,), (3, 4)),
    ]


def test_split_counts():
    """Test the number of splits for a larger pool."""
    players = list(range(1, 9))

    assert len(list(pairs(players))) == comb(8, 2)
    assert len(list(doubles_splits(players))) == 3 * comb(8, 4)
    assert len(list(solo_pair_splits(players))) == 3 * comb(8, 3)


def test_solo_pair_splits_cover_every_ordered_solo_and_pair():
    """Test every (solo, pair) combination appears exactly once."""
    players = [2, 5, 7, 9]
    splits = list(solo_pair_splits(players))

    expected = {
        ((s,), pair)
        for s in players
        for pair in [(a, b) for a in players for b in players if a < b]
        if s not in pair
    }
    assert len(splits) == len(set(splits))
    assert set(splits) == expected


def test_helpers_are_restartable():
    """Test calling a helper again restarts enumeration."""
    players = [1, 2, 3, 4, 5]

    assert list(doubles_splits(players)) == list(doubles_splits(players))

    gen = pairs(players)
    assert next(gen) == ((1,), (2,))
    assert next(pairs(players)) == ((1,), (2,))


def test_small_pools_yield_nothing():
    """Test pools smaller than a format yield no splits."""
    assert list(pairs([1])) == []
    assert list(doubles_splits([1, 2, 3])) == []
    assert list(solo_pair_splits([1, 2])) == []
