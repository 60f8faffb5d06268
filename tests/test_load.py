"""
Tests for the per-player load tracker.
"""

from pathlib import Path
import sys

# Add the court_scheduler package to the path
sys.path.append(str(Path(__file__).parent.parent))

from court_scheduler.load import LoadTracker
from court_scheduler.models import Format, Match


def singles(a, b):
    return Match(team1=(a,), team2=(b,), format=Format.SINGLES)


def doubles(a, b, c, d):
    return Match(team1=(a, b), team2=(c, d), format=Format.DOUBLES)


def one_vs_two(solo, a, b):
    return Match(team1=(solo,), team2=(a, b), format=Format.ONE_VS_TWO)


def test_zero_load():
    """Test an untouched tracker gives no penalty."""
    load = LoadTracker(6)

    assert load.load_penalty(singles(1, 2)) == 0
    assert load.load_penalty(doubles(1, 2, 3, 4)) == 0
    assert load.load_penalty(one_vs_two(1, 2, 3)) == 0


def test_update_singles():
    """Test singles increments matches and singles for both players."""
    load = LoadTracker(6)
    load.update(singles(1, 2))

    assert load.stats(1) == {'Matches': 1, 'Singles': 1, 'Doubles': 0, 'Solo': 0}
    assert load.stats(2) == {'Matches': 1, 'Singles': 1, 'Doubles': 0, 'Solo': 0}
    assert load.stats(3)['Matches'] == 0


def test_update_doubles():
    """Test doubles increments matches and doubles for all four players."""
    load = LoadTracker(6)
    load.update(doubles(1, 2, 3, 4))

    for player in (1, 2, 3, 4):
        assert load.stats(player) == {'Matches': 1, 'Singles': 0, 'Doubles': 1, 'Solo': 0}


def test_update_one_vs_two():
    """Test 1v2 counts a solo game for the lone player and doubles for the pair."""
    load = LoadTracker(5)
    load.update(one_vs_two(3, 4, 5))

    assert load.stats(3) == {'Matches': 1, 'Singles': 0, 'Doubles': 0, 'Solo': 1}
    assert load.stats(4) == {'Matches': 1, 'Singles': 0, 'Doubles': 1, 'Solo': 0}
    assert load.stats(5) == {'Matches': 1, 'Singles': 0, 'Doubles': 1, 'Solo': 0}


def test_penalty_after_singles():
    """Test penalties for a player who has played one singles match."""
    load = LoadTracker(6)
    load.update(singles(1, 2))

    # 2 * matches + 3 * singles
    assert load.load_penalty(singles(1, 3)) == 5
    assert load.load_penalty(singles(1, 2)) == 10
    # 2 * matches + 1 * doubles
    assert load.load_penalty(doubles(1, 3, 4, 5)) == 2
    # 2 * matches + 4 * solo for the lone player
    assert load.load_penalty(one_vs_two(1, 3, 4)) == 2
    assert load.load_penalty(one_vs_two(3, 1, 4)) == 2


def test_penalty_after_one_vs_two():
    """Test penalties weight solo games heavier than doubles."""
    load = LoadTracker(5)
    load.update(one_vs_two(3, 4, 5))

    assert load.load_penalty(one_vs_two(3, 4, 5)) == (2 + 4) + (2 + 1) + (2 + 1)
    assert load.load_penalty(one_vs_two(4, 3, 5)) == (2 + 0) + (2 + 0) + (2 + 1)
    assert load.load_penalty(doubles(3, 4, 1, 5)) == 2 + 3 + 0 + 3
    assert load.load_penalty(singles(3, 4)) == 2 + 2


def test_counters_only_grow():
    """Test counters never decrease over updates."""
    load = LoadTracker(6)
    previous = [load.stats(p) for p in range(1, 7)]

    for match in (singles(1, 2), doubles(1, 3, 4, 5), one_vs_two(6, 1, 2)):
        load.update(match)
        current = [load.stats(p) for p in range(1, 7)]
        for before, after in zip(previous, current):
            for key in before:
                assert after[key] >= before[key]
        previous = current
