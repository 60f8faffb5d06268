"""
Tests for the partner and opponent matrices.
"""

import pytest
from pathlib import Path
import sys

# Add the court_scheduler package to the path
sys.path.append(str(Path(__file__).parent.parent))

from court_scheduler.models import Format, Match
from court_scheduler.pairing import PairingMatrices


def test_empty_matrices():
    """Test new matrices start at zero."""
    pairing = PairingMatrices(6)

    assert pairing.partners.shape == (7, 7)
    assert pairing.partners.sum() == 0
    assert pairing.opponents.sum() == 0
    assert pairing.partner_penalty((1, 2)) == 0
    assert pairing.opponent_penalty((1,), (2,)) == 0


def test_update_doubles():
    """Test a doubles match records partners and opponents symmetrically."""
    pairing = PairingMatrices(6)
    pairing.update(Match(team1=(1, 2), team2=(3, 4), format=Format.DOUBLES))

    assert pairing.partners[1, 2] == pairing.partners[2, 1] == 1
    assert pairing.partners[3, 4] == pairing.partners[4, 3] == 1
    assert pairing.partners[1, 3] == 0
    for a in (1, 2):
        for b in (3, 4):
            assert pairing.opponents[a, b] == pairing.opponents[b, a] == 1
    assert pairing.opponents[1, 2] == 0
    assert pairing.is_symmetric()


def test_penalties():
    """Test penalty sums after a match."""
    pairing = PairingMatrices(6)
    pairing.update(Match(team1=(1, 2), team2=(3, 4), format=Format.DOUBLES))

    assert pairing.partner_penalty((1, 2)) == 1
    assert pairing.partner_penalty((1,)) == 0
    assert pairing.partner_penalty((1, 3)) == 0
    assert pairing.opponent_penalty((1, 2), (3, 4)) == 4
    assert pairing.opponent_penalty((1,), (3,)) == 1
    assert pairing.opponent_penalty((1,), (2, 5)) == 0


def test_update_one_vs_two():
    """Test a 1v2 match only pairs the two-player team."""
    pairing = PairingMatrices(5)
    pairing.update(Match(team1=(3,), team2=(4, 5), format=Format.ONE_VS_TWO))

    assert pairing.partners[4, 5] == 1
    assert pairing.partners[3, 4] == 0
    assert pairing.opponents[3, 4] == 1
    assert pairing.opponents[3, 5] == 1
    assert pairing.opponents[4, 5] == 0


def test_counts_accumulate():
    """Test repeated matches keep adding."""
    pairing = PairingMatrices(5)
    match = Match(team1=(1,), team2=(2,), format=Format.SINGLES)
    pairing.update(match)
    pairing.update(match)

    assert pairing.opponents[1, 2] == 2
    assert pairing.opponent_penalty((1,), (2,)) == 2


def test_distinct_counts():
    """Test distinct partner and opponent counts."""
    pairing = PairingMatrices(6)
    pairing.update(Match(team1=(1, 2), team2=(3, 4), format=Format.DOUBLES))
    pairing.update(Match(team1=(1, 2), team2=(5, 6), format=Format.DOUBLES))

    assert pairing.distinct_partners(1) == 1
    assert pairing.distinct_opponents(1) == 4
    assert pairing.distinct_opponents(3) == 2


def test_to_dataframe():
    """Test matrix export drops the unused index 0."""
    pairing = PairingMatrices(5)
    pairing.update(Match(team1=(1,), team2=(2,), format=Format.SINGLES))

    df = pairing.to_dataframe("opponents")
    assert list(df.index) == [1, 2, 3, 4, 5]
    assert list(df.columns) == [1, 2, 3, 4, 5]
    assert df.loc[1, 2] == 1

    with pytest.raises(ValueError, match="Unknown matrix"):
        pairing.to_dataframe("teammates")
