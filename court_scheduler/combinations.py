"""
Combinatorial iteration helpers for enumerating team splits.

Every helper is a lazy generator over a sequence of players and yields
``(team1, team2)`` tuples in nested ascending index order, so calling it
again restarts the enumeration from the beginning.
"""

from itertools import combinations
from typing import Iterator, Sequence, Tuple

Team = Tuple[int, ...]
Split = Tuple[Team, Team]


def pairs(players: Sequence[int]) -> Iterator[Split]:
    """Yield every unordered pair as a 1v1 split."""
    for a, b in combinations(players, 2):
        yield (a,), (b,)


def doubles_splits(players: Sequence[int]) -> Iterator[Split]:
    """Yield every 4-subset split three ways: ab|cd, ac|bd, ad|bc."""
    for a, b, c, d in combinations(players, 4):
        yield (a, b), (c, d)
        yield (a, c), (b, d)
        yield (a, d), (b, c)


def solo_pair_splits(players: Sequence[int]) -> Iterator[Split]:
    """Yield every (solo, pair) split; the solo rotates through each triple."""
    for a, b, c in combinations(players, 3):
        yield (a,), (b, c)
        yield (b,), (a, c)
        yield (c,), (a, b)
