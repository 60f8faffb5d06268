"""
Partner and opponent history between players.
"""

from itertools import combinations
from typing import Sequence
import numpy as np
import pandas as pd

from .models import Match


class PairingMatrices:
    """
    Symmetric counters of how often two players were partners or opponents.

    Both matrices are ``(num_players + 1) x (num_players + 1)`` so a player id
    indexes them directly; row and column 0 are unused.
    """

    def __init__(self, num_players: int):
        self.num_players = num_players
        self.partners = np.zeros((num_players + 1, num_players + 1), dtype=int)
        self.opponents = np.zeros((num_players + 1, num_players + 1), dtype=int)

    def partner_penalty(self, team: Sequence[int]) -> int:
        """Sum of partner counts over every pair within a team."""
        return int(sum(self.partners[a, b] for a, b in combinations(team, 2)))

    def opponent_penalty(self, team1: Sequence[int], team2: Sequence[int]) -> int:
        """Sum of opponent counts over every cross-team pair."""
        return int(sum(self.opponents[a, b] for a in team1 for b in team2))

    def update(self, match: Match):
        """Record a played match."""
        for team in (match.team1, match.team2):
            for a, b in combinations(team, 2):
                self.partners[a, b] += 1
                self.partners[b, a] += 1

        for a in match.team1:
            for b in match.team2:
                self.opponents[a, b] += 1
                self.opponents[b, a] += 1

    def is_symmetric(self) -> bool:
        return bool((self.partners == self.partners.T).all()
                    and (self.opponents == self.opponents.T).all())

    def distinct_partners(self, player: int) -> int:
        """Number of different players this player has partnered."""
        return int(np.count_nonzero(self.partners[player, 1:]))

    def distinct_opponents(self, player: int) -> int:
        """Number of different players this player has faced."""
        return int(np.count_nonzero(self.opponents[player, 1:]))

    def to_dataframe(self, kind: str = "partners") -> pd.DataFrame:
        """Square DataFrame of one matrix, indexed by player id."""
        if kind not in ("partners", "opponents"):
            raise ValueError(f"Unknown matrix: {kind}. Use 'partners' or 'opponents'.")
        matrix = self.partners if kind == "partners" else self.opponents
        players = list(range(1, self.num_players + 1))
        return pd.DataFrame(matrix[1:, 1:], index=players, columns=players)
