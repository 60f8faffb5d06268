"""
Per-player load counters used to balance play time across formats.
"""

from typing import Dict
import numpy as np

from .models import Format, Match

# Fixed weights of the load penalty
MATCH_WEIGHT = 2
SINGLES_WEIGHT = 3
DOUBLES_WEIGHT = 1
SOLO_WEIGHT = 4


class LoadTracker:
    """Counts of matches played, in total and by role, for every player."""

    def __init__(self, num_players: int):
        self.num_players = num_players
        self.matches = np.zeros(num_players + 1, dtype=int)
        self.singles = np.zeros(num_players + 1, dtype=int)
        self.doubles = np.zeros(num_players + 1, dtype=int)
        self.solo = np.zeros(num_players + 1, dtype=int)

    def _singles_load(self, player: int) -> int:
        return MATCH_WEIGHT * self.matches[player] + SINGLES_WEIGHT * self.singles[player]

    def _pair_load(self, player: int) -> int:
        return MATCH_WEIGHT * self.matches[player] + DOUBLES_WEIGHT * self.doubles[player]

    def _solo_load(self, player: int) -> int:
        return MATCH_WEIGHT * self.matches[player] + SOLO_WEIGHT * self.solo[player]

    def load_penalty(self, match: Match) -> int:
        """
        Load penalty of putting these players on court in this format.

        Singles players are weighted by singles played, anyone in a two-player
        team by doubles played, and the lone player of a 1v2 by solo games.
        """
        if match.format is Format.SINGLES:
            penalty = sum(self._singles_load(p) for p in match.players)
        elif match.format is Format.DOUBLES:
            penalty = sum(self._pair_load(p) for p in match.players)
        else:
            penalty = sum(self._solo_load(p) for p in match.team1)
            penalty += sum(self._pair_load(p) for p in match.team2)
        return int(penalty)

    def update(self, match: Match):
        """Record a played match."""
        for player in match.players:
            self.matches[player] += 1

        if match.format is Format.SINGLES:
            for player in match.players:
                self.singles[player] += 1
        elif match.format is Format.DOUBLES:
            for player in match.players:
                self.doubles[player] += 1
        else:
            for player in match.team1:
                self.solo[player] += 1
            for player in match.team2:
                self.doubles[player] += 1

    def stats(self, player: int) -> Dict[str, int]:
        """Counters for one player."""
        return {
            'Matches': int(self.matches[player]),
            'Singles': int(self.singles[player]),
            'Doubles': int(self.doubles[player]),
            'Solo': int(self.solo[player]),
        }
