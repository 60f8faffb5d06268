"""
Court layout planning: how many matches of each format fill the courts.
"""

from dataclasses import dataclass
from typing import Dict

from .models import Format

MAX_COURTS = 3
MAX_ACTIVE_PLAYERS = 12
MIN_PLAYERS = 5
MAX_PLAYERS = 18


@dataclass(frozen=True)
class CourtLayout:
    """Target number of matches per format for one round."""
    singles: int
    doubles: int
    one_vs_two: int

    @property
    def courts(self) -> int:
        """Number of courts the layout occupies."""
        return self.singles + self.doubles + self.one_vs_two

    @property
    def players_used(self) -> int:
        """Number of players the layout puts on court."""
        return 2 * self.singles + 4 * self.doubles + 3 * self.one_vs_two

    def count(self, fmt: Format) -> int:
        """Target number of matches of a given format."""
        return {
            Format.SINGLES: self.singles,
            Format.DOUBLES: self.doubles,
            Format.ONE_VS_TWO: self.one_vs_two,
        }[fmt]


# Maximise players on court, prefer singles when feasible
LAYOUT_TABLE: Dict[int, CourtLayout] = {
    5: CourtLayout(singles=1, doubles=0, one_vs_two=1),
    6: CourtLayout(singles=3, doubles=0, one_vs_two=0),
    7: CourtLayout(singles=2, doubles=0, one_vs_two=1),
    8: CourtLayout(singles=2, doubles=1, one_vs_two=0),
    9: CourtLayout(singles=1, doubles=1, one_vs_two=1),
    10: CourtLayout(singles=1, doubles=2, one_vs_two=0),
    11: CourtLayout(singles=1, doubles=2, one_vs_two=0),
    12: CourtLayout(singles=0, doubles=3, one_vs_two=0),
}

EMPTY_LAYOUT = CourtLayout(singles=0, doubles=0, one_vs_two=0)


def active_player_count(num_players: int) -> int:
    """Players eligible for a court in one round (capped at 12)."""
    return min(num_players, MAX_ACTIVE_PLAYERS)


def plan_layout(active_players: int) -> CourtLayout:
    """
    Get the court layout for a number of simultaneously active players.

    Args:
        active_players: Players available for courts, already capped at 12

    Returns:
        CourtLayout: Matches per format; empty outside the 5-12 range
    """
    return LAYOUT_TABLE.get(active_players, EMPTY_LAYOUT)
