"""
Data models for the court scheduler.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, TYPE_CHECKING
import pandas as pd

if TYPE_CHECKING:
    from .pairing import PairingMatrices
    from .load import LoadTracker


class Format(Enum):
    """Match formats."""
    SINGLES = "1v1"
    DOUBLES = "2v2"
    ONE_VS_TWO = "1v2"

    @property
    def team_sizes(self) -> Tuple[int, int]:
        """Sizes of team1 and team2 for this format."""
        return {
            Format.SINGLES: (1, 1),
            Format.DOUBLES: (2, 2),
            Format.ONE_VS_TWO: (1, 2),
        }[self]

    @property
    def player_count(self) -> int:
        """Players needed on court for this format."""
        return sum(self.team_sizes)


# Order in which formats are filled within a round
FORMAT_ORDER = (Format.SINGLES, Format.DOUBLES, Format.ONE_VS_TWO)


@dataclass(frozen=True)
class Match:
    """A match between two teams on one court."""
    team1: Tuple[int, ...]
    team2: Tuple[int, ...]
    format: Format

    @property
    def players(self) -> Tuple[int, ...]:
        """All players in this match, team1 first."""
        return self.team1 + self.team2

    def is_valid(self) -> bool:
        """Check team sizes match the format and the teams are disjoint."""
        if (len(self.team1), len(self.team2)) != self.format.team_sizes:
            return False
        return not set(self.team1) & set(self.team2)

    def describe(self, names: Optional[Dict[int, str]] = None) -> str:
        """Human readable form, e.g. ``1 & 2 vs 3 & 4``."""
        label = (lambda p: names.get(p, str(p))) if names else str
        return (" & ".join(label(p) for p in self.team1) + " vs "
                + " & ".join(label(p) for p in self.team2))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'team1': list(self.team1),
            'team2': list(self.team2),
            'format': self.format.value,
        }


@dataclass
class Round:
    """One round: a match per court plus the players sitting out."""
    id: int
    matches: List[Match] = field(default_factory=list)
    resting: List[int] = field(default_factory=list)

    @property
    def playing(self) -> List[int]:
        """Players on court this round, in court order."""
        players = []
        for match in self.matches:
            players.extend(match.players)
        return players

    def format_counts(self) -> Dict[Format, int]:
        """Number of matches of each format in this round."""
        counts = {fmt: 0 for fmt in FORMAT_ORDER}
        for match in self.matches:
            counts[match.format] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'matches': [match.to_dict() for match in self.matches],
            'resting': list(self.resting),
        }


@dataclass
class Schedule:
    """A generated schedule together with the counters that produced it."""
    num_players: int
    rounds: List[Round] = field(default_factory=list)
    pairing: Optional["PairingMatrices"] = None
    load: Optional["LoadTracker"] = None

    @property
    def players(self) -> List[int]:
        return list(range(1, self.num_players + 1))

    def add_round(self, round_: Round):
        """Add a round to the schedule."""
        self.rounds.append(round_)

    def get_player_matches(self, player: int) -> List[Tuple[int, Match]]:
        """Get (round id, match) for every match a player is in."""
        return [
            (round_.id, match)
            for round_ in self.rounds
            for match in round_.matches
            if player in match.players
        ]

    def get_rest_count(self, player: int) -> int:
        """Number of rounds a player sat out."""
        return sum(1 for round_ in self.rounds if player in round_.resting)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert schedule to a DataFrame with one row per court per round."""
        if not self.rounds:
            return pd.DataFrame()

        data = []
        for round_ in self.rounds:
            resting = ", ".join(str(p) for p in round_.resting) or "none"
            for court, match in enumerate(round_.matches, start=1):
                data.append({
                    'Round': round_.id,
                    'Court': court,
                    'Format': match.format.value,
                    'Team 1': " & ".join(str(p) for p in match.team1),
                    'Team 2': " & ".join(str(p) for p in match.team2),
                    'Resting': resting,
                })
            if not round_.matches:
                data.append({
                    'Round': round_.id,
                    'Court': None,
                    'Format': None,
                    'Team 1': None,
                    'Team 2': None,
                    'Resting': resting,
                })

        df = pd.DataFrame(data)
        # Rounds without matches have no court
        df['Court'] = df['Court'].astype('Int64')
        return df

    def player_stats(self) -> pd.DataFrame:
        """Per-player load and variety statistics."""
        rows = []
        for player in self.players:
            row = {'Player': player}
            if self.load is not None:
                row.update(self.load.stats(player))
            row['Rests'] = self.get_rest_count(player)
            if self.pairing is not None:
                row['Distinct Partners'] = self.pairing.distinct_partners(player)
                row['Distinct Opponents'] = self.pairing.distinct_opponents(player)
            rows.append(row)
        return pd.DataFrame(rows)

    def get_summary_stats(self) -> Dict[str, Any]:
        """Get summary statistics for the schedule."""
        if not self.rounds:
            return {}

        format_totals = {fmt.value: 0 for fmt in FORMAT_ORDER}
        for round_ in self.rounds:
            for fmt, count in round_.format_counts().items():
                format_totals[fmt.value] += count

        stats = {
            'total_rounds': len(self.rounds),
            'total_players': self.num_players,
            'total_matches': sum(len(r.matches) for r in self.rounds),
            'format_distribution': format_totals,
        }

        if self.load is not None:
            played = [self.load.matches[p] for p in self.players]
            stats['matches_per_player'] = {'min': int(min(played)), 'max': int(max(played))}

        return stats

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        result = {
            'numPlayers': self.num_players,
            'rounds': [round_.to_dict() for round_ in self.rounds],
        }
        if self.rounds:
            result['players'] = self.player_stats().to_dict(orient='records')
        else:
            result['players'] = []
        return result
