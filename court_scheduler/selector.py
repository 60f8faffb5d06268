"""
Greedy match selection: the lowest-penalty split of the available players.
"""

from typing import Callable, Dict, Iterator, Optional, Sequence

from .combinations import Split, doubles_splits, pairs, solo_pair_splits
from .load import LoadTracker
from .models import Format, Match
from .pairing import PairingMatrices

CandidateGenerator = Callable[[Sequence[int]], Iterator[Split]]

CANDIDATE_GENERATORS: Dict[Format, CandidateGenerator] = {
    Format.SINGLES: pairs,
    Format.DOUBLES: doubles_splits,
    Format.ONE_VS_TWO: solo_pair_splits,
}


class MatchSelector:
    """Picks the best match for a format from a pool of available players."""

    def __init__(self, pairing: PairingMatrices, load: LoadTracker):
        self.pairing = pairing
        self.load = load

    def candidates(self, fmt: Format, available: Sequence[int]) -> Iterator[Match]:
        """Every valid match of this format, in enumeration order."""
        for team1, team2 in CANDIDATE_GENERATORS[fmt](available):
            yield Match(team1=team1, team2=team2, format=fmt)

    def score(self, match: Match) -> int:
        """Score a candidate match (lower is better)."""
        return (self.pairing.partner_penalty(match.team1)
                + self.pairing.partner_penalty(match.team2)
                + self.pairing.opponent_penalty(match.team1, match.team2)
                + self.load.load_penalty(match))

    def pick_best(self, fmt: Format, available: Sequence[int]) -> Optional[Match]:
        """
        Select the lowest scoring match of a format.

        Args:
            fmt: Match format to fill
            available: Players not yet placed this round, in ascending order

        Returns:
            Optional[Match]: The first candidate with the smallest score, or
            None when the pool is too small for the format
        """
        if len(available) < fmt.player_count:
            return None

        best_match = None
        best_score = float('inf')

        for match in self.candidates(fmt, available):
            score = self.score(match)
            # Ties keep the earlier candidate
            if score < best_score:
                best_score = score
                best_match = match

        return best_match
