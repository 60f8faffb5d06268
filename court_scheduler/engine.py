"""
Core scheduling engine: greedy round-by-round court assignment.
"""

from typing import Dict, List, Optional
from .layout import (
    MAX_COURTS, MAX_PLAYERS, MIN_PLAYERS, active_player_count, plan_layout,
)
from .load import LoadTracker
from .models import FORMAT_ORDER, Round, Schedule
from .pairing import PairingMatrices
from .selector import MatchSelector


def default_rounds(num_players: int) -> int:
    """Default number of rounds for a player count."""
    return max(1, num_players - 1)


class RoundScheduler:
    """
    Builds the rounds of one schedule.

    Each instance owns its own pairing matrices and load counters, so two
    schedulers never influence each other. Rounds built later depend on every
    earlier round of the same instance.
    """

    def __init__(self, num_players: int, verbose: bool = False):
        self.num_players = num_players
        self.verbose = verbose
        self.players = list(range(1, num_players + 1))
        self.pairing = PairingMatrices(num_players)
        self.load = LoadTracker(num_players)
        self.selector = MatchSelector(self.pairing, self.load)
        self.layout = plan_layout(active_player_count(num_players))

    def build_round(self, round_id: int) -> Round:
        """Fill the courts for one round and update the counters."""
        available = list(self.players)
        round_ = Round(id=round_id)

        for fmt in FORMAT_ORDER:
            for _ in range(self.layout.count(fmt)):
                if len(round_.matches) >= MAX_COURTS:
                    break

                match = self.selector.pick_best(fmt, available)
                if match is None:
                    break

                round_.matches.append(match)
                self.pairing.update(match)
                self.load.update(match)

                placed = set(match.players)
                available = [p for p in available if p not in placed]

                if self.verbose:
                    print(f"Round {round_id}, court {len(round_.matches)}: "
                          f"{match.describe()} ({fmt.value})")

        round_.resting = sorted(available)

        if self.verbose:
            print(f"Round {round_id}: {len(round_.matches)} courts, "
                  f"{len(round_.resting)} resting")

        return round_

    def run(self, rounds_count: int) -> Schedule:
        """Build rounds 1..rounds_count."""
        schedule = Schedule(num_players=self.num_players, pairing=self.pairing, load=self.load)

        for round_id in range(1, rounds_count + 1):
            schedule.add_round(self.build_round(round_id))

        return schedule


def build_schedule(num_players: int, rounds_count: Optional[int] = None,
                   verbose: bool = False) -> Schedule:
    """
    Generate a schedule together with its final counters.

    Args:
        num_players: Number of players, numbered 1..num_players
        rounds_count: Rounds to generate (default: num_players - 1, at least 1)
        verbose: Print each placed match

    Returns:
        Schedule: Empty when num_players is outside 5-18 or rounds_count < 1
    """
    if rounds_count is None:
        rounds_count = default_rounds(num_players)

    if num_players < MIN_PLAYERS or num_players > MAX_PLAYERS or rounds_count < 1:
        return Schedule(num_players=num_players)

    scheduler = RoundScheduler(num_players, verbose=verbose)
    return scheduler.run(rounds_count)


def generate_schedule(num_players: int, rounds_count: Optional[int] = None) -> List[Round]:
    """
    Generate the rounds of a schedule.

    An empty list means invalid input (fewer than 5 or more than 18 players)
    or no rounds requested; it is never a partial result.
    """
    return build_schedule(num_players, rounds_count).rounds


def validate_schedule(schedule: Schedule) -> Dict[str, List[str]]:
    """
    Validate a completed schedule for constraint violations.

    Args:
        schedule: Schedule to validate

    Returns:
        Dict[str, List[str]]: Validation results
    """
    violations = {
        'errors': [],
        'warnings': []
    }

    if not schedule.rounds:
        violations['warnings'].append("No rounds scheduled")
        return violations

    all_players = set(schedule.players)
    layout = plan_layout(active_player_count(schedule.num_players))

    for round_ in schedule.rounds:
        if len(round_.matches) > MAX_COURTS:
            violations['errors'].append(
                f"Round {round_.id} uses {len(round_.matches)} courts (max {MAX_COURTS})"
            )

        seen = set()
        for court, match in enumerate(round_.matches, start=1):
            if not match.is_valid():
                violations['errors'].append(
                    f"Round {round_.id}, court {court}: invalid {match.format.value} teams "
                    f"{list(match.team1)} vs {list(match.team2)}"
                )
            for player in match.players:
                if player in seen:
                    violations['errors'].append(
                        f"Player {player} scheduled twice in round {round_.id}"
                    )
                seen.add(player)

        for player in round_.resting:
            if player in seen:
                violations['errors'].append(
                    f"Player {player} both playing and resting in round {round_.id}"
                )

        if len(round_.resting) != len(set(round_.resting)):
            violations['errors'].append(
                f"Resting list of round {round_.id} has duplicates: {round_.resting}"
            )
        elif round_.resting != sorted(round_.resting):
            violations['errors'].append(
                f"Resting list of round {round_.id} is not sorted: {round_.resting}"
            )

        unknown = (seen | set(round_.resting)) - all_players
        if unknown:
            violations['errors'].append(
                f"Unknown players in round {round_.id}: {sorted(unknown)}"
            )

        missing = all_players - seen - set(round_.resting)
        if missing:
            violations['errors'].append(
                f"Players missing from round {round_.id}: {sorted(missing)}"
            )

        if len(round_.matches) < layout.courts:
            violations['warnings'].append(
                f"Round {round_.id} uses {len(round_.matches)} of {layout.courts} planned courts"
            )

    if schedule.pairing is not None and not schedule.pairing.is_symmetric():
        violations['errors'].append("Pairing matrices are not symmetric")

    return violations
