"""
Command-line interface for the court scheduler.
"""

import argparse
import json
import sys
from contextlib import redirect_stdout
import yaml
from .config import SchedulerConfig, load_config
from .engine import build_schedule, validate_schedule
from .export import write_excel
from .models import Schedule


def print_schedule(schedule: Schedule, config: SchedulerConfig) -> None:
    """Print every round with its courts and resting players."""
    names = config.get_player_names() if config.player_names else None

    for round_ in schedule.rounds:
        print(f"\nRound {round_.id}")
        if not round_.matches:
            print("  No match could be formed this round")
        for court, match in enumerate(round_.matches, start=1):
            print(f"  Court {court}: {match.describe(names)} ({match.format.value})")

        if round_.resting:
            label = (lambda p: names[p]) if names else str
            print(f"  Resting: {', '.join(label(p) for p in round_.resting)}")
        else:
            print("  Resting: none")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Court Scheduler - rotate players across up to 3 courts"
    )

    parser.add_argument(
        "--players",
        type=int,
        help="Number of players (5-18)"
    )

    parser.add_argument(
        "--rounds",
        type=int,
        help="Number of rounds (default: players - 1)"
    )

    parser.add_argument(
        "--config",
        help="Path to YAML configuration file"
    )

    parser.add_argument(
        "--out",
        help="Path to output Excel file (optional)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the schedule as JSON"
    )

    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only generate and validate the schedule"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args(argv)

    if args.config is None and args.players is None:
        parser.error("one of --players or --config is required")

    try:
        # Load configuration
        if args.config:
            print("Loading configuration...", file=sys.stderr)
            config = load_config(args.config)
        else:
            config = SchedulerConfig(num_players=args.players)

        overrides = {}
        if args.players is not None:
            overrides['num_players'] = args.players
        if args.rounds is not None:
            overrides['rounds'] = args.rounds
        if args.verbose:
            overrides['verbose'] = True
        if overrides:
            config = SchedulerConfig(**{**config.model_dump(), **overrides})

        # Generate schedule
        print(f"Generating {config.resolved_rounds()} rounds for {config.num_players} players...",
              file=sys.stderr)
        # JSON output owns stdout; progress and validation go to stderr
        report = sys.stderr if args.json else sys.stdout
        with redirect_stdout(report):
            schedule = build_schedule(config.num_players, config.resolved_rounds(),
                                      verbose=config.verbose)

        # Validate schedule
        violations = validate_schedule(schedule)

        if violations['errors']:
            print("ERRORS found in schedule:", file=report)
            for error in violations['errors']:
                print(f"  - {error}", file=report)

        if violations['warnings']:
            print("WARNINGS found in schedule:", file=report)
            for warning in violations['warnings']:
                print(f"  - {warning}", file=report)

        if args.validate_only:
            print("Validation complete. Exiting.", file=report)
            return 1 if violations['errors'] else 0

        if args.json:
            print(json.dumps(schedule.to_dict(), indent=2))
        else:
            print_schedule(schedule, config)

        # Export to Excel
        if args.out:
            print(f"\nExporting schedule to {args.out}...", file=sys.stderr)
            with redirect_stdout(report):
                write_excel(schedule, config, args.out)

        if not args.json:
            stats = schedule.get_summary_stats()
            print("\n" + "=" * 50)
            print("SCHEDULING COMPLETE")
            print("=" * 50)
            print(f"Total rounds: {stats.get('total_rounds', 0)}")
            print(f"Total matches: {stats.get('total_matches', 0)}")
            if 'format_distribution' in stats:
                print(f"Format distribution: {stats['format_distribution']}")
            if 'matches_per_player' in stats:
                spread = stats['matches_per_player']
                print(f"Matches per player: {spread['min']} to {spread['max']}")

        return 0

    except FileNotFoundError as e:
        print(f"ERROR: File not found: {e}")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"ERROR: Invalid YAML configuration: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"ERROR: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    sys.exit(main())
