"""
Court Scheduler - rotates a group of players across up to three courts.
"""

__version__ = "0.1.0"

from .config import SchedulerConfig
from .models import Format, Match, Round, Schedule
from .layout import CourtLayout, plan_layout
from .pairing import PairingMatrices
from .load import LoadTracker
from .selector import MatchSelector
from .engine import RoundScheduler, build_schedule, generate_schedule, validate_schedule
from .export import write_excel

__all__ = [
    "SchedulerConfig",
    "Format",
    "Match",
    "Round",
    "Schedule",
    "CourtLayout",
    "plan_layout",
    "PairingMatrices",
    "LoadTracker",
    "MatchSelector",
    "RoundScheduler",
    "build_schedule",
    "generate_schedule",
    "validate_schedule",
    "write_excel",
]
