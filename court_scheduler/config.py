"""
Configuration management for the court scheduler.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Dict, List, Optional

from .engine import default_rounds
from .layout import MAX_PLAYERS, MIN_PLAYERS


class ExcelOut(BaseModel):
    """Excel output configuration."""
    include_summaries: bool = Field(default=True, description="Include player and matrix sheets")
    sheets: Dict[str, str] = Field(
        default_factory=lambda: {
            "rounds_name": "Rounds",
            "players_name": "Players",
            "partners_name": "Partners",
            "opponents_name": "Opponents",
        },
        description="Sheet names"
    )


class SchedulerConfig(BaseModel):
    """Main configuration for the court scheduler."""
    num_players: int = Field(ge=MIN_PLAYERS, le=MAX_PLAYERS, description="Number of players")
    rounds: Optional[int] = Field(
        default=None, ge=1, description="Rounds to generate (default: players - 1)"
    )
    player_names: Optional[List[str]] = Field(
        default=None, description="Display names for players 1..num_players"
    )
    verbose: bool = Field(default=False, description="Print each placed match")

    # Output configuration
    excel: ExcelOut = Field(default_factory=ExcelOut)

    @field_validator('player_names')
    @classmethod
    def validate_names(cls, v):
        if v is None:
            return v
        cleaned = [name.strip() for name in v]
        if any(not name for name in cleaned):
            raise ValueError("Player names must not be empty")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("Player names must be unique")
        return cleaned

    @model_validator(mode='after')
    def validate_name_count(self):
        if self.player_names is not None and len(self.player_names) != self.num_players:
            raise ValueError(
                f"Expected {self.num_players} player names, got {len(self.player_names)}"
            )
        return self

    def resolved_rounds(self) -> int:
        """Number of rounds to generate."""
        if self.rounds is not None:
            return self.rounds
        return default_rounds(self.num_players)

    def get_player_names(self) -> Dict[int, str]:
        """Map player id to display name (the id itself when unnamed)."""
        if self.player_names is None:
            return {p: str(p) for p in range(1, self.num_players + 1)}
        return {i: name for i, name in enumerate(self.player_names, start=1)}


def load_config(config_path: str) -> SchedulerConfig:
    """Load configuration from YAML file."""
    import yaml

    with open(config_path, 'r') as f:
        config_data = yaml.safe_load(f)

    return SchedulerConfig(**config_data)


def save_config(config: SchedulerConfig, config_path: str) -> None:
    """Save configuration to YAML file."""
    import yaml

    with open(config_path, 'w') as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, indent=2)
