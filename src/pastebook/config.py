"""Global configuration for the pastebook project."""

import os
from dataclasses import dataclass, field


@dataclass
class ParserConfig:
    """Configuration for paste parsing and team records."""

    default_team_name: str = "Untitled Team"
    record_id_length: int = 12


@dataclass
class PoolConfig:
    """Configuration for loading team pools from disk."""

    teams_dir: str = field(
        default_factory=lambda: os.getenv("PASTEBOOK_TEAMS_DIR", "teams")
    )
    pattern: str = "*.txt"


@dataclass
class Config:
    """Global configuration container."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    pool: PoolConfig = field(default_factory=PoolConfig)

    # Environment variables
    log_level: str = field(
        default_factory=lambda: os.getenv("PASTEBOOK_LOG_LEVEL", "INFO")
    )


# Global config instance
config = Config()
