"""Team pool loader."""
import logging
from pathlib import Path
from typing import Iterator, List, Optional

from .models import Team
from .parser import TeamParser
from ..config import config

logger = logging.getLogger(__name__)

class TeamPool:
    """A pool of parsed teams, keyed by team name."""

    def __init__(self, teams: List[Team]):
        self._teams = teams
        self._by_name = {t.team_name: t for t in teams}

    def __len__(self) -> int:
        return len(self._teams)

    def __getitem__(self, name: str) -> Team:
        return self._by_name[name]

    def __iter__(self) -> Iterator[Team]:
        return iter(self._teams)

    def names(self) -> List[str]:
        """Get all team names."""
        return list(self._by_name.keys())

    def filter(self, format: Optional[str] = None, generation: Optional[str] = None) -> "TeamPool":
        """Teams whose detected format/generation equal the given labels."""
        teams = [
            t for t in self._teams
            if (format is None or t.format == format)
            and (generation is None or t.generation == generation)
        ]
        return TeamPool(teams)

    @classmethod
    def from_directory(cls, path: Path, pattern: str = "*.txt") -> "TeamPool":
        """Load team pool from a directory of paste files."""
        parser = TeamParser()
        teams = []
        seen = set()

        if not path.exists():
            raise FileNotFoundError(f"Team directory not found: {path}")

        for team_file in sorted(path.glob(pattern)):
            try:
                content = team_file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to load {team_file}: {e}")
                continue

            team = parser.parse_team(content)
            if not team.team_name:
                team.team_name = team_file.stem
            elif team.team_name in seen:
                logger.warning(
                    f"Duplicate team name {team.team_name!r} in {team_file.name}, using {team_file.stem!r}"
                )
                team.team_name = team_file.stem
            seen.add(team.team_name)
            teams.append(team)
            logger.debug(f"Loaded team: {team.team_name} ({len(team)} Pokemon)")

        logger.info(f"Loaded {len(teams)} teams from {path}")
        return cls(teams)


def get_default_pool() -> TeamPool:
    """Get the pool from the configured teams directory."""
    return TeamPool.from_directory(Path(config.pool.teams_dir), pattern=config.pool.pattern)
