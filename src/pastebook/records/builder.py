"""Build, update and filter team records from pastes."""
import logging
from datetime import date
from typing import Iterable, List, Optional

from ..config import config
from ..teams.models import Team
from ..teams.parser import TeamParser
from .models import TeamFilters, TeamRecord

logger = logging.getLogger(__name__)

# Fields an update may clear by passing an empty string
CLEARABLE_FIELDS = ("format", "generation", "strategy")

UPDATABLE_FIELDS = ("team_name", "team_paste", "key_pokemon") + CLEARABLE_FIELDS


def _key_pokemon(team: Team) -> Optional[List[str]]:
    names = team.key_pokemon
    return names if names else None


def build_record(
    paste: str,
    team_name: Optional[str] = None,
    format: Optional[str] = None,
    generation: Optional[str] = None,
    strategy: Optional[str] = None,
    today: Optional[date] = None,
) -> TeamRecord:
    """Create a record for a new paste.

    Explicit values win; otherwise the team name, format and generation
    detected in the paste fill in.
    """
    if not paste or not paste.strip():
        raise ValueError("Team paste is required")

    team = TeamParser().parse_team(paste)

    record = TeamRecord(
        record_id=Team.generate_id(paste, config.parser.record_id_length),
        team_name=team_name or team.team_name or config.parser.default_team_name,
        team_paste=paste,
        format=format or team.format,
        generation=generation or team.generation,
        strategy=strategy or None,
        key_pokemon=_key_pokemon(team),
        last_updated=today or date.today(),
    )
    logger.debug(f"Built record {record.record_id}: {record.team_name} ({len(team)} Pokemon)")
    return record


def update_record(record: TeamRecord, today: Optional[date] = None, **changes) -> TeamRecord:
    """Apply a partial update; fields not passed are left alone."""
    unknown = set(changes) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValueError(f"Unknown record fields: {', '.join(sorted(unknown))}")

    if "team_paste" in changes and not (changes["team_paste"] or "").strip():
        raise ValueError("Team paste is required")

    updates = {}
    for name, value in changes.items():
        if name in CLEARABLE_FIELDS:
            updates[name] = value or None
        elif name == "key_pokemon":
            updates[name] = list(value) if value else None
        else:
            updates[name] = value

    if "team_paste" in changes and "key_pokemon" not in changes:
        team = TeamParser().parse_team(changes["team_paste"])
        updates["key_pokemon"] = _key_pokemon(team)

    updates["last_updated"] = today or date.today()
    return record.model_copy(update=updates)


def filter_records(records: Iterable[TeamRecord], filters: TeamFilters) -> List[TeamRecord]:
    """Records matching every active filter, in their original order."""
    if not filters.is_active():
        return list(records)
    return [r for r in records if filters.matches(r)]
