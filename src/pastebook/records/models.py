"""Data models for stored team records."""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel

class TeamRecord(BaseModel):
    """A team as exchanged with storage collaborators."""
    record_id: str
    team_name: str = "Untitled Team"
    team_paste: str
    format: Optional[str] = None  # one of FORMAT_OPTIONS
    generation: Optional[str] = None  # one of GENERATION_OPTIONS
    strategy: Optional[str] = None
    key_pokemon: Optional[List[str]] = None
    last_updated: Optional[date] = None

class TeamFilters(BaseModel):
    """Filters applied to a list of team records."""
    format: Optional[str] = None
    generation: Optional[str] = None
    strategy: Optional[str] = None

    def is_active(self) -> bool:
        return bool(self.format or self.generation or self.strategy)

    def matches(self, record: TeamRecord) -> bool:
        if self.format and record.format != self.format:
            return False
        if self.generation and record.generation != self.generation:
            return False
        if self.strategy:
            notes = (record.strategy or "").lower()
            if self.strategy.lower() not in notes:
                return False
        return True
