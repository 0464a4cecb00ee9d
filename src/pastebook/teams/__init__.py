"""Team paste parsing and formatting."""
from .models import Pokemon, Team
from .parser import TeamParser, parse_team_paste
from .formatter import format_team
from .loader import TeamPool, get_default_pool

__all__ = [
    "Pokemon",
    "Team",
    "TeamParser",
    "parse_team_paste",
    "format_team",
    "TeamPool",
    "get_default_pool",
]
