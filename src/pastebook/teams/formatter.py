"""Render parsed teams back to paste format."""
from .models import Team

def format_team(team: Team) -> str:
    """Convert a team to paste text.

    Lossy with respect to the original paste: blank-line placement and
    unrecognized lines are not kept by the parser, so they cannot come back.
    """
    return team.to_showdown()
