"""Parser for team paste format."""
import logging
import re
from typing import Iterable, List, Mapping, Optional

from .constants import (
    ATTRIBUTE_PREFIXES,
    FORMAT_KEYWORDS,
    GENDERS,
    GENERATION_KEYWORDS,
    NATURES,
)
from .models import Pokemon, Team

logger = logging.getLogger(__name__)

# Rules that rule a line out as an entry header. Checked in order, each one
# on its own; a line passing all of them still has to match HEADER_PATTERN.

def has_attribute_prefix(line: str) -> bool:
    return line.startswith(ATTRIBUTE_PREFIXES)

def is_gender_line(line: str) -> bool:
    """Line is exactly "(M)" or "(F)"."""
    return re.match(r"^\([MF]\)$", line) is not None

def ends_with_nature(line: str) -> bool:
    """Line looks like "Adamant Nature"."""
    return re.search(r"\w+ Nature$", line) is not None

def is_move_line(line: str) -> bool:
    return line.startswith("-")

def is_not_capitalized(line: str) -> bool:
    return re.match(r"[A-Z]", line) is None

def leads_with_nature_name(line: str) -> bool:
    """The part before any "(" or "@" is a bare nature name."""
    return re.split(r"[@(]", line)[0].strip() in NATURES

def mentions_nature(line: str) -> bool:
    """Standalone word "Nature" on a line without an item separator."""
    return re.search(r"\bNature\b", line) is not None and "@" not in line

HEADER_EXCLUSIONS = (
    has_attribute_prefix,
    is_gender_line,
    ends_with_nature,
    is_move_line,
    is_not_capitalized,
    leads_with_nature_name,
    mentions_nature,
)


def _first_keyword_match(text: str, table: Mapping[str, Iterable[str]]) -> Optional[str]:
    lowered = text.lower()
    for label, keywords in table.items():
        if any(keyword in lowered for keyword in keywords):
            return label
    return None

def detect_format(text: str) -> Optional[str]:
    """Best-effort format label from keywords anywhere in the text."""
    return _first_keyword_match(text, FORMAT_KEYWORDS)

def detect_generation(text: str) -> Optional[str]:
    """Best-effort generation label from keywords anywhere in the text."""
    return _first_keyword_match(text, GENERATION_KEYWORDS)


class TeamParser:
    """Parse paste format into Team objects."""

    # "Name", "Name @ Item", "Name (Nickname) @ Item", "Name (F)"
    HEADER_PATTERN = re.compile(r"^[A-Z][A-Za-z0-9\-' ]+(\s*\([^)]+\))?(\s*@\s*.+)?$")
    HEADER_PARTS = re.compile(
        r"^(?P<name>[^(@]+)(?:\((?P<paren>[^)]+)\))?\s*(?:@\s*(?P<item>.+))?$"
    )
    POSSESSIVE_TEAM = re.compile(r"['’]s team:?", re.IGNORECASE)
    TEAM_SUFFIX = re.compile(r"team:$", re.IGNORECASE)
    LEVEL_PATTERN = re.compile(r"^Level:\s*(\d+)")
    NATURE_PATTERN = re.compile(r"(\w+) Nature$")
    GENDER_PATTERN = re.compile(r"^\(([MF])\)")

    def is_entry_header(self, line: str) -> bool:
        """Whether a line starts a new roster entry."""
        if any(rule(line) for rule in HEADER_EXCLUSIONS):
            return False
        return self.HEADER_PATTERN.match(line) is not None

    def is_team_header(self, line: str) -> bool:
        return bool(self.POSSESSIVE_TEAM.search(line) or self.TEAM_SUFFIX.search(line))

    def extract_team_name(self, line: str) -> Optional[str]:
        """Strip a possessive team marker; a "...team:" line is kept whole."""
        name = self.POSSESSIVE_TEAM.sub("", line, count=1)
        return name.strip() or None

    def parse_header(self, line: str) -> Pokemon:
        """Build a new entry from an entry-header line."""
        match = self.HEADER_PARTS.match(line)
        if not match:
            return Pokemon(name=line.strip())

        pokemon = Pokemon(name=match.group("name").strip())

        paren = (match.group("paren") or "").strip()
        if paren in GENDERS:
            pokemon.gender = paren
        elif paren:
            pokemon.nickname = paren

        if item := match.group("item"):
            pokemon.item = item.strip()

        return pokemon

    def apply_line(self, pokemon: Pokemon, line: str) -> None:
        """Update the open entry from an attribute or move line."""
        if line.startswith("Ability:"):
            pokemon.ability = line[len("Ability:"):].strip() or None

        elif line.startswith("Level:"):
            if match := self.LEVEL_PATTERN.match(line):
                pokemon.level = int(match.group(1))

        elif line.startswith("Tera Type:"):
            pokemon.tera_type = line[len("Tera Type:"):].strip() or None

        elif line.startswith("EVs:"):
            pokemon.evs = line[len("EVs:"):].strip() or None

        elif (match := self.NATURE_PATTERN.search(line)) and not line.startswith("-"):
            pokemon.nature = match.group(1)

        elif line.startswith("IVs:"):
            pokemon.ivs = line[len("IVs:"):].strip() or None

        elif "Shiny: Yes" in line:
            pokemon.shiny = True

        elif match := self.GENDER_PATTERN.match(line):
            pokemon.gender = match.group(1)

        elif line.startswith("-"):
            move = line[1:].strip()
            if move:
                pokemon.moves.append(move)

        # anything else (Happiness, Gigantamax, ...) is ignored

    def parse_team(self, text: str) -> Team:
        """Parse a full team from paste format."""
        lines = [l.strip() for l in text.split("\n") if l.strip()]

        team_name = None
        if lines and self.is_team_header(lines[0]):
            team_name = self.extract_team_name(lines[0])
            logger.debug(f"Team header found: {lines[0]!r}")
            lines = lines[1:]

        pokemon_list: List[Pokemon] = []
        current: Optional[Pokemon] = None

        for line in lines:
            if self.is_entry_header(line):
                if current and current.name:
                    pokemon_list.append(current)
                current = self.parse_header(line)
            elif current:
                self.apply_line(current, line)

        if current and current.name:
            pokemon_list.append(current)

        team = Team(pokemon=self._drop_misparses(pokemon_list), team_name=team_name)
        team.format = detect_format(text)
        team.generation = detect_generation(text)
        logger.debug(
            f"Parsed {len(team)} Pokemon (format={team.format}, generation={team.generation})"
        )
        return team

    @staticmethod
    def _drop_misparses(pokemon_list: List[Pokemon]) -> List[Pokemon]:
        kept = []
        for mon in pokemon_list:
            if mon.name in NATURES or "Nature" in mon.name or len(mon.name.strip()) < 2:
                logger.debug(f"Dropping misparsed entry: {mon.name!r}")
                continue
            kept.append(mon)
        return kept


def parse_team_paste(text: str) -> Team:
    """Parse paste text with a default parser."""
    return TeamParser().parse_team(text)
