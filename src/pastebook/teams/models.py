"""Data models for parsed teams."""
from dataclasses import asdict, dataclass, field
from typing import Any, List, Optional
import hashlib

@dataclass
class Pokemon:
    """A single roster entry on a team."""
    name: str
    nickname: Optional[str] = None
    gender: Optional[str] = None
    item: Optional[str] = None
    ability: Optional[str] = None
    level: Optional[int] = None
    tera_type: Optional[str] = None
    evs: Optional[str] = None
    ivs: Optional[str] = None
    nature: Optional[str] = None
    moves: List[str] = field(default_factory=list)
    shiny: bool = False

    def to_showdown(self) -> str:
        """Convert to paste format."""
        lines = []

        # Name line
        name_line = self.name
        if self.nickname:
            name_line += f" ({self.nickname})"
        if self.item:
            name_line += f" @ {self.item}"
        lines.append(name_line)

        if self.ability:
            lines.append(f"Ability: {self.ability}")

        if self.level is not None:
            lines.append(f"Level: {self.level}")

        if self.tera_type:
            lines.append(f"Tera Type: {self.tera_type}")

        if self.evs:
            lines.append(f"EVs: {self.evs}")

        if self.nature:
            lines.append(f"{self.nature} Nature")

        if self.ivs:
            lines.append(f"IVs: {self.ivs}")

        if self.shiny:
            lines.append("Shiny: Yes")

        # The header parenthetical is taken by the nickname
        if self.gender and not self.nickname:
            lines.append(f"({self.gender})")

        for move in self.moves:
            lines.append(f"- {move}")

        return "\n".join(lines)


@dataclass
class Team:
    """A parsed team."""
    pokemon: List[Pokemon] = field(default_factory=list)
    team_name: Optional[str] = None
    format: Optional[str] = None
    generation: Optional[str] = None

    def __len__(self) -> int:
        return len(self.pokemon)

    @property
    def key_pokemon(self) -> List[str]:
        """Names of the roster entries, in order."""
        return [p.name for p in self.pokemon]

    def to_showdown(self) -> str:
        """Convert team to paste format."""
        blocks = []
        if self.team_name:
            blocks.append(self.team_name)
        blocks.extend(p.to_showdown() for p in self.pokemon)
        return "\n\n".join(blocks).rstrip()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Team":
        pokemon = [Pokemon(**p) for p in data.get("pokemon", [])]
        return cls(
            pokemon=pokemon,
            team_name=data.get("team_name"),
            format=data.get("format"),
            generation=data.get("generation"),
        )

    @staticmethod
    def generate_id(content: str, length: int = 12) -> str:
        """Generate stable team ID from paste content."""
        return hashlib.sha256(content.encode()).hexdigest()[:length]
