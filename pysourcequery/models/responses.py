"""Decoded reply records."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from ..protocol.enums import ExtraDataFlag


@dataclass
class ExtraData:
    """Optional trailing block of an info reply.

    Presence of each field is decided once from the EDF byte. A field whose
    bit is clear stays None.
    """

    flags: ExtraDataFlag = ExtraDataFlag(0)
    port: Optional[int] = None
    spectator_port: Optional[int] = None
    spectator_name: Optional[str] = None
    keywords: Optional[str] = None
    game_id: Optional[int] = None

    @property
    def has_port(self) -> bool:
        return bool(self.flags & ExtraDataFlag.PORT)

    @property
    def has_steam_id(self) -> bool:
        return bool(self.flags & ExtraDataFlag.STEAM_ID)

    @property
    def has_spectator(self) -> bool:
        return bool(self.flags & ExtraDataFlag.SPECTATOR)

    @property
    def has_keywords(self) -> bool:
        return bool(self.flags & ExtraDataFlag.KEYWORDS)

    @property
    def has_game_id(self) -> bool:
        return bool(self.flags & ExtraDataFlag.GAME_ID)

    @property
    def keyword_list(self) -> List[str]:
        """Keywords split on commas (empty when absent)."""
        if not self.keywords:
            return []
        return [keyword for keyword in self.keywords.split(',') if keyword]


@dataclass
class InfoResponse:
    """A2S_INFO reply."""

    protocol: int
    name: str
    map: str
    folder: str
    game: str
    app_id: int
    players: int
    max_players: int
    bots: int
    server_type: str  # 'd' dedicated, 'l' listen, 'p' SourceTV relay
    environment: str  # 'l' Linux, 'w' Windows, 'm'/'o' Mac
    visibility: int
    vac: int
    version: str
    extra: Optional[ExtraData] = None

    @property
    def server_type_name(self) -> str:
        """Get human-readable server type name."""
        type_map = {
            "d": "Dedicated",
            "l": "Listen",
            "p": "SourceTV"
        }
        return type_map.get(self.server_type.lower(), "Unknown")

    @property
    def environment_name(self) -> str:
        """Get human-readable operating system name."""
        env_map = {
            "l": "Linux",
            "w": "Windows",
            "m": "Mac",
            "o": "Mac"
        }
        return env_map.get(self.environment.lower(), "Unknown")

    @property
    def password_protected(self) -> bool:
        return self.visibility == 1

    @property
    def vac_enabled(self) -> bool:
        return self.vac == 1

    def __str__(self) -> str:
        """String representation of server."""
        return f"{self.name} ({self.players}/{self.max_players} players) - {self.map}"


@dataclass
class Player:
    """One entry of an A2S_PLAYER reply."""

    index: int
    name: str
    score: int
    duration: float  # seconds connected


@dataclass
class PlayerResponse:
    """A2S_PLAYER reply."""

    player_count: int
    players: List[Player] = field(default_factory=list)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def __len__(self) -> int:
        return len(self.players)


@dataclass
class Rule:
    """One server rule (console variable)."""

    name: str
    value: str


@dataclass
class RulesResponse:
    """A2S_RULES reply."""

    rule_count: int
    rules: List[Rule] = field(default_factory=list)

    def as_dict(self) -> Dict[str, str]:
        """Rules as a name to value mapping (later duplicates win)."""
        return {rule.name: rule.value for rule in self.rules}

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
