"""Round result set for one playoff season."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import config
from models.game import Game

# Stored round key -> RoundResults attribute
_ROUND_ATTRS = {
    "firstRound": "first_round",
    "quarterfinals": "quarterfinals",
    "semifinals": "semifinals",
    "championship": "championship",
}


def validate_round_key(round_key: str) -> str:
    if round_key not in _ROUND_ATTRS:
        raise KeyError(f"Unknown round: {round_key!r} (expected one of {', '.join(config.ROUND_KEYS)})")
    return round_key


@dataclass(frozen=True)
class RoundResults:
    first_round: list[Game] = field(default_factory=list)
    quarterfinals: list[Game] = field(default_factory=list)
    semifinals: list[Game] = field(default_factory=list)
    championship: list[Game] = field(default_factory=list)

    def games(self, round_key: str) -> list[Game]:
        return getattr(self, _ROUND_ATTRS[validate_round_key(round_key)])

    def with_round(self, round_key: str, games: list[Game]) -> RoundResults:
        """A copy with one round's games replaced."""
        return replace(self, **{_ROUND_ATTRS[validate_round_key(round_key)]: list(games)})

    @classmethod
    def from_dict(cls, data: dict | None) -> RoundResults:
        data = data or {}
        rounds = {}
        for round_key, attr in _ROUND_ATTRS.items():
            raw = data.get(round_key) or []
            # Older records keep the championship as a single object
            if isinstance(raw, dict):
                raw = [raw]
            rounds[attr] = [Game.from_dict(g) for g in raw]
        return cls(**rounds)

    def to_dict(self) -> dict:
        return {key: [g.to_dict() for g in self.games(key)] for key in config.ROUND_KEYS}

    def is_empty(self) -> bool:
        return not any(self.games(key) for key in config.ROUND_KEYS)
