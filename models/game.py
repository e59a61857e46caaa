"""Playoff game record."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

# Stored JSON key -> Game attribute
_FIELD_KEYS = {
    "team1": "team1",
    "team2": "team2",
    "team1Score": "team1_score",
    "team2Score": "team2_score",
    "winner": "winner",
    "bowlName": "bowl_name",
    "seed1": "seed1",
    "seed2": "seed2",
}


@dataclass(eq=False)
class Game:
    team1: str
    team2: str
    team1_score: int | None = None
    team2_score: int | None = None
    winner: str | None = None
    bowl_name: str | None = None
    # Only set for First Round games: the seeds that produced team1/team2
    seed1: int | None = None
    seed2: int | None = None
    # Any other stored keys (ids, notes, flags), carried through untouched
    extra: dict = field(default_factory=dict)

    @property
    def matchup_key(self) -> frozenset:
        """The unordered team pair identifying this game."""
        return frozenset((self.team1, self.team2))

    @property
    def seed_key(self) -> frozenset | None:
        if self.seed1 is None or self.seed2 is None:
            return None
        return frozenset((self.seed1, self.seed2))

    @property
    def is_decided(self) -> bool:
        return winner_of(self) is not None

    def involves(self, team: str) -> bool:
        return team is not None and team in (self.team1, self.team2)

    def opponent_of(self, team: str) -> str | None:
        if team == self.team1:
            return self.team2
        if team == self.team2:
            return self.team1
        return None

    @classmethod
    def from_dict(cls, data: dict) -> Game:
        """Build a Game from its stored JSON shape."""
        kwargs = {}
        extra = {}
        for key, value in data.items():
            attr = _FIELD_KEYS.get(key)
            if attr is None:
                extra[key] = value
            else:
                kwargs[attr] = value
        kwargs.setdefault("team1", None)
        kwargs.setdefault("team2", None)
        kwargs["team1_score"] = coerce_score(kwargs.get("team1_score"))
        kwargs["team2_score"] = coerce_score(kwargs.get("team2_score"))
        for seed_attr in ("seed1", "seed2"):
            if kwargs.get(seed_attr) is not None:
                kwargs[seed_attr] = coerce_score(kwargs[seed_attr])
        return cls(extra=extra, **kwargs)

    def to_dict(self) -> dict:
        data = dict(self.extra)
        data["team1"] = self.team1
        data["team2"] = self.team2
        data["team1Score"] = self.team1_score
        data["team2Score"] = self.team2_score
        data["winner"] = self.winner
        if self.bowl_name is not None:
            data["bowlName"] = self.bowl_name
        if self.seed1 is not None:
            data["seed1"] = self.seed1
        if self.seed2 is not None:
            data["seed2"] = self.seed2
        return data

    def __str__(self):
        if self.team1_score is None or self.team2_score is None:
            return f"{self.team1} vs {self.team2}"
        return f"{self.team1} {self.team1_score} - {self.team2_score} {self.team2}"

    def __hash__(self):
        return hash(self.matchup_key)

    def __eq__(self, other):
        if not isinstance(other, Game):
            return False
        return self.matchup_key == other.matchup_key


def normalize_team(code):
    """Team codes are compared uppercase with surrounding whitespace removed."""
    if not isinstance(code, str):
        return code
    return code.strip().upper() or None


def coerce_score(value) -> int | None:
    """Coerce a raw score to a non-negative int, or None if it isn't one.

    Accepts ints, digit strings and integral floats (pandas hands back
    floats for columns with blanks).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or number < 0 or not number.is_integer():
        return None
    return int(number)


def score_winner(game: Game) -> str | None:
    """The strictly higher-scoring team, or None if undecided or tied."""
    if game.team1_score is None or game.team2_score is None:
        return None
    if game.team1_score > game.team2_score:
        return game.team1
    if game.team2_score > game.team1_score:
        return game.team2
    return None


def winner_of(game: Game | None) -> str | None:
    """The game's winner, cross-checked against its teams and scores.

    A stored winner that is neither team, or that the scores contradict,
    is treated as undecided. Records without a stored winner fall back to
    the scores.
    """
    if game is None:
        return None
    derived = score_winner(game)
    if derived is None:
        return None
    if game.winner is None:
        return derived
    if game.winner not in (game.team1, game.team2) or game.winner != derived:
        return None
    return game.winner
