"""Seed assignment for one playoff season."""

from __future__ import annotations

import config
from models.bracket import validate_seed
from models.game import normalize_team


class SeedTable:
    """Seed (1-12) -> team code. At most one team per seed and one seed per team."""

    def __init__(self, teams_by_seed: dict[int, str] | None = None):
        self._teams: dict[int, str] = {}
        seen: dict[str, int] = {}
        for seed, team in (teams_by_seed or {}).items():
            validate_seed(seed)
            team = normalize_team(team)
            if not team:
                continue
            if team in seen:
                raise ValueError(f"{team} is listed under seeds {seen[team]} and {seed}")
            seen[team] = seed
            self._teams[seed] = team
        self._seeds = seen

    def team_for(self, seed: int) -> str | None:
        return self._teams.get(seed)

    def seed_for(self, team: str) -> int | None:
        return self._seeds.get(normalize_team(team))

    def is_complete(self) -> bool:
        return len(self._teams) == config.NUM_SEEDS

    def items(self):
        return sorted(self._teams.items())

    def __len__(self):
        return len(self._teams)

    def __bool__(self):
        return bool(self._teams)

    def __eq__(self, other):
        if not isinstance(other, SeedTable):
            return False
        return self._teams == other._teams

    def __repr__(self):
        return f"SeedTable({dict(self.items())!r})"

    @classmethod
    def from_records(cls, records) -> SeedTable:
        """Build from the stored list of {"seed": n, "team": code}.

        A {"1": code, ...} mapping is accepted as well.
        """
        if not records:
            return cls()
        if isinstance(records, dict):
            return cls({int(seed): team for seed, team in records.items()})
        return cls({int(r["seed"]): r.get("team") for r in records})

    def to_records(self) -> list[dict]:
        return [{"seed": seed, "team": team} for seed, team in self.items()]
