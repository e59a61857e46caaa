"""Team display metadata."""

from dataclasses import dataclass

from models.game import normalize_team


@dataclass(frozen=True)
class TeamInfo:
    code: str
    name: str
    mascot: str = ""

    def __str__(self):
        return f"{self.name} {self.mascot}".strip()


class TeamDirectory:
    """Read-only lookup of team code -> TeamInfo."""

    def __init__(self, teams: list[TeamInfo] | None = None):
        self._teams = {normalize_team(t.code): t for t in teams or []}

    def get(self, code: str) -> TeamInfo | None:
        return self._teams.get(normalize_team(code))

    def display_name(self, code: str | None) -> str:
        """School name for a code, falling back to the code itself."""
        if not code:
            return "TBD"
        info = self.get(code)
        return info.name if info else code

    def __contains__(self, code):
        return normalize_team(code) in self._teams

    def __len__(self):
        return len(self._teams)
