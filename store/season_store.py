"""Season playoff records in a dynasty document.

A dynasty is one JSON document. Playoff data lives under two keys, each
keyed by season year:

    {
        "id": "my-dynasty",
        "teamName": "OSU",
        "currentYear": 2025,
        "cfpSeedsByYear": {"2025": [{"seed": 1, "team": "OSU"}, ...]},
        "cfpResultsByYear": {"2025": {"firstRound": [...], "quarterfinals": [...],
                                      "semifinals": [...], "championship": [...]}}
    }

SeasonPlayoffStore reads and writes those arrays; load_document and
save_document move the whole document to and from disk in one write.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace

import config
from models import bracket
from models.game import Game
from models.results import RoundResults, validate_round_key
from models.seeds import SeedTable
from playoff.merge import decide_game, merge_round, upsert_game
from playoff.resolver import PlayoffResolver

SEEDS_KEY = "cfpSeedsByYear"
RESULTS_KEY = "cfpResultsByYear"


class SeedsLockedError(ValueError):
    """Seeds can't be replaced once games reference them."""


@dataclass(frozen=True)
class SeasonContext:
    """Which dynasty, whose team, and which season a command acts on."""
    dynasty_id: str
    user_team: str | None
    year: int


class SeasonPlayoffStore:
    def __init__(self, document: dict):
        self.document = document

    def seeds(self, year: int) -> SeedTable:
        return SeedTable.from_records(self.document.get(SEEDS_KEY, {}).get(str(year)))

    def set_seeds(self, year: int, seeds: SeedTable, force: bool = False):
        """Store the year's seed table.

        Replacing a different table after games were recorded raises
        SeedsLockedError unless force is set.
        """
        current = self.seeds(year)
        if current and current != seeds and not force and not self.results(year).is_empty():
            raise SeedsLockedError(f"{year} already has playoff games recorded against its seeds")
        self.document.setdefault(SEEDS_KEY, {})[str(year)] = seeds.to_records()

    def results(self, year: int) -> RoundResults:
        return RoundResults.from_dict(self.document.get(RESULTS_KEY, {}).get(str(year)))

    def round_games(self, year: int, round_key: str) -> list[Game]:
        return self.results(year).games(round_key)

    def set_round(self, year: int, round_key: str, games: list[Game]):
        validate_round_key(round_key)
        season = self.document.setdefault(RESULTS_KEY, {}).setdefault(str(year), {})
        season[round_key] = [g.to_dict() for g in games]

    def import_round(self, context: SeasonContext, round_key: str, imported: list[Game]) -> list[Game]:
        """Bulk import a round, keeping the user's own game if the import omits it."""
        existing = self.round_games(context.year, round_key)
        if round_key == "firstRound":
            seeds = self.seeds(context.year)
            imported = [_with_seeds(g, seeds) for g in imported]
        merged = merge_round(existing, imported, context.user_team)
        self.set_round(context.year, round_key, merged)
        return merged

    def record_game(self, context: SeasonContext, round_key: str, game: Game) -> Game:
        """Single-game entry: validate, fill in seeds/bowl, and replace or append.

        Raises IncompleteGameError or TiedScoreError before anything is written.
        """
        validate_round_key(round_key)
        seeds = self.seeds(context.year)
        decided = decide_game(game)
        if round_key == "firstRound":
            decided = _with_seeds(decided, seeds)
        if decided.bowl_name is None:
            decided = replace(decided, bowl_name=_infer_bowl(round_key, decided, seeds))
        games = upsert_game(self.round_games(context.year, round_key), decided)
        self.set_round(context.year, round_key, games)
        return decided

    def resolver(self, year: int) -> PlayoffResolver:
        return PlayoffResolver(self.seeds(year), self.results(year))


def _with_seeds(game: Game, seeds: SeedTable) -> Game:
    if game.seed_key is not None:
        return game
    seed1, seed2 = seeds.seed_for(game.team1), seeds.seed_for(game.team2)
    if seed1 is None or seed2 is None:
        return game
    return replace(game, seed1=seed1, seed2=seed2)


def _infer_bowl(round_key: str, game: Game, seeds: SeedTable) -> str | None:
    """The bowl a game must be in, judging by its teams' seeds."""
    if round_key == "firstRound":
        return config.FIRST_ROUND_BOWL
    if round_key == "championship":
        return config.CHAMPIONSHIP_BOWL
    for team in (game.team1, game.team2):
        seed = seeds.seed_for(team)
        if seed is None:
            continue
        if round_key == "quarterfinals":
            return bracket.quarterfinal_bowl(seed)
        return bracket.semifinal_bowl(seed)
    return None


# --- Documents on disk ---

def document_path(data_dir: str, dynasty_id: str) -> str:
    return os.path.join(data_dir, f"{dynasty_id}.json")


def load_document(path: str, dynasty_id: str) -> dict:
    """Load a dynasty document, or start an empty one."""
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    return {"id": dynasty_id, SEEDS_KEY: {}, RESULTS_KEY: {}}


def save_document(path: str, document: dict):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)
