"""Game lookup within a round.

Games are identified by their unordered team pair (First Round games can
also be found by their unordered seed pair), so a game stored as (A, B)
matches a query for (B, A).
"""

from __future__ import annotations

from typing import Callable, Iterable

from models.game import Game
from models.seeds import SeedTable

GamePredicate = Callable[[Game], bool]


def find_game(games: Iterable[Game], predicate: GamePredicate) -> Game | None:
    """Return the first game satisfying predicate, or None."""
    for game in games:
        if predicate(game):
            return game
    return None


def involving(team: str) -> GamePredicate:
    return lambda game: game.involves(team)


def matchup(team_a: str, team_b: str) -> GamePredicate:
    key = frozenset((team_a, team_b))
    return lambda game: game.matchup_key == key


def seed_matchup(seed_a: int, seed_b: int, seeds: SeedTable | None = None) -> GamePredicate:
    """Match a First Round game by its unordered seed pair.

    Games stored without seed1/seed2 are matched through the seed table,
    when one is given.
    """
    key = frozenset((seed_a, seed_b))

    def predicate(game: Game) -> bool:
        if game.seed_key is not None:
            return game.seed_key == key
        if seeds is None:
            return False
        return frozenset((seeds.seed_for(game.team1), seeds.seed_for(game.team2))) == key

    return predicate


def find_by_bowl(games: Iterable[Game], bowl_name: str) -> Game | None:
    return find_game(games, lambda game: game.bowl_name == bowl_name)


def same_matchup(a: Game, b: Game) -> bool:
    return a.matchup_key == b.matchup_key


def dedupe_games(games: Iterable[Game]) -> list[Game]:
    """One game per unordered team pair.

    The last occurrence wins and takes the position of the first.
    """
    by_key: dict[frozenset, Game] = {}
    for game in games:
        by_key[game.matchup_key] = game
    return list(by_key.values())
