"""Merging new results into a stored round.

Two write paths feed a round array:
- single-game entry by the user (decide_game + upsert_game)
- bulk import of a whole round from a spreadsheet (merge_round)

A bulk import replaces the round wholesale, except that the user's own
("protected") game is carried over when the import doesn't mention the
user's team.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

import config
from models.game import Game, coerce_score, normalize_team, score_winner
from playoff.matcher import dedupe_games, find_game, involving


class IncompleteGameError(ValueError):
    """A game is missing a team or a score."""


class TiedScoreError(ValueError):
    """A game's scores are equal, so it has no winner."""


def sanitize_game(game: Game) -> Game:
    """Coerce scores to ints (or None) and re-derive the winner from them.

    Tied scores leave the game undecided.
    """
    sanitized = replace(
        game,
        team1=normalize_team(game.team1),
        team2=normalize_team(game.team2),
        team1_score=coerce_score(game.team1_score),
        team2_score=coerce_score(game.team2_score),
        extra=dict(game.extra),
    )
    sanitized.winner = score_winner(sanitized)
    return sanitized


def sanitize_round(games: Iterable[Game]) -> list[Game]:
    """Sanitize every game; a team pair listed twice keeps its last entry."""
    return dedupe_games(sanitize_game(g) for g in games)


def merge_round(existing: list[Game], imported: list[Game], protected_team: str | None) -> list[Game]:
    """Fold a freshly imported round into the stored one.

    The sanitized import is authoritative. If it has no game for the
    protected team, the stored game for that team (if any) is appended
    as-is. The result is meant to replace the stored round outright.
    """
    merged = sanitize_round(imported)
    protected_team = normalize_team(protected_team)
    if protected_team is None:
        return merged
    if find_game(merged, involving(protected_team)) is not None:
        return merged
    protected = find_game(existing, involving(protected_team))
    if protected is not None:
        merged.append(protected)
    return merged


def decide_game(game: Game) -> Game:
    """Validate a single entered game and derive its winner.

    Raises IncompleteGameError for a missing team or score, and
    TiedScoreError for equal scores.
    """
    decided = sanitize_game(game)
    if not decided.team1 or not decided.team2:
        raise IncompleteGameError("Both teams are required")
    if decided.team1 == decided.team2:
        raise ValueError(f"A team can't play itself: {decided.team1}")
    if decided.team1_score is None or decided.team2_score is None:
        raise IncompleteGameError(f"Both scores are required for {decided.team1} vs {decided.team2}")
    if decided.winner is None:
        raise TiedScoreError(f"{decided} is tied; playoff games need a winner")
    return decided


def upsert_game(games: list[Game], game: Game) -> list[Game]:
    """Replace the game occupying the same slot, or append.

    A slot is the same team pair, else the same First Round seed pair,
    else the same bowl (First Round games all share one bowl name).
    """
    def same_slot(existing: Game) -> bool:
        if existing.matchup_key == game.matchup_key:
            return True
        if game.seed_key is not None:
            return existing.seed_key == game.seed_key
        return game.bowl_name not in (None, config.FIRST_ROUND_BOWL) and existing.bowl_name == game.bowl_name

    updated = list(games)
    for i, existing in enumerate(updated):
        if same_slot(existing):
            updated[i] = game
            return updated
    updated.append(game)
    return updated
