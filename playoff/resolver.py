"""Opponent and winner resolution for the 12-team bracket.

Everything here is derived from a season's seed table and whatever round
results have been recorded so far. Nothing is cached and nothing is
mutated, so the resolver can be rebuilt on every render. Missing or
undecided upstream games resolve to None ("not yet determinable"), never
to an exception. Asking about a seed outside 1-12 is a programming error
and raises ValueError.
"""

from __future__ import annotations

from dataclasses import dataclass

import config
from models import bracket
from models.game import Game, winner_of
from models.results import RoundResults
from models.seeds import SeedTable
from playoff.matcher import find_by_bowl, find_game, involving, seed_matchup


@dataclass(frozen=True)
class PathStep:
    """One round of a seed's run through the bracket."""
    round_key: str
    bowl: str
    opponent: str | None
    # True/False once the game is decided, None before
    won: bool | None = None


class PlayoffResolver:
    def __init__(self, seeds: SeedTable, results: RoundResults | None = None):
        self.seeds = seeds
        self.results = results or RoundResults()

    # --- First Round ---

    def first_round_game(self, seed_a: int, seed_b: int) -> Game | None:
        if bracket.first_round_pair(seed_a) != tuple(sorted((seed_a, seed_b))):
            raise ValueError(f"Seeds {seed_a} and {seed_b} do not meet in the First Round")
        return find_game(self.results.first_round, seed_matchup(seed_a, seed_b, self.seeds))

    def first_round_winner(self, seed_a: int, seed_b: int) -> str | None:
        """Winning team of a First Round pairing, or None if undecided."""
        return winner_of(self.first_round_game(seed_a, seed_b))

    def winning_seed(self, seed_a: int, seed_b: int) -> int | None:
        """Seed (seed_a or seed_b) that won the First Round pairing, or None.

        Read from the matched game's team1/team2 against its winner, so a
        game stored with seeds in either order resolves the same way.
        """
        game = self.first_round_game(seed_a, seed_b)
        winner = winner_of(game)
        if winner is None:
            return None
        if game.seed_key is not None:
            seed = game.seed1 if winner == game.team1 else game.seed2
        else:
            seed = self.seeds.seed_for(winner)
        if seed not in (seed_a, seed_b):
            return None
        return seed

    def is_in_quarterfinal(self, seed: int) -> bool:
        if bracket.has_bye(seed):
            return True
        return self.winning_seed(*bracket.first_round_pair(seed)) == seed

    # --- Quarterfinals ---

    def quarterfinal_bowl(self, seed: int) -> str:
        return bracket.quarterfinal_bowl(seed)

    def quarterfinal_opponent(self, seed: int) -> str | None:
        """The team a seed faces in its Quarterfinal bowl.

        Bye seeds face the winner of their feeding First Round game. Seeds
        5-12 face the bowl's host, but only once they have won their way in.
        """
        bowl = bracket.quarterfinal_bowl(seed)
        if bracket.has_bye(seed):
            return self.first_round_winner(*bracket.feeder_pair(bowl))
        if not self.is_in_quarterfinal(seed):
            return None
        return self.seeds.team_for(bracket.host_seed(bowl))

    def quarterfinal_game(self, bowl: str) -> Game | None:
        game = find_by_bowl(self.results.quarterfinals, bowl)
        if game is None:
            host = self.seeds.team_for(bracket.host_seed(bowl))
            if host is not None:
                game = find_game(self.results.quarterfinals, involving(host))
        return game

    def quarterfinal_winner(self, bowl: str) -> str | None:
        return winner_of(self.quarterfinal_game(bowl))

    # --- Semifinals ---

    def semifinal_bowl(self, seed: int) -> str:
        return bracket.semifinal_bowl(seed)

    def semifinal_opponent(self, seed: int) -> str | None:
        """The team a seed faces in its Semifinal bowl.

        Requires the seed to have won its Quarterfinal; the opponent is the
        winner of the sibling Quarterfinal bowl.
        """
        team = self.seeds.team_for(seed)
        if team is None or not self.is_in_quarterfinal(seed):
            return None
        qf_bowl = bracket.quarterfinal_bowl(seed)
        if self.quarterfinal_winner(qf_bowl) != team:
            return None
        return self.quarterfinal_winner(bracket.sibling_quarterfinal(qf_bowl))

    def semifinal_game(self, bowl: str) -> Game | None:
        game = find_by_bowl(self.results.semifinals, bowl)
        if game is None:
            for qf_bowl in bracket.SEMIFINAL_BOWLS[bowl]:
                qf_winner = self.quarterfinal_winner(qf_bowl)
                if qf_winner is not None:
                    game = find_game(self.results.semifinals, involving(qf_winner))
                    if game is not None:
                        break
        return game

    def semifinal_winner(self, bowl: str) -> str | None:
        return winner_of(self.semifinal_game(bowl))

    # --- Championship ---

    def championship_opponent(self, seed: int) -> str | None:
        """The team a seed faces in the championship, once it has won its Semifinal."""
        team = self.seeds.team_for(seed)
        if team is None:
            return None
        sf_bowl = bracket.semifinal_bowl(seed)
        if self.semifinal_winner(sf_bowl) != team:
            return None
        return self.semifinal_winner(bracket.other_semifinal(sf_bowl))

    def championship_game(self) -> Game | None:
        games = self.results.championship
        return find_by_bowl(games, config.CHAMPIONSHIP_BOWL) or (games[0] if games else None)

    def champion(self) -> str | None:
        return winner_of(self.championship_game())

    # --- Paths ---

    def path(self, seed: int) -> list[PathStep]:
        """The seed's run so far: one step per round reached.

        Stops at the first undecided or lost game.
        """
        team = self.seeds.team_for(seed)
        if team is None:
            return []
        steps = []

        if not bracket.has_bye(seed):
            opponent = self.seeds.team_for(bracket.first_round_opponent_seed(seed))
            won_by = self.winning_seed(*bracket.first_round_pair(seed))
            steps.append(PathStep("firstRound", config.FIRST_ROUND_BOWL, opponent, _won(won_by, seed)))
            if won_by != seed:
                return steps

        qf_bowl = bracket.quarterfinal_bowl(seed)
        qf_winner = self.quarterfinal_winner(qf_bowl)
        steps.append(PathStep("quarterfinals", qf_bowl, self.quarterfinal_opponent(seed), _won(qf_winner, team)))
        if qf_winner != team:
            return steps

        sf_bowl = bracket.semifinal_bowl_for(qf_bowl)
        sf_winner = self.semifinal_winner(sf_bowl)
        steps.append(PathStep("semifinals", sf_bowl, self.semifinal_opponent(seed), _won(sf_winner, team)))
        if sf_winner != team:
            return steps

        champ = self.champion()
        steps.append(PathStep("championship", config.CHAMPIONSHIP_BOWL,
                              self.championship_opponent(seed), _won(champ, team)))
        return steps

    def next_task(self, team: str) -> PathStep | None:
        """The team's next undecided playoff game.

        None if the team isn't seeded, has been eliminated, or won it all.
        """
        seed = self.seeds.seed_for(team)
        if seed is None:
            return None
        for step in self.path(seed):
            if step.won is None:
                return step
        return None


def _won(winner, own) -> bool | None:
    if winner is None:
        return None
    return winner == own
