from models.game import Game
from playoff.matcher import (
    dedupe_games,
    find_by_bowl,
    find_game,
    involving,
    matchup,
    same_matchup,
    seed_matchup,
)


def test_find_game_is_order_independent(quarterfinals):
    game = find_game(quarterfinals, matchup("UGA", "PSU"))
    assert game is quarterfinals[0]
    assert find_game(quarterfinals, matchup("PSU", "UGA")) is game
    assert find_game(quarterfinals, matchup("PSU", "OSU")) is None


def test_find_game_involving_team(quarterfinals):
    assert find_game(quarterfinals, involving("ASU")).bowl_name == "Cotton Bowl"
    assert find_game(quarterfinals, involving("TENN")) is None
    assert find_game([], involving("OSU")) is None


def test_seed_matchup_uses_stored_seeds(first_round):
    game = find_game(first_round, seed_matchup(12, 5))
    assert game.team1 == "UGA"


def test_seed_matchup_falls_back_to_seed_table(first_round, seeds):
    # SMU vs BOIS was stored without seeds
    assert find_game(first_round, seed_matchup(8, 9)) is None
    game = find_game(first_round, seed_matchup(8, 9, seeds))
    assert game.matchup_key == frozenset(("SMU", "BOIS"))


def test_find_by_bowl(semifinals):
    assert find_by_bowl(semifinals, "Fiesta Bowl").team1 == "ND"
    assert find_by_bowl(semifinals, "Rose Bowl") is None


def test_dedupe_keeps_last_entry_in_first_position(make_game):
    games = [
        make_game("OSU", 10, "UGA", 7),
        make_game("TEX", 21, "ND", 20),
        make_game("UGA", 28, "OSU", 14),
    ]
    deduped = dedupe_games(games)
    assert len(deduped) == 2
    assert deduped[0] is games[2]
    assert deduped[1] is games[1]
    assert same_matchup(deduped[0], Game("OSU", "UGA"))
