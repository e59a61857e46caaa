import pytest

from models.game import Game, score_winner
from models.results import RoundResults
from models.seeds import SeedTable

SEEDS = {
    1: "OSU", 2: "TEX", 3: "ORE", 4: "PSU",
    5: "UGA", 6: "ND", 7: "CLEM", 8: "BOIS",
    9: "SMU", 10: "ASU", 11: "IU", 12: "TENN",
}


def _game(team1, score1, team2, score2, **kwargs):
    game = Game(team1=team1, team2=team2, team1_score=score1, team2_score=score2, **kwargs)
    game.winner = score_winner(game)
    return game


@pytest.fixture
def make_game():
    return _game


@pytest.fixture
def seeds():
    return SeedTable(SEEDS)


@pytest.fixture
def first_round():
    return [
        _game("UGA", 30, "TENN", 20, bowl_name="CFP First Round", seed1=5, seed2=12),
        # stored with the lower seed first and no seeds recorded
        _game("SMU", 24, "BOIS", 17, bowl_name="CFP First Round"),
        _game("ND", 27, "IU", 17, bowl_name="CFP First Round", seed1=6, seed2=11),
        _game("CLEM", 14, "ASU", 28, bowl_name="CFP First Round", seed1=7, seed2=10),
    ]


@pytest.fixture
def quarterfinals():
    return [
        _game("PSU", 21, "UGA", 31, bowl_name="Sugar Bowl"),
        _game("OSU", 42, "SMU", 10, bowl_name="Orange Bowl"),
        _game("ORE", 31, "ND", 34, bowl_name="Rose Bowl"),
        _game("TEX", 38, "ASU", 35, bowl_name="Cotton Bowl"),
    ]


@pytest.fixture
def semifinals():
    return [
        _game("UGA", 14, "OSU", 28, bowl_name="Peach Bowl"),
        _game("ND", 21, "TEX", 24, bowl_name="Fiesta Bowl"),
    ]


@pytest.fixture
def championship():
    return [_game("OSU", 34, "TEX", 23, bowl_name="National Championship")]


@pytest.fixture
def full_results(first_round, quarterfinals, semifinals, championship):
    return RoundResults(
        first_round=first_round,
        quarterfinals=quarterfinals,
        semifinals=semifinals,
        championship=championship,
    )
