import pytest

from models.game import Game
from models.results import RoundResults
from models.seeds import SeedTable
from playoff.resolver import PathStep, PlayoffResolver

FIRST_ROUND_PAIRS = [(5, 12), (6, 11), (7, 10), (8, 9)]


def test_nothing_resolves_without_results(seeds):
    resolver = PlayoffResolver(seeds, RoundResults())
    for pair in FIRST_ROUND_PAIRS:
        assert resolver.first_round_winner(*pair) is None
        assert resolver.winning_seed(*pair) is None
    for seed in range(1, 13):
        assert resolver.quarterfinal_opponent(seed) is None
        assert resolver.semifinal_opponent(seed) is None
        assert resolver.championship_opponent(seed) is None
    assert resolver.champion() is None


def test_first_round_winner_needs_both_scores(seeds, make_game):
    pending = Game("UGA", "TENN", team1_score=30, seed1=5, seed2=12)
    resolver = PlayoffResolver(seeds, RoundResults(first_round=[pending]))
    assert resolver.first_round_winner(5, 12) is None

    decided = make_game("UGA", 30, "TENN", 20, seed1=5, seed2=12)
    resolver = PlayoffResolver(seeds, RoundResults(first_round=[decided]))
    assert resolver.first_round_winner(5, 12) == "UGA"
    assert resolver.first_round_winner(12, 5) == "UGA"


def test_first_round_winner_is_higher_score_for_every_pairing(seeds, first_round):
    resolver = PlayoffResolver(seeds, RoundResults(first_round=first_round))
    assert resolver.first_round_winner(5, 12) == "UGA"
    assert resolver.first_round_winner(8, 9) == "SMU"
    assert resolver.first_round_winner(6, 11) == "ND"
    assert resolver.first_round_winner(7, 10) == "ASU"


def test_winning_seed(seeds, first_round):
    resolver = PlayoffResolver(seeds, RoundResults(first_round=first_round))
    assert resolver.winning_seed(5, 12) == 5
    # stored without seeds, lower seed listed first
    assert resolver.winning_seed(8, 9) == 9
    assert resolver.winning_seed(7, 10) == 10


def test_winning_seed_with_reversed_stored_order(seeds, make_game):
    game = make_game("TENN", 20, "UGA", 30, seed1=12, seed2=5)
    resolver = PlayoffResolver(seeds, RoundResults(first_round=[game]))
    assert resolver.winning_seed(5, 12) == 5


def test_first_round_query_must_be_a_real_pairing(seeds):
    resolver = PlayoffResolver(seeds)
    with pytest.raises(ValueError):
        resolver.first_round_winner(5, 11)
    with pytest.raises(ValueError):
        resolver.first_round_winner(1, 16)


def test_tied_first_round_game_is_undecided(seeds):
    tied = Game("UGA", "TENN", 21, 21, winner="TENN", seed1=5, seed2=12)
    resolver = PlayoffResolver(seeds, RoundResults(first_round=[tied]))
    assert resolver.first_round_winner(5, 12) is None
    assert not resolver.is_in_quarterfinal(5)
    assert not resolver.is_in_quarterfinal(12)


def test_is_in_quarterfinal(seeds, first_round):
    empty = PlayoffResolver(seeds)
    for seed in range(1, 5):
        assert empty.is_in_quarterfinal(seed)
    for seed in range(5, 13):
        assert not empty.is_in_quarterfinal(seed)

    resolver = PlayoffResolver(seeds, RoundResults(first_round=first_round))
    assert [s for s in range(1, 13) if resolver.is_in_quarterfinal(s)] == [1, 2, 3, 4, 5, 6, 9, 10]


def test_quarterfinal_opponent_scenario(make_game):
    seeds = SeedTable({1: "A", 4: "B", 5: "C", 12: "D", 8: "E", 9: "F"})
    results = RoundResults(first_round=[make_game("C", 30, "D", 20, seed1=5, seed2=12)])
    resolver = PlayoffResolver(seeds, results)

    assert resolver.first_round_winner(5, 12) == "C"
    assert resolver.winning_seed(5, 12) == 5
    assert resolver.quarterfinal_opponent(4) == "C"
    assert resolver.quarterfinal_opponent(5) == "B"
    assert resolver.quarterfinal_opponent(12) is None
    # 8/9 hasn't been played
    assert resolver.quarterfinal_opponent(1) is None
    assert resolver.quarterfinal_opponent(8) is None
    assert resolver.quarterfinal_bowl(5) == "Sugar Bowl"


def test_semifinal_opponent(seeds, first_round, quarterfinals):
    partial = PlayoffResolver(seeds, RoundResults(first_round=first_round, quarterfinals=quarterfinals[:1]))
    # UGA won the Sugar Bowl but the Orange Bowl is still to play
    assert partial.semifinal_opponent(5) is None

    resolver = PlayoffResolver(seeds, RoundResults(first_round=first_round, quarterfinals=quarterfinals))
    assert resolver.semifinal_opponent(5) == "OSU"
    assert resolver.semifinal_opponent(1) == "UGA"
    assert resolver.semifinal_opponent(6) == "TEX"
    assert resolver.semifinal_opponent(2) == "ND"
    # lost in the Quarterfinals
    assert resolver.semifinal_opponent(4) is None
    assert resolver.semifinal_opponent(3) is None
    # never reached the Quarterfinals
    assert resolver.semifinal_opponent(12) is None
    assert resolver.semifinal_bowl(5) == "Peach Bowl"


def test_quarterfinal_game_found_without_bowl_name(seeds, first_round, make_game):
    results = RoundResults(first_round=first_round, quarterfinals=[make_game("SMU", 10, "OSU", 42)])
    resolver = PlayoffResolver(seeds, results)
    assert resolver.quarterfinal_winner("Orange Bowl") == "OSU"
    assert resolver.quarterfinal_winner("Sugar Bowl") is None


def test_championship_opponent(seeds, full_results):
    resolver = PlayoffResolver(seeds, full_results)
    assert resolver.championship_opponent(1) == "TEX"
    assert resolver.championship_opponent(2) == "OSU"
    assert resolver.championship_opponent(5) is None
    assert resolver.championship_opponent(12) is None
    assert resolver.champion() == "OSU"


def test_championship_opponent_waits_for_other_semifinal(seeds, full_results, semifinals):
    resolver = PlayoffResolver(seeds, full_results.with_round("semifinals", semifinals[:1]))
    assert resolver.championship_opponent(1) is None


def test_mismatched_winner_is_not_trusted(seeds, first_round, quarterfinals):
    broken = list(quarterfinals)
    broken[1] = Game("OSU", "SMU", 42, 10, winner="XXX", bowl_name="Orange Bowl")
    resolver = PlayoffResolver(seeds, RoundResults(first_round=first_round, quarterfinals=broken))
    assert resolver.quarterfinal_winner("Orange Bowl") is None
    assert resolver.semifinal_opponent(1) is None
    assert resolver.semifinal_opponent(5) is None


def test_resolution_is_deterministic(seeds, full_results):
    a = PlayoffResolver(seeds, full_results)
    b = PlayoffResolver(seeds, full_results)
    for seed in range(1, 13):
        assert a.quarterfinal_opponent(seed) == b.quarterfinal_opponent(seed)
        assert a.semifinal_opponent(seed) == b.semifinal_opponent(seed)
        assert a.championship_opponent(seed) == b.championship_opponent(seed)


def test_path(seeds, full_results):
    resolver = PlayoffResolver(seeds, full_results)
    assert resolver.path(5) == [
        PathStep("firstRound", "CFP First Round", "TENN", True),
        PathStep("quarterfinals", "Sugar Bowl", "PSU", True),
        PathStep("semifinals", "Peach Bowl", "OSU", False),
    ]
    assert resolver.path(1) == [
        PathStep("quarterfinals", "Orange Bowl", "SMU", True),
        PathStep("semifinals", "Peach Bowl", "UGA", True),
        PathStep("championship", "National Championship", "TEX", True),
    ]
    assert resolver.path(12) == [PathStep("firstRound", "CFP First Round", "UGA", False)]


def test_path_for_unassigned_seed():
    assert PlayoffResolver(SeedTable({1: "OSU"})).path(2) == []


def test_next_task(seeds, first_round, full_results):
    resolver = PlayoffResolver(seeds, RoundResults(first_round=first_round))
    assert resolver.next_task("OSU") == PathStep("quarterfinals", "Orange Bowl", "SMU", None)
    assert resolver.next_task("TENN") is None
    assert resolver.next_task("XXX") is None

    before_first_round = PlayoffResolver(seeds)
    assert before_first_round.next_task("UGA") == PathStep("firstRound", "CFP First Round", "TENN", None)
    assert before_first_round.next_task("PSU") == PathStep("quarterfinals", "Sugar Bowl", None, None)

    finished = PlayoffResolver(seeds, full_results)
    assert finished.next_task("OSU") is None
    assert finished.next_task("TEX") is None
