"""Pretty-print playoff output."""

from tabulate import tabulate

import config
from models import bracket
from models.team import TeamDirectory
from playoff.resolver import PathStep, PlayoffResolver


def print_bracket(resolver: PlayoffResolver, teams: TeamDirectory | None = None):
    """Print every round of the bracket, filling in teams as far as results allow.

    Args:
        resolver: Resolver over the season's seeds and results
        teams: Optional directory for display names
    """
    teams = teams or TeamDirectory()
    headers = ["Game", "Team 1", "Team 2", "Result", "Winner"]

    print("\n" + "=" * 60)
    print("           COLLEGE FOOTBALL PLAYOFF")
    print("=" * 60)

    # First Round
    rows = []
    for seed_a, seed_b in bracket.FIRST_ROUND_PAIRS:
        game = resolver.first_round_game(seed_a, seed_b)
        rows.append([
            f"{seed_a} vs {seed_b}",
            _label(resolver, resolver.seeds.team_for(seed_a), teams),
            _label(resolver, resolver.seeds.team_for(seed_b), teams),
            str(game) if game else "",
            _label(resolver, resolver.first_round_winner(seed_a, seed_b), teams, tbd=""),
        ])
    _print_round("firstRound", rows, headers)

    # Quarterfinals: host vs First Round winner
    rows = []
    for bowl in bracket.QUARTERFINAL_BOWLS:
        game = resolver.quarterfinal_game(bowl)
        rows.append([
            bowl,
            _label(resolver, resolver.seeds.team_for(bracket.host_seed(bowl)), teams),
            _label(resolver, resolver.first_round_winner(*bracket.feeder_pair(bowl)), teams),
            str(game) if game else "",
            _label(resolver, resolver.quarterfinal_winner(bowl), teams, tbd=""),
        ])
    _print_round("quarterfinals", rows, headers)

    # Semifinals
    rows = []
    for bowl, (qf_a, qf_b) in bracket.SEMIFINAL_BOWLS.items():
        game = resolver.semifinal_game(bowl)
        rows.append([
            bowl,
            _label(resolver, resolver.quarterfinal_winner(qf_a), teams),
            _label(resolver, resolver.quarterfinal_winner(qf_b), teams),
            str(game) if game else "",
            _label(resolver, resolver.semifinal_winner(bowl), teams, tbd=""),
        ])
    _print_round("semifinals", rows, headers)

    # Championship
    sf_a, sf_b = bracket.SEMIFINAL_BOWLS
    game = resolver.championship_game()
    rows = [[
        config.CHAMPIONSHIP_BOWL,
        _label(resolver, resolver.semifinal_winner(sf_a), teams),
        _label(resolver, resolver.semifinal_winner(sf_b), teams),
        str(game) if game else "",
        _label(resolver, resolver.champion(), teams, tbd=""),
    ]]
    _print_round("championship", rows, headers)

    champion = resolver.champion()
    if champion:
        print(f"\n  CHAMPION: {_label(resolver, champion, teams)}")
    print("\n" + "=" * 60)


def print_path(resolver: PlayoffResolver, seed: int, teams: TeamDirectory | None = None):
    """Print a seed's run through the bracket so far."""
    teams = teams or TeamDirectory()
    team = resolver.seeds.team_for(seed)
    print(f"\n=== PLAYOFF PATH: {_label(resolver, team, teams)} ===\n")

    steps = resolver.path(seed)
    if not steps:
        print("  No team assigned to this seed.")
        return

    rows = [[config.ROUND_NAMES[s.round_key], s.bowl, _label(resolver, s.opponent, teams), _result(s)]
            for s in steps]
    print(tabulate(rows, headers=["Round", "Bowl", "Opponent", "Result"], tablefmt="simple"))


def print_next_task(step: PathStep | None, team: str, teams: TeamDirectory | None = None):
    teams = teams or TeamDirectory()
    name = teams.display_name(team)
    if step is None:
        print(f"\nNo playoff game left to enter for {name}.")
        return
    opponent = teams.display_name(step.opponent)
    print(f"\nNext: {config.ROUND_NAMES[step.round_key]} ({step.bowl}) - {name} vs {opponent}")
    if step.opponent is None:
        print("  Opponent is decided by an earlier round; enter those results first.")


def _print_round(round_key: str, rows: list, headers: list):
    print(f"\n--- {config.ROUND_NAMES[round_key].upper()} ---\n")
    print(tabulate(rows, headers=headers, tablefmt="simple"))


def _label(resolver: PlayoffResolver, team: str | None, teams: TeamDirectory, tbd: str = "TBD") -> str:
    if not team:
        return tbd
    seed = resolver.seeds.seed_for(team)
    name = teams.display_name(team)
    return f"({seed}) {name}" if seed else name


def _result(step: PathStep) -> str:
    if step.won is None:
        return "-"
    return "W" if step.won else "L"
