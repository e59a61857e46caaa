"""CSV loading for seeds and team metadata.

Used when the user prefers keeping these in a spreadsheet.
"""

import pandas as pd

from models.game import coerce_score
from models.seeds import SeedTable
from models.team import TeamDirectory, TeamInfo


def load_seeds_from_csv(filepath: str) -> SeedTable:
    """Load seeds from a user-prepared CSV.

    Expected columns: seed, team
    """
    df = pd.read_csv(filepath)
    teams_by_seed = {}

    for _, row in df.iterrows():
        seed = coerce_score(row.iloc[0])
        if seed is None or pd.isna(row.iloc[1]):
            continue
        teams_by_seed[seed] = str(row.iloc[1]).strip()

    seeds = SeedTable(teams_by_seed)
    print(f"Loaded {len(seeds)} seeds from {filepath}")
    return seeds


def load_teams_from_csv(filepath: str) -> TeamDirectory:
    """Load team display names from a user-prepared CSV.

    Expected columns: code, name [, mascot]
    """
    df = pd.read_csv(filepath)
    teams = []

    for _, row in df.iterrows():
        code = str(row.iloc[0]).strip()
        teams.append(TeamInfo(
            code=code,
            name=str(row.iloc[1]).strip() if len(row) > 1 else code,
            mascot=str(row.iloc[2]).strip() if len(row) > 2 and not pd.isna(row.iloc[2]) else "",
        ))

    print(f"Loaded {len(teams)} teams from {filepath}")
    return TeamDirectory(teams)
