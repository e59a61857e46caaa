"""Seed loader - enter the 12 playoff seeds.

Supports:
1. Interactive CLI entry
2. JSON file input
"""

import json
import os

import config
from models.seeds import SeedTable


def load_seeds_interactive() -> SeedTable:
    """Interactively enter the team code for each seed via CLI prompts."""
    print("\n=== PLAYOFF SEEDS ===")
    print("Enter the team code for each seed (e.g. OSU). Seeds 1-4 receive a First Round bye.\n")

    teams_by_seed = {}
    for seed in range(1, config.NUM_SEEDS + 1):
        team = input(f"  #{seed} seed: ").strip()
        if team:
            teams_by_seed[seed] = team

    seeds = SeedTable(teams_by_seed)
    print(f"  -> {len(seeds)} seeds entered\n")
    return seeds


def load_seeds_from_json(filepath: str) -> SeedTable:
    """Load seeds from a JSON file.

    Expected format, either:
    {"seeds": {"1": "OSU", "2": "TEX", ..., "12": "BOIS"}}
    or the stored form:
    [{"seed": 1, "team": "OSU"}, ...]
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict) and "seeds" in data:
        data = data["seeds"]
    seeds = SeedTable.from_records(data)

    print(f"Loaded {len(seeds)} seeds from {filepath}")
    return seeds


def save_seeds_to_json(seeds: SeedTable, filepath: str):
    data = {"seeds": {str(seed): team for seed, team in seeds.items()}}

    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    print(f"Saved seeds to {filepath}")
