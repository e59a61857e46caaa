"""Bulk round results from spreadsheets.

Games for a whole round can come from a local CSV file or from a Google
Sheet shared as "anyone with the link", downloaded through its CSV export.
Expected columns (header names are matched loosely):
- team1, team1 score, team2, team2 score
- optional: bowl, seed1, seed2
"""

from __future__ import annotations

import os
from io import StringIO

import pandas as pd
import requests

import config
from models.game import Game, coerce_score

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data", "raw")

COLUMN_ALIASES = {
    "team1": ["team1", "team 1", "home", "home team"],
    "team1_score": ["team1 score", "team1score", "score1", "home score"],
    "team2": ["team2", "team 2", "away", "away team"],
    "team2_score": ["team2 score", "team2score", "score2", "away score"],
    "bowl_name": ["bowl", "bowl name", "bowlname"],
    "seed1": ["seed1", "seed 1", "team1 seed"],
    "seed2": ["seed2", "seed 2", "team2 seed"],
}

REQUIRED_COLUMNS = ["team1", "team1_score", "team2", "team2_score"]


def fetch_sheet_round(sheet_id: str, gid: int = 0, save: bool = False) -> pd.DataFrame:
    """Download one tab of a Google Sheet as a DataFrame.

    Args:
        sheet_id: The spreadsheet id from the sheet's URL
        gid: The tab id (0 for the first tab)
        save: Whether to keep the raw CSV in data/raw/
    """
    url = config.SHEET_CSV_URL.format(sheet_id=sheet_id, gid=gid)
    print(f"Fetching round results from {url}...")

    resp = requests.get(url, timeout=config.REQUEST_TIMEOUT)
    resp.raise_for_status()

    if save:
        os.makedirs(DATA_DIR, exist_ok=True)
        csv_path = os.path.join(DATA_DIR, f"sheet_{sheet_id}_{gid}.csv")
        with open(csv_path, "w", encoding="utf-8") as f:
            f.write(resp.text)
        print(f"Saved to {csv_path}")

    return pd.read_csv(StringIO(resp.text))


def load_round_from_csv(filepath: str) -> list[Game]:
    df = pd.read_csv(filepath)
    games = parse_round_games(df)
    print(f"Loaded {len(games)} games from {filepath}")
    return games


def parse_round_games(df: pd.DataFrame) -> list[Game]:
    """Turn spreadsheet rows into Games.

    Scores are passed through raw; the merge step coerces them. Rows
    without both teams are skipped.
    """
    columns = {field: _find_col(df, aliases) for field, aliases in COLUMN_ALIASES.items()}
    missing = [field for field in REQUIRED_COLUMNS if columns[field] is None]
    if missing:
        raise ValueError(f"Missing columns {missing}. Available columns: {list(df.columns)}")

    games = []
    for _, row in df.iterrows():
        team1 = _cell_text(row[columns["team1"]])
        team2 = _cell_text(row[columns["team2"]])
        if not team1 or not team2:
            continue
        games.append(Game(
            team1=team1,
            team2=team2,
            team1_score=_cell_value(row[columns["team1_score"]]),
            team2_score=_cell_value(row[columns["team2_score"]]),
            bowl_name=_cell_text(row[columns["bowl_name"]]) if columns["bowl_name"] else None,
            seed1=coerce_score(row[columns["seed1"]]) if columns["seed1"] else None,
            seed2=coerce_score(row[columns["seed2"]]) if columns["seed2"] else None,
        ))
    return games


def _cell_text(value) -> str | None:
    if pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _cell_value(value):
    return None if pd.isna(value) else value


def _find_col(df: pd.DataFrame, candidates: list[str]) -> str | None:
    """Find a column by trying multiple possible names, ignoring case, spaces and underscores."""
    normalized = {_normalize(c): c for c in df.columns}
    for c in candidates:
        actual = normalized.get(_normalize(c))
        if actual is not None:
            return actual
    return None


def _normalize(name) -> str:
    return str(name).strip().lower().replace(" ", "").replace("_", "")
