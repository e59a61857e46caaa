"""Central configuration for the CFP dynasty ledger."""

import os

# Round arrays as stored per season year, in play order
ROUND_KEYS = ["firstRound", "quarterfinals", "semifinals", "championship"]

ROUND_NAMES = {
    "firstRound": "First Round",
    "quarterfinals": "Quarterfinals",
    "semifinals": "Semifinals",
    "championship": "National Championship",
}

# Max games stored per round
GAMES_PER_ROUND = {"firstRound": 4, "quarterfinals": 4, "semifinals": 2, "championship": 1}

# Bracket structure
NUM_SEEDS = 12
BYE_SEEDS = [1, 2, 3, 4]

SUGAR_BOWL = "Sugar Bowl"
ORANGE_BOWL = "Orange Bowl"
ROSE_BOWL = "Rose Bowl"
COTTON_BOWL = "Cotton Bowl"
PEACH_BOWL = "Peach Bowl"
FIESTA_BOWL = "Fiesta Bowl"
CHAMPIONSHIP_BOWL = "National Championship"
FIRST_ROUND_BOWL = "CFP First Round"

# Storage
DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
DEFAULT_DYNASTY_ID = "default"

# Published Google Sheets CSV export (bulk round import)
SHEET_CSV_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv&gid={gid}"
REQUEST_TIMEOUT = 30
