from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
EXPORT_DIR = DATA_DIR / "exports"

# Draftable positions (closed set)
VALID_POSITIONS = ("QB", "RB", "WR", "TE")

# Scoring defaults for absent optional attributes
DEFAULT_INJURY_RISK = 0.15
DEFAULT_UPSIDE = 0.5
DEFAULT_OFFENSE = 3

# CSV import columns (matched after trimming and lowercasing headers)
REQUIRED_COLUMNS = ["name", "pos", "adp"]
OPTIONAL_COLUMNS = ["team", "age", "rookie", "injuryRisk", "upside", "offense", "bye"]
TEMPLATE_COLUMNS = REQUIRED_COLUMNS + OPTIONAL_COLUMNS

# Values accepted as a true rookie flag (case-insensitive)
TRUTHY_VALUES = {"1", "true", "yes", "y"}

# CSV export columns for the ranked board
EXPORT_COLUMNS = [
    "name", "pos", "adp", "rookie", "upside",
    "injuryRisk", "offense", "bye", "rankNow",
]

# Default file names
BOARD_FILENAME = "custom_board.csv"
TEMPLATE_FILENAME = "player_template.csv"

# Example rows written below the template header
TEMPLATE_EXAMPLE_ROWS = [
    ["Patrick Mahomes", "QB", 12, "KC", 29, "false", 0.10, 0.95, 1, 10],
    ["Christian McCaffrey", "RB", 1, "SF", 28, "false", 0.18, 0.96, 1, 9],
    ["Ja'Marr Chase", "WR", 3, "CIN", 25, "false", 0.16, 0.96, 1, 12],
]
