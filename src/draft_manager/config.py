from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
SESSION_DIR = PROJECT_ROOT / "data" / "session"

# Key under which the session snapshot is stored
SNAPSHOT_KEY = "tdb_v1_state"

# Default league settings
DEFAULT_LEAGUE_SIZE = 12
DEFAULT_MY_SLOT = 1
DEFAULT_ROUNDS = 15

# League setting bounds (inclusive); out-of-range inputs are clamped
LEAGUE_SIZE_RANGE = (2, 16)
ROUNDS_RANGE = (1, 25)

# How many of my future picks to project
UPCOMING_PICK_COUNT = 3
