from src.draft_manager.draft_controller import DraftController
from src.draft_manager.draft_session import DraftSession
from src.draft_manager.draft_state import DraftState, LeagueConfig, Pick
from src.draft_manager.snake import snake_position, upcoming_picks
from src.draft_manager.state_persistence import (
    FileKeyValueStore,
    SessionSnapshot,
    StatePersistence,
)

__all__ = [
    "DraftController",
    "DraftSession",
    "DraftState",
    "FileKeyValueStore",
    "LeagueConfig",
    "Pick",
    "SessionSnapshot",
    "StatePersistence",
    "snake_position",
    "upcoming_picks",
]
