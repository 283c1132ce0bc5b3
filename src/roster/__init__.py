from src.roster.ingestion import RosterImportError, RosterIngester
from src.roster.models import Player
from src.roster.roster_store import RosterStore
from src.roster.sample_data import sample_players

__all__ = [
    "Player",
    "RosterImportError",
    "RosterIngester",
    "RosterStore",
    "sample_players",
]
