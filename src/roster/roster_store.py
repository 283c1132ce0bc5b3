"""Roster store - the session's player pool and its baseline ADP ranks."""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from src.roster.ingestion import RosterIngester
from src.roster.models import Player
from src.roster.sample_data import sample_players

logger = logging.getLogger(__name__)


class RosterStore:
    """Holds the player pool for a session.

    Players are kept sorted by ascending ADP (stable, so equal ADPs keep
    their input order). That order defines the baseline rank, computed
    once per load and never per filter.
    """

    def __init__(self, players: Optional[Iterable[Player]] = None):
        self.ingester = RosterIngester()
        self.players: Tuple[Player, ...] = ()
        self.base_ranks: Dict[str, int] = {}
        self._by_name: Dict[str, Player] = {}
        self.load_players(sample_players() if players is None else players)

    def load_players(self, players: Iterable[Player]):
        """Replace the whole pool and recompute baseline ranks.

        Raises:
            ValueError: if two players share a name.
        """
        ordered = tuple(sorted(players, key=lambda p: p.adp))
        by_name: Dict[str, Player] = {}
        for player in ordered:
            if player.name in by_name:
                raise ValueError(f"Duplicate player name: {player.name}")
            by_name[player.name] = player

        self.players = ordered
        self._by_name = by_name
        self.base_ranks = {p.name: i for i, p in enumerate(ordered, start=1)}
        logger.info("Roster loaded: %d players", len(ordered))

    def load_csv(self, filepath: Union[str, Path]):
        """Replace the pool from a CSV file.

        The pool is only swapped after the whole file validates, so a
        failed import leaves the current roster in place.

        Raises:
            RosterImportError: if the file fails validation.
        """
        self.load_players(self.ingester.read_csv(filepath))

    def load_csv_text(self, text: str):
        """Replace the pool from CSV text (same contract as :meth:`load_csv`)."""
        self.load_players(self.ingester.parse_text(text))

    def get(self, name: str) -> Optional[Player]:
        """Look up a player by exact name."""
        return self._by_name.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self.players)
