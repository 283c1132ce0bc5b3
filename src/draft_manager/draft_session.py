"""Draft session - the state behind one dashboard, and the operations on it.

The session owns the roster, league settings, weight knobs, list filters and
the draft controller. The ranked board is never stored: it is recomputed from
those inputs on demand and memoized on the full set of inputs, so a cached
board is always the board a fresh computation would return.
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from src.draft_manager.draft_controller import DraftController
from src.draft_manager.draft_state import LeagueConfig, Pick
from src.draft_manager.state_persistence import SessionSnapshot, StatePersistence
from src.ranking_engine import summary
from src.ranking_engine.config import ALL_POSITIONS
from src.ranking_engine.models import RankedPlayer
from src.ranking_engine.ranker import Ranker
from src.ranking_engine.weights import Weights, WeightSettings
from src.roster.config import VALID_POSITIONS
from src.roster.export import write_board_csv, write_template_csv
from src.roster.roster_store import RosterStore
from src.roster.sample_data import sample_players

logger = logging.getLogger(__name__)


class DraftSession:
    """A single user's draft board.

    Every method that changes observable state saves a snapshot when the
    session was given a :class:`StatePersistence`.
    """

    def __init__(self, persistence: Optional[StatePersistence] = None):
        self.persistence = persistence
        snapshot = persistence.load() if persistence is not None else None
        if snapshot is None:
            snapshot = SessionSnapshot()

        self.roster = RosterStore(snapshot.players)
        self.weight_settings = snapshot.weight_settings
        self.show_taken = snapshot.show_taken
        self.position_filter = ALL_POSITIONS
        self.search = ""
        self.controller = DraftController(self.roster, snapshot.league_config)
        self.ranker = Ranker()

        self._board_key: Optional[Tuple] = None
        self._board: List[RankedPlayer] = []

        # Replay so the restored log satisfies the same checks as live picks
        for pick in sorted(snapshot.picks, key=lambda p: p.overall):
            self.controller.add_pick(pick.name, pick.is_mine)

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    @property
    def league_config(self) -> LeagueConfig:
        return self.controller.league_config

    @property
    def weights(self) -> Weights:
        return self.weight_settings.to_weights()

    def set_weights(self, **changes) -> WeightSettings:
        """Update raw weight knobs (e.g. ``qb=150, adp_anchor=0``)."""
        self.weight_settings = self.weight_settings.with_updates(**changes)
        logger.info("Weights updated: %s", changes)
        self.save()
        return self.weight_settings

    def reset_weights(self) -> WeightSettings:
        self.weight_settings = WeightSettings()
        logger.info("Weights reset to defaults")
        self.save()
        return self.weight_settings

    def set_league(self, **changes) -> LeagueConfig:
        """Update league settings (``teams``, ``my_slot``, ``rounds``)."""
        self.controller.league_config = replace(self.controller.league_config, **changes)
        logger.info("League updated: %s", self.controller.league_config)
        self.save()
        return self.controller.league_config

    def reset_league(self) -> LeagueConfig:
        self.controller.league_config = LeagueConfig()
        logger.info("League reset to defaults")
        self.save()
        return self.controller.league_config

    def set_filters(
        self,
        position: Optional[str] = None,
        search: Optional[str] = None,
    ):
        """Set the position filter (a role or ``"ALL"``) and/or the search text.

        Raises:
            ValueError: if *position* is not a known role or ``"ALL"``.
        """
        if position is not None:
            position = position.strip().upper()
            if position != ALL_POSITIONS and position not in VALID_POSITIONS:
                raise ValueError(
                    f"Invalid position filter '{position}'. "
                    f"Must be {ALL_POSITIONS} or one of: {VALID_POSITIONS}"
                )
            self.position_filter = position
        if search is not None:
            self.search = search

    def set_show_taken(self, show_taken: bool):
        self.show_taken = bool(show_taken)
        self.save()

    # ------------------------------------------------------------------
    # Roster data
    # ------------------------------------------------------------------
    def import_csv(self, filepath: Union[str, Path]):
        """Replace the roster from a CSV file and clear the draft.

        Raises:
            RosterImportError: if the file fails validation; the roster and
                draft are left untouched.
        """
        players = self.roster.ingester.read_csv(filepath)
        self._replace_roster(players)

    def import_csv_text(self, text: str):
        """Replace the roster from CSV text (same contract as :meth:`import_csv`)."""
        players = self.roster.ingester.parse_text(text)
        self._replace_roster(players)

    def use_sample_data(self):
        """Restore the built-in sample roster and clear the draft."""
        self._replace_roster(sample_players())

    def export_csv(self, filepath: Union[str, Path]) -> Path:
        """Write the current board to *filepath*."""
        return write_board_csv(self.ranked(), filepath)

    @staticmethod
    def export_template(filepath: Union[str, Path]) -> Path:
        """Write a blank import template to *filepath*."""
        return write_template_csv(filepath)

    def _replace_roster(self, players):
        self.roster.load_players(players)
        self.controller.reset_draft()
        self.save()

    # ------------------------------------------------------------------
    # Draft
    # ------------------------------------------------------------------
    def add_pick(self, name: str, is_mine: bool = False) -> Optional[Pick]:
        pick = self.controller.add_pick(name, is_mine)
        if pick is not None:
            self.save()
        return pick

    def undo_pick(self) -> Optional[Pick]:
        pick = self.controller.undo_pick()
        if pick is not None:
            self.save()
        return pick

    def reset_draft(self):
        self.controller.reset_draft()
        self.save()

    @property
    def picks(self) -> List[Pick]:
        return self.controller.picks

    @property
    def my_roster(self) -> List[str]:
        return self.controller.my_roster

    def upcoming_picks(self) -> List[int]:
        return self.controller.upcoming_picks()

    # ------------------------------------------------------------------
    # Board
    # ------------------------------------------------------------------
    def ranked(self) -> List[RankedPlayer]:
        """The current board under the active weights and filters."""
        taken = self.controller.taken_names
        key = (
            self.roster.players,
            self.weights,
            self.position_filter,
            self.search,
            taken,
            self.show_taken,
        )
        if key != self._board_key:
            self._board = self.ranker.rank(
                self.roster.players,
                self.weights,
                position=self.position_filter,
                search=self.search,
                taken=taken,
                include_taken=self.show_taken,
                base_ranks=self.roster.base_ranks,
            )
            self._board_key = key
        else:
            logger.debug("Board cache hit")
        return list(self._board)

    def position_summary(self) -> Dict[str, int]:
        return summary.position_summary(self.ranked())

    def best_available(self) -> List[RankedPlayer]:
        return summary.best_available(self.ranked())

    def round_preview(self) -> List[List[RankedPlayer]]:
        return summary.round_preview(
            self.ranked(),
            self.controller.taken_names,
            self.league_config.teams,
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            league_config=self.league_config,
            weight_settings=self.weight_settings,
            show_taken=self.show_taken,
            picks=self.controller.picks,
            players=list(self.roster.players),
        )

    def save(self):
        if self.persistence is not None:
            self.persistence.save(self.snapshot())
