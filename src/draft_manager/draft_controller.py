"""Draft controller - records picks against the roster and keeps the log consistent."""

import logging
from typing import FrozenSet, List, Optional

from src.draft_manager.draft_state import DraftState, LeagueConfig, Pick
from src.draft_manager.snake import upcoming_picks
from src.roster.roster_store import RosterStore

logger = logging.getLogger(__name__)


class DraftController:
    """Main controller for pick tracking.

    Guards the pick log invariants: every pick names a known player, no
    player is picked twice, and pick numbers are gapless. Invalid picks are
    ignored rather than raised, since callers are expected to offer only
    available players.
    """

    def __init__(
        self,
        roster: RosterStore,
        league_config: Optional[LeagueConfig] = None,
        draft_state: Optional[DraftState] = None,
    ):
        self.roster = roster
        self.league_config = league_config or LeagueConfig()
        self.draft_state = draft_state or DraftState()

    def add_pick(self, name: str, is_mine: bool = False) -> Optional[Pick]:
        """Record a pick.

        Args:
            name: Exact name of the drafted player.
            is_mine: Whether the pick goes to my team.

        Returns:
            The new Pick, or None if *name* is unknown or already taken.
        """
        player = self.roster.get(name)
        if player is None:
            logger.debug("Ignoring pick of unknown player %r", name)
            return None
        if self.draft_state.is_taken(name):
            logger.debug("Ignoring pick of already drafted player %r", name)
            return None

        pick = self.draft_state.append(name, player.position, is_mine)
        round_, slot = pick.round_and_slot(self.league_config.teams)
        logger.info(
            "Pick %d (Rd %d, P%d): %s (%s)%s",
            pick.overall,
            round_,
            slot,
            pick.name,
            pick.position,
            " -> mine" if is_mine else "",
        )
        return pick

    def undo_pick(self) -> Optional[Pick]:
        """Remove the most recent pick.

        Returns:
            The removed Pick, or None if no picks have been made.
        """
        if not self.draft_state.picks:
            return None
        pick = self.draft_state.pop()
        logger.info("Undid pick %d: %s", pick.overall, pick.name)
        return pick

    def reset_draft(self):
        """Clear every pick."""
        count = self.draft_state.current_overall
        self.draft_state.clear()
        logger.info("Draft reset (%d picks cleared)", count)

    @property
    def picks(self) -> List[Pick]:
        return list(self.draft_state.picks)

    @property
    def taken_names(self) -> FrozenSet[str]:
        return self.draft_state.taken_names

    @property
    def my_roster(self) -> List[str]:
        return self.draft_state.my_roster

    @property
    def current_overall(self) -> int:
        return self.draft_state.current_overall

    @property
    def is_complete(self) -> bool:
        """Whether every pick of a full draft has been made."""
        return self.current_overall >= self.league_config.total_picks()

    def upcoming_picks(self) -> List[int]:
        """Overall numbers of my next picks."""
        return upcoming_picks(
            self.current_overall,
            self.league_config.teams,
            self.league_config.my_slot,
        )
