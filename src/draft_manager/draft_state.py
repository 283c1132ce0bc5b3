"""Draft state data models - the pick log is the single source of truth."""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple

from src.draft_manager.config import (
    DEFAULT_LEAGUE_SIZE,
    DEFAULT_MY_SLOT,
    DEFAULT_ROUNDS,
    LEAGUE_SIZE_RANGE,
    ROUNDS_RANGE,
)
from src.draft_manager.snake import snake_position


def _clamp(value: int, low: int, high: int) -> int:
    return int(max(low, min(high, value)))


@dataclass(frozen=True)
class LeagueConfig:
    """League configuration settings.

    Values are clamped on construction: teams to 2-16, rounds to 1-25,
    and my_slot to 1..teams.
    """

    teams: int = DEFAULT_LEAGUE_SIZE
    my_slot: int = DEFAULT_MY_SLOT
    rounds: int = DEFAULT_ROUNDS

    def __post_init__(self):
        teams = _clamp(self.teams, *LEAGUE_SIZE_RANGE)
        object.__setattr__(self, "teams", teams)
        object.__setattr__(self, "my_slot", _clamp(self.my_slot, 1, teams))
        object.__setattr__(self, "rounds", _clamp(self.rounds, *ROUNDS_RANGE))

    def total_picks(self) -> int:
        """Number of picks in a full draft."""
        return self.teams * self.rounds


@dataclass(frozen=True)
class Pick:
    """Represents a single draft pick."""

    overall: int  # 1-based; always equals the pick's position in the log
    name: str
    position: str
    is_mine: bool = False

    def round_and_slot(self, teams: int) -> Tuple[int, int]:
        """``(round, slot)`` of this pick in a snake draft of *teams*."""
        return snake_position(self.overall, teams)


@dataclass
class DraftState:
    """Append-only pick log and everything derived from it."""

    picks: List[Pick] = field(default_factory=list)

    @property
    def current_overall(self) -> int:
        """Number of picks made so far."""
        return len(self.picks)

    @property
    def taken_names(self) -> FrozenSet[str]:
        return frozenset(pick.name for pick in self.picks)

    @property
    def my_roster(self) -> List[str]:
        """Names of my picks, in draft order."""
        return [pick.name for pick in self.picks if pick.is_mine]

    def is_taken(self, name: str) -> bool:
        return any(pick.name == name for pick in self.picks)

    def append(self, name: str, position: str, is_mine: bool) -> Pick:
        """Append a pick numbered by its position in the log."""
        pick = Pick(
            overall=self.current_overall + 1,
            name=name,
            position=position,
            is_mine=is_mine,
        )
        self.picks.append(pick)
        return pick

    def pop(self) -> Pick:
        """Remove and return the most recent pick."""
        return self.picks.pop()

    def clear(self):
        self.picks.clear()
