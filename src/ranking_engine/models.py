"""Data models for the ranking engine."""

from dataclasses import dataclass

from src.roster.models import Player


@dataclass(frozen=True)
class RankedPlayer:
    """A player's place on the live board."""

    player: Player
    base_rank: int  # Position in ascending-ADP order over the full roster (1-based)
    score: float
    rank_now: int  # Position in the current filtered ranking (1-based)
    delta: int  # base_rank - rank_now; positive means a riser

    @property
    def name(self) -> str:
        return self.player.name

    @property
    def position(self) -> str:
        return self.player.position
