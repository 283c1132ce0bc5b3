"""Read-only views over a ranked board."""

from typing import AbstractSet, Dict, List, Sequence

from src.ranking_engine.config import BEST_AVAILABLE_LIMIT, PREVIEW_ROUNDS, SUMMARY_TOP_N
from src.ranking_engine.models import RankedPlayer
from src.roster.config import VALID_POSITIONS


def position_summary(
    board: Sequence[RankedPlayer], top_n: int = SUMMARY_TOP_N
) -> Dict[str, int]:
    """Count each role among the first *top_n* rows of the board."""
    counts = {pos: 0 for pos in VALID_POSITIONS}
    for entry in board[:top_n]:
        counts[entry.position] += 1
    return counts


def best_available(
    board: Sequence[RankedPlayer], limit: int = BEST_AVAILABLE_LIMIT
) -> List[RankedPlayer]:
    """The first *limit* rows of the board."""
    return list(board[:limit])


def round_preview(
    board: Sequence[RankedPlayer],
    taken: AbstractSet[str],
    teams: int,
    rounds: int = PREVIEW_ROUNDS,
) -> List[List[RankedPlayer]]:
    """Split the undrafted part of the board into *rounds* slices of *teams*.

    A slice is shorter (or empty) when the pool runs out.
    """
    available = [entry for entry in board if entry.name not in taken]
    return [
        available[i * teams:(i + 1) * teams]
        for i in range(rounds)
    ]
