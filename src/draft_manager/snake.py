"""Snake-draft pick arithmetic.

Pick order runs 1..T in odd rounds and T..1 in even rounds::

    round   = ceil(n / T)
    in_rd   = n - (round - 1) * T
    slot    = in_rd              (odd round)
            = T - in_rd + 1      (even round)
"""

from typing import List, Tuple

from src.draft_manager.config import UPCOMING_PICK_COUNT


def snake_position(overall: int, teams: int) -> Tuple[int, int]:
    """Return ``(round, slot)`` for a 1-based overall pick number."""
    round_ = (overall - 1) // teams + 1
    pick_in_round = overall - (round_ - 1) * teams
    if round_ % 2 == 1:
        slot = pick_in_round
    else:
        slot = teams - pick_in_round + 1
    return round_, slot


def upcoming_picks(
    current_overall: int,
    teams: int,
    my_slot: int,
    count: int = UPCOMING_PICK_COUNT,
) -> List[int]:
    """Overall numbers of the next *count* picks belonging to *my_slot*.

    Scans forward from ``current_overall + 1``.

    Raises:
        ValueError: if *my_slot* is outside 1..teams (the scan would never end).
    """
    if not 1 <= my_slot <= teams:
        raise ValueError(f"my_slot ({my_slot}) must be between 1 and {teams}")

    picks: List[int] = []
    overall = current_overall + 1
    while len(picks) < count:
        if snake_position(overall, teams)[1] == my_slot:
            picks.append(overall)
        overall += 1
    return picks
