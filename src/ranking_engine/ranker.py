"""Board ranking - filter, score, sort and compare against baseline ADP order."""

import logging
from typing import AbstractSet, Dict, List, Optional, Sequence

from src.ranking_engine.config import ALL_POSITIONS
from src.ranking_engine.models import RankedPlayer
from src.ranking_engine.scoring import score_player
from src.ranking_engine.weights import Weights
from src.roster.models import Player

logger = logging.getLogger(__name__)


def baseline_ranks(players: Sequence[Player]) -> Dict[str, int]:
    """1-based rank of every player in ascending-ADP order (stable on ties)."""
    ordered = sorted(players, key=lambda p: p.adp)
    return {p.name: i for i, p in enumerate(ordered, start=1)}


class Ranker:
    """Ranks the player pool under a weight configuration.

    The ranker is stateless: the pool, weights, filters and taken set are
    all passed in, and the same inputs always give the same board.
    """

    def rank(
        self,
        players: Sequence[Player],
        weights: Weights,
        position: str = ALL_POSITIONS,
        search: str = "",
        taken: AbstractSet[str] = frozenset(),
        include_taken: bool = False,
        base_ranks: Optional[Dict[str, int]] = None,
    ) -> List[RankedPlayer]:
        """Build the ranked board.

        Args:
            players: The full, unfiltered pool. Its order breaks score ties.
            weights: Normalized scoring weights.
            position: A single role to keep, or ``"ALL"``.
            search: Case-insensitive name substring; empty keeps everyone.
            taken: Names already drafted.
            include_taken: Keep drafted players on the board.
            base_ranks: Precomputed baseline ranks over the full pool;
                derived from *players* when omitted.

        Returns:
            Ranked players, best first. Ranks are assigned before drafted
            players are hidden, so ``rank_now`` may have gaps when
            *include_taken* is False.
        """
        if base_ranks is None:
            base_ranks = baseline_ranks(players)

        pool = self._filter(players, position, search)
        scored = [(p, score_player(p, weights)) for p in pool]
        # sorted() is stable, so equal scores keep pool order
        scored = sorted(scored, key=lambda item: item[1], reverse=True)

        board = []
        for rank_now, (player, score) in enumerate(scored, start=1):
            base_rank = base_ranks.get(player.name, rank_now)
            board.append(
                RankedPlayer(
                    player=player,
                    base_rank=base_rank,
                    score=score,
                    rank_now=rank_now,
                    delta=base_rank - rank_now,
                )
            )

        if not include_taken:
            board = [entry for entry in board if entry.name not in taken]

        logger.debug(
            "Ranked %d of %d players (position=%s, search=%r, hidden taken=%s)",
            len(board), len(players), position, search, not include_taken,
        )
        return board

    @staticmethod
    def _filter(
        players: Sequence[Player], position: str, search: str
    ) -> List[Player]:
        needle = search.lower()
        return [
            p for p in players
            if (position == ALL_POSITIONS or p.position == position)
            and (not needle or needle in p.name.lower())
        ]
