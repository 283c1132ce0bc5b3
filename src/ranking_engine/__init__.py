from src.ranking_engine.models import RankedPlayer
from src.ranking_engine.ranker import Ranker, baseline_ranks
from src.ranking_engine.scoring import score_player
from src.ranking_engine.weights import Weights, WeightSettings

__all__ = [
    "RankedPlayer",
    "Ranker",
    "WeightSettings",
    "Weights",
    "baseline_ranks",
    "score_player",
]
