"""Composite player score.

Blends a pure-ADP signal with a custom linear formula::

    adp_norm = 1 - clamp01(adp / MAX_ADP)
    custom   = 0.35*pos_weight + 0.25*adp_norm + 0.15*upside_bonus
             + 0.15*offense_bonus + 0.10*rookie_term - 0.10*risk_penalty
    score    = adp_anchor*adp_norm + (1 - adp_anchor)*custom

At ``adp_anchor == 1`` the score is ADP alone; at 0 it is the custom formula.
"""

from src.ranking_engine.config import (
    ADP_COEF,
    MAX_ADP,
    OFFENSE_COEF,
    POSITION_COEF,
    RISK_COEF,
    ROOKIE_COEF,
    UPSIDE_COEF,
)
from src.ranking_engine.weights import Weights
from src.roster.models import Player


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def adp_norm(adp: float) -> float:
    """Map ADP onto [0, 1], higher is better (ADP >= 240 -> 0, ADP <= 0 -> 1)."""
    return 1.0 - clamp01(adp / MAX_ADP)


def custom_score(player: Player, weights: Weights) -> float:
    """The custom linear formula, before blending with ADP."""
    pos_weight = weights.position_weight(player.position)
    rookie_term = weights.rookie_boost if player.rookie else 0.0
    risk_penalty = weights.risk_averse * player.injury_risk_or_default
    upside_bonus = weights.upside_weight * player.upside_or_default
    offense_bonus = weights.offense_weight * (1 - (player.offense_or_default - 1) / 4)

    return (
        POSITION_COEF * pos_weight
        + ADP_COEF * adp_norm(player.adp)
        + UPSIDE_COEF * upside_bonus
        + OFFENSE_COEF * offense_bonus
        + ROOKIE_COEF * rookie_term
        - RISK_COEF * risk_penalty
    )


def score_player(player: Player, weights: Weights) -> float:
    """Composite score for *player* under *weights*. Pure and total."""
    anchor = weights.adp_anchor
    return anchor * adp_norm(player.adp) + (1 - anchor) * custom_score(player, weights)
