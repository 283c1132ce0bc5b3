"""Weight configuration - raw UI knobs and the normalized weights derived from them."""

from dataclasses import dataclass, replace
from typing import Dict, Tuple

from src.ranking_engine.config import (
    DEFAULT_ADP_ANCHOR,
    DEFAULT_OFFENSE_WEIGHT,
    DEFAULT_POSITION_WEIGHTS,
    DEFAULT_RISK_AVERSE,
    DEFAULT_ROOKIE_BOOST,
    DEFAULT_UPSIDE_WEIGHT,
    KNOB_RANGE,
    KNOB_SCALE,
    POSITION_WEIGHT_RANGE,
)
from src.roster.config import VALID_POSITIONS


def _clamp(value, bounds: Tuple[int, int]) -> int:
    low, high = bounds
    return int(max(low, min(high, value)))


@dataclass(frozen=True)
class Weights:
    """Normalized scoring weights.

    ``positions`` maps each role to its share of the role-weight total, so
    the four values sum to 1. The five knobs are each in [0, 1].
    """

    positions: Tuple[Tuple[str, float], ...]
    rookie_boost: float
    risk_averse: float
    upside_weight: float
    adp_anchor: float
    offense_weight: float

    def position_weight(self, position: str) -> float:
        """Normalized weight for *position* (1.0 for an unknown role)."""
        return dict(self.positions).get(position, 1.0)


@dataclass(frozen=True)
class WeightSettings:
    """Raw UI-facing weight inputs.

    Role weights run 0-200 and the knobs 0-100; every value is clamped to
    its range on construction, so any instance is valid.
    """

    qb: int = DEFAULT_POSITION_WEIGHTS["QB"]
    rb: int = DEFAULT_POSITION_WEIGHTS["RB"]
    wr: int = DEFAULT_POSITION_WEIGHTS["WR"]
    te: int = DEFAULT_POSITION_WEIGHTS["TE"]
    rookie_boost: int = DEFAULT_ROOKIE_BOOST
    risk_averse: int = DEFAULT_RISK_AVERSE
    upside_weight: int = DEFAULT_UPSIDE_WEIGHT
    adp_anchor: int = DEFAULT_ADP_ANCHOR
    offense_weight: int = DEFAULT_OFFENSE_WEIGHT

    def __post_init__(self):
        for name in ("qb", "rb", "wr", "te"):
            object.__setattr__(self, name, _clamp(getattr(self, name), POSITION_WEIGHT_RANGE))
        for name in ("rookie_boost", "risk_averse", "upside_weight", "adp_anchor", "offense_weight"):
            object.__setattr__(self, name, _clamp(getattr(self, name), KNOB_RANGE))

    def position_raw(self) -> Dict[str, int]:
        return {"QB": self.qb, "RB": self.rb, "WR": self.wr, "TE": self.te}

    def with_updates(self, **changes) -> "WeightSettings":
        """Return a copy with *changes* applied (and clamped)."""
        return replace(self, **changes)

    def to_weights(self) -> Weights:
        """The normalized :class:`Weights` these settings describe."""
        raw = self.position_raw()
        total = sum(raw.values())
        if total == 0:
            # All roles zeroed: treat them as equal rather than divide by zero.
            shares = {pos: 1.0 / len(VALID_POSITIONS) for pos in VALID_POSITIONS}
        else:
            shares = {pos: raw[pos] / total for pos in VALID_POSITIONS}

        return Weights(
            positions=tuple(shares.items()),
            rookie_boost=self.rookie_boost / KNOB_SCALE,
            risk_averse=self.risk_averse / KNOB_SCALE,
            upside_weight=self.upside_weight / KNOB_SCALE,
            adp_anchor=self.adp_anchor / KNOB_SCALE,
            offense_weight=self.offense_weight / KNOB_SCALE,
        )
