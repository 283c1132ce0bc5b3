"""Roster data models - the draftable player pool."""

import math
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from src.roster.cleaning import DataCleaner
from src.roster.config import (
    DEFAULT_INJURY_RISK,
    DEFAULT_OFFENSE,
    DEFAULT_UPSIDE,
    VALID_POSITIONS,
)


@dataclass(frozen=True)
class Player:
    """A single draftable player.

    ``name`` is the identity key: picks reference players by name, so names
    must be unique within a roster. Optional attributes stay ``None`` when
    absent; the scoring defaults are applied through the ``*_or_default``
    properties so that exports can still tell "absent" from "default".
    """

    name: str
    position: str
    adp: float
    team: Optional[str] = None
    age: Optional[float] = None
    rookie: bool = False
    injury_risk: Optional[float] = None
    upside: Optional[float] = None
    offense: Optional[float] = None
    bye: Optional[float] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Player name cannot be empty")
        if self.position not in VALID_POSITIONS:
            raise ValueError(
                f"Invalid position for {self.name}: {self.position}"
            )
        if not math.isfinite(self.adp):
            raise ValueError(f"Invalid ADP for {self.name}: {self.adp}")

    @property
    def injury_risk_or_default(self) -> float:
        return DEFAULT_INJURY_RISK if self.injury_risk is None else self.injury_risk

    @property
    def upside_or_default(self) -> float:
        return DEFAULT_UPSIDE if self.upside is None else self.upside

    @property
    def offense_or_default(self) -> float:
        return DEFAULT_OFFENSE if self.offense is None else self.offense

    def to_dict(self) -> Dict:
        """Convert to the camelCase dict stored in session snapshots."""
        data = asdict(self)
        return {
            "name": data["name"],
            "pos": data["position"],
            "adp": data["adp"],
            "team": data["team"],
            "age": data["age"],
            "rookie": data["rookie"],
            "injuryRisk": data["injury_risk"],
            "upside": data["upside"],
            "offense": data["offense"],
            "bye": data["bye"],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Player":
        """Rebuild a player from a snapshot dict.

        Optional numbers that are not finite numbers come back absent, and
        ``rookie`` accepts the same flags as CSV import.

        Raises:
            KeyError: if ``name``, ``pos`` or ``adp`` is missing.
            ValueError: if the position or ADP is invalid.
        """
        name = DataCleaner.clean_text(data["name"])
        adp = DataCleaner.parse_number(data["adp"])
        if adp is None:
            raise ValueError(f"Invalid ADP for {name}")
        return cls(
            name=name,
            position=DataCleaner.normalize_position(data["pos"]),
            adp=adp,
            team=DataCleaner.clean_text(data.get("team")) or None,
            age=DataCleaner.parse_number(data.get("age")),
            rookie=DataCleaner.parse_bool(data.get("rookie")),
            injury_risk=DataCleaner.parse_number(data.get("injuryRisk")),
            upside=DataCleaner.parse_number(data.get("upside")),
            offense=DataCleaner.parse_number(data.get("offense")),
            bye=DataCleaner.parse_number(data.get("bye")),
        )
