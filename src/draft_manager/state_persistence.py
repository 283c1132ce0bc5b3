"""State persistence - save and load the session snapshot in a key-value store."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, MutableMapping, Optional

from src.draft_manager.config import (
    DEFAULT_LEAGUE_SIZE,
    DEFAULT_MY_SLOT,
    DEFAULT_ROUNDS,
    SESSION_DIR,
    SNAPSHOT_KEY,
)
from src.draft_manager.draft_state import LeagueConfig, Pick
from src.ranking_engine.weights import WeightSettings
from src.roster.cleaning import DataCleaner
from src.roster.models import Player
from src.roster.sample_data import sample_players

logger = logging.getLogger(__name__)


def _get(data: Dict, key: str, default):
    """``data[key]``, with a missing or null value giving *default*."""
    value = data.get(key)
    return default if value is None else value


class FileKeyValueStore(MutableMapping):
    """String key-value store with one JSON file per key."""

    def __init__(self, storage_dir: Optional[Path] = None):
        self.storage_dir = Path(storage_dir or SESSION_DIR)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.storage_dir / f"{key}.json"

    def __getitem__(self, key: str) -> str:
        filepath = self._path(key)
        if not filepath.exists():
            raise KeyError(key)
        return filepath.read_text(encoding="utf-8")

    def __setitem__(self, key: str, value: str):
        self._path(key).write_text(value, encoding="utf-8")

    def __delitem__(self, key: str):
        filepath = self._path(key)
        if not filepath.exists():
            raise KeyError(key)
        filepath.unlink()

    def __iter__(self):
        return (p.stem for p in sorted(self.storage_dir.glob("*.json")))

    def __len__(self) -> int:
        return sum(1 for _ in self.storage_dir.glob("*.json"))


@dataclass
class SessionSnapshot:
    """Everything needed to restore a session."""

    league_config: LeagueConfig = field(default_factory=LeagueConfig)
    weight_settings: WeightSettings = field(default_factory=WeightSettings)
    show_taken: bool = False
    picks: List[Pick] = field(default_factory=list)
    players: List[Player] = field(default_factory=sample_players)


class StatePersistence:
    """Handles saving and loading the session snapshot under a single key."""

    def __init__(
        self,
        store: Optional[MutableMapping] = None,
        key: str = SNAPSHOT_KEY,
    ):
        self.store = store if store is not None else FileKeyValueStore()
        self.key = key

    def save(self, snapshot: SessionSnapshot):
        """Serialize *snapshot* into the store."""
        self.store[self.key] = json.dumps(self._snapshot_to_dict(snapshot))
        logger.debug(
            "Saved session (%d picks, %d players)",
            len(snapshot.picks),
            len(snapshot.players),
        )

    def load(self) -> Optional[SessionSnapshot]:
        """Load the stored snapshot.

        Fields missing from the stored data take their defaults.

        Returns:
            The snapshot, or None if nothing is stored or the stored
            data is unreadable.
        """
        try:
            raw = self.store.get(self.key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Unreadable session snapshot: %s", e)
            return None
        if raw is None:
            return None

        try:
            snapshot = self._dict_to_snapshot(json.loads(raw))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Corrupt session snapshot, ignoring it: %s", e)
            return None

        logger.info(
            "Loaded session (%d picks, %d players)",
            len(snapshot.picks),
            len(snapshot.players),
        )
        return snapshot

    def clear(self):
        """Remove the stored snapshot, if any."""
        self.store.pop(self.key, None)

    def _snapshot_to_dict(self, snapshot: SessionSnapshot) -> Dict:
        """Convert a snapshot to a JSON-serializable dict."""
        league = snapshot.league_config
        ws = snapshot.weight_settings
        return {
            "teams": league.teams,
            "mySlot": league.my_slot,
            "rounds": league.rounds,
            "qbW": ws.qb,
            "rbW": ws.rb,
            "wrW": ws.wr,
            "teW": ws.te,
            "rookieBoost": ws.rookie_boost,
            "riskAverse": ws.risk_averse,
            "upsideWeight": ws.upside_weight,
            "adpAnchor": ws.adp_anchor,
            "offenseWeight": ws.offense_weight,
            "showTakenInList": snapshot.show_taken,
            "picks": [
                {
                    "overall": pick.overall,
                    "name": pick.name,
                    "pos": pick.position,
                    "myPick": pick.is_mine,
                }
                for pick in snapshot.picks
            ],
            "myRoster": [pick.name for pick in snapshot.picks if pick.is_mine],
            "players": [player.to_dict() for player in snapshot.players],
        }

    def _dict_to_snapshot(self, data: Dict) -> SessionSnapshot:
        """Reconstruct a snapshot from a dict, filling gaps with defaults."""
        if not isinstance(data, dict):
            raise TypeError(f"Snapshot must be an object, got {type(data).__name__}")

        defaults = WeightSettings()
        league_config = LeagueConfig(
            teams=_get(data, "teams", DEFAULT_LEAGUE_SIZE),
            my_slot=_get(data, "mySlot", DEFAULT_MY_SLOT),
            rounds=_get(data, "rounds", DEFAULT_ROUNDS),
        )
        weight_settings = WeightSettings(
            qb=_get(data, "qbW", defaults.qb),
            rb=_get(data, "rbW", defaults.rb),
            wr=_get(data, "wrW", defaults.wr),
            te=_get(data, "teW", defaults.te),
            rookie_boost=_get(data, "rookieBoost", defaults.rookie_boost),
            risk_averse=_get(data, "riskAverse", defaults.risk_averse),
            upside_weight=_get(data, "upsideWeight", defaults.upside_weight),
            adp_anchor=_get(data, "adpAnchor", defaults.adp_anchor),
            offense_weight=_get(data, "offenseWeight", defaults.offense_weight),
        )

        picks = [
            Pick(
                overall=int(pd["overall"]),
                name=pd["name"],
                position=_get(pd, "pos", ""),
                is_mine=DataCleaner.parse_bool(_get(pd, "myPick", False)),
            )
            for pd in data.get("picks") or []
        ]

        stored_players = data.get("players")
        if isinstance(stored_players, list) and stored_players:
            players = [Player.from_dict(pd) for pd in stored_players]
            names = [p.name for p in players]
            if len(set(names)) != len(names):
                raise ValueError("Snapshot roster contains duplicate player names")
        else:
            players = sample_players()

        return SessionSnapshot(
            league_config=league_config,
            weight_settings=weight_settings,
            show_taken=DataCleaner.parse_bool(_get(data, "showTakenInList", False)),
            picks=picks,
            players=players,
        )
